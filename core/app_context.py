from dataclasses import dataclass
from typing import Optional

from core.config_loader import AppConfig
from core.scorer import MatchScorer
from core.matcher import MatchFinder, UrgencyAnalyzer
from database.repository import RecordRepository


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    This eliminates duplicate wiring code between the CLI driver and the
    web application and provides a single source of truth for service
    instantiation.
    """
    config: AppConfig
    repository: RecordRepository
    scorer: MatchScorer
    finder: MatchFinder
    urgency: UrgencyAnalyzer

    @classmethod
    def build(
        cls,
        config: AppConfig,
        repository: Optional[RecordRepository] = None
    ) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            repository: Pre-built repository; loaded from config.data.records_file if omitted

        Returns:
            Fully wired AppContext instance
        """
        if repository is None:
            repository = RecordRepository.from_file(config.data.records_file)

        scorer = MatchScorer(config.matching.scorer)

        return cls(
            config=config,
            repository=repository,
            scorer=scorer,
            finder=MatchFinder(scorer=scorer, config=config.matching.finder),
            urgency=UrgencyAnalyzer(config.matching.urgency)
        )
