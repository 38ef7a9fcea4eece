#!/usr/bin/env python3
"""
Match Finder - Rank candidate events for a volunteer, or volunteers for an event.

Every candidate is scored with the MatchScorer. Weak matches (score at or
below the configured threshold) are dropped, the rest are sorted by score,
highest first, and truncated to the requested limit. Equal scores keep the
candidate pool's original order.

The finder does not filter the candidate pool itself; callers pass the open
upcoming events or the active volunteers.
"""
from typing import List, Optional, Sequence, Callable, TypeVar
import logging

from core.config_loader import FinderConfig
from core.exceptions import VolunteerNotFoundError, EventNotFoundError
from core.scorer import MatchScorer, MatchResult, Volunteer, Event, ScoreBreakdown

logger = logging.getLogger(__name__)

Candidate = TypeVar("Candidate", Volunteer, Event)


class MatchFinder:
    """
    Ranks candidates for a single subject using a shared MatchScorer.
    """

    def __init__(
        self,
        scorer: Optional[MatchScorer] = None,
        config: Optional[FinderConfig] = None
    ):
        """
        Initialize the finder.

        Args:
            scorer: MatchScorer used for every pair (default configuration if omitted)
            config: FinderConfig with threshold and default limits
        """
        self.scorer = scorer or MatchScorer()
        self.config = config or FinderConfig()

    def find_matching_events(
        self,
        volunteer: Optional[Volunteer],
        candidate_events: Sequence[Event],
        limit: Optional[int] = None
    ) -> List[MatchResult]:
        """
        Rank events for a volunteer.

        Args:
            volunteer: The volunteer to match; None raises VolunteerNotFoundError
            candidate_events: Events to consider
            limit: Maximum results (configured default when None)

        Returns:
            MatchResults whose subject is the Event, best first
        """
        if volunteer is None:
            raise VolunteerNotFoundError()

        effective_limit = self._effective_limit(limit, self.config.default_event_limit)
        results = self._rank(
            candidate_events,
            lambda event: self.scorer.score_components(volunteer, event),
            effective_limit
        )

        logger.info(
            f"Volunteer {volunteer.id}: {len(results)} matching events "
            f"out of {len(candidate_events)} candidates"
        )
        return results

    def find_matching_volunteers(
        self,
        event: Optional[Event],
        candidate_volunteers: Sequence[Volunteer],
        limit: Optional[int] = None
    ) -> List[MatchResult]:
        """
        Rank volunteers for an event.

        Args:
            event: The event to staff; None raises EventNotFoundError
            candidate_volunteers: Volunteers to consider
            limit: Maximum results (configured default when None)

        Returns:
            MatchResults whose subject is the Volunteer, best first
        """
        if event is None:
            raise EventNotFoundError()

        effective_limit = self._effective_limit(limit, self.config.default_volunteer_limit)
        results = self._rank(
            candidate_volunteers,
            lambda volunteer: self.scorer.score_components(volunteer, event),
            effective_limit
        )

        logger.info(
            f"Event {event.id}: {len(results)} matching volunteers "
            f"out of {len(candidate_volunteers)} candidates"
        )
        return results

    @staticmethod
    def _effective_limit(limit: Optional[int], default: int) -> int:
        if limit is None:
            return default
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        return limit

    def _rank(
        self,
        candidates: Sequence[Candidate],
        score_fn: Callable[[Candidate], ScoreBreakdown],
        limit: int
    ) -> List[MatchResult]:
        scored = []
        for candidate in candidates:
            breakdown = score_fn(candidate)
            if breakdown.total <= self.config.min_match_score:
                continue
            scored.append(MatchResult(
                subject=candidate,
                match_score=breakdown.total,
                distance_miles=breakdown.distance_miles,
                breakdown=breakdown
            ))

        # list.sort is stable, including with reverse=True
        scored.sort(key=lambda r: r.match_score, reverse=True)
        return scored[:limit]
