import yaml
import os
import logging
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)

WEIGHT_SUM_TOLERANCE = 1e-9


class ScoreWeights(BaseModel):
    """
    Weights of the four match factors.

    match_score = skill * S + availability * A + distance * D + preference * P

    The weights must sum to 1.0 so the score stays within [0, 1].
    """
    skill: float = Field(default=0.4, ge=0)
    availability: float = Field(default=0.3, ge=0)
    distance: float = Field(default=0.2, ge=0)
    preference: float = Field(default=0.1, ge=0)

    @model_validator(mode="after")
    def _check_sum(self) -> "ScoreWeights":
        total = self.skill + self.availability + self.distance + self.preference
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"score weights must sum to 1.0, got {total:.4f}")
        return self


class ScorerConfig(BaseModel):
    """
    Configuration for the MatchScorer.
    """
    weights: ScoreWeights = Field(default_factory=ScoreWeights)

    # Used when the volunteer has no (or a non-positive) distance preference
    default_max_distance_miles: float = Field(default=10.0, gt=0)

    # Distance factor when either party has no coordinates
    missing_coordinates_score: float = Field(default=0.5, ge=0, le=1)


class FinderConfig(BaseModel):
    """
    Configuration for the MatchFinder (ranking and truncation).
    """
    min_match_score: float = Field(default=0.3, ge=0, le=1)  # strictly greater-than gate
    default_event_limit: int = Field(default=10, ge=0)
    default_volunteer_limit: int = Field(default=20, ge=0)


class UrgencyConfig(BaseModel):
    """
    Configuration for urgency alerts on under-staffed events.
    """
    fill_threshold: float = Field(default=0.5, ge=0, le=1)  # under this share filled
    horizon_days: int = Field(default=7, ge=0)
    high_urgency_days: int = Field(default=3, ge=0)


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    finder: FinderConfig = Field(default_factory=FinderConfig)
    urgency: UrgencyConfig = Field(default_factory=UrgencyConfig)


class DataConfig(BaseModel):
    # YAML file with `volunteers:` and `events:` lists
    records_file: str = "data/records.yaml"


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    # Allow env var override for the records file
    env_records = os.environ.get("VOLUNTEER_MATCH_RECORDS")
    if env_records:
        data.setdefault('data', {})
        data['data']['records_file'] = env_records

    # Allow env var override for the web server
    env_host = os.environ.get("WEB_HOST")
    if env_host:
        data.setdefault('web', {})
        data['web']['host'] = env_host

    env_port = os.environ.get("WEB_PORT")
    if env_port:
        data.setdefault('web', {})
        data['web']['port'] = int(env_port)

    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        data.setdefault('logging', {})
        data['logging']['level'] = env_log_level.upper()

    return data


def load_config(config_path: Optional[str] = "config.yaml") -> AppConfig:
    data: Dict[str, Any] = {}

    if config_path and not os.path.exists(config_path):
        # Fall back to the project root when running from another directory
        base_dir = os.path.dirname(os.path.abspath(__file__))
        fallback = os.path.join(base_dir, "..", os.path.basename(config_path))
        if os.path.exists(fallback):
            config_path = fallback

    if config_path and os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.warning(f"Config file {config_path} not found, using defaults")

    data = _apply_env_overrides(data)

    return AppConfig(**data)
