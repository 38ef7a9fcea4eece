#!/usr/bin/env python3
"""
Match Scorer - Weighted multi-factor score for a volunteer/event pair.

Factors (each in [0, 1]) and default weights:
- Skill match (0.4): fraction of required skills the volunteer covers
- Availability (0.3): 1 if the event's weekday/weekend slot is open, else 0
- Distance (0.2): 1 - miles / max distance, floored at 0; 0.5 without coordinates
- Preference (0.1): 1 if the event type is one the volunteer prefers, else 0

The final score is the weighted sum rounded half-up to 2 decimals.
Missing sub-fields degrade to the fallbacks above and never raise.
"""

from typing import Optional
import logging

from core.config_loader import ScorerConfig
from core.scorer.models import Volunteer, Event, ScoreBreakdown
from core.scorer.geo import distance_between
from core.scorer.skills import calculate_skill_match
from core.scorer.availability import check_availability
from core.utils import round_half_up, clamp01

logger = logging.getLogger(__name__)


class MatchScorer:
    """
    Scores how well a volunteer fits an event.

    Stateless apart from its configuration; safe to share between callers.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def max_distance_for(self, volunteer: Volunteer) -> float:
        preferred = volunteer.preferences.max_distance_miles if volunteer.preferences else None
        if preferred is None or preferred <= 0:
            return self.config.default_max_distance_miles
        return float(preferred)

    def distance_score(self, distance_miles: Optional[float], max_distance_miles: float) -> float:
        if distance_miles is None:
            return self.config.missing_coordinates_score
        return max(0.0, 1.0 - distance_miles / max_distance_miles)

    @staticmethod
    def preference_score(volunteer: Volunteer, event: Event) -> float:
        event_types = volunteer.preferences.event_types if volunteer.preferences else None
        if not event_types or not event.event_type:
            return 0.0
        return 1.0 if event.event_type in event_types else 0.0

    def score_components(self, volunteer: Volunteer, event: Event) -> ScoreBreakdown:
        """Calculate every factor and the weighted, rounded total.

        Args:
            volunteer: Volunteer being considered
            event: Event being considered

        Returns:
            ScoreBreakdown with unweighted factors, total and raw distance
        """
        weights = self.config.weights

        skill = calculate_skill_match(volunteer.skills, event.required_skills)
        availability = 1.0 if check_availability(volunteer.availability, event.start_date) else 0.0

        distance_miles = distance_between(
            volunteer.location.coordinates if volunteer.location else None,
            event.location.coordinates if event.location else None,
        )
        distance = self.distance_score(distance_miles, self.max_distance_for(volunteer))

        preference = self.preference_score(volunteer, event)

        raw = (
            skill * weights.skill +
            availability * weights.availability +
            distance * weights.distance +
            preference * weights.preference
        )
        total = clamp01(round_half_up(raw, 2))

        logger.debug(
            f"Volunteer {volunteer.id} / event {event.id}: skill={skill:.2f}, "
            f"availability={availability:.0f}, distance={distance:.2f}, "
            f"preference={preference:.0f}, total={total:.2f}"
        )

        return ScoreBreakdown(
            skill=skill,
            availability=availability,
            distance=distance,
            preference=preference,
            total=total,
            distance_miles=distance_miles,
        )

    def score(self, volunteer: Volunteer, event: Event) -> float:
        return self.score_components(volunteer, event).total
