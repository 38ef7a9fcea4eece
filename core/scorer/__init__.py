#!/usr/bin/env python3
"""
Scoring Module - Volunteer/event match scoring.

Public API:
- MatchScorer: Weighted multi-factor scorer
- Volunteer, Event: Record types consumed by the scorer
- MatchResult, UrgencyAlert, MatchingStats: Result types

The scoring module is split into focused, single-responsibility modules:

- models.py: Records and result dataclasses
- vocabulary.py: Skill/category/status/urgency vocabularies
- geo.py: Haversine distance
- skills.py: Skill coverage
- availability.py: Weekday/weekend time-slot resolution
- service.py: MatchScorer orchestrator
"""

from core.scorer.models import (
    Coordinates, Location, TimeSlots, Availability, Preferences,
    Volunteer, Event, ScoreBreakdown, MatchResult, UrgencyAlert, MatchingStats
)
from core.scorer.service import MatchScorer

__all__ = [
    'MatchScorer',
    'Coordinates', 'Location', 'TimeSlots', 'Availability', 'Preferences',
    'Volunteer', 'Event', 'ScoreBreakdown', 'MatchResult', 'UrgencyAlert', 'MatchingStats'
]
