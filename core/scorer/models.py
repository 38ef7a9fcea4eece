#!/usr/bin/env python3
"""
Scoring Models - Volunteer/event records and match result structures.

Records are immutable for the duration of a scoring call. Optional fields
are declared as such; the scoring functions apply the documented fallbacks
(no coordinates, unset distance preference, empty skill sets) explicitly.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Optional, Union

from core.scorer.vocabulary import EventStatus, Urgency
from core.utils import aligned_now

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class Location:
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    coordinates: Optional[Coordinates] = None


@dataclass(frozen=True)
class TimeSlots:
    """Morning/afternoon/evening availability flags for one part of the week."""
    morning: bool = False
    afternoon: bool = False
    evening: bool = False

    def is_open(self, slot: str) -> bool:
        return bool(getattr(self, slot, False))


@dataclass(frozen=True)
class Availability:
    """Weekday/weekend availability grid."""
    weekdays: TimeSlots = field(default_factory=TimeSlots)
    weekends: TimeSlots = field(default_factory=TimeSlots)


@dataclass(frozen=True)
class Preferences:
    max_distance_miles: Optional[float] = None
    event_types: FrozenSet[str] = frozenset()
    max_hours_per_week: Optional[float] = None


@dataclass(frozen=True)
class Volunteer:
    id: str
    name: str
    skills: FrozenSet[str] = frozenset()
    availability: Availability = field(default_factory=Availability)
    preferences: Preferences = field(default_factory=Preferences)
    location: Location = field(default_factory=Location)
    email: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class Event:
    id: str
    title: str
    event_type: str
    start_date: datetime
    max_volunteers: int
    current_volunteers: int = 0
    required_skills: FrozenSet[str] = frozenset()
    location: Location = field(default_factory=Location)
    status: str = EventStatus.UPCOMING.value
    end_date: Optional[datetime] = None
    description: Optional[str] = None

    def is_full(self) -> bool:
        return self.current_volunteers >= self.max_volunteers

    def is_open(self) -> bool:
        """Upcoming and still accepting registrations."""
        return self.status == EventStatus.UPCOMING.value and not self.is_full()

    def available_spots(self) -> int:
        # Not clamped: an over-filled event reports a negative count.
        return self.max_volunteers - self.current_volunteers

    def fill_ratio(self) -> float:
        if self.max_volunteers <= 0:
            return 1.0
        return self.current_volunteers / self.max_volunteers

    def days_until_event(self, now: Optional[datetime] = None) -> int:
        """Whole days until the start, rounded up (a start 2h away is 1 day)."""
        reference = aligned_now(self.start_date, now)
        delta = self.start_date - reference
        return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Unweighted factor values and the final rounded score."""
    skill: float
    availability: float
    distance: float
    preference: float
    total: float
    distance_miles: Optional[float] = None


@dataclass(frozen=True)
class MatchResult:
    """One ranked candidate; subject is an Event or a Volunteer."""
    subject: Union[Volunteer, Event]
    match_score: float
    distance_miles: Optional[float] = None
    breakdown: Optional[ScoreBreakdown] = None


@dataclass(frozen=True)
class UrgencyAlert:
    event: Event
    available_spots: int
    days_until_event: int
    urgency: Urgency


@dataclass(frozen=True)
class MatchingStats:
    total_volunteers: int
    total_events: int
    urgent_events: int
    pending_matches: int
