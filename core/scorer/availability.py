#!/usr/bin/env python3
"""
Availability Resolution - Map an event start onto the volunteer's weekly grid.

The week is split into weekdays and weekends, each with three slots:
- morning:   hour < 12
- afternoon: 12 <= hour < 17
- evening:   hour >= 17

Slots are decided by the hour alone, so 12:00 is afternoon and 17:00 is
evening. The hour and weekday are read from server-local wall time.
"""

from datetime import datetime
from typing import Optional
import logging

from core.scorer.models import Availability
from core.utils import local_wall_time

logger = logging.getLogger(__name__)

MORNING = "morning"
AFTERNOON = "afternoon"
EVENING = "evening"

AFTERNOON_START_HOUR = 12
EVENING_START_HOUR = 17

# datetime.weekday(): Monday=0 ... Saturday=5, Sunday=6
WEEKEND_DAYS = (5, 6)


def resolve_time_slot(hour: int) -> str:
    if hour < AFTERNOON_START_HOUR:
        return MORNING
    if hour < EVENING_START_HOUR:
        return AFTERNOON
    return EVENING


def is_weekend(moment: datetime) -> bool:
    return local_wall_time(moment).weekday() in WEEKEND_DAYS


def check_availability(availability: Optional[Availability], event_start: datetime) -> bool:
    """Whether the volunteer marked the event's weekday/weekend slot as available."""
    if availability is None:
        return False

    wall_time = local_wall_time(event_start)
    weekend = wall_time.weekday() in WEEKEND_DAYS
    slot = resolve_time_slot(wall_time.hour)

    slots = availability.weekends if weekend else availability.weekdays
    if slots is None:
        return False

    available = slots.is_open(slot)
    logger.debug(
        f"Availability for {'weekend' if weekend else 'weekday'} {slot} "
        f"({wall_time.isoformat()}): {available}"
    )
    return available
