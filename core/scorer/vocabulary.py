#!/usr/bin/env python3
"""
Closed vocabularies for skills, event categories, event status and urgency.
"""

from enum import Enum
from typing import FrozenSet


class SkillTag(str, Enum):
    GARDENING = "gardening"
    COOKING = "cooking"
    TEACHING = "teaching"
    CONSTRUCTION = "construction"
    MEDICAL = "medical"
    TECHNOLOGY = "technology"
    ART = "art"
    MUSIC = "music"
    SPORTS = "sports"
    LANGUAGE = "language"
    DRIVING = "driving"
    CUSTOMER_SERVICE = "customer_service"
    EVENT_PLANNING = "event_planning"
    FUNDRAISING = "fundraising"
    MENTORING = "mentoring"


class CategoryTag(str, Enum):
    ENVIRONMENTAL = "environmental"
    EDUCATION = "education"
    HEALTHCARE = "healthcare"
    COMMUNITY = "community"
    ANIMALS = "animals"
    SENIORS = "seniors"
    CHILDREN = "children"


class EventStatus(str, Enum):
    UPCOMING = "upcoming"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Urgency(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"


SKILL_TAGS: FrozenSet[str] = frozenset(tag.value for tag in SkillTag)
CATEGORY_TAGS: FrozenSet[str] = frozenset(tag.value for tag in CategoryTag)
EVENT_STATUSES: FrozenSet[str] = frozenset(status.value for status in EventStatus)
