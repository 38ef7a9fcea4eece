#!/usr/bin/env python3
"""
Response models for API endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional, Dict, Any


class CamelModel(BaseModel):
    """Base model that serializes with camelCase aliases."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreBreakdownPayload(CamelModel):
    """Unweighted factor values behind a match score."""
    skill: float = Field(ge=0, le=1)
    availability: float = Field(ge=0, le=1)
    distance: float = Field(ge=0, le=1)
    preference: float = Field(ge=0, le=1)


class EventMatch(CamelModel):
    """An event ranked for a volunteer."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "event": {"id": "evt-1", "title": "Community Garden Cleanup"},
                "matchScore": 0.9,
                "distance": 1.25
            }
        }
    )

    event: Dict[str, Any]
    match_score: float = Field(ge=0, le=1)
    distance: Optional[float] = None


class VolunteerMatch(CamelModel):
    """A volunteer ranked for an event."""
    volunteer: Dict[str, Any]
    match_score: float = Field(ge=0, le=1)
    distance: Optional[float] = None


class EventMatchesResponse(CamelModel):
    success: bool
    count: int
    data: List[EventMatch]


class VolunteerMatchesResponse(CamelModel):
    success: bool
    count: int
    data: List[VolunteerMatch]


class UrgencyAlertPayload(CamelModel):
    """An under-staffed event starting soon."""
    event: Dict[str, Any]
    available_spots: int
    days_until_event: int
    urgency: str  # "medium" or "high"


class AlertsResponse(CamelModel):
    success: bool
    count: int
    data: List[UrgencyAlertPayload]


class MatchingStatsPayload(CamelModel):
    total_volunteers: int = Field(ge=0)
    total_events: int = Field(ge=0)
    urgent_events: int = Field(ge=0)
    pending_matches: int = Field(ge=0)


class StatsResponse(CamelModel):
    success: bool
    data: MatchingStatsPayload


class VolunteerBrief(CamelModel):
    id: str
    name: str
    skills: List[str]


class EventBrief(CamelModel):
    id: str
    title: str
    required_skills: List[str]


class CalculatedScore(CamelModel):
    match_score: float = Field(ge=0, le=1)
    distance: Optional[float] = None
    breakdown: ScoreBreakdownPayload
    volunteer: VolunteerBrief
    event: EventBrief


class CalculateScoreResponse(CamelModel):
    success: bool
    data: CalculatedScore
