#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field


class CalculateScoreRequest(BaseModel):
    """Request to score one volunteer against one event."""
    model_config = ConfigDict(populate_by_name=True)

    volunteer_id: str = Field(..., min_length=1, alias="volunteerId", description="Volunteer ID")
    event_id: str = Field(..., min_length=1, alias="eventId", description="Event ID")
