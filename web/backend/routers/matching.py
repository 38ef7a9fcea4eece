#!/usr/bin/env python3
"""
Matching endpoints - ranked matches, urgency alerts and statistics.
"""

import logging
from fastapi import APIRouter, Depends, Query

from ..dependencies import get_matching_service
from ..services.matching_service import MatchingService
from ..models.requests import CalculateScoreRequest
from ..models.responses import (
    EventMatchesResponse,
    VolunteerMatchesResponse,
    AlertsResponse,
    StatsResponse,
    CalculateScoreResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matching", tags=["matching"])


@router.get("/events/{volunteer_id}", response_model=EventMatchesResponse)
def get_matching_events(
    volunteer_id: str,
    limit: int = Query(default=10, ge=1, le=100, description="Maximum events to return"),
    service: MatchingService = Depends(get_matching_service)
):
    """
    Get open upcoming events ranked for a volunteer.

    Events scoring 0.3 or lower are left out.
    """
    return service.get_matching_events(volunteer_id, limit)


@router.get("/volunteers/{event_id}", response_model=VolunteerMatchesResponse)
def get_matching_volunteers(
    event_id: str,
    limit: int = Query(default=20, ge=1, le=100, description="Maximum volunteers to return"),
    service: MatchingService = Depends(get_matching_service)
):
    """
    Get active volunteers ranked for an event.
    """
    return service.get_matching_volunteers(event_id, limit)


@router.get("/alerts", response_model=AlertsResponse)
def get_urgent_alerts(service: MatchingService = Depends(get_matching_service)):
    """
    Get under-staffed events starting within a week, soonest first.
    """
    return service.get_urgent_alerts()


@router.get("/stats", response_model=StatsResponse)
def get_stats(service: MatchingService = Depends(get_matching_service)):
    """
    Get volunteer, event and urgency counts for the dashboard.
    """
    return service.get_stats()


@router.post("/calculate-score", response_model=CalculateScoreResponse)
def calculate_score(
    request: CalculateScoreRequest,
    service: MatchingService = Depends(get_matching_service)
):
    """
    Score one volunteer against one event, with the factor breakdown.
    """
    return service.calculate_score(request.volunteer_id, request.event_id)
