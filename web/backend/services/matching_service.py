#!/usr/bin/env python3
"""
Matching service - loads records and runs the matching core per request.
"""

import logging
from typing import Optional

from core.app_context import AppContext
from core.scorer.models import Volunteer, Event
from ..models.responses import (
    EventMatch,
    EventMatchesResponse,
    VolunteerMatch,
    VolunteerMatchesResponse,
    UrgencyAlertPayload,
    AlertsResponse,
    MatchingStatsPayload,
    StatsResponse,
    ScoreBreakdownPayload,
    VolunteerBrief,
    EventBrief,
    CalculatedScore,
    CalculateScoreResponse
)
from ..utils import safe_round, sorted_tags, volunteer_payload, event_payload
from ..exceptions import VolunteerNotFoundException, EventNotFoundException

logger = logging.getLogger(__name__)


class MatchingService:
    """Service for volunteer/event matching operations."""

    def __init__(self, context: AppContext):
        self.context = context
        self.repo = context.repository

    def _get_volunteer(self, volunteer_id: str) -> Volunteer:
        volunteer = self.repo.get_volunteer(volunteer_id)
        if volunteer is None:
            raise VolunteerNotFoundException(f"Volunteer {volunteer_id} not found")
        return volunteer

    def _get_event(self, event_id: str) -> Event:
        event = self.repo.get_event(event_id)
        if event is None:
            raise EventNotFoundException(f"Event {event_id} not found")
        return event

    def get_matching_events(
        self,
        volunteer_id: str,
        limit: Optional[int] = None
    ) -> EventMatchesResponse:
        """
        Rank open upcoming events for a volunteer.

        Args:
            volunteer_id: The volunteer ID.
            limit: Maximum number of events to return.

        Returns:
            Ranked events with match score and distance.

        Raises:
            VolunteerNotFoundException: If the volunteer is not found.
        """
        volunteer = self._get_volunteer(volunteer_id)
        results = self.context.finder.find_matching_events(
            volunteer,
            self.repo.open_events(),
            limit
        )

        matches = [
            EventMatch(
                event=event_payload(r.subject),
                match_score=r.match_score,
                distance=safe_round(r.distance_miles)
            )
            for r in results
        ]
        return EventMatchesResponse(success=True, count=len(matches), data=matches)

    def get_matching_volunteers(
        self,
        event_id: str,
        limit: Optional[int] = None
    ) -> VolunteerMatchesResponse:
        """
        Rank active volunteers for an event.

        Raises:
            EventNotFoundException: If the event is not found.
        """
        event = self._get_event(event_id)
        results = self.context.finder.find_matching_volunteers(
            event,
            self.repo.active_volunteers(),
            limit
        )

        matches = [
            VolunteerMatch(
                volunteer=volunteer_payload(r.subject),
                match_score=r.match_score,
                distance=safe_round(r.distance_miles)
            )
            for r in results
        ]
        return VolunteerMatchesResponse(success=True, count=len(matches), data=matches)

    def get_urgent_alerts(self) -> AlertsResponse:
        alerts = self.context.urgency.find_urgent_alerts(self.repo.upcoming_events())

        data = [
            UrgencyAlertPayload(
                event=event_payload(alert.event),
                available_spots=alert.available_spots,
                days_until_event=alert.days_until_event,
                urgency=alert.urgency.value
            )
            for alert in alerts
        ]
        return AlertsResponse(success=True, count=len(data), data=data)

    def get_stats(self) -> StatsResponse:
        stats = self.context.urgency.get_matching_stats(
            self.repo.all_volunteers(),
            self.repo.all_events()
        )
        return StatsResponse(
            success=True,
            data=MatchingStatsPayload(
                total_volunteers=stats.total_volunteers,
                total_events=stats.total_events,
                urgent_events=stats.urgent_events,
                pending_matches=stats.pending_matches
            )
        )

    def calculate_score(self, volunteer_id: str, event_id: str) -> CalculateScoreResponse:
        """
        Score a single volunteer/event pair.

        Raises:
            VolunteerNotFoundException: If the volunteer is not found.
            EventNotFoundException: If the event is not found.
        """
        volunteer = self._get_volunteer(volunteer_id)
        event = self._get_event(event_id)

        breakdown = self.context.scorer.score_components(volunteer, event)
        logger.info(f"Score for volunteer {volunteer.id} / event {event.id}: {breakdown.total}")

        return CalculateScoreResponse(
            success=True,
            data=CalculatedScore(
                match_score=breakdown.total,
                distance=safe_round(breakdown.distance_miles),
                breakdown=ScoreBreakdownPayload(
                    skill=breakdown.skill,
                    availability=breakdown.availability,
                    distance=breakdown.distance,
                    preference=breakdown.preference
                ),
                volunteer=VolunteerBrief(
                    id=volunteer.id,
                    name=volunteer.name,
                    skills=sorted_tags(volunteer.skills)
                ),
                event=EventBrief(
                    id=event.id,
                    title=event.title,
                    required_skills=sorted_tags(event.required_skills)
                )
            )
        )
