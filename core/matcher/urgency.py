#!/usr/bin/env python3
"""
Urgency Analyzer - Flag under-staffed events that start soon.

An event is under-staffed when it is upcoming and less than half full.
It becomes an alert when it starts within a week and still has open spots;
alerts starting within three days are high urgency, the rest medium.
"""

from datetime import datetime
from typing import List, Optional, Sequence
import logging

from core.config_loader import UrgencyConfig
from core.scorer import Event, Volunteer, UrgencyAlert, MatchingStats
from core.scorer.vocabulary import EventStatus, Urgency
from core.utils import naive_local

logger = logging.getLogger(__name__)


class UrgencyAnalyzer:
    """Builds urgency alerts and dashboard counts from in-memory records."""

    def __init__(self, config: Optional[UrgencyConfig] = None):
        self.config = config or UrgencyConfig()

    def is_understaffed(self, event: Event) -> bool:
        return (
            event.status == EventStatus.UPCOMING.value
            and event.fill_ratio() < self.config.fill_threshold
        )

    def classify(self, days_until_event: int) -> Urgency:
        if days_until_event <= self.config.high_urgency_days:
            return Urgency.HIGH
        return Urgency.MEDIUM

    def find_urgent_alerts(
        self,
        candidate_events: Sequence[Event],
        now: Optional[datetime] = None
    ) -> List[UrgencyAlert]:
        """
        Find under-staffed events starting within the alert horizon.

        Args:
            candidate_events: Events to scan (any status)
            now: Reference time, defaults to the current time

        Returns:
            UrgencyAlerts sorted by start date, soonest first
        """
        understaffed = sorted(
            (e for e in candidate_events if self.is_understaffed(e)),
            key=lambda e: naive_local(e.start_date)
        )

        alerts = []
        for event in understaffed:
            available_spots = event.available_spots()
            days_until_event = event.days_until_event(now)

            if days_until_event > self.config.horizon_days or available_spots <= 0:
                continue

            alerts.append(UrgencyAlert(
                event=event,
                available_spots=available_spots,
                days_until_event=days_until_event,
                urgency=self.classify(days_until_event)
            ))

        logger.info(f"Found {len(alerts)} urgent alerts among {len(candidate_events)} events")
        return alerts

    def get_matching_stats(
        self,
        volunteers: Sequence[Volunteer],
        events: Sequence[Event]
    ) -> MatchingStats:
        total_volunteers = sum(1 for v in volunteers if v.is_active)
        total_events = sum(1 for e in events if e.status == EventStatus.UPCOMING.value)
        urgent_events = sum(1 for e in events if self.is_understaffed(e))

        # TODO: pending_matches mirrors urgent_events until product defines
        # what a pending match is.
        return MatchingStats(
            total_volunteers=total_volunteers,
            total_events=total_events,
            urgent_events=urgent_events,
            pending_matches=urgent_events
        )
