#!/usr/bin/env python3
"""
Test suite for UrgencyAnalyzer alerts and dashboard stats.

All alert tests pin `now` to Friday 2024-01-12 09:00 so the reference
Monday 09:00 event starts exactly three days later.
"""

import unittest
from datetime import datetime, timezone

from core.config_loader import UrgencyConfig
from core.matcher import UrgencyAnalyzer
from core.scorer.vocabulary import Urgency
from tests.fixtures.records import make_volunteer, make_event

NOW = datetime(2024, 1, 12, 9, 0)


class TestUnderstaffed(unittest.TestCase):
    """Test the under-staffed predicate."""

    def setUp(self):
        self.analyzer = UrgencyAnalyzer()

    def test_less_than_half_full(self):
        self.assertTrue(self.analyzer.is_understaffed(make_event(max_volunteers=10, current_volunteers=4)))

    def test_exactly_half_full_is_not_understaffed(self):
        self.assertFalse(self.analyzer.is_understaffed(make_event(max_volunteers=10, current_volunteers=5)))

    def test_zero_capacity_is_not_understaffed(self):
        event = make_event(max_volunteers=0, current_volunteers=0)

        self.assertEqual(event.fill_ratio(), 1.0)
        self.assertFalse(self.analyzer.is_understaffed(event))

    def test_fill_ratio(self):
        self.assertEqual(make_event(max_volunteers=8, current_volunteers=2).fill_ratio(), 0.25)

    def test_custom_fill_threshold(self):
        analyzer = UrgencyAnalyzer(UrgencyConfig(fill_threshold=0.8))

        self.assertTrue(analyzer.is_understaffed(make_event(max_volunteers=10, current_volunteers=7)))
        self.assertFalse(analyzer.is_understaffed(make_event(max_volunteers=10, current_volunteers=8)))

    def test_only_upcoming_events(self):
        for status in ("active", "completed", "cancelled"):
            with self.subTest(status=status):
                self.assertFalse(self.analyzer.is_understaffed(make_event(status=status)))

    def test_classification(self):
        self.assertEqual(self.analyzer.classify(0), Urgency.HIGH)
        self.assertEqual(self.analyzer.classify(3), Urgency.HIGH)
        self.assertEqual(self.analyzer.classify(4), Urgency.MEDIUM)
        self.assertEqual(self.analyzer.classify(7), Urgency.MEDIUM)


class TestUrgentAlerts(unittest.TestCase):
    """Test alert selection, classification and ordering."""

    def setUp(self):
        self.analyzer = UrgencyAnalyzer()

    def test_high_urgency_within_three_days(self):
        alerts = self.analyzer.find_urgent_alerts([make_event(current_volunteers=2)], now=NOW)

        self.assertEqual(len(alerts), 1)
        alert = alerts[0]
        self.assertEqual(alert.event.id, "evt-1")
        self.assertEqual(alert.available_spots, 8)
        self.assertEqual(alert.days_until_event, 3)
        self.assertEqual(alert.urgency, Urgency.HIGH)

    def test_medium_urgency_after_three_days(self):
        event = make_event(start_date=datetime(2024, 1, 17, 9, 0))

        alert = self.analyzer.find_urgent_alerts([event], now=NOW)[0]

        self.assertEqual(alert.days_until_event, 5)
        self.assertEqual(alert.urgency, Urgency.MEDIUM)

    def test_partial_days_round_up(self):
        event = make_event(start_date=datetime(2024, 1, 12, 11, 0))

        alert = self.analyzer.find_urgent_alerts([event], now=NOW)[0]

        self.assertEqual(alert.days_until_event, 1)

    def test_beyond_a_week_excluded(self):
        event = make_event(start_date=datetime(2024, 1, 22, 9, 0))
        self.assertEqual(self.analyzer.find_urgent_alerts([event], now=NOW), [])

    def test_seven_days_included(self):
        event = make_event(start_date=datetime(2024, 1, 19, 9, 0))

        alerts = self.analyzer.find_urgent_alerts([event], now=NOW)

        self.assertEqual([a.days_until_event for a in alerts], [7])

    def test_well_staffed_excluded(self):
        event = make_event(max_volunteers=10, current_volunteers=6)
        self.assertEqual(self.analyzer.find_urgent_alerts([event], now=NOW), [])

    def test_non_upcoming_excluded(self):
        event = make_event(status="cancelled")
        self.assertEqual(self.analyzer.find_urgent_alerts([event], now=NOW), [])

    def test_sorted_by_start_date(self):
        events = [
            make_event(id="later", start_date=datetime(2024, 1, 18, 9, 0)),
            make_event(id="soonest", start_date=datetime(2024, 1, 13, 9, 0)),
            make_event(id="middle", start_date=datetime(2024, 1, 15, 9, 0)),
        ]

        alerts = self.analyzer.find_urgent_alerts(events, now=NOW)

        self.assertEqual([a.event.id for a in alerts], ["soonest", "middle", "later"])
        self.assertEqual(
            [a.urgency for a in alerts],
            [Urgency.HIGH, Urgency.HIGH, Urgency.MEDIUM]
        )

    def test_started_events_still_alerted(self):
        event = make_event(start_date=datetime(2024, 1, 10, 9, 0))

        alert = self.analyzer.find_urgent_alerts([event], now=NOW)[0]

        self.assertEqual(alert.days_until_event, -2)
        self.assertEqual(alert.urgency, Urgency.HIGH)

    def test_aware_now_against_naive_start(self):
        aware_now = NOW.astimezone()

        alert = self.analyzer.find_urgent_alerts([make_event()], now=aware_now)[0]

        self.assertEqual(alert.days_until_event, 3)

    def test_mixed_naive_and_aware_starts(self):
        aware_start = datetime(2024, 1, 14, 9, 0, tzinfo=timezone.utc)
        events = [
            make_event(id="naive"),
            make_event(id="aware", start_date=aware_start),
        ]

        alerts = self.analyzer.find_urgent_alerts(events, now=NOW)

        # Sunday 09:00 UTC is before Monday 09:00 local in every zone
        self.assertEqual([a.event.id for a in alerts], ["aware", "naive"])
        self.assertEqual(alerts[0].days_until_event, events[1].days_until_event(NOW))

    def test_custom_horizon(self):
        analyzer = UrgencyAnalyzer(UrgencyConfig(horizon_days=2, high_urgency_days=1))

        alerts = analyzer.find_urgent_alerts([
            make_event(id="tomorrow", start_date=datetime(2024, 1, 13, 9, 0)),
            make_event(id="in-two", start_date=datetime(2024, 1, 14, 9, 0)),
            make_event(id="monday"),
        ], now=NOW)

        self.assertEqual([a.event.id for a in alerts], ["tomorrow", "in-two"])
        self.assertEqual([a.urgency for a in alerts], [Urgency.HIGH, Urgency.MEDIUM])


class TestMatchingStats(unittest.TestCase):
    """Test dashboard counts."""

    def test_counts(self):
        analyzer = UrgencyAnalyzer()
        volunteers = [
            make_volunteer(id="a"),
            make_volunteer(id="b"),
            make_volunteer(id="inactive", is_active=False),
        ]
        events = [
            make_event(id="understaffed", current_volunteers=1),
            make_event(id="staffed", current_volunteers=8),
            make_event(id="done", status="completed"),
        ]

        stats = analyzer.get_matching_stats(volunteers, events)

        self.assertEqual(stats.total_volunteers, 2)
        self.assertEqual(stats.total_events, 2)
        self.assertEqual(stats.urgent_events, 1)
        self.assertEqual(stats.pending_matches, stats.urgent_events)

    def test_empty(self):
        stats = UrgencyAnalyzer().get_matching_stats([], [])

        self.assertEqual(
            (stats.total_volunteers, stats.total_events, stats.urgent_events, stats.pending_matches),
            (0, 0, 0, 0)
        )


if __name__ == '__main__':
    unittest.main()
