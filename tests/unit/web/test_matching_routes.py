#!/usr/bin/env python3
"""
Unit tests for the matching endpoints under /api/matching.

The app is assembled from the matching router and the exception handlers,
with the service dependency pointed at an in-memory repository.
"""

import unittest
from datetime import datetime, timedelta

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from core.app_context import AppContext
from core.config_loader import AppConfig
from core.exceptions import SubjectNotFoundError
from core.scorer.models import Location
from database.repository import RecordRepository
from web.backend.dependencies import get_matching_service
from web.backend.exceptions import (
    ServiceException,
    service_exception_handler,
    subject_not_found_handler,
    http_exception_handler,
    general_exception_handler
)
from web.backend.routers import matching_router
from web.backend.services.matching_service import MatchingService
from tests.fixtures.records import make_volunteer, make_event, LOS_ANGELES


def build_repository() -> RecordRepository:
    soon = (datetime.now() + timedelta(days=2)).replace(microsecond=0)
    return RecordRepository(
        volunteers=[
            make_volunteer(id="vol-1"),
            make_volunteer(id="vol-far", location=Location(coordinates=LOS_ANGELES)),
            make_volunteer(id="vol-inactive", is_active=False),
        ],
        events=[
            make_event(id="evt-1", current_volunteers=5),
            make_event(id="evt-2", event_type="education", current_volunteers=6),
            make_event(id="evt-full", max_volunteers=2, current_volunteers=2),
            make_event(
                id="evt-soon",
                title="Blood Drive",
                event_type="healthcare",
                start_date=soon,
                required_skills=frozenset({"medical"}),
                current_volunteers=1,
                location=Location(city="Los Angeles", coordinates=LOS_ANGELES),
            ),
            make_event(id="evt-done", status="completed"),
        ],
    )


@pytest.mark.web
class TestMatchingRoutes(unittest.TestCase):

    def setUp(self):
        context = AppContext.build(AppConfig(), repository=build_repository())

        self.app = FastAPI()
        self.app.add_exception_handler(ServiceException, service_exception_handler)
        self.app.add_exception_handler(SubjectNotFoundError, subject_not_found_handler)
        self.app.add_exception_handler(HTTPException, http_exception_handler)
        self.app.add_exception_handler(Exception, general_exception_handler)
        self.app.include_router(matching_router)
        self.app.dependency_overrides[get_matching_service] = lambda: MatchingService(context)

        self.client = TestClient(self.app, raise_server_exceptions=False)

    def test_matching_events_ranked(self):
        response = self.client.get("/api/matching/events/vol-1")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["count"], 2)
        self.assertEqual([m["event"]["id"] for m in body["data"]], ["evt-1", "evt-2"])
        self.assertEqual([m["matchScore"] for m in body["data"]], [1.0, 0.9])
        self.assertEqual(body["data"][0]["distance"], 0.0)
        self.assertEqual(body["data"][0]["event"]["eventType"], "environmental")
        self.assertEqual(body["data"][0]["event"]["startDate"], "2024-01-15T09:00:00")

    def test_matching_events_limit(self):
        response = self.client.get("/api/matching/events/vol-1", params={"limit": 1})

        body = response.json()
        self.assertEqual(body["count"], 1)
        self.assertEqual(body["data"][0]["event"]["id"], "evt-1")

    def test_matching_events_limit_out_of_range(self):
        response = self.client.get("/api/matching/events/vol-1", params={"limit": 0})
        self.assertEqual(response.status_code, 422)

    def test_matching_events_unknown_volunteer(self):
        response = self.client.get("/api/matching/events/nobody")

        self.assertEqual(response.status_code, 404)
        body = response.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["type"], "VolunteerNotFoundException")

    def test_matching_volunteers_ranked(self):
        response = self.client.get("/api/matching/volunteers/evt-1")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([m["volunteer"]["id"] for m in body["data"]], ["vol-1", "vol-far"])
        self.assertEqual([m["matchScore"] for m in body["data"]], [1.0, 0.8])
        self.assertTrue(body["data"][0]["volunteer"]["isActive"])

    def test_matching_volunteers_unknown_event(self):
        response = self.client.get("/api/matching/volunteers/nothing")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "EventNotFoundException")

    def test_alerts(self):
        response = self.client.get("/api/matching/alerts")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 1)
        alert = body["data"][0]
        self.assertEqual(alert["event"]["id"], "evt-soon")
        self.assertEqual(alert["availableSpots"], 9)
        self.assertEqual(alert["daysUntilEvent"], 2)
        self.assertEqual(alert["urgency"], "high")

    def test_stats(self):
        response = self.client.get("/api/matching/stats")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"], {
            "totalVolunteers": 2,
            "totalEvents": 4,
            "urgentEvents": 1,
            "pendingMatches": 1,
        })

    def test_calculate_score(self):
        response = self.client.post(
            "/api/matching/calculate-score",
            json={"volunteerId": "vol-far", "eventId": "evt-1"}
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["matchScore"], 0.8)
        self.assertGreater(data["distance"], 2000)
        self.assertEqual(data["breakdown"], {
            "skill": 1.0,
            "availability": 1.0,
            "distance": 0.0,
            "preference": 1.0,
        })
        self.assertEqual(data["volunteer"]["skills"], ["gardening"])
        self.assertEqual(data["event"]["requiredSkills"], ["gardening"])

    def test_calculate_score_unknown_event(self):
        response = self.client.post(
            "/api/matching/calculate-score",
            json={"volunteerId": "vol-1", "eventId": "missing"}
        )
        self.assertEqual(response.status_code, 404)

    def test_unexpected_service_error_is_500(self):
        class FailingService:
            def get_stats(self):
                raise ServiceException("records unavailable")

        self.app.dependency_overrides[get_matching_service] = lambda: FailingService()

        response = self.client.get("/api/matching/stats")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {
            "success": False,
            "error": "records unavailable",
            "type": "ServiceException",
        })

    def test_calculate_score_missing_field(self):
        response = self.client.post("/api/matching/calculate-score", json={"volunteerId": "vol-1"})
        self.assertEqual(response.status_code, 422)


if __name__ == '__main__':
    unittest.main()
