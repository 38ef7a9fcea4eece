#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Optional, Any, Dict, List, Iterable
from datetime import datetime

from core.scorer.models import Volunteer, Event, Location


def safe_round(value: Optional[float], places: int = 2) -> Optional[float]:
    """
    Round a float for display, passing None through.

    Args:
        value: Value to round.
        places: Decimal places.

    Returns:
        Rounded value or None.
    """
    if value is None:
        return None
    return round(float(value), places)


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()


def sorted_tags(tags: Iterable[str]) -> List[str]:
    return sorted(tags or ())


def location_payload(location: Optional[Location]) -> Dict[str, Any]:
    if location is None:
        return {}
    coordinates = None
    if location.coordinates is not None:
        coordinates = {"lat": location.coordinates.lat, "lng": location.coordinates.lng}
    return {
        "address": location.address,
        "city": location.city,
        "state": location.state,
        "zipCode": location.zip_code,
        "coordinates": coordinates,
    }


def volunteer_payload(volunteer: Volunteer) -> Dict[str, Any]:
    """Serialize a volunteer with the application's camelCase field names."""
    availability = volunteer.availability
    return {
        "id": volunteer.id,
        "name": volunteer.name,
        "email": volunteer.email,
        "skills": sorted_tags(volunteer.skills),
        "availability": {
            "weekdays": {
                "morning": availability.weekdays.morning,
                "afternoon": availability.weekdays.afternoon,
                "evening": availability.weekdays.evening,
            },
            "weekends": {
                "morning": availability.weekends.morning,
                "afternoon": availability.weekends.afternoon,
                "evening": availability.weekends.evening,
            },
        },
        "preferences": {
            "maxDistance": volunteer.preferences.max_distance_miles,
            "eventTypes": sorted_tags(volunteer.preferences.event_types),
            "maxHoursPerWeek": volunteer.preferences.max_hours_per_week,
        },
        "location": location_payload(volunteer.location),
        "isActive": volunteer.is_active,
    }


def event_payload(event: Event) -> Dict[str, Any]:
    """Serialize an event with the application's camelCase field names."""
    return {
        "id": event.id,
        "title": event.title,
        "description": event.description,
        "eventType": event.event_type,
        "requiredSkills": sorted_tags(event.required_skills),
        "location": location_payload(event.location),
        "startDate": safe_datetime_iso(event.start_date),
        "endDate": safe_datetime_iso(event.end_date),
        "maxVolunteers": event.max_volunteers,
        "currentVolunteers": event.current_volunteers,
        "status": event.status,
    }
