#!/usr/bin/env python3
"""
Record loading - Parse volunteer and event records into core dataclasses.

Accepts the camelCase field names used by the volunteer application's API
(`requiredSkills`, `startDate`, `maxVolunteers`, ...) as well as their
snake_case equivalents. Skill, category and status values are validated
against the closed vocabularies here, so the scoring core can trust them.
"""

import logging
from datetime import datetime, date
from typing import Any, Dict, FrozenSet, Iterable, Optional

import yaml
from dateutil import parser as date_parser

from core.exceptions import InvalidRecordError
from core.scorer.models import (
    Coordinates, Location, TimeSlots, Availability, Preferences, Volunteer, Event
)
from core.scorer.vocabulary import SKILL_TAGS, CATEGORY_TAGS, EVENT_STATUSES, EventStatus
from core.utils import naive_local

logger = logging.getLogger(__name__)

_MISSING = object()


def _get(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in `data` (camelCase or snake_case)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _require(data: Dict[str, Any], kind: str, record_id: Any, *keys: str) -> Any:
    value = _get(data, *keys, default=_MISSING)
    if value is _MISSING:
        raise InvalidRecordError(kind, record_id, keys[0], "required field is missing")
    return value


def _tags(
    values: Optional[Iterable[Any]],
    vocabulary: FrozenSet[str],
    kind: str,
    record_id: Any,
    field: str
) -> FrozenSet[str]:
    if values is None:
        return frozenset()
    if isinstance(values, str):
        values = [values]

    tags = set()
    for value in values:
        tag = str(value).strip().lower()
        if tag not in vocabulary:
            raise InvalidRecordError(kind, record_id, field, f"unknown value {value!r}")
        tags.add(tag)
    return frozenset(tags)


def parse_timestamp(value: Any) -> datetime:
    """
    Parse a timestamp into a naive server-local datetime.

    Aware values are converted to local wall time so every record in a
    pool compares cleanly against every other.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    else:
        moment = date_parser.isoparse(str(value))

    if moment.tzinfo is not None:
        moment = naive_local(moment)
    return moment


def _coordinates(data: Optional[Dict[str, Any]]) -> Optional[Coordinates]:
    if not data:
        return None
    lat = _get(data, "lat", "latitude")
    lng = _get(data, "lng", "lon", "longitude")
    if lat is None or lng is None:
        return None
    return Coordinates(lat=float(lat), lng=float(lng))


def parse_location(data: Optional[Dict[str, Any]]) -> Location:
    if not data:
        return Location()
    return Location(
        address=_get(data, "address"),
        city=_get(data, "city"),
        state=_get(data, "state"),
        zip_code=_get(data, "zipCode", "zip_code"),
        coordinates=_coordinates(_get(data, "coordinates")),
    )


def _time_slots(data: Optional[Dict[str, Any]]) -> TimeSlots:
    if not data:
        return TimeSlots()
    return TimeSlots(
        morning=bool(data.get("morning", False)),
        afternoon=bool(data.get("afternoon", False)),
        evening=bool(data.get("evening", False)),
    )


def parse_availability(data: Optional[Dict[str, Any]]) -> Availability:
    if not data:
        return Availability()
    return Availability(
        weekdays=_time_slots(data.get("weekdays")),
        weekends=_time_slots(data.get("weekends")),
    )


def parse_volunteer(data: Dict[str, Any]) -> Volunteer:
    """Build a Volunteer from a raw record, validating vocabulary tags."""
    volunteer_id = _require(data, "volunteer", None, "id", "_id")
    prefs = _get(data, "preferences", default={})

    max_distance = _get(prefs, "maxDistance", "max_distance", "max_distance_miles")
    max_hours = _get(prefs, "maxHoursPerWeek", "max_hours_per_week")

    return Volunteer(
        id=str(volunteer_id),
        name=str(_get(data, "name", default="")),
        email=_get(data, "email"),
        skills=_tags(_get(data, "skills"), SKILL_TAGS, "volunteer", volunteer_id, "skills"),
        availability=parse_availability(_get(data, "availability")),
        preferences=Preferences(
            max_distance_miles=float(max_distance) if max_distance is not None else None,
            event_types=_tags(
                _get(prefs, "eventTypes", "event_types"),
                CATEGORY_TAGS, "volunteer", volunteer_id, "preferences.eventTypes"
            ),
            max_hours_per_week=float(max_hours) if max_hours is not None else None,
        ),
        location=parse_location(_get(data, "location")),
        is_active=bool(_get(data, "isActive", "is_active", default=True)),
    )


def _count(value: Any, event_id: Any, field: str) -> int:
    if isinstance(value, bool):
        raise InvalidRecordError("event", event_id, field, f"expected an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidRecordError("event", event_id, field, f"expected an integer, got {value!r}") from e


def _timestamp(value: Any, event_id: Any, field: str) -> datetime:
    try:
        return parse_timestamp(value)
    except (ValueError, OverflowError) as e:
        raise InvalidRecordError("event", event_id, field, str(e)) from e


def parse_event(data: Dict[str, Any]) -> Event:
    """Build an Event from a raw record, validating vocabulary tags and status."""
    event_id = _require(data, "event", None, "id", "_id")

    event_type = str(_require(data, "event", event_id, "eventType", "event_type")).strip().lower()
    if event_type not in CATEGORY_TAGS:
        raise InvalidRecordError("event", event_id, "eventType", f"unknown value {event_type!r}")

    status = str(_get(data, "status", default=EventStatus.UPCOMING.value)).strip().lower()
    if status not in EVENT_STATUSES:
        raise InvalidRecordError("event", event_id, "status", f"unknown value {status!r}")

    max_volunteers = _count(
        _require(data, "event", event_id, "maxVolunteers", "max_volunteers"),
        event_id, "maxVolunteers"
    )
    current_volunteers = _count(
        _get(data, "currentVolunteers", "current_volunteers", default=0),
        event_id, "currentVolunteers"
    )

    start_date = _timestamp(
        _require(data, "event", event_id, "startDate", "start_date"),
        event_id, "startDate"
    )
    end_date = _get(data, "endDate", "end_date")
    if end_date is not None:
        end_date = _timestamp(end_date, event_id, "endDate")

    return Event(
        id=str(event_id),
        title=str(_get(data, "title", default="")),
        description=_get(data, "description"),
        event_type=event_type,
        required_skills=_tags(
            _get(data, "requiredSkills", "required_skills"),
            SKILL_TAGS, "event", event_id, "requiredSkills"
        ),
        location=parse_location(_get(data, "location")),
        start_date=start_date,
        end_date=end_date,
        max_volunteers=max_volunteers,
        current_volunteers=current_volunteers,
        status=status,
    )


def load_records_file(path: str) -> Dict[str, Any]:
    """Read the raw `volunteers:` / `events:` document from a YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Records file {path} must contain a mapping at the top level")
    return data
