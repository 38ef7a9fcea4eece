#!/usr/bin/env python3
"""
Core exceptions for the matching engine.

The scoring functions never raise on degraded input; these are reserved for
a missing subject and for records that fail vocabulary validation.
"""


class MatchingError(Exception):
    """Base exception for matching engine errors."""
    pass


class SubjectNotFoundError(MatchingError):
    """Raised when the volunteer or event being matched does not exist."""

    def __init__(self, kind: str, subject_id=None):
        self.kind = kind
        self.subject_id = subject_id
        if subject_id is None:
            message = f"{kind.capitalize()} not found"
        else:
            message = f"{kind.capitalize()} {subject_id} not found"
        super().__init__(message)


class VolunteerNotFoundError(SubjectNotFoundError):
    """Raised when a volunteer subject is missing."""

    def __init__(self, volunteer_id=None):
        super().__init__("volunteer", volunteer_id)


class EventNotFoundError(SubjectNotFoundError):
    """Raised when an event subject is missing."""

    def __init__(self, event_id=None):
        super().__init__("event", event_id)


class InvalidRecordError(MatchingError):
    """Raised when a volunteer or event record cannot be parsed."""

    def __init__(self, record_kind: str, record_id, field: str, reason: str):
        self.record_kind = record_kind
        self.record_id = record_id
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {record_kind} {record_id!r}: {field}: {reason}")
