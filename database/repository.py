import logging
from typing import List, Optional, Dict, Any, Iterable

from core.scorer.models import Volunteer, Event
from core.scorer.vocabulary import EventStatus
from database.loader import parse_volunteer, parse_event, load_records_file

logger = logging.getLogger(__name__)


class RecordRepository:
    """
    Read-only, in-memory store of volunteers and events.

    Supplies the subject and candidate pools the matching core consumes.
    Records keep their insertion order, which is the order candidates are
    scored in (and therefore the tie-break order of equal scores).
    """

    def __init__(
        self,
        volunteers: Iterable[Volunteer] = (),
        events: Iterable[Event] = ()
    ):
        self._volunteers: Dict[str, Volunteer] = {}
        self._events: Dict[str, Event] = {}

        for volunteer in volunteers:
            if volunteer.id in self._volunteers:
                raise ValueError(f"Duplicate volunteer id: {volunteer.id}")
            self._volunteers[volunteer.id] = volunteer

        for event in events:
            if event.id in self._events:
                raise ValueError(f"Duplicate event id: {event.id}")
            self._events[event.id] = event

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecordRepository":
        volunteers = [parse_volunteer(v) for v in (data.get("volunteers") or [])]
        events = [parse_event(e) for e in (data.get("events") or [])]
        return cls(volunteers=volunteers, events=events)

    @classmethod
    def from_file(cls, path: str) -> "RecordRepository":
        repo = cls.from_dict(load_records_file(path))
        logger.info(
            f"Loaded {len(repo._volunteers)} volunteers and {len(repo._events)} events from {path}"
        )
        return repo

    def get_volunteer(self, volunteer_id: str) -> Optional[Volunteer]:
        return self._volunteers.get(str(volunteer_id))

    def get_event(self, event_id: str) -> Optional[Event]:
        return self._events.get(str(event_id))

    def all_volunteers(self) -> List[Volunteer]:
        return list(self._volunteers.values())

    def all_events(self) -> List[Event]:
        return list(self._events.values())

    def active_volunteers(self) -> List[Volunteer]:
        return [v for v in self._volunteers.values() if v.is_active]

    def upcoming_events(self) -> List[Event]:
        return [e for e in self._events.values() if e.status == EventStatus.UPCOMING.value]

    def open_events(self) -> List[Event]:
        """Upcoming events that still have room for volunteers."""
        return [e for e in self._events.values() if e.is_open()]
