import math
import logging
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int = 2) -> float:
    """Round to `places` decimals with halves going up.

    Python's round() uses banker's rounding, which would turn a score of
    0.125 into 0.12. Match scores are published rounded half-up instead.
    """
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def local_wall_time(moment: datetime) -> datetime:
    """
    Return the server-local wall-clock reading of a timestamp.

    Naive datetimes are already treated as local time and returned as-is.
    Aware datetimes are converted into the server's local zone.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone()


def naive_local(moment: datetime) -> datetime:
    """Local wall time with tzinfo dropped; naive and aware values then compare cleanly."""
    return local_wall_time(moment).replace(tzinfo=None)


def aligned_now(reference: datetime, now: Optional[datetime] = None) -> datetime:
    """
    Return `now` (or the current time) in the same awareness as `reference`.

    Subtracting a naive datetime from an aware one raises TypeError, so a
    naive side is interpreted as local time before the comparison.
    """
    if now is None:
        if reference.tzinfo is None:
            return datetime.now()
        return datetime.now(reference.tzinfo)

    if reference.tzinfo is None and now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    if reference.tzinfo is not None and now.tzinfo is None:
        return now.astimezone()
    return now
