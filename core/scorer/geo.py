#!/usr/bin/env python3
"""
Great-circle distance between volunteer and event locations.
"""

import math
from typing import Optional

from core.scorer.models import Coordinates

EARTH_RADIUS_MILES = 3959


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in miles. Inputs are degrees and are not range-checked."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def distance_between(
    origin: Optional[Coordinates],
    destination: Optional[Coordinates]
) -> Optional[float]:
    """Distance in miles, or None when either side was never geocoded."""
    if origin is None or destination is None:
        return None
    return calculate_distance(origin.lat, origin.lng, destination.lat, destination.lng)
