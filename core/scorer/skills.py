#!/usr/bin/env python3
"""
Skill Match - Fraction of an event's required skills a volunteer covers.
"""

from typing import Iterable, Optional


def calculate_skill_match(
    volunteer_skills: Optional[Iterable[str]],
    required_skills: Optional[Iterable[str]]
) -> float:
    """
    Calculate skill coverage for a volunteer against an event.

    Returns:
        1.0 when the event requires nothing, 0.0 when the volunteer lists no
        skills, otherwise |covered required| / |required|. Extra volunteer
        skills neither raise nor lower the result.
    """
    required = set(required_skills or ())
    if not required:
        return 1.0

    offered = set(volunteer_skills or ())
    if not offered:
        return 0.0

    return len(offered & required) / len(required)
