#!/usr/bin/env python3
"""
Availability Matching - Working-hours overlap between a candidate and a team.

At least 4 hours of shared time is needed for a high score; shorter overlaps
scale linearly up to 0.8.
"""

from typing import Optional
import logging

from core.matching.models import WorkingHours

logger = logging.getLogger(__name__)

DEFAULT_START = '09:00'
DEFAULT_END = '18:00'
MIN_OVERLAP_MINUTES = 4 * 60

NOT_SET_SCORE = 0.7
UNPARSEABLE_SCORE = 0.5


def parse_time_of_day(value: str) -> int:
    """
    Convert "HH:MM" to minutes after midnight.

    Raises:
        ValueError: If the string is not a valid time of day
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected 'HH:MM' string, got {value!r}")
    parts = value.strip().split(':')
    if len(parts) != 2:
        raise ValueError(f"Expected 'HH:MM', got {value!r}")
    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours <= 24 and 0 <= minutes < 60):
        raise ValueError(f"Time of day out of range: {value!r}")
    return hours * 60 + minutes


def calculate_availability_match(
    candidate_hours: Optional[WorkingHours],
    team_hours: Optional[WorkingHours]
) -> float:
    """
    Calculate working-hours overlap score.

    Returns 0.7 when either side has no working hours (not a hard requirement)
    and 0.5 when the hours cannot be parsed.
    """
    if candidate_hours is None or team_hours is None:
        return NOT_SET_SCORE

    try:
        user_start = parse_time_of_day(candidate_hours.start or DEFAULT_START)
        user_end = parse_time_of_day(candidate_hours.end or DEFAULT_END)
        team_start = parse_time_of_day(team_hours.start or DEFAULT_START)
        team_end = parse_time_of_day(team_hours.end or DEFAULT_END)
    except (ValueError, TypeError, AttributeError) as e:
        logger.debug(f"Unparseable working hours, using neutral score: {e}")
        return UNPARSEABLE_SCORE

    overlap = max(0, min(user_end, team_end) - max(user_start, team_start))

    if overlap >= MIN_OVERLAP_MINUTES:
        union = max(user_end, team_end) - min(user_start, team_start)
        overlap_ratio = overlap / union
        return min(0.8 + overlap_ratio * 0.2, 1.0)

    return overlap / MIN_OVERLAP_MINUTES * 0.8
