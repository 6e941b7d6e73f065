#!/usr/bin/env python3
"""
Location Matching - Timezone compatibility between a candidate and a team.
"""

from typing import Iterable, Optional
import logging

logger = logging.getLogger(__name__)

# Exact labels "UTC-12" .. "UTC+12"; no padding, no lower case
_UTC_OFFSETS = {f"UTC{hours:+d}": hours for hours in range(-12, 13)}


def parse_utc_offset(label: Optional[str]) -> int:
    """
    Whole-hour offset for labels "UTC-12" .. "UTC+12".

    Anything else (named zones, "UTC+08", "utc+8", half-hour offsets) counts
    as UTC+0.
    """
    return _UTC_OFFSETS.get(label, 0)


def calculate_location_match(
    candidate_timezone: Optional[str],
    preferred_timezones: Iterable[str],
    location_flexible: bool
) -> float:
    """
    Calculate timezone/location match score.

    Priority: flexible team (0.9), no preference (0.8), exact preferred
    timezone (1.0), otherwise banded by the smallest hour difference.

    Returns: score (0.2-1.0)
    """
    if location_flexible:
        return 0.9

    preferred = [tz for tz in (preferred_timezones or []) if tz]
    if not preferred:
        return 0.8

    if candidate_timezone in preferred:
        return 1.0

    user_offset = parse_utc_offset(candidate_timezone)
    min_diff = min(abs(user_offset - parse_utc_offset(tz)) for tz in preferred)

    logger.debug(f"Timezone {candidate_timezone} is {min_diff}h from nearest of {preferred}")

    if min_diff <= 2:
        return 0.8
    if min_diff <= 4:
        return 0.6
    if min_diff <= 8:
        return 0.4
    return 0.2
