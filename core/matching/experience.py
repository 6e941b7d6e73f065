#!/usr/bin/env python3
"""
Experience Matching - Candidate level against a team's accepted range.
"""

from typing import Optional

EXPERIENCE_LEVELS = {
    'beginner': 1,
    'intermediate': 2,
    'advanced': 3,
    'expert': 4
}

MIN_LEVEL = 1
MAX_LEVEL = 4


def experience_rank(label: Optional[str], fallback: int) -> int:
    """Map an experience label to its ordinal, or `fallback` when unknown."""
    if not isinstance(label, str):
        return fallback
    return EXPERIENCE_LEVELS.get(label.strip().lower(), fallback)


def calculate_experience_match(
    candidate_level: Optional[str],
    min_level: Optional[str],
    max_level: Optional[str]
) -> float:
    """
    Calculate experience match score.

    In range scores 1.0, one level short of the minimum scores 0.7, being over
    the maximum loses 0.2 per level (floor 0.1), anything else scores 0.3.

    Returns: score (0.1-1.0)
    """
    user = experience_rank(candidate_level, MIN_LEVEL)
    low = experience_rank(min_level, MIN_LEVEL)
    high = experience_rank(max_level, MAX_LEVEL)

    if low <= user <= high:
        return 1.0

    if user == low - 1:
        return 0.7

    if user > high:
        over = user - high
        return max(0.5 - over * 0.2, 0.1)

    return 0.3
