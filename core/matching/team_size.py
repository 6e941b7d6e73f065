#!/usr/bin/env python3
"""
Team Size Matching - How well one more member fits the team's preferred size.
"""

# Score by distance between size-after-joining and preferred size
_DISTANCE_SCORES = {0: 1.0, 1: 0.8, 2: 0.6, 3: 0.4}
_FAR_SCORE = 0.2


def calculate_team_size_match(
    current_size: int,
    max_size: int,
    preferred_size: int
) -> float:
    """
    Calculate team size match score.

    A full team scores 0 no matter what size it prefers.
    """
    if current_size >= max_size:
        return 0.0

    size_after_joining = current_size + 1
    distance = abs(size_after_joining - preferred_size)
    return _DISTANCE_SCORES.get(distance, _FAR_SCORE)
