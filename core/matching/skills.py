#!/usr/bin/env python3
"""
Skill Matching - Required/preferred skill coverage plus complementary bonus.

Formula: 0.7 * RequiredCoverage + 0.2 * PreferredCoverage + ComplementaryBonus
(bonus capped at 0.1), halved when more than half of the required skills are
missing.
"""

from typing import Iterable, List
import logging
import re

from core.matching.models import SkillMatchResult

logger = logging.getLogger(__name__)

REQUIRED_WEIGHT = 0.7
PREFERRED_WEIGHT = 0.2
COMPLEMENTARY_BONUS_PER_SKILL = 0.02
COMPLEMENTARY_BONUS_MAX = 0.1
MISSING_REQUIRED_PENALTY = 0.5

_WHITESPACE = re.compile(r'\s+')


def normalize_skill(skill: str) -> str:
    """Lower-case and drop all whitespace ("Node JS" == "nodejs")."""
    return _WHITESPACE.sub('', skill.lower())


def _normalize_all(skills: Iterable[str]) -> List[str]:
    seen = []
    for skill in skills or []:
        if not isinstance(skill, str):
            continue
        normalized = normalize_skill(skill)
        if normalized and normalized not in seen:
            seen.append(normalized)
    return seen


def _coverage(matched: List[str], wanted: List[str]) -> float:
    # Teams that ask for nothing give full credit
    if not wanted:
        return 1.0
    return len(matched) / len(wanted)


def calculate_skill_match(
    candidate_skills: Iterable[str],
    required_skills: Iterable[str],
    preferred_skills: Iterable[str]
) -> SkillMatchResult:
    """
    Score a candidate's skills against a team's required and preferred skills.

    Args:
        candidate_skills: Skills the candidate lists
        required_skills: Skills the team must have
        preferred_skills: Skills the team would like to have

    Returns:
        SkillMatchResult with score (0.0-1.0) and normalized skill lists
    """
    candidate = _normalize_all(candidate_skills)
    required = _normalize_all(required_skills)
    preferred = _normalize_all(preferred_skills)

    candidate_set = set(candidate)
    matching_required = [s for s in required if s in candidate_set]
    matching_preferred = [s for s in preferred if s in candidate_set]
    missing_required = [s for s in required if s not in candidate_set]
    complementary = [s for s in candidate if s not in required and s not in preferred]

    score = (
        REQUIRED_WEIGHT * _coverage(matching_required, required) +
        PREFERRED_WEIGHT * _coverage(matching_preferred, preferred) +
        min(len(complementary) * COMPLEMENTARY_BONUS_PER_SKILL, COMPLEMENTARY_BONUS_MAX)
    )

    if len(missing_required) > len(required) * 0.5:
        score *= MISSING_REQUIRED_PENALTY

    score = min(score, 1.0)

    logger.debug(
        f"Skill match: {len(matching_required)}/{len(required)} required, "
        f"{len(matching_preferred)}/{len(preferred)} preferred, "
        f"{len(complementary)} complementary -> {score:.3f}"
    )

    return SkillMatchResult(
        score=score,
        matching_skills=matching_required + matching_preferred,
        missing_skills=missing_required,
        complementary_skills=complementary
    )
