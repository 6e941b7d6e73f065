#!/usr/bin/env python3
"""
Score Aggregation - Combine dimension scores and explain the result.

overall = skill * w_skill + experience * w_exp + location * w_loc
        + availability * w_avail + team_size * w_size

w_skill/w_exp/w_loc come from the team's preferences, w_avail/w_size from
AggregationWeights. The five weights are used as given: they are not
renormalized and the overall score is not clamped, so custom preferences whose
weights do not sum to 1.0 shift the overall score accordingly.
"""

from typing import List, Optional, Tuple
import logging

from core.config_loader import AggregationWeights
from core.matching.models import MatchResult, SkillMatchResult, TeamPreferences

logger = logging.getLogger(__name__)

SYNERGY_THRESHOLD = 0.8
STRENGTH_THRESHOLD = 0.7
WEAKNESS_THRESHOLD = 0.5


def calculate_overall_score(
    skill_score: float,
    experience_score: float,
    location_score: float,
    availability_score: float,
    team_size_score: float,
    preferences: TeamPreferences,
    weights: AggregationWeights
) -> float:
    return (
        skill_score * preferences.skill_match_weight +
        experience_score * preferences.experience_weight +
        location_score * preferences.location_weight +
        availability_score * weights.availability +
        team_size_score * weights.team_size
    )


def build_synergy_reasons(
    skill: SkillMatchResult,
    experience_score: float,
    location_score: float,
    availability_score: float
) -> List[str]:
    reasons = []
    if skill.score > SYNERGY_THRESHOLD:
        reasons.append("Skills highly compatible")
    if experience_score > SYNERGY_THRESHOLD:
        reasons.append("Experience level suitable")
    if location_score > SYNERGY_THRESHOLD:
        reasons.append("Timezone/location compatible")
    if availability_score > SYNERGY_THRESHOLD:
        reasons.append("High working-hours overlap")
    if skill.complementary_skills:
        reasons.append(f"Brings {len(skill.complementary_skills)} complementary skill(s)")
    return reasons


def build_strengths_and_weaknesses(
    skill: SkillMatchResult,
    experience_score: float,
    location_score: float,
    team_size_score: float
) -> Tuple[List[str], List[str]]:
    """Returns: (strengths, weaknesses)"""
    strengths = []
    weaknesses = []

    if skill.score > STRENGTH_THRESHOLD:
        strengths.append("Strong skill match")
    elif skill.missing_skills:
        weaknesses.append(f"Missing {len(skill.missing_skills)} required skill(s)")

    if experience_score > STRENGTH_THRESHOLD:
        strengths.append("Experience level fits")
    else:
        weaknesses.append("Experience level is not a close fit")

    if location_score < WEAKNESS_THRESHOLD:
        weaknesses.append("Large timezone difference")

    if team_size_score < WEAKNESS_THRESHOLD:
        weaknesses.append("Team size is not ideal")

    return strengths, weaknesses


def build_explanation(overall_score: float, synergy_reasons: List[str]) -> str:
    explanation = f"Overall match {overall_score * 100:.1f}%"
    if synergy_reasons:
        explanation += ": " + ", ".join(synergy_reasons)
    return explanation


def aggregate_match(
    skill: SkillMatchResult,
    experience_score: float,
    location_score: float,
    availability_score: float,
    team_size_score: float,
    preferences: TeamPreferences,
    weights: Optional[AggregationWeights] = None
) -> MatchResult:
    """
    Combine the five dimension scores into a MatchResult.

    Args:
        skill: Skill match result (score plus skill lists)
        experience_score: Experience dimension score
        location_score: Location dimension score
        availability_score: Availability dimension score
        team_size_score: Team size dimension score
        preferences: Team preferences supplying skill/experience/location weights
        weights: Availability/team-size weights (defaults 0.2/0.1)

    Returns:
        MatchResult with overall score, confidence and narrative fields
    """
    weights = weights or AggregationWeights()

    overall_score = calculate_overall_score(
        skill.score,
        experience_score,
        location_score,
        availability_score,
        team_size_score,
        preferences,
        weights
    )
    confidence = min(overall_score + 0.1, 1.0)

    synergy_reasons = build_synergy_reasons(
        skill, experience_score, location_score, availability_score
    )
    strengths, weaknesses = build_strengths_and_weaknesses(
        skill, experience_score, location_score, team_size_score
    )

    return MatchResult(
        skill_match_score=skill.score,
        experience_match_score=experience_score,
        location_match_score=location_score,
        availability_score=availability_score,
        team_size_score=team_size_score,
        overall_score=overall_score,
        confidence=confidence,
        explanation=build_explanation(overall_score, synergy_reasons),
        matching_skills=list(skill.matching_skills),
        missing_skills=list(skill.missing_skills),
        complementary_skills=list(skill.complementary_skills),
        synergy_reasons=synergy_reasons,
        strengths_analysis=strengths,
        weaknesses_analysis=weaknesses
    )
