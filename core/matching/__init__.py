#!/usr/bin/env python3
"""
Team Matching Module - User/team compatibility scoring and recommendations.

Public API:
- TeamMatchingService: Single-pair scoring and batch recommendations
- MatchResult / RecommendationItem: Result data structures

The module is split into focused, single-responsibility modules:

- models.py: Profiles, preferences and result data structures
- skills.py: Required/preferred skill coverage and complementary bonus
- experience.py: Experience level against the accepted range
- location.py: Timezone compatibility
- availability.py: Working-hours overlap
- team_size.py: Fit against preferred team size
- aggregator.py: Weighted overall score and explanations
- interfaces.py: MatchingDataSource contract
- service.py: TeamMatchingService orchestrator
"""

from core.matching.models import (
    WorkingHours, CandidateProfile, TeamProfile, TeamPreferences,
    SkillMatchResult, MatchResult, TeamSummary, UserSummary, RecommendationItem,
    DEFAULT_TEAM_PREFERENCES, parse_team_preferences
)
from core.matching.interfaces import MatchingDataSource
from core.matching.service import TeamMatchingService, CandidateOutcome

__all__ = [
    'TeamMatchingService', 'CandidateOutcome', 'MatchingDataSource',
    'WorkingHours', 'CandidateProfile', 'TeamProfile', 'TeamPreferences',
    'SkillMatchResult', 'MatchResult', 'TeamSummary', 'UserSummary',
    'RecommendationItem', 'DEFAULT_TEAM_PREFERENCES', 'parse_team_preferences'
]
