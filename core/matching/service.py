#!/usr/bin/env python3
"""
Team Matching Service - Single-pair scoring and batch recommendations.

Scores a user against a team across five dimensions (skill, experience,
location, availability, team size), aggregates them into an overall score
with an explanation, and ranks candidates in both directions:

- recommend_teams_for_user: recruiting teams in a hackathon for one user
- recommend_users_for_team: unteamed participants in a hackathon for one team

A failure scoring one candidate never aborts a batch: each candidate yields a
CandidateOutcome (success or error), failures are logged and filtered out
before ranking.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from typing import Callable, List, Optional
import logging

from core.config_loader import TeamMatchingConfig
from core.matching.models import (
    CandidateProfile, TeamProfile, TeamPreferences, MatchResult,
    RecommendationItem, TeamSummary, UserSummary,
    DEFAULT_TEAM_PREFERENCES
)
from core.matching.interfaces import MatchingDataSource
from core.matching.exceptions import UserNotFoundException, TeamNotFoundException
from core.matching.skills import calculate_skill_match
from core.matching.experience import calculate_experience_match
from core.matching.location import calculate_location_match
from core.matching.availability import calculate_availability_match
from core.matching.team_size import calculate_team_size_match
from core.matching.aggregator import aggregate_match

logger = logging.getLogger(__name__)


@dataclass
class CandidateOutcome:
    """Result of scoring one batch candidate."""
    candidate_id: str
    item: Optional[RecommendationItem] = None
    error: Optional[Exception] = None
    skipped_reason: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.item is not None


class TeamMatchingService:
    """
    Service for user/team compatibility scoring and recommendations.

    Stateless between calls: all data comes from the MatchingDataSource and
    nothing is written back.
    """

    def __init__(
        self,
        data_source: MatchingDataSource,
        config: Optional[TeamMatchingConfig] = None
    ):
        self.data_source = data_source
        self.config = config or TeamMatchingConfig()

        if self.config.default_preferences:
            self.default_preferences = TeamPreferences(**self.config.default_preferences)
        else:
            self.default_preferences = DEFAULT_TEAM_PREFERENCES

    def score_match(
        self,
        candidate: CandidateProfile,
        team: TeamProfile,
        preferences: Optional[TeamPreferences] = None
    ) -> MatchResult:
        """
        Score one candidate against one team.

        Pure: same inputs give the same result and no input is modified.

        Args:
            candidate: Candidate profile snapshot
            team: Team profile snapshot
            preferences: Team preferences, or None for the defaults

        Returns:
            MatchResult with dimension scores, overall score and narrative
        """
        preferences = preferences or self.default_preferences
        defaults = self.config.candidate_defaults

        skill = calculate_skill_match(
            candidate.skills,
            preferences.required_skills,
            preferences.preferred_skills
        )
        experience = calculate_experience_match(
            candidate.experience_level or defaults.experience_level,
            preferences.min_experience,
            preferences.max_experience
        )
        location = calculate_location_match(
            candidate.timezone or defaults.timezone,
            preferences.preferred_timezones,
            preferences.location_flexible
        )
        availability = calculate_availability_match(
            candidate.working_hours,
            preferences.team_working_hours
        )
        team_size = calculate_team_size_match(
            team.member_count,
            team.max_members,
            preferences.preferred_team_size
        )

        result = aggregate_match(
            skill=skill,
            experience_score=experience,
            location_score=location,
            availability_score=availability,
            team_size_score=team_size,
            preferences=preferences,
            weights=self.config.weights
        )

        logger.debug(
            f"User {candidate.user_id} x team {team.team_id}: "
            f"skill={skill.score:.2f}, exp={experience:.2f}, loc={location:.2f}, "
            f"avail={availability:.2f}, size={team_size:.2f}, overall={result.overall_score:.3f}"
        )

        return replace(result, user_id=candidate.user_id, team_id=team.team_id)

    def calculate_user_team_match(
        self,
        user_id: str,
        team_id: str,
        hackathon_id: str
    ) -> MatchResult:
        """
        Look up a user and a team and score them.

        Raises:
            UserNotFoundException: If the user does not exist
            TeamNotFoundException: If the team does not exist
        """
        candidate = self._get_candidate(user_id)
        team = self._get_team(team_id)
        preferences = self._get_preferences(team_id, hackathon_id)

        result = self.score_match(candidate, team, preferences)
        return replace(result, hackathon_id=hackathon_id)

    def recommend_teams_for_user(
        self,
        user_id: str,
        hackathon_id: str,
        limit: Optional[int] = None
    ) -> List[RecommendationItem]:
        """
        Rank recruiting teams of a hackathon for a user.

        Args:
            user_id: User looking for a team
            hackathon_id: Hackathon to search in
            limit: Maximum results (None = configured default)

        Returns:
            Recommendations sorted by overall score (highest first)

        Raises:
            UserNotFoundException: If the user does not exist
        """
        limit = self._effective_limit(limit)
        candidate = self._get_candidate(user_id)
        if limit == 0:
            return []

        team_ids = self.data_source.list_recruiting_teams(hackathon_id, exclude_user_id=user_id)
        logger.info(f"Scoring {len(team_ids)} candidate team(s) for user {user_id} in hackathon {hackathon_id}")

        def score_team(team_id: str) -> CandidateOutcome:
            team = self._get_team(team_id)
            if team.has_member(user_id):
                return CandidateOutcome(team_id, skipped_reason="user already on team")

            preferences = self._get_preferences(team_id, hackathon_id)
            match = replace(self.score_match(candidate, team, preferences), hackathon_id=hackathon_id)

            summary = self.data_source.get_team_summary(team_id) or TeamSummary(
                team_id=team_id,
                name=team_id,
                current_members=team.member_count,
                max_members=team.max_members
            )
            return CandidateOutcome(team_id, item=RecommendationItem(match=match, team=summary))

        outcomes = self._run_batch(team_ids, score_team)
        return self._rank(outcomes, limit)

    def recommend_users_for_team(
        self,
        team_id: str,
        hackathon_id: str,
        limit: Optional[int] = None
    ) -> List[RecommendationItem]:
        """
        Rank unteamed participants of a hackathon for a team.

        Args:
            team_id: Team looking for members
            hackathon_id: Hackathon to search in
            limit: Maximum results (None = configured default)

        Returns:
            Recommendations sorted by overall score (highest first)

        Raises:
            TeamNotFoundException: If the team does not exist
        """
        limit = self._effective_limit(limit)
        team = self._get_team(team_id)
        if limit == 0:
            return []

        preferences = self._get_preferences(team_id, hackathon_id)
        user_ids = self.data_source.list_unteamed_participants(hackathon_id)
        logger.info(f"Scoring {len(user_ids)} candidate user(s) for team {team_id} in hackathon {hackathon_id}")

        def score_user(user_id: str) -> CandidateOutcome:
            if team.has_member(user_id):
                return CandidateOutcome(user_id, skipped_reason="user already on team")

            candidate = self._get_candidate(user_id)
            match = replace(self.score_match(candidate, team, preferences), hackathon_id=hackathon_id)

            summary = self.data_source.get_user_summary(user_id) or UserSummary(
                user_id=user_id,
                username=user_id,
                skills=tuple(candidate.skills)
            )
            return CandidateOutcome(user_id, item=RecommendationItem(match=match, user=summary))

        outcomes = self._run_batch(user_ids, score_user)
        return self._rank(outcomes, limit)

    def _get_candidate(self, user_id: str) -> CandidateProfile:
        candidate = self.data_source.get_candidate_profile(user_id)
        if candidate is None:
            raise UserNotFoundException(f"User {user_id} not found")
        return candidate

    def _get_team(self, team_id: str) -> TeamProfile:
        team = self.data_source.get_team_profile(team_id)
        if team is None:
            raise TeamNotFoundException(f"Team {team_id} not found")
        return team

    def _get_preferences(self, team_id: str, hackathon_id: str) -> TeamPreferences:
        preferences = self.data_source.get_team_preferences(team_id, hackathon_id)
        if preferences is None:
            logger.debug(f"No preferences for team {team_id} in hackathon {hackathon_id}, using defaults")
            return self.default_preferences
        return preferences

    def _effective_limit(self, limit: Optional[int]) -> int:
        settings = self.config.recommendations
        if limit is None:
            limit = settings.default_limit
        return max(0, min(limit, settings.max_limit))

    def _run_batch(
        self,
        candidate_ids: List[str],
        score_fn: Callable[[str], CandidateOutcome]
    ) -> List[CandidateOutcome]:
        """Score every candidate, turning per-candidate exceptions into failed outcomes."""

        def attempt(candidate_id: str) -> CandidateOutcome:
            try:
                return score_fn(candidate_id)
            except Exception as e:
                logger.error(f"Error calculating match for candidate {candidate_id}: {e}", exc_info=True)
                return CandidateOutcome(candidate_id, error=e)

        max_workers = self.config.recommendations.max_workers
        if max_workers > 1 and len(candidate_ids) > 1 and self.data_source.supports_concurrent_reads:
            with ThreadPoolExecutor(max_workers=min(max_workers, len(candidate_ids))) as pool:
                return list(pool.map(attempt, candidate_ids))

        return [attempt(candidate_id) for candidate_id in candidate_ids]

    def _rank(self, outcomes: List[CandidateOutcome], limit: int) -> List[RecommendationItem]:
        items = [o.item for o in outcomes if o.succeeded]
        failed = [o for o in outcomes if o.error is not None]
        skipped = [o for o in outcomes if o.skipped_reason]

        # Stable: equal scores keep candidate enumeration order
        items.sort(key=lambda item: item.overall_score, reverse=True)

        logger.info(
            f"Scored {len(items)} candidate(s) ({len(failed)} failed, {len(skipped)} skipped), "
            f"returning top {min(limit, len(items))}"
        )
        return items[:limit]
