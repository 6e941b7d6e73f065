#!/usr/bin/env python3
"""
Matching Models - Data structures for user/team matching.

Profiles are read-only snapshots handed to the engine by the data source.
Results are built fresh per scoring call and never persisted here.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional, Tuple
import logging

from pydantic import BaseModel, Field, ConfigDict, ValidationError

from core.matching.exceptions import InvalidPreferencesException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkingHours:
    """Working hours as "HH:MM" strings. Either bound may be unset."""
    start: Optional[str] = None
    end: Optional[str] = None
    timezone: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional['WorkingHours']:
        """
        Build from a loosely-typed stored payload.

        An empty dict means hours are set with default bounds; a missing or
        non-dict payload means "not set".
        """
        if isinstance(payload, WorkingHours):
            return payload
        if not isinstance(payload, dict):
            return None
        return cls(
            start=payload.get('start'),
            end=payload.get('end'),
            timezone=payload.get('timezone')
        )


@dataclass(frozen=True)
class CandidateProfile:
    """Snapshot of the user attributes the engine scores."""
    user_id: str
    skills: Tuple[str, ...] = ()
    # None = not set on the profile; the service substitutes configured defaults
    experience_level: Optional[str] = None
    timezone: Optional[str] = None
    working_hours: Optional[WorkingHours] = None


@dataclass(frozen=True)
class TeamProfile:
    """Snapshot of a team's membership and capacity."""
    team_id: str
    max_members: int
    leader_id: Optional[str] = None
    member_ids: Tuple[str, ...] = ()

    @property
    def member_count(self) -> int:
        return len(self.member_ids)

    @property
    def is_full(self) -> bool:
        return self.member_count >= self.max_members

    def has_member(self, user_id: str) -> bool:
        return user_id in self.member_ids


class TeamPreferences(BaseModel):
    """
    Matching configuration set by a team (or inherited from its leader).

    Experience labels stay plain strings: stored payloads may carry labels the
    experience matcher does not know, and it clamps those to the range bounds.
    """
    model_config = ConfigDict(frozen=True)

    required_skills: List[str] = Field(default_factory=list)
    preferred_skills: List[str] = Field(default_factory=list)
    skill_match_weight: float = Field(default=0.4, ge=0.0, le=1.0)

    min_experience: str = 'beginner'
    max_experience: str = 'expert'
    experience_weight: float = Field(default=0.2, ge=0.0, le=1.0)

    preferred_timezones: List[str] = Field(default_factory=list)
    location_flexible: bool = True
    location_weight: float = Field(default=0.1, ge=0.0, le=1.0)

    working_hours: Optional[Dict[str, Any]] = Field(default_factory=dict)

    preferred_team_size: int = Field(default=4, ge=1, le=10)
    max_team_size: int = Field(default=6, ge=1, le=10)

    @property
    def team_working_hours(self) -> Optional[WorkingHours]:
        return WorkingHours.from_payload(self.working_hours)


DEFAULT_TEAM_PREFERENCES = TeamPreferences()


def parse_team_preferences(payload: Optional[Dict[str, Any]]) -> TeamPreferences:
    """
    Validate a preferences payload supplied by a user.

    Raises:
        InvalidPreferencesException: If any field is out of bounds or mistyped
    """
    try:
        return TeamPreferences(**(payload or {}))
    except ValidationError as e:
        logger.warning(f"Rejected team preferences: {e.error_count()} error(s)")
        raise InvalidPreferencesException("Invalid team preferences", errors=e.errors()) from e


@dataclass
class SkillMatchResult:
    """Result of comparing a candidate's skills with a team's wishlist."""
    score: float
    matching_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    complementary_skills: List[str] = field(default_factory=list)


@dataclass
class MatchResult:
    """Complete user/team compatibility result with narrative fields."""
    skill_match_score: float
    experience_match_score: float
    location_match_score: float
    availability_score: float
    team_size_score: float
    overall_score: float
    confidence: float
    explanation: str = ""

    matching_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    complementary_skills: List[str] = field(default_factory=list)
    synergy_reasons: List[str] = field(default_factory=list)
    strengths_analysis: List[str] = field(default_factory=list)
    weaknesses_analysis: List[str] = field(default_factory=list)

    user_id: Optional[str] = None
    team_id: Optional[str] = None
    hackathon_id: Optional[str] = None


@dataclass(frozen=True)
class TeamSummary:
    """Display data for a recommended team."""
    team_id: str
    name: str
    description: Optional[str] = None
    current_members: int = 0
    max_members: int = 0
    leader_name: Optional[str] = None


@dataclass(frozen=True)
class UserSummary:
    """Display data for a recommended user."""
    user_id: str
    username: str
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    skills: Tuple[str, ...] = ()
    reputation_score: int = 0


@dataclass
class RecommendationItem:
    """A match result joined with the opposing entity's display data."""
    match: MatchResult
    team: Optional[TeamSummary] = None
    user: Optional[UserSummary] = None

    @property
    def overall_score(self) -> float:
        return self.match.overall_score

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into one payload: entity summary fields plus every score field."""
        payload: Dict[str, Any] = {}
        if self.team is not None:
            payload.update(asdict(self.team))
        if self.user is not None:
            summary = asdict(self.user)
            summary['skills'] = list(summary['skills'])
            payload.update(summary)
        payload.update(asdict(self.match))
        return payload
