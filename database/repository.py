import logging
from typing import List, Optional, Dict, Any

from pydantic import ValidationError
from sqlalchemy.orm import Session

from core.matching.interfaces import MatchingDataSource
from core.matching.models import (
    CandidateProfile, TeamProfile, TeamPreferences, TeamSummary, UserSummary, WorkingHours
)
from database.models import User, Team, TeamPreferencesRecord
from database.repositories import UserRepository, TeamRepository, TeamPreferencesRepository

logger = logging.getLogger(__name__)


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


class MatchingRepository(MatchingDataSource):
    """
    SQLAlchemy-backed data source for TeamMatchingService.

    Converts ORM rows into read-only profile snapshots. Bound to one Session,
    so batch scoring through it stays on the calling thread.
    """

    supports_concurrent_reads = False

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.teams = TeamRepository(db)
        self.preferences = TeamPreferencesRepository(db)

    def get_candidate_profile(self, user_id: str) -> Optional[CandidateProfile]:
        user = self.users.get_by_id(user_id)
        if user is None:
            return None
        return self._to_candidate_profile(user)

    def get_team_profile(self, team_id: str) -> Optional[TeamProfile]:
        team = self.teams.get_by_id(team_id)
        if team is None:
            return None
        return TeamProfile(
            team_id=team.id,
            max_members=team.max_members,
            leader_id=team.leader_id,
            member_ids=tuple(m.user_id for m in team.members)
        )

    def get_team_preferences(self, team_id: str, hackathon_id: str) -> Optional[TeamPreferences]:
        """Team's own preferences, else its leader's, else None (caller uses defaults)."""
        record = self.preferences.get_for_team(team_id, hackathon_id)

        if record is None:
            team = self.teams.get_by_id(team_id)
            if team is not None and team.leader_id:
                record = self.preferences.get_for_user(team.leader_id, hackathon_id)
                if record is not None:
                    logger.debug(f"Team {team_id} has no preferences, using leader {team.leader_id}'s")

        if record is None:
            return None
        return self._to_preferences(record)

    def get_team_summary(self, team_id: str) -> Optional[TeamSummary]:
        team = self.teams.get_by_id(team_id)
        if team is None:
            return None
        return TeamSummary(
            team_id=team.id,
            name=team.name,
            description=team.description,
            current_members=len(team.members),
            max_members=team.max_members,
            leader_name=team.leader.username if team.leader else None
        )

    def get_user_summary(self, user_id: str) -> Optional[UserSummary]:
        user = self.users.get_by_id(user_id)
        if user is None:
            return None
        return UserSummary(
            user_id=user.id,
            username=user.username,
            avatar_url=user.avatar_url,
            bio=user.bio,
            skills=tuple(_string_list(user.skills)),
            reputation_score=user.reputation_score or 0
        )

    def list_recruiting_teams(self, hackathon_id: str, exclude_user_id: str) -> List[str]:
        return [team.id for team in self.teams.list_recruiting_teams(hackathon_id, exclude_user_id)]

    def list_unteamed_participants(self, hackathon_id: str) -> List[str]:
        return [user.id for user in self.users.list_unteamed_participants(hackathon_id)]

    @staticmethod
    def _to_candidate_profile(user: User) -> CandidateProfile:
        prefs: Dict[str, Any] = user.preferences if isinstance(user.preferences, dict) else {}
        working_hours = prefs.get('workingHours', prefs.get('working_hours'))

        return CandidateProfile(
            user_id=user.id,
            skills=tuple(_string_list(user.skills)),
            experience_level=prefs.get('experience') or None,
            timezone=prefs.get('timezone') or None,
            working_hours=WorkingHours.from_payload(working_hours)
        )

    @staticmethod
    def _to_preferences(record: TeamPreferencesRecord) -> Optional[TeamPreferences]:
        # Unset columns fall back to the model defaults field by field
        values = {
            name: getattr(record, name)
            for name in TeamPreferencesRecord.PREFERENCE_FIELDS
            if getattr(record, name) is not None
        }
        try:
            return TeamPreferences(**values)
        except ValidationError as e:
            logger.warning(f"Stored preferences {record.id} are invalid, using defaults: {e.error_count()} error(s)")
            return None
