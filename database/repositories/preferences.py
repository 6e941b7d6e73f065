import logging
from typing import Optional
from sqlalchemy import select

from core.matching.models import TeamPreferences
from database.models import TeamPreferencesRecord
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class TeamPreferencesRepository(BaseRepository):
    def get_for_team(self, team_id: str, hackathon_id: str) -> Optional[TeamPreferencesRecord]:
        stmt = select(TeamPreferencesRecord).where(
            TeamPreferencesRecord.team_id == team_id,
            TeamPreferencesRecord.hackathon_id == hackathon_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_user(self, user_id: str, hackathon_id: str) -> Optional[TeamPreferencesRecord]:
        stmt = select(TeamPreferencesRecord).where(
            TeamPreferencesRecord.user_id == user_id,
            TeamPreferencesRecord.hackathon_id == hackathon_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def save_preferences(
        self,
        preferences: TeamPreferences,
        hackathon_id: str,
        team_id: Optional[str] = None,
        user_id: Optional[str] = None
    ) -> TeamPreferencesRecord:
        """Create or update the preferences owned by a team or, without team_id, by a user."""
        if (team_id is None) == (user_id is None):
            raise ValueError("Exactly one of team_id or user_id must be given")

        if team_id is not None:
            existing = self.get_for_team(team_id, hackathon_id)
        else:
            existing = self.get_for_user(user_id, hackathon_id)

        values = preferences.model_dump()
        if existing:
            record = existing
            for name in TeamPreferencesRecord.PREFERENCE_FIELDS:
                setattr(record, name, values[name])
        else:
            record = TeamPreferencesRecord(
                hackathon_id=hackathon_id,
                team_id=team_id,
                user_id=user_id,
                **{name: values[name] for name in TeamPreferencesRecord.PREFERENCE_FIELDS}
            )
            self.db.add(record)

        self.flush()
        logger.info(f"Saved team preferences for {'team ' + team_id if team_id else 'user ' + user_id} in hackathon {hackathon_id}")
        return record
