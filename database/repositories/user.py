import logging
from typing import List, Optional
from sqlalchemy import select

from database.models import User, Participation, Team, TeamMember
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    def get_by_id(self, user_id: str) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_unteamed_participants(self, hackathon_id: str) -> List[User]:
        """Registered participants of the hackathon who are on no team in it."""
        on_team = (
            select(TeamMember.id)
            .join(Team, Team.id == TeamMember.team_id)
            .where(
                TeamMember.user_id == User.id,
                Team.hackathon_id == hackathon_id
            )
        )
        stmt = (
            select(User)
            .join(Participation, Participation.user_id == User.id)
            .where(
                Participation.hackathon_id == hackathon_id,
                Participation.status == 'REGISTERED',
                ~on_team.exists()
            )
            .order_by(Participation.registered_at, User.id)
        )
        return list(self.db.execute(stmt).scalars().all())
