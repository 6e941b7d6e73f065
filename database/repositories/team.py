import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import Team, TeamMember
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class TeamRepository(BaseRepository):
    def get_by_id(self, team_id: str) -> Optional[Team]:
        stmt = (
            select(Team)
            .options(selectinload(Team.members), selectinload(Team.leader))
            .where(Team.id == team_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_recruiting_teams(self, hackathon_id: str, exclude_user_id: Optional[str] = None) -> List[Team]:
        """Recruiting teams of the hackathon, minus any the user already belongs to."""
        stmt = select(Team).where(
            Team.hackathon_id == hackathon_id,
            Team.status == 'RECRUITING'
        )

        if exclude_user_id is not None:
            is_member = select(TeamMember.id).where(
                TeamMember.team_id == Team.id,
                TeamMember.user_id == exclude_user_id
            )
            stmt = stmt.where(~is_member.exists())

        stmt = stmt.order_by(Team.created_at, Team.id)
        return list(self.db.execute(stmt).scalars().all())
