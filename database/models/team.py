from sqlalchemy import Column, Text, Integer, TIMESTAMP, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base, new_id


class Team(Base):
    """
    A hackathon team.

    Only teams with status RECRUITING are offered as recommendations.
    """
    __tablename__ = 'teams'

    id = Column(Text, primary_key=True, default=new_id)
    hackathon_id = Column(Text, ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    leader_id = Column(Text, ForeignKey('users.id'), nullable=False)

    name = Column(Text, nullable=False)
    description = Column(Text)
    max_members = Column(Integer, nullable=False, default=5)
    status = Column(Text, nullable=False, default='RECRUITING')  # RECRUITING|FULL|COMPETING|COMPLETED

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    hackathon = relationship("Hackathon", back_populates="teams")
    leader = relationship("User")
    members = relationship("TeamMember", back_populates="team", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_teams_hackathon_status', 'hackathon_id', 'status'),
    )


class TeamMember(Base):
    __tablename__ = 'team_members'

    id = Column(Text, primary_key=True, default=new_id)
    team_id = Column(Text, ForeignKey('teams.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    role = Column(Text, nullable=False, default='member')  # leader|member
    joined_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    team = relationship("Team", back_populates="members")
    user = relationship("User", back_populates="team_memberships")

    __table_args__ = (
        UniqueConstraint('team_id', 'user_id', name='uq_team_member'),
        Index('idx_team_members_user', 'user_id'),
    )
