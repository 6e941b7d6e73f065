from sqlalchemy import Column, Text, Integer, TIMESTAMP, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType, new_id


class User(Base):
    """
    Platform user with the profile fields team matching reads.

    `preferences` is a loosely-typed payload; matching reads
    `experience`, `timezone` and `workingHours` ({start, end, timezone}) from it.
    """
    __tablename__ = 'users'

    id = Column(Text, primary_key=True, default=new_id)
    username = Column(Text, nullable=False, unique=True)
    email = Column(Text, unique=True)
    avatar_url = Column(Text)
    bio = Column(Text)

    skills = Column(JSONType, default=list)
    preferences = Column(JSONType, default=dict)

    reputation_score = Column(Integer, nullable=False, default=0)
    status = Column(Text, nullable=False, default='ACTIVE')  # ACTIVE|SUSPENDED|DELETED

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    participations = relationship("Participation", back_populates="user", cascade="all, delete-orphan")
    team_memberships = relationship("TeamMember", back_populates="user", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_users_username', 'username'),
    )
