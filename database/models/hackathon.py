from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base, new_id


class Hackathon(Base):
    __tablename__ = 'hackathons'

    id = Column(Text, primary_key=True, default=new_id)
    title = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default='DRAFT')  # DRAFT|APPROVED|ACTIVE|ENDED
    registration_deadline = Column(TIMESTAMP(timezone=True))
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    participations = relationship("Participation", back_populates="hackathon", cascade="all, delete-orphan")
    teams = relationship("Team", back_populates="hackathon", cascade="all, delete-orphan")


class Participation(Base):
    """A user's registration for a hackathon."""
    __tablename__ = 'participations'

    id = Column(Text, primary_key=True, default=new_id)
    hackathon_id = Column(Text, ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    status = Column(Text, nullable=False, default='REGISTERED')  # REGISTERED|WITHDRAWN|DISQUALIFIED
    registered_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    hackathon = relationship("Hackathon", back_populates="participations")
    user = relationship("User", back_populates="participations")

    __table_args__ = (
        UniqueConstraint('hackathon_id', 'user_id', name='uq_participation_hackathon_user'),
        Index('idx_participations_hackathon_status', 'hackathon_id', 'status'),
    )
