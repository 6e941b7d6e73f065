from sqlalchemy import Column, Text, Integer, Float, Boolean, TIMESTAMP, ForeignKey, UniqueConstraint, func

from .base import Base, JSONType, new_id


class TeamPreferencesRecord(Base):
    """
    Stored matching preferences for one hackathon.

    Owned either by a team (team_id set) or by a user acting as team leader
    (user_id set). Columns are nullable so partially-filled rows fall back to
    the built-in defaults field by field.
    """
    __tablename__ = 'team_preferences'

    id = Column(Text, primary_key=True, default=new_id)
    hackathon_id = Column(Text, ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    team_id = Column(Text, ForeignKey('teams.id', ondelete='CASCADE'))
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'))

    # Skills
    required_skills = Column(JSONType)
    preferred_skills = Column(JSONType)
    skill_match_weight = Column(Float)

    # Experience
    min_experience = Column(Text)
    max_experience = Column(Text)
    experience_weight = Column(Float)

    # Location
    preferred_timezones = Column(JSONType)
    location_flexible = Column(Boolean)
    location_weight = Column(Float)

    # Working mode
    working_hours = Column(JSONType)

    # Team size
    preferred_team_size = Column(Integer)
    max_team_size = Column(Integer)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint('team_id', 'hackathon_id', name='uq_team_preferences_team'),
        UniqueConstraint('user_id', 'hackathon_id', name='uq_team_preferences_user'),
    )

    PREFERENCE_FIELDS = (
        'required_skills', 'preferred_skills', 'skill_match_weight',
        'min_experience', 'max_experience', 'experience_weight',
        'preferred_timezones', 'location_flexible', 'location_weight',
        'working_hours', 'preferred_team_size', 'max_team_size',
    )
