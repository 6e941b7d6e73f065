from .base import Base, JSONType
from .user import User
from .hackathon import Hackathon, Participation
from .team import Team, TeamMember
from .preferences import TeamPreferencesRecord

__all__ = [
    'Base',
    'JSONType',
    'User',
    'Hackathon',
    'Participation',
    'Team',
    'TeamMember',
    'TeamPreferencesRecord',
]
