from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.team import TeamRepository
from database.repositories.preferences import TeamPreferencesRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'TeamRepository',
    'TeamPreferencesRepository',
]
