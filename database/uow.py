import contextlib
from typing import Optional

from sqlalchemy.orm import sessionmaker

from database.database import db_session_scope
from database.repository import MatchingRepository


@contextlib.contextmanager
def matching_uow(session_factory: Optional[sessionmaker] = None):
    """Per-unit-of-work transaction scope.

    Yields a MatchingRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with matching_uow() as repo:
            service = TeamMatchingService(repo, config.matching)
            items = service.recommend_teams_for_user(user_id, hackathon_id)
    """
    with db_session_scope(session_factory) as session:
        yield MatchingRepository(session)
