"""
Matching Data Source Interface - What the engine needs from persistence.

Implementations return read-only snapshots; the engine never writes back.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from core.matching.models import (
    CandidateProfile, TeamProfile, TeamPreferences, TeamSummary, UserSummary
)


class MatchingDataSource(ABC):
    """
    Abstract lookup/enumeration contract consumed by TeamMatchingService.
    """

    # Batch scoring only fans out to worker threads when the source says it is safe
    supports_concurrent_reads: bool = False

    @abstractmethod
    def get_candidate_profile(self, user_id: str) -> Optional[CandidateProfile]:
        """
        Skills, experience, timezone and working hours for a user.

        Returns None when the user does not exist.
        """
        pass

    @abstractmethod
    def get_team_profile(self, team_id: str) -> Optional[TeamProfile]:
        """
        Members, capacity and leader of a team.

        Returns None when the team does not exist.
        """
        pass

    @abstractmethod
    def get_team_preferences(self, team_id: str, hackathon_id: str) -> Optional[TeamPreferences]:
        """
        Preferences the team set for a hackathon, falling back to its leader's
        personal preferences for the same hackathon.

        Returns None when neither exists (caller substitutes defaults).
        """
        pass

    @abstractmethod
    def get_team_summary(self, team_id: str) -> Optional[TeamSummary]:
        """Display data for a team."""
        pass

    @abstractmethod
    def get_user_summary(self, user_id: str) -> Optional[UserSummary]:
        """Display data for a user."""
        pass

    @abstractmethod
    def list_recruiting_teams(self, hackathon_id: str, exclude_user_id: str) -> List[str]:
        """IDs of teams in the hackathon that are recruiting and do not include the user."""
        pass

    @abstractmethod
    def list_unteamed_participants(self, hackathon_id: str) -> List[str]:
        """IDs of registered participants of the hackathon who are on no team in it."""
        pass
