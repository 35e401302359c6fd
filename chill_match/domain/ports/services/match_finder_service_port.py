from abc import ABC, abstractmethod
from typing import Optional

from chill_match.domain.models.match import MatchList


class MatchFinderServicePort(ABC):
    """Port for match discovery operations"""

    @abstractmethod
    async def find_matches(
        self,
        user_id: int,
        min_score: int = 0,
        limit: Optional[int] = None,
        exclude_interacted: bool = True,
    ) -> MatchList:
        """Rank every candidate whose compatibility with the user reaches min_score"""
        pass
