from abc import ABC, abstractmethod
from typing import List, Optional

from chill_match.domain.models.like import Like


class LikeRepository(ABC):
    @abstractmethod
    async def create(self, like: Like) -> Like:
        pass

    @abstractmethod
    async def get(self, from_user_id: int, to_user_id: int) -> Optional[Like]:
        pass

    @abstractmethod
    async def get_by_from_user(self, user_id: int) -> List[Like]:
        pass

    @abstractmethod
    async def get_by_to_user(self, user_id: int) -> List[Like]:
        pass
