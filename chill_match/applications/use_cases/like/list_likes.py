from chill_match.applications.interfaces.dtos.like import LikeList, LikePublic
from chill_match.domain.exceptions import NotFoundError
from chill_match.domain.ports.repositories.like_repository import LikeRepository
from chill_match.domain.ports.repositories.user_repository import UserRepository


class ListLikesUseCase:
    def __init__(self, user_repository: UserRepository, like_repository: LikeRepository):
        self.user_repository = user_repository
        self.like_repository = like_repository

    async def _ensure_user(self, user_id: int) -> None:
        if not await self.user_repository.get_user(user_id):
            raise NotFoundError(f"User with ID {user_id} not found")

    async def sent(self, user_id: int) -> LikeList:
        await self._ensure_user(user_id)
        likes = await self.like_repository.get_by_from_user(user_id)
        return self._to_list(user_id, likes)

    async def received(self, user_id: int) -> LikeList:
        await self._ensure_user(user_id)
        likes = await self.like_repository.get_by_to_user(user_id)
        return self._to_list(user_id, likes)

    async def mutual(self, user_id: int) -> LikeList:
        """Positive likes sent by the user that were returned by the other side"""
        await self._ensure_user(user_id)
        sent = [like for like in await self.like_repository.get_by_from_user(user_id) if like.type.is_positive]
        admirers = {
            like.from_user_id for like in await self.like_repository.get_by_to_user(user_id) if like.type.is_positive
        }
        return self._to_list(user_id, [like for like in sent if like.to_user_id in admirers])

    @staticmethod
    def _to_list(user_id: int, likes) -> LikeList:
        return LikeList(user_id=user_id, count=len(likes), likes=[LikePublic.from_domain(like) for like in likes])
