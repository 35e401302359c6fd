from chill_match.applications.interfaces.dtos.like import LikePublic, LikeResult, LikeSchema
from chill_match.domain.exceptions import ConflictError, NotFoundError, ValidationError
from chill_match.domain.models.like import Like
from chill_match.domain.ports.repositories.like_repository import LikeRepository
from chill_match.domain.ports.repositories.user_repository import UserRepository
from chill_match.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateLikeUseCase:
    def __init__(self, user_repository: UserRepository, like_repository: LikeRepository):
        self.user_repository = user_repository
        self.like_repository = like_repository

    async def execute(self, payload: LikeSchema) -> LikeResult:
        if payload.from_user_id == payload.to_user_id:
            raise ValidationError("Users cannot like themselves")

        for user_id in (payload.from_user_id, payload.to_user_id):
            if not await self.user_repository.get_user(user_id):
                raise NotFoundError(f"User with ID {user_id} not found")

        if await self.like_repository.get(payload.from_user_id, payload.to_user_id):
            raise ConflictError(f"User {payload.from_user_id} already reacted to user {payload.to_user_id}")

        like = await self.like_repository.create(
            Like(from_user_id=payload.from_user_id, to_user_id=payload.to_user_id, type=payload.type)
        )

        is_mutual = False
        if like.type.is_positive:
            reverse = await self.like_repository.get(payload.to_user_id, payload.from_user_id)
            is_mutual = reverse is not None and reverse.type.is_positive

        if is_mutual:
            logger.info(f"Mutual like between users {like.from_user_id} and {like.to_user_id}")

        return LikeResult(like=LikePublic.from_domain(like), is_mutual=is_mutual)
