from chill_match.applications.interfaces.dtos.user import UserPublic
from chill_match.domain.exceptions import NotFoundError
from chill_match.domain.models.user import User
from chill_match.domain.ports.repositories.user_repository import UserRepository


class ProfileUpdateUseCase:
    """Base for use cases that load a user, change the profile and save it back"""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def _load(self, user_id: int) -> User:
        user = await self.user_repository.get_user(user_id)
        if not user:
            raise NotFoundError(f"User with ID {user_id} not found")
        return user

    async def _save(self, user: User) -> UserPublic:
        saved_user = await self.user_repository.update(user)
        return UserPublic.from_domain(saved_user)
