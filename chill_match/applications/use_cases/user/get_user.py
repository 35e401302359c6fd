from chill_match.applications.interfaces.dtos.user import UserPublic
from chill_match.domain.exceptions import NotFoundError
from chill_match.domain.ports.repositories.user_repository import UserRepository


class GetUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> UserPublic:
        user = await self.user_repository.get_user(user_id)
        if not user:
            raise NotFoundError(f"User with ID {user_id} not found")
        return UserPublic.from_domain(user)
