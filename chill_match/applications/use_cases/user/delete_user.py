from chill_match.applications.interfaces.dtos.message import Message
from chill_match.domain.exceptions import NotFoundError
from chill_match.domain.ports.repositories.user_repository import UserRepository


class DeleteUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> Message:
        existing_user = await self.user_repository.get_user(user_id)
        if not existing_user:
            raise NotFoundError(f"User with ID {user_id} not found")

        success = await self.user_repository.delete(user_id)
        if not success:
            raise RuntimeError("Failed to delete user")

        return Message(message="User deleted")
