from chill_match.applications.interfaces.dtos.user import UserPublic, UserSchema
from chill_match.domain.exceptions import ConflictError
from chill_match.domain.models.user import User
from chill_match.domain.ports.repositories.user_repository import UserRepository
from chill_match.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_data: UserSchema) -> UserPublic:
        logger.info(f"Creating user: {user_data.username}")

        existing_user = await self.user_repository.get_by_email(user_data.email)
        if existing_user:
            raise ConflictError("User with this email already exists")

        user = User(
            username=user_data.username,
            email=user_data.email,
            age=user_data.age,
            location=user_data.location,
            bio=user_data.bio,
        )

        created_user = await self.user_repository.create(user)
        if created_user.id is None:
            raise RuntimeError("User creation failed - no ID assigned")

        logger.info(f"User created successfully: {created_user.username} (ID: {created_user.id})")
        return UserPublic.from_domain(created_user)
