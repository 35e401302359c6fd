from chill_match.applications.interfaces.dtos.user import StreamingServiceSchema, UserPublic
from chill_match.applications.use_cases.user.profile_update import ProfileUpdateUseCase
from chill_match.domain.models.streaming_service import StreamingService
from chill_match.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class AddStreamingServiceUseCase(ProfileUpdateUseCase):
    async def execute(self, user_id: int, payload: StreamingServiceSchema) -> UserPublic:
        user = await self._load(user_id)
        service = StreamingService(id=payload.id, name=payload.name)

        if user.has_service(service):
            logger.info(f"User {user_id} already subscribes to {service.name}")
            return UserPublic.from_domain(user)

        user.streaming_services.append(service)
        return await self._save(user)
