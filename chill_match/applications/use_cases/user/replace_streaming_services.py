from chill_match.applications.interfaces.dtos.user import StreamingServicesUpdate, UserPublic
from chill_match.applications.use_cases.user.profile_update import ProfileUpdateUseCase
from chill_match.domain.models.streaming_service import StreamingService


class ReplaceStreamingServicesUseCase(ProfileUpdateUseCase):
    async def execute(self, user_id: int, payload: StreamingServicesUpdate) -> UserPublic:
        user = await self._load(user_id)

        services = []
        for entry in payload.services:
            service = StreamingService(id=entry.id, name=entry.name)
            if any(existing.key == service.key for existing in services):
                continue
            services.append(service)

        user.streaming_services = services
        return await self._save(user)
