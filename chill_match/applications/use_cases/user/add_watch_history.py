from chill_match.applications.interfaces.dtos.user import UserPublic, WatchHistorySchema
from chill_match.applications.use_cases.user.profile_update import ProfileUpdateUseCase
from chill_match.domain.models.watch_history import WatchHistoryItem


class AddWatchHistoryUseCase(ProfileUpdateUseCase):
    async def execute(self, user_id: int, payload: WatchHistorySchema) -> UserPublic:
        user = await self._load(user_id)

        item = WatchHistoryItem.model_validate(payload.model_dump(exclude_none=True))
        user.watch_history.append(item)
        return await self._save(user)
