from chill_match.applications.interfaces.dtos.user import BioUpdate, UserPublic
from chill_match.applications.use_cases.user.profile_update import ProfileUpdateUseCase


class UpdateBioUseCase(ProfileUpdateUseCase):
    async def execute(self, user_id: int, payload: BioUpdate) -> UserPublic:
        user = await self._load(user_id)
        user.bio = payload.bio
        return await self._save(user)
