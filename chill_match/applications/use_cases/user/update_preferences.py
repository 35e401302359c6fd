from pydantic import ValidationError as PydanticValidationError

from chill_match.applications.interfaces.dtos.user import PreferencesUpdate, UserPublic
from chill_match.applications.use_cases.user.profile_update import ProfileUpdateUseCase
from chill_match.domain.exceptions import ValidationError
from chill_match.domain.models.preferences import Preferences


class UpdatePreferencesUseCase(ProfileUpdateUseCase):
    async def execute(self, user_id: int, payload: PreferencesUpdate) -> UserPublic:
        user = await self._load(user_id)

        # only the fields present in the request are changed
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        merged = user.preferences.model_dump()
        merged.update(changes)
        try:
            user.preferences = Preferences.model_validate(merged)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid preferences: {e}") from e
        return await self._save(user)
