from chill_match.applications.interfaces.dtos.user import FavoriteMovieSchema, UserPublic
from chill_match.applications.use_cases.user.profile_update import ProfileUpdateUseCase
from chill_match.domain.models.watch_history import FavoriteMovie


class AddFavoriteMovieUseCase(ProfileUpdateUseCase):
    async def execute(self, user_id: int, payload: FavoriteMovieSchema) -> UserPublic:
        user = await self._load(user_id)

        if not any(movie.tmdb_id == payload.tmdb_id for movie in user.favorite_movies):
            user.favorite_movies.append(FavoriteMovie.model_validate(payload.model_dump()))
        return await self._save(user)
