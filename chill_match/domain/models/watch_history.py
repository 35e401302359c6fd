from datetime import datetime, timezone
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field


class WatchHistoryItem(BaseModel):
    title: str = Field(min_length=1)
    content_type: str = Field(default="movie", validation_alias=AliasChoices("content_type", "type", "contentType"))
    genre: Optional[str] = None
    service: Optional[str] = None
    episodes_watched: int = Field(
        default=1, ge=0, validation_alias=AliasChoices("episodes_watched", "episodesWatched")
    )
    tmdb_id: Optional[int] = Field(default=None, validation_alias=AliasChoices("tmdb_id", "tmdbId"))
    watched_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        validation_alias=AliasChoices("watched_at", "watchedAt"),
    )

    @property
    def title_key(self) -> str:
        return self.title.strip().casefold()

    def same_content(self, other: "WatchHistoryItem") -> bool:
        """TMDB ids decide when both entries carry one, titles otherwise"""
        if self.tmdb_id is not None and other.tmdb_id is not None:
            return self.tmdb_id == other.tmdb_id
        return self.title_key == other.title_key


class FavoriteMovie(BaseModel):
    tmdb_id: int = Field(validation_alias=AliasChoices("tmdb_id", "tmdbId", "id"))
    title: str
    poster_path: Optional[str] = Field(default=None, validation_alias=AliasChoices("poster_path", "posterPath"))
    genres: List[str] = Field(default_factory=list)
