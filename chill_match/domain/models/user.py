from datetime import datetime
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from chill_match.domain.models.preferences import Preferences
from chill_match.domain.models.streaming_service import StreamingService
from chill_match.domain.models.watch_history import FavoriteMovie, WatchHistoryItem


class User(BaseModel):
    username: str
    email: str
    age: Optional[int] = None
    location: str = ""
    bio: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    streaming_services: List[StreamingService] = Field(
        default_factory=list, validation_alias=AliasChoices("streaming_services", "streamingServices")
    )
    preferences: Preferences = Field(default_factory=Preferences)
    watch_history: List[WatchHistoryItem] = Field(
        default_factory=list, validation_alias=AliasChoices("watch_history", "watchHistory")
    )
    favorite_movies: List[FavoriteMovie] = Field(
        default_factory=list, validation_alias=AliasChoices("favorite_movies", "favoriteMovies")
    )

    @field_validator("streaming_services", "watch_history", "favorite_movies", mode="before")
    @classmethod
    def empty_when_missing(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("preferences", mode="before")
    @classmethod
    def default_preferences(cls, value: Any) -> Any:
        return Preferences() if value is None else value

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("location", "bio", mode="before")
    @classmethod
    def empty_text(cls, value: Any) -> Any:
        return "" if value is None else value

    def has_service(self, service: StreamingService) -> bool:
        return any(
            existing.key == service.key or (service.id is not None and existing.id == service.id)
            for existing in self.streaming_services
        )
