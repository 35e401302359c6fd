from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, EmailStr, Field, model_validator

from chill_match.applications.interfaces.dtos.camel import CamelModel
from chill_match.domain.models.user import User


class UserSchema(CamelModel):
    username: str = Field(min_length=1)
    email: EmailStr
    age: Optional[int] = Field(default=None, ge=18, le=120)
    location: str = ""
    bio: str = ""


class StreamingServiceSchema(CamelModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, validation_alias=AliasChoices("name", "serviceName", "service_name"))


class StreamingServicesUpdate(CamelModel):
    services: List[StreamingServiceSchema]


class WatchHistorySchema(CamelModel):
    title: str = Field(min_length=1)
    content_type: str = Field(default="movie", validation_alias=AliasChoices("content_type", "contentType", "type"))
    genre: Optional[str] = None
    service: Optional[str] = None
    episodes_watched: int = Field(default=1, ge=0)
    tmdb_id: Optional[int] = None
    watched_at: Optional[datetime] = None


class AgeRangeSchema(CamelModel):
    min: int = Field(default=18, ge=18)
    max: int = Field(default=100, le=120)

    @model_validator(mode="after")
    def check_bounds(self) -> "AgeRangeSchema":
        if self.min > self.max:
            raise ValueError("age range min must not exceed max")
        return self


class PreferencesSchema(CamelModel):
    genres: List[str] = Field(default_factory=list)
    binge_watch_count: Optional[int] = None
    age_range: AgeRangeSchema = Field(default_factory=AgeRangeSchema)


class PreferencesUpdate(CamelModel):
    genres: Optional[List[str]] = None
    binge_watch_count: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices(
            "binge_watch_count", "bingeWatchCount", "bingeWatchingCount", "binge_watching_count"
        ),
    )
    age_range: Optional[AgeRangeSchema] = None


class BioUpdate(CamelModel):
    bio: str = Field(min_length=1)


class FavoriteMovieSchema(CamelModel):
    tmdb_id: int
    title: str = Field(min_length=1)
    poster_path: Optional[str] = None
    genres: List[str] = Field(default_factory=list)


class WatchHistoryPublic(CamelModel):
    title: str
    content_type: str
    genre: Optional[str] = None
    service: Optional[str] = None
    episodes_watched: int
    tmdb_id: Optional[int] = None
    watched_at: datetime


class UserPublic(CamelModel):
    id: int
    username: str
    email: str
    age: Optional[int] = None
    location: str = ""
    bio: str = ""
    streaming_services: List[StreamingServiceSchema] = Field(default_factory=list)
    preferences: PreferencesSchema = Field(default_factory=PreferencesSchema)
    watch_history: List[WatchHistoryPublic] = Field(default_factory=list)
    favorite_movies: List[FavoriteMovieSchema] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserPublic":
        return cls.model_validate(user.model_dump())


class UserList(CamelModel):
    users: list[UserPublic]
