from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator


class AgeRange(BaseModel):
    min: int = Field(default=18, ge=18)
    max: int = Field(default=100, le=120)

    @model_validator(mode="after")
    def check_bounds(self) -> "AgeRange":
        if self.min > self.max:
            raise ValueError("age range min must not exceed max")
        return self


class Preferences(BaseModel):
    genres: List[str] = Field(default_factory=list)
    # None until the user reports how often they binge
    binge_watch_count: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("binge_watch_count", "bingeWatchCount", "bingeWatchingCount"),
    )
    age_range: AgeRange = Field(default_factory=AgeRange, validation_alias=AliasChoices("age_range", "ageRange"))

    @field_validator("genres", mode="before")
    @classmethod
    def normalize_genres(cls, value: Any) -> List[str]:
        # Older profiles stored genres as {"id": .., "name": ..} objects
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("genres must be a list")
        names = []
        for entry in value:
            if isinstance(entry, dict):
                entry = entry.get("name")
            if not isinstance(entry, str) or not entry.strip():
                continue
            names.append(entry.strip())

        seen = set()
        unique = []
        for name in names:
            if name.casefold() in seen:
                continue
            seen.add(name.casefold())
            unique.append(name)
        return unique

    @property
    def genre_keys(self) -> set:
        return {genre.casefold() for genre in self.genres}
