from typing import Optional

from pydantic import BaseModel, Field, field_validator


class StreamingService(BaseModel):
    id: Optional[int] = None
    name: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return value.strip()

    @property
    def key(self) -> str:
        """Identity used to compare subscriptions across users"""
        return self.name.strip().casefold()
