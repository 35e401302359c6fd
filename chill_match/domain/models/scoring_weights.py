from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from chill_match.domain.exceptions import ConfigurationError

if TYPE_CHECKING:
    from chill_match.infrastructure.config.settings import ScoringSettings


class ScoringWeights(BaseModel):
    shared_services: int = Field(default=30, ge=0)
    shared_history: int = Field(default=30, ge=0)
    genre_match: int = Field(default=25, ge=0)
    frequency_match: int = Field(default=15, ge=0)
    # binge-count difference at which the frequency factor drops to zero
    frequency_tolerance: int = Field(default=10, ge=0)

    @property
    def total(self) -> int:
        return self.shared_services + self.shared_history + self.genre_match + self.frequency_match

    @classmethod
    def from_settings(cls, settings: "ScoringSettings") -> "ScoringWeights":
        try:
            weights = cls(
                shared_services=settings.shared_services_weight,
                shared_history=settings.shared_history_weight,
                genre_match=settings.genre_weight,
                frequency_match=settings.frequency_weight,
                frequency_tolerance=settings.frequency_tolerance,
            )
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid scoring weights: {e}") from e

        if weights.total != 100:
            raise ConfigurationError(f"Scoring weights must sum to 100, got {weights.total}")
        return weights
