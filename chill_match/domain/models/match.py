from typing import List

from pydantic import BaseModel, Field

from chill_match.domain.models.streaming_service import StreamingService
from chill_match.domain.models.watch_history import WatchHistoryItem


class CompatibilityBreakdown(BaseModel):
    """Points earned per factor; the fields add up to the total score"""

    shared_services: int = 0
    shared_history: int = 0
    genre_match: int = 0
    frequency_match: int = 0

    @property
    def total(self) -> int:
        return self.shared_services + self.shared_history + self.genre_match + self.frequency_match


class CompatibilityFactor(BaseModel):
    name: str
    score: int
    max_score: int


class MatchResult(BaseModel):
    """Compatibility of a candidate as seen by the requesting user"""

    user_id: int
    compatibility_score: int = Field(ge=0, le=100)
    shared_services: List[StreamingService] = Field(default_factory=list)
    shared_watch_history: List[WatchHistoryItem] = Field(default_factory=list)
    compatibility_breakdown: CompatibilityBreakdown = Field(default_factory=CompatibilityBreakdown)
    compatibility_factors: List[CompatibilityFactor] = Field(default_factory=list)


class MatchList(BaseModel):
    user_id: int
    matches: List[MatchResult]
