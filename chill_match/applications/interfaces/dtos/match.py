from typing import List

from chill_match.applications.interfaces.dtos.camel import CamelModel
from chill_match.applications.interfaces.dtos.user import StreamingServiceSchema, WatchHistoryPublic


class CompatibilityBreakdownResponse(CamelModel):
    shared_services: int
    shared_history: int
    genre_match: int
    frequency_match: int


class CompatibilityFactorResponse(CamelModel):
    name: str
    score: int
    max_score: int


class MatchResultResponse(CamelModel):
    """Response schema for a single scored candidate"""

    user_id: int
    compatibility_score: int
    shared_services: List[StreamingServiceSchema]
    shared_watch_history: List[WatchHistoryPublic]
    compatibility_breakdown: CompatibilityBreakdownResponse
    compatibility_factors: List[CompatibilityFactorResponse]


class MatchListResponse(CamelModel):
    """Response schema for match discovery results"""

    user_id: int
    matches: List[MatchResultResponse]
