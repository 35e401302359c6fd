from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from chill_match.applications.interfaces.dtos.match import MatchListResponse
from chill_match.domain.exceptions import DomainError, RepositoryError
from chill_match.domain.ports.services.match_finder_service_port import MatchFinderServicePort
from chill_match.infrastructure.config.dependencies import get_match_finder_service, get_scoring_settings
from chill_match.infrastructure.config.settings import ScoringSettings
from chill_match.infrastructure.logging.logger import Logger
from chill_match.presentation.errors import to_http_exception

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("/find/{user_id}", response_model=MatchListResponse)
async def find_matches(
    user_id: int,
    match_finder: Annotated[MatchFinderServicePort, Depends(get_match_finder_service)],
    scoring_settings: Annotated[ScoringSettings, Depends(get_scoring_settings)],
    min_score: Annotated[Optional[int], Query(alias="minScore", ge=0, le=100)] = None,
    limit: Annotated[Optional[int], Query(ge=1, le=1000)] = None,
    exclude_interacted: Annotated[bool, Query(alias="excludeInteracted")] = True,
):
    """Rank the other users by compatibility with the given user"""
    if min_score is None:
        min_score = scoring_settings.default_min_score

    try:
        result = await match_finder.find_matches(
            user_id=user_id,
            min_score=min_score,
            limit=limit,
            exclude_interacted=exclude_interacted,
        )
        return MatchListResponse.model_validate(result.model_dump())
    except RepositoryError:
        logger.exception(f"Store unavailable while finding matches for user {user_id}")
        raise HTTPException(status_code=503, detail="Service unavailable")
    except DomainError as e:
        logger.warning(f"Match search for user {user_id} rejected: {e}")
        raise to_http_exception(e)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Unhandled error finding matches")
        raise HTTPException(status_code=500, detail="Internal server error")
