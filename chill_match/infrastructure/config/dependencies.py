from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chill_match.applications.services.match_finder_service import MatchFinderService
from chill_match.domain.models.scoring_weights import ScoringWeights
from chill_match.domain.ports.repositories.like_repository import LikeRepository
from chill_match.domain.ports.repositories.user_repository import UserRepository
from chill_match.domain.ports.services.logger import LoggerPort
from chill_match.domain.ports.services.match_finder_service_port import MatchFinderServicePort
from chill_match.domain.services.compatibility_scorer import CompatibilityScorer
from chill_match.infrastructure.adapters.repositories.sqlalchemy_like_repository import SQLAlchemyLikeRepository
from chill_match.infrastructure.adapters.repositories.sqlalchemy_user_repository import SQLAlchemyUserRepository
from chill_match.infrastructure.config.settings import ScoringSettings, Settings
from chill_match.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from chill_match.infrastructure.persistence.database import get_session


def get_logger() -> LoggerPort:
    return StdLoggerAdapter(__name__)


def get_settings() -> Settings:
    return Settings()


def get_scoring_settings() -> ScoringSettings:
    return ScoringSettings()


def get_scoring_weights(
    scoring_settings: Annotated[ScoringSettings, Depends(get_scoring_settings)],
) -> ScoringWeights:
    return ScoringWeights.from_settings(scoring_settings)


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    return SQLAlchemyUserRepository(session)


def get_like_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> LikeRepository:
    return SQLAlchemyLikeRepository(session)


def get_compatibility_scorer(weights: Annotated[ScoringWeights, Depends(get_scoring_weights)]) -> CompatibilityScorer:
    return CompatibilityScorer(weights)


def get_match_finder_service(
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    like_repository: Annotated[LikeRepository, Depends(get_like_repository)],
    scorer: Annotated[CompatibilityScorer, Depends(get_compatibility_scorer)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MatchFinderServicePort:
    return MatchFinderService(
        user_repository=user_repository,
        like_repository=like_repository,
        scorer=scorer,
        logger=logger,
    )
