from typing import List, Optional, Set

from chill_match.domain.exceptions import NotFoundError, ValidationError
from chill_match.domain.models.match import MatchList, MatchResult
from chill_match.domain.ports.repositories.like_repository import LikeRepository
from chill_match.domain.ports.repositories.user_repository import UserRepository
from chill_match.domain.ports.services.logger import LoggerPort
from chill_match.domain.ports.services.match_finder_service_port import MatchFinderServicePort
from chill_match.domain.services.compatibility_scorer import CompatibilityScorer


class MatchFinderService(MatchFinderServicePort):
    """Application service ranking candidates by compatibility with a user"""

    def __init__(
        self,
        user_repository: UserRepository,
        like_repository: LikeRepository,
        scorer: CompatibilityScorer,
        logger: LoggerPort,
    ):
        self.user_repository = user_repository
        self.like_repository = like_repository
        self.scorer = scorer
        self.logger = logger

    async def find_matches(
        self,
        user_id: int,
        min_score: int = 0,
        limit: Optional[int] = None,
        exclude_interacted: bool = True,
    ) -> MatchList:
        if not 0 <= min_score <= 100:
            raise ValidationError("min_score must be between 0 and 100")
        if limit is not None and limit < 1:
            raise ValidationError("limit must be positive")

        self.logger.info(f"Finding matches for user {user_id} (min_score={min_score}, limit={limit})")

        user = await self.user_repository.get_user(user_id)
        if not user:
            raise NotFoundError(f"User with ID {user_id} not found")

        excluded = await self._interacted_user_ids(user_id) if exclude_interacted else set()
        candidates = await self.user_repository.list_users()

        matches: List[MatchResult] = []
        for candidate in candidates:
            if candidate.id is None or candidate.id == user_id or candidate.id in excluded:
                continue

            result = self.scorer.score(user, candidate)
            if result.compatibility_score >= min_score:
                matches.append(result)

        # sorted() is stable, so equal scores keep store order
        matches = sorted(matches, key=lambda match: match.compatibility_score, reverse=True)
        if limit is not None:
            matches = matches[:limit]

        self.logger.info(f"Found {len(matches)} matches for user {user_id} out of {len(candidates)} users")
        return MatchList(user_id=user_id, matches=matches)

    async def _interacted_user_ids(self, user_id: int) -> Set[int]:
        likes = await self.like_repository.get_by_from_user(user_id)
        return {like.to_user_id for like in likes}
