from typing import Dict, Iterable, List, Optional, Set, Tuple

from chill_match.domain.models.match import CompatibilityBreakdown, CompatibilityFactor, MatchResult
from chill_match.domain.models.scoring_weights import ScoringWeights
from chill_match.domain.models.streaming_service import StreamingService
from chill_match.domain.models.user import User
from chill_match.domain.models.watch_history import WatchHistoryItem

SHARED_SERVICES = "Shared Services"
SHARED_HISTORY = "Shared Watch History"
GENRE_MATCH = "Genre Match"
FREQUENCY_MATCH = "Frequency Match"


def jaccard(left: Set[str], right: Set[str]) -> float:
    union = left | right
    if not union:
        return 0.0
    return len(left & right) / len(union)


def distinct_titles(items: Iterable[WatchHistoryItem]) -> List[WatchHistoryItem]:
    """First entry of each watched title, in history order"""
    distinct: List[WatchHistoryItem] = []
    for item in items:
        if not _watched(item, distinct):
            distinct.append(item)
    return distinct


def _watched(item: WatchHistoryItem, history: Iterable[WatchHistoryItem]) -> bool:
    return any(item.same_content(other) for other in history)


class CompatibilityScorer:
    """Scores how well two users' viewing habits line up.

    Four factors contribute points out of their weight: shared streaming
    services, shared watch history and preferred genres (each a Jaccard
    index over normalized keys) and binge-frequency closeness, which falls
    linearly from the full weight at equal counts to zero once the counts
    differ by ``frequency_tolerance`` or more. Users who never reported a
    binge count get no frequency points. Each factor is rounded to whole
    points before summing so the breakdown always adds up to the total.

    The scorer holds no state besides its weights; ``score`` is a pure
    function of its two arguments.
    """

    def __init__(self, weights: Optional[ScoringWeights] = None):
        self.weights = weights or ScoringWeights()

    def score(self, user: User, candidate: User) -> MatchResult:
        if candidate.id is None:
            raise ValueError("Candidate must have an id to be scored")

        shared_services = self.shared_services(user, candidate)
        shared_history = self.shared_watch_history(user, candidate)

        breakdown = CompatibilityBreakdown(
            shared_services=self._points(self.weights.shared_services, self._service_ratio(user, candidate)),
            shared_history=self._points(self.weights.shared_history, self._history_ratio(user, candidate)),
            genre_match=self._points(
                self.weights.genre_match, jaccard(user.preferences.genre_keys, candidate.preferences.genre_keys)
            ),
            frequency_match=self._points(self.weights.frequency_match, self._frequency_ratio(user, candidate)),
        )

        return MatchResult(
            user_id=candidate.id,
            compatibility_score=max(0, min(100, breakdown.total)),
            shared_services=shared_services,
            shared_watch_history=shared_history,
            compatibility_breakdown=breakdown,
            compatibility_factors=[
                CompatibilityFactor(
                    name=SHARED_SERVICES, score=breakdown.shared_services, max_score=self.weights.shared_services
                ),
                CompatibilityFactor(
                    name=SHARED_HISTORY, score=breakdown.shared_history, max_score=self.weights.shared_history
                ),
                CompatibilityFactor(name=GENRE_MATCH, score=breakdown.genre_match, max_score=self.weights.genre_match),
                CompatibilityFactor(
                    name=FREQUENCY_MATCH, score=breakdown.frequency_match, max_score=self.weights.frequency_match
                ),
            ],
        )

    def shared_services(self, user: User, candidate: User) -> List[StreamingService]:
        """Services both users subscribe to, ordered by name.

        When the two records of a service differ (one carries a provider id, the
        other doesn't) the same record is picked whichever side asks, so the
        result is symmetric.
        """
        mine = self._index_services(user.streaming_services)
        theirs = self._index_services(candidate.streaming_services)

        shared = []
        for key in sorted(mine.keys() & theirs.keys()):
            shared.append(min(mine[key], theirs[key], key=self._service_sort_key))
        return shared

    def shared_watch_history(self, user: User, candidate: User) -> List[WatchHistoryItem]:
        """The user's own history entries that the candidate has also watched"""
        theirs = distinct_titles(candidate.watch_history)
        return [item for item in distinct_titles(user.watch_history) if _watched(item, theirs)]

    def _service_ratio(self, user: User, candidate: User) -> float:
        return jaccard(
            {service.key for service in user.streaming_services},
            {service.key for service in candidate.streaming_services},
        )

    def _history_ratio(self, user: User, candidate: User) -> float:
        mine = distinct_titles(user.watch_history)
        theirs = distinct_titles(candidate.watch_history)
        if not mine and not theirs:
            return 0.0

        # counted from both sides since an id-less title can match several id-carrying entries
        shared = min(
            sum(1 for item in mine if _watched(item, theirs)),
            sum(1 for item in theirs if _watched(item, mine)),
        )
        return shared / (len(mine) + len(theirs) - shared)

    def _frequency_ratio(self, user: User, candidate: User) -> float:
        mine = user.preferences.binge_watch_count
        theirs = candidate.preferences.binge_watch_count
        if mine is None or theirs is None:
            return 0.0

        tolerance = self.weights.frequency_tolerance
        difference = abs(mine - theirs)
        if tolerance <= 0:
            return 1.0 if difference == 0 else 0.0
        return max(0, tolerance - difference) / tolerance

    @staticmethod
    def _points(weight: int, ratio: float) -> int:
        return int(round(weight * ratio))

    @staticmethod
    def _index_services(services: Iterable[StreamingService]) -> Dict[str, StreamingService]:
        index: Dict[str, StreamingService] = {}
        for service in services:
            index.setdefault(service.key, service)
        return index

    @staticmethod
    def _service_sort_key(service: StreamingService) -> Tuple[bool, int, str]:
        return service.id is None, service.id or 0, service.name
