import pytest
from pydantic import ValidationError

from chill_match.domain.exceptions import ConfigurationError
from chill_match.domain.models.like import LikeType
from chill_match.domain.models.preferences import AgeRange, Preferences
from chill_match.domain.models.scoring_weights import ScoringWeights
from chill_match.domain.models.streaming_service import StreamingService
from chill_match.domain.models.user import User
from chill_match.domain.models.watch_history import WatchHistoryItem
from chill_match.infrastructure.config.settings import ScoringSettings


class TestUserNormalization:
    def test_legacy_document_is_normalized(self):
        """Stored documents with camelCase keys and genre objects load into the typed model"""
        user = User.model_validate(
            {
                "id": 7,
                "username": "legacy",
                "email": "Legacy@Example.com ",
                "location": None,
                "streamingServices": [{"id": 8, "name": "Netflix"}],
                "watchHistory": [{"title": "Dark", "type": "tvshow", "episodesWatched": 3, "tmdbId": 70523}],
                "preferences": {
                    "genres": [{"id": 878, "name": "Sci-Fi"}, "sci-fi", "Drama", "", None],
                    "bingeWatchingCount": 4,
                    "ageRange": {"min": 21, "max": 35},
                },
            }
        )

        assert user.email == "legacy@example.com"
        assert user.location == ""
        assert user.streaming_services[0].key == "netflix"
        assert user.watch_history[0].content_type == "tvshow"
        assert user.watch_history[0].tmdb_id == 70523
        assert user.preferences.genres == ["Sci-Fi", "Drama"]
        assert user.preferences.binge_watch_count == 4
        assert user.preferences.age_range == AgeRange(min=21, max=35)

    def test_missing_collections_default_to_empty(self):
        user = User.model_validate(
            {
                "username": "sparse",
                "email": "sparse@example.com",
                "streaming_services": None,
                "watch_history": None,
                "favorite_movies": None,
                "preferences": None,
            }
        )

        assert user.streaming_services == []
        assert user.watch_history == []
        assert user.favorite_movies == []
        assert user.preferences == Preferences()
        assert user.preferences.binge_watch_count is None

    def test_has_service_matches_name_or_id(self):
        user = User(username="u", email="u@example.com", streaming_services=[StreamingService(id=8, name="Netflix")])

        assert user.has_service(StreamingService(name=" netflix"))
        assert user.has_service(StreamingService(id=8, name="Netflix Standard"))
        assert not user.has_service(StreamingService(name="Hulu"))


class TestValueObjects:
    def test_watch_history_title_key(self):
        assert WatchHistoryItem(title=" Stranger Things ").title_key == "stranger things"

    def test_same_content_uses_tmdb_id_when_both_have_one(self):
        dune = WatchHistoryItem(title="Dune", tmdb_id=438631)

        assert dune.same_content(WatchHistoryItem(title="Dune: Part One", tmdb_id=438631))
        assert not dune.same_content(WatchHistoryItem(title="Dune", tmdb_id=841))

    def test_same_content_falls_back_to_title(self):
        with_id = WatchHistoryItem(title="Stranger Things", tmdb_id=66732)

        assert with_id.same_content(WatchHistoryItem(title=" stranger things"))
        assert not with_id.same_content(WatchHistoryItem(title="Dark"))

    def test_genre_string_is_a_single_genre(self):
        assert Preferences.model_validate({"genres": "Drama"}).genres == ["Drama"]

    def test_genres_must_be_a_list(self):
        with pytest.raises(ValidationError):
            Preferences.model_validate({"genres": 42})

    def test_watch_history_defaults_watched_at(self):
        assert WatchHistoryItem(title="Dark").watched_at is not None

    def test_age_range_bounds(self):
        with pytest.raises(ValidationError):
            AgeRange(min=40, max=30)

    def test_negative_binge_count_rejected(self):
        with pytest.raises(ValidationError):
            Preferences(binge_watch_count=-1)

    def test_like_type_positivity(self):
        assert LikeType.LIKE.is_positive
        assert LikeType.SUPERLIKE.is_positive
        assert not LikeType.PASS.is_positive


class TestScoringWeights:
    def test_defaults_from_settings(self):
        weights = ScoringWeights.from_settings(ScoringSettings())

        assert weights.total == 100
        assert weights.frequency_tolerance == 10

    def test_weights_must_sum_to_100(self):
        settings = ScoringSettings(shared_services_weight=50)

        with pytest.raises(ConfigurationError, match="sum to 100"):
            ScoringWeights.from_settings(settings)

    def test_negative_weight_rejected(self):
        settings = ScoringSettings(shared_services_weight=-10, genre_weight=65)

        with pytest.raises(ConfigurationError, match="Invalid scoring weights"):
            ScoringWeights.from_settings(settings)

    def test_settings_read_environment(self, monkeypatch):
        monkeypatch.setenv("MATCH_SHARED_SERVICES_WEIGHT", "40")
        monkeypatch.setenv("MATCH_GENRE_WEIGHT", "15")

        weights = ScoringWeights.from_settings(ScoringSettings())

        assert weights.shared_services == 40
        assert weights.genre_match == 15
