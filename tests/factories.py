from datetime import datetime
from typing import List, Optional, Sequence

from chill_match.domain.models.preferences import Preferences
from chill_match.domain.models.streaming_service import StreamingService
from chill_match.domain.models.user import User as DomainUser
from chill_match.domain.models.watch_history import WatchHistoryItem


class UserFactory:
    """Factory for creating test users"""

    def create_domain_user(
        self,
        *,
        id: Optional[int] = None,
        username: str = "testuser",
        email: Optional[str] = None,
        age: int = 25,
        services: Sequence[str] = (),
        history: Sequence[str] = (),
        genres: Sequence[str] = (),
        binge_watch_count: Optional[int] = None,
        created_at: Optional[datetime] = None,
    ) -> DomainUser:
        """Create a domain user with the given viewing profile"""
        if created_at is None:
            created_at = datetime(2024, 1, 1)

        return DomainUser(
            id=id,
            username=username,
            email=email or f"{username}@example.com",
            age=age,
            created_at=created_at,
            streaming_services=[StreamingService(name=name) for name in services],
            watch_history=[WatchHistoryItem(title=title, content_type="tvshow") for title in history],
            preferences=Preferences(genres=list(genres), binge_watch_count=binge_watch_count),
        )

    def create_user_data(
        self, *, username: str = "testuser", email: Optional[str] = None, age: int = 25, location: str = "New York"
    ) -> dict:
        """Create user data dictionary for API tests"""
        return {
            "username": username,
            "email": email or f"{username}@example.com",
            "age": age,
            "location": location,
            "bio": "Here for the popcorn",
        }

    def alice(self, id: int = 1) -> DomainUser:
        return self.create_domain_user(
            id=id,
            username="alice",
            services=["Netflix", "Hulu", "Disney+"],
            history=["Stranger Things"],
            genres=["Sci-Fi", "Drama"],
            binge_watch_count=5,
        )

    def bob(self, id: int = 2) -> DomainUser:
        return self.create_domain_user(
            id=id,
            username="bob",
            services=["Netflix", "Prime Video", "Disney+"],
            history=["Stranger Things", "The Mandalorian"],
            genres=["Sci-Fi", "Action"],
            binge_watch_count=4,
        )

    def twins(self, first_id: int, second_id: int) -> List[DomainUser]:
        """Two users with identical viewing profiles"""
        return [
            self.create_domain_user(
                id=user_id,
                username=f"twin{user_id}",
                services=["Netflix"],
                history=["Dark"],
                genres=["Thriller"],
                binge_watch_count=3,
            )
            for user_id in (first_id, second_id)
        ]


# Global factory instance
user_factory = UserFactory()
