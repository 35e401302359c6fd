import argparse
import json
import time

import requests

DEMO_PROFILES = [
    {
        "user": {"username": "alice", "age": 25, "location": "New York", "bio": "Love sci-fi and thriller shows!"},
        "services": [{"id": 8, "name": "Netflix"}, {"id": 15, "name": "Hulu"}, {"id": 337, "name": "Disney Plus"}],
        "history": [
            {"title": "Stranger Things", "contentType": "tvshow", "genre": "Sci-Fi", "service": "Netflix"},
            {"title": "The Crown", "contentType": "tvshow", "genre": "Drama", "service": "Netflix"},
            {"title": "The Handmaid's Tale", "contentType": "tvshow", "genre": "Drama", "service": "Hulu"},
        ],
        "preferences": {"genres": ["Sci-Fi", "Thriller", "Drama"], "bingeWatchCount": 5},
    },
    {
        "user": {"username": "bob", "age": 27, "location": "Los Angeles", "bio": "Binge-watcher and movie enthusiast"},
        "services": [
            {"id": 8, "name": "Netflix"},
            {"id": 9, "name": "Amazon Prime Video"},
            {"id": 337, "name": "Disney Plus"},
        ],
        "history": [
            {"title": "Stranger Things", "contentType": "tvshow", "genre": "Sci-Fi", "service": "Netflix"},
            {"title": "The Mandalorian", "contentType": "tvshow", "genre": "Sci-Fi", "service": "Disney Plus"},
            {"title": "Jack Ryan", "contentType": "tvshow", "genre": "Action", "service": "Amazon Prime Video"},
        ],
        "preferences": {"genres": ["Sci-Fi", "Action", "Adventure"], "bingeWatchCount": 4},
    },
    {
        "user": {"username": "carol", "age": 31, "location": "Chicago", "bio": "Documentaries only"},
        "services": [{"id": 386, "name": "Peacock"}],
        "history": [{"title": "Planet Earth", "contentType": "series", "genre": "Documentary", "service": "Peacock"}],
        "preferences": {"genres": ["Documentary"], "bingeWatchCount": 1},
    },
]


def seed_profile(session: requests.Session, base_url: str, profile: dict, suffix: str, timeout: float) -> int:
    user = dict(profile["user"], email=f"{profile['user']['username']}_{suffix}@example.com")
    r = session.post(f"{base_url}/users/", json=user, timeout=timeout)
    r.raise_for_status()
    user_id = r.json()["id"]

    r = session.put(
        f"{base_url}/users/{user_id}/streaming-services",
        json={"services": profile["services"]},
        timeout=timeout,
    )
    r.raise_for_status()
    for item in profile["history"]:
        r = session.post(f"{base_url}/users/{user_id}/watch-history", json=item, timeout=timeout)
        r.raise_for_status()
    r = session.put(f"{base_url}/users/{user_id}/preferences", json=profile["preferences"], timeout=timeout)
    r.raise_for_status()
    return user_id


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo users and print the first user's matches")
    parser.add_argument("--base_url", type=str, default="http://localhost:8000")
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--min_score", type=int, default=0)
    args = parser.parse_args()

    base_url = args.base_url.rstrip("/")
    suffix = str(int(time.time()))

    with requests.Session() as session:
        user_ids = [seed_profile(session, base_url, profile, suffix, args.timeout) for profile in DEMO_PROFILES]
        print(f"Seeded users: {user_ids}")

        r = session.get(
            f"{base_url}/matches/find/{user_ids[0]}", params={"minScore": args.min_score}, timeout=args.timeout
        )
        print(r.status_code)
        print(json.dumps(r.json(), indent=2))


if __name__ == "__main__":
    main()
