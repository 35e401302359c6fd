from http import HTTPStatus

import pytest

from .factories import user_factory


async def _create(api_client, username="testuser"):
    response = await api_client.post("/users/", json=user_factory.create_user_data(username=username))
    assert response.status_code == HTTPStatus.CREATED
    return response.json()


class TestUserEndpoints:
    @pytest.mark.asyncio
    async def test_root_and_health(self, api_client):
        assert (await api_client.get("/")).json() == {"message": "Netflix & Chill matching service"}
        assert (await api_client.get("/health")).json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_create_user(self, api_client):
        data = await _create(api_client)

        assert data["id"] == 1
        assert data["username"] == "testuser"
        assert data["streamingServices"] == []
        assert data["watchHistory"] == []
        assert data["preferences"]["genres"] == []
        assert data["preferences"]["bingeWatchCount"] is None

    @pytest.mark.asyncio
    async def test_create_duplicate_email(self, api_client):
        await _create(api_client)

        response = await api_client.post("/users/", json=user_factory.create_user_data())

        assert response.status_code == HTTPStatus.CONFLICT

    @pytest.mark.asyncio
    async def test_create_invalid_email(self, api_client):
        response = await api_client.post("/users/", json=user_factory.create_user_data(email="not-an-email"))

        assert response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_read_users(self, api_client):
        await _create(api_client, "alice")
        await _create(api_client, "bob")

        response = await api_client.get("/users/", params={"offset": 1, "limit": 10})

        assert [user["username"] for user in response.json()["users"]] == ["bob"]

    @pytest.mark.asyncio
    async def test_read_unknown_user(self, api_client):
        response = await api_client.get("/users/42")

        assert response.status_code == HTTPStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_profile_updates(self, api_client):
        user_id = (await _create(api_client))["id"]

        response = await api_client.put(
            f"/users/{user_id}/streaming-services",
            json={"services": [{"id": 8, "name": "Netflix"}, {"serviceName": "Hulu"}]},
        )
        assert [service["name"] for service in response.json()["streamingServices"]] == ["Netflix", "Hulu"]

        response = await api_client.post(f"/users/{user_id}/streaming-services", json={"name": "Max"})
        assert len(response.json()["streamingServices"]) == 3

        response = await api_client.post(
            f"/users/{user_id}/watch-history",
            json={"title": "Severance", "contentType": "tvshow", "episodesWatched": 9},
        )
        assert response.json()["watchHistory"][0]["episodesWatched"] == 9

        response = await api_client.put(
            f"/users/{user_id}/preferences",
            json={"genres": ["Sci-Fi", "sci-fi", "Drama"], "bingeWatchingCount": 6},
        )
        preferences = response.json()["preferences"]
        assert preferences["genres"] == ["Sci-Fi", "Drama"]
        assert preferences["bingeWatchCount"] == 6

        response = await api_client.put(f"/users/{user_id}/bio", json={"bio": "Severance theorist"})
        assert response.json()["bio"] == "Severance theorist"

        response = await api_client.post(
            f"/users/{user_id}/favorite-movies", json={"tmdbId": 603, "title": "The Matrix"}
        )
        assert response.json()["favoriteMovies"][0]["tmdbId"] == 603

    @pytest.mark.asyncio
    async def test_inverted_age_range_rejected(self, api_client):
        user_id = (await _create(api_client))["id"]

        response = await api_client.put(f"/users/{user_id}/preferences", json={"ageRange": {"min": 60, "max": 30}})

        assert response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
        stored = (await api_client.get(f"/users/{user_id}")).json()
        assert stored["preferences"]["ageRange"] == {"min": 18, "max": 100}

    @pytest.mark.asyncio
    async def test_profile_update_unknown_user(self, api_client):
        response = await api_client.put("/users/42/bio", json={"bio": "hello"})

        assert response.status_code == HTTPStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_user(self, api_client):
        user_id = (await _create(api_client))["id"]

        response = await api_client.delete(f"/users/{user_id}")

        assert response.json() == {"message": "User deleted"}
        assert (await api_client.get(f"/users/{user_id}")).status_code == HTTPStatus.NOT_FOUND


class TestLikeEndpoints:
    @pytest.mark.asyncio
    async def test_like_flow(self, api_client):
        alice = (await _create(api_client, "alice"))["id"]
        bob = (await _create(api_client, "bob"))["id"]

        response = await api_client.post("/likes/", json={"fromUserId": alice, "toUserId": bob})
        assert response.status_code == HTTPStatus.CREATED
        assert response.json()["isMutual"] is False

        response = await api_client.post("/likes/", json={"fromUserId": bob, "toUserId": alice, "type": "superlike"})
        assert response.json()["isMutual"] is True

        response = await api_client.get(f"/likes/{alice}/mutual")
        assert [like["toUserId"] for like in response.json()["likes"]] == [bob]

        response = await api_client.get(f"/likes/{alice}/received")
        assert response.json()["count"] == 1

    @pytest.mark.asyncio
    async def test_duplicate_like(self, api_client):
        alice = (await _create(api_client, "alice"))["id"]
        bob = (await _create(api_client, "bob"))["id"]
        await api_client.post("/likes/", json={"fromUserId": alice, "toUserId": bob})

        response = await api_client.post("/likes/", json={"fromUserId": alice, "toUserId": bob, "type": "pass"})

        assert response.status_code == HTTPStatus.CONFLICT

    @pytest.mark.asyncio
    async def test_self_like(self, api_client):
        alice = (await _create(api_client, "alice"))["id"]

        response = await api_client.post("/likes/", json={"fromUserId": alice, "toUserId": alice})

        assert response.status_code == HTTPStatus.BAD_REQUEST
