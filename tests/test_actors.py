"""
Tests for actor and cast endpoints.
"""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, func, select

from app.core.config import settings
from app.models.actor import Cast


def _cast_rows(session: Session) -> int:
    return session.exec(select(func.count()).select_from(Cast)).one()


@pytest.fixture(name="admin_headers")
def admin_headers_fixture(admin_token: str) -> dict:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture(name="movie_id")
def movie_id_fixture(client: TestClient, admin_headers: dict, movie_payload: dict) -> int:
    response = client.post(
        f"{settings.API_V1_PREFIX}/movies", json=movie_payload, headers=admin_headers
    )
    return response.json()["id"]


@pytest.fixture(name="actor_id")
def actor_id_fixture(client: TestClient, admin_headers: dict) -> int:
    response = client.post(
        f"{settings.API_V1_PREFIX}/actors",
        json={"firstName": "Heath", "lastName": "Ledger", "popularity": 90.0},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()["id"]


def test_actor_crud(client: TestClient, admin_headers: dict, actor_id: int) -> None:
    response = client.get(f"{settings.API_V1_PREFIX}/actors/{actor_id}")
    assert response.status_code == 200
    assert response.json()["lastName"] == "Ledger"

    response = client.patch(
        f"{settings.API_V1_PREFIX}/actors/{actor_id}",
        json={"nickName": "Heath"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["nickName"] == "Heath"

    response = client.get(f"{settings.API_V1_PREFIX}/actors")
    assert [a["id"] for a in response.json()] == [actor_id]

    response = client.delete(f"{settings.API_V1_PREFIX}/actors/{actor_id}", headers=admin_headers)
    assert response.status_code == 204
    assert client.get(f"{settings.API_V1_PREFIX}/actors/{actor_id}").status_code == 404


def test_actor_duplicate_tmdb_id(client: TestClient, admin_headers: dict) -> None:
    body = {"firstName": "A", "tmdbId": 5}
    assert client.post(f"{settings.API_V1_PREFIX}/actors", json=body, headers=admin_headers).status_code == 201
    response = client.post(f"{settings.API_V1_PREFIX}/actors", json=body, headers=admin_headers)
    assert response.status_code == 409


def test_add_and_list_cast(
    client: TestClient, admin_headers: dict, movie_id: int, actor_id: int
) -> None:
    response = client.post(
        f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast",
        json={"actorId": actor_id, "role": "Antagonist", "characters": ["Joker"]},
        headers=admin_headers,
    )
    assert response.status_code == 201
    entry = response.json()
    assert entry["movieId"] == movie_id
    assert entry["characters"] == ["Joker"]

    response = client.get(f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast")
    assert response.status_code == 200
    cast = response.json()
    assert len(cast) == 1
    assert cast[0]["actor"]["lastName"] == "Ledger"


def test_add_same_actor_twice_is_conflict(
    client: TestClient, admin_headers: dict, movie_id: int, actor_id: int
) -> None:
    body = {"actorId": actor_id, "role": "Lead"}
    url = f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast"
    assert client.post(url, json=body, headers=admin_headers).status_code == 201
    assert client.post(url, json=body, headers=admin_headers).status_code == 409


def test_add_cast_missing_actor_or_movie(
    client: TestClient, admin_headers: dict, movie_id: int, actor_id: int
) -> None:
    response = client.post(
        f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast",
        json={"actorId": 999, "role": "Lead"},
        headers=admin_headers,
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Actor with ID 999 not found"

    response = client.post(
        f"{settings.API_V1_PREFIX}/movies/999/cast",
        json={"actorId": actor_id, "role": "Lead"},
        headers=admin_headers,
    )
    assert response.status_code == 404


def test_remove_from_cast(
    client: TestClient, admin_headers: dict, movie_id: int, actor_id: int
) -> None:
    entry = client.post(
        f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast",
        json={"actorId": actor_id, "role": "Lead"},
        headers=admin_headers,
    ).json()

    response = client.delete(
        f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast/{entry['id']}", headers=admin_headers
    )
    assert response.status_code == 204
    assert client.get(f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast").json() == []


def test_deleting_movie_removes_cast(
    client: TestClient, admin_headers: dict, movie_id: int, actor_id: int, session: Session
) -> None:
    client.post(
        f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast",
        json={"actorId": actor_id, "role": "Lead"},
        headers=admin_headers,
    )
    assert _cast_rows(session) == 1

    response = client.delete(f"{settings.API_V1_PREFIX}/movies/{movie_id}", headers=admin_headers)
    assert response.status_code == 204

    assert _cast_rows(session) == 0
    # The actor itself survives.
    assert client.get(f"{settings.API_V1_PREFIX}/actors/{actor_id}").status_code == 200


def test_cast_writes_forbidden_for_users(
    client: TestClient, user_token: str, movie_id: int, actor_id: int
) -> None:
    response = client.post(
        f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast",
        json={"actorId": actor_id, "role": "Lead"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 403


def test_deleting_actor_removes_cast(
    client: TestClient, admin_headers: dict, movie_id: int, actor_id: int, session: Session
) -> None:
    client.post(
        f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast",
        json={"actorId": actor_id, "role": "Lead"},
        headers=admin_headers,
    )
    assert _cast_rows(session) == 1

    response = client.delete(f"{settings.API_V1_PREFIX}/actors/{actor_id}", headers=admin_headers)
    assert response.status_code == 204

    assert _cast_rows(session) == 0
    assert client.get(f"{settings.API_V1_PREFIX}/movies/{movie_id}/cast").json() == []
    assert client.get(f"{settings.API_V1_PREFIX}/movies/{movie_id}").status_code == 200
