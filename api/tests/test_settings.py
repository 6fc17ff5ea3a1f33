"""
Tests for per-user study settings.
"""
from fastapi.testclient import TestClient

API = "/api/v1/settings"


def test_defaults_are_created_on_first_read(client: TestClient, user_id: int) -> None:
    response = client.get(API, params={"user_id": user_id})
    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == user_id
    assert data["current_level"] == 0
    assert data["daily_char_count"] == 5
    assert data["prefer_traditional"] is True
    assert data["standard_mode_page_size"] == 20
    assert data["updated_at"]


def test_partial_update_keeps_other_fields(client: TestClient, user_id: int) -> None:
    client.patch(API, params={"user_id": user_id}, json={"current_level": 40, "prefer_traditional": False})

    response = client.patch(API, params={"user_id": user_id}, json={"daily_char_count": 12})
    assert response.status_code == 200

    data = client.get(API, params={"user_id": user_id}).json()
    assert data["daily_char_count"] == 12
    assert data["current_level"] == 40
    assert data["prefer_traditional"] is False
    assert data["standard_mode_page_size"] == 20


def test_update_before_first_read_creates_settings(client: TestClient, user_id: int) -> None:
    response = client.patch(API, params={"user_id": user_id}, json={"standard_mode_page_size": 50})
    assert response.status_code == 200
    data = response.json()
    assert data["standard_mode_page_size"] == 50
    assert data["daily_char_count"] == 5


def test_numeric_values_are_clamped(client: TestClient, user_id: int) -> None:
    data = client.patch(
        API,
        params={"user_id": user_id},
        json={"current_level": 5000, "daily_char_count": 0, "standard_mode_page_size": 500},
    ).json()
    assert data["current_level"] == 2999
    assert data["daily_char_count"] == 1
    assert data["standard_mode_page_size"] == 100

    data = client.patch(
        API,
        params={"user_id": user_id},
        json={"current_level": -3, "daily_char_count": 99, "standard_mode_page_size": 1},
    ).json()
    assert data["current_level"] == 0
    assert data["daily_char_count"] == 50
    assert data["standard_mode_page_size"] == 10


def test_update_refreshes_timestamp(client: TestClient, user_id: int) -> None:
    before = client.get(API, params={"user_id": user_id}).json()["updated_at"]
    after = client.patch(API, params={"user_id": user_id}, json={"daily_char_count": 7}).json()["updated_at"]
    assert after >= before


def test_empty_update_changes_nothing_but_timestamp(client: TestClient, user_id: int) -> None:
    before = client.get(API, params={"user_id": user_id}).json()
    after = client.patch(API, params={"user_id": user_id}, json={}).json()
    before.pop("updated_at")
    after.pop("updated_at")
    assert before == after


def test_settings_are_isolated_per_user(client: TestClient, user_id: int, other_user_id: int) -> None:
    client.patch(API, params={"user_id": user_id}, json={"daily_char_count": 30})
    data = client.get(API, params={"user_id": other_user_id}).json()
    assert data["daily_char_count"] == 5


def test_invalid_field_type_is_client_error(client: TestClient, user_id: int) -> None:
    response = client.patch(API, params={"user_id": user_id}, json={"daily_char_count": "many"})
    assert response.status_code == 422


def test_unknown_user_is_unauthorized(client: TestClient) -> None:
    assert client.get(API, params={"user_id": 999}).status_code == 401
