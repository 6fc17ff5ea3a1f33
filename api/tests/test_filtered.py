"""
Tests for the filtered, paginated browse query.

Seeded HSK levels by index: 0:1 1:1 2:2 3:3 4:1 5:2 6:4 7:2 8:5 9:6
"""
from fastapi.testclient import TestClient

from conftest import set_progress

API = "/api/v1/characters/filtered"


def get_filtered(client: TestClient, user_id: int, **params) -> dict:
    response = client.get(API, params={"user_id": user_id, **params})
    assert response.status_code == 200, response.text
    return response.json()


def indices(data: dict) -> list:
    return [item["character"]["index"] for item in data["items"]]


def test_no_filters_returns_whole_catalog_in_order(client: TestClient, catalog, user_id: int) -> None:
    data = get_filtered(client, user_id)
    assert data["total"] == 10
    assert indices(data) == list(range(10))
    assert data["page"] == 0
    assert data["page_size"] == 20
    assert data["total_pages"] == 1
    assert data["has_next"] is False
    assert data["has_previous"] is False


def test_items_carry_defaulted_progress(client: TestClient, catalog, user_id: int) -> None:
    set_progress(client, user_id, 3, writing=True)
    data = get_filtered(client, user_id, page_size=5)
    progress = {item["character"]["index"]: item["progress"] for item in data["items"]}
    assert progress[3]["writing"] is True
    assert progress[3]["reading"] is False
    assert progress[0] == {
        "character_index": 0,
        "reading": False,
        "writing": False,
        "radical": False,
        "updated_at": None,
    }


def test_hsk_levels_and_reading_filter_paginate_with_total(client: TestClient, catalog, user_id: int) -> None:
    # Levels 1 and 2 cover indices 0, 1, 2, 4, 5, 7; index 1 has reading mastered
    set_progress(client, user_id, 1, reading=True)

    data = get_filtered(client, user_id, hsk_levels="1,2", filter_reading="true", page=0, page_size=2)
    assert indices(data) == [0, 2]
    assert data["total"] == 5
    assert data["total_pages"] == 3
    assert data["has_next"] is True
    assert data["has_previous"] is False

    data = get_filtered(client, user_id, hsk_levels="1,2", filter_reading="true", page=2, page_size=2)
    assert indices(data) == [7]
    assert data["has_next"] is False
    assert data["has_previous"] is True


def test_skill_filters_combine_with_and(client: TestClient, catalog, user_id: int) -> None:
    # Mastered in reading but not writing
    set_progress(client, user_id, 0, reading=True, writing=False)

    both = get_filtered(client, user_id, filter_reading="true", filter_writing="true")
    assert 0 not in indices(both)

    reading_only = get_filtered(client, user_id, filter_reading="true")
    assert 0 not in indices(reading_only)

    writing_only = get_filtered(client, user_id, filter_writing="true")
    assert 0 in indices(writing_only)


def test_radical_filter(client: TestClient, catalog, user_id: int) -> None:
    set_progress(client, user_id, 4, radical=True)
    set_progress(client, user_id, 5, reading=True, writing=True)
    data = get_filtered(client, user_id, filter_radical="true")
    assert indices(data) == [0, 1, 2, 3, 5, 6, 7, 8, 9]
    assert data["total"] == 9


def test_all_false_row_counts_as_unmastered(client: TestClient, catalog, user_id: int) -> None:
    set_progress(client, user_id, 2, reading=True)
    set_progress(client, user_id, 2, reading=False)
    data = get_filtered(client, user_id, filter_reading="true")
    assert 2 in indices(data)
    assert data["total"] == 10


def test_filter_reflects_latest_progress(client: TestClient, catalog, user_id: int) -> None:
    assert get_filtered(client, user_id, filter_reading="true")["total"] == 10
    set_progress(client, user_id, 6, reading=True)
    assert get_filtered(client, user_id, filter_reading="true")["total"] == 9


def test_other_users_progress_is_ignored(client: TestClient, catalog, user_id: int, other_user_id: int) -> None:
    set_progress(client, other_user_id, 0, reading=True)
    data = get_filtered(client, user_id, filter_reading="true")
    assert 0 in indices(data)
    assert data["total"] == 10


def test_page_past_end_is_empty(client: TestClient, catalog, user_id: int) -> None:
    data = get_filtered(client, user_id, page=5, page_size=20)
    assert data["items"] == []
    assert data["total"] == 10


def test_invalid_hsk_levels_are_rejected(client: TestClient, catalog, user_id: int) -> None:
    for levels in ("0", "7", "1,x", "1,,9"):
        response = client.get(API, params={"user_id": user_id, "hsk_levels": levels})
        assert response.status_code == 400, levels
        assert "hsk" in response.json()["detail"].lower()


def test_invalid_pagination_is_rejected(client: TestClient, catalog, user_id: int) -> None:
    assert client.get(API, params={"user_id": user_id, "page": -1}).status_code == 400
    assert client.get(API, params={"user_id": user_id, "page_size": 0}).status_code == 400
    assert client.get(API, params={"user_id": user_id, "page_size": 101}).status_code == 400


def test_page_beyond_catalog_is_rejected(client: TestClient, catalog, user_id: int) -> None:
    response = client.get(API, params={"user_id": user_id, "page": 10**18, "page_size": 100})
    assert response.status_code == 400
    assert "page" in response.json()["detail"]

    # Last page that can hold catalog indices
    assert client.get(API, params={"user_id": user_id, "page": 29, "page_size": 100}).status_code == 200
    assert client.get(API, params={"user_id": user_id, "page": 30, "page_size": 100}).status_code == 400


def test_huge_user_id_is_unauthorized(client: TestClient, catalog) -> None:
    assert client.get(API, params={"user_id": 10**19}).status_code == 401
