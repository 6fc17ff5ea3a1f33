"""
Tests for the per-user progress ledger.
"""
from fastapi.testclient import TestClient

from conftest import set_progress

API = "/api/v1/progress"


def test_untouched_character_defaults_to_all_false(client: TestClient, user_id: int) -> None:
    response = client.get(f"{API}/17", params={"user_id": user_id})
    assert response.status_code == 200
    assert response.json() == {
        "character_index": 17,
        "reading": False,
        "writing": False,
        "radical": False,
        "updated_at": None,
    }


def test_upsert_then_read_back(client: TestClient, user_id: int) -> None:
    stored = set_progress(client, user_id, 5, reading=True, radical=True)
    assert stored["reading"] is True
    assert stored["writing"] is False
    assert stored["radical"] is True
    assert stored["updated_at"] is not None

    data = client.get(f"{API}/5", params={"user_id": user_id}).json()
    assert (data["reading"], data["writing"], data["radical"]) == (True, False, True)


def test_upsert_is_idempotent(client: TestClient, user_id: int) -> None:
    set_progress(client, user_id, 5, writing=True)
    set_progress(client, user_id, 5, writing=True)
    rows = client.get(f"{API}/range/0/10", params={"user_id": user_id}).json()
    assert len(rows) == 1
    assert rows[0]["writing"] is True


def test_upsert_replaces_the_full_triple(client: TestClient, user_id: int) -> None:
    set_progress(client, user_id, 5, reading=True, writing=True, radical=True)
    set_progress(client, user_id, 5, writing=True)
    data = client.get(f"{API}/5", params={"user_id": user_id}).json()
    assert (data["reading"], data["writing"], data["radical"]) == (False, True, False)


def test_upsert_requires_every_flag(client: TestClient, user_id: int) -> None:
    response = client.post(
        API, params={"user_id": user_id}, json={"character_index": 5, "reading": True}
    )
    assert response.status_code == 422


def test_progress_is_isolated_per_user(client: TestClient, user_id: int, other_user_id: int) -> None:
    set_progress(client, other_user_id, 5, reading=True)
    data = client.get(f"{API}/5", params={"user_id": user_id}).json()
    assert data["reading"] is False


def test_range_omits_untouched_characters(client: TestClient, user_id: int) -> None:
    set_progress(client, user_id, 2, reading=True)
    set_progress(client, user_id, 4, writing=True)
    set_progress(client, user_id, 12, radical=True)
    rows = client.get(f"{API}/range/0/10", params={"user_id": user_id}).json()
    assert [row["character_index"] for row in rows] == [2, 4]


def test_range_validation(client: TestClient, user_id: int) -> None:
    assert client.get(f"{API}/range/-1/10", params={"user_id": user_id}).status_code == 400
    assert client.get(f"{API}/range/0/301", params={"user_id": user_id}).status_code == 400
    assert client.get(f"{API}/range/2995/300", params={"user_id": user_id}).status_code == 200


def test_batch_returns_existing_rows_only(client: TestClient, user_id: int) -> None:
    set_progress(client, user_id, 3, reading=True)
    set_progress(client, user_id, 8, writing=True)
    response = client.get(f"{API}/batch", params={"indices": "8,1,3,3", "user_id": user_id})
    assert response.status_code == 200
    assert [row["character_index"] for row in response.json()] == [3, 8]


def test_batch_validation(client: TestClient, user_id: int) -> None:
    assert client.get(f"{API}/batch", params={"user_id": user_id}).status_code == 400
    assert client.get(f"{API}/batch", params={"indices": "1,x", "user_id": user_id}).status_code == 400
    assert client.get(f"{API}/batch", params={"indices": "1,3000", "user_id": user_id}).status_code == 400

    too_many = ",".join(str(i) for i in range(301))
    response = client.get(f"{API}/batch", params={"indices": too_many, "user_id": user_id})
    assert response.status_code == 400


def test_out_of_range_index_is_rejected(client: TestClient, user_id: int) -> None:
    assert client.get(f"{API}/3000", params={"user_id": user_id}).status_code == 400
    assert client.get(f"{API}/-1", params={"user_id": user_id}).status_code == 400

    body = {"character_index": 3000, "reading": True, "writing": False, "radical": False}
    assert client.post(API, params={"user_id": user_id}, json=body).status_code == 400


def test_unknown_user_is_unauthorized(client: TestClient) -> None:
    assert client.get(f"{API}/0", params={"user_id": 999}).status_code == 401


def test_summary_counts_mastery(client: TestClient, user_id: int, other_user_id: int) -> None:
    set_progress(client, user_id, 0, reading=True, writing=True, radical=True)
    set_progress(client, user_id, 1, reading=True)
    set_progress(client, user_id, 2, writing=True, radical=True)
    set_progress(client, user_id, 3)
    set_progress(client, other_user_id, 4, reading=True)

    response = client.get(f"{API}/summary", params={"user_id": user_id})
    assert response.status_code == 200
    assert response.json() == {
        "reading": 2,
        "writing": 2,
        "radical": 2,
        "fully_mastered": 1,
        "touched": 4,
    }


def test_summary_for_new_user_is_zero(client: TestClient, user_id: int) -> None:
    data = client.get(f"{API}/summary", params={"user_id": user_id}).json()
    assert data == {"reading": 0, "writing": 0, "radical": 0, "fully_mastered": 0, "touched": 0}
