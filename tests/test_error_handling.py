"""
Error handling tests for the HTTP surface.

- Missing references surface as 404 NOT_FOUND
- Request bodies failing their schema surface as 422 VALIDATION_ERROR
- The pause limit surfaces as 400 with a plain ``error`` message
"""

import pytest
from fastapi.testclient import TestClient

from test_helpers import unique_phone


def _new_user_id(client: TestClient) -> int:
    return client.post("/api/auth/login", json={"phone": unique_phone()}).json()["user"]["id"]


# =============================================================================
# NOT FOUND
# =============================================================================


def test_subscribe_to_unknown_plan(client: TestClient):
    r = client.post("/api/subscriptions", json={"user_id": _new_user_id(client), "plan_id": 404})

    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["message"] == "Plan 404 not found"


def test_subscribe_unknown_user(client: TestClient):
    r = client.post("/api/subscriptions", json={"user_id": 5150, "plan_id": 1})
    assert r.status_code == 404
    assert r.json()["error"]["message"] == "User 5150 not found"


def test_pause_unknown_subscription(client: TestClient):
    r = client.post("/api/subscriptions/pause", json={"id": 8080})
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_profile_update_unknown_user(client: TestClient):
    r = client.post("/api/auth/profile", json={"id": 777, "name": "Ghost", "address": "-"})
    assert r.status_code == 404


def test_catering_for_unknown_user(client: TestClient):
    r = client.post(
        "/api/catering",
        json={"user_id": 321, "event_type": "Puja", "event_date": "2026-11-08", "pax": 20},
    )
    assert r.status_code == 404


def test_catering_status_unknown_request(client: TestClient):
    r = client.post(
        "/api/admin/catering/status",
        json={"id": 9001, "status": "confirmed", "quote_amount": 12000},
    )
    assert r.status_code == 404


# =============================================================================
# SCHEMA VALIDATION
# =============================================================================


def test_login_requires_phone(client: TestClient):
    r = client.post("/api/auth/login", json={})

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_login_rejects_empty_phone(client: TestClient):
    r = client.post("/api/auth/login", json={"phone": ""})
    assert r.status_code == 422


def test_subscription_requires_integer_ids(client: TestClient):
    r = client.post("/api/subscriptions", json={"user_id": "abc", "plan_id": 1})
    assert r.status_code == 422


def test_menu_update_rejects_unknown_day(client: TestClient):
    r = client.post(
        "/api/menu",
        json={"day": "Funday", "breakfast": "x", "lunch": "y", "dinner": "z"},
    )
    assert r.status_code == 422


def test_catering_rejects_non_positive_headcount(client: TestClient):
    r = client.post(
        "/api/catering",
        json={
            "user_id": _new_user_id(client),
            "event_type": "Birthday",
            "event_date": "2026-11-08",
            "pax": 0,
        },
    )
    assert r.status_code == 422


def test_catering_rejects_bad_date(client: TestClient):
    r = client.post(
        "/api/catering",
        json={
            "user_id": _new_user_id(client),
            "event_type": "Birthday",
            "event_date": "next friday",
            "pax": 30,
        },
    )
    assert r.status_code == 422


OUT_OF_RANGE_ID = 10**20


@pytest.mark.parametrize(
    "path,payload",
    [
        ("/api/subscriptions/pause", {"id": OUT_OF_RANGE_ID}),
        ("/api/subscriptions", {"user_id": 1, "plan_id": OUT_OF_RANGE_ID}),
        ("/api/subscriptions", {"user_id": OUT_OF_RANGE_ID, "plan_id": 1}),
        ("/api/auth/profile", {"id": OUT_OF_RANGE_ID, "name": "Ghost"}),
        (
            "/api/admin/catering/status",
            {"id": OUT_OF_RANGE_ID, "status": "quoted", "quote_amount": 100},
        ),
    ],
)
def test_out_of_range_body_ids_are_rejected(client: TestClient, path, payload):
    r = client.post(path, json=payload)

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.parametrize("user_id", [OUT_OF_RANGE_ID, 0])
def test_out_of_range_path_ids_are_rejected(client: TestClient, user_id):
    for path in (f"/api/subscriptions/{user_id}", f"/api/catering/{user_id}"):
        r = client.get(path)
        assert r.status_code == 422, path
        assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_catering_rejects_oversized_headcount(client: TestClient):
    r = client.post(
        "/api/catering",
        json={
            "user_id": _new_user_id(client),
            "event_type": "Wedding",
            "event_date": "2026-12-20",
            "pax": OUT_OF_RANGE_ID,
        },
    )
    assert r.status_code == 422


def test_catering_status_rejects_unknown_status(client: TestClient):
    r = client.post(
        "/api/admin/catering/status",
        json={"id": 1, "status": "maybe", "quote_amount": 100},
    )
    assert r.status_code == 422


# =============================================================================
# BUSINESS RULE
# =============================================================================


def test_pause_limit_response_shape(client: TestClient):
    user_id = _new_user_id(client)
    plans = client.get("/api/plans").json()
    plan_id = next(p["id"] for p in plans if p["category"] == "mess")
    client.post("/api/subscriptions", json={"user_id": user_id, "plan_id": plan_id})
    sub_id = client.get(f"/api/subscriptions/{user_id}").json()[0]["id"]

    for _ in range(4):
        assert client.post("/api/subscriptions/pause", json={"id": sub_id}).status_code == 200

    r = client.post("/api/subscriptions/pause", json={"id": sub_id})

    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"] == "Max pause limit reached"
    assert body["code"] == "PAUSE_LIMIT_REACHED"
