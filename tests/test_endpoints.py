"""
End-to-end tests of the HTTP surface through FastAPI's TestClient.
"""

import logging
from datetime import datetime, timedelta

from fastapi.testclient import TestClient

from test_helpers import unique_phone


def _login(client: TestClient, phone: str = None) -> dict:
    r = client.post("/api/auth/login", json={"phone": phone or unique_phone()})
    assert r.status_code == 200
    return r.json()["user"]


def _plan_id(client: TestClient, name: str) -> int:
    plans = client.get("/api/plans").json()
    return next(p["id"] for p in plans if p["name"] == name)


def test_health_check(client: TestClient):
    r = client.get("/api/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "Wagholi Mess"
    assert body["database"] == "ok"
    assert "X-Request-ID" in r.headers


# =============================================================================
# AUTH
# =============================================================================


def test_login_creates_then_returns_same_user(client: TestClient):
    phone = unique_phone()

    first = _login(client, phone)
    second = _login(client, phone)

    assert first["id"] == second["id"]
    assert first["phone"] == phone
    assert first["role"] == "user"


def test_login_admin_phone(client: TestClient):
    user = _login(client, "9999999999")
    assert user["role"] == "admin"


def test_update_profile(client: TestClient):
    user = _login(client)

    r = client.post(
        "/api/auth/profile",
        json={"id": user["id"], "name": "Amit Jadhav", "address": "Ubale Nagar, Wagholi"},
    )

    assert r.status_code == 200
    updated = r.json()["user"]
    assert updated["id"] == user["id"]
    assert updated["name"] == "Amit Jadhav"
    assert updated["address"] == "Ubale Nagar, Wagholi"


# =============================================================================
# PLANS AND MENU
# =============================================================================


def test_list_plans(client: TestClient):
    r = client.get("/api/plans")
    assert r.status_code == 200
    plans = r.json()
    assert len(plans) == 5
    veg_basic = plans[0]
    assert veg_basic == {
        "id": veg_basic["id"],
        "name": "Veg Basic",
        "description": "Lunch only - 26 days",
        "price": 2400,
        "duration_days": 26,
        "type": "veg",
        "category": "mess",
    }
    assert {p["category"] for p in plans} == {"mess", "breakfast"}


def test_menu_update_is_logged(client: TestClient, caplog):
    caplog.set_level(logging.DEBUG, logger="wagholi.api.catalog")

    client.get("/api/plans")
    client.post(
        "/api/menu",
        json={"day": "Tuesday", "breakfast": "Poha", "lunch": "Dal Rice", "dinner": "Chapati"},
    )

    messages = [r.getMessage() for r in caplog.records if r.name == "wagholi.api.catalog"]
    assert "Listed 5 plans" in messages
    assert "Menu update requested for Tuesday" in messages


def test_get_and_update_menu(client: TestClient):
    menu = client.get("/api/menu").json()
    assert [m["day"] for m in menu] == [
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    ]

    r = client.post(
        "/api/menu",
        json={
            "day": "Wednesday",
            "breakfast": "Sabudana Khichdi",
            "lunch": "Rajma Chawal",
            "dinner": "Bhakri, Pithla",
        },
    )
    assert r.status_code == 200
    assert r.json() == {"success": True}

    wednesday = next(m for m in client.get("/api/menu").json() if m["day"] == "Wednesday")
    assert wednesday["breakfast"] == "Sabudana Khichdi"
    assert wednesday["lunch"] == "Rajma Chawal"
    assert wednesday["dinner"] == "Bhakri, Pithla"


# =============================================================================
# SUBSCRIPTIONS
# =============================================================================


def test_create_and_list_subscription(client: TestClient):
    user = _login(client)
    plan_id = _plan_id(client, "Veg Basic")

    r = client.post("/api/subscriptions", json={"user_id": user["id"], "plan_id": plan_id})
    assert r.status_code == 200
    assert r.json() == {"success": True}

    subs = client.get(f"/api/subscriptions/{user['id']}").json()
    assert len(subs) == 1
    sub = subs[0]
    assert sub["plan_name"] == "Veg Basic"
    assert sub["price"] == 2400
    assert sub["plan_category"] == "mess"
    assert sub["status"] == "active"
    assert sub["paused_days"] == 0
    assert sub["max_pause_days"] == 4

    start = datetime.fromisoformat(sub["start_date"])
    end = datetime.fromisoformat(sub["end_date"])
    assert end - start == timedelta(days=26)


def test_breakfast_subscription_has_larger_pause_allowance(client: TestClient):
    user = _login(client)
    plan_id = _plan_id(client, "Breakfast Premium")
    client.post("/api/subscriptions", json={"user_id": user["id"], "plan_id": plan_id})

    sub = client.get(f"/api/subscriptions/{user['id']}").json()[0]
    assert sub["max_pause_days"] == 26
    assert sub["plan_category"] == "breakfast"


def test_pause_until_limit(client: TestClient):
    user = _login(client)
    plan_id = _plan_id(client, "Veg Premium")
    client.post("/api/subscriptions", json={"user_id": user["id"], "plan_id": plan_id})
    sub_id = client.get(f"/api/subscriptions/{user['id']}").json()[0]["id"]

    for _ in range(4):
        r = client.post("/api/subscriptions/pause", json={"id": sub_id})
        assert r.status_code == 200
        assert r.json() == {"success": True}

    r = client.post("/api/subscriptions/pause", json={"id": sub_id})
    assert r.status_code == 400
    assert r.json()["error"] == "Max pause limit reached"

    sub = client.get(f"/api/subscriptions/{user['id']}").json()[0]
    assert sub["paused_days"] == 4


def test_list_subscriptions_unknown_user_is_empty(client: TestClient):
    r = client.get("/api/subscriptions/99999")
    assert r.status_code == 200
    assert r.json() == []


# =============================================================================
# CATERING
# =============================================================================


def test_catering_flow(client: TestClient):
    user = _login(client)
    client.post(
        "/api/auth/profile",
        json={"id": user["id"], "name": "Kavita Shinde", "address": "Wagholi"},
    )

    r = client.post(
        "/api/catering",
        json={
            "user_id": user["id"],
            "event_type": "Wedding",
            "event_date": "2026-12-20",
            "pax": 150,
            "requirements": "Maharashtrian thali, live jalebi counter",
        },
    )
    assert r.status_code == 200
    assert r.json() == {"success": True}

    requests = client.get(f"/api/catering/{user['id']}").json()
    assert len(requests) == 1
    req = requests[0]
    assert req["status"] == "pending"
    assert req["quote_amount"] is None
    assert req["event_date"] == "2026-12-20"
    assert req["pax"] == 150

    admin_view = client.get("/api/admin/catering").json()
    assert admin_view[0]["user_name"] == "Kavita Shinde"
    assert admin_view[0]["user_phone"] == user["phone"]

    r = client.post(
        "/api/admin/catering/status",
        json={"id": req["id"], "status": "quoted", "quote_amount": 5000},
    )
    assert r.status_code == 200
    assert r.json() == {"success": True}

    updated = client.get(f"/api/catering/{user['id']}").json()[0]
    assert updated["status"] == "quoted"
    assert updated["quote_amount"] == 5000


# =============================================================================
# ADMIN
# =============================================================================


def test_admin_stats_empty(client: TestClient):
    r = client.get("/api/admin/stats")
    assert r.status_code == 200
    assert r.json() == {
        "activeSubscribers": 0,
        "monthlyRevenue": 0,
        "pendingCatering": 0,
        "breakfastSubscribers": 0,
        "messSubscribers": 0,
    }


def test_admin_stats_after_activity(client: TestClient):
    user = _login(client)
    for name in ("Veg Basic", "Breakfast Basic", "Breakfast Premium"):
        client.post(
            "/api/subscriptions",
            json={"user_id": user["id"], "plan_id": _plan_id(client, name)},
        )
    client.post(
        "/api/catering",
        json={
            "user_id": user["id"],
            "event_type": "Naming Ceremony",
            "event_date": "2026-11-30",
            "pax": 25,
        },
    )

    stats = client.get("/api/admin/stats").json()

    assert stats["activeSubscribers"] == 3
    assert stats["messSubscribers"] == 1
    assert stats["breakfastSubscribers"] == 2
    assert stats["pendingCatering"] == 1
    assert stats["monthlyRevenue"] == 0


def test_admin_users(client: TestClient):
    first = _login(client)
    second = _login(client)

    users = client.get("/api/admin/users").json()

    assert [u["id"] for u in users] == [first["id"], second["id"]]
    assert all(u["role"] == "user" for u in users)
