from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from painel.core.config import Settings
from painel.main import app
from painel.services.dashboard_service import DashboardService
from painel.services.dependencies import get_dashboard_service

from factories import make_trip, trip_payload

NOW = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def client():
    app.dependency_overrides[get_dashboard_service] = lambda: DashboardService(
        Settings(_env_file=None, TIMEZONE="UTC")
    )
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def history() -> list[dict]:
    trips = [
        make_trip(NOW - timedelta(hours=1), price=200, cost=50, profit=150, time_min=60, km=20, trip_id="b"),
        make_trip(NOW - timedelta(hours=5), price=100, cost=20, profit=80, time_min=30, km=10, trip_id="a"),
        make_trip(NOW - timedelta(days=60), price=999, cost=99, profit=900, time_min=90, km=40, trip_id="old"),
    ]
    return [trip_payload(t) for t in trips]


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_root_links(client):
    body = client.get("/").json()
    assert body["docs"] == "/docs"
    assert body["dashboard"] == "/dashboard"


def test_windows(client):
    response = client.get("/dashboard/windows")
    assert response.status_code == 200
    assert response.json() == [
        {"id": "today", "label": "Hoje"},
        {"id": "week", "label": "7 Dias"},
        {"id": "month", "label": "Mês"},
        {"id": "all", "label": "Total"},
    ]


def test_summary(client, history):
    response = client.post(
        "/dashboard/summary",
        json={"trips": history, "window": "today", "now": NOW.isoformat()},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total_rides"] == 2
    assert body["total_earnings"] == 300
    assert body["total_fuel_cost"] == 70
    assert body["total_profit"] == 230
    assert body["avg_earnings_per_km"] == 10
    assert body["online_hours"] == 1
    assert body["online_minutes"] == 30
    assert body["display"]["total_earnings"] == "R$ 300,00"
    assert body["display"]["online_time"] == "1h 30min"


def test_summary_of_empty_history(client):
    body = client.post("/dashboard/summary", json={"trips": []}).json()
    assert body["total_rides"] == 0
    assert body["avg_profit_per_hour"] == 0


def test_chart(client, history):
    response = client.post(
        "/dashboard/chart",
        json={"trips": history, "window": "week", "now": NOW.isoformat()},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    geometry = body["geometry"]
    assert [p["trip_id"] for p in geometry["points"]] == ["a", "b"]
    assert [p["x"] for p in geometry["points"]] == [20, 980]
    assert geometry["earnings_path"].startswith("M 20 ")
    assert geometry["max_value"] == pytest.approx(220)


def test_chart_insufficient_data(client, history):
    response = client.post(
        "/dashboard/chart",
        json={"trips": history[:1], "now": NOW.isoformat()},
    )

    body = response.json()
    assert body["status"] == "insufficient_data"
    assert body["geometry"] is None
    assert body["points"] == 1
    assert body["required"] == 2
    assert "mín. 2 viagens" in body["message"]


def test_chart_custom_canvas(client, history):
    body = client.post(
        "/dashboard/chart",
        json={"trips": history, "width": 300, "height": 100, "padding": 0},
    ).json()
    assert [p["x"] for p in body["geometry"]["points"]] == [0, 150, 300]


def test_dashboard_combines_stats_and_chart(client, history):
    response = client.post(
        "/dashboard",
        json={"trips": history, "window": "month", "now": NOW.isoformat()},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["window"] == "month"
    assert body["filtered_rides"] == 2
    assert body["stats"]["total_rides"] == 2
    assert len(body["chart"]["geometry"]["points"]) == 2


def test_invalid_window_is_rejected(client):
    response = client.post("/dashboard/summary", json={"trips": [], "window": "year"})
    assert response.status_code == 422


@pytest.mark.parametrize(
    "canvas",
    [
        {"width": 0},
        {"height": -5},
        {"padding": -1},
        {"width": 100, "height": 100, "padding": 50},
    ],
)
def test_invalid_canvas_is_rejected(client, history, canvas):
    response = client.post("/dashboard/chart", json={"trips": history, **canvas})
    assert response.status_code == 422
