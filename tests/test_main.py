"""
Tests for the HTTP endpoints around the view controller.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import schedule_payload
from main import app, get_controller
from utils.view_state_controller import RaceViewController


@pytest.fixture
def api(make_client, season_races, round_5_results):
    """TestClient whose controller talks to an in-memory Ergast."""
    def handler(request):
        if request.url.path.endswith("/2023.json"):
            return httpx.Response(200, json=schedule_payload(season_races))
        if request.url.path.endswith("/2023/5/results.json"):
            return httpx.Response(200, json=round_5_results)
        return httpx.Response(404, text="Not Found")

    controller = RaceViewController(make_client(handler))
    app.dependency_overrides[get_controller] = lambda: controller
    # Not used as a context manager so the lifespan load against the real API does not run
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_initial_view_state_is_idle(api):
    r = api.get("/view-state")
    assert r.status_code == 200
    body = r.json()
    assert body["load_state"] == {"status": "idle"}
    assert body["results_view"]["visible"] is False


def test_load_schedule(api):
    r = api.post("/schedule/load")
    assert r.status_code == 200
    load_state = r.json()["load_state"]
    assert load_state["status"] == "loaded"
    assert [race["round"] for race in load_state["races"]] == ["1", "2", "3"]


def test_race_table_after_load(api):
    api.post("/schedule/load")
    r = api.get("/race-table")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "loaded"
    assert body["race_table"]["rows"][0][1] == "Bahrain Grand Prix"
    assert body["results_modal"] is None


def test_select_and_dismiss(api):
    r = api.post("/races/5/select")
    assert r.status_code == 200
    results_view = r.json()["results_view"]
    assert results_view["visible"] is True
    assert results_view["round"] == "5"
    assert results_view["results"][0]["driver_name"] == "Max Verstappen"
    assert "max-verstappen" in results_view["results"][0]["headshot_url"]

    r = api.post("/results/dismiss")
    assert r.status_code == 200
    assert r.json()["results_view"]["visible"] is False
    assert len(r.json()["results_view"]["results"]) == 3


def test_select_unknown_round_keeps_modal_closed(api):
    r = api.post("/races/42/select")
    assert r.status_code == 200
    assert r.json()["results_view"]["visible"] is False
    assert r.json()["load_state"]["status"] == "idle"


def test_failed_schedule_is_reported_in_state(make_client):
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    controller = RaceViewController(make_client(handler))
    app.dependency_overrides[get_controller] = lambda: controller
    try:
        client = TestClient(app)
        r = client.post("/schedule/load")
        assert r.status_code == 200
        assert r.json()["load_state"]["status"] == "failed"
        assert "Connection refused" in r.json()["load_state"]["error"]

        table = client.get("/race-table").json()
        assert table["race_table"] is None
        assert "Connection refused" in table["message"]
    finally:
        app.dependency_overrides.clear()
