# backend/tests/test_routes_api.py
import asyncio
import json

import httpx
import pytest
import respx

from api.routes_search import get_directions_adapter
from config import Settings
from conftest import BERLIN, POTSDAM, FakeDirections, failing_leg
from main import app
from models.routes import Coordinate
from services.routing.search import search_routes


def _ors_url():
    return f"{Settings.ORS_BASE_URL.rstrip('/')}/v2/directions/{Settings.ORS_PROFILE}"


def _leg_name(request) -> str:
    coords = json.loads(request.content)["coordinates"]
    if len(coords) == 2:
        return "direct"
    mid_lat = (coords[0][1] + coords[-1][1]) / 2
    return "via-plus" if coords[1][1] > mid_lat else "via-minus"


def _ors_answers(per_leg: dict):
    """side_effect answering each ORS call by the leg it belongs to."""

    def _answer(request):
        answer = per_leg[_leg_name(request)]
        if isinstance(answer, int):
            return httpx.Response(answer, json={"error": {"code": answer}})
        distance_km, duration_s = answer
        return httpx.Response(
            200,
            json={
                "routes": [
                    {
                        "summary": {"distance": distance_km, "duration": duration_s},
                        "geometry": f"poly-{distance_km}",
                    }
                ]
            },
        )

    return _answer


@pytest.fixture
def override_adapter():
    def _set(adapter):
        app.dependency_overrides[get_directions_adapter] = lambda: adapter

    yield _set
    app.dependency_overrides.pop(get_directions_adapter, None)


def test_missing_endpoint_is_400(client):
    r = client.post("/routes", json={"start": BERLIN})
    assert r.status_code == 400
    r = client.post("/routes", json={"end": POTSDAM, "vehicleType": "diesel"})
    assert r.status_code == 400


def test_demo_mode_returns_canned_pair(client, demo_mode):
    r = client.post("/routes", json={"start": BERLIN, "end": POTSDAM})
    assert r.status_code == 200, r.text
    data = r.json()

    assert [d["id"] for d in data] == ["mock-eco", "mock-fast"]
    assert [d["emissionsKg"] for d in data] == [2.4, 3.2]
    assert [d["label"] for d in data] == ["Eco Pick", "Fastest"]
    assert data[0]["isEcofriendly"] is True
    assert data[1]["isFastest"] is True


def test_short_key_counts_as_unconfigured(client, monkeypatch, demo_mode):
    monkeypatch.setattr(Settings, "ORS_API_KEY", "short")
    r = client.post("/routes", json={"start": BERLIN, "end": POTSDAM})
    assert r.json()[0]["id"] == "mock-eco"


@respx.mock
def test_duplicate_legs_collapse(client, live_key):
    route = respx.post(_ors_url()).mock(
        side_effect=_ors_answers(
            {"direct": (12.0, 1200), "via-plus": (12.0, 1300), "via-minus": (18.0, 1500)}
        )
    )
    r = client.post(
        "/routes", json={"start": BERLIN, "end": POTSDAM, "vehicleType": "gasoline"}
    )
    assert r.status_code == 200, r.text
    data = r.json()

    assert route.call_count == 3
    assert len(data) == 2
    assert [d["distanceKm"] for d in data] == [12.0, 18.0]
    assert data[0]["isEcofriendly"] is True
    assert data[0]["label"] == "Eco Pick"
    assert data[1]["label"] == "High Emissions"
    assert data[1]["savingsPercent"] == 0
    assert data[0]["emissionsKg"] < data[1]["emissionsKg"]
    # the direct leg wins the 12 km slot
    assert data[0]["durationMin"] == 20


@respx.mock
def test_partial_failure_still_ranks(client, live_key):
    respx.post(_ors_url()).mock(
        side_effect=_ors_answers(
            {"direct": 500, "via-plus": (15.0, 1200), "via-minus": (21.0, 1800)}
        )
    )
    data = client.post("/routes", json={"start": BERLIN, "end": POTSDAM}).json()
    assert [d["distanceKm"] for d in data] == [15.0, 21.0]


@respx.mock
def test_single_leg_expands_to_three(client, live_key):
    respx.post(_ors_url()).mock(
        side_effect=_ors_answers({"direct": (20.0, 1440), "via-plus": 404, "via-minus": 400})
    )
    data = client.post(
        "/routes", json={"start": BERLIN, "end": POTSDAM, "vehicleType": "suv"}
    ).json()

    assert len(data) == 3
    assert len({d["id"] for d in data}) == 3
    assert [d["label"] for d in data] == ["Eco Pick", "Alternative", "High Emissions"]
    # 20 km @ 50 km/h, suv -> 5.1 kg; variants at x0.9 / x1.1
    assert [d["emissionsKg"] for d in data] == [4.59, 5.1, 5.61]
    assert {d["geometry"] for d in data} == {"poly-20.0"}


@respx.mock
def test_all_legs_fail_gives_fallback(client, live_key):
    respx.post(_ors_url()).mock(return_value=httpx.Response(502, text="bad gateway"))
    data = client.post("/routes", json={"start": BERLIN, "end": POTSDAM}).json()

    assert len(data) == 1
    assert data[0]["id"] == "fallback-mock"
    assert data[0]["isEcofriendly"] is True


def test_injected_adapter(client, override_adapter):
    override_adapter(
        FakeDirections(
            {
                "direct": [(10.0, 12.0)],
                "via-plus": [(11.0, 30.0)],
                "via-minus": failing_leg(),
            }
        )
    )
    data = client.post(
        "/routes", json={"start": BERLIN, "end": POTSDAM, "vehicleType": "electric"}
    ).json()

    assert [d["distanceKm"] for d in data] == [10.0, 11.0]
    assert data[0]["isFastest"] is True
    assert data[1]["label"] == "High Emissions"


def test_status_reports_mode(client, demo_mode):
    r = client.get("/status")
    assert r.status_code == 200
    body = r.json()["data"]
    assert body["mode"] == "demo"
    assert "electric" in body["vehicles"]


def test_search_with_alternatives_stays_within_three(monkeypatch):
    monkeypatch.setattr(Settings, "ORS_REQUEST_ALTERNATIVES", True)
    fake = FakeDirections(
        {
            "direct": [(12.0, 20.0), (14.0, 18.0), (16.0, 19.0)],
            "via-plus": [(20.0, 30.0)],
            "via-minus": [(25.0, 35.0)],
        }
    )
    out = asyncio.run(search_routes(Coordinate(**BERLIN), Coordinate(**POTSDAM), adapter=fake))

    assert len(out) == 3
    assert sorted(r.distance_km for r in out) == [12.0, 20.0, 25.0]
