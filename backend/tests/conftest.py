# backend/tests/conftest.py
import os
import sys
from typing import List, Sequence

import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# Demo mode by default, and no artificial latency in tests
os.environ["ORS_API_KEY"] = ""
os.environ["DEMO_DELAY_S"] = "0"

# Import app only after setting env
from main import app
from config import Settings
from core.exceptions import DirectionsRequestError
from core.interfaces import DirectionsAdapter
from models.routes import Coordinate, RouteCandidate

BERLIN = {"lat": 52.5200, "lng": 13.4050}
POTSDAM = {"lat": 52.3906, "lng": 13.0645}

LIVE_KEY = "test-ors-key-0123456789"


class FakeDirections(DirectionsAdapter):
    """Answers per leg name: a list of (distance_km, duration_min), [] or an exception."""

    def __init__(self, per_leg: dict):
        self.per_leg = per_leg
        self.calls: List[str] = []

    async def get_routes(
        self,
        coordinates: Sequence[Coordinate],
        alternatives: bool = False,
        source: str = "direct",
    ) -> List[RouteCandidate]:
        self.calls.append(source)
        answer = self.per_leg.get(source, [])
        if isinstance(answer, Exception):
            raise answer
        return [
            RouteCandidate(
                geometry=f"poly-{source}-{i}",
                distance_km=d,
                duration_min=t,
                source=source,
            )
            for i, (d, t) in enumerate(answer)
        ]


def failing_leg(msg: str = "boom") -> DirectionsRequestError:
    return DirectionsRequestError(msg)


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def live_key(monkeypatch):
    monkeypatch.setattr(Settings, "ORS_API_KEY", LIVE_KEY)
    return LIVE_KEY


@pytest.fixture
def demo_mode(monkeypatch):
    monkeypatch.setattr(Settings, "ORS_API_KEY", "")
    monkeypatch.setattr(Settings, "DEMO_DELAY_S", 0.0)
