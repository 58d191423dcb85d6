# services/routing/canned.py
from __future__ import annotations

from typing import List

from models.routes import RankedRouteResult

# Straight two-point polyline; enough for a map to draw something
MOCK_POLYLINE = "_p~iF~ps|U_ulLnnqC"


def demo_routes() -> List[RankedRouteResult]:
    """Fixed set served when no provider key is configured."""
    return [
        RankedRouteResult(
            id="mock-eco",
            geometry=MOCK_POLYLINE,
            distance_km=12.5,
            duration_min=18,
            emissions_kg=2.4,
            savings_percent=25,
            is_ecofriendly=True,
            is_fastest=False,
            label="Eco Pick",
            description="Lowest CO₂",
        ),
        RankedRouteResult(
            id="mock-fast",
            geometry=MOCK_POLYLINE,
            distance_km=14.2,
            duration_min=15,
            emissions_kg=3.2,
            savings_percent=0,
            is_ecofriendly=False,
            is_fastest=True,
            label="Fastest",
            description="High traffic zone",
        ),
    ]


def fallback_routes() -> List[RankedRouteResult]:
    """Served when the provider is configured but nothing came back."""
    return [
        RankedRouteResult(
            id="fallback-mock",
            geometry=MOCK_POLYLINE,
            distance_km=12.5,
            duration_min=18,
            emissions_kg=2.4,
            savings_percent=0,
            is_ecofriendly=True,
            is_fastest=True,
            label="Eco Pick",
            description="Estimated route (live routing unavailable)",
        )
    ]
