from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Sequence
from models.routes import Coordinate, RouteCandidate
from models.geocoding import GeocodeResult


class DirectionsAdapter(ABC):
    """Directions providers (ORS, ...) must implement this."""

    @abstractmethod
    async def get_routes(
        self,
        coordinates: Sequence[Coordinate],
        alternatives: bool = False,
        source: str = "direct",
    ) -> List[RouteCandidate]: ...


class GeocodingAdapter(ABC):
    """Free-text address lookup providers must implement this."""

    @abstractmethod
    async def search(self, query: str) -> List[GeocodeResult]: ...
