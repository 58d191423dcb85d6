# models/routes.py
from __future__ import annotations
import math
from enum import Enum
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VehicleClass(str, Enum):
    gasoline = "gasoline"
    diesel = "diesel"
    suv = "suv"
    hybrid = "hybrid"
    electric = "electric"

    @classmethod
    def parse(cls, value: Optional[str]) -> "VehicleClass":
        """Unknown or missing classes fall back to gasoline."""
        if isinstance(value, VehicleClass):
            return value
        key = (value or "").strip().lower()
        key = _VEHICLE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls.gasoline


_VEHICLE_ALIASES = {
    "gas": "gasoline",
    "petrol": "gasoline",
    "car": "gasoline",
    "ev": "electric",
}


class Coordinate(BaseModel):
    lat: float
    lng: float = Field(validation_alias=AliasChoices("lng", "lon"))
    address: Optional[str] = None

    def as_lnglat(self) -> list[float]:
        return [float(self.lng), float(self.lat)]


class RouteCandidate(BaseModel):
    """One route as returned by a directions leg."""

    geometry: str
    distance_km: float
    duration_min: float
    source: str = "direct"


class ScoredRoute(RouteCandidate):
    emissions_kg: float = Field(ge=0)

    @property
    def dedup_key(self) -> int:
        # nearest whole km, halves round up
        return int(math.floor(self.distance_km + 0.5))


class RankedRouteResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    geometry: str
    distance_km: float
    duration_min: float
    emissions_kg: float
    savings_percent: int = 0
    is_ecofriendly: bool = False
    is_fastest: bool = False
    label: str = ""
    description: str = ""


class RouteSearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Optional here so a missing endpoint maps to a 400, not a validation 422
    start: Optional[Coordinate] = None
    end: Optional[Coordinate] = None
    vehicle_type: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("vehicleType", "vehicle_type", "vehicle"),
    )

    @property
    def vehicle(self) -> VehicleClass:
        return VehicleClass.parse(self.vehicle_type)
