# models/emissions.py
from __future__ import annotations
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from models.routes import VehicleClass


class EmissionFactors(BaseModel):
    """Tailpipe factors (kg CO2 per km) and congestion sensitivity per vehicle class."""

    defaults: Dict[VehicleClass, float] = Field(
        default_factory=lambda: {
            VehicleClass.gasoline: 0.192,
            VehicleClass.diesel: 0.171,
            VehicleClass.suv: 0.255,
            VehicleClass.hybrid: 0.108,
            VehicleClass.electric: 0.045,
        }
    )
    # share of the congestion penalty a class actually pays (regen braking)
    traffic_sensitivity: Dict[VehicleClass, float] = Field(
        default_factory=lambda: {
            VehicleClass.hybrid: 0.3,
            VehicleClass.electric: 0.3,
        }
    )
    reference_speed_kmh: float = 50.0
    max_delay_ratio: float = 0.6

    def factor_for(self, vehicle: Optional[VehicleClass]) -> float:
        key = VehicleClass.parse(vehicle)
        return float(self.defaults.get(key, self.defaults[VehicleClass.gasoline]))

    def sensitivity_for(self, vehicle: Optional[VehicleClass]) -> float:
        return float(self.traffic_sensitivity.get(VehicleClass.parse(vehicle), 1.0))


class EmissionsLeg(BaseModel):
    distance_km: float = Field(..., ge=0)
    duration_min: float = Field(0.0, ge=0)
    vehicle_type: Optional[str] = None


class EmissionsRequest(BaseModel):
    legs: List[EmissionsLeg]


class EmissionsResponse(BaseModel):
    status: str = "success"
    total_kgco2: float
    per_leg_kgco2: List[float]
    units: str = "kgCO2"
