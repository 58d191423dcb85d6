# api/emissions_routes.py
from __future__ import annotations

from fastapi import APIRouter

from core.emissions import estimate_emissions
from models.emissions import EmissionsRequest, EmissionsResponse
from models.routes import VehicleClass

router = APIRouter(prefix="/emissions", tags=["emissions"])


@router.post("/estimate", response_model=EmissionsResponse)
def estimate(req: EmissionsRequest):
    per_leg = [
        estimate_emissions(
            leg.distance_km, leg.duration_min, VehicleClass.parse(leg.vehicle_type)
        )
        for leg in req.legs
    ]
    return EmissionsResponse(
        total_kgco2=round(sum(per_leg), 2),
        per_leg_kgco2=per_leg,
    )
