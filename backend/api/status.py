from fastapi import APIRouter
from config import is_provider_configured
from models.routes import VehicleClass

router = APIRouter(prefix="/status", tags=["status"])


@router.get("")
def status():
    return {
        "status": "success",
        "data": {
            "mode": "live" if is_provider_configured() else "demo",
            "vehicles": [v.value for v in VehicleClass],
        },
    }
