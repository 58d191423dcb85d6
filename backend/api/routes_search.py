# api/routes_search.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from core.interfaces import DirectionsAdapter
from models.routes import RankedRouteResult, RouteSearchRequest
from services.routing.search import search_routes_or_fallback

router = APIRouter(prefix="/routes", tags=["routes"])


def get_directions_adapter() -> Optional[DirectionsAdapter]:
    # None -> pick live ORS or demo mode from settings
    return None


@router.post("", response_model=List[RankedRouteResult])
async def post_routes(
    body: RouteSearchRequest = Body(...),
    adapter: Optional[DirectionsAdapter] = Depends(get_directions_adapter),
):
    if body.start is None or body.end is None:
        raise HTTPException(400, "Start and End locations are required")
    return await search_routes_or_fallback(body.start, body.end, body.vehicle, adapter)
