# services/routing/search.py
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from adapters.online.openrouteservice_adapter import ORSDirectionsAdapter
from config import is_provider_configured, settings
from core.exceptions import AppError
from core.interfaces import DirectionsAdapter
from models.routes import Coordinate, RankedRouteResult, VehicleClass
from services.routing.acquisition import acquire_candidates
from services.routing.canned import demo_routes, fallback_routes
from services.routing.normalize import normalize_candidates, score_candidates
from services.routing.ranking import rank_routes

logger = logging.getLogger(__name__)


async def search_routes(
    start: Coordinate,
    end: Coordinate,
    vehicle: Optional[VehicleClass] = None,
    adapter: Optional[DirectionsAdapter] = None,
) -> List[RankedRouteResult]:
    """
    Fetch, score, dedupe and rank routes from start to end.
    Raises RouteAcquisitionError when no leg produced a route.
    """
    vehicle = VehicleClass.parse(vehicle)
    adapter = adapter or ORSDirectionsAdapter()

    candidates = await acquire_candidates(adapter, start, end)
    scored = score_candidates(candidates, vehicle)
    return rank_routes(normalize_candidates(scored))


async def search_routes_or_fallback(
    start: Coordinate,
    end: Coordinate,
    vehicle: Optional[VehicleClass] = None,
    adapter: Optional[DirectionsAdapter] = None,
    api_key: Optional[str] = None,
) -> List[RankedRouteResult]:
    """
    Always returns a non-empty list: demo data without a usable key,
    a single fallback route when live routing yields nothing.
    """
    if adapter is None:
        if not is_provider_configured(api_key):
            logger.warning("ORS_API_KEY missing or too short; serving demo routes")
            await asyncio.sleep(settings.DEMO_DELAY_S)
            return demo_routes()
        adapter = ORSDirectionsAdapter(api_key=api_key)

    try:
        return await search_routes(start, end, vehicle, adapter)
    except AppError as e:
        logger.error("Route search failed, serving fallback route: %s", e)
        return fallback_routes()
