# services/routing/acquisition.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from config import settings
from core.exceptions import DirectionsRequestError
from core.interfaces import DirectionsAdapter
from models.routes import Coordinate, RouteCandidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Leg:
    name: str
    coordinates: Sequence[Coordinate]


def via_point(start: Coordinate, end: Coordinate, offset_deg: float) -> Coordinate:
    """Midpoint of start/end pushed by `offset_deg` on both axes."""
    return Coordinate(
        lat=(start.lat + end.lat) / 2 + offset_deg,
        lng=(start.lng + end.lng) / 2 + offset_deg,
    )


def plan_legs(
    start: Coordinate, end: Coordinate, offset_deg: Optional[float] = None
) -> List[Leg]:
    """Direct leg plus two opposite detours to force different corridors."""
    offset = settings.VIA_OFFSET_DEG if offset_deg is None else offset_deg
    return [
        Leg("direct", [start, end]),
        Leg("via-plus", [start, via_point(start, end, offset), end]),
        Leg("via-minus", [start, via_point(start, end, -offset), end]),
    ]


async def _run_leg(
    adapter: DirectionsAdapter, leg: Leg, alternatives: bool
) -> List[RouteCandidate]:
    try:
        routes = await adapter.get_routes(
            leg.coordinates, alternatives=alternatives, source=leg.name
        )
    except DirectionsRequestError as e:
        logger.warning("Directions leg %s failed: %s", leg.name, e)
        return []
    if not routes:
        logger.info("Directions leg %s returned no routes", leg.name)
    # one route per leg unless native alternatives were asked for
    return routes if alternatives else routes[:1]


async def acquire_candidates(
    adapter: DirectionsAdapter,
    start: Coordinate,
    end: Coordinate,
    offset_deg: Optional[float] = None,
    alternatives: Optional[bool] = None,
) -> List[RouteCandidate]:
    """
    Fire all legs concurrently and wait for every one to settle.

    A failing or empty leg contributes nothing; the others still count.
    Each leg's first route comes back in leg order (direct, via-plus,
    via-minus); native alternatives of the direct leg, when requested,
    are appended after them so they lose any dedup or cap tie.
    """
    legs = plan_legs(start, end, offset_deg)
    want_alts = settings.ORS_REQUEST_ALTERNATIVES if alternatives is None else alternatives

    results = await asyncio.gather(
        *(
            _run_leg(adapter, leg, want_alts and leg.name == "direct")
            for leg in legs
        )
    )

    primary: List[RouteCandidate] = []
    extra: List[RouteCandidate] = []
    for routes in results:
        primary.extend(routes[:1])
        extra.extend(
            r.model_copy(update={"source": f"{r.source}-alt-{i}"})
            for i, r in enumerate(routes[1:], start=1)
        )
    return primary + extra
