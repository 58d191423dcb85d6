# services/routing/normalize.py
from __future__ import annotations

from typing import List, Optional

from core.emissions import estimate_emissions
from core.exceptions import RouteAcquisitionError
from models.emissions import EmissionFactors
from models.routes import RouteCandidate, ScoredRoute, VehicleClass

# at most one route per leg reaches ranking
MAX_DISTINCT_ROUTES = 3

# (suffix, duration multiplier, emissions multiplier)
SYNTHETIC_VARIANTS = (
    ("eco", 1.15, 0.9),
    ("congested", 0.95, 1.1),
)


def score_candidates(
    candidates: List[RouteCandidate],
    vehicle: VehicleClass,
    defaults: Optional[EmissionFactors] = None,
) -> List[ScoredRoute]:
    return [
        ScoredRoute(
            **c.model_dump(),
            emissions_kg=estimate_emissions(
                c.distance_km, c.duration_min, vehicle, defaults
            ),
        )
        for c in candidates
    ]


def dedupe_by_distance(routes: List[ScoredRoute]) -> List[ScoredRoute]:
    """Keep the first route per whole-km distance; never empties a non-empty list."""
    seen = set()
    distinct: List[ScoredRoute] = []
    for r in routes:
        if r.dedup_key in seen:
            continue
        seen.add(r.dedup_key)
        distinct.append(r)
    return distinct or list(routes)


def synthesize_variants(route: ScoredRoute) -> List[ScoredRoute]:
    """
    Perturbed copies of a lone route so the caller still gets options to
    compare. Geometry is reused as-is; only the estimates move.
    """
    out = [route]
    for suffix, duration_mult, emissions_mult in SYNTHETIC_VARIANTS:
        out.append(
            route.model_copy(
                update={
                    "duration_min": route.duration_min * duration_mult,
                    "emissions_kg": round(route.emissions_kg * emissions_mult, 2),
                    "source": f"{route.source}-{suffix}",
                }
            )
        )
    return out


def normalize_candidates(routes: List[ScoredRoute]) -> List[ScoredRoute]:
    if not routes:
        raise RouteAcquisitionError("No directions leg returned a route.")
    distinct = dedupe_by_distance(routes)
    if len(distinct) == 1:
        return synthesize_variants(distinct[0])
    return distinct[:MAX_DISTINCT_ROUTES]
