# services/routing/ranking.py
from __future__ import annotations

from typing import List

from core.emissions import calculate_savings
from models.routes import RankedRouteResult, ScoredRoute

ECO_LABEL = "Eco Pick"
ECO_DESCRIPTION = "Lowest CO₂"
HIGH_LABEL = "High Emissions"
ALT_LABEL = "Alternative"


def _label(is_eco: bool, emissions_kg: float, worst_kg: float, n: int):
    if is_eco:
        return ECO_LABEL, ECO_DESCRIPTION
    # inclusive: every route tied with the worst gets flagged
    if emissions_kg >= worst_kg and n > 1:
        return HIGH_LABEL, f"{emissions_kg}kg CO₂"
    return ALT_LABEL, ""


def rank_routes(routes: List[ScoredRoute]) -> List[RankedRouteResult]:
    """
    Order by emissions (ascending, stable), flag the first as the eco pick
    and attach savings vs. the worst route plus a display label.
    """
    if not routes:
        return []

    ordered = sorted(routes, key=lambda r: r.emissions_kg)
    worst = ordered[-1].emissions_kg
    fastest_min = min(r.duration_min for r in ordered)
    fastest_idx = next(i for i, r in enumerate(ordered) if r.duration_min == fastest_min)

    ranked: List[RankedRouteResult] = []
    for i, r in enumerate(ordered):
        is_eco = i == 0
        label, description = _label(is_eco, r.emissions_kg, worst, len(ordered))
        ranked.append(
            RankedRouteResult(
                id=f"route-{i}",
                geometry=r.geometry,
                distance_km=round(r.distance_km, 1),
                duration_min=round(r.duration_min),
                emissions_kg=r.emissions_kg,
                savings_percent=calculate_savings(r.emissions_kg, worst),
                is_ecofriendly=is_eco,
                is_fastest=i == fastest_idx,
                label=label,
                description=description,
            )
        )
    return ranked
