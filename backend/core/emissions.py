# core/emissions.py
from __future__ import annotations
import math
from typing import Optional

from models.emissions import EmissionFactors
from models.routes import VehicleClass

DEFAULT_FACTORS = EmissionFactors()


def expected_duration_min(
    distance_km: float, defaults: Optional[EmissionFactors] = None
) -> float:
    """Free-flow travel time at the reference speed."""
    ef = defaults or DEFAULT_FACTORS
    return distance_km / ef.reference_speed_kmh * 60


def estimate_emissions(
    distance_km: float,
    duration_min: float,
    vehicle: Optional[VehicleClass] = None,
    defaults: Optional[EmissionFactors] = None,
) -> float:
    """
    kg CO2 for a trip:
      distance_km * base_factor * (1 + clamp(delay, 0, 0.6) * sensitivity)
    where delay = duration / expected_duration - 1 and expected_duration is the
    time the trip takes at the reference speed (50 km/h).
    """
    ef = defaults or DEFAULT_FACTORS
    vehicle = VehicleClass.parse(vehicle)

    expected = expected_duration_min(distance_km, ef)
    delay_ratio = 0.0
    if expected > 0:
        delay_ratio = duration_min / expected - 1

    clamped = max(0.0, min(delay_ratio, ef.max_delay_ratio))
    congestion_factor = 1 + clamped * ef.sensitivity_for(vehicle)

    kg = distance_km * ef.factor_for(vehicle) * congestion_factor
    return round(kg, 2)


def calculate_savings(current_kg: float, worst_kg: float) -> int:
    """Percent saved versus the worst route of the same set, never negative."""
    if worst_kg == 0:
        return 0
    savings = (worst_kg - current_kg) / worst_kg * 100
    # half rounds up (12.5% -> 13%)
    return max(0, int(math.floor(savings + 0.5)))
