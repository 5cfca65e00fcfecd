"""
Emission / points calculator.

    emissions = distance_km * factor[mode] * trips      (kg CO2, 2 dp)
    points    = max(0, round(50 / (emissions + 0.1)))

Zero-emission trips score 500, the ceiling of the curve. Points are derived
from the rounded emissions so a stored (emissions, points) pair always agrees.
Inputs are validated by the caller (distance_km >= 0, trips >= 1).
"""
from decimal import Decimal, ROUND_HALF_UP

from app.footprint.constants import EMISSION_FACTORS, POINTS_SCALE, EMISSIONS_OFFSET, TransportMode

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """Round half-up to 2 decimals (not banker's rounding)."""
    return float(Decimal(repr(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def _round_half_up(value: float) -> int:
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def travelled_km(distance_km: float, trips: int) -> float:
    return distance_km * trips


def emissions_for(mode: TransportMode, distance_km: float, trips: int) -> float:
    factor = EMISSION_FACTORS[TransportMode(mode)]
    return round2(distance_km * factor * trips)


def points_for(emissions_kg: float) -> int:
    return max(0, _round_half_up((1 / (emissions_kg + EMISSIONS_OFFSET)) * POINTS_SCALE))


def compute(mode: TransportMode, distance_km: float, trips: int) -> tuple[float, int]:
    """Return (emissions_kg, points) for one day's transport."""
    emissions = emissions_for(mode, distance_km, trips)
    return emissions, points_for(emissions)
