"""Speed/time/distance and runway wind helpers.

Inputs are raw strings as typed by the user; anything missing or malformed
yields ``None`` instead of an exception.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .timeutils import parse_duration_hours


SOLVE_LABELS = {
    'speed': ('Speed (kt)', 'kt'),
    'distance': ('Distance (NM)', 'NM'),
    'time': ('Time (hr)', 'hr'),
}


@dataclass(frozen=True)
class TriangleResult:
    label: str
    value: float
    unit: str


@dataclass(frozen=True)
class WindComponents:
    delta: float
    headwind: float
    crosswind: float
    gust_headwind: Optional[float] = None
    gust_crosswind: Optional[float] = None

    @property
    def headwind_label(self) -> str:
        return 'Headwind' if self.headwind >= 0 else 'Tailwind'

    @property
    def crosswind_label(self) -> str:
        return 'Crosswind (Right)' if self.crosswind >= 0 else 'Crosswind (Left)'


def parse_number(value: Optional[str]) -> Optional[float]:
    """Parse a decimal number accepting a comma separator."""
    normalized = (value or '').replace(',', '.').strip()
    if not normalized:
        return None
    try:
        parsed = float(normalized)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def solve_triangle(solve_for: str, speed: Optional[str] = None,
                   distance: Optional[str] = None, time: Optional[str] = None) -> Optional[TriangleResult]:
    """Solve the speed/distance/time triangle for ``solve_for``.

    ``time`` is a duration token (``1:30``, ``:45``, ``1.5``). Returns
    ``None`` when the needed inputs are missing or would divide by zero.
    Raises ``ValueError`` for an unknown ``solve_for``.
    """
    if solve_for not in SOLVE_LABELS:
        raise ValueError(f"Unknown quantity to solve for: {solve_for}")
    label, unit = SOLVE_LABELS[solve_for]

    speed_value = parse_number(speed)
    distance_value = parse_number(distance)
    time_value = parse_duration_hours(time) if time is not None else None

    if solve_for == 'speed':
        if distance_value is None or not time_value or time_value <= 0:
            return None
        return TriangleResult(label, distance_value / time_value, unit)
    if solve_for == 'distance':
        if speed_value is None or not time_value or time_value <= 0:
            return None
        return TriangleResult(label, speed_value * time_value, unit)
    if speed_value is None or speed_value <= 0 or distance_value is None:
        return None
    return TriangleResult(label, distance_value / speed_value, unit)


def normalize_angle(angle: float) -> float:
    """Fold an angle difference into ``[-180, 180]``."""
    normalized = math.fmod(angle, 360)
    if normalized > 180:
        normalized -= 360
    if normalized < -180:
        normalized += 360
    return normalized


def wind_components(runway_heading: Optional[str], wind_direction: Optional[str],
                    wind_speed: Optional[str], wind_gust: Optional[str] = None) -> Optional[WindComponents]:
    """Split a wind into head/tail and cross components for a runway.

    Positive crosswind blows from the right of the runway heading.
    """
    heading = parse_number(runway_heading)
    direction = parse_number(wind_direction)
    speed_value = parse_number(wind_speed)
    if heading is None or direction is None or speed_value is None:
        return None

    delta = normalize_angle(direction - heading)
    radians = math.radians(delta)
    gust_value = parse_number(wind_gust)
    return WindComponents(
        delta=delta,
        headwind=speed_value * math.cos(radians),
        crosswind=speed_value * math.sin(radians),
        gust_headwind=gust_value * math.cos(radians) if gust_value is not None else None,
        gust_crosswind=gust_value * math.sin(radians) if gust_value is not None else None,
    )
