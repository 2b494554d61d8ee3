"""Pure formatting helpers for signed minute counts.

Clock and verbose forms round to whole minutes before splitting into hours
and minutes, so 59.6 minutes renders as ``1:00`` and never ``0:60``.
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, Optional, Tuple

from .expression import split_token


MODES = ('hhmm', 'decimal_exact', 'decimal_tenths', 'verbose')


def _round_half_up(value: float, places: int = 0, divisor: int = 1) -> Decimal:
    """Round ``abs(value) / divisor`` to ``places`` decimals, ties up.

    Works on the exact binary value of ``value``; the context precision
    grows with the magnitude so any finite float can be quantized.
    """
    exact = Decimal(abs(value))
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + places + 30)
        if divisor != 1:
            exact = exact / divisor
        return exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def round_minutes(total_minutes: float) -> int:
    """Round to the nearest whole minute, ties away from zero."""
    rounded = int(_round_half_up(total_minutes))
    return -rounded if total_minutes < 0 else rounded


def _decompose(total_minutes: float) -> Tuple[str, int, int]:
    rounded = round_minutes(total_minutes)
    sign = '-' if rounded < 0 else ''
    hours, mins = divmod(abs(rounded), 60)
    return sign, hours, mins


def format_clock(total_minutes: float) -> str:
    """Format minutes as ``H:MM``, e.g. ``-59.6`` -> ``"-1:00"``."""
    sign, hours, mins = _decompose(total_minutes)
    return f"{sign}{hours}:{mins:02d}"


def format_decimal_hours(total_minutes: float, fraction_digits: int = 2) -> str:
    """Format minutes as decimal hours, e.g. ``90`` -> ``"1.50h"``.

    The float quotient ``abs(m) / 60`` is rounded as is, without
    pre-rounding the minutes; exact ties round up.
    """
    quantized = _round_half_up(abs(total_minutes) / 60, fraction_digits)
    sign = '-' if total_minutes < 0 and quantized else ''
    return f"{sign}{quantized:f}h"


def format_decimal_tenths(total_minutes: float) -> str:
    """Format minutes as hours rounded to tenths (6-minute blocks)."""
    blocks = int(_round_half_up(total_minutes, divisor=6))
    sign = '-' if total_minutes < 0 and blocks else ''
    whole, tenth = divmod(blocks, 10)
    return f"{sign}{whole}.{tenth}h"


def format_verbose(total_minutes: float) -> str:
    """Format minutes as prose, e.g. ``"1 hour 5 minutes"``."""
    sign, hours, mins = _decompose(total_minutes)
    hour_str = 'hour' if hours == 1 else 'hours'
    min_str = 'minute' if mins == 1 else 'minutes'

    if hours == 0 and mins == 0:
        return '0 minutes'
    if hours == 0:
        return f"{sign}{mins} {min_str}"
    if mins == 0:
        return f"{sign}{hours} {hour_str}"
    return f"{sign}{hours} {hour_str} {mins} {min_str}"


def format_all(total_minutes: float, fraction_digits: int = 2) -> Dict[str, str]:
    """Return every rendering keyed by display mode."""
    return {
        'hhmm': format_clock(total_minutes),
        'decimal_exact': format_decimal_hours(total_minutes, fraction_digits),
        'decimal_tenths': format_decimal_tenths(total_minutes),
        'verbose': format_verbose(total_minutes),
    }


def parse_duration_hours(value: str) -> Optional[float]:
    """Parse a single duration token into hours.

    Accepts ``:MM``, ``H:MM`` and bare decimal hours. Returns ``None`` for
    empty or malformed input.
    """
    parts = split_token((value or '').strip())
    if parts is None:
        return None
    hours, minutes = parts
    return hours + minutes / 60
