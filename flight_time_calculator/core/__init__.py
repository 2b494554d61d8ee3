"""
Core logic for the Flight Time Calculator.

This package hosts pure, side-effect-free parsing and formatting helpers
that the CLI (or any other front end) calls with raw user input.
"""

__all__ = [
    "ParseResult",
    "evaluate",
    "iter_signed_tokens",
    "parse_token_minutes",
    "format_clock",
    "format_decimal_hours",
    "format_decimal_tenths",
    "format_verbose",
    "format_all",
    "parse_duration_hours",
    "MODES",
    "TimeCalculator",
    "solve_triangle",
    "wind_components",
]

from .expression import ParseResult, evaluate, iter_signed_tokens, parse_token_minutes
from .timeutils import (
    MODES,
    format_all,
    format_clock,
    format_decimal_hours,
    format_decimal_tenths,
    format_verbose,
    parse_duration_hours,
)
from .session import TimeCalculator
from .navigation import solve_triangle, wind_components
