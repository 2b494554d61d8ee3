"""Calculator session: a typed expression plus manual hour/minute nudges."""
from __future__ import annotations

from typing import Optional

from .expression import ParseResult, evaluate
from .timeutils import MODES, format_all


SECONDARY_LABELS = {
    'hhmm': 'HH:MM',
    'decimal_exact': 'Decimal (N.NN)',
    'decimal_tenths': 'Decimal (N.N)',
}


class TimeCalculator:
    """Ephemeral calculator state. Nothing is persisted."""

    def __init__(self, expression: str = '', manual_minutes: float = 0):
        self.expression = expression
        self.manual_minutes = manual_minutes

    def set_expression(self, text: Optional[str]) -> None:
        self.expression = text or ''

    def add_hours(self, hours: float) -> None:
        self.manual_minutes += hours * 60

    def add_minutes(self, minutes: float) -> None:
        self.manual_minutes += minutes

    def reset(self) -> None:
        self.expression = ''
        self.manual_minutes = 0

    @property
    def result(self) -> ParseResult:
        return evaluate(self.expression)

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid

    @property
    def total_minutes(self) -> float:
        return self.result.total_minutes + self.manual_minutes

    def render(self, mode: str = 'hhmm', fraction_digits: int = 2) -> str:
        """Primary display value for ``mode``.

        Raises ``ValueError`` for unknown modes.
        """
        if mode not in MODES:
            raise ValueError(f"Unknown display mode: {mode}")
        return format_all(self.total_minutes, fraction_digits)[mode]

    def secondary_line(self, mode: str = 'hhmm', fraction_digits: int = 2, labels=None) -> str:
        """The numeric renderings other than ``mode``, joined with `` | ``."""
        if mode not in MODES:
            raise ValueError(f"Unknown display mode: {mode}")
        labels = labels or SECONDARY_LABELS
        values = format_all(self.total_minutes, fraction_digits)
        return ' | '.join(
            f"{labels.get(key, key)} {values[key]}"
            for key in SECONDARY_LABELS
            if key != mode
        )
