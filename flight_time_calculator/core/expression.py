"""Tokenizer and evaluator for duration expressions like ``1+1:30+:45-0:15``.

The evaluator is a pure fold over ``(sign, token)`` pairs. Malformed tokens
never raise: they contribute nothing to the total and clear ``is_valid``.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple


logger = logging.getLogger(__name__)

OPERATORS = '+-'

_NUMBER_RE = re.compile(r'(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)')
_INTEGER_RE = re.compile(r'[0-9]+')


@dataclass(frozen=True)
class ParseResult:
    """Outcome of :func:`evaluate`.

    ``hours`` and ``minutes`` decompose the magnitude of ``total_minutes``;
    the sign travels on ``hours`` only, ``minutes`` is never negative.
    """

    total_minutes: float
    is_valid: bool
    hours: int = field(init=False)
    minutes: float = field(init=False)

    def __post_init__(self):
        magnitude = abs(self.total_minutes)
        whole_hours = int(magnitude // 60)
        object.__setattr__(self, 'hours', -whole_hours if self.total_minutes < 0 else whole_hours)
        object.__setattr__(self, 'minutes', magnitude % 60)


def strip_whitespace(expression: str) -> str:
    return ''.join(expression.split())


def iter_signed_tokens(expression: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(sign, raw_token)`` pairs from a whitespace-free expression.

    Every pair starts with a (possibly empty) run of ``+``/``-``; each ``-``
    flips the sign. The token is everything up to the next operator. An
    operator run with nothing after it yields an empty token.
    """
    index = 0
    length = len(expression)
    while index < length:
        sign = 1
        while index < length and expression[index] in OPERATORS:
            if expression[index] == '-':
                sign = -sign
            index += 1

        start = index
        while index < length and expression[index] not in OPERATORS:
            index += 1
        yield sign, expression[start:index]


def split_token(token: str) -> Optional[Tuple[float, int]]:
    """Match ``token`` against the ``:MM``, ``H:MM`` and bare-hours grammars.

    Returns ``(hours, minutes)`` or ``None`` when the token is malformed or
    too large to represent as a float. Commas are accepted as decimal
    separators.
    """
    text = token.replace(',', '.')
    if not text:
        return None

    if text.startswith(':'):
        minutes_part = text[1:]
        if not _INTEGER_RE.fullmatch(minutes_part) or not math.isfinite(float(minutes_part)):
            return None
        return 0.0, int(minutes_part)

    if ':' in text:
        parts = text.split(':')
        if len(parts) != 2:
            return None
        hours_part, minutes_part = parts
        if not _NUMBER_RE.fullmatch(hours_part) or not _INTEGER_RE.fullmatch(minutes_part):
            return None
        minutes = int(minutes_part)
        if minutes >= 60:
            return None
        hours = float(hours_part)
        return (hours, minutes) if math.isfinite(hours) else None

    if not _NUMBER_RE.fullmatch(text):
        return None
    hours = float(text)
    return (hours, 0) if math.isfinite(hours) else None


def parse_token_minutes(token: str) -> Optional[float]:
    """Value of a single token in minutes, or ``None`` if malformed."""
    parts = split_token(token)
    if parts is None:
        return None
    hours, minutes = parts
    value = hours * 60 + minutes
    return value if math.isfinite(value) else None


def evaluate(expression: str) -> ParseResult:
    """Evaluate a signed duration expression into total minutes.

    An empty or blank expression is valid and totals zero. Otherwise the
    result is valid only if at least one token was found and every token
    matched its grammar; invalid tokens add nothing but do not stop the scan.
    """
    normalized = strip_whitespace(expression or '')
    if not normalized:
        return ParseResult(0, True)

    total = 0
    has_tokens = False
    has_invalid = False
    for sign, token in iter_signed_tokens(normalized):
        if not token:
            continue
        has_tokens = True
        value = parse_token_minutes(token)
        if value is None:
            logger.debug("Invalid duration token %r in %r", token, expression)
            has_invalid = True
            continue
        if not math.isfinite(total + sign * value):
            logger.debug("Total overflows at token %r in %r", token, expression)
            has_invalid = True
            continue
        total += sign * value

    return ParseResult(total, has_tokens and not has_invalid)
