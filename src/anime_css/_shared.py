"""Shared numeric helpers for timeline resolution and CSS output."""

import re
from decimal import Decimal
from functools import lru_cache

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_float(text: str) -> float | None:
    """Parse the longest leading numeric prefix of ``text`` like ``parseFloat``.

    Trailing garbage such as unit suffixes is ignored. Returns ``None`` when
    no number can be read at all.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    literal = match.group(1)
    if literal.lstrip("+-") == "Infinity":
        return float(literal.replace("Infinity", "inf"))
    return float(literal)


@lru_cache(maxsize=8192)
def format_number(value: float) -> str:
    """Render a number the way JavaScript template strings do (``50``, ``12.5``)."""
    if isinstance(value, int):
        return str(value)
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" in text and 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    return text
