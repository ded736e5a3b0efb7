"""Lenient value parsing for query strings and request bodies.

Numbers are read from the leading part of the text, so ``"12abc"`` is 12
and ``"abc"`` is not a number. Callers decide what an unparsable value
means (skip a filter, reject a request, match nothing).
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
CENT = Decimal("0.01")


def parse_float(value: Any) -> float | None:
    """Parse a number from a value, leniently.

    Args:
        value: A number or text. Booleans are not numbers.

    Returns:
        The finite float value, or None if it cannot be parsed
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match is None:
            return None
        number = float(match.group(1))
    else:
        return None

    return number if math.isfinite(number) else None


def parse_int(value: Any) -> int | None:
    """Parse an integer from the leading digits of a value.

    Args:
        value: An int or text such as ``"42"`` or ``"42abc"``

    Returns:
        The integer value, or None if no leading digits exist
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        return int(match.group(1)) if match else None
    return None


def is_present(value: Any) -> bool:
    """Check that a required field carries a usable value.

    None, empty or whitespace-only text, zero and False all count as missing.
    """
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def round_amount(value: float) -> float:
    """Round a money amount to 2 decimal digits, ties away from zero.

    The exact binary value is rounded, so 1.125 becomes 1.13 while 1.005
    (stored as 1.00499...) becomes 1.0.
    """
    return float(Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))
