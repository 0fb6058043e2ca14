"""Leaf values: string forms and the falsy rule.

Leaves are rendered the way a JavaScript runtime converts them to strings so
that fingerprints stay comparable with keys produced by other services using
the same feed format.
"""

from __future__ import annotations

from decimal import Decimal
import math
import numbers
from typing import Any, Final


class _Undefined:
    """Marker for an absent value, distinct from ``None``."""

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

# Decimal exponent range rendered without scientific notation
_MAX_FIXED_EXPONENT = 21
_MIN_FIXED_EXPONENT = -6


def format_number(value: float) -> str:
    """Render a float using ECMAScript Number-to-String rules.

    Uses the shortest round-tripping digits (Python's ``repr``) and lays them
    out in fixed or exponential notation exactly as ``String(number)`` does.

    Args:
        value: Float to render

    Returns:
        String form, e.g. ``"15.45"``, ``"15"`` for ``15.0``, ``"1e-7"``

    Example:
        >>> format_number(1e21)
        '1e+21'
        >>> format_number(0.000001)
        '0.000001'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    parts = Decimal(repr(abs(value))).as_tuple()
    raw_digits = "".join(str(d) for d in parts.digits)
    digits = raw_digits.rstrip("0")
    exponent = int(parts.exponent) + (len(raw_digits) - len(digits))

    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits

    if k <= n <= _MAX_FIXED_EXPONENT:
        text = digits + "0" * (n - k)
    elif 0 < n <= _MAX_FIXED_EXPONENT:
        text = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_FIXED_EXPONENT < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"

    return sign + text


def to_string(value: Any) -> str:
    """Return the default string conversion of a leaf value."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def is_falsy(value: Any) -> bool:
    """Check whether a value counts as absent.

    Absent values are ``UNDEFINED``, ``None``, ``False``, numeric zero,
    ``NaN`` and the empty string. Collections are never falsy here; an empty
    collection is only treated as absent once it serializes to empty text.

    Args:
        value: Raw value

    Returns:
        True if the value should not contribute to a feed
    """
    if value is UNDEFINED or value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, numbers.Number):
        return value == 0 or value != value  # NaN is the only value unequal to itself
    if isinstance(value, str):
        return value == ""
    return False
