"""Canonical string rendering of evaluation results."""

import math
from decimal import Decimal, ROUND_HALF_EVEN

from .errors import NonFiniteResult

# Results are shown with at most this many fractional digits
FRACTION_DIGITS = 8

_QUANTUM = Decimal(1).scaleb(-FRACTION_DIGITS)


def format_value(value: float) -> str:
    """
    Render a float as a canonical numeric literal.

    Integral values are written without a decimal point. Anything else is
    rounded half-even to eight fractional digits with trailing zeros
    trimmed. The output never uses exponent notation or a locale-specific
    separator.

    Args:
        value: The number to render

    Returns:
        The formatted number, e.g. ``"13"``, ``"0.5"``, ``"0.33333333"``

    Raises:
        NonFiniteResult: If ``value`` is infinite or NaN

    Example:
        >>> format_value(4.0)
        '4'
        >>> format_value(2 / 3)
        '0.66666667'
    """
    if math.isnan(value) or math.isinf(value):
        raise NonFiniteResult(value)

    if value.is_integer():
        return str(int(value))

    # Decimal(value) is the exact binary value, so ties are decided on it
    rounded = Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)
    text = format(rounded, "f").rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
