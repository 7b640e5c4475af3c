"""Public entry points of the expression evaluator."""

import math

from .errors import EvaluationError, NonFiniteResult
from .formatter import format_value
from .grammar import parse

# Returned in place of any parse or evaluation failure
ERROR = "Error"


def evaluate_value(expression: str) -> float:
    """
    Evaluate an expression and return its numeric value.

    Args:
        expression: Arithmetic expression, e.g. ``"3+5*2"`` or ``"sin(30)"``

    Returns:
        The finite value of the expression

    Raises:
        UnexpectedCharacter: If the expression cannot be parsed
        UnknownFunction: If it calls a function other than sqrt, sin, cos, tan
        NonFiniteResult: If the value is infinite or NaN (e.g. ``"10/0"``)
    """
    value = parse(expression)
    if math.isnan(value) or math.isinf(value):
        raise NonFiniteResult(value)
    return value


def evaluate(expression: str) -> str:
    """
    Evaluate an expression and return the result as display text.

    This never raises. Every failure collapses into the ``"Error"`` string.

    Args:
        expression: Arithmetic expression to evaluate

    Returns:
        ``""`` for blank input, ``"Error"`` for any failure, otherwise the
        canonical numeric literal (``"13"``, ``"0.5"``)

    Example:
        >>> evaluate("2^3^2")
        '512'
        >>> evaluate("10/0")
        'Error'
    """
    if not expression.strip():
        return ""
    try:
        return format_value(evaluate_value(expression))
    except EvaluationError:
        return ERROR
