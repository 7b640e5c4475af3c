"""
Recursive-descent grammar that parses and evaluates in a single pass.

Grammar, lowest precedence first::

    expression = term   { ("+" | "-") term }
    term       = factor { ("*" | "/") factor }
    factor     = ( ("+" | "-") factor
                 | "(" expression [")"]
                 | number
                 | identifier factor ) [ "^" factor ]

No syntax tree is built: every rule returns the float it denotes. Arithmetic
follows IEEE-754 double semantics, so division by zero and overflow produce
infinities or NaN instead of raising. Those are rejected later, when the
final value is checked.
"""

import math
from typing import Callable, Dict

from .cursor import Cursor
from .errors import UnexpectedCharacter, UnknownFunction


def _sqrt(value: float) -> float:
    return math.sqrt(value)


def _sin(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def _cos(degrees: float) -> float:
    return math.cos(math.radians(degrees))


def _tan(degrees: float) -> float:
    return math.tan(math.radians(degrees))


# Trigonometric functions take their argument in degrees
FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "sqrt": _sqrt,
    "sin": _sin,
    "cos": _cos,
    "tan": _tan,
}


def _is_number_char(char: str) -> bool:
    return "0" <= char <= "9" or char == "."


def _is_name_char(char: str) -> bool:
    return "a" <= char <= "z"


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1


def divide(dividend: float, divisor: float) -> float:
    """Divide with IEEE-754 semantics (``x / 0`` is an infinity or NaN)."""
    if divisor == 0.0:
        if dividend == 0.0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


def power(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent`` with IEEE-754 semantics."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            # zero to a negative power
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def apply_function(name: str, argument: float, position: int = 0) -> float:
    """
    Apply one of the named single-argument functions.

    Domain errors (``sqrt(-1)``, ``sin`` of an infinity) yield NaN.

    Args:
        name: Function name as read from the input
        argument: The already evaluated argument
        position: Where the name started, for error reporting

    Returns:
        The function value

    Raises:
        UnknownFunction: If ``name`` is not a recognized function
    """
    func = FUNCTIONS.get(name)
    if func is None:
        raise UnknownFunction(name, position)
    try:
        return func(argument)
    except ValueError:
        return math.nan


def parse_expression(cursor: Cursor) -> float:
    value = parse_term(cursor)
    while True:
        if cursor.expect("+"):
            value += parse_term(cursor)
        elif cursor.expect("-"):
            value -= parse_term(cursor)
        else:
            return value


def parse_term(cursor: Cursor) -> float:
    value = parse_factor(cursor)
    while True:
        if cursor.expect("*"):
            value *= parse_factor(cursor)
        elif cursor.expect("/"):
            value = divide(value, parse_factor(cursor))
        else:
            return value


def parse_factor(cursor: Cursor) -> float:
    """
    Parse one factor, including any unary signs and a trailing exponent.

    The right operand of ``^`` is itself a factor, which makes exponentiation
    right-associative and tighter than ``*`` and ``/``.
    """
    if cursor.expect("+"):
        return parse_factor(cursor)
    if cursor.expect("-"):
        return -parse_factor(cursor)

    if cursor.expect("("):
        value = parse_expression(cursor)
        # A missing ")" is tolerated
        cursor.expect(")")
    elif cursor.current is not None and _is_number_char(cursor.current):
        start = cursor.position
        literal = cursor.take_while(_is_number_char)
        try:
            value = float(literal)
        except ValueError:
            raise UnexpectedCharacter(start, literal[0], f"malformed number {literal!r}") from None
    elif cursor.current is not None and _is_name_char(cursor.current):
        start = cursor.position
        name = cursor.take_while(_is_name_char)
        value = apply_function(name, parse_factor(cursor), start)
    else:
        raise UnexpectedCharacter(cursor.position, cursor.current)

    if cursor.expect("^"):
        value = power(value, parse_factor(cursor))

    return value


def parse(text: str) -> float:
    """
    Evaluate ``text`` as a whole expression.

    Args:
        text: The expression

    Returns:
        The computed value, which may be an infinity or NaN

    Raises:
        UnexpectedCharacter: If the input is not a valid expression, including
            input left over after the top-level expression
        UnknownFunction: If an identifier names no known function
    """
    cursor = Cursor(text)
    try:
        value = parse_expression(cursor)
    except RecursionError:
        raise UnexpectedCharacter(cursor.position, cursor.current, "expression nested too deeply") from None
    if not cursor.at_end:
        raise UnexpectedCharacter(cursor.position, cursor.current)
    return value
