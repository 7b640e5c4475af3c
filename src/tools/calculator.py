"""Calculator tool exposing the expression evaluator to agents."""

from strands.tools import tool

from evaluator import evaluate


@tool
def calculator(expression: str) -> str:
    """
    Evaluate an arithmetic expression.

    Supports + - * / and ^ (right-associative power), parentheses, unary
    signs, and the functions sqrt, sin, cos and tan. Trigonometric functions
    take degrees.

    Args:
        expression: Expression to evaluate, e.g. "3+5*2" or "sin(30)"

    Returns:
        The result as text. "Error" means the expression was invalid or had
        no finite value (e.g. division by zero). Blank input returns "".

    Examples:
        >>> calculator("3+5*2")
        '13'
        >>> calculator("2^3^2")
        '512'
        >>> calculator("sqrt(-1)")
        'Error'
    """
    return evaluate(expression)
