"""Arithmetic expression evaluator."""

from .engine import ERROR, evaluate, evaluate_value
from .errors import EvaluationError, NonFiniteResult, UnexpectedCharacter, UnknownFunction
from .formatter import format_value

__all__ = [
    "ERROR",
    "evaluate",
    "evaluate_value",
    "format_value",
    "EvaluationError",
    "NonFiniteResult",
    "UnexpectedCharacter",
    "UnknownFunction",
]
