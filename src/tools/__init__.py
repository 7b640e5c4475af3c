"""Agent tools backed by the expression evaluator."""

from .calculator import calculator

__all__ = ["calculator"]
