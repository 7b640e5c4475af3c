"""Error types raised while evaluating an expression."""

from typing import Optional


class EvaluationError(ValueError):
    """Base class for every failure raised by the evaluator."""


class UnexpectedCharacter(EvaluationError):
    """
    The grammar reached a character it cannot consume.

    Covers stray operators, malformed numbers and trailing input left
    over after the top-level expression.
    """

    def __init__(self, position: int, char: Optional[str], detail: Optional[str] = None):
        """
        Args:
            position: Index of the offending character in the input
            char: The offending character, or None at end of input
            detail: Optional extra description (e.g. the malformed literal)
        """
        self.position = position
        self.char = char
        self.detail = detail
        found = "end of input" if char is None else repr(char)
        message = f"Unexpected {found} at position {position}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnknownFunction(EvaluationError):
    """An identifier that is not one of the recognized function names."""

    def __init__(self, name: str, position: int):
        self.name = name
        self.position = position
        super().__init__(f"Unknown function: {name}")


class NonFiniteResult(EvaluationError):
    """A structurally valid computation produced an infinite or NaN value."""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Result is not finite: {value}")
