"""Read cursor over the expression text."""

from typing import Callable, Optional


class Cursor:
    """
    Tracks a read position and the current character over one expression.

    The position only moves forward. Once it passes the last character,
    ``current`` is None, which acts as the end-of-input sentinel.

    Example:
        >>> cursor = Cursor(" (1")
        >>> cursor.expect("(")
        True
        >>> cursor.current
        '1'
    """

    __slots__ = ("text", "position", "current")

    def __init__(self, text: str):
        """
        Initialize the cursor on the first character of ``text``.

        Args:
            text: The expression to scan
        """
        self.text = text
        self.position = -1
        self.current: Optional[str] = None
        self.advance()

    @property
    def at_end(self) -> bool:
        """Whether every character has been consumed."""
        return self.position >= len(self.text)

    def advance(self) -> None:
        """Move to the next character, or to end of input."""
        self.position += 1
        if self.position < len(self.text):
            self.current = self.text[self.position]
        else:
            self.position = len(self.text)
            self.current = None

    def skip_spaces(self) -> None:
        while self.current == " ":
            self.advance()

    def expect(self, char: str) -> bool:
        """
        Skip spaces, then consume ``char`` if it is the current character.

        Args:
            char: The single character to match

        Returns:
            True if the character was consumed, False otherwise. On False the
            cursor stays on the first non-space character.
        """
        self.skip_spaces()
        if self.current == char:
            self.advance()
            return True
        return False

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """
        Consume the maximal run of characters accepted by ``predicate``.

        No spaces are skipped, before or inside the run.

        Args:
            predicate: Test applied to each character in turn

        Returns:
            The consumed slice of the input (empty if nothing matched)
        """
        start = self.position
        while self.current is not None and predicate(self.current):
            self.advance()
        return self.text[start:self.position]
