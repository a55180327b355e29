"""
Cursor Module

Single-character lookahead over the expression text.
The evaluator never tokenizes: it asks the cursor "is the next
thing a '+'?" and the cursor answers, consuming it if so.
"""

from typing import Optional

SPACE = " "


class Cursor:
    """
    Scanner state for one evaluation.

    `position` starts at -1 (before the first character); call
    advance() once to load the first character. `current_char` is
    None once the end of the text has been reached.
    """

    def __init__(self, text: str):
        self.text = text
        self.position = -1
        self.current_char: Optional[str] = None

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def advance(self) -> None:
        """Move to the next character. Safe to call at end of input."""
        if self.position < len(self.text):
            self.position += 1
        self.current_char = self.text[self.position] if not self.at_end else None

    def skip_spaces(self) -> None:
        while self.current_char == SPACE:
            self.advance()

    def consume_if(self, expected: str) -> bool:
        """
        Skip spaces, then consume `expected` if it is the current character.

        Returns:
            True if the character was consumed. On False only the
            spaces have been skipped.
        """
        self.skip_spaces()
        if self.current_char == expected:
            self.advance()
            return True
        return False

    def consume_keyword(self, word: str) -> bool:
        """
        Skip spaces, then consume `word` only if all of it is next.

        A partial match (e.g. "lo" when looking for "log") consumes
        nothing, so the next alternative starts from the same place.
        """
        self.skip_spaces()
        if self.at_end or not self.text.startswith(word, self.position):
            return False
        for _ in word:
            self.advance()
        return True

    def consume_function(self, name: str) -> bool:
        """
        Consume a function call opener such as "log(".

        Spaces are allowed between the name and '('. If the name is
        not followed by '(', the cursor is moved back to where it was.
        """
        start = self.position
        if self.consume_keyword(name) and self.consume_if("("):
            return True
        self.seek(start)
        return False

    def seek(self, position: int) -> None:
        """Jump back to a previously seen position."""
        self.position = position
        self.current_char = self.text[position] if 0 <= position < len(self.text) else None

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, current_char={self.current_char!r})"
