"""
Tests for the parser cursor.

Run with: pytest app/tests/test_cursor.py -v
"""

import sys
from pathlib import Path

# Add app/ to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exprcalc.cursor import Cursor


class TestAdvance:
    """Tests for Cursor.advance()."""

    def test_starts_before_first_character(self):
        """A new cursor has not loaded anything yet."""
        cursor = Cursor("12")
        assert cursor.position == -1
        assert cursor.current_char is None

    def test_advance_loads_characters(self):
        """Each advance moves one character forward."""
        cursor = Cursor("12")
        cursor.advance()
        assert (cursor.position, cursor.current_char) == (0, "1")
        cursor.advance()
        assert (cursor.position, cursor.current_char) == (1, "2")

    def test_advance_past_end_is_safe(self):
        """Advancing at the end keeps returning the end sentinel."""
        cursor = Cursor("1")
        for _ in range(5):
            cursor.advance()
        assert cursor.current_char is None
        assert cursor.position == 1
        assert cursor.at_end

    def test_empty_text(self):
        """An empty text is at its end after the first advance."""
        cursor = Cursor("")
        cursor.advance()
        assert cursor.at_end
        assert cursor.current_char is None


class TestConsumeIf:
    """Tests for Cursor.consume_if()."""

    def test_match_consumes(self):
        """A matching character is consumed."""
        cursor = Cursor("+1")
        cursor.advance()
        assert cursor.consume_if("+") is True
        assert cursor.current_char == "1"

    def test_skips_spaces_before_matching(self):
        """Leading spaces are skipped before the comparison."""
        cursor = Cursor("   +1")
        cursor.advance()
        assert cursor.consume_if("+") is True
        assert cursor.position == 4

    def test_mismatch_only_consumes_spaces(self):
        """On mismatch the cursor stops on the non-space character."""
        cursor = Cursor("  -1")
        cursor.advance()
        assert cursor.consume_if("+") is False
        assert cursor.current_char == "-"
        assert cursor.position == 2

    def test_no_match_at_end(self):
        """Nothing matches at end of input."""
        cursor = Cursor("")
        cursor.advance()
        assert cursor.consume_if(")") is False


class TestKeywords:
    """Tests for keyword and function matching."""

    def test_keyword_full_match(self):
        """A full keyword is consumed in one go."""
        cursor = Cursor("exp(1)")
        cursor.advance()
        assert cursor.consume_keyword("exp") is True
        assert cursor.current_char == "("

    def test_keyword_partial_match_consumes_nothing(self):
        """A prefix of the keyword leaves the cursor where it was."""
        cursor = Cursor("lo(2)")
        cursor.advance()
        assert cursor.consume_keyword("log") is False
        assert cursor.position == 0
        assert cursor.current_char == "l"

    def test_keyword_at_end_of_text(self):
        """A keyword longer than the remaining text does not match."""
        cursor = Cursor("ex")
        cursor.advance()
        assert cursor.consume_keyword("exp") is False
        assert cursor.current_char == "e"

    def test_function_with_spaces(self):
        """Spaces may appear before the name and before '('."""
        cursor = Cursor("  log (2)")
        cursor.advance()
        assert cursor.consume_function("log") is True
        assert cursor.current_char == "2"

    def test_function_without_paren_backtracks(self):
        """A name not followed by '(' is given back."""
        cursor = Cursor("log8")
        cursor.advance()
        assert cursor.consume_function("log") is False
        assert cursor.position == 0
        assert cursor.current_char == "l"

    def test_seek(self):
        """seek() restores an earlier position and character."""
        cursor = Cursor("abc")
        cursor.advance()
        cursor.advance()
        cursor.seek(0)
        assert (cursor.position, cursor.current_char) == (0, "a")
        cursor.seek(3)
        assert cursor.current_char is None
