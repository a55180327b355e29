"""
Tests for the parenthesis balance check.

Run with: pytest app/tests/test_balance.py -v
"""

import pytest

import sys
from pathlib import Path

# Add app/ to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exprcalc.balance import check_parentheses
from exprcalc.errors import ErrorKind, UnbalancedParentheses


class TestCheckParentheses:
    """Tests for check_parentheses()."""

    @pytest.mark.parametrize("expression", [
        "",
        "1+2",
        "()",
        "(()())",
        "log(exp(1))",
        "((1+2)*(3-4))/5",
    ])
    def test_balanced(self, expression):
        """Well-nested parentheses pass."""
        assert check_parentheses(expression) is None

    @pytest.mark.parametrize("expression", [
        "(",
        ")",
        "(2+3",
        "2+3)",
        "())(",
        "log(8",
    ])
    def test_unbalanced(self, expression):
        """One unmatched parenthesis is enough to fail."""
        with pytest.raises(UnbalancedParentheses) as exc_info:
            check_parentheses(expression)
        assert exc_info.value.kind == ErrorKind.UNBALANCED_PARENTHESES
        assert str(exc_info.value) == "Unbalanced parentheses"

    def test_unmatched_close_reports_its_position(self):
        """The first ')' without an opener is reported."""
        with pytest.raises(UnbalancedParentheses) as exc_info:
            check_parentheses("(1))+(2)")
        assert exc_info.value.position == 3

    def test_unmatched_open_reports_innermost(self):
        """The innermost '(' left open is reported."""
        with pytest.raises(UnbalancedParentheses) as exc_info:
            check_parentheses("((1)+(2")
        assert exc_info.value.position == 5

    def test_order_matters(self):
        """Equal counts are not enough; ')(' is unbalanced."""
        with pytest.raises(UnbalancedParentheses):
            check_parentheses(")(")

