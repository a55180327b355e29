"""
Balance Checker

Verifies that parentheses are properly nested before the
evaluator ever looks at the expression.
"""

from typing import List

from .errors import UnbalancedParentheses


def check_parentheses(expression: str) -> None:
    """
    Check that every '(' has a matching ')'.

    Function-call parentheses and grouping parentheses are the same
    token here, only '(' and ')' characters are looked at.

    Raises:
        UnbalancedParentheses: On an unmatched ')' (immediately) or on
            '(' left open at the end of the scan
    """
    stack: List[int] = []  # positions of open parens

    for position, char in enumerate(expression):
        if char == "(":
            stack.append(position)
        elif char == ")":
            if not stack:
                raise UnbalancedParentheses(position)
            stack.pop()

    if stack:
        raise UnbalancedParentheses(stack[-1])

