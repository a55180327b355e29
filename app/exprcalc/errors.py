"""
Errors Module

Every way an evaluation can fail has its own exception class.
They all derive from EvalError and carry a `kind` tag, so callers
can branch on the kind instead of matching message strings.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Tag identifying what went wrong during an evaluation."""
    UNBALANCED_PARENTHESES = "unbalanced_parentheses"
    UNEXPECTED_CHARACTER = "unexpected_character"
    TRAILING_INPUT = "trailing_input"
    NEGATIVE_FACTORIAL = "negative_factorial"
    NESTING_TOO_DEEP = "nesting_too_deep"
    INVALID_NUMBER = "invalid_number"
    MATH_DOMAIN = "math_domain"


# =============================================================================
# Base Exception
# =============================================================================

class EvalError(Exception):
    """
    Base exception for expression evaluation errors.

    Args:
        message: Human-readable description, shown to the user as-is
        position: Index in the expression where the problem was found
    """

    kind: ErrorKind

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position


# =============================================================================
# Concrete Errors
# =============================================================================

class UnbalancedParentheses(EvalError):
    """Raised by the balance check before any parsing happens."""
    kind = ErrorKind.UNBALANCED_PARENTHESES

    def __init__(self, position: Optional[int] = None):
        super().__init__("Unbalanced parentheses", position)


class UnexpectedCharacter(EvalError):
    """
    Raised when no factor production matches.

    `char` is None when the parser ran out of input.
    """
    kind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(self, char: Optional[str], position: Optional[int] = None):
        self.char = char
        super().__init__(f"Unexpected: {describe_char(char)}", position)


class TrailingInput(UnexpectedCharacter):
    """Raised when characters remain after a complete expression."""
    kind = ErrorKind.TRAILING_INPUT


class NegativeFactorial(EvalError):
    kind = ErrorKind.NEGATIVE_FACTORIAL

    def __init__(self, value: int, position: Optional[int] = None):
        self.value = value
        super().__init__(f"Negative factorial: {value}!", position)


class NestingTooDeep(EvalError):
    """Raised when parentheses, functions or unary signs nest past the limit."""
    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, max_depth: int, position: Optional[int] = None):
        self.max_depth = max_depth
        super().__init__(f"Expression nested deeper than {max_depth} levels", position)


class InvalidNumber(EvalError):
    """Raised when a run of digits and dots is not a valid number (e.g. '1.2.3')."""
    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, literal: str, position: Optional[int] = None):
        self.literal = literal
        super().__init__(f"Invalid number: '{literal}'", position)


class MathDomainError(EvalError):
    """Raised when factorial is applied to inf or nan, which have no integer part."""
    kind = ErrorKind.MATH_DOMAIN


def describe_char(char: Optional[str]) -> str:
    """Render a character (or end of input) for error messages."""
    if char is None:
        return "end of input"
    return repr(char)
