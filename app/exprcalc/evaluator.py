"""
Evaluator Module

This is the heart of the calculator: a recursive-descent evaluator
that computes the value while it parses. There is no tokenizer and
no syntax tree; three mutually recursive methods walk the text with
one character of lookahead.

Grammar (lowest precedence first):

    expression := term (('+' | '-') term)*
    term       := factor (('**' | '*' | '//' | '/' | '^') factor)*
    factor     := ('+' | '-') factor
                | ('log(' | 'exp(' | '(') expression [')'] ['!']
                | number ['!']

All term operators share one precedence level and apply left to
right, so "2*3**2" is (2*3)**2 = 36.
"""

import math

from .balance import check_parentheses
from .config import DEFAULT_MAX_NESTING_DEPTH
from .cursor import Cursor
from .errors import (
    InvalidNumber,
    MathDomainError,
    NegativeFactorial,
    NestingTooDeep,
    TrailingInput,
    UnexpectedCharacter,
)
from .logging_config import get_logger

logger = get_logger("evaluator")

NUMBER_CHARS = frozenset("0123456789.")
LN2 = math.log(2)


# === Arithmetic helpers ===

# Python raises on division by zero, log(0) and overflow; these helpers
# return the IEEE-754 result instead (inf, -inf or nan).

def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def _divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _floor_divide(a: float, b: float) -> float:
    quotient = _divide(a, b)
    if not math.isfinite(quotient):
        return quotient
    return float(math.floor(quotient))


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        # 0 to a negative power, or a negative base with a fractional exponent
        if base == 0:
            negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _log2(x: float) -> float:
    if x == 0:
        return -math.inf
    if x < 0:
        return math.nan
    return math.log(x) / LN2


def factorial(n: int) -> float:
    """
    Product of the integers 2..n as a float.

    Returns 1.0 for 0 and 1. Stops multiplying once the product
    overflows to infinity.

    Raises:
        NegativeFactorial: If n < 0
    """
    if n < 0:
        raise NegativeFactorial(n)
    result = 1.0
    for i in range(2, n + 1):
        result *= i
        if math.isinf(result):
            break
    return result


def truncate(value: float) -> int:
    """Drop the fractional part, rounding toward zero."""
    if not math.isfinite(value):
        raise MathDomainError(f"Factorial is undefined for {value!r}")
    return int(value)


# === The Parser ===

class Parser:
    """
    Evaluates one expression.

    A Parser owns its Cursor and is used for a single call to parse().
    Depth counts how many factors are currently being evaluated; each
    nested parenthesis, function call or unary sign adds one.
    """

    def __init__(self, expression: str, max_depth: int = DEFAULT_MAX_NESTING_DEPTH):
        self.expression = expression
        self.max_depth = max_depth
        self.cursor = Cursor(expression)
        self.depth = 0

    def parse(self) -> float:
        """
        Parse and evaluate the whole expression.

        Raises:
            TrailingInput: If characters remain after a complete expression
        """
        self.cursor.advance()
        value = self.parse_expression()
        if not self.cursor.at_end:
            raise TrailingInput(self.cursor.current_char, self.cursor.position)
        return value

    def parse_expression(self) -> float:
        cursor = self.cursor
        value = self.parse_term()
        while True:
            if cursor.consume_if("+"):
                value += self.parse_term()
            elif cursor.consume_if("-"):
                value -= self.parse_term()
            else:
                return value

    def parse_term(self) -> float:
        cursor = self.cursor
        value = self.parse_factor()
        while True:
            if cursor.consume_if("*"):
                # '**' only when the second '*' follows directly
                if cursor.current_char == "*":
                    cursor.advance()
                    value = _power(value, self.parse_factor())
                else:
                    value *= self.parse_factor()
            elif cursor.consume_if("/"):
                if cursor.current_char == "/":
                    cursor.advance()
                    value = _floor_divide(value, self.parse_factor())
                else:
                    value = _divide(value, self.parse_factor())
            elif cursor.consume_if("^"):
                value = _power(value, self.parse_factor())
            else:
                return value

    def parse_factor(self) -> float:
        self.depth += 1
        try:
            if self.depth > self.max_depth:
                raise NestingTooDeep(self.max_depth, self.cursor.position)
            return self._parse_factor()
        finally:
            self.depth -= 1

    def _parse_factor(self) -> float:
        cursor = self.cursor

        # Unary signs bind looser than '!': -1! is -(1!)
        if cursor.consume_if("+"):
            return self.parse_factor()
        if cursor.consume_if("-"):
            return -self.parse_factor()

        if cursor.consume_function("log"):
            value = _log2(self._parse_group())
        elif cursor.consume_function("exp"):
            value = _exp(self._parse_group())
        elif cursor.consume_if("("):
            value = self._parse_group()
        elif cursor.current_char is not None and cursor.current_char in NUMBER_CHARS:
            value = self._parse_number()
        else:
            raise UnexpectedCharacter(cursor.current_char, cursor.position)

        if cursor.consume_if("!"):
            value = factorial(truncate(value))

        return value

    def _parse_group(self) -> float:
        """Inner expression of '(', 'log(' or 'exp('; the closing ')' is optional."""
        value = self.parse_expression()
        self.cursor.consume_if(")")
        return value

    def _parse_number(self) -> float:
        cursor = self.cursor
        start = cursor.position
        while cursor.current_char is not None and cursor.current_char in NUMBER_CHARS:
            cursor.advance()
        literal = self.expression[start:cursor.position]
        try:
            return float(literal)
        except ValueError:
            raise InvalidNumber(literal, start) from None


# === Public API ===

def evaluate(expression: str, max_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> float:
    """
    Evaluate an arithmetic expression.

    Args:
        expression: Text such as "-3+((exp(2)*8/log(32))-4)*3"
        max_depth: Maximum nesting of parentheses, functions and unary signs

    Returns:
        The value as a float

    Raises:
        EvalError: One of its subclasses, describing what went wrong
    """
    check_parentheses(expression)
    parser = Parser(expression, max_depth=max_depth)
    try:
        value = parser.parse()
    except RecursionError:
        # max_depth set higher than the interpreter's stack allows
        raise NestingTooDeep(max_depth) from None
    logger.debug(f"Evaluated {expression!r} -> {value!r}")
    return value
