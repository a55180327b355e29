"""
ExprCalc - An Arithmetic Expression Calculator

This package contains:
- evaluator: The recursive-descent evaluator (the core)
- balance: Parenthesis balance check run before evaluation
- cursor: Single-character lookahead used by the evaluator
- errors: Typed evaluation errors
- service: Non-raising wrapper used by hosts
- shell: The interactive compute/exit menu
- config: Configuration loading
"""

from .config import CalculatorConfig
from .errors import (
    ErrorKind,
    EvalError,
    InvalidNumber,
    MathDomainError,
    NegativeFactorial,
    NestingTooDeep,
    TrailingInput,
    UnbalancedParentheses,
    UnexpectedCharacter,
)
from .evaluator import evaluate
from .result import EvaluationResult
from .service import CalculatorService

__version__ = "0.1.0"
__all__ = [
    "CalculatorConfig",
    "CalculatorService",
    "ErrorKind",
    "EvalError",
    "EvaluationResult",
    "InvalidNumber",
    "MathDomainError",
    "NegativeFactorial",
    "NestingTooDeep",
    "TrailingInput",
    "UnbalancedParentheses",
    "UnexpectedCharacter",
    "evaluate",
]
