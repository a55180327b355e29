"""
Result Module

What the host gets back from an evaluation: either a value or
an error message, never an exception.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import ErrorKind, EvalError


@dataclass
class EvaluationResult:
    """
    Result of evaluating one expression.

    It tells us:
    - Did it work? (success)
    - What is the value? (value)
    - What went wrong? (error and kind, if any)
    """
    success: bool
    value: Optional[float] = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """String representation for display."""
        if self.success:
            return str(self.value)
        return f"Error: {self.error}"

    @classmethod
    def ok(cls, value: float, **metadata) -> "EvaluationResult":
        """Create a successful result."""
        return cls(success=True, value=value, metadata=metadata)

    @classmethod
    def fail(cls, error: str, kind: Optional[ErrorKind] = None, **metadata) -> "EvaluationResult":
        """Create a failed result."""
        return cls(success=False, error=error, kind=kind, metadata=metadata)

    @classmethod
    def from_error(cls, exc: EvalError, **metadata) -> "EvaluationResult":
        """Create a failed result from an evaluation error."""
        if exc.position is not None:
            metadata.setdefault("position", exc.position)
        return cls.fail(exc.message, kind=exc.kind, **metadata)
