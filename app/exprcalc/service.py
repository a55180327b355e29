"""
Service Layer

Sits between the host shell and the evaluator: runs one evaluation,
tags its log lines with a correlation ID and turns evaluation errors
into an EvaluationResult.
"""

import uuid
from typing import Optional

from .config import CalculatorConfig, load_config
from .errors import EvalError
from .evaluator import evaluate
from .logging_config import get_logger, set_correlation_id
from .result import EvaluationResult

logger = get_logger("service")


class CalculatorService:
    """
    Service for evaluating expressions on behalf of a host.

    Each call is independent; the service only holds configuration.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or load_config()

    def evaluate(self, expression: str) -> EvaluationResult:
        """
        Evaluate an expression without raising on bad input.

        Returns:
            EvaluationResult with the value, or the error message and kind
        """
        correlation_id = uuid.uuid4().hex[:8]
        set_correlation_id(correlation_id)
        try:
            value = evaluate(expression, max_depth=self.config.max_nesting_depth)
            logger.info(f"Evaluated {expression!r} = {value!r}")
            return EvaluationResult.ok(
                value, expression=expression, correlation_id=correlation_id
            )
        except EvalError as e:
            logger.warning(
                f"Evaluation failed: {e.message}",
                extra={"expression": expression, "error_kind": e.kind.value},
            )
            return EvaluationResult.from_error(
                e, expression=expression, correlation_id=correlation_id
            )
        finally:
            set_correlation_id(None)
