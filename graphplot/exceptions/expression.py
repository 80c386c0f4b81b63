"""Expression evaluation exceptions."""

from typing import Optional

from graphplot.exceptions.base import ValidationError


class ExpressionError(ValidationError):
    """Base exception for expressions that cannot be evaluated."""

    def __init__(self, code: str, message: str, expression: str, value: Optional[float] = None):
        details = {"expression": expression}
        if value is not None:
            details["x"] = value
        super().__init__(code=code, message=message, details=details)
        self.expression = expression
        self.value = value


class ExpressionSyntaxError(ExpressionError):
    """Raised when an expression cannot be parsed or names unknown symbols."""

    def __init__(self, expression: str, reason: str):
        super().__init__(
            code="EXPRESSION_SYNTAX",
            message=f"Cannot parse expression '{expression}': {reason}",
            expression=expression,
        )
        self.reason = reason


class ExpressionEvaluationError(ExpressionError):
    """Raised when a parsed expression has no real value at the given x."""

    def __init__(self, expression: str, value: float, reason: str):
        super().__init__(
            code="EXPRESSION_EVALUATION",
            message=f"Expression '{expression}' has no real value at x={value}: {reason}",
            expression=expression,
            value=value,
        )
        self.reason = reason
