"""
Exceptions raised by proptable.

Compilation and enumeration never fail on their own. Only evaluation of a
compiled expression (or a caller-imposed limit) can abort a calculation,
and it always does so with the offending expression attached.
"""

from typing import Optional


class ParseOrEvalError(Exception):
    """
    Base class for failures of a truth table calculation.

    Properties:
        message: Human-readable description of the failure
        offending_expression: The concrete expression text that failed,
            with the row's truth values substituted in where available
    """

    def __init__(self, message: str, offending_expression: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.offending_expression = offending_expression

    def __str__(self) -> str:
        if self.offending_expression is None:
            return self.message
        return f"{self.message} (in: {self.offending_expression})"


class EvaluationError(ParseOrEvalError):
    """Raised when a fully-substituted expression is not valid boolean syntax."""
    pass


class VariableLimitError(ParseOrEvalError):
    """Raised when a calculation would enumerate more variables than allowed."""
    pass


class ConfigError(Exception):
    """Raised when settings cannot be loaded or contain invalid values."""
    pass


__all__ = [
    "ParseOrEvalError",
    "EvaluationError",
    "VariableLimitError",
    "ConfigError",
]
