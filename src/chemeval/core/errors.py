"""Exceptions raised by the formula pipeline."""

from typing import Any

__all__ = [
    "FormulaError",
    "MalformedFormulaError",
    "InvalidOperationError",
    "EvaluationError",
]


class FormulaError(Exception):
    """Base class for every error raised while handling a formula."""


class MalformedFormulaError(FormulaError, ValueError):
    """
    Raised when the raw text of a formula cannot be tokenized.

    Attributes:
        index: Position in the source string where the problem was found
    """

    def __init__(self, message: str, index: int):
        super().__init__(message)
        self.message = message
        self.index = index

    def __str__(self) -> str:
        return f"{self.message} (at index {self.index})"


class InvalidOperationError(FormulaError, TypeError):
    """
    Raised when an operator receives operands it cannot combine.

    Attributes:
        lhs: Left-hand operand token
        rhs: Right-hand operand token
        operator: Operator token
    """

    def __init__(self, message: str, lhs: Any, rhs: Any, operator: Any):
        super().__init__(message)
        self.message = message
        self.lhs = lhs
        self.rhs = rhs
        self.operator = operator


class EvaluationError(FormulaError, ValueError):
    """Raised on empty input, operand underflow or leftover operands."""
