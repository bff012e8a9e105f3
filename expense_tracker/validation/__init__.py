"""Validation package."""

from expense_tracker.validation.validator import (
    UNKNOWN_ERROR_MESSAGE,
    ExpenseValidator,
    ValidationOutcome,
)

__all__ = ["UNKNOWN_ERROR_MESSAGE", "ExpenseValidator", "ValidationOutcome"]
