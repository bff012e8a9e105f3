"""
Expense Validation

DESIGN DECISION: Validation returns one outcome from a closed set rather
than a boolean, so the caller can tell the user exactly what is wrong.

Checks run in a fixed order and the first failure wins:
    title -> amount -> category -> date

So an expense with an empty title AND a zero amount is reported as
EMPTY_TITLE. Callers rely on this order for their messages.

IMPORTANT: Validation NEVER silently fixes issues. An empty category is
rejected, not replaced with a placeholder.
"""

import math
from enum import Enum

from expense_tracker.models.expense import Expense


class ValidationOutcome(str, Enum):
    """Result of validating a single expense."""
    SUCCESS = "success"
    EMPTY_TITLE = "empty_title"
    INVALID_AMOUNT = "invalid_amount"
    EMPTY_CATEGORY = "empty_category"
    # The service always fills in a date, so this is unreachable from there
    EMPTY_DATE = "empty_date"


_ERROR_MESSAGES = {
    ValidationOutcome.SUCCESS: "Valid expense",
    ValidationOutcome.EMPTY_TITLE: "Title cannot be empty",
    ValidationOutcome.INVALID_AMOUNT: "Amount must be greater than 0",
    ValidationOutcome.EMPTY_CATEGORY: "Category cannot be empty",
    ValidationOutcome.EMPTY_DATE: "Date cannot be empty",
}

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class ExpenseValidator:
    """
    Stateless validator for expenses.

    Holds no state, so one instance can be shared freely.
    """

    def validate(self, expense: Expense) -> ValidationOutcome:
        """Check an expense and return the first failing outcome (or SUCCESS)."""
        if not expense.title:
            return ValidationOutcome.EMPTY_TITLE
        # inf and nan cannot be written back in a loadable form
        if not math.isfinite(expense.amount) or expense.amount <= 0:
            return ValidationOutcome.INVALID_AMOUNT
        if not expense.category:
            return ValidationOutcome.EMPTY_CATEGORY
        if not expense.date:
            return ValidationOutcome.EMPTY_DATE
        return ValidationOutcome.SUCCESS

    def get_error_message(self, outcome) -> str:
        """Human-readable message for an outcome."""
        return _ERROR_MESSAGES.get(outcome, UNKNOWN_ERROR_MESSAGE)
