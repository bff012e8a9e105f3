"""
Expense Service for Expense Tracker

This module ties together storage, validation, aggregate queries and
audit logging. It is the only component a user interface should talk to.

DESIGN DECISION: The service enforces the boundaries:
- Nothing reaches storage without passing the validator
- Bad positions are reported distinctly from bad input
- Every failure is returned as an OperationResult, never raised,
  with a human-readable message available from get_last_error()
"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from expense_tracker.audit import AuditLogger
from expense_tracker.config import get_settings
from expense_tracker.models.expense import Clock, Expense
from expense_tracker.queries import ExpenseSummary, QueryExecutor
from expense_tracker.services.storage import (
    CsvFileExpenseStorage,
    ExpenseStorageInterface,
)
from expense_tracker.validation import ExpenseValidator, ValidationOutcome


INDEX_ERROR_MESSAGE = "Index out of range!"
SAVE_ERROR_MESSAGE = "Cannot create file!"
LOAD_ERROR_MESSAGE = "File not exist!"


class OperationResult(str, Enum):
    """Outcome of a service operation."""
    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    FILE_ERROR = "file_error"


class ExpenseService:
    """
    Business logic for expense management.

    Turns raw field values into validated expenses, keeps the last
    error message, and exposes totals over the stored expenses.
    """

    def __init__(
        self,
        storage: ExpenseStorageInterface,
        validator: Optional[ExpenseValidator] = None,
        clock: Optional[Clock] = None,
        audit_logger: Optional[AuditLogger] = None,
        date_format: Optional[str] = None,
    ):
        self._storage = storage
        self._validator = validator or ExpenseValidator()
        self._clock = clock or datetime.now
        self._audit_logger = audit_logger
        self._date_format = date_format or get_settings().app.date_format
        self._query_executor = QueryExecutor(storage)
        self._last_error = ""

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add_expense(
        self,
        title: str,
        amount: float,
        category: str,
        date: str = "",
    ) -> OperationResult:
        """
        Validate and append a new expense.

        An empty date is filled in with the current time from the clock.
        """
        expense = self._build(title, amount, category, date)

        outcome = self._validator.validate(expense)
        if outcome != ValidationOutcome.SUCCESS:
            return self._reject(outcome)

        self._storage.add_expense(expense)
        if self._audit_logger:
            self._audit_logger.log_expense_added(
                self._storage.size() - 1, expense.title, expense.amount
            )
        return OperationResult.SUCCESS

    def update_expense(
        self,
        index: int,
        title: str,
        amount: float,
        category: str,
        date: str = "",
    ) -> OperationResult:
        """Validate and replace the expense at index."""
        if not self._in_range(index):
            return self._reject_index(index)

        expense = self._build(title, amount, category, date)

        outcome = self._validator.validate(expense)
        if outcome != ValidationOutcome.SUCCESS:
            return self._reject(outcome, index)

        self._storage.update_expense(index, expense)
        if self._audit_logger:
            self._audit_logger.log_expense_updated(index, expense.title, expense.amount)
        return OperationResult.SUCCESS

    def delete_expense(self, index: int) -> OperationResult:
        if not self._in_range(index):
            return self._reject_index(index)

        self._storage.remove_expense(index)
        if self._audit_logger:
            self._audit_logger.log_expense_deleted(index)
        return OperationResult.SUCCESS

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_all_expenses(self) -> tuple[Expense, ...]:
        return self._storage.get_all_expenses()

    def get_expenses_by_category(self, category: str) -> list[Expense]:
        return self._storage.get_expenses_by_category(category)

    def search_expenses(self, query: str) -> list[Expense]:
        return self._storage.search_expenses(query)

    def calculate_total(self, category: str = "") -> float:
        """Total of all expenses, or of one exact category when given."""
        return self._query_executor.total(category)

    def totals_by_category(self) -> dict[str, float]:
        return self._query_executor.totals_by_category()

    def summarize(self, category: str = "") -> ExpenseSummary:
        return self._query_executor.summarize(category)

    def size(self) -> int:
        return self._storage.size()

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def save_to_file(self, filename: str) -> OperationResult:
        if not self._storage.save_to_file(filename):
            self._last_error = SAVE_ERROR_MESSAGE
            if self._audit_logger:
                self._audit_logger.log_file_save_failed(filename, SAVE_ERROR_MESSAGE)
            return OperationResult.FILE_ERROR

        if self._audit_logger:
            self._audit_logger.log_file_saved(filename, self._storage.size())
        return OperationResult.SUCCESS

    def load_from_file(self, filename: str) -> OperationResult:
        if not self._storage.load_from_file(filename):
            self._last_error = LOAD_ERROR_MESSAGE
            if self._audit_logger:
                self._audit_logger.log_file_load_failed(filename, LOAD_ERROR_MESSAGE)
            return OperationResult.FILE_ERROR

        if self._audit_logger:
            self._audit_logger.log_file_loaded(filename, self._storage.size())
        return OperationResult.SUCCESS

    # =========================================================================
    # ERRORS
    # =========================================================================

    @property
    def last_error(self) -> str:
        """Message of the most recent failed operation ("" if none yet)."""
        return self._last_error

    def get_last_error(self) -> str:
        return self._last_error

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _build(self, title: str, amount: float, category: str, date: str) -> Expense:
        return Expense.from_input(
            title,
            amount,
            category,
            date,
            clock=self._clock,
            date_format=self._date_format,
        )

    def _in_range(self, index: int) -> bool:
        return 0 <= index < self._storage.size()

    def _reject(
        self,
        outcome: ValidationOutcome,
        index: Optional[int] = None,
    ) -> OperationResult:
        self._last_error = self._validator.get_error_message(outcome)
        if self._audit_logger:
            self._audit_logger.log_validation_failed(outcome.value, self._last_error, index)
        return OperationResult.VALIDATION_ERROR

    def _reject_index(self, index: int) -> OperationResult:
        self._last_error = INDEX_ERROR_MESSAGE
        if self._audit_logger:
            self._audit_logger.log_index_rejected(index, self._storage.size())
        return OperationResult.INDEX_OUT_OF_RANGE


def create_expense_service(
    data_dir: Optional[Union[str, Path]] = None,
    clock: Optional[Clock] = None,
) -> ExpenseService:
    """
    Factory function to wire the default application components.

    Args:
        data_dir: Storage directory; defaults to the configured one.
        clock: Source of "now" for defaulted dates; defaults to wall-clock.

    Returns:
        A service over a CSV file store with audit logging enabled
    """
    storage = CsvFileExpenseStorage(data_dir=data_dir)
    return ExpenseService(
        storage=storage,
        validator=ExpenseValidator(),
        clock=clock,
        audit_logger=AuditLogger(),
    )
