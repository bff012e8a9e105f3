"""Services package."""

from expense_tracker.services.storage import (
    CsvFileExpenseStorage,
    ExpenseStorageInterface,
    RecordParseError,
    StorageError,
    StorageNotFoundError,
    resolve_filename,
)

__all__ = [
    "CsvFileExpenseStorage",
    "ExpenseStorageInterface",
    "RecordParseError",
    "StorageError",
    "StorageNotFoundError",
    "resolve_filename",
]
