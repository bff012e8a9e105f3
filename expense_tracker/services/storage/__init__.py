"""
Storage Services Package

Provides the abstract storage interface and its CSV file implementation.
"""

from expense_tracker.services.storage.interface import (
    ExpenseStorageInterface,
    RecordParseError,
    StorageError,
    StorageNotFoundError,
)
from expense_tracker.services.storage.csv_file import (
    CsvFileExpenseStorage,
    resolve_filename,
)

__all__ = [
    # Interface
    "ExpenseStorageInterface",
    # Exceptions
    "RecordParseError",
    "StorageError",
    "StorageNotFoundError",
    # CSV file implementation
    "CsvFileExpenseStorage",
    "resolve_filename",
]
