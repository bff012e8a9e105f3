"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for expense storage.
This allows us to:
1. Swap the flat CSV file for another format or a database later
2. Keep the service decoupled from how records are kept

The interface is intentionally small. Records are addressed by their
0-based position, and the store performs no validation at all; that is
the service's job.
"""

from abc import ABC, abstractmethod
from typing import Optional

from expense_tracker.models.expense import Expense


class ExpenseStorageInterface(ABC):
    """
    Abstract interface for expense storage operations.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def add_expense(self, expense: Expense) -> None:
        """Append an expense to the end of the collection."""
        pass

    @abstractmethod
    def update_expense(self, index: int, expense: Expense) -> None:
        """
        Replace the expense at index.

        Out-of-range indices (including negative ones) are ignored.
        """
        pass

    @abstractmethod
    def remove_expense(self, index: int) -> None:
        """
        Remove the expense at index, shifting later ones left.

        Out-of-range indices (including negative ones) are ignored.
        """
        pass

    @abstractmethod
    def get_all_expenses(self) -> tuple[Expense, ...]:
        """Snapshot of every expense, in order."""
        pass

    @abstractmethod
    def get_expenses_by_category(self, category: str) -> list[Expense]:
        """
        Expenses whose category equals the argument exactly.

        Returns:
            Matching expenses in their original order
        """
        pass

    @abstractmethod
    def search_expenses(self, query: str) -> list[Expense]:
        """
        Expenses whose title or category contains query (case-sensitive).

        Returns:
            Matching expenses in their original order
        """
        pass

    @abstractmethod
    def save_to_file(self, filename: str) -> bool:
        """
        Persist every expense, overwriting the file.

        Returns:
            True if saved successfully
        """
        pass

    @abstractmethod
    def load_from_file(self, filename: str) -> bool:
        """
        Replace the collection with the contents of a saved file.

        Returns:
            True if loaded successfully
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def size(self) -> int:
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageNotFoundError(StorageError):
    """Storage directory or file does not exist."""
    pass


class RecordParseError(StorageError):
    """A line of a saved file could not be decoded."""

    def __init__(self, line_number: int, line: str, message: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        super().__init__(message or f"Line {line_number}: failed to parse {line!r}")
