"""
CSV File Storage Implementation

Expenses are kept in memory as an ordered list and persisted to a flat
text file under a single storage directory, one record per line:

    "title",amount,"category","date"

TRADEOFFS:
- Whole-file rewrite on every save (fine for a personal expense list)
- No partial-write protection: a crash mid-save can leave a corrupt file
- Single process, single thread, no locking

LOAD POLICY: all-or-nothing. A file is parsed completely into a staging
list before anything in memory changes. If any line fails to decode, the
load is aborted and the in-memory collection is left exactly as it was.
"""

from pathlib import Path
from typing import Optional, Union

import structlog

from expense_tracker.config import get_settings
from expense_tracker.models.expense import Expense
from expense_tracker.services.storage.interface import (
    ExpenseStorageInterface,
    RecordParseError,
    StorageError,
    StorageNotFoundError,
)


logger = structlog.get_logger(__name__)

EXPECTED_FORMAT = '"title",amount,"category","date"'
CSV_EXTENSION = ".csv"


def resolve_filename(name: str, default: Optional[str] = None) -> str:
    """
    Apply the file naming convention used by callers.

    An empty name becomes the configured default file; a name without
    the .csv extension gets it appended. The store itself accepts any
    file name.
    """
    name = name.strip()
    if not name:
        name = default or get_settings().storage.default_filename
    if not name.lower().endswith(CSV_EXTENSION):
        name += CSV_EXTENSION
    return name


class CsvFileExpenseStorage(ExpenseStorageInterface):
    """
    In-memory expense storage with CSV file persistence.

    File names passed to save/load are resolved inside data_dir.
    """

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]] = None,
        encoding: Optional[str] = None,
    ):
        if data_dir is None or not encoding:
            storage_settings = get_settings().storage
            data_dir = storage_settings.data_dir if data_dir is None else data_dir
            encoding = encoding or storage_settings.file_encoding
        self._data_dir = Path(data_dir)
        self._encoding = encoding
        self._expenses: list[Expense] = []

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, filename: str) -> Path:
        """Full path of a file inside the storage directory."""
        return self._data_dir / filename

    # =========================================================================
    # IN-MEMORY OPERATIONS
    # =========================================================================

    def add_expense(self, expense: Expense) -> None:
        self._expenses.append(expense)

    def update_expense(self, index: int, expense: Expense) -> None:
        if self._in_bounds(index):
            self._expenses[index] = expense

    def remove_expense(self, index: int) -> None:
        if self._in_bounds(index):
            del self._expenses[index]

    def get_all_expenses(self) -> tuple[Expense, ...]:
        return tuple(self._expenses)

    def get_expenses_by_category(self, category: str) -> list[Expense]:
        return [e for e in self._expenses if e.category == category]

    def search_expenses(self, query: str) -> list[Expense]:
        return [
            e for e in self._expenses
            if query in e.title or query in e.category
        ]

    def clear(self) -> None:
        self._expenses.clear()

    def size(self) -> int:
        return len(self._expenses)

    def _in_bounds(self, index: int) -> bool:
        # Negative indices are out of range, never counted from the end
        return 0 <= index < len(self._expenses)

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def save_to_file(self, filename: str) -> bool:
        path = self.path_for(filename)
        try:
            if not self._data_dir.exists():
                self._data_dir.mkdir(parents=True)
                logger.info("storage_directory_created", directory=str(self._data_dir))
            content = "".join(f"{expense.to_csv()}\n" for expense in self._expenses)
            # Encode first so an unencodable record leaves the old file intact
            data = content.encode(self._encoding)
            path.write_bytes(data)
        except (OSError, UnicodeError) as e:
            logger.error("expense_save_failed", path=str(path), error=str(e))
            return False

        logger.info("expenses_saved", path=str(path), count=len(self._expenses))
        return True

    def load_from_file(self, filename: str) -> bool:
        path = self.path_for(filename)
        try:
            loaded = self._read_expenses(path)
        except RecordParseError as e:
            logger.error(
                "expense_load_failed",
                path=str(path),
                line_number=e.line_number,
                line=e.line,
                expected_format=EXPECTED_FORMAT,
            )
            return False
        except StorageError as e:
            logger.error("expense_load_failed", path=str(path), error=str(e))
            return False

        self._expenses = loaded
        logger.info("expenses_loaded", path=str(path), count=len(loaded))
        return True

    def _read_expenses(self, path: Path) -> list[Expense]:
        """
        Parse a saved file into a new list.

        Raises:
            StorageNotFoundError: Directory or file missing
            RecordParseError: A non-blank line could not be decoded
            StorageError: The file could not be read
        """
        if not self._data_dir.is_dir():
            raise StorageNotFoundError(f"Directory does not exist: {self._data_dir}")
        if not path.is_file():
            raise StorageNotFoundError(f"File does not exist: {path}")

        staged: list[Expense] = []
        try:
            with path.open("r", encoding=self._encoding) as f:
                for line_number, raw_line in enumerate(f, start=1):
                    line = raw_line.strip()
                    if not line:
                        logger.debug("skipping_blank_line", line_number=line_number)
                        continue

                    expense = Expense.from_csv(line)
                    if expense is None:
                        raise RecordParseError(line_number, line)
                    staged.append(expense)
        except (OSError, UnicodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

        return staged
