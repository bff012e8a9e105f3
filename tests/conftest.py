"""Shared fixtures for Expense Tracker tests."""

from datetime import datetime

import pytest

from expense_tracker.models.expense import DEFAULT_DATE_FORMAT
from expense_tracker.orchestrator import ExpenseService
from expense_tracker.services.storage import CsvFileExpenseStorage


FIXED_NOW = datetime(2024, 1, 1, 9, 30, 0)
FIXED_NOW_TEXT = "Mon Jan 01 09:30:00 2024"


class RecordingLogger:
    """Stand-in for a structlog logger that remembers every call."""

    def __init__(self):
        self.calls = []

    def _record(self, level, event, **kwargs):
        self.calls.append((level, event, kwargs))

    def debug(self, event, **kwargs):
        self._record("debug", event, **kwargs)

    def info(self, event, **kwargs):
        self._record("info", event, **kwargs)

    def warning(self, event, **kwargs):
        self._record("warning", event, **kwargs)

    def error(self, event, **kwargs):
        self._record("error", event, **kwargs)

    def event_types(self):
        return [kwargs["event_type"] for _, _, kwargs in self.calls]


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data_store"


@pytest.fixture
def storage(data_dir):
    return CsvFileExpenseStorage(data_dir=data_dir)


@pytest.fixture
def service(storage, fixed_clock):
    return ExpenseService(
        storage=storage,
        clock=fixed_clock,
        date_format=DEFAULT_DATE_FORMAT,
    )


@pytest.fixture
def recording_logger():
    return RecordingLogger()
