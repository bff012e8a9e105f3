"""
Core Expense Model for Expense Tracker

An expense is one financial entry: title, amount, category and date.

DESIGN DECISION: The model checks TYPES only. Whether an expense is
acceptable (non-empty title, positive amount, ...) is decided by the
ExpenseValidator, which reports a specific outcome instead of raising.
This lets the service build a candidate from raw input and explain
exactly what is wrong with it.

The model is frozen, so the storage layer can hand out its records
without anyone being able to change them behind its back.

CSV LINE FORMAT:
    "title",amount,"category","date"

Text fields are double-quoted; inside them a backslash escapes the next
character (\\" for a quote, \\\\ for a backslash, \\n and \\r for line
breaks). The amount is written as Python's shortest round-trip float
representation, so decoding an encoded expense gives back an equal one.
"""

import math
import re
from datetime import datetime
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


# A clock returns "now". Injected wherever the current time is needed.
Clock = Callable[[], datetime]

DEFAULT_DATE_FORMAT = "%a %b %d %H:%M:%S %Y"

_AMOUNT_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_ESCAPE_TO_CHAR = {
    '"': '"',
    '\\': '\\',
    'n': '\n',
    'r': '\r',
}


def format_timestamp(moment: datetime, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Render a moment as the human-readable text stored in Expense.date."""
    return moment.strftime(date_format)


class Expense(BaseModel):
    """
    A single expense entry.

    The date is opaque text. It is compared and displayed, never parsed.
    """
    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        description="What the money was spent on"
    )
    amount: float = Field(
        ...,
        description="Amount spent; valid expenses have amount > 0"
    )
    category: str = Field(
        ...,
        description="Free-form category used for filtering and totals"
    )
    date: str = Field(
        ...,
        description="Free-form date text"
    )

    @classmethod
    def from_input(
        cls,
        title: str,
        amount: float,
        category: str,
        date: str = "",
        clock: Optional[Clock] = None,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> "Expense":
        """
        Build a candidate expense from raw user input.

        An empty date is replaced with the clock's current time.
        No validity checks happen here.
        """
        if not date:
            clock = clock or datetime.now
            date = format_timestamp(clock(), date_format)
        return cls(title=title, amount=amount, category=category, date=date)

    def to_csv(self) -> str:
        """Encode this expense as one line of the CSV store format."""
        return ",".join([
            _quote(self.title),
            repr(float(self.amount)),
            _quote(self.category),
            _quote(self.date),
        ])

    @classmethod
    def from_csv(cls, line: str) -> Optional["Expense"]:
        """
        Decode one line of the CSV store format.

        Returns None for anything that does not have the exact shape
        "title",amount,"category","date". Never raises on bad input.
        """
        parsed = _read_quoted(line, 0)
        if parsed is None:
            return None
        title, pos = parsed

        pos = _expect_comma(line, pos)
        if pos is None:
            return None

        end = line.find(",", pos)
        if end == -1:
            return None
        amount = _parse_amount(line[pos:end])
        if amount is None:
            return None
        pos = end + 1

        parsed = _read_quoted(line, pos)
        if parsed is None:
            return None
        category, pos = parsed

        pos = _expect_comma(line, pos)
        if pos is None:
            return None

        parsed = _read_quoted(line, pos)
        if parsed is None:
            return None
        date, pos = parsed

        if line[pos:].strip():
            return None

        return cls(title=title, amount=amount, category=category, date=date)


def _quote(value: str) -> str:
    escaped = (
        value.replace('\\', '\\\\')
        .replace('"', '\\"')
        .replace('\n', '\\n')
        .replace('\r', '\\r')
    )
    return f'"{escaped}"'


def _read_quoted(line: str, pos: int) -> Optional[tuple[str, int]]:
    """Read a quoted field starting at pos (leading whitespace allowed).

    Returns (unescaped text, position after the closing quote).
    """
    while pos < len(line) and line[pos].isspace():
        pos += 1
    if pos >= len(line) or line[pos] != '"':
        return None
    pos += 1

    chars = []
    while pos < len(line):
        ch = line[pos]
        if ch == '\\':
            if pos + 1 >= len(line):
                return None
            unescaped = _ESCAPE_TO_CHAR.get(line[pos + 1])
            if unescaped is None:
                return None
            chars.append(unescaped)
            pos += 2
            continue
        if ch == '"':
            return "".join(chars), pos + 1
        chars.append(ch)
        pos += 1

    # Unterminated
    return None


def _expect_comma(line: str, pos: int) -> Optional[int]:
    if pos < len(line) and line[pos] == ",":
        return pos + 1
    return None


def _parse_amount(text: str) -> Optional[float]:
    text = text.strip()
    if not _AMOUNT_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value
