"""
Data Models Package

This package contains the Pydantic models used in the Expense Tracker.
"""

from expense_tracker.models.expense import (
    DEFAULT_DATE_FORMAT,
    Clock,
    Expense,
    format_timestamp,
)
from expense_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expense model
    "DEFAULT_DATE_FORMAT",
    "Clock",
    "Expense",
    "format_timestamp",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
