"""
Audit Models for Expense Tracker

Every mutating or file operation on the expense store produces an
audit event. This provides:
1. Traceability of what changed and when
2. Debugging information when a save or load goes wrong
3. The exact validation message a rejected input received

DESIGN DECISION: Audit events are immutable records. They are written to
the structured log and never edited afterwards.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Titles and file names are free-form; descriptions show at most this much
DESCRIPTION_TEXT_LIMIT = 80


def _clip(text: str, limit: int = DESCRIPTION_TEXT_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return text[:limit - 3] + "..."


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Record changes
    EXPENSE_ADDED = "expense_added"
    EXPENSE_UPDATED = "expense_updated"
    EXPENSE_DELETED = "expense_deleted"

    # Rejected requests
    VALIDATION_FAILED = "validation_failed"
    INDEX_REJECTED = "index_rejected"

    # Persistence
    FILE_SAVED = "file_saved"
    FILE_LOADED = "file_loaded"
    FILE_SAVE_FAILED = "file_save_failed"
    FILE_LOAD_FAILED = "file_load_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Position of the expense this is about, if any
    expense_index: Optional[int] = Field(
        default=None,
        description="0-based position of the affected expense"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "expense_index": self.expense_index,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.expense_added(index, title, amount)
        event = AuditEventBuilder.file_load_failed(filename)
    """

    @staticmethod
    def expense_added(index: int, title: str, amount: float) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            expense_index=index,
            description=f"Expense added: {_clip(title)}",
            details={"title": title, "amount": amount},
        )

    @staticmethod
    def expense_updated(index: int, title: str, amount: float) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_UPDATED,
            expense_index=index,
            description=f"Expense {index} updated: {_clip(title)}",
            details={"title": title, "amount": amount},
        )

    @staticmethod
    def expense_deleted(index: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_DELETED,
            expense_index=index,
            description=f"Expense {index} deleted",
        )

    @staticmethod
    def validation_failed(
        outcome: str,
        message: str,
        index: Optional[int] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VALIDATION_FAILED,
            severity=AuditSeverity.WARNING,
            expense_index=index,
            description="Expense rejected by validation",
            details={"outcome": outcome},
            error_message=message,
        )

    @staticmethod
    def index_rejected(index: int, size: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INDEX_REJECTED,
            severity=AuditSeverity.WARNING,
            expense_index=index,
            description=f"Index {index} is outside 0..{size - 1}",
            details={"size": size},
            error_message="Index out of range!",
        )

    @staticmethod
    def file_saved(filename: str, count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FILE_SAVED,
            description=f"Saved {count} expenses to {_clip(filename)}",
            details={"filename": filename, "count": count},
        )

    @staticmethod
    def file_loaded(filename: str, count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FILE_LOADED,
            description=f"Loaded {count} expenses from {_clip(filename)}",
            details={"filename": filename, "count": count},
        )

    @staticmethod
    def file_save_failed(filename: str, message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FILE_SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            description=f"Could not save expenses to {_clip(filename)}",
            details={"filename": filename},
            error_message=message,
        )

    @staticmethod
    def file_load_failed(filename: str, message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FILE_LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            description=f"Could not load expenses from {_clip(filename)}",
            details={"filename": filename},
            error_message=message,
        )
