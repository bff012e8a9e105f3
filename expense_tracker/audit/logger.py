"""
Audit Logger

DESIGN DECISION: Every change to the expense list, and every save or
load, is logged as a structured audit event. This provides:
1. Traceability of edits
2. Debugging capability when a file will not load
3. A record of which validation message each rejected input got

The audit logger:
- Is synchronous, like the rest of the core
- Never raises into the caller (logging failure must not break an edit)
"""

import logging
from typing import Any, Callable, Optional

import structlog

from expense_tracker.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structlog for local logging.

    Call once at application start-up. Libraries and tests can skip it;
    structlog falls back to its default console output.
    """
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Writes each event to the structured log at the event's severity.
    """

    def __init__(self, logger: Optional[Any] = None):
        self._logger = logger or structlog.get_logger("expense_tracker.audit")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns True if the event was written, False if logging failed.
        """
        try:
            log_dict = event.to_log_dict()
            if event.severity == AuditSeverity.ERROR:
                self._logger.error("audit_event", **log_dict)
            elif event.severity == AuditSeverity.WARNING:
                self._logger.warning("audit_event", **log_dict)
            elif event.severity == AuditSeverity.DEBUG:
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except Exception as e:
            # Audit failure must never break the operation being audited
            logging.getLogger(__name__).warning("audit logging failed: %s", e)
            return False
        return True

    def _build_and_log(self, build: Callable[..., AuditEvent], *args: Any) -> bool:
        try:
            event = build(*args)
        except Exception as e:
            logging.getLogger(__name__).warning("audit event could not be built: %s", e)
            return False
        return self.log(event)

    def log_expense_added(self, index: int, title: str, amount: float) -> None:
        self._build_and_log(AuditEventBuilder.expense_added, index, title, amount)

    def log_expense_updated(self, index: int, title: str, amount: float) -> None:
        self._build_and_log(AuditEventBuilder.expense_updated, index, title, amount)

    def log_expense_deleted(self, index: int) -> None:
        self._build_and_log(AuditEventBuilder.expense_deleted, index)

    def log_validation_failed(
        self,
        outcome: str,
        message: str,
        index: Optional[int] = None,
    ) -> None:
        """Log an expense rejected by the validator."""
        self._build_and_log(AuditEventBuilder.validation_failed, outcome, message, index)

    def log_index_rejected(self, index: int, size: int) -> None:
        self._build_and_log(AuditEventBuilder.index_rejected, index, size)

    def log_file_saved(self, filename: str, count: int) -> None:
        self._build_and_log(AuditEventBuilder.file_saved, filename, count)

    def log_file_loaded(self, filename: str, count: int) -> None:
        self._build_and_log(AuditEventBuilder.file_loaded, filename, count)

    def log_file_save_failed(self, filename: str, message: str) -> None:
        self._build_and_log(AuditEventBuilder.file_save_failed, filename, message)

    def log_file_load_failed(self, filename: str, message: str) -> None:
        self._build_and_log(AuditEventBuilder.file_load_failed, filename, message)
