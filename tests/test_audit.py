"""Tests for AuditLogger."""

import pytest

from expense_tracker.audit import AuditLogger, configure_logging
from expense_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


class ExplodingLogger:
    def info(self, event, **kwargs):
        raise RuntimeError("log sink unavailable")


class TestAuditLogger:
    """Tests for routing audit events to the structured log."""

    @pytest.mark.parametrize("severity,level", [
        (AuditSeverity.DEBUG, "debug"),
        (AuditSeverity.INFO, "info"),
        (AuditSeverity.WARNING, "warning"),
        (AuditSeverity.ERROR, "error"),
    ])
    def test_logs_at_event_severity(self, recording_logger, severity, level):
        audit = AuditLogger(recording_logger)
        event = AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            severity=severity,
            description="Expense added",
        )
        assert audit.log(event) is True
        logged_level, name, fields = recording_logger.calls[0]
        assert logged_level == level
        assert name == "audit_event"
        assert fields["event_id"] == str(event.event_id)

    def test_helper_builds_event(self, recording_logger):
        audit = AuditLogger(recording_logger)
        audit.log_file_saved("x.csv", 3)
        _, _, fields = recording_logger.calls[0]
        assert fields["event_type"] == "file_saved"
        assert fields["details"] == {"filename": "x.csv", "count": 3}

    def test_logging_failure_is_swallowed(self):
        """Test that a broken log sink does not break the caller."""
        audit = AuditLogger(ExplodingLogger())
        event = AuditEvent(
            event_type=AuditEventType.EXPENSE_DELETED,
            description="Expense 0 deleted",
        )
        assert audit.log(event) is False

    def test_helper_swallows_build_failure(self, recording_logger, monkeypatch):
        """Test that an event that cannot be built is dropped, not raised."""
        def broken(*args):
            raise ValueError("cannot build event")

        monkeypatch.setattr(AuditEventBuilder, "file_saved", broken)
        audit = AuditLogger(recording_logger)
        audit.log_file_saved("x.csv", 3)
        assert recording_logger.calls == []

    def test_default_logger(self):
        """Test that the default structlog logger accepts events."""
        audit = AuditLogger()
        assert audit.log(AuditEvent(
            event_type=AuditEventType.FILE_LOADED,
            description="Loaded 0 expenses from x.csv",
        )) is True


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.parametrize("json_output", [True, False])
    def test_configure_then_log(self, json_output):
        configure_logging("DEBUG", json_output=json_output)
        assert AuditLogger().log(AuditEvent(
            event_type=AuditEventType.FILE_SAVED,
            description="Saved 1 expenses to x.csv",
        )) is True
