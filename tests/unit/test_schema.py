"""
Unit tests for log schema.

Tests the Pydantic models and reserved constants.
"""

import pytest
from datetime import datetime, timedelta, timezone

from transform_report.data.schema import (
    HEADING_PAGE_TRANSFORMATION_INFO,
    HEADING_SUMMARY,
    KEY_VALUE_SEPARATOR,
    ExceptionDetail,
    LogEntry,
    LogEntrySignificance,
    LogLevel,
    StoredLogEntry,
)


class TestLogLevel:
    """Test LogLevel enum."""
    
    def test_valid_levels(self):
        """Test that all standard levels exist."""
        assert LogLevel.DEBUG == "DEBUG"
        assert LogLevel.INFO == "INFO"
        assert LogLevel.WARNING == "WARNING"
        assert LogLevel.ERROR == "ERROR"
        assert len(LogLevel) == 4


class TestLogEntry:
    """Test LogEntry model."""
    
    def test_defaults(self):
        """An entry needs no fields at all."""
        entry = LogEntry()
        
        assert entry.heading == ""
        assert entry.message == ""
        assert entry.significance == LogEntrySignificance.NONE
        assert entry.page_id is None
        assert entry.is_critical_exception is False
        assert entry.exception is None
        assert entry.entry_time.tzinfo is not None
    
    def test_entry_time_assigned_at_creation(self):
        before = datetime.now(timezone.utc)
        entry = LogEntry(heading="Layout", message="Mapped")
        after = datetime.now(timezone.utc)
        
        assert before <= entry.entry_time <= after
    
    def test_naive_timestamp_read_as_utc(self):
        entry = LogEntry(entry_time=datetime(2025, 2, 7, 10, 30))
        
        assert entry.entry_time == datetime(2025, 2, 7, 10, 30, tzinfo=timezone.utc)
    
    def test_aware_timestamp_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        entry = LogEntry(entry_time=datetime(2025, 2, 7, 12, 30, tzinfo=plus_two))
        
        assert entry.entry_time == datetime(2025, 2, 7, 10, 30, tzinfo=timezone.utc)
        assert entry.entry_time.utcoffset() == timedelta(0)
    
    def test_setting_constructor(self):
        entry = LogEntry.setting("RemoveEmptyTextParts", "true")
        
        assert entry.heading == HEADING_PAGE_TRANSFORMATION_INFO
        assert entry.message == f"RemoveEmptyTextParts{KEY_VALUE_SEPARATOR}true"
    
    def test_summary_constructor(self):
        entry = LogEntry.summary("/sites/x/page1.aspx", LogEntrySignificance.SOURCE_PAGE)
        
        assert entry.heading == HEADING_SUMMARY
        assert entry.significance == LogEntrySignificance.SOURCE_PAGE
    
    def test_invalid_significance_rejected(self):
        with pytest.raises(ValueError):
            LogEntry(significance="NOT_A_TAG")


class TestExceptionDetail:
    """Test capturing live exceptions."""
    
    def test_from_exception_with_traceback(self):
        try:
            raise RuntimeError("web part mapping failed")
        except RuntimeError as e:
            detail = ExceptionDetail.from_exception(e)
        
        assert detail.message == "web part mapping failed"
        assert "Traceback" in detail.stack_trace
        assert "RuntimeError: web part mapping failed" in detail.stack_trace
    
    def test_from_exception_without_traceback(self):
        detail = ExceptionDetail.from_exception(ValueError("bad"))
        
        assert detail.message == "bad"
        assert detail.stack_trace == "ValueError: bad"


def test_stored_entry_unpacks():
    entry = LogEntry(message="hello")
    level, stored = StoredLogEntry(LogLevel.INFO, entry)
    
    assert level == LogLevel.INFO
    assert stored is entry
