"""
Canonical log schema for the page transformation report.

Producers (the page transformation engine) emit LogEntry objects through an
observer. Entries are grouped per unit of work by their page_id, which the
observer stamps at ingestion time.

Design rationale:
- Minimal fields (only what the report needs)
- All timestamps in UTC so entries from concurrent producers are comparable
- Summary entries carry a significance tag identifying singular facts
  about a page (its source URL, target URL, ...)
- Settings travel as "key;#;value" messages under a reserved heading
"""

from __future__ import annotations

import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator

HEADING_SUMMARY = "Summary"
HEADING_PAGE_TRANSFORMATION_INFO = "Page Transformation Information"
KEY_VALUE_SEPARATOR = ";#;"


class LogLevel(str, Enum):
    """
    Log severity levels, in increasing order of severity.
    
    Only identity comparison is used; the order is documentation.
    """
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogEntrySignificance(str, Enum):
    """Tag marking summary entries that describe a singular fact about a page."""
    NONE = "NONE"
    SOURCE_PAGE = "SOURCE_PAGE"
    TARGET_PAGE = "TARGET_PAGE"
    SOURCE_SITE_URL = "SOURCE_SITE_URL"
    TARGET_SITE_URL = "TARGET_SITE_URL"
    ASSET_TRANSFERRED = "ASSET_TRANSFERRED"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ExceptionDetail(BaseModel):
    """
    Message and stack trace of an exception attached to a log entry.
    
    Kept as plain strings so entries stay serializable and comparable.
    """
    
    message: str = ""
    stack_trace: str = ""
    
    @classmethod
    def from_exception(cls, exc: BaseException) -> "ExceptionDetail":
        """
        Capture a live exception.
        
        Args:
            exc: Exception instance, ideally with a traceback attached
        
        Returns:
            ExceptionDetail with str(exc) as message and the formatted traceback
        """
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return cls(message=str(exc), stack_trace=stack.rstrip())


class LogEntry(BaseModel):
    """
    A single leveled observation emitted by a transformation worker.
    
    Attributes:
        heading: Semantic category, e.g. "Summary", the page-info heading,
            or a free-form operation name
        message: Free text; for page-info entries encodes "key;#;value"
        entry_time: UTC time the entry was created
        significance: Marker tag for summary entries
        page_id: Correlation key, overwritten by the observer at ingestion
        is_critical_exception: True for a fatal, page-aborting failure
        exception: Optional exception message and stack trace
    
    Notes:
        - Nothing here is required beyond construction; analysis tolerates
          empty headings and messages
        - Naive timestamps are read as UTC
    """
    
    heading: str = Field(
        default="",
        description="Semantic category of the entry"
    )
    
    message: str = Field(
        default="",
        description="Free text message"
    )
    
    entry_time: datetime = Field(
        default_factory=utc_now,
        description="UTC timestamp assigned at creation"
    )
    
    significance: LogEntrySignificance = Field(
        default=LogEntrySignificance.NONE,
        description="Marker tag for summary entries"
    )
    
    page_id: Optional[str] = Field(
        default=None,
        description="Unit of work the entry belongs to"
    )
    
    is_critical_exception: bool = Field(
        default=False,
        description="Entry reports a page-aborting failure"
    )
    
    exception: Optional[ExceptionDetail] = Field(
        default=None,
        description="Exception details, if any"
    )
    
    @field_validator("entry_time")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    
    @classmethod
    def setting(cls, key: str, value: str, **kwargs) -> "LogEntry":
        """Build a page-info entry carrying one transformation setting."""
        return cls(
            heading=HEADING_PAGE_TRANSFORMATION_INFO,
            message=f"{key}{KEY_VALUE_SEPARATOR}{value}",
            **kwargs,
        )
    
    @classmethod
    def summary(
        cls,
        message: str,
        significance: LogEntrySignificance = LogEntrySignificance.NONE,
        **kwargs,
    ) -> "LogEntry":
        """Build a summary entry, typically a page marker."""
        return cls(heading=HEADING_SUMMARY, message=message, significance=significance, **kwargs)


class StoredLogEntry(NamedTuple):
    """A (level, entry) pair as held by the log store."""
    level: LogLevel
    entry: LogEntry
