"""
Data module: log entry schema and the shared log store.

    Producers
        ↓
    Observer (transform_report/observers) stamps page_id
        ↓
    LogStore (transform_report/data/store.py)
        ↓
    Analysis (transform_report/analysis) → TransformationLogAnalysis
"""

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
from transform_report.data.store import LogStore

__all__ = [
    # Schema
    "LogEntry",
    "LogLevel",
    "LogEntrySignificance",
    "ExceptionDetail",
    "StoredLogEntry",
    "HEADING_SUMMARY",
    "HEADING_PAGE_TRANSFORMATION_INFO",
    "KEY_VALUE_SEPARATOR",
    
    # Store
    "LogStore",
]
