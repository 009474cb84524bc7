"""
Page transformation report engine.

Collects leveled log entries from page transformation workers, groups them
per page and renders a summary report with an issue rollup.

Typical use:

    store = LogStore()
    observer = MarkdownObserver(store)
    observer.set_page_id("page-1")
    observer.info(LogEntry(heading="Layout", message="Mapped 3 web parts"))
    observer.flush()
"""

from transform_report.analysis import PageAnalyzer, ReportAggregator, TransformationLogAnalysis
from transform_report.core import Config, ObserverConfig, config
from transform_report.data import (
    ExceptionDetail,
    LogEntry,
    LogEntrySignificance,
    LogLevel,
    LogStore,
)
from transform_report.observers import LogObserver, MarkdownObserver
from transform_report.report import FileReportWriter, ReportRenderer, ReportWriter

__all__ = [
    "Config",
    "ObserverConfig",
    "config",
    "LogEntry",
    "LogLevel",
    "LogEntrySignificance",
    "ExceptionDetail",
    "LogStore",
    "PageAnalyzer",
    "ReportAggregator",
    "TransformationLogAnalysis",
    "ReportRenderer",
    "ReportWriter",
    "FileReportWriter",
    "LogObserver",
    "MarkdownObserver",
]
