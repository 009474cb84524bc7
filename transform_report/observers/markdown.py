"""
Markdown report observer.

Collects entries into a shared LogStore, attributing each one to the page
currently being transformed, and writes a Markdown report on flush.

Flush behaviour:
- The store is cleared in a finally block: every flush empties it, whether
  rendering or writing failed or not
- Failures are logged with their traceback and never propagate
- An empty report (no pages discovered) is not written
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional

from transform_report.analysis.aggregator import ReportAggregator
from transform_report.analysis.analyzer import PageAnalyzer
from transform_report.core.config import ObserverConfig, config as global_config
from transform_report.data.schema import LogEntry, LogLevel, utc_now
from transform_report.data.store import LogStore
from transform_report.report import strings
from transform_report.report.renderer import ReportRenderer
from transform_report.report.tokens import MARKDOWN_TOKENS, MarkdownTokens
from transform_report.report.writer import FileReportWriter, ReportWriter

from .base import LogObserver

logger = logging.getLogger(__name__)

FILE_TIMESTAMP_FORMAT = "%Y-%m-%d-%H-%M-%S"


def report_file_name(report_date: datetime, discriminator: str = "") -> str:
    """
    Deterministic report file name for a run.

    Example:
        Page-Transformation-Report-2025-02-07-10-30-00batch1.md

    Args:
        report_date: Start of the reporting run
        discriminator: Optional suffix; any file extension on it is dropped
    """
    suffix = Path(discriminator).stem if discriminator else ""
    run_time = report_date.strftime(FILE_TIMESTAMP_FORMAT)
    return f"{strings.REPORT_FILE_PREFIX}-{run_time}{suffix}{strings.REPORT_FILE_EXTENSION}"


class MarkdownObserver(LogObserver):
    """
    Observer producing an end-user Markdown report.

    Several observers may share one store; each keeps its own page context.

    Args:
        store: Shared log store
        config: Observer settings (defaults to the global config)
        writer: Output sink (defaults to files in config.output_directory)
        report_date: Run timestamp used in the report and its file name
        tokens: Markup token set
    """

    def __init__(
        self,
        store: LogStore,
        config: Optional[ObserverConfig] = None,
        writer: Optional[ReportWriter] = None,
        report_date: Optional[datetime] = None,
        tokens: MarkdownTokens = MARKDOWN_TOKENS,
    ) -> None:
        self.store = store
        self.config = config or global_config.observer
        self.writer = writer or FileReportWriter(self.config.output_directory)
        self.report_date = report_date or utc_now()
        self.tokens = tokens

        self._page_id: Optional[str] = None
        self._page_lock = threading.Lock()
        self._flush_lock = threading.Lock()

    @property
    def page_id(self) -> Optional[str]:
        with self._page_lock:
            return self._page_id

    def set_page_id(self, page_id: str) -> None:
        with self._page_lock:
            self._page_id = page_id

    def debug(self, entry: LogEntry) -> None:
        """Debug entries are only kept when include_debug_entries is set."""
        if self.config.include_debug_entries:
            self._ingest(LogLevel.DEBUG, entry)

    def info(self, entry: LogEntry) -> None:
        self._ingest(LogLevel.INFO, entry)

    def warning(self, entry: LogEntry) -> None:
        self._ingest(LogLevel.WARNING, entry)

    def error(self, entry: LogEntry) -> None:
        self._ingest(LogLevel.ERROR, entry)

    def _ingest(self, level: LogLevel, entry: LogEntry) -> None:
        # Deep copy so a producer re-using or mutating the entry cannot alter stored entries
        stamped = entry.model_copy(update={"page_id": self.page_id}, deep=True)
        self.store.append(level, stamped)

    def report_file_name(self) -> str:
        return report_file_name(self.report_date, self.config.report_name_discriminator)

    def generate_report(self) -> str:
        """
        Render the report for the current store contents.

        No side effects: the store is left untouched.
        """
        aggregator = ReportAggregator(PageAnalyzer(self.report_date))
        renderer = ReportRenderer(
            tokens=self.tokens,
            include_verbose=self.config.include_verbose,
            include_debug=self.config.include_debug_entries,
        )
        return renderer.render(aggregator.aggregate(self.store.snapshot()))

    def flush(self) -> None:
        """
        Generate the report, write it, and clear the store.

        Concurrent flushes on one observer are serialized; the store is
        always cleared afterwards.
        """
        with self._flush_lock:
            try:
                report = self.generate_report()
                if not report:
                    logger.info("No transformed pages found, report not written")
                    return

                path = self.writer.write(self.report_file_name(), report)
                logger.info(f"Report saved as: {path}")
            except Exception as e:
                logger.error(f"Error writing report: {e}", exc_info=True)
            finally:
                self.store.clear()
