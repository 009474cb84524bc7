"""
Per-page log analysis.

Reconstructs a page's timeline from the flat log stream and derives duration,
markers, settings and issue subsets. There is no explicit job object: every
fact comes from log entries, so missing markers simply leave fields unset.

Guarantees:
- Deterministic: same snapshot and page id give an equal analysis
- Total: never raises; a failing derivation yields that field's default
- Stable: entries with equal timestamps keep insertion order
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence, Tuple

from transform_report.data.schema import (
    HEADING_PAGE_TRANSFORMATION_INFO,
    HEADING_SUMMARY,
    KEY_VALUE_SEPARATOR,
    LogEntrySignificance,
    LogLevel,
    StoredLogEntry,
    utc_now,
)

from .schema import TransformationLogAnalysis
from .urls import base_tenant_url

logger = logging.getLogger(__name__)


def order_page_logs(logs: Iterable[StoredLogEntry], page_id: Optional[str]) -> List[StoredLogEntry]:
    """
    Select one page's entries and order them by entry_time.

    sorted() is stable, so equal timestamps keep insertion order.
    """
    selected = [log for log in logs if log.entry.page_id == page_id]
    return sorted(selected, key=lambda log: log.entry.entry_time)


def first_marker(
    summary_logs: Sequence[StoredLogEntry],
    significance: LogEntrySignificance,
) -> Optional[str]:
    """Message of the first summary entry carrying the given significance."""
    for log in summary_logs:
        if log.entry.significance == significance:
            return log.entry.message
    return None


def parse_settings(logs: Iterable[StoredLogEntry]) -> List[Tuple[str, str]]:
    """
    Parse "key;#;value" page-info entries.

    Lines that do not split into exactly two parts are dropped.
    """
    settings: List[Tuple[str, str]] = []
    for log in logs:
        if log.entry.heading != HEADING_PAGE_TRANSFORMATION_INFO:
            continue
        parts = (log.entry.message or "").split(KEY_VALUE_SEPARATOR)
        if len(parts) == 2:
            settings.append((parts[0], parts[1]))
    return settings


def compute_duration(ordered_logs: Sequence[StoredLogEntry]) -> timedelta:
    """Span between the first and last entry; zero when there are none."""
    if not ordered_logs:
        return timedelta(0)
    return ordered_logs[-1].entry.entry_time - ordered_logs[0].entry.entry_time


def analyze_page(
    logs: Sequence[StoredLogEntry],
    page_id: Optional[str],
    report_date: Optional[datetime] = None,
) -> TransformationLogAnalysis:
    """
    Build the analysis of one page.

    Args:
        logs: Full log store snapshot
        page_id: Page to analyze (exact string match)
        report_date: Date shown in the report (defaults to now)

    Returns:
        TransformationLogAnalysis; a page without entries yields empty
        collections and a zero duration
    """
    report_date = report_date or utc_now()

    try:
        ordered = order_page_logs(logs, page_id)
    except TypeError as e:
        # Entries built without validation can carry incomparable timestamps
        logger.warning(f"Could not order logs for page {page_id!r}: {e}")
        ordered = [log for log in logs if log.entry.page_id == page_id]

    summary = [log for log in ordered if log.entry.heading == HEADING_SUMMARY]
    details = [
        log for log in ordered
        if log.entry.heading not in (HEADING_SUMMARY, HEADING_PAGE_TRANSFORMATION_INFO)
    ]
    source_site = first_marker(summary, LogEntrySignificance.SOURCE_SITE_URL)

    try:
        duration = compute_duration(ordered)
    except TypeError as e:
        logger.warning(f"Could not compute duration for page {page_id!r}: {e}")
        duration = timedelta(0)

    return TransformationLogAnalysis(
        page_id=page_id,
        report_date=report_date,
        ordered_logs=ordered,
        summary_logs=summary,
        detail_logs=details,
        settings=parse_settings(ordered),
        assets_transferred=[
            log for log in summary
            if log.entry.significance == LogEntrySignificance.ASSET_TRANSFERRED
        ],
        critical_errors=[log for log in summary if log.entry.is_critical_exception],
        errors=[log for log in ordered if log.level == LogLevel.ERROR],
        warnings=[log for log in ordered if log.level == LogLevel.WARNING],
        source_page=first_marker(summary, LogEntrySignificance.SOURCE_PAGE),
        target_page=first_marker(summary, LogEntrySignificance.TARGET_PAGE),
        source_site=source_site,
        target_site=first_marker(summary, LogEntrySignificance.TARGET_SITE_URL),
        base_tenant_url=base_tenant_url(source_site),
        duration=duration,
    )


class PageAnalyzer:
    """
    Page analysis bound to one report date.

    Kept behind this seam so an explicit per-page context object can replace
    log-derived timings later without touching aggregation or rendering.
    """

    def __init__(self, report_date: Optional[datetime] = None) -> None:
        self.report_date = report_date or utc_now()

    def analyze(self, logs: Sequence[StoredLogEntry], page_id: Optional[str]) -> TransformationLogAnalysis:
        return analyze_page(logs, page_id, self.report_date)
