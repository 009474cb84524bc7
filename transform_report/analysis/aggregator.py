"""
Cross-page report aggregation.

Discovers the pages present in a log snapshot, analyzes each one and builds
the summary rows and issue rollup consumed by the renderer.

Discovery rules:
- A page is announced by a Summary entry tagged SOURCE_SITE_URL
- Pages appear in the insertion order of their first such entry
- A page announcing itself more than once is analyzed once
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from transform_report.data.schema import (
    HEADING_SUMMARY,
    LogEntrySignificance,
    StoredLogEntry,
)

from .analyzer import PageAnalyzer
from .schema import (
    CriticalIssue,
    IssueRow,
    SummaryRow,
    TransformationLogAnalysis,
    TransformationReport,
)
from .urls import prepend_if_not_none, strip_relative_url_section

logger = logging.getLogger(__name__)

STATUS_FAILED = "Failed"
STATUS_SUCCEEDED = "Succeeded"
STATUS_SUCCEEDED_WITH_ISSUES = "Succeeded with {warnings} warnings / {errors} errors"


def format_duration(duration: timedelta) -> str:
    """
    Format a duration as HH:MM:SS.

    Hours are total hours; sub-second precision is dropped.
    """
    total_seconds = max(int(duration.total_seconds()), 0)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def classify_status(analysis: TransformationLogAnalysis) -> str:
    """
    Determine the outcome of a page.

    Any critical entry fails the page regardless of other counts.
    """
    if analysis.critical_errors:
        return STATUS_FAILED

    warning_count = len(analysis.warnings)
    error_count = len(analysis.errors)
    if warning_count > 0 or error_count > 0:
        return STATUS_SUCCEEDED_WITH_ISSUES.format(warnings=warning_count, errors=error_count)
    return STATUS_SUCCEEDED


def discover_pages(logs: Sequence[StoredLogEntry]) -> List[Optional[str]]:
    """
    Page ids in order of their first SOURCE_SITE_URL summary entry.

    Returns:
        Distinct page ids, first-seen wins
    """
    seen = set()
    pages: List[Optional[str]] = []
    for log in logs:
        entry = log.entry
        if entry.heading != HEADING_SUMMARY or entry.significance != LogEntrySignificance.SOURCE_SITE_URL:
            continue
        if entry.page_id in seen:
            continue
        seen.add(entry.page_id)
        pages.append(entry.page_id)
    return pages


class ReportAggregator:
    """
    Deterministic report aggregator.

    Notes:
    - A page's critical failure never prevents other pages from being reported.
    - Zero discovered pages yields an empty report, not an error.
    """

    def __init__(self, analyzer: Optional[PageAnalyzer] = None) -> None:
        self.analyzer = analyzer or PageAnalyzer()

    @property
    def report_date(self) -> datetime:
        return self.analyzer.report_date

    def aggregate(self, logs: Sequence[StoredLogEntry]) -> TransformationReport:
        """
        Build the report model from a store snapshot.

        Args:
            logs: Full log store snapshot

        Returns:
            TransformationReport with pages in discovery order
        """
        analyses = [self.analyzer.analyze(logs, page_id) for page_id in discover_pages(logs)]
        logger.debug(f"Discovered {len(analyses)} page(s) in {len(logs)} log entries")

        return TransformationReport(
            report_date=self.report_date,
            analyses=analyses,
            rows=[self._summary_row(a) for a in analyses],
            warnings=self._warning_rows(analyses),
            errors=self._error_rows(analyses),
            critical=self._critical_issues(analyses),
        )

    def _summary_row(self, analysis: TransformationLogAnalysis) -> SummaryRow:
        return SummaryRow(
            start_time=analysis.start_time,
            duration=format_duration(analysis.duration),
            source_page_title=strip_relative_url_section(analysis.source_page),
            source_page_url=prepend_if_not_none(analysis.source_page, analysis.base_tenant_url),
            target_page_title=strip_relative_url_section(analysis.target_page),
            target_page_url=prepend_if_not_none(analysis.target_page, analysis.base_tenant_url),
            status=classify_status(analysis),
        )

    def _warning_rows(self, analyses: Sequence[TransformationLogAnalysis]) -> List[IssueRow]:
        rows: List[IssueRow] = []
        for analysis in analyses:
            page_title = strip_relative_url_section(analysis.source_page)
            for log in analysis.warnings:
                rows.append(
                    IssueRow(
                        entry_time=log.entry.entry_time,
                        page_title=page_title,
                        heading=log.entry.heading,
                        message=log.entry.message,
                    )
                )
        return rows

    def _error_rows(self, analyses: Sequence[TransformationLogAnalysis]) -> List[IssueRow]:
        rows: List[IssueRow] = []
        for analysis in analyses:
            page_title = strip_relative_url_section(analysis.source_page)
            for log in analysis.errors:
                if log.entry.is_critical_exception:
                    continue
                exception = log.entry.exception
                rows.append(
                    IssueRow(
                        entry_time=log.entry.entry_time,
                        page_title=page_title,
                        heading=log.entry.heading,
                        message=log.entry.message,
                        stack_trace=exception.stack_trace if exception else None,
                    )
                )
        return rows

    def _critical_issues(self, analyses: Sequence[TransformationLogAnalysis]) -> List[CriticalIssue]:
        issues: List[CriticalIssue] = []
        for analysis in analyses:
            page_title = strip_relative_url_section(analysis.source_page)
            page_url = prepend_if_not_none(analysis.source_page, analysis.base_tenant_url)
            # Usually at most one per page
            for log in analysis.critical_errors:
                exception = log.entry.exception
                issues.append(
                    CriticalIssue(
                        entry_time=log.entry.entry_time,
                        page_title=page_title,
                        page_url=page_url,
                        message=exception.message if exception else log.entry.message,
                        stack_trace=exception.stack_trace if exception else "",
                    )
                )
        return issues
