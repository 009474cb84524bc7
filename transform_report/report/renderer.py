"""
Report rendering.

Turns an aggregated TransformationReport into text. Rendering is a pure
function of the report model, the verbosity flags and the token set.

Layout:
    Summary table (always)
    Warnings / Errors / Critical errors (each only when present)
    Per-page details (verbose only)
"""

from __future__ import annotations

from datetime import datetime
from typing import FrozenSet, List, Optional

from transform_report.analysis.aggregator import format_duration
from transform_report.analysis.schema import TransformationLogAnalysis, TransformationReport
from transform_report.analysis.urls import strip_relative_url_section
from transform_report.data.schema import LogLevel

from . import strings
from .tokens import MARKDOWN_TOKENS, MarkdownTokens, emphasize

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return value.strftime(TIMESTAMP_FORMAT)


class ReportRenderer:
    """
    Renders a TransformationReport with a pluggable token set.

    Args:
        tokens: Markup tokens (Markdown by default)
        include_verbose: Render per-page details after the rollup
        include_debug: Keep Debug rows in the per-page detail table
    """

    def __init__(
        self,
        tokens: MarkdownTokens = MARKDOWN_TOKENS,
        include_verbose: bool = False,
        include_debug: bool = False,
    ) -> None:
        self.tokens = tokens
        self.include_verbose = include_verbose
        self.include_debug = include_debug

    @property
    def detail_levels(self) -> FrozenSet[LogLevel]:
        """Levels shown in the per-page detail table."""
        if self.include_debug:
            return frozenset({LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARNING})
        return frozenset({LogLevel.INFO, LogLevel.WARNING})

    def render(self, report: TransformationReport) -> str:
        """
        Render the full report.

        Returns:
            Report text, or "" when the report holds no pages
        """
        if report.is_empty:
            return ""

        lines: List[str] = []
        self._render_summary(report, lines)
        self._render_issues(report, lines)
        if self.include_verbose:
            self._render_page_details(report, lines)
        return "\n".join(lines) + "\n"

    def _render_summary(self, report: TransformationReport, lines: List[str]) -> None:
        t = self.tokens
        lines.append(t.make_heading(1, strings.SUMMARY_REPORT))
        lines.append("")
        lines.append(t.make_row(*strings.SUMMARY_TABLE_HEADER))
        lines.append(t.make_header_separator(len(strings.SUMMARY_TABLE_HEADER)))
        for row in report.rows:
            lines.append(
                t.make_row(
                    format_timestamp(row.start_time),
                    row.duration,
                    t.make_link(row.source_page_title, row.source_page_url),
                    t.make_link(row.target_page_title, row.target_page_url),
                    row.status,
                )
            )
        lines.append("")

    def _render_issues(self, report: TransformationReport, lines: List[str]) -> None:
        t = self.tokens
        columns = len(strings.ISSUES_TABLE_HEADER)

        if report.warnings:
            lines.append(t.make_heading(2, strings.WARNINGS_OCCURRED))
            lines.append("")
            lines.append(t.make_row(*strings.ISSUES_TABLE_HEADER))
            lines.append(t.make_header_separator(columns))
            for issue in report.warnings:
                lines.append(
                    t.make_row(
                        format_timestamp(issue.entry_time),
                        issue.page_title,
                        issue.heading,
                        issue.message,
                    )
                )
            lines.append("")

        if report.errors:
            lines.append(t.make_heading(2, strings.ERRORS_OCCURRED))
            lines.append("")
            lines.append(t.make_row(*strings.ISSUES_TABLE_HEADER))
            lines.append(t.make_header_separator(columns))
            for issue in report.errors:
                details = issue.message
                if issue.stack_trace:
                    details = f"{details} {issue.stack_trace}"
                lines.append(
                    t.make_row(
                        format_timestamp(issue.entry_time),
                        issue.page_title,
                        issue.heading,
                        details,
                    )
                )
            lines.append("")

        if report.critical:
            lines.append(t.make_heading(2, strings.CRITICAL_ERRORS_OCCURRED))
            lines.append("")
            for issue in report.critical:
                lines.append(
                    t.make_heading(
                        3,
                        f"{format_timestamp(issue.entry_time)} - "
                        f"{t.make_link(issue.page_title, issue.page_url)}",
                    )
                )
                lines.append("")
                lines.append(t.make_italic(issue.message))
                if issue.stack_trace:
                    lines.append("")
                    lines.extend(issue.stack_trace.splitlines())
                lines.append("")

    def _render_page_details(self, report: TransformationReport, lines: List[str]) -> None:
        t = self.tokens
        lines.append(t.make_heading(1, strings.PAGE_DETAILS))
        lines.append("")
        for analysis in report.analyses:
            self._render_page(analysis, lines)

    def _render_page(self, analysis: TransformationLogAnalysis, lines: List[str]) -> None:
        t = self.tokens
        page_title = strip_relative_url_section(analysis.source_page)

        lines.append(t.make_heading(2, f"{strings.TRANSFORMATION_DETAILS}: {page_title}"))
        lines.append("")
        lines.append(t.make_list_item(f"{strings.REPORT_DATE}: {format_timestamp(analysis.report_date)}"))
        lines.append(t.make_list_item(f"{strings.TRANSFORM_DURATION}: {format_duration(analysis.duration)}"))
        for log in analysis.summary_logs:
            caption = strings.SIGNIFICANCE_CAPTIONS.get(log.entry.significance, "")
            text = f"{caption} {log.entry.message}" if caption else log.entry.message
            lines.append(t.make_list_item(text))
        lines.append("")

        lines.append(t.make_heading(3, strings.TRANSFORMATION_SETTINGS))
        lines.append("")
        lines.append(t.make_row(strings.PROPERTY, strings.SETTINGS))
        lines.append(t.make_header_separator(2))
        for key, value in analysis.settings:
            lines.append(t.make_row(key, value or strings.VALUE_NOT_SET))
        lines.append("")

        lines.append(t.make_heading(3, strings.TRANSFORM_DETAILS))
        lines.append("")
        lines.append(t.make_row(*strings.DETAILS_TABLE_HEADER))
        lines.append(t.make_header_separator(len(strings.DETAILS_TABLE_HEADER)))
        levels = self.detail_levels
        for log in analysis.detail_logs:
            if log.level not in levels:
                continue
            lines.append(
                t.make_row(
                    format_timestamp(log.entry.entry_time),
                    emphasize(t, log.level, log.entry.heading),
                    emphasize(t, log.level, log.entry.message),
                )
            )
        lines.append("")
