"""
Schema definitions for page analysis and the aggregated report.

TransformationLogAnalysis is a read-only projection of the log store for one
page. The report models hold exactly what the renderer needs, so rendering
never reaches back into raw log entries for decisions.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from transform_report.data.schema import StoredLogEntry


class TransformationLogAnalysis(BaseModel):
    """
    Per-page view derived from the log store.

    Fields:
    - page_id: correlation key of the page
    - report_date: time the owning report was started
    - ordered_logs: all entries of the page, by entry_time (stable)
    - summary_logs: entries with the Summary heading
    - detail_logs: entries that are neither Summary nor page-info
    - settings: (key, value) pairs parsed from page-info entries
    - assets_transferred: summary entries tagged ASSET_TRANSFERRED
    - critical_errors / errors / warnings: issue subsets
    - source_page / target_page / source_site / target_site: first marker messages
    - base_tenant_url: scheme://host of source_site, "" when unknown
    - duration: last entry_time - first entry_time
    """

    model_config = ConfigDict(frozen=True)

    page_id: Optional[str] = None
    report_date: datetime
    ordered_logs: List[StoredLogEntry] = Field(default_factory=list)
    summary_logs: List[StoredLogEntry] = Field(default_factory=list)
    detail_logs: List[StoredLogEntry] = Field(default_factory=list)
    settings: List[Tuple[str, str]] = Field(default_factory=list)
    assets_transferred: List[StoredLogEntry] = Field(default_factory=list)
    critical_errors: List[StoredLogEntry] = Field(default_factory=list)
    errors: List[StoredLogEntry] = Field(default_factory=list)
    warnings: List[StoredLogEntry] = Field(default_factory=list)

    source_page: Optional[str] = None
    target_page: Optional[str] = None
    source_site: Optional[str] = None
    target_site: Optional[str] = None
    base_tenant_url: str = ""
    duration: timedelta = timedelta(0)

    @property
    def start_time(self) -> Optional[datetime]:
        """Time of the first entry, None for a page without entries."""
        if not self.ordered_logs:
            return None
        return self.ordered_logs[0].entry.entry_time


class SummaryRow(BaseModel):
    """One row of the summary table."""

    start_time: Optional[datetime] = None
    duration: str
    source_page_title: str = ""
    source_page_url: str = ""
    target_page_title: str = ""
    target_page_url: str = ""
    status: str


class IssueRow(BaseModel):
    """
    A warning or non-critical error, attributed to its page.

    Fields:
    - stack_trace: exception stack trace for errors, None otherwise
    """

    entry_time: Optional[datetime] = None
    page_title: str = ""
    heading: str = ""
    message: str = ""
    stack_trace: Optional[str] = None


class CriticalIssue(BaseModel):
    """A page-aborting failure with full exception detail."""

    entry_time: Optional[datetime] = None
    page_title: str = ""
    page_url: str = ""
    message: str = ""
    stack_trace: str = ""


class TransformationReport(BaseModel):
    """
    Cross-page aggregation consumed by the renderer.

    analyses, rows are index-aligned and in page discovery order.
    """

    report_date: datetime
    analyses: List[TransformationLogAnalysis] = Field(default_factory=list)
    rows: List[SummaryRow] = Field(default_factory=list)
    warnings: List[IssueRow] = Field(default_factory=list)
    errors: List[IssueRow] = Field(default_factory=list)
    critical: List[CriticalIssue] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.analyses
