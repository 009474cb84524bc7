"""
Analysis module: per-page log analysis and cross-page report aggregation.
"""

from .aggregator import (
    ReportAggregator,
    classify_status,
    discover_pages,
    format_duration,
)
from .analyzer import PageAnalyzer, analyze_page
from .schema import (
    CriticalIssue,
    IssueRow,
    SummaryRow,
    TransformationLogAnalysis,
    TransformationReport,
)
from .urls import base_tenant_url, prepend_if_not_none, strip_relative_url_section

__all__ = [
    "PageAnalyzer",
    "analyze_page",
    "ReportAggregator",
    "classify_status",
    "discover_pages",
    "format_duration",
    "TransformationLogAnalysis",
    "TransformationReport",
    "SummaryRow",
    "IssueRow",
    "CriticalIssue",
    "base_tenant_url",
    "prepend_if_not_none",
    "strip_relative_url_section",
]
