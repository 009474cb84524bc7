"""
Report captions.

English only; kept in one place so wording changes never touch layout code.
"""

from transform_report.data.schema import LogEntrySignificance

REPORT_FILE_PREFIX = "Page-Transformation-Report"
REPORT_FILE_EXTENSION = ".md"

SUMMARY_REPORT = "Modernisation Summary Report"
PAGE_DETAILS = "Modernisation Page Details"
TRANSFORMATION_DETAILS = "Transformation Details"
REPORT_DATE = "Report date"
TRANSFORM_DURATION = "Transform duration"
TRANSFORMATION_SETTINGS = "Transformation Settings"
TRANSFORM_DETAILS = "Transformation Operation Details"
PROPERTY = "Property"
SETTINGS = "Settings"
VALUE_NOT_SET = "Not Set"

WARNINGS_OCCURRED = "Warnings during transformation"
ERRORS_OCCURRED = "Errors during transformation"
CRITICAL_ERRORS_OCCURRED = "Critical errors during transformation"

SUMMARY_TABLE_HEADER = ("Date", "Duration", "Source Page", "Target Page Url", "Status")
ISSUES_TABLE_HEADER = ("Date", "Source Page", "Operation", "Details")
DETAILS_TABLE_HEADER = ("Date", "Operation", "Details")

SIGNIFICANCE_CAPTIONS = {
    LogEntrySignificance.ASSET_TRANSFERRED: "Asset transferred to",
    LogEntrySignificance.SOURCE_PAGE: "Transforming page",
    LogEntrySignificance.SOURCE_SITE_URL: "Transforming site",
    LogEntrySignificance.TARGET_PAGE: "Transformed page",
    LogEntrySignificance.TARGET_SITE_URL: "Cross site transfer to site",
}
