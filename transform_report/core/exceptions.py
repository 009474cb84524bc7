"""
Custom exceptions for the page transformation report engine.

Analysis is total and never raises; these exceptions describe failures of
the surrounding machinery (configuration, writing the report).
"""


class TransformReportError(Exception):
    """Base exception for report engine failures."""
    pass


class ReportWriteError(TransformReportError):
    """Raised when the rendered report cannot be written to its sink."""
    pass


class ConfigurationError(TransformReportError):
    """Raised when configuration is invalid or missing."""
    pass
