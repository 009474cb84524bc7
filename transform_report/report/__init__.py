"""
Report module: layout tokens, captions, rendering and output sinks.
"""

from .renderer import ReportRenderer, format_timestamp
from .tokens import (
    LEVEL_EMPHASIS,
    MARKDOWN_TOKENS,
    PLAIN_TEXT_TOKENS,
    MarkdownTokens,
    emphasize,
)
from .writer import FileReportWriter, ReportWriter

__all__ = [
    "ReportRenderer",
    "format_timestamp",
    "MarkdownTokens",
    "MARKDOWN_TOKENS",
    "PLAIN_TEXT_TOKENS",
    "LEVEL_EMPHASIS",
    "emphasize",
    "ReportWriter",
    "FileReportWriter",
]
