"""
Observers: the ingestion surface used by transformation workers.
"""

from .base import LogObserver
from .markdown import MarkdownObserver, report_file_name

__all__ = [
    "LogObserver",
    "MarkdownObserver",
    "report_file_name",
]
