"""
Report output sinks.

The observer hands rendered text and a file name to a ReportWriter. Only the
file system writer ships here; tests substitute their own writers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from transform_report.core.exceptions import ConfigurationError, ReportWriteError

logger = logging.getLogger(__name__)


class ReportWriter(ABC):
    """Destination for a rendered report."""

    @abstractmethod
    def write(self, file_name: str, content: str) -> Path:
        """
        Persist one report.

        Args:
            file_name: Suggested file name (no directory)
            content: Rendered report text

        Returns:
            Location the report was written to

        Raises:
            ReportWriteError: If the report cannot be written
        """
        pass


class FileReportWriter(ReportWriter):
    """
    Appends reports to files in a directory.

    The directory is created on first write. The report date, and so the file
    name, is fixed when an observer is constructed, so every flush from one
    observer appends to the same report file.
    """

    def __init__(self, directory: Union[str, Path], encoding: str = "utf-8") -> None:
        self.directory = Path(directory)
        self.encoding = encoding

        if self.directory.exists() and not self.directory.is_dir():
            raise ConfigurationError(f"Report directory is not a directory: {self.directory}")

    def write(self, file_name: str, content: str) -> Path:
        path = self.directory / file_name
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding=self.encoding) as f:
                f.write(content)
                if not content.endswith("\n"):
                    f.write("\n")
        except OSError as e:
            logger.error(f"Error writing report file {path}: {e}")
            raise ReportWriteError(f"Failed to write report: {e}") from e
        return path
