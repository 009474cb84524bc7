"""
Observer contract consumed by the page transformation engine.

Producers never talk to the log store directly; they report through an
observer, which decides what is kept and what the report looks like.
"""

from abc import ABC, abstractmethod

from transform_report.data.schema import LogEntry


class LogObserver(ABC):
    """
    Ingestion interface for transformation workers.

    None of the methods return a value and none of them raise.
    """

    @abstractmethod
    def debug(self, entry: LogEntry) -> None:
        pass

    @abstractmethod
    def info(self, entry: LogEntry) -> None:
        pass

    @abstractmethod
    def warning(self, entry: LogEntry) -> None:
        pass

    @abstractmethod
    def error(self, entry: LogEntry) -> None:
        pass

    @abstractmethod
    def set_page_id(self, page_id: str) -> None:
        """Set the page that subsequent entries are attributed to."""
        pass

    @abstractmethod
    def flush(self) -> None:
        """Produce the report and reset for the next cycle."""
        pass
