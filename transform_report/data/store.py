"""
Shared, append-only log buffer.

One LogStore is constructed by the caller and handed to every observer that
should contribute to the same report. The lifecycle is explicit:
construct -> append* -> snapshot -> clear.

Design:
- Insertion order preserved; entries are never removed individually
- A single lock guards appends, snapshots and clears, so a snapshot taken
  while producers are still writing is a consistent point-in-time copy
- No validation: malformed entries are the producer's responsibility
"""

import logging
import threading
from typing import List, Tuple

from transform_report.data.schema import LogEntry, LogLevel, StoredLogEntry

logger = logging.getLogger(__name__)


class LogStore:
    """
    Thread-safe ordered collection of (level, entry) pairs.
    
    Example:
        store = LogStore()
        store.append(LogLevel.INFO, LogEntry(heading="Layout", message="..."))
        entries = store.snapshot()
        store.clear()
    """
    
    def __init__(self) -> None:
        self._entries: List[StoredLogEntry] = []
        self._lock = threading.Lock()
    
    def append(self, level: LogLevel, entry: LogEntry) -> None:
        """Append one entry. Never fails."""
        with self._lock:
            self._entries.append(StoredLogEntry(level, entry))
    
    def snapshot(self) -> Tuple[StoredLogEntry, ...]:
        """
        Return the full ordered sequence without mutating the store.
        
        Returns:
            Immutable copy of the stored pairs in insertion order
        """
        with self._lock:
            return tuple(self._entries)
    
    def clear(self) -> int:
        """
        Atomically empty the store.
        
        Returns:
            Number of entries discarded
        """
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug(f"Cleared {count} log entries")
        return count
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
