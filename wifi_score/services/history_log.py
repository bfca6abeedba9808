"""HistoryLog - bounded, thread-safe log of link metrics csv lines.

The poller appends one line per poll; a diagnostic dump may read the log
at any time from another thread. Both go through a single lock, and the
dump only holds it long enough to copy the lines out.
"""

import threading
from collections import deque
from typing import Deque, TextIO


class HistoryLog:
    """
    Fixed capacity FIFO of formatted history records.

    Once full, each append evicts the oldest record.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = int(capacity)
        self._lock = threading.Lock()
        self._records: Deque[str] = deque(maxlen=self._capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, record: str) -> None:
        """Add a record at the tail, evicting from the head when full."""
        with self._lock:
            self._records.append(record)

    def snapshot_and_clear(self, sink: TextIO) -> int:
        """
        Copy the current records and write them to `sink`, oldest first.

        The live log is left intact; only the local copy is discarded after
        rendering. Writing to the sink happens outside the lock.

        Returns:
            Number of records written
        """
        with self._lock:
            history = list(self._records)
        for line in history:
            print(line, file=sink)
        written = len(history)
        history.clear()
        return written
