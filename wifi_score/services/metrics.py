"""
WifiMetrics - score occurrence tally.

Counts how often each published score value was reported. Thread-safe:
the poller increments while a diagnostic dump reads.
"""

import threading
from collections import Counter
from typing import Dict, List, Optional, TextIO

import structlog

log = structlog.get_logger(__name__)


class WifiMetrics:
    """
    Histogram of published wifi scores.

    Scores outside [0, max_score] are ignored.
    """

    DUMP_ARG = "WifiMetrics"

    def __init__(self, max_score: int):
        self.max_score = max_score
        self.lock = threading.Lock()
        self._score_counts: Counter = Counter()

    def increment_wifi_score_count(self, score: int) -> None:
        if score < 0 or score > self.max_score:
            log.warning("wifi_score_out_of_range", score=score, max_score=self.max_score)
            return
        with self.lock:
            self._score_counts[score] += 1

    def get_score_counts(self) -> Dict[int, int]:
        """Snapshot of score -> occurrence count."""
        with self.lock:
            return dict(self._score_counts)

    def dump(self, sink: TextIO, args: Optional[List[str]] = None) -> None:
        counts = self.get_score_counts()
        print("score,count", file=sink)
        for score in sorted(counts):
            print(f"{score},{counts[score]}", file=sink)
