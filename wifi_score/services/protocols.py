"""
Collaborator protocol definitions (interfaces).

The score reporter depends only on these structural interfaces, so tests
and embedding services can inject their own clock, consumer and metrics
sink.
"""

from typing import List, Optional, Protocol, TextIO


class Clock(Protocol):
    """Source of wall clock and monotonic time."""

    def get_wall_clock_millis(self) -> int:
        """Milliseconds since the Unix epoch."""
        ...

    def get_elapsed_since_boot_millis(self) -> int:
        """Monotonic milliseconds, unaffected by wall clock changes."""
        ...


class ScoreConsumer(Protocol):
    """
    Downstream consumer of score transitions for one connected network.

    `score` is the score the consumer currently knows about; the reporter
    overwrites it whenever it publishes a new value.
    """

    net_id: int
    score: int

    def send_network_score(self, score: int) -> None:
        """Fire-and-forget notification of a new score."""
        ...


class MetricsSink(Protocol):
    """Tally of published score values."""

    def increment_wifi_score_count(self, score: int) -> None:
        """Count one occurrence of `score`."""
        ...


class Dumpable(Protocol):
    """Anything that can render a diagnostic text block."""

    def dump(self, sink: TextIO, args: Optional[List[str]] = None) -> None:
        ...
