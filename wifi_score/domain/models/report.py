"""Score report and link metrics history models.

Core Models:
    - ReportState: whether a score has been reported in the current session
    - ScoreReport: cached outcome of the most recent poll
    - HistoryRecord: one csv line of the link metrics history

Lifecycle:
    NO_REPORT -> (poll) -> HAS_REPORT -> (poll)* -> HAS_REPORT
    HAS_REPORT -> (reset) -> NO_REPORT, starting a new session
    NO_REPORT -> (reset) -> NO_REPORT
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from wifi_score.core.exceptions import HistoryFormatError


HISTORY_HEADER = (
    "time,session,netid,rssi,filtered_rssi,rssi_threshold,"
    "freq,linkspeed,tx_good,tx_retry,tx_bad,rx_pps,s1,s2"
)


class ReportState(str, Enum):
    """Whether the last score report is valid for the current session."""

    NO_REPORT = "no_report"
    HAS_REPORT = "has_report"


@dataclass
class ScoreReport:
    """Cached text of the last published score."""

    state: ReportState = ReportState.NO_REPORT
    text: str = ""

    @property
    def is_valid(self) -> bool:
        return self.state is ReportState.HAS_REPORT

    @staticmethod
    def encode(score: int) -> str:
        return f" score={score:d}"


def format_wall_clock(millis: int) -> str:
    """Render wall clock milliseconds as local 'MM-dd HH:mm:ss.SSS'."""
    when = datetime.fromtimestamp(millis / 1000.0)
    return f"{when:%m-%d %H:%M:%S}.{millis % 1000:03d}"


@dataclass(frozen=True)
class HistoryRecord:
    """One poll's inputs and outputs, rendered as a csv line for dumps.

    Column order matches HISTORY_HEADER. s1 is the aggressive score and s2
    the velocity based (published) score, both before clamping.
    """

    timestamp_ms: int
    session: int
    net_id: int
    rssi: float
    filtered_rssi: float
    rssi_threshold: float
    frequency: int
    link_speed: int
    tx_success_rate: float
    tx_retries_rate: float
    tx_bad_rate: float
    rx_success_rate: float
    s1: int
    s2: int

    def to_csv_line(self) -> str:
        """Render the record.

        Raises:
            HistoryFormatError: If any field cannot be rendered
        """
        try:
            timestamp = format_wall_clock(self.timestamp_ms)
            # Fixed '.' decimal point; ',' is the column separator
            return "%s,%d,%d,%.1f,%.1f,%.1f,%d,%d,%.2f,%.2f,%.2f,%.2f,%d,%d" % (
                timestamp,
                self.session,
                self.net_id,
                self.rssi,
                self.filtered_rssi,
                self.rssi_threshold,
                self.frequency,
                self.link_speed,
                self.tx_success_rate,
                self.tx_retries_rate,
                self.tx_bad_rate,
                self.rx_success_rate,
                self.s1,
                self.s2,
            )
        except (TypeError, ValueError, OverflowError, OSError) as e:
            raise HistoryFormatError(f"format problem: {e}") from e
