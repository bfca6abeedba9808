"""Domain models package."""

from .measurement import LinkMeasurement
from .report import HISTORY_HEADER, HistoryRecord, ReportState, ScoreReport

__all__ = [
    "LinkMeasurement",
    "HISTORY_HEADER",
    "HistoryRecord",
    "ReportState",
    "ScoreReport",
]
