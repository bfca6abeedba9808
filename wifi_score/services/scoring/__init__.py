"""Connected network scoring strategies."""

from wifi_score.services.scoring.aggressive import AggressiveConnectedScore
from wifi_score.services.scoring.base import ConnectedScore
from wifi_score.services.scoring.kalman_filter import KalmanFilter
from wifi_score.services.scoring.velocity import VelocityBasedConnectedScore

__all__ = [
    "AggressiveConnectedScore",
    "ConnectedScore",
    "KalmanFilter",
    "VelocityBasedConnectedScore",
]
