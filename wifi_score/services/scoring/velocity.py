"""Velocity based connected score (the published score).

Tracks RSSI with a two-state Kalman filter (level and rate of change),
forecasts it a fixed horizon ahead and scores the forecast against the
band's exit threshold. The threshold is nudged down while traffic keeps
flowing well near the edge, so a link that is demonstrably usable at low
RSSI is not abandoned early.
"""

import numpy as np
import structlog

from wifi_score.core.config import BAND5, ScoringParams
from wifi_score.domain.models.measurement import LinkMeasurement
from wifi_score.services.protocols import Clock
from wifi_score.services.scoring.base import DEFAULT_MAX_SCORE, ConnectedScore
from wifi_score.services.scoring.kalman_filter import KalmanFilter

logger = structlog.get_logger(__name__)

# Standard deviation of the modelled RSSI acceleration, dB/s^2
MODELLED_ACCELERATION_STD = 0.02


class VelocityBasedConnectedScore(ConnectedScore):
    """
    Forecasting scorer built on a Kalman filter.

    Algorithm:
    1. Seed the filter on the first sample (or after a roam / clock jump)
    2. Predict and update with each later sample
    3. Adjust the exit threshold from observed transmit success
    4. Score = round(min(forecast, filtered)) - threshold + WIFI_TRANSITION_SCORE
    """

    min_pps_for_measuring_success = 2.0
    max_threshold_reduction = -7.0
    threshold_step = 0.5

    def __init__(
        self,
        scoring_params: ScoringParams,
        clock: Clock,
        max_score: int = DEFAULT_MAX_SCORE,
    ):
        super().__init__(scoring_params, clock, max_score)
        self.frequency = BAND5
        self.threshold_adjustment = 0.0
        self.last_millis = 0
        self.filtered_rssi = 0.0
        self.estimated_rate_of_rssi_change = 0.0

        self.filter = KalmanFilter()
        self.filter.H = np.array([[1.0, 0.0]])
        self.filter.R = np.array([[1.0]])

    def _set_delta_time_seconds(self, dt: float) -> None:
        self.filter.F = np.array([[1.0, dt], [0.0, 1.0]])
        g = np.array([[0.5 * dt * dt], [dt]])
        stda = MODELLED_ACCELERATION_STD
        self.filter.Q = (g @ g.T) @ np.array([[stda * stda, 0.0], [0.0, stda * stda]])

    def reset(self) -> None:
        self.last_millis = 0
        self.threshold_adjustment = 0.0
        self.filter.x = None

    def update_using_rssi(
        self, rssi: int, millis: int, standard_deviation: float
    ) -> None:
        if millis <= 0:
            return
        if self.last_millis <= 0 or millis < self.last_millis or self.filter.x is None:
            initial_variance = 9.0 * standard_deviation * standard_deviation
            self.filter.x = np.array([[float(rssi)], [0.0]])
            self.filter.P = np.array([[initial_variance, 0.0], [0.0, 0.0]])
        else:
            dt = (millis - self.last_millis) * 0.001
            self.filter.R = np.array([[standard_deviation * standard_deviation]])
            self._set_delta_time_seconds(dt)
            self.filter.predict()
            self.filter.update(np.array([[float(rssi)]]))
        self.last_millis = millis
        self.filtered_rssi = float(self.filter.x[0, 0])
        self.estimated_rate_of_rssi_change = float(self.filter.x[1, 0])

    def update_using_link_measurement(
        self, measurement: LinkMeasurement, millis: int
    ) -> None:
        if measurement.frequency != self.frequency:
            # Probably roamed; restart the filter but keep the threshold adjustment
            self.last_millis = 0
            self.frequency = measurement.frequency
        self.update_using_rssi(
            measurement.rssi, millis, self.default_rssi_standard_deviation
        )
        self._adjust_threshold(measurement)

    def get_filtered_rssi(self) -> float:
        return self.filtered_rssi

    def get_adjusted_rssi_threshold(self) -> float:
        return self.scoring_params.get_exit_rssi(self.frequency) + self.threshold_adjustment

    def _adjust_threshold(self, measurement: LinkMeasurement) -> None:
        if self.threshold_adjustment < self.max_threshold_reduction:
            return
        if self.filtered_rssi >= self.get_adjusted_rssi_threshold() + 2.0:
            return
        if abs(self.estimated_rate_of_rssi_change) >= 0.2:
            return
        tx_success_pps = measurement.tx_success_rate
        rx_success_pps = measurement.rx_success_rate
        if tx_success_pps < self.min_pps_for_measuring_success:
            return
        if rx_success_pps < self.min_pps_for_measuring_success:
            return
        tx_attempts = tx_success_pps + measurement.tx_bad_rate + measurement.tx_retries_rate
        probability_of_successful_tx = tx_success_pps / tx_attempts
        if probability_of_successful_tx > 0.2:
            self.threshold_adjustment -= self.threshold_step
            logger.debug(
                "rssi_threshold_lowered",
                threshold=self.get_adjusted_rssi_threshold(),
                filtered_rssi=self.filtered_rssi,
            )

    def generate_score(self) -> int:
        if self.filter.x is None:
            return self.WIFI_TRANSITION_SCORE + 1
        bad_rssi = self.get_adjusted_rssi_threshold()
        horizon_seconds = self.scoring_params.horizon_seconds
        x = self.filter.x.copy()
        filtered_rssi = float(x[0, 0])
        self._set_delta_time_seconds(horizon_seconds)
        x = self.filter.F @ x
        forecast_rssi = float(x[0, 0])
        if forecast_rssi > filtered_rssi:
            # Be pessimistic about predicting an actual increase
            forecast_rssi = filtered_rssi
        return int(_round_half_up(forecast_rssi) - bad_rssi) + self.WIFI_TRANSITION_SCORE


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))
