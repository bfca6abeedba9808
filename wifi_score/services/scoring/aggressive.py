"""Aggressive connected score.

Scores the link purely on how far the last RSSI sample sits above the
band's "sufficient" threshold. Reacts immediately to every sample, so it is
kept for comparison in the history log rather than published.
"""

from wifi_score.core.config import BAND5, ScoringParams
from wifi_score.domain.models.measurement import LinkMeasurement
from wifi_score.services.protocols import Clock
from wifi_score.services.scoring.base import DEFAULT_MAX_SCORE, ConnectedScore


class AggressiveConnectedScore(ConnectedScore):
    """
    score = (rssi - sufficient_rssi(frequency)) * 2 + WIFI_TRANSITION_SCORE
    """

    def __init__(
        self,
        scoring_params: ScoringParams,
        clock: Clock,
        max_score: int = DEFAULT_MAX_SCORE,
    ):
        super().__init__(scoring_params, clock, max_score)
        self.frequency_mhz = BAND5
        self.rssi = 0

    def update_using_link_measurement(
        self, measurement: LinkMeasurement, millis: int
    ) -> None:
        self.frequency_mhz = measurement.frequency
        self.rssi = measurement.rssi

    def update_using_rssi(
        self, rssi: int, millis: int, standard_deviation: float
    ) -> None:
        self.rssi = rssi

    def reset(self) -> None:
        self.frequency_mhz = BAND5

    def generate_score(self) -> int:
        sufficient = self.scoring_params.get_sufficient_rssi(self.frequency_mhz)
        return (self.rssi - sufficient) * 2 + self.WIFI_TRANSITION_SCORE
