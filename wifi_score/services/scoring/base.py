"""Base class for connected network scoring strategies.

A strategy ingests one link measurement per poll and produces a candidate
score on the same scale as the published wifi score:
- max_score: excellent link
- WIFI_TRANSITION_SCORE (max_score - 10): the point where the platform
  starts looking for a better network
- 0: unusable link
"""

from abc import ABC, abstractmethod

from wifi_score.core.config import ScoringParams
from wifi_score.domain.models.measurement import LinkMeasurement
from wifi_score.services.protocols import Clock

DEFAULT_MAX_SCORE = 60


class ConnectedScore(ABC):
    """Abstract base class for stateful connected-network scorers.

    Design constraints:
    - One update per poll, in timestamp order
    - generate_score() has no side effects on the filter state
    - reset() returns the strategy to its freshly constructed state
    """

    default_rssi_standard_deviation: float = 2.0

    def __init__(
        self,
        scoring_params: ScoringParams,
        clock: Clock,
        max_score: int = DEFAULT_MAX_SCORE,
    ):
        self.scoring_params = scoring_params
        self.clock = clock
        self.max_score = max_score
        self.WIFI_TRANSITION_SCORE = max_score - 10

    def update_using_link_measurement(
        self, measurement: LinkMeasurement, millis: int
    ) -> None:
        """Update the state from a full link measurement.

        The default implementation only uses the RSSI with the default
        measurement noise; subclasses look at more of the snapshot.
        """
        self.update_using_rssi(measurement.rssi, millis, self.default_rssi_standard_deviation)

    @abstractmethod
    def update_using_rssi(
        self, rssi: int, millis: int, standard_deviation: float
    ) -> None:
        """Update the state from a single RSSI sample.

        Args:
            rssi: Signal strength in dBm
            millis: Wall clock time of the sample
            standard_deviation: Estimated measurement noise in dB
        """
        pass

    @abstractmethod
    def generate_score(self) -> int:
        """Compute the candidate score from the current state."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Forget all state, e.g. at the start of a new connection."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(max_score={self.max_score})"
