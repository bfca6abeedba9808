"""
WifiScoreReport: scores the connected network and reports it.

Called by the connection poller about every 3 seconds with a fresh link
measurement. Each poll:
1. Updates both scoring strategies and generates their candidate scores
2. Publishes the velocity based score, clamped to [0, max_score], when it
   differs from the score the consumer already knows
3. Appends a csv line to the link metrics history for diagnostic dumps
4. Caches a short text report and counts the score in the metrics sink

Threading: calculate_and_report_score() and reset() are expected from a
single poller; callers serialize them. dump() may run from any thread at
any time and only touches the history log, which has its own lock.
"""

from typing import List, Optional, TextIO

import structlog

from wifi_score.core.config import ScoringParams, Settings, build_scoring_params, settings
from wifi_score.core.exceptions import HistoryFormatError
from wifi_score.domain.models.measurement import LinkMeasurement
from wifi_score.domain.models.report import (
    HISTORY_HEADER,
    HistoryRecord,
    ReportState,
    ScoreReport,
)
from wifi_score.services.clock import SystemClock
from wifi_score.services.history_log import HistoryLog
from wifi_score.services.metrics import WifiMetrics
from wifi_score.services.protocols import Clock, MetricsSink, ScoreConsumer
from wifi_score.services.scoring.aggressive import AggressiveConnectedScore
from wifi_score.services.scoring.base import ConnectedScore
from wifi_score.services.scoring.velocity import VelocityBasedConnectedScore

log = structlog.get_logger(__name__)


class WifiScoreReport:
    """
    Calculates scores for the connected wifi network and reports them to
    the associated network agent.

    Two strategies run on every poll. The velocity based one is published;
    the aggressive one is only recorded in the history (column s1) for
    comparison.

    Usage:
        report = WifiScoreReport(scoring_params, clock)
        report.calculate_and_report_score(measurement, network_agent)
        report.dump(sys.stdout)
    """

    # Tag used by the dump request router
    DUMP_ARG = "WifiScoreReport"

    def __init__(
        self,
        scoring_params: Optional[ScoringParams] = None,
        clock: Optional[Clock] = None,
        wifi_metrics: Optional[MetricsSink] = None,
        *,
        config: Optional[Settings] = None,
        max_score: Optional[int] = None,
        history_capacity: Optional[int] = None,
        first_reasonable_wall_clock_ms: Optional[int] = None,
        aggressive_score: Optional[ConnectedScore] = None,
        velocity_score: Optional[VelocityBasedConnectedScore] = None,
    ):
        """
        Initialize the score reporter.

        Args:
            scoring_params: RSSI thresholds; loaded from config when None
            clock: Time source (default: SystemClock)
            wifi_metrics: Score occurrence sink (default: new WifiMetrics)
            config: Settings to read defaults from (default: global settings)
            max_score: Ceiling of the published score
            history_capacity: Number of history records retained
            first_reasonable_wall_clock_ms: Polls stamped earlier are not logged
            aggressive_score: Comparison strategy (injected for testing)
            velocity_score: Published strategy (injected for testing)
        """
        config = config or settings

        self.max_score = max_score if max_score is not None else config.max_score
        self.first_reasonable_wall_clock_ms = (
            first_reasonable_wall_clock_ms
            if first_reasonable_wall_clock_ms is not None
            else config.first_reasonable_wall_clock_ms
        )
        self.clock = clock or SystemClock()
        self.wifi_metrics = wifi_metrics or WifiMetrics(self.max_score)

        if scoring_params is None:
            scoring_params = build_scoring_params(config)
        self.scoring_params = scoring_params

        self.aggressive_score = aggressive_score or AggressiveConnectedScore(
            scoring_params, self.clock, self.max_score
        )
        self.velocity_score = velocity_score or VelocityBasedConnectedScore(
            scoring_params, self.clock, self.max_score
        )

        self.history = HistoryLog(
            history_capacity if history_capacity is not None else config.history_capacity
        )

        self._verbose_logging_enabled = config.verbose_logging
        self._report = ScoreReport()
        self._session_number = 0
        # Score last published when no network agent is attached; cleared by reset()
        self._unattached_score = 0

    # ------------------------------------------------------------------
    # Report state
    # ------------------------------------------------------------------

    @property
    def session_number(self) -> int:
        return self._session_number

    @property
    def last_unattached_score(self) -> int:
        """Score last published while no network agent was attached."""
        return self._unattached_score

    def get_last_report(self) -> str:
        """Return the text of the last score report ('' after reset)."""
        return self._report.text

    def is_last_report_valid(self) -> bool:
        """True once a score has been reported since the last reset()."""
        return self._report.is_valid

    def reset(self) -> None:
        """
        Reset the last calculated score.

        Starts a new session if a score was reported in the current one;
        repeated resets without a poll in between do not.
        """
        if self._report.state is ReportState.HAS_REPORT:
            self._session_number += 1
        self._report = ScoreReport(state=ReportState.NO_REPORT, text="")
        self._unattached_score = 0
        self.aggressive_score.reset()
        self.velocity_score.reset()
        if self._verbose_logging_enabled:
            log.info("wifi_score_reset", session=self._session_number)

    def enable_verbose_logging(self, enable: bool) -> None:
        """Enable/disable verbose logging in score report generation."""
        self._verbose_logging_enabled = enable

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------

    def calculate_and_report_score(
        self,
        measurement: LinkMeasurement,
        network_agent: Optional[ScoreConsumer] = None,
    ) -> None:
        """
        Calculate the wifi score from the latest link measurement and send
        it to the network agent if it changed.

        Args:
            measurement: Link state of the currently connected network
            network_agent: Agent to notify of a new score; may be None
        """
        millis = self.clock.get_wall_clock_millis()
        net_id = 0

        if network_agent is not None:
            net_id = network_agent.net_id

        self.aggressive_score.update_using_link_measurement(measurement, millis)
        self.velocity_score.update_using_link_measurement(measurement, millis)

        s1 = self.aggressive_score.generate_score()
        s2 = self.velocity_score.generate_score()

        score = self._clamp(s2)

        known_score = (
            network_agent.score if network_agent is not None else self._unattached_score
        )
        if score != known_score:
            if self._verbose_logging_enabled:
                log.info("wifi_score_changed", net_id=net_id, score=score, previous=known_score)
            if network_agent is not None:
                network_agent.score = score
                network_agent.send_network_score(score)
            else:
                self._unattached_score = score

        self._log_link_metrics(measurement, millis, net_id, s1, s2)

        self._report = ScoreReport(
            state=ReportState.HAS_REPORT, text=ScoreReport.encode(score)
        )
        self.wifi_metrics.increment_wifi_score_count(score)

    def _clamp(self, score: int) -> int:
        if score > self.max_score:
            return self.max_score
        if score < 0:
            return 0
        return score

    def _log_link_metrics(
        self,
        measurement: LinkMeasurement,
        now: int,
        net_id: int,
        s1: int,
        s2: int,
    ) -> None:
        """Append this poll to the history, unless the clock is implausible."""
        if now < self.first_reasonable_wall_clock_ms:
            return
        record = HistoryRecord(
            timestamp_ms=now,
            session=self._session_number,
            net_id=net_id,
            rssi=measurement.rssi,
            filtered_rssi=self.velocity_score.get_filtered_rssi(),
            rssi_threshold=self.velocity_score.get_adjusted_rssi_threshold(),
            frequency=measurement.frequency,
            link_speed=measurement.link_speed,
            tx_success_rate=measurement.tx_success_rate,
            tx_retries_rate=measurement.tx_retries_rate,
            tx_bad_rate=measurement.tx_bad_rate,
            rx_success_rate=measurement.rx_success_rate,
            s1=s1,
            s2=s2,
        )
        try:
            line = record.to_csv_line()
        except HistoryFormatError:
            log.error("link_metrics_format_failed", net_id=net_id, exc_info=True)
            return
        self.history.append(line)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def dump(self, sink: TextIO, args: Optional[List[str]] = None) -> None:
        """
        Dump logged signal strength and traffic measurements.

        Args:
            sink: Text stream to write the csv block to
            args: Unused
        """
        print(HISTORY_HEADER, file=sink)
        self.history.snapshot_and_clear(sink)
