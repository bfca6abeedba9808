#!/usr/bin/env python3
"""
Replay recorded link measurements through a score reporter and print the
resulting diagnostic dump.

Input is JSON lines, one LinkMeasurement per line. The sample's
timestamp_ms (when present) drives the clock; otherwise samples are spaced
by the configured poll interval.

Usage:
    python scripts/replay_link_metrics.py samples.jsonl
    python scripts/replay_link_metrics.py samples.jsonl --net-id 7 --max-score 60
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from wifi_score.core.logging import configure_logging

configure_logging()

from wifi_score.core.config import settings
from wifi_score.domain.models.measurement import LinkMeasurement
from wifi_score.services.metrics import WifiMetrics
from wifi_score.services.network_agent import NetworkAgent
from wifi_score.services.score_report_service import WifiScoreReport


class ReplayClock:
    """Clock that returns whatever time the replay last set."""

    def __init__(self, start_ms: int):
        self.now_ms = start_ms

    def get_wall_clock_millis(self) -> int:
        return self.now_ms

    def get_elapsed_since_boot_millis(self) -> int:
        return self.now_ms


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("samples", type=Path, help="JSON lines file of measurements")
    parser.add_argument("--net-id", type=int, default=None, help="Network agent id")
    parser.add_argument("--max-score", type=int, default=settings.max_score)
    parser.add_argument("--start-ms", type=int, default=1_500_000_000_000)
    args = parser.parse_args()

    clock = ReplayClock(args.start_ms)
    metrics = WifiMetrics(args.max_score)
    report = WifiScoreReport(clock=clock, wifi_metrics=metrics, max_score=args.max_score)
    agent = NetworkAgent(args.net_id) if args.net_id is not None else None

    with open(args.samples) as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            measurement = LinkMeasurement.model_validate_json(line)
            if measurement.timestamp_ms is not None:
                clock.now_ms = measurement.timestamp_ms
            else:
                clock.now_ms += settings.poll_interval_ms
            report.calculate_and_report_score(measurement, agent)

    report.dump(sys.stdout)
    print(f"# last report:{report.get_last_report()}")
    metrics.dump(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
