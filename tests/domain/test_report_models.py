"""Tests for score report and history record models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from wifi_score.core.exceptions import HistoryFormatError
from wifi_score.domain.models import (
    HISTORY_HEADER,
    HistoryRecord,
    LinkMeasurement,
    ReportState,
    ScoreReport,
)
from wifi_score.domain.models.report import format_wall_clock


def _record(**overrides):
    fields = dict(
        timestamp_ms=1_500_000_000_123,
        session=2,
        net_id=7,
        rssi=-65,
        filtered_rssi=-64.96,
        rssi_threshold=-80.5,
        frequency=5180,
        link_speed=433,
        tx_success_rate=12.5,
        tx_retries_rate=1.0,
        tx_bad_rate=0.004,
        rx_success_rate=20.0,
        s1=60,
        s2=65,
    )
    fields.update(overrides)
    return HistoryRecord(**fields)


class TestHistoryRecord:
    """Tests for csv rendering of history records."""

    def test_header_names_fourteen_columns(self):
        assert len(HISTORY_HEADER.split(",")) == 14
        assert HISTORY_HEADER.startswith("time,session,netid,rssi,")
        assert HISTORY_HEADER.endswith(",s1,s2")

    def test_fields_rendered_in_header_order(self):
        line = _record().to_csv_line()
        fields = line.split(",")

        assert len(fields) == 14
        assert fields[1:] == [
            "2", "7", "-65.0", "-65.0", "-80.5", "5180", "433",
            "12.50", "1.00", "0.00", "20.00", "60", "65",
        ]

    def test_timestamp_is_local_month_day_time_with_millis(self):
        line = _record().to_csv_line()
        expected = datetime.fromtimestamp(1_500_000_000.123).strftime("%m-%d %H:%M:%S")

        assert line.split(",")[0] == f"{expected}.123"

    def test_format_wall_clock_pads_millis(self):
        assert format_wall_clock(1_500_000_000_007).endswith(".007")

    def test_unrenderable_timestamp_raises_format_error(self):
        with pytest.raises(HistoryFormatError):
            _record(timestamp_ms=10**20).to_csv_line()


class TestScoreReport:
    """Tests for the cached score report."""

    def test_starts_invalid_and_empty(self):
        report = ScoreReport()

        assert report.state is ReportState.NO_REPORT
        assert report.text == ""
        assert report.is_valid is False

    def test_encode(self):
        assert ScoreReport.encode(40) == " score=40"

    def test_has_report_is_valid(self):
        assert ScoreReport(ReportState.HAS_REPORT, " score=1").is_valid is True


class TestLinkMeasurement:
    """Tests for the link measurement snapshot."""

    def test_is_immutable(self):
        m = LinkMeasurement(rssi=-60, frequency=2412)

        with pytest.raises(ValidationError):
            m.rssi = -50

    def test_rates_default_to_zero(self):
        m = LinkMeasurement(rssi=-60, frequency=2412)

        assert m.tx_success_rate == 0.0
        assert m.rx_success_rate == 0.0
        assert m.timestamp_ms is None

    def test_negative_rates_rejected(self):
        with pytest.raises(ValidationError):
            LinkMeasurement(rssi=-60, frequency=2412, tx_bad_rate=-1.0)

    @pytest.mark.parametrize("rssi", [-128, 201, 10**400])
    def test_out_of_range_rssi_rejected(self, rssi):
        with pytest.raises(ValidationError):
            LinkMeasurement(rssi=rssi, frequency=5180)

    @pytest.mark.parametrize("rssi", [-127, 200])
    def test_rssi_range_is_inclusive(self, rssi):
        assert LinkMeasurement(rssi=rssi, frequency=5180).rssi == rssi
