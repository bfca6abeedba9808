"""Unit tests for the dump request router."""

import io

import pytest

from wifi_score.core.exceptions import DumpTargetNotFoundError
from wifi_score.services.dump_service import DumpService


class EchoTarget:
    """Dump target that writes its name and the args it received."""

    def __init__(self, name):
        self.name = name
        self.calls = []

    def dump(self, sink, args=None):
        self.calls.append(args)
        print(f"{self.name}:{','.join(args or [])}", file=sink)


@pytest.fixture
def service():
    service = DumpService()
    service.register("WifiScoreReport", EchoTarget("report"))
    service.register("WifiMetrics", EchoTarget("metrics"))
    return service


class TestDumpService:
    """Tests for tag based routing."""

    def test_tags_in_registration_order(self, service):
        assert service.tags == ["WifiScoreReport", "WifiMetrics"]

    def test_dump_single_target(self, service):
        sink = io.StringIO()

        service.dump(sink, ["WifiMetrics"])

        assert sink.getvalue() == "metrics:\n"

    def test_extra_args_passed_through(self, service):
        sink = io.StringIO()

        service.dump(sink, ["WifiScoreReport", "verbose"])

        assert sink.getvalue() == "report:verbose\n"

    def test_dump_all_targets_with_headings(self, service):
        sink = io.StringIO()

        service.dump(sink)

        assert sink.getvalue().splitlines() == [
            "== WifiScoreReport ==",
            "report:",
            "== WifiMetrics ==",
            "metrics:",
        ]

    def test_unknown_target_raises(self, service):
        with pytest.raises(DumpTargetNotFoundError):
            service.dump(io.StringIO(), ["WifiScanner"])
