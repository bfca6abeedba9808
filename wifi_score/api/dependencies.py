"""Dependency injection for API routes."""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends

from wifi_score.core.config import settings
from wifi_score.services.clock import SystemClock
from wifi_score.services.dump_service import DumpService
from wifi_score.services.metrics import WifiMetrics
from wifi_score.services.network_agent import NetworkAgent
from wifi_score.services.score_report_service import WifiScoreReport


class LinkScoringRuntime:
    """
    Process-wide scoring state served by the API.

    Holds one reporter, its metrics, the dump router and the network agent
    of the current connection.
    """

    def __init__(self) -> None:
        clock = SystemClock()
        self.wifi_metrics = WifiMetrics(settings.max_score)
        self.score_report = WifiScoreReport(
            clock=clock, wifi_metrics=self.wifi_metrics, config=settings
        )
        self.dump_service = DumpService()
        self.dump_service.register(WifiScoreReport.DUMP_ARG, self.score_report)
        self.dump_service.register(WifiMetrics.DUMP_ARG, self.wifi_metrics)
        self.network_agent: Optional[NetworkAgent] = None

    def agent_for(self, net_id: Optional[int]) -> Optional[NetworkAgent]:
        """Return the agent for `net_id`, replacing it when the network changes."""
        if net_id is None:
            return None
        if self.network_agent is None or self.network_agent.net_id != net_id:
            self.network_agent = NetworkAgent(net_id)
        return self.network_agent


@lru_cache(maxsize=1)
def get_link_scoring_runtime() -> LinkScoringRuntime:
    """Cached runtime, created once per process on first use."""
    return LinkScoringRuntime()


# Type aliases for dependency injection
RuntimeDep = Annotated[LinkScoringRuntime, Depends(get_link_scoring_runtime)]
