# noqa
from wifi_score.services.dump_service import DumpService
from wifi_score.services.history_log import HistoryLog
from wifi_score.services.metrics import WifiMetrics
from wifi_score.services.network_agent import NetworkAgent
from wifi_score.services.score_report_service import WifiScoreReport

__all__ = ["DumpService", "HistoryLog", "WifiMetrics", "NetworkAgent", "WifiScoreReport"]
