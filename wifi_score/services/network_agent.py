"""NetworkAgent: score consumer for one connected network."""

from typing import Optional

import structlog

log = structlog.get_logger(__name__)


class NetworkAgent:
    """
    Receives score transitions for the network identified by `net_id`.

    `score` holds the value the agent currently knows; it is written by the
    score reporter before `send_network_score` is called.
    """

    def __init__(self, net_id: int, score: int = 0) -> None:
        self.net_id = net_id
        self.score = score
        self.last_sent_score: Optional[int] = None
        self.sent_count = 0

    def send_network_score(self, score: int) -> None:
        self.last_sent_score = score
        self.sent_count += 1
        log.info("network_score_sent", net_id=self.net_id, score=score)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(net_id={self.net_id}, score={self.score})"
