"""Link measurement snapshot taken by the connection poller.

One LinkMeasurement is built per poll from the driver's link layer
statistics and handed to the score reporter. It is read-only: neither
the reporter nor the scoring strategies mutate it.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LinkMeasurement(BaseModel):
    """Current link state of the connected network.

    Traffic rates are packets per second, smoothed by the poller.
    """

    model_config = {"frozen": True}

    rssi: int = Field(ge=-127, le=200, description="Received signal strength in dBm")
    frequency: int = Field(ge=0, description="Channel center frequency in MHz")
    link_speed: int = Field(default=0, ge=0, description="Link speed in Mbps")
    tx_success_rate: float = Field(default=0.0, ge=0.0, description="Good tx pps")
    tx_retries_rate: float = Field(default=0.0, ge=0.0, description="Retried tx pps")
    tx_bad_rate: float = Field(default=0.0, ge=0.0, description="Failed tx pps")
    rx_success_rate: float = Field(default=0.0, ge=0.0, description="Good rx pps")
    timestamp_ms: Optional[int] = Field(
        default=None, description="Wall clock time the sample was taken"
    )
