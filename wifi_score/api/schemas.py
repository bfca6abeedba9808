"""
API request/response schemas.

Pydantic models for API validation and serialization.
"""

from typing import Optional

from pydantic import BaseModel, Field

from wifi_score.domain.models.measurement import LinkMeasurement


# ============ POLL SCHEMAS ============


class PollRequest(BaseModel):
    """One poll of the connected network's link state."""

    measurement: LinkMeasurement
    net_id: Optional[int] = Field(
        default=None, ge=1, description="Network to notify; omit when no agent is attached"
    )


class PollResponse(BaseModel):
    """Outcome of one poll."""

    score: int = Field(description="Score currently known for the network")
    report: str = Field(description="Text of the last score report")
    session: int = Field(description="Current session number")
    net_id: int = Field(default=0, description="Network that was scored (0 = none)")


# ============ REPORT SCHEMAS ============


class ReportResponse(BaseModel):
    """Cached state of the last score report."""

    valid: bool
    report: str
    session: int


class VerboseLoggingRequest(BaseModel):
    """Toggle verbose score logging."""

    enabled: bool

