"""
Link scoring endpoints.

The connection poller posts one measurement per poll; operators read the
cached report or request a diagnostic dump.
"""

import io
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse
import structlog

from wifi_score.api.dependencies import RuntimeDep
from wifi_score.api.schemas import (
    PollRequest,
    PollResponse,
    ReportResponse,
    VerboseLoggingRequest,
)

log = structlog.get_logger(__name__)

router = APIRouter(tags=["link"])


@router.post("/link/poll", response_model=PollResponse)
async def poll(request: PollRequest, runtime: RuntimeDep):
    """Score one link measurement and notify the network agent if it changed."""
    report = runtime.score_report
    agent = runtime.agent_for(request.net_id)

    report.calculate_and_report_score(request.measurement, agent)

    return PollResponse(
        score=agent.score if agent is not None else report.last_unattached_score,
        report=report.get_last_report(),
        session=report.session_number,
        net_id=agent.net_id if agent is not None else 0,
    )


@router.post("/link/reset", response_model=ReportResponse)
async def reset(runtime: RuntimeDep):
    """Reset the score report at the end of a connection."""
    report = runtime.score_report
    report.reset()
    log.info("link_reset", session=report.session_number)
    return ReportResponse(
        valid=report.is_last_report_valid(),
        report=report.get_last_report(),
        session=report.session_number,
    )


@router.get("/link/report", response_model=ReportResponse)
async def last_report(runtime: RuntimeDep):
    """Return the cached last score report."""
    report = runtime.score_report
    return ReportResponse(
        valid=report.is_last_report_valid(),
        report=report.get_last_report(),
        session=report.session_number,
    )


@router.put("/link/verbose")
async def set_verbose_logging(request: VerboseLoggingRequest, runtime: RuntimeDep):
    """Enable or disable verbose score logging."""
    runtime.score_report.enable_verbose_logging(request.enabled)
    return {"verbose_logging": request.enabled}


@router.get("/dump", response_class=PlainTextResponse)
async def dump(
    runtime: RuntimeDep,
    target: Optional[str] = Query(default=None, description="Dump tag, e.g. WifiScoreReport"),
):
    """Render a diagnostic dump as plain text."""
    sink = io.StringIO()
    runtime.dump_service.dump(sink, [target] if target else None)
    return PlainTextResponse(sink.getvalue())
