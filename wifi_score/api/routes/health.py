"""
Health check endpoints.

Provides system health information for monitoring.
"""

from fastapi import APIRouter

from wifi_score import __version__
from wifi_score.api.dependencies import RuntimeDep
from wifi_score.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check(runtime: RuntimeDep):
    """
    Health check endpoint.

    Returns:
        Service status and the state of the score reporter.
    """
    report = runtime.score_report
    return {
        "status": "healthy",
        "version": __version__,
        "debug": settings.debug,
        "components": {
            "score_report": {
                "session": report.session_number,
                "report_valid": report.is_last_report_valid(),
                "max_score": report.max_score,
                "history_capacity": report.history.capacity,
            }
        },
    }


@router.get("/health/live")
async def liveness():
    """
    Kubernetes-style liveness probe.

    Returns 200 if the application is running.
    """
    return {"status": "alive"}
