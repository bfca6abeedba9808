"""
Structured logging configuration using structlog.

Every process writes one timestamped file under the configured logs
directory plus the console. Events are snake_case names with key/value
context, e.g.:

    log.info("network_score_sent", net_id=3, score=52)

Rendering:
- debug: colored console lines, DEBUG level
- otherwise: one JSON object per line, INFO level

Request handlers bind a request_id with bind_context(); the reporter
itself never binds context so dumps and log lines stay independent.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import structlog
from structlog.typing import Processor

from wifi_score.core.config import settings

LOG_FILE_PREFIX = "wifi_score_"


def _cull_old_logs(logs_dir: Path, keep: int) -> None:
    """Delete old log files, keeping only the N most recent.

    Args:
        logs_dir: Directory containing log files
        keep: Number of recent log files to retain
    """
    # Newest first, by modification time rather than by name
    log_files = sorted(
        logs_dir.glob(f"{LOG_FILE_PREFIX}*.log"),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )

    for old_file in log_files[keep:]:
        try:
            os.remove(old_file)
        except OSError:
            pass  # Another process may still hold it open


def _build_processors(debug: bool) -> List[Processor]:
    """Processor chain shared by console and file output."""
    processors: List[Processor] = [
        # request_id and anything else bound per request
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ExtraAdder(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # exc_info from history format faults becomes a structured traceback
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    return processors


def configure_logging(
    log_sessions_to_keep: Optional[int] = None, logs_dir: Optional[Path] = None
) -> None:
    """Configure structlog for the application.

    Call this once at process startup, before any logging. Calling it again
    (tests, the replay script) replaces the previous handlers.

    Args:
        log_sessions_to_keep: Log files to retain (default: settings.log_sessions_to_keep)
        logs_dir: Directory for log files (default: settings.logs_dir)
    """
    keep = log_sessions_to_keep or settings.log_sessions_to_keep
    logs_dir = logs_dir or settings.logs_dir
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Leave room for the file this process is about to create
    _cull_old_logs(logs_dir, keep=keep - 1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"{LOG_FILE_PREFIX}{timestamp}.log"

    level = logging.DEBUG if settings.debug else logging.INFO

    # Drop handlers left by an earlier configure_logging() call
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    root_logger.setLevel(level)

    # structlog renders the full line; stdlib only routes it
    for handler in (logging.StreamHandler(), logging.FileHandler(log_file, mode="w")):
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)

    structlog.configure(
        processors=_build_processors(settings.debug),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger named after the calling module."""
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind context variables that will be included in all subsequent logs
    of the current request, e.g. bind_context(request_id=request_id).
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear variables bound with bind_context() once a request completes."""
    structlog.contextvars.clear_contextvars()
