"""
Structured logging setup.

The library itself only ever logs one event (`safe_invoke.fault_captured`,
opt-in via SAFE_INVOKE_LOG_FAULTS). Applications that want it rendered
the same way as the rest of their structlog output call
configure_structlog() once at startup.
"""

from __future__ import annotations

import logging

import structlog

from safe_invoke.config import get_settings


def configure_structlog(log_level: str | None = None) -> None:
    """
    Configure structlog with human-readable console output.

    log_level defaults to the SAFE_INVOKE_LOG_LEVEL setting. Unknown level
    names fall back to INFO.
    """
    level_name = (log_level or get_settings().log_level).upper()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
