"""Structured logging setup using structlog with run IDs."""

import logging
from contextvars import ContextVar

import structlog
from structlog.types import EventDict, WrappedLogger

# Run ID for correlating every log line of a single sync
run_id_var: ContextVar[str] = ContextVar("run_id", default="")


def add_run_id(_logger: WrappedLogger, _method_name: str, event_dict: EventDict) -> EventDict:
    """Add run ID to log event if set."""
    run_id = run_id_var.get()
    if run_id:
        event_dict["run_id"] = run_id
    return event_dict


def setup_logging(log_level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_run_id,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def set_run_id(run_id: str) -> None:
    """Set the run ID for the current context.

    Args:
        run_id: Unique ID for this sync run
    """
    run_id_var.set(run_id)

