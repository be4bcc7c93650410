import logging
import os
import sys

import structlog

from shared.config.env import load_env


# 1. Structlog Processor: stamps the owning service on every log line
def add_service_name(service_name: str):
    def processor(logger, log_method, event_dict):
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


# 2. Configure Structlog (JSON lines, or the human readable dev format)
def configure_logging(service_name: str, log_format: str | None = None, level: str | None = None):
    load_env()
    log_format = (log_format or os.getenv("LOG_FORMAT", "console")).lower()
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_service_name(service_name),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        # stdout belongs to command output; stderr is looked up per logger
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


# --- THE MASTER SETUP FUNCTION ---
def setup_observability(service_name: str):
    """
    Bootstraps logging for a CLI process.
    Call this once from the app callback before any command runs.
    """
    configure_logging(service_name)


_dev_logger = structlog.get_logger("dev")


def log(msg: str) -> None:
    """Developer logger: one timestamped line per message."""
    _dev_logger.info(msg)
