from .setup import setup_observability, configure_logging, log

__all__ = ["setup_observability", "configure_logging", "log"]
