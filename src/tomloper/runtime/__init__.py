from .logging import configure_logging, get_logger, trace

__all__ = ["configure_logging", "get_logger", "trace"]
