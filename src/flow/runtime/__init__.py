from .logging import LOG_LEVEL_ENV, configure_logging, get_logger

__all__ = ["LOG_LEVEL_ENV", "configure_logging", "get_logger"]
