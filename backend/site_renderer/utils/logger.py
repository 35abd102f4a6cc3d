"""Logging configuration for the application."""
import logging
import sys
from site_renderer.config import settings

LOGGER_NAME = "site_renderer"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = logging.DEBUG if settings.environment == "development" else logging.INFO


def configure_logging(level: int = LOG_LEVEL) -> logging.Logger:
    """
    Configure the application logger with a single stdout handler.

    Safe to call more than once; the handler is only attached the first time.

    Args:
        level: Logging level for the logger and its handler

    Returns:
        The application logger
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(level)

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        app_logger.addHandler(handler)
    for handler in app_logger.handlers:
        handler.setLevel(level)

    # Uvicorn configures the root logger; keep records from being printed twice
    app_logger.propagate = False
    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, e.g. ``site_renderer.pages``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


logger = configure_logging()

__all__ = ["logger", "get_logger", "configure_logging"]
