"""
Logger configuration.

Single stdout handler with timestamps and the request correlation ID.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

from chatpdf.observability.correlation import CorrelationIdFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s"

NOISY_LOGGERS = ("urllib3", "botocore", "boto3", "httpx", "httpcore", "google", "faiss")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging.

    Args:
        level: Root log level name
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get configured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name)
