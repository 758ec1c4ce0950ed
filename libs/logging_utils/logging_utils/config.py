"""Logging configuration module shared by the service components."""

import sys
from typing import Optional

from loguru import logger as loguru_logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_service_logger(
    service_name: str,
    log_level: str = "INFO",
    log_file: Optional[str] = None,
) -> loguru_logger:
    """Configure the process-wide loguru sinks and return a service logger.

    Existing sinks are removed first, so calling this again (for instance from
    a second app instance in tests) replaces the configuration instead of
    duplicating every line.

    Args:
        service_name: Name of the service (e.g., 'storefront-service')
        log_level: Logging level (default: INFO)
        log_file: Optional path to a rotating log file

    Returns:
        logger: Loguru logger bound to the service name
    """
    loguru_logger.remove()

    loguru_logger.add(
        sys.stderr,
        level=log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        loguru_logger.add(
            log_file,
            level=log_level,
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="1 week",
            compression="gz",
        )

    return loguru_logger.bind(service=service_name)


def get_component_logger(service_name: str, component: str) -> loguru_logger:
    """Get a logger bound to one component of a service.

    Unlike ``setup_service_logger`` this does not touch the sinks, so modules
    can call it at import time.

    Args:
        service_name: Name of the service
        component: Component name (e.g., 'providers', 'store')

    Returns:
        logger: Logger carrying ``service`` and ``component`` extras
    """
    return loguru_logger.bind(service=service_name, component=component)
