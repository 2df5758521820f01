"""Logging infrastructure for godocjson.

Key components:
    get_logger: Factory function for creating component loggers
    setup_logging: Initialize logging configuration from YAML
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from godocjson.logging import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.debug("Flattening package")
"""

from .logging_config import LoggingConfig, get_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
