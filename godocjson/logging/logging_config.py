"""Centralized logging configuration for godocjson.

Supports both YAML-based configuration and programmatic setup with
defaults. Log output goes to stderr so it never mixes with the JSON
document written to stdout.

Usage:
    >>> from godocjson.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Loading model dump")

Environment variables:
    GODOCJSON_LOGGING_CONFIG: Path to custom logging.yml
    GODOCJSON_LOG_LEVEL: Default log level (INFO, DEBUG, etc.)
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# Default log levels for different components
DEFAULT_LOG_LEVELS = {
    "godocjson": "WARNING",
    "godocjson.loader": "WARNING",
    "godocjson.flatten": "WARNING",
}


class LoggingConfig:
    """Manages logging configuration for godocjson.

    Attributes:
        config_path: Path to YAML configuration file.
        _config: Cached configuration dictionary.

    Configuration precedence:
        1. Explicit config_path parameter
        2. GODOCJSON_LOGGING_CONFIG environment variable
        3. Default configuration

    Example:
        >>> config = LoggingConfig(Path("custom_logging.yml"))
        >>> config.apply()
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or self._get_default_config_path()
        self._config: Optional[Dict[str, Any]] = None

    @staticmethod
    def _get_default_config_path() -> Optional[Path]:
        if env_path := os.environ.get("GODOCJSON_LOGGING_CONFIG"):
            return Path(env_path)
        return None

    def load_config(self) -> Dict[str, Any]:
        """Load logging configuration from file or defaults.

        Returns:
            Dictionary in logging.config.dictConfig format.

        Note:
            Configuration is cached after first load. Create a new
            LoggingConfig instance to reload from disk.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    @staticmethod
    def _get_default_config() -> Dict[str, Any]:
        """Get default logging configuration.

        Default format:
            "HH:MM:SS.mmm | LEVEL | logger.name - message"
        """
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "godocjson": {
                    "level": os.environ.get("GODOCJSON_LOG_LEVEL", "WARNING"),
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
            "root": {
                "level": "WARNING",
                "handlers": ["console"],
            },
        }

    def apply(self):
        """Apply the logging configuration via logging.config.dictConfig.

        Multiple calls will reconfigure logging.
        """
        logging.config.dictConfig(self.load_config())


# Global configuration instance
_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None):
    """Setup logging for godocjson.

    Args:
        config_path: Optional path to YAML logging configuration file.
                    If None, uses environment variables or defaults.
        level: Optional log level override (INFO, DEBUG, WARNING, etc.).
              This overrides any level set in configuration or environment.

    Example:
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for logger_name in DEFAULT_LOG_LEVELS:
            logging.getLogger(logger_name).setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Get a logger for godocjson components.

    Automatically initializes logging with defaults if not already configured.

    Args:
        name: Logger name, typically __name__.
    """
    if _logging_config is None:
        setup_logging()

    return logging.getLogger(name)
