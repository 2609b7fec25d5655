"""Logging configuration for the company-membership service.

Verbosity is chosen through settings (``LOG_VERBOSITY``) and mapped onto a
log level; chatty third-party modules are held at ERROR.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from .settings import MembershipSettings, get_settings


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


_VERBOSITY_LEVELS = {
    LogVerbosity.QUIET: "ERROR",
    LogVerbosity.NORMAL: "WARNING",
    LogVerbosity.VERBOSE: "INFO",
    LogVerbosity.DEBUG: "DEBUG",
}

_FORMATS = {
    "json": '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    "simple": "%(asctime)s - %(levelname)s - %(message)s",
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level; unknown modes fall back to WARNING."""
    try:
        return _VERBOSITY_LEVELS[LogVerbosity(verbosity.upper())]
    except ValueError:
        return "WARNING"


class LoggingConfig:
    """Logging configuration manager."""

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "urllib3",
        "asyncio",
    ]

    @classmethod
    def build(cls, settings: MembershipSettings) -> Dict[str, Any]:
        """Build the dictConfig mapping for the given settings."""
        effective_log_level = get_log_level_from_verbosity(settings.log_verbosity)
        format_string = _FORMATS.get(settings.log_format, _FORMATS["simple"])

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {
                "company_membership": {
                    "level": settings.log_level.upper(),
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        if not settings.enable_sql_logging:
            logging_config["loggers"]["asyncpg"] = {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(cls, settings: Optional[MembershipSettings] = None) -> None:
        """Configure logging from settings."""
        settings = settings or get_settings()
        logging.config.dictConfig(cls.build(settings))
        logging.getLogger(__name__).debug(
            f"Logging configured: verbosity={settings.log_verbosity}, format={settings.log_format}"
        )
