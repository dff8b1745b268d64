"""
Centralized logging configuration for fetchfilter.

Nothing is configured on import; applications call setup_logging() to opt in.
Log level, format and an optional log file are read from the environment.
"""

import functools
import logging
import logging.config
import os
import sys
import time
from typing import Any, Dict


def get_log_level() -> str:
    """Get log level from environment variable or default to INFO."""
    return os.getenv("FETCHFILTER_LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """Get log format based on environment."""
    env = os.getenv("FETCHFILTER_ENV", "development").lower()

    if env == "production":
        return "%(asctime)s | %(name)s | %(levelname)s | %(message)s | %(pathname)s:%(lineno)d"
    return "%(asctime)s | %(name)-24s | %(levelname)-8s | %(message)s"


def get_logging_config() -> Dict[str, Any]:
    """Get the logging configuration dictionary."""
    log_level = get_log_level()

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": get_log_format(),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "fetchfilter": {
                "level": log_level,
                "handlers": ["console"],
            },
        },
    }

    log_file = os.getenv("FETCHFILTER_LOG_FILE")
    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": log_level,
            "formatter": "detailed",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
        }
        config["loggers"]["fetchfilter"]["handlers"].append("file")

    return config


def setup_logging() -> None:
    """Setup logging configuration for the package."""
    logging.config.dictConfig(get_logging_config())

    logger = logging.getLogger("fetchfilter.logging")
    logger.debug("Logging configured with level: %s", get_log_level())

    if os.getenv("FETCHFILTER_LOG_FILE"):
        logger.info("File logging enabled: %s", os.getenv("FETCHFILTER_LOG_FILE"))


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger in the fetchfilter hierarchy.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured logger instance
    """
    if not name.startswith("fetchfilter"):
        if name == "__main__":
            name = "fetchfilter.main"
        else:
            name = f"fetchfilter.{name}"

    return logging.getLogger(name)


def log_performance(logger: logging.Logger, operation: str):
    """
    Decorator to log performance timing of operations.

    Args:
        logger: Logger instance to use
        operation: Description of the operation being timed
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.time() - start_time
                logger.debug("Operation '%s' failed after %.3fs: %s", operation, duration, str(e))
                raise
            duration = time.time() - start_time
            logger.debug("Operation '%s' completed in %.3fs", operation, duration)
            return result

        return wrapper

    return decorator


# Silent unless the application configures logging or calls setup_logging()
logging.getLogger("fetchfilter").addHandler(logging.NullHandler())
