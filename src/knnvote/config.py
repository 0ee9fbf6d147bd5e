"""
Runtime configuration and logging setup.

Defaults are read from the environment; a .env file in the current
directory is loaded first, so KNNVOTE_* variables can live there.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidArgument

LOGGER_NAME = "knnvote"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Defaults for a classification run; command-line options override them."""

    def __init__(self, seed: Optional[int] = None, log_level: str = "WARNING", output: Optional[str] = None):
        self.seed = seed
        self.log_level = log_level
        self.output = output

    def __repr__(self):
        return f"Settings(seed={self.seed!r}, log_level={self.log_level!r}, output={self.output!r})"

    @classmethod
    def from_env(cls, environ=None, seed=None, log_level=None, output=None) -> "Settings":
        """
        Build settings from KNNVOTE_SEED, KNNVOTE_LOG_LEVEL and KNNVOTE_OUTPUT.

        Values passed explicitly (e.g. from command-line options) take
        precedence, and the matching variable is then not read at all.

        Raises:
        - InvalidArgument: non-integer or negative seed, unknown log level
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        if seed is None:
            seed = parse_seed(environ.get("KNNVOTE_SEED") or None)

        if log_level is None:
            log_level = environ.get("KNNVOTE_LOG_LEVEL") or "WARNING"
        log_level = validate_log_level(log_level)

        if output is None:
            output = environ.get("KNNVOTE_OUTPUT") or None
        return cls(seed=seed, log_level=log_level, output=output)


def parse_seed(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        seed = int(value)
    except ValueError:
        raise InvalidArgument(f"KNNVOTE_SEED must be an integer (got {value!r})") from None
    if seed < 0:
        raise InvalidArgument(f"KNNVOTE_SEED must be non-negative (got {seed})")
    return seed


def validate_log_level(log_level: str) -> str:
    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise InvalidArgument(f"Unknown log level {log_level!r}, expected one of {', '.join(LOG_LEVELS)}")
    return level


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """
    Configure the package logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    level = getattr(logging, validate_log_level(log_level))
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        )
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
