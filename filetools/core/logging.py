#!/usr/bin/env python3
"""Structured logging for filetools.

Listing and directory-creation code logs through one process-wide Logger.
Every message carries key=value context, and a listing pushes its root onto
a per-thread context stack so concurrent walks on worker threads stay
distinguishable:

    Visiting directory | root=/data path=/data/sub depth=1

The level of the process-wide logger comes from the ``filetools.logging.level``
configuration key.

Example:
    >>> logger = get_logger()
    >>> with logger.add_context(root="/data"):
    ...     logger.debug("Visiting directory", depth=2)
"""

import logging
import threading
from contextlib import contextmanager
from enum import IntEnum
from typing import Any, Dict, List, Optional, Union

from filetools.core.config import ConfigError, ConfigManager, get_config_manager
from filetools.core.constants import ConfigKey

LOGGER_NAME = "filetools"


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""

    DEBUG = logging.DEBUG  # 10
    INFO = logging.INFO  # 20
    WARNING = logging.WARNING  # 30
    ERROR = logging.ERROR  # 40
    CRITICAL = logging.CRITICAL  # 50


def _as_level(level: Union[LogLevel, str, int]) -> LogLevel:
    if isinstance(level, str):
        return LogLevel[level.upper()]
    return LogLevel(level)


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


class Logger:
    """Named logger that appends key=value context to each message.

    Owns the standard library logger of the same name: its handlers are
    replaced and it does not propagate to the root logger.
    """

    # Context frames, one stack per thread
    _local = threading.local()

    def __init__(
        self,
        name: str = LOGGER_NAME,
        level: Union[LogLevel, str] = LogLevel.WARNING,
        handlers: Optional[List[logging.Handler]] = None,
    ):
        """Initialize logger.

        Args:
            name: Standard library logger to wrap
            level: Minimum level (LogLevel or case-insensitive name)
            handlers: Output handlers (defaults to a stderr console handler)
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.handlers = list(handlers) if handlers is not None else [_console_handler()]
        self.logger.propagate = False
        self.set_level(level)

    def set_level(self, level: Union[LogLevel, str]) -> None:
        """Set the minimum level that reaches the handlers."""
        self.logger.setLevel(_as_level(level))

    def _frames(self) -> List[Dict[str, Any]]:
        if not hasattr(self._local, "frames"):
            self._local.frames = []
        return self._local.frames

    @contextmanager
    def add_context(self, **fields):
        """Attach fields to every message logged from this thread inside the block.

        Example:
            >>> with logger.add_context(root="/data"):
            ...     logger.debug("Listed directory", files=3)
        """
        frames = self._frames()
        frames.append(fields)
        try:
            yield
        finally:
            frames.pop()

    def _emit(self, level: LogLevel, msg: str, fields: Dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return

        context: Dict[str, Any] = {}
        for frame in self._frames():
            context.update(frame)
        context.update(fields)

        if context:
            msg = f"{msg} | " + " ".join(f"{k}={v}" for k, v in context.items())
        self.logger.log(level, msg, extra={"context": context})

    def debug(self, msg: str, **fields) -> None:
        """Log debug message."""
        self._emit(LogLevel.DEBUG, msg, fields)

    def warning(self, msg: str, **fields) -> None:
        """Log warning message."""
        self._emit(LogLevel.WARNING, msg, fields)


def configured_level(config: Optional[ConfigManager] = None) -> LogLevel:
    """Return the level named by ``filetools.logging.level``.

    Args:
        config: Configuration manager (defaults to the global one)

    Raises:
        ConfigError: If the configured level is not a known level name
    """
    if config is None:
        config = get_config_manager()

    key = f"{ConfigKey.ROOT}.{ConfigKey.LOGGING}.{ConfigKey.LOG_LEVEL}"
    level = config.get(key, LogLevel.WARNING.name)
    try:
        return _as_level(level)
    except (KeyError, ValueError):
        raise ConfigError(f"Invalid log level: {level}")


# Global logger instance
_global_logger: Optional[Logger] = None
# Configuration the global logger took its level from; None once a logger
# has been installed with set_global_logger
_level_source: Optional[ConfigManager] = None


def get_logger(name: str = LOGGER_NAME) -> Logger:
    """Get or create the process-wide logger instance.

    A logger created here follows the global configuration: its level is
    re-read whenever a different ConfigManager has been installed with
    ``set_global_config``. A logger installed with ``set_global_logger``
    keeps its own level.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    global _global_logger, _level_source
    if _global_logger is None or _global_logger.name != name:
        config = get_config_manager()
        _global_logger = Logger(name=name, level=configured_level(config))
        _level_source = config
    elif _level_source is not None:
        config = get_config_manager()
        if config is not _level_source:
            _global_logger.set_level(configured_level(config))
            _level_source = config
    return _global_logger


def set_global_logger(logger: Optional[Logger]) -> None:
    """Install (or reset with None) the process-wide logger.

    Args:
        logger: Logger to use globally
    """
    global _global_logger, _level_source
    _global_logger = logger
    _level_source = None
