"""Leveled logging for the framework."""

from __future__ import annotations

import logging
import threading
from datetime import timedelta
from typing import Optional, Union

from corekernel.config import Config
from corekernel.errors import ParseError

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_NAME = "corekernel.logger"
_FORMAT = "%(asctime)s %(levelname)s %(threadName)s(%(thread)d) %(name)s: %(message)s"
_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
_setup_lock = threading.Lock()


def _install_handlers(target: logging.Logger, config: Config) -> None:
    with _setup_lock:
        if target.handlers:
            return
        formatter = logging.Formatter(_FORMAT)
        handlers: list[logging.Handler] = []
        if config.log.console:
            handlers.append(logging.StreamHandler())
        if config.log.file:
            handlers.append(logging.FileHandler(config.log.file, encoding="utf-8"))
        for handler in handlers:
            handler.setFormatter(formatter)
            target.addHandler(handler)


def _format_duration(duration: Union[timedelta, float, int]) -> str:
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    nanos = round(seconds * 1_000_000_000)
    for scale, unit in ((1_000_000_000, "s"), (1_000_000, "ms"), (1_000, "µs")):
        if abs(nanos) >= scale:
            text = f"{nanos / scale:.9f}".rstrip("0").rstrip(".")
            return f"{text}{unit}"
    return f"{nanos}ns"


class Logger:
    """Writes messages at several levels to the framework log."""

    def __init__(self, config: Optional[Config] = None) -> None:
        config = config or Config()
        level = _LEVELS.get(config.log.level.lower())
        if level is None:
            raise ParseError(f"unknown log level '{config.log.level}'")
        self._log = logging.getLogger(_NAME)
        self._log.setLevel(level)
        _install_handlers(logging.getLogger("corekernel"), config)

    def info(self, message: str) -> None:
        """Log at info level."""
        self._log.info(message)

    def warn(self, message: str) -> None:
        """Log at warning level."""
        self._log.warning(message)

    def error(self, message: str) -> None:
        """Log at error level."""
        self._log.error(message)

    def debug(self, message: str) -> None:
        """Log at debug level."""
        self._log.debug(message)

    def trace(self, message: str) -> None:
        """Log at trace level."""
        self._log.log(TRACE, message)

    def context(self, context: str, message: str) -> None:
        """Log at info level, tagged with a context."""
        self._log.info("[%s] %s", context, message)

    def performance(self, operation: str, duration: Union[timedelta, float, int]) -> None:
        """Log how long an operation took; plain numbers are seconds."""
        self._log.info("PERFORMANCE: %s took %s", operation, _format_duration(duration))