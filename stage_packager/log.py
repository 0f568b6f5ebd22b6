"""Logging helpers for the packager toolchain.

Records are rendered in two columns: a right-aligned ``[component] L |``
prefix followed by the message, for example::

                        [Packager: BFF] I | Creating .bff file

Usage
-----
Configure the package logger once and fetch component loggers as needed::

    from stage_packager.log import configure_logging, get_logger

    configure_logging("info")
    log = get_logger("Packager: BFF")
    log.info("Creating .bff file")
"""

from __future__ import annotations

import logging
import sys
import typing as typ

from .errors import LogLevelError

__all__ = [
    "LEFT",
    "LEVELS",
    "LOGGER_NAME",
    "ColumnFormatter",
    "ComponentLogger",
    "configure_logging",
    "get_logger",
    "parse_level",
    "set_level",
]

LOGGER_NAME = "stage_packager"

# Width of the right-aligned prefix column.
LEFT = 40

LEVELS: typ.Mapping[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}


def parse_level(level: str | int) -> int:
    """Return the numeric severity for ``level``.

    Parameters
    ----------
    level : str | int
        Severity symbol such as ``"info"`` (case-insensitive) or a numeric
        level already present in :data:`LEVELS`.

    Raises
    ------
    LogLevelError
        Raised when ``level`` is not a recognised severity.

    Examples
    --------
    >>> parse_level("WARN")
    30
    """

    if isinstance(level, bool):
        message = f"{level!r} does not appear to be a valid log level!"
        raise LogLevelError(message)
    if isinstance(level, int):
        if level in LEVELS.values():
            return level
    elif isinstance(level, str):
        try:
            return LEVELS[level.strip().lower()]
        except KeyError:
            pass
    message = f"{level!r} does not appear to be a valid log level!"
    raise LogLevelError(message)


def set_level(level: str | int, logger: logging.Logger | None = None) -> int:
    """Set ``logger`` (the package logger by default) to ``level``."""

    numeric = parse_level(level)
    (logger or logging.getLogger(LOGGER_NAME)).setLevel(numeric)
    return numeric


class ColumnFormatter(logging.Formatter):
    """Render records as ``[component] L | message`` padded to :data:`LEFT`."""

    def format(self, record: logging.LogRecord) -> str:
        component = getattr(record, "component", None)
        severity = record.levelname[:1]
        left = f"[{component}] {severity} | " if component else f"{severity} | "
        text = f"{left.rjust(LEFT)}{record.getMessage()}"
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


class ComponentLogger(logging.LoggerAdapter):
    """Logger adapter tagging every record with a component key."""

    def process(
        self, msg: typ.Any, kwargs: typ.MutableMapping[str, typ.Any]
    ) -> tuple[typ.Any, typ.MutableMapping[str, typ.Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("component", self.extra["component"])
        kwargs["extra"] = extra
        return msg, kwargs

    def deprecated(self, msg: str, *args: typ.Any, **kwargs: typ.Any) -> None:
        """Log ``msg`` at WARNING with a ``DEPRECATED:`` prefix."""
        self.warning(f"DEPRECATED: {msg}", *args, **kwargs)

    def __repr__(self) -> str:
        level = logging.getLevelName(self.logger.getEffectiveLevel())
        return f"<{type(self).__name__} {self.extra['component']!r} level: {level}>"


def get_logger(component: str, logger: logging.Logger | None = None) -> ComponentLogger:
    """Return a :class:`ComponentLogger` for ``component``."""

    return ComponentLogger(logger or logging.getLogger(LOGGER_NAME), {"component": component})


def configure_logging(
    level: str | int = "warn", stream: typ.TextIO | None = None
) -> logging.Logger:
    """Install a single column-formatted handler on the package logger.

    Calling this again replaces the previously installed handler.
    """

    logger = logging.getLogger(LOGGER_NAME)
    set_level(level, logger)
    for handler in list(logger.handlers):
        if getattr(handler, "_stage_packager", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ColumnFormatter())
    handler._stage_packager = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
    return logger
