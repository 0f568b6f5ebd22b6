"""Adapter turning streamed process output into one log record per line."""

from __future__ import annotations

import codecs
import logging
import typing as typ

from .log import LOGGER_NAME, parse_level

__all__ = ["LiveLogStream", "live_stream"]


class LiveLogStream:
    """File-like sink that logs each complete line written to it.

    Data is buffered until a newline arrives, so lines split across ``write``
    calls are reassembled and logged exactly once. Whatever remains buffered
    when the stream is discarded is dropped; there is no implicit flush.

    Parameters
    ----------
    logger : logging.Logger | logging.LoggerAdapter
        Destination for the emitted records.
    level : str | int, default="debug"
        Severity used for every emitted line.

    Examples
    --------
    >>> stream = LiveLogStream(logging.getLogger("demo"), "info")
    >>> stream.write("hello wor")
    9
    >>> stream.pending
    'hello wor'
    """

    def __init__(
        self,
        logger: logging.Logger | logging.LoggerAdapter,
        level: str | int = "debug",
    ) -> None:
        self._log = logger
        self.level = parse_level(level)
        self._buffer = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def pending(self) -> str:
        """Partial line waiting for its terminator."""
        return self._buffer

    def write(self, data: str | bytes) -> int:
        """Buffer ``data`` and log every line it completes."""
        text = self._decoder.decode(data) if isinstance(data, bytes) else data
        self._log_lines(text)
        return len(data)

    def __lshift__(self, data: str | bytes) -> LiveLogStream:
        self.write(data)
        return self

    def _log_lines(self, data: str) -> None:
        pending = self._buffer + data
        while (newline := pending.find("\n")) != -1:
            self._log.log(self.level, "%s", pending[:newline])
            pending = pending[newline + 1 :]
        self._buffer = pending

    def __repr__(self) -> str:
        return f"<{type(self).__name__} level: {logging.getLevelName(self.level)}>"


_STREAMS: dict[tuple[str, int], LiveLogStream] = {}


def live_stream(
    logger: logging.Logger | None = None, level: str | int = "debug"
) -> LiveLogStream:
    """Return the shared :class:`LiveLogStream` for ``logger`` at ``level``.

    Streams are created on first use and reused afterwards, one per
    ``(logger, level)`` pair.
    """

    target = logger or logging.getLogger(LOGGER_NAME)
    key = (target.name, parse_level(level))
    if (stream := _STREAMS.get(key)) is None:
        stream = _STREAMS[key] = LiveLogStream(target, key[1])
    return stream
