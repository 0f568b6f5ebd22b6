"""Tests for the line-buffering live log stream."""

from __future__ import annotations

import logging

import pytest

from stage_packager.errors import LogLevelError
from stage_packager.live_stream import LiveLogStream, live_stream

LOGGER = "tests.live_stream"


def _messages(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [record.getMessage() for record in caplog.records if record.name == LOGGER]


def test_reassembles_lines_split_across_writes(caplog: pytest.LogCaptureFixture) -> None:
    """A line split over two writes is logged once, complete."""
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    stream = LiveLogStream(logging.getLogger(LOGGER), "info")

    stream.write("hello wor")
    assert _messages(caplog) == []

    stream.write("ld\ngoodbye\n")
    assert _messages(caplog) == ["hello world", "goodbye"]
    assert all(record.levelno == logging.INFO for record in caplog.records)
    assert stream.pending == ""


def test_emits_complete_lines_and_keeps_partial_tail(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Complete lines are emitted immediately; the tail waits for its end."""
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    stream = LiveLogStream(logging.getLogger(LOGGER))

    stream.write("one\ntwo\nthree\nfou")
    assert _messages(caplog) == ["one", "two", "three"]
    assert stream.pending == "fou"

    stream.write("r\n")
    assert _messages(caplog) == ["one", "two", "three", "four"]
    assert stream.pending == ""


def test_handles_many_lines_in_one_chunk(caplog: pytest.LogCaptureFixture) -> None:
    """Large chunks with thousands of lines are split without recursion."""
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    stream = LiveLogStream(logging.getLogger(LOGGER))

    stream.write("x\n" * 5000)

    assert len(_messages(caplog)) == 5000


def test_decodes_bytes_split_inside_a_character(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Multi-byte UTF-8 sequences may straddle chunk boundaries."""
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    stream = LiveLogStream(logging.getLogger(LOGGER))
    encoded = "café\n".encode()

    stream.write(encoded[:4])
    stream.write(encoded[4:])

    assert _messages(caplog) == ["café"]


def test_blank_lines_are_preserved(caplog: pytest.LogCaptureFixture) -> None:
    """An empty line in the output is a line of its own."""
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    stream = LiveLogStream(logging.getLogger(LOGGER))

    stream.write("a\n\nb\n")

    assert _messages(caplog) == ["a", "", "b"]


def test_streams_keep_independent_buffers(caplog: pytest.LogCaptureFixture) -> None:
    """Partial content written to one stream never leaks into another."""
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    logger = logging.getLogger(LOGGER)
    debug = LiveLogStream(logger, "debug")
    error = LiveLogStream(logger, "error")

    debug.write("partial ")
    error.write("failure\n")
    debug.write("debug\n")

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.ERROR, "failure"),
        (logging.DEBUG, "partial debug"),
    ]


def test_unflushed_tail_is_not_emitted(caplog: pytest.LogCaptureFixture) -> None:
    """Discarding a stream drops whatever was still buffered."""
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    stream = LiveLogStream(logging.getLogger(LOGGER))

    stream.write("no newline")
    del stream

    assert _messages(caplog) == []


def test_shift_operator_writes(caplog: pytest.LogCaptureFixture) -> None:
    """``<<`` is an alias for ``write`` and can be chained."""
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    stream = LiveLogStream(logging.getLogger(LOGGER))

    stream << "left " << "right\n"

    assert _messages(caplog) == ["left right"]


def test_rejects_unknown_level() -> None:
    """Unrecognised severities fail at construction."""
    with pytest.raises(LogLevelError, match="'loud' does not appear"):
        LiveLogStream(logging.getLogger(LOGGER), "loud")


def test_live_stream_is_cached_per_logger_and_level() -> None:
    """One stream exists per (logger, severity) pair."""
    logger = logging.getLogger(LOGGER)

    info = live_stream(logger, "info")

    assert live_stream(logger, "INFO") is info
    assert live_stream(logger, logging.INFO) is info
    assert live_stream(logger, "debug") is not info
    assert live_stream(logging.getLogger(f"{LOGGER}.other"), "info") is not info
