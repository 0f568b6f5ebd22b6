"""Tests for the logging helpers."""

from __future__ import annotations

import io
import logging

import pytest

from stage_packager.errors import LogLevelError
from stage_packager.log import (
    LEFT,
    ColumnFormatter,
    configure_logging,
    get_logger,
    parse_level,
    set_level,
)


@pytest.mark.parametrize(
    ("symbol", "expected"),
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("warn", logging.WARNING),
        ("Warning", logging.WARNING),
        ("error", logging.ERROR),
        ("fatal", logging.CRITICAL),
        (logging.ERROR, logging.ERROR),
    ],
)
def test_parse_level_accepts_known_levels(symbol: str | int, expected: int) -> None:
    """Known symbols map onto stdlib levels."""
    assert parse_level(symbol) == expected


@pytest.mark.parametrize("symbol", ["verbose", "", 7, True])
def test_parse_level_rejects_unknown_levels(symbol: object) -> None:
    """Anything outside the level table is an error."""
    with pytest.raises(LogLevelError) as exc:
        parse_level(symbol)  # type: ignore[arg-type]
    assert "does not appear to be a valid log level" in str(exc.value)


def test_set_level_updates_logger() -> None:
    """``set_level`` applies the parsed level to the logger."""
    logger = logging.getLogger("tests.set_level")
    set_level("error", logger)
    assert logger.level == logging.ERROR


def _record(message: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("tests", logging.INFO, __file__, 1, message, None, None)
    record.__dict__.update(extra)
    return record


def test_formatter_pads_component_column() -> None:
    """The prefix is right-aligned to the fixed column width."""
    text = ColumnFormatter().format(_record("Creating .bff file", component="Packager: BFF"))

    prefix = "[Packager: BFF] I | "
    assert text == prefix.rjust(LEFT) + "Creating .bff file"


def test_formatter_without_component() -> None:
    """Records without a component only carry the severity letter."""
    text = ColumnFormatter().format(_record("hello"))
    assert text == "I | ".rjust(LEFT) + "hello"


def test_component_logger_tags_records(caplog: pytest.LogCaptureFixture) -> None:
    """Records emitted through a component logger carry the component."""
    caplog.set_level(logging.DEBUG, logger="stage_packager")
    log = get_logger("Scripts")

    log.info("added %s", "postinst")

    (record,) = caplog.records
    assert record.component == "Scripts"
    assert record.getMessage() == "added postinst"


def test_deprecated_prefixes_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Deprecation notices are warnings with a ``DEPRECATED:`` prefix."""
    caplog.set_level(logging.DEBUG, logger="stage_packager")

    get_logger("Config").deprecated("`use_sudo' is going away")

    (record,) = caplog.records
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "DEPRECATED: `use_sudo' is going away"


def test_deprecated_respects_level(caplog: pytest.LogCaptureFixture) -> None:
    """Deprecation notices are suppressed above WARNING."""
    caplog.set_level(logging.ERROR, logger="stage_packager")

    get_logger("Config").deprecated("ignored")

    assert caplog.records == []


def test_configure_logging_writes_column_format() -> None:
    """The installed handler renders records using the column format."""
    buffer = io.StringIO()
    configure_logging("info", buffer)
    configure_logging("info", buffer)

    get_logger("Packager: BFF").info("Creating .bff file")
    get_logger("Packager: BFF").debug("hidden")

    assert buffer.getvalue() == (
        "[Packager: BFF] I | ".rjust(LEFT) + "Creating .bff file\n"
    )
