"""Package name and version sanitisers for native packaging tools."""

from __future__ import annotations

import logging
import re

from .log import get_logger

__all__ = ["derive_version", "safe_name"]

_SAFE_NAME = re.compile(r"[a-z0-9.+\-]+")
_UNSAFE_RUN = re.compile(r"[^a-z0-9.+\-]+")
_NON_DIGITS = re.compile(r"\D+")

_LOG = get_logger("Sanitizer")


def safe_name(
    raw: str, log: logging.Logger | logging.LoggerAdapter | None = None
) -> str:
    """Return ``raw`` reduced to lowercase letters, digits, ``.``, ``+`` and ``-``.

    Names that already qualify are returned unchanged. Anything else is
    lower-cased and every run of disallowed characters collapses to a single
    dash; a warning records the conversion.

    Examples
    --------
    >>> safe_name("hamlet")
    'hamlet'
    >>> safe_name("My Great_App")
    'my-great-app'
    """

    if _SAFE_NAME.fullmatch(raw):
        return raw

    converted = _UNSAFE_RUN.sub("-", raw.lower())
    (log or _LOG).warning(
        "Package names can only include lowercase alphabetical characters "
        "(a-z), numbers (0-9), dots (.), plus signs (+), and dashes (-). "
        "Converting `%s' to `%s'.",
        raw,
        converted,
    )
    return converted


def derive_version(raw: str, iteration: int | str) -> str:
    """Return the first three numeric fields of ``raw`` suffixed by ``iteration``.

    ``raw`` is split on runs of non-digits and trailing empty fields are
    dropped. A leading non-digit prefix keeps its empty field, so
    ``derive_version("v1.2.3", 1)`` is ``".1.2.1"`` and
    ``derive_version("abc", 1)`` is ``".1"``.

    Examples
    --------
    >>> derive_version("12.3.4-rc1", 2)
    '12.3.4.2'
    >>> derive_version("1.2", 5)
    '1.2.5'
    """

    fields = _NON_DIGITS.split(raw)
    while fields and not fields[-1]:
        fields.pop()
    fields = fields[:3]
    return f"{'.'.join(fields)}.{iteration}"
