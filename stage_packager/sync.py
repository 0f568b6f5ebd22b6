"""Filesystem helpers for copying trees into a staging directory."""

from __future__ import annotations

import fnmatch
import shutil
import typing as typ
from pathlib import Path

__all__ = ["glob", "sync"]


def _is_excluded(relative: str, exclude: typ.Sequence[str]) -> bool:
    return any(fnmatch.fnmatchcase(relative, pattern) for pattern in exclude)


def sync(
    source: Path, destination: Path, *, exclude: typ.Iterable[str] = ()
) -> Path:
    """Recursively copy ``source`` into ``destination``.

    Parameters
    ----------
    source : Path
        Directory to copy.
    destination : Path
        Target directory, created if missing.
    exclude : Iterable[str]
        Glob patterns matched against paths relative to ``source``. An excluded
        directory is skipped together with its contents. Patterns that match
        nothing are ignored.

    Returns
    -------
    Path
        The ``destination`` directory.

    Examples
    --------
    >>> sync(Path("/opt/hamlet"), Path("/tmp/stage/opt/hamlet"), exclude=["**/.git"])  # doctest: +SKIP
    PosixPath('/tmp/stage/opt/hamlet')
    """

    source = Path(source)
    patterns = [pattern.strip("/") for pattern in exclude if pattern]

    def _ignore(directory: str, names: list[str]) -> set[str]:
        parent = Path(directory).relative_to(source)
        return {
            name
            for name in names
            if _is_excluded((parent / name).as_posix(), patterns)
        }

    shutil.copytree(
        source,
        destination,
        ignore=_ignore if patterns else None,
        symlinks=True,
        dirs_exist_ok=True,
    )
    return Path(destination)


def glob(root: Path, pattern: str) -> list[Path]:
    """Return files beneath ``root`` matching ``pattern`` in sorted order."""

    return sorted(path for path in Path(root).glob(pattern) if path.is_file())
