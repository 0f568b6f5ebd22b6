"""Invocation of native packaging tools and collection of their output."""

from __future__ import annotations

import shutil
import typing as typ
from pathlib import Path

from .errors import ShellOutError
from .log import get_logger
from .sync import glob

if typ.TYPE_CHECKING:
    from .live_stream import LiveLogStream
    from .shell import CommandRunner, ShellResult

__all__ = ["collect_artifacts", "invoke_tool"]

_LOG = get_logger("Invoker")


def invoke_tool(
    runner: CommandRunner,
    argv: typ.Sequence[str],
    *,
    live_stream: LiveLogStream,
    elevate: bool = False,
) -> ShellResult:
    """Run ``argv`` through ``runner``, streaming its output to ``live_stream``.

    Parameters
    ----------
    runner : CommandRunner
        Capability that executes the command.
    argv : Sequence[str]
        Command and arguments. The same vector is used with or without
        elevation.
    live_stream : LiveLogStream
        Sink receiving the command output while it runs.
    elevate : bool, default=False
        Run the command with elevated privileges.

    Returns
    -------
    ShellResult
        Outcome of the successful command.

    Raises
    ------
    ShellOutError
        Raised when the command exits with a non-zero status. The error
        carries the captured output.
    """

    command = tuple(argv)
    prefix = "sudo " if elevate else ""
    _LOG.debug("Executing `%s%s'", prefix, " ".join(command))
    result = runner(command, live_stream=live_stream, elevate=elevate)
    if result.exit_code != 0:
        raise ShellOutError(command, result.exit_code, result.output)
    return result


def collect_artifacts(root: Path, pattern: str, package_dir: Path) -> list[Path]:
    """Copy files under ``root`` matching ``pattern`` into ``package_dir``.

    Returns
    -------
    list[Path]
        Paths of the copies, in sorted source order.
    """

    destination = Path(package_dir)
    destination.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    for artifact in glob(root, pattern):
        target = destination / artifact.name
        shutil.copy2(artifact, target)
        _LOG.info("Copied `%s' to `%s'", artifact.name, destination)
        copied.append(target)
    return copied
