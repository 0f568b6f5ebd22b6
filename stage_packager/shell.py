"""Command execution helpers backed by :mod:`plumbum`."""

from __future__ import annotations

import dataclasses
import subprocess
import typing as typ

from plumbum import local

if typ.TYPE_CHECKING:
    from .live_stream import LiveLogStream

__all__ = ["CommandRunner", "PlumbumRunner", "ShellResult"]


@dataclasses.dataclass(slots=True, frozen=True)
class ShellResult:
    """Exit status and combined output of a finished command."""

    command: tuple[str, ...]
    exit_code: int
    output: str


class CommandRunner(typ.Protocol):
    """Callable executing ``argv`` and reporting its outcome.

    Implementations must feed output to ``live_stream`` while the command is
    running and must not raise on a non-zero exit status. ``elevate`` wraps
    the command in the platform's privilege-elevation tool without changing
    ``argv`` itself.
    """

    def __call__(
        self,
        argv: typ.Sequence[str],
        *,
        live_stream: LiveLogStream | None = None,
        elevate: bool = False,
    ) -> ShellResult: ...


@dataclasses.dataclass(slots=True)
class PlumbumRunner:
    """Run commands on the local machine through :data:`plumbum.local`.

    Standard error is merged into standard output. Output is read as soon as
    the process produces it and forwarded to the live stream chunk by chunk.
    """

    sudo: str = "sudo"
    chunk_size: int = 4096

    def __call__(
        self,
        argv: typ.Sequence[str],
        *,
        live_stream: LiveLogStream | None = None,
        elevate: bool = False,
    ) -> ShellResult:
        if not argv:
            message = "Cannot execute an empty command"
            raise ValueError(message)
        if elevate:
            command = local[self.sudo][tuple(argv)]
        else:
            command = local[argv[0]][tuple(argv[1:])]

        chunks: list[bytes] = []
        with command.popen(stdout=subprocess.PIPE, stderr=subprocess.STDOUT) as process:
            reader = process.stdout
            for chunk in iter(lambda: reader.read1(self.chunk_size), b""):
                chunks.append(chunk)
                if live_stream is not None:
                    live_stream.write(chunk)
            exit_code = process.wait()

        output = b"".join(chunks).decode("utf-8", errors="replace")
        return ShellResult(tuple(argv), exit_code, output)
