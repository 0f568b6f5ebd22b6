"""Exception hierarchy shared by the packager toolchain."""

from __future__ import annotations

import typing as typ

__all__ = [
    "ConfigError",
    "LogLevelError",
    "PackagerError",
    "ShellOutError",
    "UnknownPackagerError",
]


class PackagerError(RuntimeError):
    """Raised when packaging cannot proceed."""


class ConfigError(PackagerError):
    """Raised when the project configuration is missing or invalid."""


class LogLevelError(PackagerError, ValueError):
    """Raised when a log severity symbol is not recognised."""


class UnknownPackagerError(PackagerError, KeyError):
    """Raised when no packager is registered for an identifier."""

    def __str__(self) -> str:
        # ``KeyError`` would otherwise repr() the message.
        return str(self.args[0]) if self.args else ""


class ShellOutError(PackagerError):
    """Raised when an external command exits with a non-zero status.

    Parameters
    ----------
    command : Sequence[str]
        Argument vector that was executed.
    exit_code : int
        Exit status reported by the process.
    output : str
        Combined stdout/stderr captured while the command ran.
    """

    def __init__(self, command: typ.Sequence[str], exit_code: int, output: str) -> None:
        self.command = tuple(command)
        self.exit_code = exit_code
        self.output = output
        joined = " ".join(self.command)
        message = f"Command `{joined}' exited with status {exit_code}"
        if output.strip():
            message = f"{message}:\n{output.rstrip()}"
        super().__init__(message)
