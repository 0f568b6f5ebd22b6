"""Shared helpers for the packager test suites."""

from __future__ import annotations

import dataclasses
import typing as typ
from pathlib import Path

from stage_packager.shell import ShellResult

if typ.TYPE_CHECKING:
    from stage_packager.live_stream import LiveLogStream

__all__ = ["FakeRunner", "Invocation", "write_install_tree", "write_scripts"]


@dataclasses.dataclass(frozen=True)
class Invocation:
    """Command recorded by :class:`FakeRunner`."""

    argv: tuple[str, ...]
    elevate: bool


@dataclasses.dataclass
class FakeRunner:
    """Command runner double that records invocations instead of running them.

    Parameters
    ----------
    output : str
        Text written to the live stream and reported as captured output.
    exit_code : int
        Status returned for every invocation.
    artifacts : tuple[str, ...]
        File names created under ``<-d directory>/tmp`` on success, mimicking
        ``mkinstallp``.
    """

    output: str = ""
    exit_code: int = 0
    artifacts: tuple[str, ...] = ()
    calls: list[Invocation] = dataclasses.field(default_factory=list)

    def __call__(
        self,
        argv: typ.Sequence[str],
        *,
        live_stream: LiveLogStream | None = None,
        elevate: bool = False,
    ) -> ShellResult:
        command = tuple(argv)
        self.calls.append(Invocation(command, elevate))
        if live_stream is not None and self.output:
            live_stream.write(self.output)
        if self.exit_code == 0 and "-d" in command:
            output_dir = Path(command[command.index("-d") + 1]) / "tmp"
            output_dir.mkdir(parents=True, exist_ok=True)
            for name in self.artifacts:
                (output_dir / name).write_bytes(b"bff")
        return ShellResult(command, self.exit_code, self.output)


def write_install_tree(root: Path) -> Path:
    """Populate ``root`` with a small install tree and return it."""

    for relative, content in {
        "a/one.txt": "one",
        "b/two.txt": "two",
    }.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def write_scripts(root: Path, *hooks: str) -> Path:
    """Create executable lifecycle scripts named ``hooks`` under ``root``."""

    root.mkdir(parents=True, exist_ok=True)
    for hook in hooks:
        script = root / hook
        script.write_text(f"#!/bin/sh\necho {hook}\n", encoding="utf-8")
        script.chmod(0o755)
    return root
