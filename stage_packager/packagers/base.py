"""Shared lifecycle for native packagers.

A packager is created for a single build. It owns a fresh staging directory
and runs two phases in order: :meth:`Packager.setup` copies the install tree
into staging, then :meth:`Packager.build` describes and produces the package.
"""

from __future__ import annotations

import abc
import dataclasses
import platform
import shutil
import tempfile
import typing as typ
from pathlib import Path, PurePosixPath

from ..errors import PackagerError
from ..invoker import invoke_tool
from ..live_stream import live_stream
from ..log import get_logger
from ..shell import PlumbumRunner

if typ.TYPE_CHECKING:
    from ..config import PackagerSettings, Project
    from ..shell import CommandRunner, ShellResult

__all__ = ["PackageIdentity", "Packager"]


@dataclasses.dataclass(slots=True, frozen=True)
class PackageIdentity:
    """Sanitised naming inputs for one package build."""

    id: str
    name: str
    version: str
    architecture: str


class Packager(abc.ABC):
    """Base class for packagers; subclasses implement the two phases.

    Parameters
    ----------
    project : Project
        Descriptor of the install tree being packaged.
    settings : PackagerSettings
        Output directory and tool options.
    runner : CommandRunner, optional
        Command execution capability. Defaults to :class:`PlumbumRunner`.
    staging_root : Path, optional
        Parent directory for the staging directory. Defaults to the system
        temporary directory.
    """

    id: typ.ClassVar[str] = ""

    def __init__(
        self,
        project: Project,
        settings: PackagerSettings,
        *,
        runner: CommandRunner | None = None,
        staging_root: Path | None = None,
    ) -> None:
        self.project = project
        self.settings = settings
        self.runner: CommandRunner = runner or PlumbumRunner()
        self.staging_dir = Path(
            tempfile.mkdtemp(prefix=f"{self.id or 'packager'}-", dir=staging_root)
        )
        self.log = get_logger(self.log_key)
        self._setup_complete = False

    @property
    def log_key(self) -> str:
        return f"Packager: {self.id.upper()}"

    def setup(self) -> None:
        """Stage the install tree. Must complete before :meth:`build`."""
        self.log.info("Staging `%s' in `%s'", self.project.install_dir, self.staging_dir)
        self._setup()
        self._setup_complete = True

    def build(self) -> list[Path]:
        """Produce the package and return the artifacts copied to ``package_dir``.

        Raises
        ------
        PackagerError
            Raised when :meth:`setup` has not completed.
        ShellOutError
            Raised when the packaging tool fails. The staging directory is
            kept for inspection.
        """
        if not self._setup_complete:
            message = f"{type(self).__name__}.build() called before setup() completed"
            raise PackagerError(message)
        return self._build()

    def run(self) -> list[Path]:
        """Run both phases, removing the staging directory on success."""
        self.setup()
        artifacts = self.build()
        if not self.settings.keep_staging:
            self.log.debug("Removing staging directory `%s'", self.staging_dir)
            shutil.rmtree(self.staging_dir)
        return artifacts

    @abc.abstractmethod
    def _setup(self) -> None: ...

    @abc.abstractmethod
    def _build(self) -> list[Path]: ...

    @abc.abstractmethod
    def package_name(self) -> str:
        """Return the file name of the package this packager produces."""

    @property
    def safe_architecture(self) -> str:
        return self.settings.architecture or platform.machine()

    def staging_path(self, path: str | PurePosixPath) -> Path:
        """Return ``path`` re-rooted beneath the staging directory."""
        return self.staging_dir / PurePosixPath(path).as_posix().lstrip("/")

    def create_directory(self, path: Path) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        return path

    def shellout(self, argv: typ.Sequence[str]) -> ShellResult:
        """Run ``argv`` with output streamed to the package logger."""
        stream = live_stream(self.log.logger, self.settings.live_stream_level)
        return invoke_tool(
            self.runner, argv, live_stream=stream, elevate=self.settings.use_sudo
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} staging_dir={self.staging_dir}>"
