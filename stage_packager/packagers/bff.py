"""AIX ``installp`` (BFF) packager built on ``mkinstallp``."""

from __future__ import annotations

import functools
import posixpath
from pathlib import Path

from ..invoker import collect_artifacts
from ..manifest import MANIFEST_NAME, render_gen_template, staging_files
from ..sanitize import derive_version, safe_name
from ..scripts import ScriptEntry, stage_scripts
from ..sync import sync
from .base import PackageIdentity, Packager

__all__ = ["BFF", "bff_package_name"]


def bff_package_name(identity: PackageIdentity) -> str:
    """Return ``name.version.arch.bff`` for ``identity``.

    Examples
    --------
    >>> bff_package_name(PackageIdentity("bff", "hamlet", "1.2.3.1", "ppc64"))
    'hamlet.1.2.3.1.ppc64.bff'
    """

    return f"{identity.name}.{identity.version}.{identity.architecture}.bff"


class BFF(Packager):
    """Build ``.bff`` packages with ``mkinstallp``.

    Lifecycle scripts are registered with installp as follows:

    - install runs pre-install, then post-install.
    - upgrade runs pre-remove of the previous version, then pre-install and
      post-install of the new one.
    - remove runs unconfig.
    """

    id = "bff"

    scripts: dict[str, ScriptEntry]

    def _setup(self) -> None:
        # /opt/hamlet => /tmp/bff-daj29013/opt/hamlet
        destination = self.staging_path(self.project.install_dir)
        sync(
            Path(self.project.install_dir),
            destination,
            exclude=self.project.exclusions,
        )
        self.create_directory(self.scripts_staging_dir)
        self.scripts = self.write_scripts()

    def _build(self) -> list[Path]:
        self.write_gen_template()
        return self.create_bff_file()

    def package_name(self) -> str:
        return bff_package_name(self.identity)

    @functools.cached_property
    def identity(self) -> PackageIdentity:
        """Sanitised name, version and architecture, derived once per build."""
        return PackageIdentity(
            id=self.id,
            name=self.safe_base_package_name,
            version=self.bff_version,
            architecture=self.safe_architecture,
        )

    @property
    def scripts_install_dir(self) -> str:
        """Directory holding the lifecycle scripts once installed."""
        return posixpath.normpath(
            posixpath.join(self.project.install_dir, "embedded", "share", "installp")
        )

    @property
    def scripts_staging_dir(self) -> Path:
        return self.staging_path(self.scripts_install_dir)

    @property
    def manifest_path(self) -> Path:
        return self.staging_dir / MANIFEST_NAME

    def write_scripts(self) -> dict[str, ScriptEntry]:
        """Copy present lifecycle scripts into the scripts staging directory."""
        return stage_scripts(
            self.project.package_scripts_path,
            self.scripts_staging_dir,
            self.scripts_install_dir,
        )

    def write_gen_template(self) -> Path:
        """Render the ``mkinstallp`` gen template into the staging directory."""
        identity = self.identity
        return render_gen_template(
            self.manifest_path,
            name=identity.name,
            install_dir=self.project.install_dir,
            friendly_name=self.project.friendly_name,
            version=identity.version,
            description=self.project.description,
            files=staging_files(self.staging_dir),
            scripts=self.scripts,
        )

    def create_bff_file(self) -> list[Path]:
        """Run ``mkinstallp`` and copy the resulting packages to ``package_dir``.

        ``mkinstallp`` requires root on AIX, so it runs through ``sudo`` unless
        ``use_sudo`` is disabled.
        """
        self.log.info("Creating .bff file")
        self.shellout(
            [
                self.settings.mkinstallp,
                "-d",
                str(self.staging_dir),
                "-T",
                str(self.manifest_path),
            ]
        )
        return collect_artifacts(self.staging_dir, "tmp/*.bff", self.settings.package_dir)

    @property
    def safe_base_package_name(self) -> str:
        return safe_name(self.project.package_name, self.log)

    @property
    def bff_version(self) -> str:
        return derive_version(self.project.build_version, self.project.build_iteration)
