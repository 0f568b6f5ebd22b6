"""Lifecycle script staging for installp packages."""

from __future__ import annotations

import dataclasses
import shutil
import typing as typ
from pathlib import Path, PurePosixPath

from .log import get_logger

__all__ = ["SCRIPT_MAP", "ScriptEntry", "stage_scripts"]

# installp keyword for each supported hook, in the order they are rendered.
SCRIPT_MAP: typ.Mapping[str, str] = {
    "preinst": "Pre-installation Script",
    "postinst": "Post-installation Script",
    "prerm": "Pre_rm Script",
    "postrm": "Unconfiguration Script",
}

_LOG = get_logger("Scripts")


@dataclasses.dataclass(slots=True, frozen=True)
class ScriptEntry:
    """A staged lifecycle script and where it lands on the target system."""

    hook: str
    key: str
    install_path: str


def stage_scripts(
    source_dir: Path, staging_dir: Path, install_dir: str | PurePosixPath
) -> dict[str, ScriptEntry]:
    """Copy every present hook script into ``staging_dir``.

    Parameters
    ----------
    source_dir : Path
        Directory holding scripts named after their hook (``postinst`` ...).
    staging_dir : Path
        Directory receiving the copied scripts.
    install_dir : str | PurePosixPath
        Directory the scripts occupy once the package is installed.

    Returns
    -------
    dict[str, ScriptEntry]
        Entries for the hooks that exist, in :data:`SCRIPT_MAP` order. Missing
        hooks are left out.
    """

    scripts: dict[str, ScriptEntry] = {}
    for hook, key in SCRIPT_MAP.items():
        source_path = Path(source_dir) / hook
        if not source_path.is_file():
            continue

        _LOG.debug("Adding script `%s' to `%s'", hook, staging_dir)
        Path(staging_dir).mkdir(parents=True, exist_ok=True)
        shutil.copy2(source_path, Path(staging_dir) / hook)
        install_path = (PurePosixPath(install_dir) / hook).as_posix()
        scripts[hook] = ScriptEntry(hook, key, install_path)
    return scripts
