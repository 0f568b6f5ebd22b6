"""Rendering of the ``mkinstallp`` gen template."""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from .templates import render_template, resource_path

if typ.TYPE_CHECKING:
    from .scripts import ScriptEntry

__all__ = ["MANIFEST_NAME", "render_gen_template", "staging_files"]

MANIFEST_NAME = "gen.template"

_LINE_BREAKS = re.compile(r"\s*[\r\n]+\s*")


def staging_files(staging_dir: Path) -> list[str]:
    """Return every path below ``staging_dir`` as sorted relative POSIX paths.

    Directories are listed alongside files so empty ones are still packaged.
    The rendered manifest itself is never listed.

    Examples
    --------
    >>> staging_files(Path("/tmp/stage"))  # doctest: +SKIP
    ['opt', 'opt/hamlet', 'opt/hamlet/bin', 'opt/hamlet/bin/hamlet']
    """

    root = Path(staging_dir)
    manifest = root / MANIFEST_NAME
    return sorted(
        path.relative_to(root).as_posix()
        for path in root.rglob("*")
        if path != manifest
    )


def render_gen_template(
    destination: Path,
    *,
    name: str,
    install_dir: str,
    friendly_name: str,
    version: str,
    description: str,
    files: typ.Sequence[str],
    scripts: typ.Mapping[str, ScriptEntry],
) -> Path:
    """Write the gen template describing the package to ``destination``.

    ``files`` are staging-relative paths and are rendered as absolute install
    paths. One ``<keyword>: <path>`` line is written per entry in ``scripts``,
    preserving its order. Line breaks inside ``friendly_name`` and
    ``description`` collapse to a single space so they cannot start new
    keyword lines.
    """

    friendly_name = _single_line(friendly_name)
    description = _single_line(description)
    file_lines = "".join(f"    /{path.lstrip('/')}\n" for path in files)
    script_lines = "".join(
        f"  {entry.key}: {entry.install_path}\n" for entry in scripts.values()
    )
    return render_template(
        resource_path("bff", "gen.template"),
        Path(destination),
        {
            "name": name,
            "install_dir": install_dir,
            "friendly_name": friendly_name,
            "version": version,
            "description": description,
            "files": file_lines,
            "scripts": script_lines,
        },
    )


def _single_line(value: str) -> str:
    return _LINE_BREAKS.sub(" ", value).strip()
