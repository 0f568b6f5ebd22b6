"""Template helpers used to render packaging control files."""

from __future__ import annotations

import typing as typ
from importlib import resources
from pathlib import Path

from .errors import PackagerError

if typ.TYPE_CHECKING:
    from importlib.resources.abc import Traversable

__all__ = ["render_template", "resource_path"]


def resource_path(*parts: str) -> Traversable:
    """Return the packaged resource at ``parts`` below ``resources/``."""

    return resources.files("stage_packager").joinpath("resources", *parts)


def render_template(
    template: Path | Traversable,
    destination: Path,
    variables: typ.Mapping[str, typ.Any],
) -> Path:
    """Format ``template`` with ``variables`` and write it to ``destination``.

    Raises
    ------
    PackagerError
        Raised when the template references a variable that was not supplied.
    """

    text = template.read_text(encoding="utf-8")
    try:
        rendered = text.format(**variables)
    except KeyError as exc:
        message = f"Invalid template key {exc} in '{template}'"
        raise PackagerError(message) from exc
    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(rendered, encoding="utf-8")
    return destination
