"""Registry of the available packagers."""

from __future__ import annotations

import types
import typing as typ

from ..errors import UnknownPackagerError
from .base import PackageIdentity, Packager
from .bff import BFF, bff_package_name

__all__ = [
    "BFF",
    "PACKAGERS",
    "PackageIdentity",
    "Packager",
    "bff_package_name",
    "for_id",
]

PACKAGERS: typ.Mapping[str, type[Packager]] = types.MappingProxyType(
    {packager.id: packager for packager in (BFF,)}
)


def for_id(identifier: str) -> type[Packager]:
    """Return the packager class registered under ``identifier``.

    Raises
    ------
    UnknownPackagerError
        Raised when no packager uses ``identifier``.
    """

    try:
        return PACKAGERS[identifier.strip().lower()]
    except KeyError as exc:
        known = ", ".join(sorted(PACKAGERS))
        message = f"Unknown packager '{identifier}' (available: {known})"
        raise UnknownPackagerError(message) from exc
