"""Stage prepared install trees and build native packages from them."""

from .config import PackagerSettings, Project, load_config
from .errors import (
    ConfigError,
    LogLevelError,
    PackagerError,
    ShellOutError,
    UnknownPackagerError,
)
from .live_stream import LiveLogStream, live_stream
from .packagers import PACKAGERS, BFF, PackageIdentity, Packager, for_id
from .sanitize import derive_version, safe_name
from .shell import CommandRunner, PlumbumRunner, ShellResult

__all__ = [
    "BFF",
    "CommandRunner",
    "ConfigError",
    "derive_version",
    "for_id",
    "live_stream",
    "LiveLogStream",
    "load_config",
    "LogLevelError",
    "PACKAGERS",
    "PackageIdentity",
    "Packager",
    "PackagerError",
    "PackagerSettings",
    "PlumbumRunner",
    "Project",
    "safe_name",
    "ShellOutError",
    "ShellResult",
    "UnknownPackagerError",
]
