"""Configuration models and loader for the packager.

The configuration is a TOML file with a ``[project]`` table describing the
software being packaged and an optional ``[packager]`` table tuning how the
package is produced.

Usage
-----
Load a configuration and build a package::

    from pathlib import Path
    from stage_packager.config import load_config

    project, settings = load_config(Path("packaging.toml"))
    print(f"Packaging {project.install_dir} into {settings.package_dir}")
"""

from __future__ import annotations

import dataclasses
import typing as typ
from pathlib import Path

import tomllib

from .errors import ConfigError
from .log import parse_level

__all__ = ["PackagerSettings", "Project", "load_config"]


@dataclasses.dataclass(slots=True, frozen=True)
class Project:
    """Describe the prepared install tree to be packaged.

    Attributes
    ----------
    name : str
        Project identifier.
    install_dir : str
        Absolute directory holding the installed software, e.g. ``/opt/hamlet``.
    build_version : str
        Free-form version string, e.g. ``"1.2.3-rc1"``.
    package_scripts_path : Path
        Directory containing lifecycle scripts named after their hook.
    package_name : str
        Raw package name, sanitised before use.
    build_iteration : int
        Release sequence number appended to the package version.
    friendly_name : str
        Human readable name rendered into the package description.
    description : str
        Package description.
    exclusions : tuple[str, ...]
        Glob patterns, relative to :attr:`install_dir`, left out of the package.
    """

    name: str
    install_dir: str
    build_version: str
    package_scripts_path: Path
    package_name: str
    build_iteration: int = 1
    friendly_name: str = ""
    description: str = ""
    exclusions: tuple[str, ...] = ()


@dataclasses.dataclass(slots=True, frozen=True)
class PackagerSettings:
    """Options controlling how packages are produced."""

    package_dir: Path
    use_sudo: bool = True
    mkinstallp: str = "/usr/sbin/mkinstallp"
    architecture: str | None = None
    log_level: str = "warn"
    live_stream_level: str = "debug"
    keep_staging: bool = False


def load_config(config_file: Path) -> tuple[Project, PackagerSettings]:
    """Load the project descriptor and packager settings from ``config_file``.

    Relative paths are resolved against the directory containing
    ``config_file``.

    Raises
    ------
    FileNotFoundError
        Raised when ``config_file`` does not exist.
    ConfigError
        Raised when required keys are missing or values have the wrong type.
    LogLevelError
        Raised when a configured log level is not recognised.
    """

    config_file = Path(config_file)
    if not config_file.is_file():
        message = f"Configuration file not found at {config_file}"
        raise FileNotFoundError(message)

    data = _load_toml(config_file)
    base_dir = config_file.resolve().parent
    project_cfg = data.get("project")
    if not isinstance(project_cfg, dict):
        message = f"Missing [project] table in {config_file}"
        raise ConfigError(message)
    packager_cfg = data.get("packager", {})
    if not isinstance(packager_cfg, dict):
        message = f"[packager] must be a table in {config_file}"
        raise ConfigError(message)

    _require_keys(
        project_cfg,
        {"name", "install_dir", "build_version", "package_scripts_path"},
        "project",
        config_file,
    )
    return (
        _make_project(project_cfg, base_dir, config_file),
        _make_settings(packager_cfg, base_dir, config_file),
    )


def _load_toml(path: Path) -> dict[str, typ.Any]:
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            message = f"Invalid TOML in {path}: {exc}"
            raise ConfigError(message) from exc


def _require_keys(
    section: dict[str, typ.Any], keys: set[str], label: str, config_path: Path
) -> None:
    if missing := sorted(keys - section.keys()):
        joined = ", ".join(missing)
        message = f"Missing required key(s) in [{label}] of {config_path}: {joined}"
        raise ConfigError(message)


def _make_project(
    cfg: dict[str, typ.Any], base_dir: Path, config_path: Path
) -> Project:
    name = _string(cfg, "name", config_path)
    iteration = cfg.get("build_iteration", 1)
    if isinstance(iteration, bool) or not isinstance(iteration, int) or iteration < 0:
        message = f"build_iteration must be a non-negative integer in {config_path}"
        raise ConfigError(message)
    return Project(
        name=name,
        install_dir=_string(cfg, "install_dir", config_path),
        build_version=str(cfg["build_version"]),
        package_scripts_path=base_dir / _string(cfg, "package_scripts_path", config_path),
        package_name=str(cfg.get("package_name") or name),
        build_iteration=iteration,
        friendly_name=str(cfg.get("friendly_name") or name),
        description=str(cfg.get("description", "")),
        exclusions=tuple(_string_list(cfg.get("exclusions"), "exclusions", config_path)),
    )


def _make_settings(
    cfg: dict[str, typ.Any], base_dir: Path, config_path: Path
) -> PackagerSettings:
    log_level = str(cfg.get("log_level", "warn"))
    live_level = str(cfg.get("live_stream_level", "debug"))
    parse_level(log_level)
    parse_level(live_level)
    architecture = cfg.get("architecture")
    return PackagerSettings(
        package_dir=base_dir / str(cfg.get("package_dir", "pkg")),
        use_sudo=_boolean(cfg, "use_sudo", True, config_path),
        mkinstallp=str(cfg.get("mkinstallp", "/usr/sbin/mkinstallp")),
        architecture=str(architecture) if architecture else None,
        log_level=log_level,
        live_stream_level=live_level,
        keep_staging=_boolean(cfg, "keep_staging", False, config_path),
    )


def _string(cfg: dict[str, typ.Any], key: str, config_path: Path) -> str:
    value = cfg[key]
    if not isinstance(value, str) or not value:
        message = f"{key} must be a non-empty string in {config_path}"
        raise ConfigError(message)
    return value


def _boolean(
    cfg: dict[str, typ.Any], key: str, default: bool, config_path: Path
) -> bool:
    value = cfg.get(key, default)
    if not isinstance(value, bool):
        message = f"{key} must be a boolean in {config_path}"
        raise ConfigError(message)
    return value


def _string_list(value: object, key: str, config_path: Path) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        message = f"{key} must be a list of strings in {config_path}"
        raise ConfigError(message)
    return [item for item in value if item]
