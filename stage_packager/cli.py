"""Command-line entry point for the packager.

Examples
--------
Build a BFF package described by ``packaging.toml``::

    stage-packager packaging.toml --packager bff --log-level info
"""

from __future__ import annotations

import sys
from pathlib import Path

import cyclopts
from plumbum import CommandNotFound

from .config import load_config
from .errors import PackagerError
from .log import configure_logging
from .packagers import for_id

app = cyclopts.App(help="Build a native package from a prepared install tree.")


@app.default
def main(
    config_file: Path,
    *,
    packager: str = "bff",
    log_level: str | None = None,
) -> None:
    """Package the project described by ``config_file``.

    Parameters
    ----------
    config_file:
        Path to the TOML file describing the project and packager options.
    packager:
        Identifier of the packager to use (for example ``"bff"``).
    log_level:
        Override for the configured log level (``debug``, ``info``, ``warn``...).
    """
    try:
        project, settings = load_config(Path(config_file))
        configure_logging(log_level or settings.log_level, sys.stderr)
        packager_cls = for_id(packager)
        artifacts = packager_cls(project, settings).run()
    except (FileNotFoundError, PackagerError, CommandNotFound) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for artifact in artifacts:
        print(artifact)


if __name__ == "__main__":
    app()
