"""Shared fixtures for the packager test suite."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import pytest
from stage_test_helpers import FakeRunner, write_install_tree

from stage_packager.config import PackagerSettings, Project
from stage_packager.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_package_logger() -> typ.Iterator[None]:
    """Undo handler and propagation changes made by ``configure_logging``."""

    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def install_dir(tmp_path: Path) -> Path:
    """Create an install tree containing ``a/one.txt`` and ``b/two.txt``."""

    return write_install_tree(tmp_path / "opt" / "hamlet")


@pytest.fixture
def scripts_dir(tmp_path: Path) -> Path:
    """Return an empty lifecycle script source directory."""

    root = tmp_path / "package-scripts"
    root.mkdir()
    return root


@pytest.fixture
def project(install_dir: Path, scripts_dir: Path) -> Project:
    """Describe the ``hamlet`` test project."""

    return Project(
        name="hamlet",
        install_dir=install_dir.as_posix(),
        build_version="1.2.3",
        package_scripts_path=scripts_dir,
        package_name="hamlet",
        build_iteration=1,
        friendly_name="Hamlet",
        description="To package or not to package",
    )


@pytest.fixture
def settings(tmp_path: Path) -> PackagerSettings:
    """Return packager settings writing into ``tmp_path / 'pkg'``."""

    return PackagerSettings(package_dir=tmp_path / "pkg", architecture="ppc64")


@pytest.fixture
def staging_root(tmp_path: Path) -> Path:
    """Return the parent directory for staging directories."""

    root = tmp_path / "staging"
    root.mkdir()
    return root


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Return a runner that records invocations and succeeds."""

    return FakeRunner(output="mkinstallp: done\n")
