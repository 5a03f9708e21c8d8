"""Shared test fixtures for the pexlog test suite."""

import io
import os
from unittest.mock import patch

import pytest

from pexlog import default_log as _default_mod


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: tests that take more than a second")


# ---------------------------------------------------------------------------
# Default log isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_default_log():
    """Start every test with no default log and restore afterwards."""
    old = _default_mod._default
    _default_mod._default = None
    yield
    _default_mod._default = old


# ---------------------------------------------------------------------------
# Streams and directories
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing screen output."""
    return io.StringIO()


@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.pexlog/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path):
    """Provide an empty project directory outside the home directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project
