"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from nri.cli.main import cli

NRI_ENV_VARS = (
    "NRI_PROJECT_ROOT",
    "NRI_PROJECT_MARKER",
    "NRI_DEFAULT_SCALE",
    "NRI_THUMBNAIL_KEY",
    "NRI_SCALE_KEY",
)


@pytest.fixture(autouse=True)
def clean_nri_env(monkeypatch):
    """Remove NRI_* variables so host settings never leak into tests."""
    for name in NRI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["parse", "nars::a.png"])
        result = invoke(["--project", "/proj", "resolve", "nprs::a.png"])
    """

    def _invoke(args):
        return cli_runner.invoke(cli, args)

    return _invoke


class FakeFileSystem:
    """In-memory existence checks."""

    def __init__(self, *paths):
        self.paths = set(paths)
        self.checked = []

    def exists(self, path):
        self.checked.append(path)
        return path in self.paths


@pytest.fixture
def fake_fs():
    return FakeFileSystem
