"""Test configuration and fixtures."""

from pathlib import Path

import pytest

from pkgman.constants import ENV_VAR
from pkgman.resolver import ResolutionContext


def make_which(*installed: str):
    """Build a fake shutil.which that only knows the given binaries."""
    def which(binary: str) -> str | None:
        if binary in installed:
            return f"/usr/local/bin/{binary}"
        return None
    return which


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch):
    """Point HOME at a temp directory and clear the override env var."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(ENV_VAR, raising=False)
    return home


@pytest.fixture
def project(tmp_path: Path, monkeypatch):
    """Set up a temporary project directory and chdir into it."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    monkeypatch.chdir(project_dir)
    return project_dir


@pytest.fixture
def installed(monkeypatch):
    """Control which package manager binaries appear to be on PATH."""
    def _set(*binaries: str):
        monkeypatch.setattr("shutil.which", make_which(*binaries))
    _set("npm")
    return _set


@pytest.fixture
def context_factory(project: Path, isolated_home: Path):
    """Build a ResolutionContext for the temp project and home."""
    def _make(environ: dict | None = None, installed: tuple[str, ...] = ("npm",)) -> ResolutionContext:
        return ResolutionContext(
            project_dir=project,
            home_dir=isolated_home,
            environ=environ or {},
            which=make_which(*installed),
        )
    return _make


@pytest.fixture
def fake_which():
    """Factory for fake shutil.which functions."""
    return make_which
