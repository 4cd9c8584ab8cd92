"""Pytest configuration for classloader tests."""

import sys
from pathlib import Path

import pytest


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch):
    """Run with a temporary home directory and a separate project directory."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    return {"home": home, "project": project}


@pytest.fixture
def clean_modules():
    """Drop modules imported during the test from sys.modules."""
    before = set(sys.modules)
    yield
    for name in set(sys.modules) - before:
        del sys.modules[name]


@pytest.fixture
def write_source():
    """Create a source file below a base directory, including parents."""

    def _write(base: Path, relative: str, body: str = "") -> Path:
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body)
        return path

    return _write
