"""Shared test fixtures: helpers available to all test modules."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from javaenv.service import get_environment


@pytest.fixture(autouse=True)
def _fresh_environment():
    """Give every test its own process-wide environment (and empty caches)."""
    get_environment.cache_clear()
    yield
    get_environment.cache_clear()


@pytest.fixture
def write_config():
    """Return a helper writing a javaconfig.json (camelCase keys) into a directory."""

    def _write(directory: Path, **fields) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "javaconfig.json"
        path.write_text(json.dumps(fields), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Return a workspace root containing ``a/b/File.java`` and no config yet."""
    root = tmp_path / "root"
    source = root / "a" / "b" / "File.java"
    source.parent.mkdir(parents=True)
    source.write_text("class File {}\n", encoding="utf-8")
    return root
