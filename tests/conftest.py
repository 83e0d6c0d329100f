"""Shared fixtures: a throwaway typings package directory."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """A typings package at 10.1.0 with its checkpoint."""
    (tmp_path / "package.json").write_text(
        json.dumps(
            {
                "name": "electron-typings",
                "version": "10.1.0",
                "dependencies": {"electron": "10.1.0"},
            },
            indent=2,
        ),
        encoding="utf-8",
    )
    (tmp_path / "lastVersion.json").write_text(
        json.dumps({"lastVersion": "10.1.0"}, indent=2), encoding="utf-8"
    )
    return tmp_path
