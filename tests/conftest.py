# tests/conftest.py

"""Shared pytest fixtures for the catalog viewer tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_output_dirs(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Point downloads and logs at a temp dir so tests never touch the repo."""
    monkeypatch.setattr(Settings, "DOWNLOADS_DIR", tmp_path / "downloads")
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")
    yield
