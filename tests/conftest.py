"""Shared test fixtures for doclint."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def tmp_project(tmp_path: Path) -> Path:
    """Create a minimal project structure with an empty ``docs/`` directory."""
    docs_dir = tmp_path / "docs"
    docs_dir.mkdir()
    return tmp_path


@pytest.fixture()
def docs_dir(tmp_project: Path) -> Path:
    return tmp_project / "docs"
