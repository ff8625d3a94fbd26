"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from knightpath.store import ResultStore


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "knight_paths.json"


@pytest.fixture
def store(store_path: Path) -> ResultStore:
    return ResultStore(store_path)
