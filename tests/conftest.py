"""Shared fixtures for build-tree and transfer-runner tests."""

from pathlib import Path
from typing import Callable
from unittest.mock import Mock

import pytest

from game_build_publisher.transfer import TransferResult

BuildTree = Callable[[dict[str, list[str]]], Path]


@pytest.fixture
def make_build(tmp_path: Path) -> BuildTree:
    """Factory that lays out a build root from {dir name: [entries]}.

    Entries ending in '/' are created as directories, everything else as
    empty regular files.
    """

    def _make(layout: dict[str, list[str]]) -> Path:
        root = tmp_path / "build"
        root.mkdir(exist_ok=True)
        for dir_name, entries in layout.items():
            build_dir = root / dir_name
            build_dir.mkdir()
            for entry in entries:
                if entry.endswith("/"):
                    (build_dir / entry.rstrip("/")).mkdir()
                else:
                    (build_dir / entry).touch()
        return root

    return _make


@pytest.fixture
def fake_runner() -> Mock:
    """Transfer runner that succeeds for every invocation."""
    return Mock(return_value=TransferResult(returncode=0, stdout="butler 15.21.0"))
