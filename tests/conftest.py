# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def bom_file(tmp_path: Path) -> Path:
    """A UTF-8 file written with a leading BOM."""
    path = tmp_path / "with_bom.txt"
    path.write_bytes(b"\xef\xbb\xbfHello world\n")
    return path


@pytest.fixture
def plain_file(tmp_path: Path) -> Path:
    """A file without any BOM."""
    path = tmp_path / "plain.txt"
    path.write_bytes(b"Hello world\n")
    return path


@pytest.fixture
def bomb_logger() -> Iterator[logging.Logger]:
    """The package logger, with its level restored after the test."""
    logger = logging.getLogger("bomb")
    level = logger.level
    yield logger
    logger.setLevel(level)
