"""Tests for FileStore reads and atomic writes."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from gitconf.infrastructure.file_ops import FileStore


def test_read_bytes(tmp_path: Path):
    path = tmp_path / "config"
    path.write_bytes(b"[a]\n")
    assert FileStore(path).read_bytes() == b"[a]\n"


def test_read_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        FileStore(tmp_path / "missing").read_bytes()


def test_write_bytes_creates_file_and_parents(tmp_path: Path):
    path = tmp_path / "new" / "config"
    FileStore(path).write_bytes(b"[a]\n")
    assert path.read_bytes() == b"[a]\n"


def test_write_bytes_replaces_and_keeps_mode(tmp_path: Path):
    path = tmp_path / "config"
    path.write_bytes(b"old")
    path.chmod(0o600)

    FileStore(path).write_bytes(b"new")

    assert path.read_bytes() == b"new"
    assert path.stat().st_mode & 0o777 == 0o600
    assert os.listdir(tmp_path) == ["config"]


def test_write_failure_leaves_original_and_no_temp_file(tmp_path: Path):
    path = tmp_path / "config"
    path.write_bytes(b"old")

    with (
        patch.object(Path, "replace", side_effect=OSError("boom")),
        pytest.raises(OSError, match="boom"),
    ):
        FileStore(path).write_bytes(b"new")

    assert path.read_bytes() == b"old"
    assert os.listdir(tmp_path) == ["config"]


@pytest.mark.asyncio
async def test_async_read_and_write(tmp_path: Path):
    store = FileStore(tmp_path / "config")
    await store.write_bytes_async(b"[a]\n\tx = 1\n")
    assert await store.read_bytes_async() == b"[a]\n\tx = 1\n"
