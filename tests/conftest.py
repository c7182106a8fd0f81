"""Pytest configuration and fixtures for gitconf tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("gitconf"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Provide a repository-local config file with some content."""
    git_dir = tmp_path / "repo" / ".git"
    git_dir.mkdir(parents=True)
    path = git_dir / "config"
    path.write_bytes(
        b"[core]\n"
        b"\tbare = false\n"
        b"\t# who pushes\n"
        b'[remote "origin"]\n'
        b"\turl = https://example.com/repo.git\n"
        b"\tfetch = +refs/heads/main:refs/remotes/origin/main\n"
    )
    return path
