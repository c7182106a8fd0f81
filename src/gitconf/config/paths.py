"""Locations of git configuration files.

This module centralizes how the command line front end picks the file a
request applies to. The engine itself never looks at paths.
"""

import os
from pathlib import Path

from gitconf.constants import (
    GIT_DIR_NAME,
    GLOBAL_CONFIG_FILE_NAME,
    LOCAL_CONFIG_FILE_NAME,
    LOCK_SUFFIX,
    XDG_CONFIG_SUBPATH,
)


class Paths:
    """Configuration file paths."""

    @classmethod
    def find_git_dir(cls, start: Path | None = None) -> Path | None:
        """Find the ``.git`` directory of the repository containing ``start``.

        Args:
            start: Directory to start from (defaults to the current directory)

        Returns:
            Path to the git directory, or None outside a repository

        """
        current = (start or Path.cwd()).resolve(strict=False)
        for directory in (current, *current.parents):
            candidate = directory / GIT_DIR_NAME
            if candidate.is_dir():
                return candidate
        return None

    @classmethod
    def local_config(cls, start: Path | None = None) -> Path:
        """Get the repository-local config file (``.git/config``).

        Raises:
            FileNotFoundError: If ``start`` is not inside a git repository

        """
        git_dir = cls.find_git_dir(start)
        if git_dir is None:
            msg = f"not in a git directory: {start or Path.cwd()}"
            raise FileNotFoundError(msg)
        return git_dir / LOCAL_CONFIG_FILE_NAME

    @classmethod
    def global_config(cls) -> Path:
        """Get the per-user config file.

        ``~/.gitconfig`` is used when it exists or when there is no XDG
        file, matching the order git itself writes to.
        """
        home_file = Path.home() / GLOBAL_CONFIG_FILE_NAME
        xdg_home = os.getenv("XDG_CONFIG_HOME") or str(Path.home() / ".config")
        xdg_file = Path(xdg_home).expanduser().joinpath(*XDG_CONFIG_SUBPATH)
        if not home_file.exists() and xdg_file.exists():
            return xdg_file
        return home_file

    @classmethod
    def lock_path(cls, config_file: Path) -> Path:
        """Get the lock file guarding ``config_file`` (``<file>.lock``)."""
        return config_file.with_name(config_file.name + LOCK_SUFFIX)

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ``~`` and make the path absolute.

        Example:
            >>> Paths.expand_path("~/repo/.git/config")
            PosixPath('/home/user/repo/.git/config')

        """
        return Path(path_str).expanduser().resolve(strict=False)
