"""Process-level locking for configuration files using fcntl.flock.

LockManager guards a read-modify-write cycle on one config file by holding
an exclusive lock on ``<file>.lock``, the same name git uses.
"""

from __future__ import annotations

import asyncio
import contextlib
import fcntl
import os
from pathlib import (
    Path,  # noqa: TC003 - Path used at runtime for file operations
)
from typing import IO, TYPE_CHECKING, Self

from gitconf.constants import LOCK_ACQUIRE_ATTEMPTS
from gitconf.exceptions import LockError

if TYPE_CHECKING:
    import types


class LockManager:
    """Async context manager for file locking using fcntl.flock.

    Uses a non-blocking exclusive lock (LOCK_EX | LOCK_NB) so a second
    writer fails fast instead of waiting.

    Attributes:
        _lock_path: Path to the lock file.
        _lock_file: Open file for the lock file (None when unlocked).

    Example:
        >>> async with LockManager(Path(".git/config.lock")):
        ...     # Exclusive lock held for this block
        ...     pass

    """

    def __init__(self, lock_path: Path) -> None:
        """Initialize LockManager with lock file path.

        Args:
            lock_path: Path to the lock file to be created/used.

        """
        self._lock_path = lock_path
        self._lock_file: IO[str] | None = None

    async def __aenter__(self) -> Self:
        """Acquire the lock.

        Returns:
            Self for use in async context manager.

        Raises:
            LockError: If another process holds the lock, or if the lock
                file cannot be created or keeps being replaced.

        """
        loop = asyncio.get_running_loop()

        def _acquire_lock() -> None:
            self._lock_path.parent.mkdir(parents=True, exist_ok=True)

            for _ in range(LOCK_ACQUIRE_ATTEMPTS):
                lock_file = _try_lock()
                if lock_file is not None:
                    self._lock_file = lock_file
                    return
            msg = "Lock file keeps being replaced by another process"
            raise LockError(msg, target=str(self._lock_path))

        def _try_lock() -> IO[str] | None:
            lock_file = None
            try:
                lock_file = self._lock_path.open("w", encoding="utf-8")
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                if self._is_current(lock_file):
                    return lock_file
                # Released and unlinked while we waited on the old inode
                lock_file.close()
                return None
            except BlockingIOError as e:
                if lock_file is not None:
                    lock_file.close()
                msg = "Configuration file is locked by another process"
                raise LockError(
                    msg, target=str(self._lock_path), cause=e
                ) from e
            except OSError as e:
                if lock_file is not None:
                    lock_file.close()
                msg = f"Failed to acquire lock: {e}"
                raise LockError(
                    msg, target=str(self._lock_path), cause=e
                ) from e

        await loop.run_in_executor(None, _acquire_lock)
        return self

    def _is_current(self, lock_file: IO[str]) -> bool:
        """Check that ``lock_file`` is still the file at the lock path."""
        try:
            on_disk = os.stat(self._lock_path)
        except FileNotFoundError:
            return False
        held = os.fstat(lock_file.fileno())
        return (held.st_dev, held.st_ino) == (on_disk.st_dev, on_disk.st_ino)

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Release the lock and remove the lock file.

        Safe to call even if the lock was never acquired.
        """
        if self._lock_file is None:
            return

        lock_file = self._lock_file
        loop = asyncio.get_running_loop()

        def _release_lock() -> None:
            # git refuses to write the config while <file>.lock exists
            with contextlib.suppress(FileNotFoundError):
                self._lock_path.unlink()
            lock_file.close()

        await loop.run_in_executor(None, _release_lock)
        self._lock_file = None
