"""File operations backing a configuration file.

FileStore supplies the read/write callables GitConfigManager expects. Writes
are atomic: the new contents go to a temporary file in the same directory
which then replaces the original, so readers never see a half-written file.
"""

from __future__ import annotations

import asyncio
import contextlib
import os
import tempfile
from pathlib import Path

from gitconf.logger import get_logger

logger = get_logger(__name__)


class FileStore:
    """Reads and atomically rewrites one configuration file."""

    def __init__(self, path: Path) -> None:
        """Initialize file store.

        Args:
            path: Configuration file path

        """
        self.path = path

    def read_bytes(self) -> bytes:
        """Read the file contents.

        Raises:
            FileNotFoundError: If the file does not exist (the manager turns
                this into an empty configuration)
            OSError: For any other read failure

        """
        data = self.path.read_bytes()
        logger.debug("Read %d bytes from %s", len(data), self.path)
        return data

    def write_bytes(self, data: bytes) -> None:
        """Replace the file contents atomically.

        The file's permission bits are kept when it already exists.

        Args:
            data: New file contents

        Raises:
            OSError: If the temporary file cannot be written or moved

        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        mode = self.path.stat().st_mode & 0o777 if self.path.exists() else None

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", dir=self.path.parent
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as tmp_file:
                tmp_file.write(data)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            if mode is not None:
                tmp_path.chmod(mode)
            tmp_path.replace(self.path)
        except BaseException:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise
        logger.debug("Wrote %d bytes to %s", len(data), self.path)

    async def read_bytes_async(self) -> bytes:
        """Read the file contents without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.read_bytes)

    async def write_bytes_async(self, data: bytes) -> None:
        """Replace the file contents without blocking the event loop."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self.write_bytes, data)
