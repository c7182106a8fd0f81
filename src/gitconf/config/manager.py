"""Load/save facade for git configuration files.

GitConfigManager connects the engine to caller-supplied I/O. It never opens
files itself: the caller passes a function that returns the file's bytes and
a function that stores new bytes, and decides which file backs which
request (repository-local, global, ...).
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from gitconf.config.model import ConfigModel
from gitconf.config.parser import parse
from gitconf.config.serializer import serialize
from gitconf.constants import FILE_ENCODING, FILE_ENCODING_ERRORS

logger = logging.getLogger(__name__)

ReadBytes = Callable[[], bytes]
WriteBytes = Callable[[bytes], None]
AsyncReadBytes = Callable[[], Awaitable[bytes]]
AsyncWriteBytes = Callable[[bytes], Awaitable[None]]


class GitConfigManager:
    """Loads models from bytes and saves them back.

    The manager is stateless; one instance can serve any number of files.

    Example:
        >>> manager = GitConfigManager()
        >>> config = manager.load(lambda: b"[core]\\n\\tbare = false\\n")
        >>> config.set("core.bare", "true")
        >>> manager.save(config, print)
        b'[core]\\n\\tbare = true\\n'

    """

    @staticmethod
    def from_text(text: str) -> ConfigModel:
        """Parse configuration text."""
        return parse(text)

    @staticmethod
    def to_text(model: ConfigModel) -> str:
        """Serialize a model to configuration text."""
        return serialize(model)

    @staticmethod
    def decode(data: bytes) -> ConfigModel:
        """Parse raw file bytes.

        Bytes that are not valid UTF-8 are carried through as surrogate
        escapes so that they are written back unchanged.

        Raises:
            ParseError: If the text is malformed

        """
        return parse(data.decode(FILE_ENCODING, FILE_ENCODING_ERRORS))

    @staticmethod
    def encode(model: ConfigModel) -> bytes:
        """Serialize a model to file bytes."""
        return serialize(model).encode(FILE_ENCODING, FILE_ENCODING_ERRORS)

    def load(self, read: ReadBytes) -> ConfigModel:
        """Load a model through ``read``.

        Args:
            read: Returns the file contents

        Returns:
            Parsed model; an empty model when the file does not exist

        Raises:
            OSError: Propagated from ``read`` (except FileNotFoundError)
            ParseError: If the contents are malformed

        """
        try:
            data = read()
        except FileNotFoundError:
            logger.debug("Config file not found, starting empty")
            return ConfigModel()
        return self.decode(data)

    def save(self, model: ConfigModel, write: WriteBytes) -> None:
        """Serialize ``model`` and hand the bytes to ``write``.

        Args:
            model: Model to persist
            write: Stores the new file contents

        Raises:
            OSError: Propagated from ``write``

        """
        data = self.encode(model)
        write(data)
        logger.debug("Saved config (%d bytes)", len(data))

    async def load_async(self, read: AsyncReadBytes) -> ConfigModel:
        """Async variant of load(); parsing starts after the read completes."""
        try:
            data = await read()
        except FileNotFoundError:
            logger.debug("Config file not found, starting empty")
            return ConfigModel()
        return self.decode(data)

    async def save_async(
        self, model: ConfigModel, write: AsyncWriteBytes
    ) -> None:
        """Async variant of save(); serialization finishes before writing."""
        data = self.encode(model)
        await write(data)
        logger.debug("Saved config (%d bytes)", len(data))
