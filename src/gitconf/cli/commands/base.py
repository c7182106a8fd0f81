"""Base command handler for gitconf CLI commands.

This module provides the abstract base class that all command handlers
inherit from, together with the file plumbing they share: choosing the
config file, loading it, and saving it back under a lock.
"""

from abc import ABC, abstractmethod
from argparse import Namespace
from pathlib import Path

from gitconf.config import ConfigModel, GitConfigManager, Paths
from gitconf.core.locking import LockManager
from gitconf.infrastructure.file_ops import FileStore
from gitconf.logger import get_logger

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    Usage:
        handler = ConcreteHandler(GitConfigManager())
        exit_code = await handler.execute(args)

    Note:
        Concrete handlers must implement the execute() method.
        CLIRunner creates the shared manager and injects it.
    """

    def __init__(self, manager: GitConfigManager) -> None:
        """Initialize the command handler.

        Args:
            manager: Engine facade used to load and save files

        """
        self.manager = manager

    @abstractmethod
    async def execute(self, args: Namespace) -> int:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            Process exit code

        """

    def _config_file(self, args: Namespace) -> Path:
        """Pick the file chosen by --file or --global, else .git/config."""
        if getattr(args, "file", None):
            return Paths.expand_path(args.file)
        if getattr(args, "global_", False):
            return Paths.global_config()
        return Paths.local_config()

    async def _load(self, path: Path) -> ConfigModel:
        """Load the model stored in ``path``."""
        logger.debug("Loading %s", path)
        return await self.manager.load_async(FileStore(path).read_bytes_async)

    async def _save(self, path: Path, model: ConfigModel) -> None:
        """Write ``model`` back to ``path``."""
        logger.debug("Saving %s", path)
        await self.manager.save_async(model, FileStore(path).write_bytes_async)

    def _lock(self, path: Path) -> LockManager:
        """Return the lock guarding a read-modify-write of ``path``."""
        return LockManager(Paths.lock_path(path))
