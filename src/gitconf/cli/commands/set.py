"""Write command handlers for gitconf CLI.

``set`` and ``add`` store a value, ``unset`` removes one or all values.
Every write happens while holding ``<file>.lock``.
"""

from argparse import Namespace

from gitconf.config import DELETE, Append, Operation, Set, resolve
from gitconf.constants import EXIT_NOTHING_TO_UNSET, EXIT_OK
from gitconf.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class SetHandler(BaseCommandHandler):
    """Handler for the set and add commands."""

    async def execute(self, args: Namespace) -> int:
        """Execute set (replace the last value) or add (append a value)."""
        # Reject a malformed key before touching the file or its lock
        key = resolve(args.path)
        operation: Operation = (
            Append(args.value) if args.command == "add" else Set(args.value)
        )

        path = self._config_file(args)
        async with self._lock(path):
            model = await self._load(path)
            model.apply(key, operation)
            await self._save(path, model)

        logger.debug("%s %s in %s", args.command, key, path)
        return EXIT_OK


class UnsetHandler(BaseCommandHandler):
    """Handler for the unset command."""

    async def execute(self, args: Namespace) -> int:
        """Execute the unset command.

        The file is left untouched when nothing matched.
        """
        key = resolve(args.path)
        path = self._config_file(args)

        async with self._lock(path):
            model = await self._load(path)
            if args.all:
                removed = model.unset_all(key)
            else:
                removed = int(model.apply(key, DELETE))

            if not removed:
                logger.debug("%s is not set in %s", key, path)
                return EXIT_NOTHING_TO_UNSET
            await self._save(path, model)

        logger.debug("Removed %d value(s) of %s from %s", removed, key, path)
        return EXIT_OK
