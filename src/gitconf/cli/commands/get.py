"""Get command handler for gitconf CLI.

Prints the value(s) of one key to stdout, one per line.
"""

from argparse import Namespace

from gitconf.constants import EXIT_KEY_NOT_FOUND, EXIT_OK
from gitconf.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class GetHandler(BaseCommandHandler):
    """Handler for the get command."""

    async def execute(self, args: Namespace) -> int:
        """Execute the get command."""
        path = self._config_file(args)
        model = await self._load(path)

        if args.all:
            values = model.get_all(args.path)
        else:
            value = model.get(args.path)
            values = [] if value is None else [value]

        if not values:
            logger.debug("%s is not set in %s", args.path, path)
            return EXIT_KEY_NOT_FOUND

        for value in values:
            print(value)
        return EXIT_OK
