"""List command handler for gitconf CLI.

Prints every entry as ``section[.subsection].key=value`` in file order, or
with --json a single object mapping each key to its list of values.
"""

from argparse import Namespace

import orjson

from gitconf.constants import EXIT_OK

from .base import BaseCommandHandler


class ListHandler(BaseCommandHandler):
    """Handler for the list command."""

    async def execute(self, args: Namespace) -> int:
        """Execute the list command."""
        model = await self._load(self._config_file(args))
        items = model.items()

        if args.json:
            grouped: dict[str, list[str]] = {}
            for key, value in items:
                grouped.setdefault(key, []).append(value)
            print(orjson.dumps(grouped, option=orjson.OPT_INDENT_2).decode())
            return EXIT_OK

        for key, value in items:
            print(f"{key}={value}")
        return EXIT_OK
