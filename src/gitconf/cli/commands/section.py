"""Section command handlers for gitconf CLI."""

from argparse import Namespace

from gitconf.constants import EXIT_NOTHING_TO_UNSET, EXIT_OK
from gitconf.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class SubsectionsHandler(BaseCommandHandler):
    """Handler for the subsections command."""

    async def execute(self, args: Namespace) -> int:
        """Print the subsections of a section, one per line."""
        model = await self._load(self._config_file(args))
        for subsection in model.get_subsections(args.section):
            print(subsection)
        return EXIT_OK


class RemoveSectionHandler(BaseCommandHandler):
    """Handler for the remove-section command."""

    async def execute(self, args: Namespace) -> int:
        """Remove every block of a section (or subsection) with its keys."""
        path = self._config_file(args)

        async with self._lock(path):
            model = await self._load(path)
            removed = model.remove_section(args.section, args.subsection)
            if not removed:
                logger.debug(
                    "No section %s %s in %s",
                    args.section,
                    args.subsection,
                    path,
                )
                return EXIT_NOTHING_TO_UNSET
            await self._save(path, model)

        logger.debug("Removed %d header(s) from %s", removed, path)
        return EXIT_OK
