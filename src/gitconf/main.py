"""Main CLI entry point for gitconf.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to the CLI runner and its
command handlers.
"""

import sys

import uvloop

from gitconf.cli import CLIRunner
from gitconf.logger import get_logger

logger = get_logger(__name__)


async def async_main() -> None:
    """Run the CLI asynchronously."""
    logger.debug("CLI started")
    runner = CLIRunner()
    await runner.run()
    logger.debug("CLI completed")


def main() -> None:
    """Run the CLI application on the uvloop event loop."""
    try:
        uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.debug("CLI cancelled by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
