"""CLI runner for gitconf.

Orchestrates the execution of CLI commands by routing parsed
arguments to the appropriate command handlers and turning errors into
git-compatible exit codes.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence

from gitconf import __version__
from gitconf.config import GitConfigManager
from gitconf.constants import (
    EXIT_FAILURE,
    EXIT_INVALID_PATH,
    EXIT_IO_ERROR,
    EXIT_OK,
    EXIT_PARSE_ERROR,
)
from gitconf.exceptions import InvalidPathError, LockError, ParseError
from gitconf.logger import get_logger, temporary_console_level

from .commands import (
    GetHandler,
    ListHandler,
    RemoveSectionHandler,
    SetHandler,
    SubsectionsHandler,
    UnsetHandler,
)
from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, manager: GitConfigManager | None = None) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            manager: Engine facade shared by all handlers

        """
        self.manager = manager or GitConfigManager()
        self._init_command_handlers()

    def _init_command_handlers(self) -> None:
        """Initialize all command handlers with the shared manager."""
        self.command_handlers = {
            "get": GetHandler(self.manager),
            "set": SetHandler(self.manager),
            "add": SetHandler(self.manager),
            "unset": UnsetHandler(self.manager),
            "list": ListHandler(self.manager),
            "subsections": SubsectionsHandler(self.manager),
            "remove-section": RemoveSectionHandler(self.manager),
        }

    async def run(self, argv: Sequence[str] | None = None) -> None:
        """Run the CLI application.

        Parses arguments, handles global flags, routes to the handler and
        exits with its status when that is not zero.

        Args:
            argv: Command-line arguments; sys.argv[1:] when None

        """
        args = CLIParser().parse_args(argv)

        if getattr(args, "version", False):
            print(__version__)
            return

        if not args.command:
            print("error: no command specified, use --help", file=sys.stderr)
            sys.exit(EXIT_FAILURE)

        exit_code = await self.execute(args)
        if exit_code != EXIT_OK:
            sys.exit(exit_code)

    async def execute(self, args: Namespace) -> int:
        """Execute a parsed command and map failures to exit codes.

        Args:
            args: Parsed command-line arguments namespace

        Returns:
            Process exit code

        """
        try:
            return await self._execute_command(args)
        except ParseError as e:
            return self._fail(e, EXIT_PARSE_ERROR)
        except InvalidPathError as e:
            return self._fail(e, EXIT_INVALID_PATH)
        except LockError as e:
            return self._fail(e, EXIT_IO_ERROR)
        except OSError as e:
            return self._fail(e, EXIT_IO_ERROR)
        except KeyboardInterrupt:
            print("\nOperation cancelled by user", file=sys.stderr)
            return EXIT_FAILURE
        except Exception as e:
            logger.exception("Unexpected error")
            return self._fail(e, EXIT_FAILURE)

    async def _execute_command(self, args: Namespace) -> int:
        """Execute the specified command with the appropriate handler.

        Args:
            args: Parsed command-line arguments namespace

        """
        command = args.command

        if command not in self.command_handlers:
            print(f"error: unknown command: {command}", file=sys.stderr)
            return EXIT_FAILURE

        handler = self.command_handlers[command]

        if getattr(args, "verbose", False):
            with temporary_console_level("DEBUG"):
                return await handler.execute(args)
        return await handler.execute(args)

    @staticmethod
    def _fail(error: BaseException, exit_code: int) -> int:
        logger.debug("%s failed: %s", type(error).__name__, error)
        print(f"error: {error}", file=sys.stderr)
        return exit_code
