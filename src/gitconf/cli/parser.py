"""CLI argument parser for gitconf.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence


class CLIParser:
    """Command-line argument parser for gitconf."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse; sys.argv[1:] when None

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        return argparse.ArgumentParser(
            prog="gitconf",
            description="Read and edit git configuration files",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s get user.name
  %(prog)s set user.name "Ada Lovelace"
  %(prog)s add remote.origin.fetch "+refs/heads/*:refs/remotes/origin/*"
  %(prog)s get --all remote.origin.fetch
  %(prog)s unset core.bare
  %(prog)s list --global
  %(prog)s remove-section remote origin
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add --version to the main parser."""
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show gitconf version and exit",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        """Add all subcommands to the parser."""
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        self._add_get_command(subparsers)
        self._add_set_command(subparsers)
        self._add_add_command(subparsers)
        self._add_unset_command(subparsers)
        self._add_list_command(subparsers)
        self._add_subsections_command(subparsers)
        self._add_remove_section_command(subparsers)

    @staticmethod
    def _add_file_options(command_parser: argparse.ArgumentParser) -> None:
        """Add the options selecting the file and verbosity.

        Args:
            command_parser: Subcommand parser to extend

        """
        location = command_parser.add_mutually_exclusive_group()
        location.add_argument(
            "-f",
            "--file",
            help="Use the given config file instead of .git/config",
        )
        location.add_argument(
            "--global",
            dest="global_",
            action="store_true",
            help="Use the per-user config file (~/.gitconfig)",
        )
        command_parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )

    def _add_get_command(self, subparsers) -> None:
        """Add get command parser."""
        get_parser = subparsers.add_parser(
            "get", help="Print the value of a key"
        )
        get_parser.add_argument("path", help="Dotted key, e.g. user.name")
        get_parser.add_argument(
            "--all",
            action="store_true",
            help="Print every value of a multi-valued key",
        )
        self._add_file_options(get_parser)

    def _add_set_command(self, subparsers) -> None:
        """Add set command parser."""
        set_parser = subparsers.add_parser(
            "set", help="Set a key, replacing its last value"
        )
        set_parser.add_argument("path", help="Dotted key, e.g. user.name")
        set_parser.add_argument("value", help="New value")
        self._add_file_options(set_parser)

    def _add_add_command(self, subparsers) -> None:
        """Add add command parser."""
        add_parser = subparsers.add_parser(
            "add", help="Append a value to a (multi-valued) key"
        )
        add_parser.add_argument(
            "path", help="Dotted key, e.g. remote.origin.fetch"
        )
        add_parser.add_argument("value", help="Value to append")
        self._add_file_options(add_parser)

    def _add_unset_command(self, subparsers) -> None:
        """Add unset command parser."""
        unset_parser = subparsers.add_parser(
            "unset", help="Remove the last value of a key"
        )
        unset_parser.add_argument("path", help="Dotted key, e.g. core.bare")
        unset_parser.add_argument(
            "--all",
            action="store_true",
            help="Remove every value of the key",
        )
        self._add_file_options(unset_parser)

    def _add_list_command(self, subparsers) -> None:
        """Add list command parser."""
        list_parser = subparsers.add_parser(
            "list", help="List all keys with their values"
        )
        list_parser.add_argument(
            "--json",
            action="store_true",
            help="Print a JSON object mapping keys to lists of values",
        )
        self._add_file_options(list_parser)

    def _add_subsections_command(self, subparsers) -> None:
        """Add subsections command parser."""
        subsections_parser = subparsers.add_parser(
            "subsections", help="List the subsections of a section"
        )
        subsections_parser.add_argument("section", help="Section, e.g. remote")
        self._add_file_options(subsections_parser)

    def _add_remove_section_command(self, subparsers) -> None:
        """Add remove-section command parser."""
        remove_parser = subparsers.add_parser(
            "remove-section", help="Remove a section and all of its keys"
        )
        remove_parser.add_argument("section", help="Section, e.g. remote")
        remove_parser.add_argument(
            "subsection",
            nargs="?",
            default=None,
            help="Subsection (case-sensitive), e.g. origin",
        )
        self._add_file_options(remove_parser)
