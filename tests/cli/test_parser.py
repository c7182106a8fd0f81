"""Tests for the CLI argument parser."""

from unittest.mock import patch

import pytest

from gitconf.cli.parser import CLIParser


@pytest.fixture
def cli_parser() -> CLIParser:
    """Fixture providing a CLIParser instance."""
    return CLIParser()


def test_get_command_basic(cli_parser):
    with patch("sys.argv", ["gitconf", "get", "user.name"]):
        args = cli_parser.parse_args()
        assert args.command == "get"
        assert args.path == "user.name"
        assert not args.all
        assert args.file is None
        assert not args.global_
        assert not args.verbose


def test_get_command_with_options(cli_parser):
    args = cli_parser.parse_args(
        ["get", "--all", "remote.origin.fetch", "-f", "cfg", "--verbose"]
    )
    assert args.all
    assert args.file == "cfg"
    assert args.verbose


def test_set_and_add_commands(cli_parser):
    args = cli_parser.parse_args(["set", "user.name", "Ada Lovelace"])
    assert (args.command, args.path, args.value) == (
        "set",
        "user.name",
        "Ada Lovelace",
    )
    args = cli_parser.parse_args(["add", "--global", "a.b", "c"])
    assert args.command == "add"
    assert args.global_


def test_unset_command(cli_parser):
    args = cli_parser.parse_args(["unset", "--all", "a.b"])
    assert args.command == "unset"
    assert args.all


def test_list_command(cli_parser):
    args = cli_parser.parse_args(["list", "--json"])
    assert args.command == "list"
    assert args.json


def test_section_commands(cli_parser):
    args = cli_parser.parse_args(["subsections", "remote"])
    assert args.section == "remote"

    args = cli_parser.parse_args(["remove-section", "remote", "origin"])
    assert args.command == "remove-section"
    assert (args.section, args.subsection) == ("remote", "origin")

    args = cli_parser.parse_args(["remove-section", "core"])
    assert args.subsection is None


def test_file_and_global_are_exclusive(cli_parser):
    with pytest.raises(SystemExit):
        cli_parser.parse_args(["get", "a.b", "--file", "x", "--global"])


def test_set_requires_value(cli_parser):
    with pytest.raises(SystemExit):
        cli_parser.parse_args(["set", "a.b"])


def test_version_flag(cli_parser):
    args = cli_parser.parse_args(["--version"])
    assert args.version
    assert args.command is None
