"""End-to-end tests for the command handlers on real files."""

from pathlib import Path

import orjson
import pytest

from gitconf.cli.parser import CLIParser
from gitconf.cli.runner import CLIRunner
from gitconf.config import Paths
from gitconf.core.locking import LockManager


async def run_cli(*argv: str) -> int:
    """Parse ``argv`` and execute it, returning the exit code."""
    args = CLIParser().parse_args(list(argv))
    return await CLIRunner().execute(args)


@pytest.mark.asyncio
async def test_get(config_file: Path, capsys):
    code = await run_cli(
        "get", "remote.origin.url", "--file", str(config_file)
    )
    assert code == 0
    assert capsys.readouterr().out == "https://example.com/repo.git\n"


@pytest.mark.asyncio
async def test_get_uses_local_config_by_default(
    config_file: Path, capsys, monkeypatch
):
    monkeypatch.chdir(config_file.parent.parent)
    assert await run_cli("get", "core.bare") == 0
    assert capsys.readouterr().out == "false\n"


@pytest.mark.asyncio
async def test_get_missing_key(config_file: Path, capsys):
    code = await run_cli("get", "user.name", "-f", str(config_file))
    assert code == 1
    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_get_all(config_file: Path, capsys):
    await run_cli(
        "add", "remote.origin.fetch", "+refs/tags/*:refs/tags/*",
        "-f", str(config_file),
    )
    capsys.readouterr()
    code = await run_cli(
        "get", "--all", "remote.origin.fetch", "-f", str(config_file)
    )
    assert code == 0
    assert capsys.readouterr().out == (
        "+refs/heads/main:refs/remotes/origin/main\n"
        "+refs/tags/*:refs/tags/*\n"
    )


@pytest.mark.asyncio
async def test_set_existing_key_rewrites_only_that_line(config_file: Path):
    before = config_file.read_text()
    code = await run_cli("set", "core.bare", "true", "-f", str(config_file))
    assert code == 0
    assert config_file.read_text() == before.replace(
        "bare = false", "bare = true"
    )
    assert not Paths.lock_path(config_file).exists()


@pytest.mark.asyncio
async def test_set_new_section(config_file: Path):
    before = config_file.read_text()
    code = await run_cli(
        "set", "user.name", "Ada Lovelace", "-f", str(config_file)
    )
    assert code == 0
    expected = before + "[user]\n\tname = Ada Lovelace\n"
    assert config_file.read_text() == expected


@pytest.mark.asyncio
async def test_set_creates_missing_file(tmp_path: Path):
    path = tmp_path / "fresh.gitconfig"
    assert await run_cli("set", "core.editor", "vim", "-f", str(path)) == 0
    assert path.read_text() == "[core]\n\teditor = vim\n"


@pytest.mark.asyncio
async def test_set_global(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    assert await run_cli("set", "--global", "user.email", "a@b.c") == 0
    assert (tmp_path / ".gitconfig").read_text() == "[user]\n\temail = a@b.c\n"


@pytest.mark.asyncio
async def test_set_invalid_key(config_file: Path):
    before = config_file.read_bytes()
    assert await run_cli("set", "nosection", "x", "-f", str(config_file)) == 1
    assert config_file.read_bytes() == before


@pytest.mark.asyncio
async def test_unset(config_file: Path):
    assert await run_cli("unset", "core.bare", "-f", str(config_file)) == 0
    assert "bare" not in config_file.read_text()
    assert config_file.read_text().startswith("[core]\n\t# who pushes\n")


@pytest.mark.asyncio
async def test_unset_missing_key_leaves_file_alone(config_file: Path):
    mtime = config_file.stat().st_mtime_ns
    assert await run_cli("unset", "core.nothing", "-f", str(config_file)) == 5
    assert config_file.stat().st_mtime_ns == mtime


@pytest.mark.asyncio
async def test_unset_all(config_file: Path):
    await run_cli("add", "remote.origin.fetch", "x", "-f", str(config_file))
    code = await run_cli(
        "unset", "--all", "remote.origin.fetch", "-f", str(config_file)
    )
    assert code == 0
    assert "fetch" not in config_file.read_text()


@pytest.mark.asyncio
async def test_list(config_file: Path, capsys):
    assert await run_cli("list", "-f", str(config_file)) == 0
    assert capsys.readouterr().out == (
        "core.bare=false\n"
        "remote.origin.url=https://example.com/repo.git\n"
        "remote.origin.fetch=+refs/heads/main:refs/remotes/origin/main\n"
    )


@pytest.mark.asyncio
async def test_list_json(config_file: Path, capsys):
    await run_cli("add", "remote.origin.fetch", "x", "-f", str(config_file))
    capsys.readouterr()
    assert await run_cli("list", "--json", "-f", str(config_file)) == 0
    assert orjson.loads(capsys.readouterr().out) == {
        "core.bare": ["false"],
        "remote.origin.url": ["https://example.com/repo.git"],
        "remote.origin.fetch": [
            "+refs/heads/main:refs/remotes/origin/main",
            "x",
        ],
    }


@pytest.mark.asyncio
async def test_subsections(config_file: Path, capsys):
    await run_cli("set", "remote.Upstream.url", "u", "-f", str(config_file))
    capsys.readouterr()
    assert await run_cli("subsections", "remote", "-f", str(config_file)) == 0
    assert capsys.readouterr().out == "origin\nUpstream\n"


@pytest.mark.asyncio
async def test_remove_section(config_file: Path):
    code = await run_cli(
        "remove-section", "remote", "origin", "-f", str(config_file)
    )
    assert code == 0
    assert config_file.read_text() == (
        "[core]\n\tbare = false\n\t# who pushes\n"
    )


@pytest.mark.asyncio
async def test_remove_missing_section(config_file: Path):
    code = await run_cli("remove-section", "remote", "-f", str(config_file))
    assert code == 5


@pytest.mark.asyncio
async def test_parse_error_exit_code(tmp_path: Path, capsys):
    path = tmp_path / "config"
    path.write_text('[a]\n\tx = "open\n')
    assert await run_cli("get", "a.x", "-f", str(path)) == 3
    assert "line 2" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_locked_file(config_file: Path, capsys):
    before = config_file.read_bytes()
    async with LockManager(Paths.lock_path(config_file)):
        code = await run_cli(
            "set", "core.bare", "true", "-f", str(config_file)
        )
    assert code == 4
    assert config_file.read_bytes() == before
    assert "locked" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_verbose_flag(config_file: Path):
    code = await run_cli(
        "get", "core.bare", "--verbose", "-f", str(config_file)
    )
    assert code == 0
