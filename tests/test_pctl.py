"""Tests for the pctl command line."""

import io
import pytest
from click.testing import CliRunner
from unittest.mock import patch
from rich.console import Console
from pctl.lib.players import manager_register
from pctl.models.dataModel import CLIOptions
from pctl.pctl import __version__, async_main, main


METADATA = {"xesam:artist": ["Pink Floyd"], "xesam:title": "Dogs"}


@pytest.fixture
def runner():
    with patch("pctl.pctl.signal.signal"):
        yield CliRunner()


@pytest.fixture
def players(make_player, make_manager):
    vlc = make_player("vlc", status="Paused", metadata=METADATA)
    spotify = make_player("spotify", status="Playing", metadata={"xesam:title": "Time"})
    manager = make_manager(vlc, spotify)
    manager_register(manager)
    return manager


def test_version_output(runner):
    result = runner.invoke(main, ["-v"])
    assert result.exit_code == 0
    assert f"v{__version__}" in result.output


def test_help_lists_commands(runner):
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "play-pause" in result.output
    assert "--format" in result.output


def test_no_command(runner):
    result = runner.invoke(main, [])
    assert result.exit_code == 0
    assert "No command entered" in result.output


def test_no_transport(runner):
    result = runner.invoke(main, ["status"])
    assert result.exit_code == 1
    assert "No player transport is available" in result.output


def test_list_all(runner, players):
    result = runner.invoke(main, ["-l"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["vlc", "spotify"]


def test_first_player_only(runner, players):
    result = runner.invoke(main, ["status"])
    assert result.exit_code == 0
    assert result.output == "Paused\n"
    assert players.connected == ["vlc"]


def test_all_players(runner, players):
    result = runner.invoke(main, ["-a", "status"])
    assert result.exit_code == 0
    assert result.output == "Paused\nPlaying\n"


def test_player_option(runner, players):
    result = runner.invoke(main, ["-p", "spotify", "metadata", "title"])
    assert result.exit_code == 0
    assert result.output == "Time\n"


def test_ignore_player(runner, players):
    result = runner.invoke(main, ["-a", "-i", "vlc", "status"])
    assert result.exit_code == 0
    assert result.output == "Playing\n"


def test_format_option(runner, players):
    result = runner.invoke(
        main, ["--format", "{{ uc(artist) }} - {{ title }}", "metadata"]
    )
    assert result.exit_code == 0
    assert result.output == "PINK FLOYD - Dogs\n"


def test_format_error(runner, players):
    result = runner.invoke(main, ["-f", "{{ artist", "metadata"])
    assert result.exit_code == 1
    assert "Could not execute command: [format error] unmatched opener" in result.output


def test_format_on_control_command(runner, players):
    result = runner.invoke(main, ["-f", "{{ status }}", "play"])
    assert result.exit_code == 1
    assert "format strings are not supported on command functions." in result.output
    assert players.players["vlc"].calls == []


def test_unknown_command(runner, players):
    result = runner.invoke(main, ["rewind"])
    assert result.exit_code == 1
    assert "Command not recognized: rewind" in result.output


def test_unmatched_player(runner, players):
    result = runner.invoke(main, ["-p", "mpd", "play"])
    assert result.exit_code == 0
    assert "No players were found" in result.output


def test_settings_default_player(runner, players):
    with patch("pctl.pctl.appsettings.player", "spotify"):
        result = runner.invoke(main, ["status"])
    assert result.output == "Playing\n"


def test_invalid_args(runner):
    result = runner.invoke(main, ["--invalid"])
    assert result.exit_code != 0
    assert "Error" in result.output


@pytest.mark.asyncio
async def test_skips_player_that_cannot_handle(make_player, make_manager):
    idle = make_player("idle", can_play=False)
    busy = make_player("busy")
    manager_register(make_manager(idle, busy))

    code = await async_main(CLIOptions(command=("play",)))
    assert code == 0
    assert idle.calls == []
    assert busy.calls == [("play",)]


@pytest.mark.asyncio
async def test_connection_failure(make_player, make_manager):
    output = io.StringIO()
    manager_register(make_manager(make_player("vlc"), unreachable=("vlc",)))

    with patch("pctl.pctl.console_err", Console(file=output, width=200)):
        code = await async_main(CLIOptions(command=("play",)))

    assert code == 1
    assert "Connection to player failed: vlc is not responding" in output.getvalue()


@pytest.mark.asyncio
async def test_no_players(make_manager):
    output = io.StringIO()
    manager_register(make_manager())

    with patch("pctl.pctl.console_err", Console(file=output, width=200)):
        code = await async_main(CLIOptions(command=("status",)))

    assert code == 0
    assert "No players were found" in output.getvalue()
