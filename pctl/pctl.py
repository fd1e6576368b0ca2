"""
pctl Main Module.

Command-line controller for media players. A player transport (for
example an MPRIS client) registers a PlayerManager with
pctl.lib.players.manager_register(); this module then selects players,
dispatches the requested command to them, and prints results.

Features:
- Player selection by name, instance, or all players, with an ignore list
- Playback, position, volume, status, and metadata commands
- Format strings for printing properties and metadata
- Defaults from PCTL_ environment variables or the user config file

Examples:
    Print artist and title of the first available player:
        $ pctl metadata --format '{{ artist }} - {{ title }}'

    Pause every player except the browser:
        $ pctl --all-players --ignore-player firefox pause

    Seek backward 10 seconds in vlc:
        $ pctl -p vlc position 10-

Note:
    Exit status is 0 on success or when no players are found, and 1 when
    a player cannot be reached or a command fails.
"""

import asyncio
import signal
import sys
from types import FrameType
from typing import Final, Optional
import click
from pctl.commands.base import RichCommand, rich_help
from pctl.commands.player import COMMAND_HELP
from pctl.config.settings import appsettings, console, console_err
from pctl.lib.log import LOG
from pctl.lib.players import (
    manager_get,
    playerList_parse,
    players_select,
)
from pctl.lib.router import router
from pctl.models.dataModel import CLIOptions, MediaPlayer, PlayerManager

__version__: Final[str] = "0.1.0"

NO_PLAYERS: Final[str] = "No players were found"


def error_print(message: str) -> None:
    console_err.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)


async def players_listAll(manager: PlayerManager) -> int:
    """Print the names of all available players.

    Args:
        manager: Registered player manager

    Returns:
        Process exit code
    """
    try:
        names: list[str] = await manager.players_list()
    except Exception as e:
        LOG(f"Listing players failed: {e}")
        error_print(str(e))
        return 1

    if not names:
        error_print(NO_PLAYERS)
        return 0

    for name in names:
        console.print(name, markup=False, highlight=False, soft_wrap=True)
    return 0


async def async_main(options: CLIOptions) -> int:
    """Run the requested command on the selected players.

    Args:
        options: Parsed command-line options

    Returns:
        Process exit code

    Note:
        Players are tried in selection order. The first player that
        handles the command ends the run unless all_players is set.
    """
    if options.version:
        console.print(f"v{__version__}", markup=False, highlight=False)
        return 0

    if not options.command and not options.list_all:
        error_print("No command entered")
        return 0

    manager: PlayerManager | None = manager_get()
    if manager is None:
        error_print("No player transport is available")
        return 1

    if options.list_all:
        return await players_listAll(manager)

    try:
        available: list[str] = await manager.players_list()
    except Exception as e:
        LOG(f"Listing players failed: {e}")
        error_print(str(e))
        return 1

    if not available:
        error_print(NO_PLAYERS)
        return 0

    requested: list[str] = playerList_parse(options.player) or available
    selected: list[str] = players_select(
        requested, available, playerList_parse(options.ignore_player)
    )
    if not selected:
        error_print(NO_PLAYERS)
        return 0

    for name in selected:
        try:
            player: MediaPlayer = await manager.player_connect(name)
        except Exception as e:
            LOG(f"Connection to {name} failed: {e}")
            error_print(f"Connection to player failed: {e}")
            return 1

        try:
            handled: bool = await router.dispatch(
                player, options.command, options.format
            )
        except Exception as e:
            LOG(f"Command {options.command[0]} failed on {name}: {e}")
            error_print(f"Could not execute command: {e}")
            return 1

        if handled and not options.all_players:
            break

    return 0


def signal_handle(sig: int, frame: Optional[FrameType]) -> None:
    """Signal handler for graceful interruption.

    Args:
        sig: Signal number
        frame: Current stack frame
    """
    console_err.print("[bold red]Interrupt received.[/bold red]")
    sys.exit(130)


@click.command(
    cls=RichCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=rich_help(
        description="Controller for media players",
        usage="pctl [OPTIONS] COMMAND [ARGS]...",
        args=COMMAND_HELP,
        heading="Available Commands",
    ),
)
@click.option(
    "-p",
    "--player",
    type=str,
    default=None,
    metavar="NAME",
    help="A comma separated list of names of players to control (default: the first available player)",
)
@click.option(
    "-a",
    "--all-players",
    is_flag=True,
    help="Select all available players to be controlled",
)
@click.option(
    "-i",
    "--ignore-player",
    type=str,
    default=None,
    metavar="IGNORE",
    help="A comma separated list of names of players to ignore",
)
@click.option(
    "-f",
    "--format",
    "format_string",
    type=str,
    default=None,
    help="A format string for printing properties and metadata",
)
@click.option(
    "-l",
    "--list-all",
    is_flag=True,
    help="List the names of running players that can be controlled",
)
@click.option("-v", "--version", is_flag=True, help="Print version information")
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
def main(
    player: Optional[str],
    all_players: bool,
    ignore_player: Optional[str],
    format_string: Optional[str],
    list_all: bool,
    version: bool,
    command: tuple[str, ...],
) -> None:
    """Main entry point for pctl.

    Note:
        Options left unset fall back to the PCTL_ settings.
    """
    signal.signal(signal.SIGINT, signal_handle)

    options: CLIOptions = CLIOptions(
        player=player if player is not None else appsettings.player,
        all_players=all_players,
        ignore_player=(
            ignore_player if ignore_player is not None else appsettings.ignore_player
        ),
        format=format_string,
        list_all=list_all,
        version=version,
        command=command,
    )
    LOG(f"Options: {options}")

    sys.exit(asyncio.run(async_main(options)))


if __name__ == "__main__":
    main()
