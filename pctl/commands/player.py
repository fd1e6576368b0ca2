"""
Player Commands

This module implements the commands pctl can run against a player and
the template contexts they expose to --format.

Commands:
- play, pause, play-pause, stop, next, previous: playback control
- open <uri>: open a file path or URI
- position [OFFSET][+/-]: print, set, or seek the position in seconds
- volume [LEVEL][+/-]: print, set, or adjust the volume (0.0 to 1.0)
- status: print the playback status
- metadata [KEY...]: print track metadata

Every handler takes (player, args, format) and returns True when the
player handled the command. Handlers register themselves with the
module-level router on import.
"""

import os
import re
from collections.abc import Mapping, Sequence
from typing import Final, Optional
from pctl.config.settings import console
from pctl.lib.router import CommandError, CommandHandler, router
from pctl.lib.template import format_expand, value_format
from pctl.models.dataModel import ContextValue, MediaPlayer, ParseResult

MICROSECONDS: Final[int] = 1_000_000

FORMAT_UNSUPPORTED: Final[str] = (
    "format strings are not supported on command functions."
)

# name -> (capability flag, player method)
CONTROL_COMMANDS: Final[dict[str, tuple[str, str]]] = {
    "play": ("can_play", "play"),
    "pause": ("can_pause", "pause"),
    "play-pause": ("can_play", "play_pause"),
    # there is no CanStop; CanPlay tells whether there is a current track
    "stop": ("can_play", "stop"),
    "next": ("can_go_next", "next"),
    "previous": ("can_go_previous", "previous"),
}

METADATA_ALIASES: Final[dict[str, str]] = {
    "artist": "xesam:artist",
    "album": "xesam:album",
    "title": "xesam:title",
}

COMMAND_HELP: Final[dict[str, str]] = {
    "play": "Command the player to play",
    "pause": "Command the player to pause",
    "play-pause": "Command the player to toggle between play/pause",
    "stop": "Command the player to stop",
    "next": "Command the player to skip to the next track",
    "previous": "Command the player to skip to the previous track",
    "position [OFFSET][+/-]": "Go to the position or seek forward/backward OFFSET in seconds",
    "volume [LEVEL][+/-]": "Print or set the volume to LEVEL from 0.0 to 1.0",
    "status": "Get the play status of the player",
    "metadata [KEY...]": "Print metadata for the current track; KEY may be artist, title, album, or any metadata key",
    "open [URI]": "Open the given URI; it can be a file path or a remote URL",
}

_URI_SCHEME: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


def status_context(status: str | None) -> dict[str, ContextValue]:
    if status is None:
        return {}
    return {"status": status}


def position_context(position: int) -> dict[str, ContextValue]:
    return {"position": position}


def volume_context(level: float) -> dict[str, ContextValue]:
    return {"volume": level}


def metadata_context(metadata: Mapping[str, ContextValue]) -> dict[str, ContextValue]:
    """Copy player metadata and add the artist/album/title aliases.

    An alias is taken from its xesam: key only when the metadata does not
    already carry the alias and does carry the xesam: key.
    """
    context: dict[str, ContextValue] = dict(metadata)
    for alias, source in METADATA_ALIASES.items():
        if alias not in context and source in context:
            context[alias] = context[source]
    return context


def uri_resolve(location: str) -> str:
    """Turn a command line argument into a URI; plain paths become file:// URIs."""
    if _URI_SCHEME.match(location):
        return location
    return f"file://{os.path.abspath(location)}"


def number_parse(text: str, what: str) -> tuple[float, Optional[str]]:
    """Parse NUMBER[+/-].

    Returns:
        The number and the trailing "+" or "-", or None for an absolute value

    Raises:
        CommandError: If the text is not a number
    """
    suffix: Optional[str] = text[-1] if text[-1:] in ("+", "-") else None
    digits: str = text[:-1] if suffix else text
    try:
        return float(digits), suffix
    except ValueError:
        raise CommandError(f"Could not parse {what} as a number: {text}")


def output_print(text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def format_print(format: str, context: Mapping[str, ContextValue]) -> None:
    """Render a format string against a context and print the result.

    Raises:
        CommandError: With the format error message if expansion fails
    """
    result: ParseResult = format_expand(format, context)
    if not result.success:
        raise CommandError(result.error)
    output_print(result.text)


def format_reject(format: Optional[str]) -> None:
    if format is not None:
        raise CommandError(FORMAT_UNSUPPORTED)


def control_handler(capability: str, action: str) -> CommandHandler:
    """Build a handler that calls a player method if the capability allows."""

    async def handler(
        player: MediaPlayer, args: Sequence[str], format: Optional[str]
    ) -> bool:
        format_reject(format)
        if not getattr(player, capability):
            return False
        await getattr(player, action)()
        return True

    handler.__name__ = f"player_{action}"
    return handler


for _name, (_capability, _action) in CONTROL_COMMANDS.items():
    router.register(_name, control_handler(_capability, _action))


@router.command("open")
async def player_open(
    player: MediaPlayer, args: Sequence[str], format: Optional[str]
) -> bool:
    format_reject(format)
    if args:
        await player.open(uri_resolve(args[0]))
    return True


@router.command("position")
async def player_position(
    player: MediaPlayer, args: Sequence[str], format: Optional[str]
) -> bool:
    """
    Print the position, or seek/set it when an OFFSET is given.

    OFFSET is in seconds. A trailing "+" or "-" seeks relative to the
    current position; otherwise the position is set absolutely.
    """
    if args:
        format_reject(format)
        seconds, suffix = number_parse(args[0], "position")
        offset: int = int(seconds * MICROSECONDS)

        if not player.can_seek:
            return False

        if suffix == "-":
            await player.seek(-offset)
        elif suffix == "+":
            await player.seek(offset)
        else:
            await player.set_position(offset)
        return True

    position: int = await player.position()
    if format is not None:
        format_print(format, position_context(position))
    else:
        output_print(f"{position / MICROSECONDS:f}")
    return True


@router.command("volume")
async def player_volume(
    player: MediaPlayer, args: Sequence[str], format: Optional[str]
) -> bool:
    """
    Print the volume, or set/adjust it when a LEVEL is given.

    A trailing "+" or "-" adjusts the current volume by LEVEL.
    """
    if args:
        format_reject(format)
        amount, suffix = number_parse(args[0], "volume")

        level: float = amount
        if suffix is not None:
            current: float = await player.volume()
            level = current - amount if suffix == "-" else current + amount

        if not player.can_control:
            return False

        await player.set_volume(level)
        return True

    level = await player.volume()
    if format is not None:
        format_print(format, volume_context(level))
    else:
        output_print(f"{level:f}")
    return True


@router.command("status")
async def player_status(
    player: MediaPlayer, args: Sequence[str], format: Optional[str]
) -> bool:
    status: str | None = await player.status()
    if format is not None:
        format_print(format, status_context(status))
    else:
        output_print(status or "Not available")
    return True


@router.command("metadata")
async def player_metadata(
    player: MediaPlayer, args: Sequence[str], format: Optional[str]
) -> bool:
    """
    Print metadata for the current track.

    Skipped (returns False) when the player has no current track. With a
    format string the metadata context is rendered; with KEY arguments
    each present key is printed on its own line; otherwise every key is
    printed with its value.
    """
    if not player.can_play:
        return False

    metadata: Optional[dict[str, ContextValue]] = await player.metadata()
    if metadata is None:
        raise CommandError("Could not get metadata for player")

    context: dict[str, ContextValue] = metadata_context(metadata)

    if format is not None:
        format_print(format, context)
    elif args:
        for key in args:
            if key in context:
                output_print(value_format(context[key]))
    else:
        for key, value in metadata.items():
            output_print(f"{key} {value_format(value)}")
    return True
