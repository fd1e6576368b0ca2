"""
dataModel.py

This module defines the data models and protocols used throughout pctl.
The models leverage Pydantic for validation and immutability.

Features:
- Template tokens as frozen value objects
- Template context value types
- Parsing results
- Command-line options
- Player transport protocols (implemented outside this package)

Usage:
Import these models to validate and structure data used in the application.
"""

from collections.abc import Mapping
from typing import Optional, Protocol, Union
from pydantic import BaseModel, ConfigDict, Field


ContextValue = Union[str, list[str], int, float]
Context = Mapping[str, ContextValue]


class LiteralToken(BaseModel):
    """Verbatim output text.

    Attributes:
        text: Text copied to the output unchanged
    """

    model_config = ConfigDict(frozen=True)

    text: str


class VariableToken(BaseModel):
    """A context lookup.

    Attributes:
        name: Context key, already trimmed of surrounding whitespace
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)


class CallToken(BaseModel):
    """A helper invocation with exactly one variable argument.

    Attributes:
        function: Helper name to look up in the registry
        argument: Variable whose value is passed to the helper
    """

    model_config = ConfigDict(frozen=True)

    function: str = Field(..., min_length=1)
    argument: VariableToken


Token = Union[LiteralToken, VariableToken, CallToken]


class ParseResult(BaseModel):
    """Result of a format expansion.

    Attributes:
        text: The rendered text
        error: Optional error message if parsing or rendering failed
        success: Whether expansion succeeded
    """

    text: str
    error: str | None
    success: bool


class CLIOptions(BaseModel):
    """Parsed command-line options.

    Attributes:
        player: Comma separated player names to control
        all_players: Run the command on every selected player
        ignore_player: Comma separated player names to skip
        format: Format string for printing properties and metadata
        list_all: List available players and exit
        version: Print the version and exit
        command: The command name followed by its arguments
    """

    player: Optional[str] = None
    all_players: bool = False
    ignore_player: Optional[str] = None
    format: Optional[str] = None
    list_all: bool = False
    version: bool = False
    command: tuple[str, ...] = ()


class MediaPlayer(Protocol):
    """Protocol for a connected media player.

    Implemented by the transport layer (e.g. an MPRIS client). Positions
    and offsets are in microseconds, volume is a float from 0.0 to 1.0.
    """

    name: str
    can_play: bool
    can_pause: bool
    can_go_next: bool
    can_go_previous: bool
    can_seek: bool
    can_control: bool

    async def status(self) -> str | None: ...

    async def metadata(self) -> Optional[dict[str, ContextValue]]: ...

    async def position(self) -> int: ...

    async def volume(self) -> float: ...

    async def play(self) -> None: ...

    async def pause(self) -> None: ...

    async def play_pause(self) -> None: ...

    async def stop(self) -> None: ...

    async def next(self) -> None: ...

    async def previous(self) -> None: ...

    async def open(self, uri: str) -> None: ...

    async def seek(self, offset: int) -> None: ...

    async def set_position(self, position: int) -> None: ...

    async def set_volume(self, level: float) -> None: ...


class PlayerManager(Protocol):
    """Protocol for player discovery and connection.

    Handlers must implement:
        players_list(): Names of the players currently available
        player_connect(): Open a connection to one of them

    Note:
        Raise any exception from player_connect to report a failed connection
    """

    async def players_list(self) -> list[str]:
        """Return the names of the available players, in discovery order."""
        ...

    async def player_connect(self, name: str) -> MediaPlayer:
        """Connect to the named player."""
        ...
