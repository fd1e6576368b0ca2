"""Shared fixtures: in-memory players standing in for the player transport."""

import io
from typing import Any, Optional
import pytest
from unittest.mock import patch
from rich.console import Console
from pctl.lib.players import manager_register


class FakePlayer:
    """MediaPlayer that records the calls made to it."""

    def __init__(
        self,
        name: str,
        status: Optional[str] = "Playing",
        metadata: Optional[dict[str, Any]] = None,
        position: int = 0,
        volume: float = 0.5,
        **capabilities: bool,
    ) -> None:
        self.name = name
        self._status = status
        self._metadata = metadata if metadata is not None else {}
        self._position = position
        self._volume = volume
        self.can_play = capabilities.get("can_play", True)
        self.can_pause = capabilities.get("can_pause", True)
        self.can_go_next = capabilities.get("can_go_next", True)
        self.can_go_previous = capabilities.get("can_go_previous", True)
        self.can_seek = capabilities.get("can_seek", True)
        self.can_control = capabilities.get("can_control", True)
        self.calls: list[tuple[Any, ...]] = []

    async def status(self) -> Optional[str]:
        return self._status

    async def metadata(self) -> Optional[dict[str, Any]]:
        return self._metadata

    async def position(self) -> int:
        return self._position

    async def volume(self) -> float:
        return self._volume

    async def play(self) -> None:
        self.calls.append(("play",))

    async def pause(self) -> None:
        self.calls.append(("pause",))

    async def play_pause(self) -> None:
        self.calls.append(("play_pause",))

    async def stop(self) -> None:
        self.calls.append(("stop",))

    async def next(self) -> None:
        self.calls.append(("next",))

    async def previous(self) -> None:
        self.calls.append(("previous",))

    async def open(self, uri: str) -> None:
        self.calls.append(("open", uri))

    async def seek(self, offset: int) -> None:
        self.calls.append(("seek", offset))

    async def set_position(self, position: int) -> None:
        self.calls.append(("set_position", position))

    async def set_volume(self, level: float) -> None:
        self.calls.append(("set_volume", level))


class FakeManager:
    """PlayerManager over a fixed set of FakePlayers."""

    def __init__(self, *players: FakePlayer, unreachable: tuple[str, ...] = ()) -> None:
        self.players = {player.name: player for player in players}
        self.unreachable = unreachable
        self.connected: list[str] = []

    async def players_list(self) -> list[str]:
        return list(self.players)

    async def player_connect(self, name: str) -> FakePlayer:
        if name in self.unreachable:
            raise RuntimeError(f"{name} is not responding")
        self.connected.append(name)
        return self.players[name]


@pytest.fixture
def captured_output() -> io.StringIO:
    """Capture player command output."""
    output = io.StringIO()
    console = Console(file=output, width=200)
    with patch("pctl.commands.player.console", console):
        yield output


@pytest.fixture(autouse=True)
def manager_reset():
    """Leave no transport registered between tests."""
    manager_register(None)
    yield
    manager_register(None)


@pytest.fixture
def make_player() -> type[FakePlayer]:
    return FakePlayer


@pytest.fixture
def make_manager() -> type[FakeManager]:
    return FakeManager
