"""
Command routing and dispatch for pctl.

This module implements a centralized registry for the player commands:
- Registration of command handlers by name
- Dispatch of a command line (name + arguments) to its handler
- A single error type for user-facing command failures

Example flow:
    pctl volume 0.1+   -> routes to the volume handler with args ["0.1+"]
    pctl -f '{{ status }}' status -> routes to the status handler

A handler returns True when the player handled the command, which stops
the main loop unless every player was selected.
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Optional
from pctl.lib.log import LOG
from pctl.models.dataModel import MediaPlayer

CommandHandler = Callable[[MediaPlayer, Sequence[str], Optional[str]], Awaitable[bool]]


class CommandError(Exception):
    """A command could not be carried out on a player."""


class Router:
    def __init__(self) -> None:
        """Initialize empty command registry."""
        self._routes: dict[str, CommandHandler] = {}

    def register(self, command: str, handler: CommandHandler) -> None:
        """Register handler for a command name.

        Args:
            command: Command name as typed on the command line
            handler: Coroutine function taking (player, args, format)

        Raises:
            ValueError: If the command is already registered
        """
        if command in self._routes:
            raise ValueError(f"Handler already registered for {command}")
        self._routes[command] = handler

    def command(self, name: str) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator form of register()."""

        def decorator(handler: CommandHandler) -> CommandHandler:
            self.register(name, handler)
            return handler

        return decorator

    @property
    def commands(self) -> list[str]:
        return list(self._routes)

    async def dispatch(
        self,
        player: MediaPlayer,
        command: Sequence[str],
        format: Optional[str] = None,
    ) -> bool:
        """Dispatch a command line to the appropriate handler.

        Args:
            player: Connected player to act on
            command: Command name followed by its arguments
            format: Optional format string for printing

        Returns:
            Whether the player handled the command

        Raises:
            CommandError: If the command is unknown or the handler fails
        """
        if not command:
            return False

        name: str = command[0]
        if name not in self._routes:
            raise CommandError(f"Command not recognized: {name}")

        LOG(f"Dispatching '{name}' to {player.name}")
        return await self._routes[name](player, command[1:], format)


router: Router = Router()
