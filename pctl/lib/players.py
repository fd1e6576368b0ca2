"""
Player selection for pctl.

Resolves the players a command should run on from:
- the names reported by the registered PlayerManager
- a comma separated list of requested players (default: all)
- a comma separated list of ignored players

A requested name matches an available player exactly, or any of its
instances: "vlc" matches "vlc" and "vlc.instance1234".

The transport that discovers and controls players lives outside this
package; a host registers one with manager_register() before running
the CLI.
"""

from typing import Optional
from pctl.lib.log import LOG
from pctl.models.dataModel import PlayerManager

INSTANCE_SUFFIX: str = ".instance"

player_manager: PlayerManager | None = None


def manager_register(manager: PlayerManager | None) -> None:
    """Set the PlayerManager used by the CLI. Pass None to unregister."""
    global player_manager
    player_manager = manager


def manager_get() -> PlayerManager | None:
    return player_manager


def playerList_parse(player_list: Optional[str]) -> list[str]:
    """Split a comma separated list of player names.

    Args:
        player_list: Raw option value, e.g. "vlc, spotify"

    Returns:
        Stripped, non-empty names in the given order
    """
    if not player_list:
        return []
    return [name.strip() for name in player_list.split(",") if name.strip()]


def playerName_match(name: str, instance: str) -> bool:
    """Check whether a player name refers to an available instance."""
    if name == instance:
        return True
    return instance.startswith(name) and instance[len(name) :].startswith(
        INSTANCE_SUFFIX
    )


def players_select(
    requested: list[str], available: list[str], ignored: list[str]
) -> list[str]:
    """Pick the available players to control, in request order.

    Args:
        requested: Requested names; each may match several instances
        available: Names reported by the player manager
        ignored: Names whose matching instances are skipped

    Returns:
        Matching, non-ignored available players without duplicates
    """
    selected: list[str] = []
    for name in requested:
        for instance in available:
            if not playerName_match(name, instance):
                continue
            if any(playerName_match(skip, instance) for skip in ignored):
                continue
            if instance not in selected:
                selected.append(instance)

    LOG(f"Selected players: {', '.join(selected) or 'none'}")
    return selected
