"""Process-wide command table.

Built once at import time and read-only afterwards. Adding a command
means adding one record here; the dispatcher never changes.
"""

from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from haxfootball.commands import handlers
from haxfootball.commands.definitions import (
    CommandDefinition,
    CommandParams,
    CommandPermissions,
    ParamType,
)
from haxfootball.core.enums import TEAM_TOKENS
from haxfootball.core.models.player import Player


class CommandRegistry:
    """
    Lookup of command definitions by name and by alias.

    Both paths return the same record. Names and aliases are assumed
    unique; that is checked by the test suite, not at runtime.
    """

    def __init__(self, definitions: Iterable[CommandDefinition]) -> None:
        by_name = {definition.name: definition for definition in definitions}
        by_alias = {
            alias: definition.name
            for definition in by_name.values()
            for alias in definition.aliases
        }
        self._by_name = MappingProxyType(by_name)
        self._by_alias = MappingProxyType(by_alias)

    def get(self, name: str) -> Optional[CommandDefinition]:
        """Resolve a lower-cased name, then alias."""
        definition = self._by_name.get(name)
        if definition is not None:
            return definition
        canonical = self._by_alias.get(name)
        if canonical is None:
            return None
        return self._by_name[canonical]

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    @property
    def names(self) -> list[str]:
        return list(self._by_name)

    @property
    def aliases(self) -> dict[str, str]:
        return dict(self._by_alias)

    def accessible_to(self, player: Player) -> list[CommandDefinition]:
        return [definition for definition in self if definition.is_accessible_to(player)]


# Permission presets
EVERYONE = CommandPermissions()
EVERYONE_UNMUTED = CommandPermissions(allowed_while_muted=False)
EVERYONE_IN_GAME = CommandPermissions(requires_active_game=True)
EVERYONE_BETWEEN_PLAYS = CommandPermissions(requires_active_game=True, forbidden_during_active_play=True)
SNAPPER = CommandPermissions(
    allowed_while_muted=False,
    requires_active_game=True,
    forbidden_during_active_play=True,
)
ADMIN_UNMUTED = CommandPermissions(min_admin_level=1, allowed_while_muted=False)
ADMIN_IN_GAME = CommandPermissions(min_admin_level=1, requires_active_game=True)
ADMIN_BETWEEN_PLAYS = CommandPermissions(
    min_admin_level=1,
    requires_active_game=True,
    forbidden_during_active_play=True,
)

TEAM_AND_NUMBER = CommandParams(min=2, max=2, types=(TEAM_TOKENS, ParamType.NUMBER))


COMMAND_DEFINITIONS: tuple[CommandDefinition, ...] = (
    CommandDefinition(
        name="help",
        handler=handlers.handle_help,
        description="Returns the list of room commands or returns the description of a given command",
        usage=("help [commandName]",),
        show_command=False,
        permissions=EVERYONE,
        params=CommandParams(min=0, max=1, types=(ParamType.CUSTOM,)),
    ),
    CommandDefinition(
        name="commands",
        handler=handlers.handle_commands,
        description="Returns the list of room commands",
        aliases=frozenset({"cmds"}),
        show_command=False,
        permissions=EVERYONE,
    ),
    CommandDefinition(
        name="info",
        handler=handlers.handle_info,
        description="Returns helpful command info",
        show_command=False,
        permissions=EVERYONE,
    ),
    CommandDefinition(
        name="stats",
        handler=handlers.handle_stats,
        description="Returns your stats or the stats of another player",
        usage=("stats", "stats tda"),
        show_command=False,
        permissions=ADMIN_IN_GAME,
        params=CommandParams(min=0, max=1, types=(ParamType.PLAYER,), skip_max_check=True),
    ),
    CommandDefinition(
        name="score",
        handler=handlers.handle_score,
        description="Returns the score of the current game",
        show_command=False,
        permissions=EVERYONE_IN_GAME,
    ),
    CommandDefinition(
        name="setscore",
        handler=handlers.handle_set_score,
        description="Sets the score for a team",
        aliases=frozenset({"sscore"}),
        usage=("setscore blue 7", "setscore r 10"),
        permissions=ADMIN_IN_GAME,
        params=TEAM_AND_NUMBER,
    ),
    CommandDefinition(
        name="setlos",
        handler=handlers.handle_set_los,
        description="Sets the line of scrimmage position",
        aliases=frozenset({"sl"}),
        usage=("setlos blue 7", "sl r 38"),
        permissions=ADMIN_BETWEEN_PLAYS,
        params=TEAM_AND_NUMBER,
    ),
    CommandDefinition(
        name="setplayers",
        handler=handlers.handle_set_players,
        description="Sets the players in front of the line of scrimmage",
        aliases=frozenset({"setp", "gfi"}),
        permissions=EVERYONE_BETWEEN_PLAYS,
    ),
    CommandDefinition(
        name="setdown",
        handler=handlers.handle_set_down,
        description="Sets the down and distance",
        aliases=frozenset({"sd"}),
        usage=("setdown 2 15", "sd 4"),
        permissions=ADMIN_BETWEEN_PLAYS,
        params=CommandParams(min=1, max=2, types=(ParamType.NUMBER, ParamType.NUMBER)),
    ),
    CommandDefinition(
        name="swap",
        handler=handlers.handle_swap,
        description="Swaps red and blue",
        permissions=CommandPermissions(forbidden_during_active_play=True),
    ),
    CommandDefinition(
        name="swapo",
        handler=handlers.handle_swap_offense,
        description="Swaps offense and defense",
        permissions=CommandPermissions(
            min_admin_level=1,
            allowed_while_muted=False,
            requires_active_game=True,
            forbidden_during_active_play=True,
        ),
    ),
    CommandDefinition(
        name="dd",
        handler=handlers.handle_down_and_distance,
        description="Shows the down and distance",
        permissions=EVERYONE_IN_GAME,
    ),
    CommandDefinition(
        name="release",
        handler=handlers.handle_release,
        description="Releases the ball",
        permissions=ADMIN_IN_GAME,
    ),
    CommandDefinition(
        name="reset",
        handler=handlers.handle_reset,
        description="Resets all variables and removes the current play",
        permissions=ADMIN_IN_GAME,
    ),
    CommandDefinition(
        name="flip",
        handler=handlers.handle_flip,
        description="Flips a coin",
        aliases=frozenset({"coinflip", "cointoss"}),
        permissions=EVERYONE_UNMUTED,
    ),
    CommandDefinition(
        name="status",
        handler=handlers.handle_status,
        description="Returns the status of the bot, either on or off",
        aliases=frozenset({"botstatus"}),
        permissions=EVERYONE_UNMUTED,
    ),
    CommandDefinition(
        name="bot",
        handler=handlers.handle_bot,
        description="Turns the bot on or off",
        usage=("bot on", "bot off"),
        permissions=ADMIN_UNMUTED,
        params=CommandParams(min=1, max=1, types=(("on", "off"),)),
    ),
    CommandDefinition(
        name="snap",
        handler=handlers.handle_snap,
        description="Snaps the ball to start a run or pass play",
        aliases=frozenset({"hike"}),
        usage=("snap", "snap run"),
        permissions=SNAPPER,
        params=CommandParams(min=0, max=1, types=(("run", "pass"),)),
    ),
    CommandDefinition(
        name="punt",
        handler=handlers.handle_punt,
        description="Starts a punt",
        permissions=SNAPPER,
    ),
    CommandDefinition(
        name="newgame",
        handler=handlers.handle_new_game,
        description="Starts a new game with an opening kickoff",
        permissions=CommandPermissions(min_admin_level=1, forbidden_during_active_play=True),
    ),
    CommandDefinition(
        name="endgame",
        handler=handlers.handle_end_game,
        description="Ends the current game",
        permissions=ADMIN_IN_GAME,
    ),
)


COMMANDS = CommandRegistry(COMMAND_DEFINITIONS)
