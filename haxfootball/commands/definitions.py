"""Command schema records.

A command is plain data plus a handler reference. The dispatcher reads
the permission and parameter schema; only the handler knows business
rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from haxfootball.commands.context import CommandContext
    from haxfootball.core.models.player import Player


class ParamType(Enum):
    """Free-form parameter kinds."""

    PLAYER = "Player name or ID"
    NUMBER = "Number"
    CUSTOM = "Custom"


# A parameter is either a free-form kind or a fixed set of literal tokens
ParamSpec = Union[ParamType, tuple[str, ...]]

CommandHandler = Callable[["CommandContext"], None]


def describe_param(spec: ParamSpec) -> str:
    if isinstance(spec, ParamType):
        return spec.value
    return "one of: " + ", ".join(spec)


@dataclass(frozen=True)
class CommandPermissions:
    """Who may run a command, and when."""

    min_admin_level: int = 0
    allowed_while_muted: bool = True
    requires_active_game: bool = False
    forbidden_during_active_play: bool = False


@dataclass(frozen=True)
class CommandParams:
    """
    Positional parameter schema.

    With ``skip_max_check`` extra trailing tokens are folded into the
    last parameter instead of being rejected, so player names with
    spaces still work.
    """

    min: int = 0
    max: int = 0
    types: tuple[ParamSpec, ...] = ()
    skip_max_check: bool = False

    def type_at(self, index: int) -> ParamSpec:
        if index < len(self.types):
            return self.types[index]
        return self.types[-1] if self.types else ParamType.CUSTOM


@dataclass(frozen=True)
class CommandDefinition:
    """Immutable description of one chat command."""

    name: str
    handler: CommandHandler
    description: str
    aliases: frozenset[str] = field(default_factory=frozenset)
    usage: tuple[str, ...] = ()
    show_command: bool = True
    permissions: CommandPermissions = field(default_factory=CommandPermissions)
    params: CommandParams = field(default_factory=CommandParams)

    def is_accessible_to(self, player: Player) -> bool:
        return player.admin_level >= self.permissions.min_admin_level

    def usage_string(self, prefix: str) -> str:
        if not self.usage:
            return f"{prefix}{self.name}"
        return ", ".join(f"{prefix}{usage}" for usage in self.usage)

    def help_string(self, prefix: str) -> str:
        aliases = f" [{', '.join(sorted(self.aliases))}]" if self.aliases else ""
        return f"{self.name}{aliases}: {self.description} | {self.usage_string(prefix)}"


@dataclass(frozen=True)
class CommandInvocation:
    """One parsed command message. Lives for a single dispatch."""

    author: Player
    raw_name: str
    params: tuple[str, ...] = ()
