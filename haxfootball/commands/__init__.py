"""Chat command registry and dispatch."""

from haxfootball.commands.context import CommandContext
from haxfootball.commands.definitions import (
    CommandDefinition,
    CommandInvocation,
    CommandParams,
    CommandPermissions,
    ParamType,
)
from haxfootball.commands.dispatcher import CommandDispatcher
from haxfootball.commands.parser import parse_command
from haxfootball.commands.registry import COMMANDS, CommandRegistry

__all__ = [
    "COMMANDS",
    "CommandContext",
    "CommandDefinition",
    "CommandDispatcher",
    "CommandInvocation",
    "CommandParams",
    "CommandPermissions",
    "CommandRegistry",
    "ParamType",
    "parse_command",
]
