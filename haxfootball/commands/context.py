"""Per-dispatch context handed to command handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from haxfootball.commands.definitions import CommandDefinition, CommandInvocation
from haxfootball.core.errors import PreconditionError

if TYPE_CHECKING:
    from haxfootball.commands.registry import CommandRegistry
    from haxfootball.core.models.player import Player
    from haxfootball.game.session import RoomSession
    from haxfootball.game.state import GameState


@dataclass
class CommandContext:
    """
    Everything a handler may touch while running one command.

    ``params`` are the validated tokens: enumerated parameters are
    lower-cased, extra tokens already folded for ``skip_max_check``.
    """

    invocation: CommandInvocation
    definition: CommandDefinition
    session: RoomSession
    registry: CommandRegistry

    @property
    def author(self) -> Player:
        return self.invocation.author

    @property
    def params(self) -> tuple[str, ...]:
        return self.invocation.params

    @property
    def params_str(self) -> str:
        return " ".join(self.params)

    def has_no_params(self) -> bool:
        return len(self.params) == 0

    @property
    def game(self) -> GameState:
        game = self.session.game
        if game is None or game.is_over:
            raise PreconditionError("There is no game in progress")
        return game

    @property
    def prefix(self) -> str:
        return self.session.config.command_prefix

    def reply(self, message: str, auto_size: bool = True) -> None:
        self.session.chat.reply(self.author, message, auto_size=auto_size)

    def reply_success(self, message: str) -> None:
        self.reply(f"Success: {message}")

    def announce(self, message: str) -> None:
        self.session.chat.announce(message)
