"""Command dispatch pipeline.

parse -> resolve -> permissions -> parameters -> handler -> report

Each stage raises a ``CommandError`` subclass on failure; the single
try block in ``dispatch`` turns it into a private reply so one bad
command never stops the room.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Sequence

from haxfootball.commands.context import CommandContext
from haxfootball.commands.definitions import (
    CommandDefinition,
    CommandInvocation,
    ParamSpec,
    ParamType,
    describe_param,
)
from haxfootball.commands.parser import parse_command
from haxfootball.commands.registry import CommandRegistry
from haxfootball.core.errors import (
    CommandError,
    CommandPermissionError,
    InvariantViolation,
    NotACommandError,
    ParamValidationError,
    PreconditionError,
    UnknownCommandError,
)
from haxfootball.events import CommandExecutedEvent, CommandRejectedEvent

if TYPE_CHECKING:
    from haxfootball.core.models.player import Player
    from haxfootball.game.session import RoomSession

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
GENERIC_FAILURE = "Something went wrong running that command, please try again"


class CommandDispatcher:
    """Turns chat lines from one room into command handler calls."""

    def __init__(self, session: RoomSession, registry: CommandRegistry) -> None:
        self.session = session
        self.registry = registry

    @property
    def prefix(self) -> str:
        return self.session.config.command_prefix

    def dispatch(self, author: Player, text: str) -> bool:
        """
        Run a chat line as a command.

        Returns:
            False for ordinary chat, True when the line was treated as a
            command (whether it succeeded or was rejected)
        """
        try:
            name, tokens = parse_command(text, self.prefix)
        except NotACommandError:
            return False

        try:
            definition = self.resolve(name)
            self.check_permissions(definition, author)
            params = self.validate_params(definition, tokens)
            invocation = CommandInvocation(author=author, raw_name=name, params=params)
            definition.handler(
                CommandContext(
                    invocation=invocation,
                    definition=definition,
                    session=self.session,
                    registry=self.registry,
                )
            )
        except CommandError as e:
            self._reject(author, name, e.message, e)
        except InvariantViolation as e:
            logger.error(f"Invariant violated while running {name} for {author}: {e}")
            self._reject(author, name, GENERIC_FAILURE, e)
        except Exception as e:
            logger.exception(f"Command {name} crashed for {author}")
            self._reject(author, name, GENERIC_FAILURE, e)
        else:
            logger.debug(f"{author} ran {definition.name} {list(params)}")
            self.session.bus.emit(
                CommandExecutedEvent(command=definition.name, player_id=author.id, params=params)
            )
        return True

    # -------------------------------------------------------------------------
    # Pipeline stages
    # -------------------------------------------------------------------------

    def resolve(self, name: str) -> CommandDefinition:
        definition = self.registry.get(name)
        if definition is None:
            raise UnknownCommandError(name)
        return definition

    def check_permissions(self, definition: CommandDefinition, author: Player) -> None:
        permissions = definition.permissions

        if author.admin_level < permissions.min_admin_level:
            raise CommandPermissionError("You do not have permission to use this command")

        if author.muted and not permissions.allowed_while_muted:
            raise CommandPermissionError("You cannot use this command while muted")

        if permissions.requires_active_game and not self.session.has_active_game:
            raise PreconditionError("There is no game in progress")

        game = self.session.game
        if permissions.forbidden_during_active_play and game is not None and game.active_play is not None:
            raise PreconditionError("You cannot use this command during a play")

    def validate_params(self, definition: CommandDefinition, tokens: Sequence[str]) -> tuple[str, ...]:
        schema = definition.params
        tokens = list(tokens)

        if schema.skip_max_check and schema.max > 0 and len(tokens) > schema.max:
            keep = schema.max - 1
            tokens = tokens[:keep] + [" ".join(tokens[keep:])]

        usage = definition.usage_string(self.prefix)
        if len(tokens) < schema.min:
            raise ParamValidationError(f"Not enough parameters. Usage: {usage}")
        if len(tokens) > schema.max:
            raise ParamValidationError(f"Too many parameters. Usage: {usage}")

        return tuple(
            self._check_param(position, token, schema.type_at(position - 1))
            for position, token in enumerate(tokens, start=1)
        )

    @staticmethod
    def _check_param(position: int, token: str, expected: ParamSpec) -> str:
        if isinstance(expected, tuple):
            value = token.lower()
            if value not in expected:
                raise ParamValidationError(
                    f"Parameter {position} must be {describe_param(expected)}",
                    position=position,
                    expected=describe_param(expected),
                )
            return value

        if expected == ParamType.NUMBER and not INTEGER_PATTERN.match(token):
            raise ParamValidationError(
                f"Parameter {position} must be a {ParamType.NUMBER.value}",
                position=position,
                expected=ParamType.NUMBER.value,
            )
        return token

    # -------------------------------------------------------------------------

    def _reject(self, author: Player, name: str, message: str, error: Exception) -> None:
        if isinstance(error, CommandPermissionError):
            logger.warning(f"{author} denied {name}: {message}")
        else:
            logger.debug(f"{author} failed {name}: {message}")
        self.session.chat.reply(author, message)
        self.session.bus.emit(
            CommandRejectedEvent(
                command=name,
                player_id=author.id,
                reason=message,
                error_type=type(error).__name__,
            )
        )
