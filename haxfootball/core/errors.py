"""Domain errors raised by the rules engine and the command pipeline.

Every ``CommandError`` carries a message that is safe to show to the
player who issued the command. ``InvariantViolation`` marks an impossible
internal state and is never shown verbatim.
"""

from typing import Optional


class HaxFootballError(Exception):
    """Base class for all room errors."""


class CommandError(HaxFootballError):
    """A command failed with a user-facing reason."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotACommandError(CommandError):
    """Chat text that is not a command. Ignored by the dispatcher."""

    def __init__(self, message: str = "Not a command") -> None:
        super().__init__(message)


class UnknownCommandError(CommandError):
    """No command is registered under the given name or alias."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Command ({name}) does not exist")
        self.name = name


class CommandPermissionError(CommandError):
    """The author lacks the admin level or is muted."""


class PreconditionError(CommandError):
    """The command cannot run in the current game phase."""


class ParamValidationError(CommandError):
    """A command parameter is missing, extra, or of the wrong type."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        expected: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.expected = expected


class PlayValidationError(CommandError):
    """A play failed its pre-snap checks."""


class SnapCooldownError(CommandError):
    """A play was started inside the post-play cooldown window."""

    def __init__(self, remaining_seconds: float = 0.0) -> None:
        super().__init__("Please wait a moment before starting the next play, try again shortly")
        self.remaining_seconds = remaining_seconds


class InvariantViolation(HaxFootballError):
    """Internal state that should be impossible, such as a corrupted offense id."""
