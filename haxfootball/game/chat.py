"""Outbound chat sinks.

Message formatting and icons are the room front-end's concern; a sink
only needs to deliver a private reply or a room-wide announcement.
"""

from dataclasses import dataclass, field
from typing import Optional, Protocol

from haxfootball.core.models.player import Player


class ChatSink(Protocol):
    """Destination for text produced by the rules engine."""

    def reply(self, player: Player, message: str, auto_size: bool = True) -> None:
        """Send a message visible only to ``player``."""
        ...

    def announce(self, message: str) -> None:
        """Broadcast a message to the whole room."""
        ...


@dataclass
class ChatLine:
    """One delivered message."""

    message: str
    target_id: Optional[int] = None  # None for announcements
    auto_size: bool = True

    @property
    def is_private(self) -> bool:
        return self.target_id is not None


@dataclass
class BufferedChat:
    """Sink that keeps every message in memory."""

    lines: list[ChatLine] = field(default_factory=list)

    def reply(self, player: Player, message: str, auto_size: bool = True) -> None:
        self.lines.append(ChatLine(message=message, target_id=player.id, auto_size=auto_size))

    def announce(self, message: str) -> None:
        self.lines.append(ChatLine(message=message))

    @property
    def announcements(self) -> list[str]:
        return [line.message for line in self.lines if not line.is_private]

    def replies_to(self, player: Player) -> list[str]:
        return [line.message for line in self.lines if line.target_id == player.id]

    def clear(self) -> None:
        self.lines.clear()
