"""Event system for room sessions."""

from haxfootball.events.bus import EventBus
from haxfootball.events.types import (
    CommandExecutedEvent,
    CommandRejectedEvent,
    GameEndedEvent,
    GameStartedEvent,
    PlayEndedEvent,
    PlayStartedEvent,
    PossessionChangedEvent,
    RoomEvent,
    ScoreChangedEvent,
)

__all__ = [
    "CommandExecutedEvent",
    "CommandRejectedEvent",
    "EventBus",
    "GameEndedEvent",
    "GameStartedEvent",
    "PlayEndedEvent",
    "PlayStartedEvent",
    "PossessionChangedEvent",
    "RoomEvent",
    "ScoreChangedEvent",
]
