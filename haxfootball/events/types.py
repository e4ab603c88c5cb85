"""Event types emitted by a room session."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from haxfootball.core.enums import DownOutcome, PlayType, TeamId

if TYPE_CHECKING:
    from haxfootball.core.models.play import PlayResult


@dataclass
class RoomEvent:
    """Base class for all room events."""

    timestamp: datetime = field(default_factory=datetime.now)
    game_id: Optional[UUID] = None

    # Game context at time of event
    clock: str = "00:00"
    red_score: int = 0
    blue_score: int = 0


@dataclass
class GameStartedEvent(RoomEvent):
    """Fired when a new game is created."""


@dataclass
class GameEndedEvent(RoomEvent):
    """Fired when a game reaches its terminal phase."""

    winner: Optional[TeamId] = None  # None if tied


@dataclass
class ScoreChangedEvent(RoomEvent):
    """Fired on every score change."""

    team: TeamId = TeamId.RED
    points: int = 0  # Delta for live scoring, new total for corrections
    is_correction: bool = False


@dataclass
class PossessionChangedEvent(RoomEvent):
    """Fired when offense and defense swap."""

    offense: TeamId = TeamId.RED
    reason: str = ""  # "command", "touchdown", "kick", "turnover", "downs"


@dataclass
class PlayStartedEvent(RoomEvent):
    """Fired once a play is running."""

    play_type: PlayType = PlayType.KICKOFF
    offense: TeamId = TeamId.RED
    triggered_by: Optional[int] = None  # Player id, None for automatic kickoffs


@dataclass
class PlayEndedEvent(RoomEvent):
    """Fired after a play has been cleaned up."""

    play_type: PlayType = PlayType.KICKOFF
    result: Optional["PlayResult"] = None  # None when ended without an outcome
    outcome: Optional[DownOutcome] = None
    down_and_distance: str = ""


@dataclass
class CommandExecutedEvent(RoomEvent):
    """Fired when a command handler completed."""

    command: str = ""
    player_id: int = 0
    params: tuple[str, ...] = ()


@dataclass
class CommandRejectedEvent(RoomEvent):
    """Fired when a command failed validation or its handler refused it."""

    command: str = ""
    player_id: int = 0
    reason: str = ""
    error_type: str = ""
