"""In-memory room log accumulating what happened in a session."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from haxfootball.core.enums import TeamId
from haxfootball.events import (
    CommandExecutedEvent,
    CommandRejectedEvent,
    EventBus,
    GameEndedEvent,
    GameStartedEvent,
    PlayEndedEvent,
    PlayStartedEvent,
    PossessionChangedEvent,
    RoomEvent,
    ScoreChangedEvent,
)


@dataclass
class LogEntry:
    """Single entry in the room log."""

    timestamp: datetime
    clock: str
    event_type: str  # "GAME_START", "GAME_END", "PLAY_START", "PLAY", "SCORE", "POSSESSION", "COMMAND", "REJECTED"
    description: str
    red_score: int
    blue_score: int

    game_id: Optional[UUID] = None
    player_id: Optional[int] = None
    is_scoring_play: bool = False
    is_turnover: bool = False


@dataclass
class ScoringEntry:
    """Record of a score change."""

    clock: str
    team: TeamId
    points: int
    is_correction: bool
    red_score_after: int
    blue_score_after: int


class RoomLog:
    """
    In-memory accumulator for room events.

    Subscribes to the session's EventBus; every event it understands
    becomes a LogEntry. Score changes are additionally kept as
    ScoringEntry records.
    """

    def __init__(self) -> None:
        self.entries: list[LogEntry] = []
        self.scoring: list[ScoringEntry] = []

        self._handlers: dict[type, Callable[[RoomEvent], None]] = {
            GameStartedEvent: self._handle_game_started,
            GameEndedEvent: self._handle_game_ended,
            ScoreChangedEvent: self._handle_score_changed,
            PossessionChangedEvent: self._handle_possession_changed,
            PlayStartedEvent: self._handle_play_started,
            PlayEndedEvent: self._handle_play_ended,
            CommandExecutedEvent: self._handle_command_executed,
            CommandRejectedEvent: self._handle_command_rejected,
        }

    def connect_to_event_bus(self, event_bus: EventBus) -> None:
        """Subscribe to every event published on ``event_bus``."""
        event_bus.subscribe_all(self.record)

    def record(self, event: RoomEvent) -> None:
        handler = self._handlers.get(type(event))
        if handler is not None:
            handler(event)

    def add_entry(self, event: RoomEvent, event_type: str, description: str, **kwargs) -> None:
        """Add a log entry carrying the event's game context."""
        self.entries.append(
            LogEntry(
                timestamp=event.timestamp,
                clock=event.clock,
                event_type=event_type,
                description=description,
                red_score=event.red_score,
                blue_score=event.blue_score,
                game_id=event.game_id,
                **kwargs,
            )
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def entries_of(self, event_type: str) -> list[LogEntry]:
        return [entry for entry in self.entries if entry.event_type == event_type]

    @property
    def play_count(self) -> int:
        return len(self.entries_of("PLAY"))

    @property
    def rejected_count(self) -> int:
        return len(self.entries_of("REJECTED"))

    def clear(self) -> None:
        self.entries.clear()
        self.scoring.clear()

    def __len__(self) -> int:
        return len(self.entries)

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    def _handle_game_started(self, event: GameStartedEvent) -> None:
        self.add_entry(event, "GAME_START", "Game started")

    def _handle_game_ended(self, event: GameEndedEvent) -> None:
        if event.winner is None:
            description = "Game ended in a tie"
        else:
            description = f"Game ended, {event.winner.display} wins"
        self.add_entry(event, "GAME_END", description)

    def _handle_score_changed(self, event: ScoreChangedEvent) -> None:
        if event.is_correction:
            description = f"Score corrected: {event.team.display} set to {event.points}"
        else:
            description = f"{event.team.display} scores {event.points}"

        self.scoring.append(
            ScoringEntry(
                clock=event.clock,
                team=event.team,
                points=event.points,
                is_correction=event.is_correction,
                red_score_after=event.red_score,
                blue_score_after=event.blue_score,
            )
        )
        self.add_entry(event, "SCORE", description, is_scoring_play=not event.is_correction)

    def _handle_possession_changed(self, event: PossessionChangedEvent) -> None:
        self.add_entry(
            event,
            "POSSESSION",
            f"{event.offense.display} on offense ({event.reason})",
            is_turnover=event.reason in ("turnover", "downs"),
        )

    def _handle_play_started(self, event: PlayStartedEvent) -> None:
        self.add_entry(
            event,
            "PLAY_START",
            f"{event.play_type.value.capitalize()} by {event.offense.display}",
            player_id=event.triggered_by,
        )

    def _handle_play_ended(self, event: PlayEndedEvent) -> None:
        result = event.result
        if result is None:
            description = f"{event.play_type.value.capitalize()} ended"
        else:
            description = result.description
        if event.down_and_distance:
            description = f"{description}. {event.down_and_distance}"

        self.add_entry(
            event,
            "PLAY",
            description,
            is_scoring_play=result is not None and result.is_touchdown,
            is_turnover=result is not None and result.is_turnover,
        )

    def _handle_command_executed(self, event: CommandExecutedEvent) -> None:
        self.add_entry(
            event,
            "COMMAND",
            " ".join((event.command, *event.params)),
            player_id=event.player_id,
        )

    def _handle_command_rejected(self, event: CommandRejectedEvent) -> None:
        self.add_entry(
            event,
            "REJECTED",
            f"{event.command}: {event.reason} ({event.error_type})",
            player_id=event.player_id,
        )
