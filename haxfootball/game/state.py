"""Game state - the single source of truth for one game in a room."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from haxfootball.config import RoomConfig
from haxfootball.core.enums import DownOutcome, GamePhase, TeamId
from haxfootball.core.errors import InvariantViolation
from haxfootball.core.models.field import DownState, FieldPosition
from haxfootball.core.models.play import PlayResult
from haxfootball.core.models.score import ScoreState
from haxfootball.core.models.stats import StatAggregator
from haxfootball.events import (
    EventBus,
    PlayEndedEvent,
    PlayStartedEvent,
    PossessionChangedEvent,
    RoomEvent,
    ScoreChangedEvent,
)
from haxfootball.game.engine import EngineClient
from haxfootball.game.play_machine import PlayStateMachine
from haxfootball.game.players import PlayerRecorder, PlayerRegistry
from haxfootball.game.scheduler import Scheduler

if TYPE_CHECKING:
    from haxfootball.core.models.player import Player
    from haxfootball.plays.base import Play

logger = logging.getLogger(__name__)


def to_clock(seconds: float) -> str:
    """Format elapsed seconds as MM:SS."""
    total = max(0, int(seconds))
    return f"{total // 60:02d}:{total % 60:02d}"


class GameState:
    """
    Score, possession, downs and the live play for one game.

    Composes the down/play state machine, the player snapshot and the
    stat aggregator; all three live and die with the game. Mutators
    trust their callers for range checks.
    """

    def __init__(
        self,
        config: RoomConfig,
        engine: EngineClient,
        registry: PlayerRegistry,
        scheduler: Scheduler,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.id: UUID = uuid4()
        self.config = config
        self.engine = engine
        self.registry = registry
        self.bus = bus or EventBus()

        self.score = ScoreState()
        self.players = PlayerRecorder()
        self.stats = StatAggregator()
        self.machine = PlayStateMachine(
            self,
            scheduler,
            cooldown_seconds=config.snap_cooldown_seconds,
            default_yards_to_get=config.default_yards_to_get,
        )

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def down(self) -> DownState:
        return self.machine.down

    @property
    def offense_team_id(self) -> TeamId:
        return self.machine.offense_team_id

    @property
    def defense_team_id(self) -> TeamId:
        return self.machine.defense_team_id

    @property
    def active_play(self) -> Optional[Play]:
        return self.machine.active_play

    @property
    def phase(self) -> GamePhase:
        return self.machine.phase

    @property
    def is_over(self) -> bool:
        return self.machine.phase == GamePhase.GAME_ENDED

    @property
    def can_start_snap_play(self) -> bool:
        return self.machine.can_start_snap_play

    def current_clock(self) -> str:
        """Match time from the engine as MM:SS."""
        return to_clock(self.engine.elapsed_time())

    def scoreboard_summary(self) -> str:
        return self.score.display

    def down_and_distance(self) -> str:
        return self.down.down_and_distance(self.offense_team_id)

    # -------------------------------------------------------------------------
    # Score
    # -------------------------------------------------------------------------

    def set_score(self, team: TeamId, value: int) -> None:
        """Administrative score correction."""
        self.score.set(team, value)
        logger.info(f"Score corrected: {team.display} set to {value}")
        self.emit(ScoreChangedEvent(team=team, points=value, is_correction=True))

    def add_score(self, team: TeamId, points: int) -> None:
        """Live scoring from in-play events."""
        self.score.add(team, points)
        self.emit(ScoreChangedEvent(team=team, points=points))

    # -------------------------------------------------------------------------
    # Plays and possession
    # -------------------------------------------------------------------------

    def refresh_players(self) -> None:
        self.players.update_static_player_list(self.registry, self.offense_team_id)

    def start_play(self, play: Play, player: Optional[Player]) -> None:
        self.machine.start_play(play, player)
        self.emit(
            PlayStartedEvent(
                play_type=play.play_type,
                offense=self.offense_team_id,
                triggered_by=player.id if player else None,
            )
        )

    def end_play(self) -> Optional[Play]:
        play = self.machine.end_play()
        if play is not None:
            self.emit(PlayEndedEvent(play_type=play.play_type, down_and_distance=self.down_and_distance()))
        return play

    def swap_offense(self, reason: str = "command") -> TeamId:
        offense = self.machine.swap_offense()
        self.emit(PossessionChangedEvent(offense=offense, reason=reason))
        return offense

    def hard_reset(self) -> None:
        play = self.machine.hard_reset()
        if play is not None:
            self.emit(PlayEndedEvent(play_type=play.play_type, down_and_distance=self.down_and_distance()))
        logger.info("Hard reset of downs and live play")

    def end(self) -> None:
        play = self.machine.end_game()
        if play is not None:
            self.emit(PlayEndedEvent(play_type=play.play_type, down_and_distance=self.down_and_distance()))

    def resolve_play(self, result: PlayResult) -> DownOutcome:
        """
        Apply the engine's outcome for the live play.

        Records stats, ends the play, then moves the ball, the downs,
        possession and the score.
        """
        play = self.active_play
        if play is None:
            raise InvariantViolation("Play result received with no live play")

        self.stats.record_play(result, self.registry.get)
        self.machine.end_play()

        offense = self.offense_team_id
        if play.play_type.is_kick:
            outcome = self._resolve_kick(result, offense)
        elif result.is_turnover:
            outcome = self._resolve_turnover(result, offense)
        else:
            outcome = self._resolve_scrimmage(result, offense)

        logger.debug(f"{result.description}: {outcome.value}, now {self.down_and_distance()}")
        self.emit(
            PlayEndedEvent(
                play_type=play.play_type,
                result=result,
                outcome=outcome,
                down_and_distance=self.down_and_distance(),
            )
        )
        return outcome

    def _resolve_kick(self, result: PlayResult, kicking: TeamId) -> DownOutcome:
        receiving = kicking.opponent
        if result.is_touchdown:
            self._touchdown(receiving)
            return DownOutcome.TOUCHDOWN

        if result.end_yard_line is not None:
            spot = FieldPosition(max(1, min(99, result.end_yard_line)))
        else:
            spot = FieldPosition.from_team_yard(self.config.touchback_yard, receiving)
        self._new_series(receiving, spot, reason="kick")
        return DownOutcome.FIRST_DOWN

    def _resolve_turnover(self, result: PlayResult, offense: TeamId) -> DownOutcome:
        if result.is_touchdown:
            self._touchdown(offense.opponent)
            return DownOutcome.TOUCHDOWN

        if result.end_yard_line is not None:
            spot = FieldPosition(max(1, min(99, result.end_yard_line)))
        else:
            spot = self.down.line_of_scrimmage.advance(result.yards_gained, offense)
        self._new_series(offense.opponent, spot, reason="turnover")
        return DownOutcome.FIRST_DOWN

    def _resolve_scrimmage(self, result: PlayResult, offense: TeamId) -> DownOutcome:
        if result.is_touchdown:
            self._touchdown(offense)
            return DownOutcome.TOUCHDOWN

        yards = 0 if result.is_incomplete else result.yards_gained
        new_down, outcome = self.down.advance(
            yards,
            offense,
            max_down=self.config.max_down,
            default_yards=self.config.default_yards_to_get,
        )

        if outcome == DownOutcome.TOUCHDOWN:
            self._touchdown(offense)
        elif outcome == DownOutcome.TURNOVER_ON_DOWNS:
            self.machine.replace_down(new_down)
            self.machine.set_offense(offense.opponent)
            self.emit(PossessionChangedEvent(offense=offense.opponent, reason="downs"))
        else:
            self.machine.replace_down(new_down)
        return outcome

    def _touchdown(self, scoring: TeamId) -> None:
        self.add_score(scoring, self.config.touchdown_points)
        receiving = scoring.opponent
        spot = FieldPosition.from_team_yard(self.config.touchback_yard, receiving)
        self._new_series(receiving, spot, reason="touchdown")

    def _new_series(self, offense: TeamId, spot: FieldPosition, reason: str) -> None:
        self.machine.replace_down(
            DownState.first_down_at(spot, offense, self.config.default_yards_to_get)
        )
        if offense != self.offense_team_id:
            self.machine.set_offense(offense)
            self.emit(PossessionChangedEvent(offense=offense, reason=reason))
        else:
            self.refresh_players()

    # -------------------------------------------------------------------------

    def emit(self, event: RoomEvent) -> None:
        event.game_id = self.id
        event.clock = self.current_clock()
        event.red_score = self.score.red
        event.blue_score = self.score.blue
        self.bus.emit(event)

    def __str__(self) -> str:
        return f"{self.score.display} - {self.current_clock()} - {self.down_and_distance()}"
