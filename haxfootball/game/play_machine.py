"""Down/play state machine.

Owns down and distance, the offense assignment, the single live play and
the snap cooldown. Phases:

    GAME_ACTIVE -> PLAY_PENDING -> PLAY_RUNNING -> GAME_ACTIVE
    any phase   -> GAME_ENDED (terminal)

Setters here trust their callers: range checks are done by the command
handlers before anything is mutated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from haxfootball.core.enums import GamePhase, TeamId
from haxfootball.core.errors import InvariantViolation, PlayValidationError, SnapCooldownError
from haxfootball.core.models.field import DownState, FieldPosition
from haxfootball.game.scheduler import Scheduler

if TYPE_CHECKING:
    from haxfootball.core.models.player import Player
    from haxfootball.game.state import GameState
    from haxfootball.plays.base import Play

logger = logging.getLogger(__name__)


class SnapCooldown:
    """Timed lock that blocks a new play right after one ends."""

    def __init__(self, scheduler: Scheduler, seconds: float) -> None:
        self._scheduler = scheduler
        self.seconds = seconds
        self.expires_at = 0.0
        self._active = False

    @property
    def is_active(self) -> bool:
        if self._active and self._scheduler.clock.now() >= self.expires_at:
            self._active = False
        return self._active

    @property
    def remaining(self) -> float:
        if not self.is_active:
            return 0.0
        return self.expires_at - self._scheduler.clock.now()

    def start(self) -> None:
        if self.seconds <= 0:
            return
        self._active = True
        self.expires_at = self._scheduler.clock.now() + self.seconds
        self._scheduler.call_later(self.seconds, self._expire, name="snap-cooldown")

    def _expire(self) -> None:
        # A newer start() may have pushed the expiry out
        if self._scheduler.clock.now() >= self.expires_at:
            self._active = False


class PlayStateMachine:
    """Down and play lifecycle for one game."""

    def __init__(
        self,
        game: GameState,
        scheduler: Scheduler,
        cooldown_seconds: float = 2.0,
        default_yards_to_get: int = 10,
        offense: TeamId = TeamId.RED,
    ) -> None:
        self._game = game
        self.default_yards_to_get = default_yards_to_get
        self.down = DownState(yards_to_get=default_yards_to_get)
        self.offense_team_id = offense
        self.active_play: Optional[Play] = None
        self.phase = GamePhase.GAME_ACTIVE
        self.cooldown = SnapCooldown(scheduler, cooldown_seconds)

    @property
    def defense_team_id(self) -> TeamId:
        if self.offense_team_id == TeamId.RED:
            return TeamId.BLUE
        if self.offense_team_id == TeamId.BLUE:
            return TeamId.RED
        raise InvariantViolation(f"Offense team id is invalid: {self.offense_team_id!r}")

    @property
    def can_start_snap_play(self) -> bool:
        return self.active_play is None and not self.cooldown.is_active

    # -------------------------------------------------------------------------
    # Play lifecycle
    # -------------------------------------------------------------------------

    def start_play(self, play: Play, player: Optional[Player]) -> None:
        """
        Validate, prepare and run a play, in that order, before returning.

        Raises:
            PlayValidationError: Game over, a play is already live, or the
                play's own checks failed
            SnapCooldownError: A play ended too recently
        """
        if self.phase == GamePhase.GAME_ENDED:
            raise PlayValidationError("The game is over")
        if self.active_play is not None:
            raise PlayValidationError("There is already a play running")
        if self.cooldown.is_active:
            raise SnapCooldownError(self.cooldown.remaining)

        play.validate(self._game, player)

        self.active_play = play
        self.phase = GamePhase.PLAY_PENDING
        try:
            play.prepare(self._game)
            self.phase = GamePhase.PLAY_RUNNING
            play.run(self._game)
        except Exception:
            logger.error(f"{play!r} failed to start, discarding it")
            self._discard_active_play()
            raise

        logger.debug(f"Play started: {play!r}")

    def end_play(self) -> Optional[Play]:
        """
        Clean up and clear the live play, then start the snap cooldown.

        A no-op when no play is live. Returns the play that was ended.
        """
        play = self.active_play
        if play is None:
            return None

        self._discard_active_play()
        self.cooldown.start()
        logger.debug(f"Play ended: {play!r}")
        return play

    def _discard_active_play(self) -> None:
        play = self.active_play
        try:
            play.clean_up(self._game)
        except Exception:
            # The slot must still be cleared or no further play could start
            logger.exception(f"Cleanup of {play!r} failed")
        self.active_play = None
        if self.phase != GamePhase.GAME_ENDED:
            self.phase = GamePhase.GAME_ACTIVE

    def end_game(self) -> Optional[Play]:
        play = self.end_play()
        self.phase = GamePhase.GAME_ENDED
        return play

    # -------------------------------------------------------------------------
    # Down and possession
    # -------------------------------------------------------------------------

    def set_line_of_scrimmage(self, position: FieldPosition) -> None:
        self.down.line_of_scrimmage = position

    def set_down(self, down: int) -> None:
        self.down.down = down

    def set_yards_to_get(self, yards: int) -> None:
        self.down.yards_to_get = yards

    def replace_down(self, down: DownState) -> None:
        self.down = down

    def set_offense(self, team: TeamId) -> None:
        if not team.is_playable:
            raise InvariantViolation(f"{team!r} cannot be on offense")
        self.offense_team_id = team
        self._game.refresh_players()

    def swap_offense(self) -> TeamId:
        """Flip offense and defense and re-snapshot the players. Returns the new offense."""
        self.set_offense(self.defense_team_id)
        logger.info(f"Offense swapped, {self.offense_team_id.display} is now on offense")
        return self.offense_team_id

    def hard_reset(self) -> Optional[Play]:
        """Drop any live play and return downs to defaults."""
        play = self.end_play()
        self.down.hard_reset(self.default_yards_to_get)
        return play
