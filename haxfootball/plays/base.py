"""Shared play lifecycle.

Every play goes through validate -> prepare -> run -> clean_up, driven
by the state machine in ``haxfootball.game.play_machine``. Variants only
fill in the hooks; they never advance their own stage.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Optional

from haxfootball.core.enums import PlayStage, PlayType
from haxfootball.core.models.field import FieldPosition

if TYPE_CHECKING:
    from haxfootball.core.models.player import Player
    from haxfootball.game.state import GameState

logger = logging.getLogger(__name__)


class Play(ABC):
    """One discrete, time-bounded action on the field."""

    play_type: ClassVar[PlayType]

    def __init__(self) -> None:
        self.stage = PlayStage.CREATED
        self.triggered_by: Optional[int] = None
        self.start_position: Optional[FieldPosition] = None
        self.started_at: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self.stage == PlayStage.RUNNING

    @property
    def has_started(self) -> bool:
        return self.started_at is not None

    def validate(self, game: GameState, player: Optional[Player]) -> None:
        """
        Check the play can begin in the current game situation.

        Raises:
            PlayValidationError: With a reason to show the player
        """
        self._validate(game, player)
        self.triggered_by = player.id if player else None
        self.stage = PlayStage.VALIDATED

    def prepare(self, game: GameState) -> None:
        """Line players up and spot the ball."""
        game.refresh_players()
        self.start_position = self._spot(game)
        if self.start_position is not None:
            game.engine.place_ball(self.start_position)
        self.stage = PlayStage.PREPARED

    def run(self, game: GameState) -> None:
        self.started_at = self._start_time(game)
        self.stage = PlayStage.RUNNING
        logger.debug(f"{self.play_type.value} running from {self._spot_display()}")

    def clean_up(self, game: GameState) -> None:
        """
        Release anything the play holds.

        Idempotent, and safe on a play that was never prepared or run
        (for example one ended by a pre-snap penalty).
        """
        if self.stage == PlayStage.CLEANED_UP:
            return
        was_started = self.has_started
        self.stage = PlayStage.CLEANED_UP
        self._clean_up(game, was_started)

    @abstractmethod
    def _validate(self, game: GameState, player: Optional[Player]) -> None: ...

    def _spot(self, game: GameState) -> Optional[FieldPosition]:
        return game.down.line_of_scrimmage

    def _start_time(self, game: GameState) -> float:
        return game.engine.elapsed_time()

    def _clean_up(self, game: GameState, was_started: bool) -> None:
        pass

    def _spot_display(self) -> str:
        return self.start_position.display if self.start_position else "no spot"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} stage={self.stage.name}>"
