"""Plays that start with a snap from the line of scrimmage."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from haxfootball.core.enums import PlayType
from haxfootball.core.errors import PlayValidationError
from haxfootball.plays.base import Play

if TYPE_CHECKING:
    from haxfootball.core.models.player import Player
    from haxfootball.game.state import GameState


class SnapPlay(Play):
    """Checks shared by every play snapped at the line of scrimmage."""

    def _validate(self, game: GameState, player: Optional[Player]) -> None:
        if player is None:
            raise PlayValidationError("A player must snap the ball")
        if not game.down.has_line_of_scrimmage:
            raise PlayValidationError("Line of scrimmage must be set before the snap, use !setlos")
        if player.team != game.offense_team_id:
            raise PlayValidationError("You must be on offense to snap the ball")

    def _clean_up(self, game: GameState, was_started: bool) -> None:
        # Ended before the ball was live, put it back on the spot
        if not was_started and game.down.line_of_scrimmage is not None:
            game.engine.place_ball(game.down.line_of_scrimmage)


class RunPlay(SnapPlay):
    play_type = PlayType.RUN


class PassPlay(SnapPlay):
    play_type = PlayType.PASS


class Punt(SnapPlay):
    """Punt on any down; possession changes when the play resolves."""

    play_type = PlayType.PUNT
