"""Kickoff play."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from haxfootball.core.enums import PlayType
from haxfootball.core.errors import PlayValidationError
from haxfootball.core.models.field import FieldPosition
from haxfootball.plays.base import Play

if TYPE_CHECKING:
    from haxfootball.core.models.player import Player
    from haxfootball.game.state import GameState

MIDFIELD = 50


class KickOff(Play):
    """
    Kickoff from midfield by the offense.

    The opening kickoff of a game is started by the room itself with no
    player and a fixed time of 0.
    """

    play_type = PlayType.KICKOFF

    def __init__(self, time: float = 0.0) -> None:
        super().__init__()
        self.time = time

    def _validate(self, game: GameState, player: Optional[Player]) -> None:
        if player is not None and player.team != game.offense_team_id:
            raise PlayValidationError("Only the kicking team can kick off")

    def _spot(self, game: GameState) -> Optional[FieldPosition]:
        return FieldPosition(MIDFIELD)

    def _start_time(self, game: GameState) -> float:
        return self.time
