"""Boundary to the physics room engine.

Ball kinematics, player positions and the authoritative match timer
belong to the engine. The rules engine mirrors the elapsed time from
engine ticks and issues a few coarse instructions.
"""

from dataclasses import dataclass, field
from typing import Optional, Protocol

from haxfootball.core.enums import TeamId
from haxfootball.core.models.field import FieldPosition


class EngineClient(Protocol):
    """Operations the rules engine needs from the physics room."""

    def elapsed_time(self) -> float:
        """Seconds elapsed in the current match."""
        ...

    def sync_time(self, elapsed: float) -> None:
        """Record the match time carried by an engine tick."""
        ...

    def release_ball(self) -> None: ...

    def place_ball(self, position: FieldPosition) -> None: ...

    def set_player_team(self, player_id: int, team: TeamId) -> None: ...


@dataclass
class StaticEngine:
    """
    In-memory engine used by the console room and tests.

    Records instructions instead of moving anything.
    """

    time: float = 0.0
    ball_position: Optional[FieldPosition] = None
    ball_released: bool = False
    team_moves: list[tuple[int, TeamId]] = field(default_factory=list)

    def elapsed_time(self) -> float:
        return self.time

    def sync_time(self, elapsed: float) -> None:
        self.time = elapsed

    def release_ball(self) -> None:
        self.ball_released = True

    def place_ball(self, position: FieldPosition) -> None:
        self.ball_position = position
        self.ball_released = False

    def set_player_team(self, player_id: int, team: TeamId) -> None:
        self.team_moves.append((player_id, team))
