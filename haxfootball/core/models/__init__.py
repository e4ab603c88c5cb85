"""Core game models."""

from haxfootball.core.models.field import DownState, FieldPosition
from haxfootball.core.models.play import PlayResult
from haxfootball.core.models.player import Player
from haxfootball.core.models.score import ScoreState
from haxfootball.core.models.stats import PlayerStats, StatAggregator

__all__ = [
    "DownState",
    "FieldPosition",
    "PlayResult",
    "Player",
    "PlayerStats",
    "ScoreState",
    "StatAggregator",
]
