"""Game enumerations."""

from haxfootball.core.enums.plays import DownOutcome, GamePhase, PlayStage, PlayType
from haxfootball.core.enums.teams import TEAM_TOKENS, TeamId

__all__ = [
    "DownOutcome",
    "GamePhase",
    "PlayStage",
    "PlayType",
    "TEAM_TOKENS",
    "TeamId",
]
