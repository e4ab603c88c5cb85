"""Play variants.

The set of plays is closed: every variant is listed in ``PLAY_CLASSES``
and the state machine only relies on the ``Play`` lifecycle.
"""

from haxfootball.core.enums import PlayType
from haxfootball.plays.base import Play
from haxfootball.plays.kickoff import KickOff
from haxfootball.plays.snap import PassPlay, Punt, RunPlay, SnapPlay

PLAY_CLASSES: dict[PlayType, type[Play]] = {
    PlayType.KICKOFF: KickOff,
    PlayType.RUN: RunPlay,
    PlayType.PASS: PassPlay,
    PlayType.PUNT: Punt,
}


def create_play(play_type: PlayType) -> Play:
    """Create a fresh play of the given type."""
    return PLAY_CLASSES[play_type]()


__all__ = [
    "KickOff",
    "PLAY_CLASSES",
    "PassPlay",
    "Play",
    "Punt",
    "RunPlay",
    "SnapPlay",
    "create_play",
]
