"""Play and game lifecycle enumerations."""

from enum import Enum, auto


class PlayType(Enum):
    """Closed set of play variants."""

    KICKOFF = "kickoff"
    RUN = "run"
    PASS = "pass"
    PUNT = "punt"

    @property
    def is_snap(self) -> bool:
        """Plays that begin with a snap from the line of scrimmage."""
        return self in (PlayType.RUN, PlayType.PASS)

    @property
    def is_kick(self) -> bool:
        return self in (PlayType.KICKOFF, PlayType.PUNT)


class PlayStage(Enum):
    """Lifecycle stage of a single play."""

    CREATED = auto()
    VALIDATED = auto()
    PREPARED = auto()
    RUNNING = auto()
    CLEANED_UP = auto()


class GamePhase(Enum):
    """Phase of the down/play state machine."""

    IDLE = auto()  # No game in the room
    GAME_ACTIVE = auto()  # Game running, no live play
    PLAY_PENDING = auto()  # Play validated, being prepared
    PLAY_RUNNING = auto()
    GAME_ENDED = auto()

    @property
    def has_live_play(self) -> bool:
        return self in (GamePhase.PLAY_PENDING, GamePhase.PLAY_RUNNING)


class DownOutcome(Enum):
    """How a resolved play changed the series."""

    NEXT_DOWN = "next_down"
    FIRST_DOWN = "first_down"
    TURNOVER_ON_DOWNS = "turnover_on_downs"
    TOUCHDOWN = "touchdown"
