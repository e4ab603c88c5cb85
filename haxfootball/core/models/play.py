"""Play outcome reported by the room engine."""

from dataclasses import dataclass
from typing import Optional

from haxfootball.core.enums import PlayType


@dataclass
class PlayResult:
    """
    Outcome of one play as observed by the physics engine.

    Player references are room player ids. ``end_yard_line`` is the
    absolute 0-100 spot where the ball was downed, used for kicks and
    turnovers.
    """

    play_type: PlayType
    yards_gained: int = 0

    # Participants
    ball_carrier_id: Optional[int] = None
    passer_id: Optional[int] = None
    receiver_id: Optional[int] = None
    kicker_id: Optional[int] = None
    tackler_id: Optional[int] = None
    interceptor_id: Optional[int] = None

    # Flags
    is_touchdown: bool = False
    is_incomplete: bool = False
    is_interception: bool = False
    is_fumble_lost: bool = False
    is_sack: bool = False

    end_yard_line: Optional[int] = None

    @property
    def is_turnover(self) -> bool:
        return self.is_interception or self.is_fumble_lost

    @property
    def is_complete(self) -> bool:
        return (
            self.play_type == PlayType.PASS
            and not self.is_incomplete
            and not self.is_interception
            and not self.is_sack
        )

    @property
    def description(self) -> str:
        """Short description for logs and chat."""
        if self.is_touchdown:
            return f"{self.play_type.value.capitalize()} for a touchdown"
        if self.is_interception:
            return "Pass intercepted"
        if self.is_fumble_lost:
            return "Fumble lost"
        if self.is_sack:
            return f"Sack for {self.yards_gained} yards"
        if self.is_incomplete:
            return "Incomplete pass"
        return f"{self.play_type.value.capitalize()} for {self.yards_gained} yards"
