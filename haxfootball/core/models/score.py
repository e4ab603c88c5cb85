"""Score tracking."""

from dataclasses import dataclass
from typing import Optional

from haxfootball.core.enums import TeamId
from haxfootball.core.errors import InvariantViolation


@dataclass
class ScoreState:
    """Tracks game score for the two playable teams."""

    red: int = 0
    blue: int = 0

    def get(self, team: TeamId) -> int:
        if team == TeamId.RED:
            return self.red
        if team == TeamId.BLUE:
            return self.blue
        raise InvariantViolation(f"No score for team {team!r}")

    def set(self, team: TeamId, value: int) -> None:
        """Assign a team's score. Range checks belong to the caller."""
        if team == TeamId.RED:
            self.red = value
        elif team == TeamId.BLUE:
            self.blue = value
        else:
            raise InvariantViolation(f"No score for team {team!r}")

    def add(self, team: TeamId, points: int) -> None:
        self.set(team, self.get(team) + points)

    @property
    def margin(self) -> int:
        """Score margin (positive = red leading)."""
        return self.red - self.blue

    @property
    def leader(self) -> Optional[TeamId]:
        if self.margin > 0:
            return TeamId.RED
        if self.margin < 0:
            return TeamId.BLUE
        return None

    @property
    def display(self) -> str:
        return f"RED {self.red} - {self.blue} BLUE"

    def to_dict(self) -> dict:
        return {"red": self.red, "blue": self.blue}
