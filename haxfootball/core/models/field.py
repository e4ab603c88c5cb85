"""Field position and down/distance tracking."""

from dataclasses import dataclass
from typing import Optional

from haxfootball.core.enums import DownOutcome, TeamId
from haxfootball.core.errors import InvariantViolation

DOWN_NAMES = {1: "1st", 2: "2nd", 3: "3rd", 4: "4th"}


@dataclass
class FieldPosition:
    """
    Represents position on the field.

    Uses an absolute 0-100 scale where:
    - 0 = red goal line
    - 50 = midfield
    - 100 = blue goal line

    Red advances toward 100, blue advances toward 0.
    """

    yard_line: int  # 0-100

    def __post_init__(self) -> None:
        """Clamp yard line to valid range."""
        self.yard_line = max(0, min(100, int(self.yard_line)))

    @classmethod
    def from_team_yard(cls, yard: int, team_half: TeamId) -> "FieldPosition":
        """
        Create from chat notation such as 'red 20' or 'blue 35'.

        Args:
            yard: The yard line number (1-50) measured from that team's goal
            team_half: The team whose half of the field the yard is in

        Examples:
            - Red 20: from_team_yard(20, TeamId.RED) -> 20
            - Blue 20: from_team_yard(20, TeamId.BLUE) -> 80
        """
        if team_half == TeamId.RED:
            return cls(yard)
        return cls(100 - yard)

    @property
    def display(self) -> str:
        """
        Human-readable field position.

        Returns strings like "RED 25", "BLUE 30", "50" (midfield).
        """
        if self.yard_line == 50:
            return "50"
        elif self.yard_line < 50:
            return f"RED {self.yard_line}"
        else:
            return f"BLUE {100 - self.yard_line}"

    def yards_to_goal(self, offense: TeamId) -> int:
        """Yards the offense needs to reach the opponent's goal line."""
        if offense == TeamId.RED:
            return 100 - self.yard_line
        return self.yard_line

    def advance(self, yards: int, offense: TeamId) -> "FieldPosition":
        """
        Create new field position after the offense gains yards.

        Positive yards = toward the opponent's goal line.
        """
        if offense == TeamId.RED:
            return FieldPosition(self.yard_line + yards)
        return FieldPosition(self.yard_line - yards)


@dataclass
class DownState:
    """
    Tracks current down and distance situation.

    The line of scrimmage is None until it is set by a kick result or
    an admin command, and after a hard reset.
    """

    down: int = 1  # 1-4
    yards_to_get: int = 10  # 1-99
    line_of_scrimmage: Optional[FieldPosition] = None

    @property
    def has_line_of_scrimmage(self) -> bool:
        return self.line_of_scrimmage is not None

    @property
    def down_display(self) -> str:
        """Display string like '1st & 10'."""
        down_str = DOWN_NAMES.get(self.down, f"{self.down}th")
        return f"{down_str} & {self.yards_to_get}"

    def first_down_marker(self, offense: TeamId) -> Optional[FieldPosition]:
        """Position the offense must reach for a new set of downs."""
        if self.line_of_scrimmage is None:
            return None
        return self.line_of_scrimmage.advance(self.yards_to_get, offense)

    def is_goal_to_go(self, offense: TeamId) -> bool:
        """Check if this is a goal-to-go situation."""
        if self.line_of_scrimmage is None:
            return False
        return self.line_of_scrimmage.yards_to_goal(offense) <= self.yards_to_get

    def down_and_distance(self, offense: TeamId) -> str:
        """Full display like '2nd & 7 at BLUE 40'."""
        if self.line_of_scrimmage is None:
            return f"{self.down_display} | Line of scrimmage not set"

        down_str = DOWN_NAMES.get(self.down, f"{self.down}th")
        distance = "Goal" if self.is_goal_to_go(offense) else str(self.yards_to_get)
        return f"{down_str} & {distance} at {self.line_of_scrimmage.display}"

    def hard_reset(self, yards_to_get: int = 10) -> None:
        """Back to 1st & 10 with no line of scrimmage."""
        self.down = 1
        self.yards_to_get = yards_to_get
        self.line_of_scrimmage = None

    @staticmethod
    def first_down_at(
        los: FieldPosition, offense: TeamId, default_yards: int = 10
    ) -> "DownState":
        """
        Create down state for a new series.

        Yards to get is shortened when the goal line is closer than the
        default distance.
        """
        yards_to_get = max(1, min(default_yards, los.yards_to_goal(offense)))
        return DownState(down=1, yards_to_get=yards_to_get, line_of_scrimmage=los)

    def advance(
        self,
        yards_gained: int,
        offense: TeamId,
        max_down: int = 4,
        default_yards: int = 10,
    ) -> tuple["DownState", DownOutcome]:
        """
        Create new down state after a scrimmage play.

        Args:
            yards_gained: Yards gained on the play (can be negative)
            offense: Team that had the ball for the play

        Returns:
            Tuple of (new_down_state, outcome). On a turnover on downs the
            returned state is already expressed for the new offense.
        """
        if self.line_of_scrimmage is None:
            raise InvariantViolation("Cannot advance downs without a line of scrimmage")

        new_los = self.line_of_scrimmage.advance(yards_gained, offense)

        if new_los.yards_to_goal(offense) <= 0:
            return DownState(down=1, yards_to_get=default_yards, line_of_scrimmage=new_los), DownOutcome.TOUCHDOWN

        # Dead ball never rests on a goal line
        new_los = FieldPosition(max(1, min(99, new_los.yard_line)))
        remaining = self.yards_to_get - yards_gained

        if remaining <= 0:
            return self.first_down_at(new_los, offense, default_yards), DownOutcome.FIRST_DOWN

        if self.down >= max_down:
            return (
                self.first_down_at(new_los, offense.opponent, default_yards),
                DownOutcome.TURNOVER_ON_DOWNS,
            )

        return DownState(
            down=self.down + 1,
            yards_to_get=min(99, remaining),
            line_of_scrimmage=new_los,
        ), DownOutcome.NEXT_DOWN

    def copy(self) -> "DownState":
        """Create a copy of this down state."""
        los = self.line_of_scrimmage
        return DownState(
            down=self.down,
            yards_to_get=self.yards_to_get,
            line_of_scrimmage=FieldPosition(los.yard_line) if los else None,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "down": self.down,
            "yards_to_get": self.yards_to_get,
            "line_of_scrimmage": self.line_of_scrimmage.yard_line if self.line_of_scrimmage else None,
        }
