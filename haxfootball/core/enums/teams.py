"""Team identifiers."""

from enum import IntEnum


class TeamId(IntEnum):
    """Team ids as reported by the room engine."""

    SPECTATORS = 0
    RED = 1
    BLUE = 2

    @property
    def is_playable(self) -> bool:
        """Only red and blue can hold possession."""
        return self in (TeamId.RED, TeamId.BLUE)

    @property
    def opponent(self) -> "TeamId":
        """The other playable team."""
        if self == TeamId.RED:
            return TeamId.BLUE
        if self == TeamId.BLUE:
            return TeamId.RED
        raise ValueError(f"{self.name} has no opponent")

    @property
    def display(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_token(cls, token: str) -> "TeamId":
        """
        Parse a chat token such as 'red', 'r', 'blue' or 'b'.

        Raises:
            ValueError: If the token names no playable team
        """
        value = token.strip().lower()
        if value in ("red", "r"):
            return cls.RED
        if value in ("blue", "b"):
            return cls.BLUE
        raise ValueError(f"Unknown team: {token}")


TEAM_TOKENS = ("blue", "b", "red", "r")
