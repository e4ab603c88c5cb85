"""Connected player model."""

from dataclasses import dataclass

from haxfootball.core.enums import TeamId

SHORT_NAME_LENGTH = 12


@dataclass
class Player:
    """A player connected to the room."""

    id: int
    name: str
    auth: str = ""
    team: TeamId = TeamId.SPECTATORS
    admin_level: int = 0  # 0 = player, 1 = admin
    muted: bool = False

    @property
    def short_name(self) -> str:
        """Name truncated for chat lines."""
        if len(self.name) <= SHORT_NAME_LENGTH:
            return self.name
        return f"{self.name[:SHORT_NAME_LENGTH]}..."

    @property
    def stats_key(self) -> str:
        """Key used for stat tracking; falls back to the id for guests."""
        return self.auth or f"#{self.id}"

    @property
    def is_admin(self) -> bool:
        return self.admin_level >= 1

    @property
    def is_playing(self) -> bool:
        return self.team.is_playable

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"
