"""
Room configuration.

Controls gameplay limits, timing and chat settings for a room session.
All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoomConfig:
    """Configuration for a football room session."""

    # Room settings
    room_name: str = field(default_factory=lambda: os.getenv("HAXFOOTBALL_ROOM_NAME", "HAXFOOTBALL"))
    max_players: int = field(default_factory=lambda: int(os.getenv("HAXFOOTBALL_MAX_PLAYERS", "20")))
    command_prefix: str = field(default_factory=lambda: os.getenv("HAXFOOTBALL_COMMAND_PREFIX", "!"))

    # Game rules
    max_score: int = field(default_factory=lambda: int(os.getenv("HAXFOOTBALL_MAX_SCORE", "100")))
    max_down: int = field(default_factory=lambda: int(os.getenv("HAXFOOTBALL_MAX_DOWN", "4")))
    max_yards_to_get: int = 99
    default_yards_to_get: int = field(
        default_factory=lambda: int(os.getenv("HAXFOOTBALL_DEFAULT_YARDS_TO_GET", "10"))
    )
    touchdown_points: int = field(
        default_factory=lambda: int(os.getenv("HAXFOOTBALL_TOUCHDOWN_POINTS", "7"))
    )
    # Own yard line after a touchdown or touchback
    touchback_yard: int = field(default_factory=lambda: int(os.getenv("HAXFOOTBALL_TOUCHBACK_YARD", "25")))

    # Seconds a new play is locked out after a play ends
    snap_cooldown_seconds: float = field(
        default_factory=lambda: float(os.getenv("HAXFOOTBALL_SNAP_COOLDOWN", "2.0"))
    )

    # Diagnostics
    log_level: str = field(default_factory=lambda: os.getenv("HAXFOOTBALL_LOG_LEVEL", "INFO"))
    debug_mode: bool = field(
        default_factory=lambda: os.getenv("HAXFOOTBALL_DEBUG", "false").lower() == "true"
    )

    @classmethod
    def from_env(cls) -> "RoomConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not self.command_prefix:
            errors.append("HAXFOOTBALL_COMMAND_PREFIX is required")
        if self.max_players < 2:
            errors.append("max_players must be at least 2")
        if self.snap_cooldown_seconds < 0:
            errors.append("snap_cooldown_seconds cannot be negative")
        if not 1 <= self.touchback_yard <= 50:
            errors.append("touchback_yard must be between 1 and 50")
        return errors


# Singleton config instance
_config: Optional[RoomConfig] = None


def get_config() -> RoomConfig:
    """Get the global room configuration."""
    global _config
    if _config is None:
        _config = RoomConfig.from_env()
    return _config


def set_config(config: Optional[RoomConfig]) -> None:
    """
    Replace the global configuration.

    Passing None makes the next get_config() re-read the environment.
    Useful for testing.
    """
    global _config
    _config = config
