"""Room logging."""

from haxfootball.logging.room_log import LogEntry, RoomLog, ScoringEntry

__all__ = ["LogEntry", "RoomLog", "ScoringEntry"]
