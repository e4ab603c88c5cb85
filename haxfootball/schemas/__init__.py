"""Pydantic schemas for events entering a room session."""

from haxfootball.schemas.inbound import (
    ChatMessageSchema,
    EngineTickSchema,
    PlayerSchema,
    PlayResultSchema,
    ScoreDeltaSchema,
)

__all__ = [
    "ChatMessageSchema",
    "EngineTickSchema",
    "PlayResultSchema",
    "PlayerSchema",
    "ScoreDeltaSchema",
]
