"""Pydantic schemas for inbound room events.

The external event source (the room front-end wrapping the physics
engine) sends these as plain dicts or JSON; validation happens here so
that malformed input never reaches the game state.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from haxfootball.core.enums import PlayType, TeamId
from haxfootball.core.models.play import PlayResult
from haxfootball.core.models.player import Player


class PlayerSchema(BaseModel):
    """A player joining the room."""

    id: int = Field(..., ge=0)
    name: str = Field(..., min_length=1, max_length=25)
    auth: str = ""
    team: TeamId = TeamId.SPECTATORS
    admin_level: int = Field(default=0, ge=0, le=1)
    muted: bool = False

    def to_model(self) -> Player:
        return Player(
            id=self.id,
            name=self.name,
            auth=self.auth,
            team=self.team,
            admin_level=self.admin_level,
            muted=self.muted,
        )


class ChatMessageSchema(BaseModel):
    """A player said something in chat."""

    player_id: int = Field(..., ge=0)
    text: str = Field(..., max_length=140)


class ScoreDeltaSchema(BaseModel):
    """Points awarded by the engine."""

    team: TeamId
    amount: int = Field(..., ge=0)

    @field_validator("team")
    @classmethod
    def team_must_be_playable(cls, value: TeamId) -> TeamId:
        if not value.is_playable:
            raise ValueError("Only red or blue can score")
        return value


class EngineTickSchema(BaseModel):
    """Periodic engine notification, optionally carrying a score change."""

    elapsed_time: float = Field(..., ge=0)
    score_delta: Optional[ScoreDeltaSchema] = None


class PlayResultSchema(BaseModel):
    """Outcome of the live play as observed by the engine."""

    yards_gained: int = Field(default=0, ge=-100, le=100)

    ball_carrier_id: Optional[int] = None
    passer_id: Optional[int] = None
    receiver_id: Optional[int] = None
    kicker_id: Optional[int] = None
    tackler_id: Optional[int] = None
    interceptor_id: Optional[int] = None

    is_touchdown: bool = False
    is_incomplete: bool = False
    is_interception: bool = False
    is_fumble_lost: bool = False
    is_sack: bool = False

    end_yard_line: Optional[int] = Field(default=None, ge=0, le=100)

    def to_model(self, play_type: PlayType) -> PlayResult:
        """Bind the outcome to the type of the play it ended."""
        return PlayResult(play_type=play_type, **self.model_dump())
