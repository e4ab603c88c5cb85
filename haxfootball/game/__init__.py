"""Room runtime: game state, play machine, scheduling and session."""

from haxfootball.game.chat import BufferedChat, ChatSink
from haxfootball.game.engine import EngineClient, StaticEngine
from haxfootball.game.play_machine import PlayStateMachine, SnapCooldown
from haxfootball.game.players import PlayerRecorder, PlayerRegistry
from haxfootball.game.scheduler import Clock, ManualClock, Scheduler, SystemClock
from haxfootball.game.state import GameState
from haxfootball.game.session import RoomSession

__all__ = [
    "BufferedChat",
    "ChatSink",
    "Clock",
    "EngineClient",
    "GameState",
    "ManualClock",
    "PlayStateMachine",
    "PlayerRecorder",
    "PlayerRegistry",
    "RoomSession",
    "Scheduler",
    "SnapCooldown",
    "StaticEngine",
    "SystemClock",
]
