"""Shared pytest fixtures for HaxFootball tests."""

import random

import pytest

from haxfootball.config import RoomConfig
from haxfootball.core.enums import TeamId
from haxfootball.core.models.field import DownState, FieldPosition
from haxfootball.core.models.player import Player
from haxfootball.game.chat import BufferedChat
from haxfootball.game.engine import StaticEngine
from haxfootball.game.players import PlayerRegistry
from haxfootball.game.scheduler import ManualClock, Scheduler
from haxfootball.game.session import RoomSession
from haxfootball.game.state import GameState


# =============================================================================
# Config and infrastructure
# =============================================================================


@pytest.fixture
def config() -> RoomConfig:
    """Room config with fixed values, independent of the environment."""
    return RoomConfig(
        room_name="Test Room",
        max_players=20,
        command_prefix="!",
        snap_cooldown_seconds=2.0,
        log_level="DEBUG",
        debug_mode=False,
    )


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def scheduler(clock) -> Scheduler:
    return Scheduler(clock)


@pytest.fixture
def engine() -> StaticEngine:
    return StaticEngine()


@pytest.fixture
def chat() -> BufferedChat:
    return BufferedChat()


# =============================================================================
# Player Fixtures
# =============================================================================


@pytest.fixture
def admin() -> Player:
    """Level-1 admin on red."""
    return Player(id=1, name="Coach", auth="auth-coach", team=TeamId.RED, admin_level=1)


@pytest.fixture
def red_player() -> Player:
    return Player(id=2, name="Runner", auth="auth-runner", team=TeamId.RED)


@pytest.fixture
def blue_player() -> Player:
    return Player(id=3, name="Safety", auth="auth-safety", team=TeamId.BLUE)


@pytest.fixture
def muted_player() -> Player:
    return Player(id=4, name="Quiet", auth="auth-quiet", team=TeamId.BLUE, muted=True)


@pytest.fixture
def spectator() -> Player:
    return Player(id=5, name="Watcher", team=TeamId.SPECTATORS)


@pytest.fixture
def registry(admin, red_player, blue_player, muted_player, spectator) -> PlayerRegistry:
    players = PlayerRegistry()
    for player in (admin, red_player, blue_player, muted_player, spectator):
        players.add(player)
    return players


# =============================================================================
# Game Fixtures
# =============================================================================


@pytest.fixture
def game(config, engine, registry, scheduler) -> GameState:
    """Fresh game with red on offense and no play running."""
    return GameState(config, engine, registry, scheduler)


@pytest.fixture
def game_at_red_25(game) -> GameState:
    """Red 1st & 10 at its own 25."""
    game.machine.replace_down(
        DownState(down=1, yards_to_get=10, line_of_scrimmage=FieldPosition(25))
    )
    return game


@pytest.fixture
def session(config, engine, chat, clock, admin, red_player, blue_player, muted_player, spectator) -> RoomSession:
    """Session with all test players seated and no game yet."""
    room = RoomSession(config=config, engine=engine, chat=chat, clock=clock, rng=random.Random(7))
    for player in (admin, red_player, blue_player, muted_player, spectator):
        room.add_player(player)
    return room


@pytest.fixture
def live_session(session, clock) -> RoomSession:
    """
    Session with a game in progress, opening kickoff already resolved.

    Red kicked off; blue receives and has 1st & 10 at its own 25
    (absolute yard line 75). The snap cooldown has elapsed.
    """
    session.start_new_game()
    session.handle_play_result({"yards_gained": 0})
    clock.advance(5)
    session.scheduler.run_pending()
    session.chat.clear()
    return session
