"""Room session - everything one room needs, wired together.

A session owns the players, the optional current game, the event bus,
the scheduler and the outbound chat/engine boundaries. The external
room adapter feeds it chat lines, engine ticks and play results.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Union

from haxfootball.commands.dispatcher import CommandDispatcher
from haxfootball.commands.registry import COMMANDS, CommandRegistry
from haxfootball.config import RoomConfig, get_config
from haxfootball.core.enums import DownOutcome, GamePhase
from haxfootball.core.errors import InvariantViolation
from haxfootball.core.models.player import Player
from haxfootball.events import EventBus, GameEndedEvent, GameStartedEvent
from haxfootball.game.chat import BufferedChat, ChatSink
from haxfootball.game.engine import EngineClient, StaticEngine
from haxfootball.game.players import PlayerRegistry
from haxfootball.game.scheduler import Clock, Scheduler, SystemClock
from haxfootball.game.state import GameState
from haxfootball.logging import RoomLog
from haxfootball.plays.kickoff import KickOff
from haxfootball.schemas import (
    ChatMessageSchema,
    EngineTickSchema,
    PlayerSchema,
    PlayResultSchema,
)

logger = logging.getLogger(__name__)


class RoomSession:
    """One football room."""

    def __init__(
        self,
        config: Optional[RoomConfig] = None,
        engine: Optional[EngineClient] = None,
        chat: Optional[ChatSink] = None,
        clock: Optional[Clock] = None,
        commands: Optional[CommandRegistry] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or get_config()
        self.engine = engine or StaticEngine()
        self.chat = chat or BufferedChat()
        self.scheduler = Scheduler(clock or SystemClock())
        self.rng = rng or random.Random()

        self.players = PlayerRegistry()
        self.bus = EventBus()
        self.log = RoomLog()
        self.log.connect_to_event_bus(self.bus)

        self.game: Optional[GameState] = None
        self._bot_on = True

        self.dispatcher = CommandDispatcher(self, commands if commands is not None else COMMANDS)

    # -------------------------------------------------------------------------
    # Game lifecycle
    # -------------------------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        if self.game is None:
            return GamePhase.IDLE
        return self.game.phase

    @property
    def has_active_game(self) -> bool:
        return self.game is not None and not self.game.is_over

    def start_new_game(self) -> GameState:
        """End any current game, create a fresh one and kick off."""
        if self.has_active_game:
            self.end_game()

        game = GameState(self.config, self.engine, self.players, self.scheduler, bus=self.bus)
        self.game = game
        logger.info(f"New game {game.id} in {self.config.room_name}")
        game.emit(GameStartedEvent())

        game.start_play(KickOff(time=0), None)
        return game

    def end_game(self) -> None:
        game = self.game
        if game is None or game.is_over:
            return

        game.end()
        winner = game.score.leader
        logger.info(f"Game {game.id} ended: {game.scoreboard_summary()}")
        game.emit(GameEndedEvent(winner=winner))

    # -------------------------------------------------------------------------
    # Players
    # -------------------------------------------------------------------------

    def add_player(self, player: Union[Player, PlayerSchema, dict]) -> Player:
        if isinstance(player, dict):
            player = PlayerSchema.model_validate(player)
        if isinstance(player, PlayerSchema):
            player = player.to_model()
        self.players.add(player)
        logger.debug(f"{player} joined")
        return player

    def remove_player(self, player_id: int) -> Optional[Player]:
        player = self.players.remove(player_id)
        if player is not None:
            logger.debug(f"{player} left")
        return player

    # -------------------------------------------------------------------------
    # Inbound events
    # -------------------------------------------------------------------------

    def handle_chat(self, message: Union[ChatMessageSchema, dict]) -> bool:
        """
        Forward a chat line to the command dispatcher.

        Returns:
            True when the line was handled as a command
        """
        if isinstance(message, dict):
            message = ChatMessageSchema.model_validate(message)

        self.scheduler.run_pending()

        author = self.players.get(message.player_id)
        if author is None:
            logger.warning(f"Chat from unknown player id {message.player_id} ignored")
            return False
        return self.dispatcher.dispatch(author, message.text)

    def handle_engine_tick(self, tick: Union[EngineTickSchema, dict]) -> None:
        if isinstance(tick, dict):
            tick = EngineTickSchema.model_validate(tick)

        self.engine.sync_time(tick.elapsed_time)
        self.scheduler.run_pending()

        delta = tick.score_delta
        if delta is None or delta.amount == 0:
            return
        if not self.has_active_game:
            logger.warning(f"Score delta for {delta.team.display} with no game in progress")
            return
        self.game.add_score(delta.team, delta.amount)

    def handle_play_result(self, result: Union[PlayResultSchema, dict]) -> Optional[DownOutcome]:
        """
        Resolve the live play with the engine's outcome.

        Returns the down outcome, or None when there was nothing to resolve.
        """
        if isinstance(result, dict):
            result = PlayResultSchema.model_validate(result)

        game = self.game
        if game is None or game.active_play is None:
            logger.warning("Play result received with no play running, ignoring")
            return None

        play_result = result.to_model(game.active_play.play_type)
        try:
            outcome = game.resolve_play(play_result)
        except InvariantViolation as e:
            logger.error(f"Could not resolve play: {e}")
            return None

        self.chat.announce(play_result.description)
        if outcome == DownOutcome.TOUCHDOWN:
            self.chat.announce(game.scoreboard_summary())
        self.chat.announce(game.down_and_distance())
        return outcome

    # -------------------------------------------------------------------------
    # Bot toggle
    # -------------------------------------------------------------------------

    @property
    def is_bot_on(self) -> bool:
        return self._bot_on

    def turn_bot_on(self) -> None:
        self._bot_on = True
        logger.info("Bot turned on")

    def turn_bot_off(self) -> None:
        self._bot_on = False
        logger.info("Bot turned off")
