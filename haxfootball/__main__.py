"""Entry point for the haxfootball package.

Runs a local console room. Each stdin line is one of:

    name: text          chat from a player (players are created on first use)
    @tick <seconds>     engine tick with the elapsed match time
    @result <json>      outcome of the live play as PlayResultSchema JSON
"""

import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from haxfootball.config import RoomConfig, set_config
from haxfootball.console import RichChat
from haxfootball.core.enums import TeamId
from haxfootball.core.models.player import Player
from haxfootball.game.engine import StaticEngine
from haxfootball.game.session import RoomSession
from haxfootball.schemas import EngineTickSchema, PlayResultSchema

logger = logging.getLogger("haxfootball")


def build_session(args: argparse.Namespace) -> RoomSession:
    config = RoomConfig.from_env()
    if args.prefix:
        config.command_prefix = args.prefix
    if args.log_level:
        config.log_level = args.log_level

    errors = config.validate()
    if errors:
        raise SystemExit("Invalid configuration: " + "; ".join(errors))
    set_config(config)

    session = RoomSession(config=config, engine=StaticEngine(), chat=RichChat())

    # Seeded players: the first is an admin on red, then alternate teams
    for index, name in enumerate(args.players):
        team = TeamId.RED if index % 2 == 0 else TeamId.BLUE
        session.add_player(
            Player(id=index + 1, name=name, auth=name.lower(), team=team, admin_level=1 if index == 0 else 0)
        )
    return session


def _player_for(session: RoomSession, name: str) -> Player:
    for player in session.players:
        if player.name.lower() == name.lower():
            return player
    return session.add_player(Player(id=len(session.players) + 1, name=name, auth=name.lower()))


def handle_line(session: RoomSession, line: str) -> None:
    line = line.strip()
    if not line:
        return

    if line.startswith("@tick"):
        elapsed = line[len("@tick"):].strip() or "0"
        session.handle_engine_tick(EngineTickSchema(elapsed_time=float(elapsed)))
        return

    if line.startswith("@result"):
        payload = line[len("@result"):].strip() or "{}"
        session.handle_play_result(PlayResultSchema.model_validate_json(payload))
        return

    name, sep, text = line.partition(":")
    if not sep:
        logger.warning(f"Ignoring line without a player name: {line!r}")
        return
    player = _player_for(session, name.strip())
    session.handle_chat({"player_id": player.id, "text": text.strip()})


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the console room."""
    parser = argparse.ArgumentParser(
        description="HaxFootball - football room rules engine (console room)",
        prog="haxfootball",
    )
    parser.add_argument(
        "--prefix",
        type=str,
        default=None,
        help="Command prefix (default: ! or HAXFOOTBALL_COMMAND_PREFIX)",
    )
    parser.add_argument(
        "--players",
        nargs="*",
        default=["Admin", "Blue"],
        help="Players to seat before reading input; the first one is an admin",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: INFO or HAXFOOTBALL_LOG_LEVEL)",
    )

    args = parser.parse_args(argv)
    session = build_session(args)

    logging.basicConfig(
        level=session.config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session.start_new_game()
    session.chat.announce(f"{session.config.room_name} is open, type {session.config.command_prefix}help")

    for line in sys.stdin:
        try:
            handle_line(session, line)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Rejected input {line.strip()!r}: {e}")


if __name__ == "__main__":
    main()
