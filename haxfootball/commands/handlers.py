"""Command handlers.

Each handler receives a validated ``CommandContext``. Parameter count
and types are already checked; handlers check business rules (ranges,
existing stats) before mutating anything, and raise ``CommandError``
with a message for the author on failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from haxfootball.core.enums import PlayType, TeamId
from haxfootball.core.errors import CommandError
from haxfootball.core.models.field import FieldPosition
from haxfootball.plays import create_play

if TYPE_CHECKING:
    from haxfootball.commands.context import CommandContext


MIN_LOS_YARD = 1
MAX_LOS_YARD = 50
MIN_DOWN = 1
MIN_YARDS_TO_GET = 1


def _command_list(ctx: CommandContext) -> str:
    names = ", ".join(definition.name for definition in ctx.registry.accessible_to(ctx.author))
    return f"Commands: {names}"


# =============================================================================
# Information
# =============================================================================


def handle_help(ctx: CommandContext) -> None:
    if ctx.has_no_params():
        ctx.reply(_command_list(ctx))
        return

    definition = ctx.registry.get(ctx.params_str.lower())
    if definition is None:
        raise CommandError(f"Command ({ctx.params_str}) does not exist")
    ctx.reply(definition.help_string(ctx.prefix))


def handle_commands(ctx: CommandContext) -> None:
    ctx.reply(_command_list(ctx))


def handle_info(ctx: CommandContext) -> None:
    p = ctx.prefix
    ctx.reply(
        f"{p}setlos (team) (yard) | Sets the line of scrimmage position\n"
        f"{p}setdown (down) (yard) | Sets the down and distance\n"
        f"{p}setscore (team) (score) | Sets the score of a team\n"
        f"{p}setplayers | Sets the players in front of ball\n"
        f"{p}dd | Returns the down and distance\n"
        f"{p}swapo | Swaps offense and defense\n"
        f"{p}snap [run|pass] | Snaps the ball",
        auto_size=False,
    )


def handle_stats(ctx: CommandContext) -> None:
    game = ctx.game

    if ctx.has_no_params():
        player_stats = game.stats.get(ctx.author)
        if player_stats is None:
            raise CommandError("You do not have any stats yet")
        ctx.reply(player_stats.stats_string(), auto_size=False)
        return

    target = ctx.session.players.get_by_name_always(ctx.params_str)
    player_stats = game.stats.get(target)
    if player_stats is None:
        raise CommandError(f"Player {target.short_name} does not have any stats yet")
    ctx.reply(f"Stats {target.short_name}\n{player_stats.stats_string()}", auto_size=False)


def handle_score(ctx: CommandContext) -> None:
    ctx.reply(ctx.game.scoreboard_summary())


def handle_down_and_distance(ctx: CommandContext) -> None:
    ctx.reply(ctx.game.down_and_distance())


def handle_status(ctx: CommandContext) -> None:
    if ctx.session.is_bot_on:
        ctx.reply("The Bot is currently ON")
    else:
        ctx.reply("The Bot is currently OFF")


# =============================================================================
# Game state corrections
# =============================================================================


def handle_set_score(ctx: CommandContext) -> None:
    team_token, score_token = ctx.params
    score = int(score_token)
    max_score = ctx.session.config.max_score

    if score > max_score:
        raise CommandError("Score exceeds limit")
    if score < 0:
        raise CommandError("Score must be a positive integer")

    game = ctx.game
    game.set_score(TeamId.from_token(team_token), score)

    ctx.announce(f"Score updated by {ctx.author.short_name}")
    ctx.announce(game.scoreboard_summary())


def handle_set_los(ctx: CommandContext) -> None:
    team_token, yard_token = ctx.params
    yard = int(yard_token)

    if yard > MAX_LOS_YARD or yard < MIN_LOS_YARD:
        raise CommandError(f"Yardage must be a number between {MIN_LOS_YARD} and {MAX_LOS_YARD}")

    game = ctx.game
    position = FieldPosition.from_team_yard(yard, TeamId.from_token(team_token))
    game.machine.set_line_of_scrimmage(position)
    game.engine.place_ball(position)
    game.refresh_players()

    ctx.announce(f"LOS moved by {ctx.author.short_name}")
    ctx.announce(game.down_and_distance())


def handle_set_players(ctx: CommandContext) -> None:
    ctx.game.refresh_players()
    ctx.reply_success("Players set!")


def handle_set_down(ctx: CommandContext) -> None:
    game = ctx.game
    config = ctx.session.config

    down = int(ctx.params[0])
    yards = int(ctx.params[1]) if len(ctx.params) > 1 else game.down.yards_to_get

    if down > config.max_down or down < MIN_DOWN:
        raise CommandError(f"Down must be a number between {MIN_DOWN} and {config.max_down}")
    if yards > config.max_yards_to_get or yards < MIN_YARDS_TO_GET:
        raise CommandError(
            f"Distance must be a number between {MIN_YARDS_TO_GET} and {config.max_yards_to_get}"
        )

    game.machine.set_down(down)
    game.machine.set_yards_to_get(yards)

    ctx.announce(f"Down and Distance updated by {ctx.author.short_name}")
    ctx.announce(game.down_and_distance())


def handle_swap(ctx: CommandContext) -> None:
    session = ctx.session
    for player in session.players.swap_red_blue():
        session.engine.set_player_team(player.id, player.team)
    if session.has_active_game:
        session.game.refresh_players()
    ctx.announce("Teams swapped")


def handle_swap_offense(ctx: CommandContext) -> None:
    game = ctx.game
    offense = game.swap_offense()
    if game.down.line_of_scrimmage is not None:
        game.engine.place_ball(game.down.line_of_scrimmage)

    ctx.announce(
        f"Offense swapped by {ctx.author.short_name}, {offense.display} is now on offense"
    )
    ctx.announce(game.down_and_distance())


def handle_reset(ctx: CommandContext) -> None:
    ctx.game.hard_reset()
    ctx.announce(f"Hard reset ran by {ctx.author.short_name}")


def handle_release(ctx: CommandContext) -> None:
    ctx.game.engine.release_ball()
    ctx.reply_success("Ball released")


# =============================================================================
# Plays and game lifecycle
# =============================================================================


def handle_snap(ctx: CommandContext) -> None:
    play_type = PlayType.RUN if ctx.params and ctx.params[0] == "run" else PlayType.PASS
    ctx.game.start_play(create_play(play_type), ctx.author)
    ctx.announce(f"Hike! {ctx.author.short_name} snapped the ball ({play_type.value})")


def handle_punt(ctx: CommandContext) -> None:
    ctx.game.start_play(create_play(PlayType.PUNT), ctx.author)
    ctx.announce(f"{ctx.author.short_name} is punting")


def handle_new_game(ctx: CommandContext) -> None:
    ctx.session.start_new_game()
    ctx.announce(f"New game started by {ctx.author.short_name}")


def handle_end_game(ctx: CommandContext) -> None:
    game = ctx.game
    ctx.session.end_game()
    ctx.announce(f"Game ended by {ctx.author.short_name}. Final: {game.scoreboard_summary()}")


# =============================================================================
# Room toggles
# =============================================================================


def handle_flip(ctx: CommandContext) -> None:
    face = "Heads" if ctx.session.rng.randint(0, 99) > 50 else "Tails"
    ctx.announce(f"Coin Flip: {face}")


def handle_bot(ctx: CommandContext) -> None:
    (on_or_off,) = ctx.params
    session = ctx.session

    if on_or_off == "on":
        if session.is_bot_on:
            ctx.reply("The bot is already ON")
            return
        session.turn_bot_on()
        ctx.reply_success("The Bot has been turned ON")
    else:
        if not session.is_bot_on:
            ctx.reply("The bot is already OFF")
            return
        session.turn_bot_off()
        ctx.reply_success("The Bot has been turned OFF")
