"""Tests for the down/play state machine."""

import pytest

from haxfootball.core.enums import GamePhase, PlayStage, TeamId
from haxfootball.core.errors import InvariantViolation, PlayValidationError, SnapCooldownError
from haxfootball.core.models.field import FieldPosition
from haxfootball.plays import KickOff, PassPlay, Punt, RunPlay
from haxfootball.plays.base import Play


class ExplodingPlay(RunPlay):
    """Run play whose hooks fail on demand."""

    def __init__(self, fail_in: str) -> None:
        super().__init__()
        self.fail_in = fail_in

    def run(self, game):
        if self.fail_in == "run":
            raise RuntimeError("engine went away")
        super().run(game)

    def _clean_up(self, game, was_started):
        if self.fail_in == "clean_up":
            raise RuntimeError("cleanup failed")


class TestStartPlay:
    """Tests for starting plays."""

    def test_kickoff_without_player(self, game, engine):
        play = KickOff(time=0)
        game.start_play(play, None)

        assert game.active_play is play
        assert game.phase == GamePhase.PLAY_RUNNING
        assert play.stage == PlayStage.RUNNING
        assert play.started_at == 0
        assert engine.ball_position == FieldPosition(50)

    def test_snap_runs_full_lifecycle(self, game_at_red_25, red_player, engine):
        engine.time = 42.0
        play = PassPlay()
        game_at_red_25.start_play(play, red_player)

        assert play.triggered_by == red_player.id
        assert play.started_at == 42.0
        assert play.start_position == FieldPosition(25)
        assert game_at_red_25.players.is_on_offense(red_player)

    def test_second_play_rejected_while_one_is_live(self, game_at_red_25, red_player):
        first = RunPlay()
        game_at_red_25.start_play(first, red_player)

        with pytest.raises(PlayValidationError, match="already a play running"):
            game_at_red_25.start_play(PassPlay(), red_player)
        assert game_at_red_25.active_play is first

    def test_snap_requires_line_of_scrimmage(self, game, red_player):
        with pytest.raises(PlayValidationError, match="Line of scrimmage must be set"):
            game.start_play(RunPlay(), red_player)
        assert game.active_play is None

    def test_snap_requires_offense(self, game_at_red_25, blue_player):
        with pytest.raises(PlayValidationError, match="on offense"):
            game_at_red_25.start_play(RunPlay(), blue_player)

    def test_snap_requires_player(self, game_at_red_25):
        with pytest.raises(PlayValidationError):
            game_at_red_25.start_play(Punt(), None)

    def test_kickoff_by_defense_rejected(self, game, blue_player):
        with pytest.raises(PlayValidationError, match="kicking team"):
            game.start_play(KickOff(), blue_player)

    def test_failed_start_discards_play(self, game_at_red_25, red_player):
        play = ExplodingPlay(fail_in="run")
        with pytest.raises(RuntimeError):
            game_at_red_25.start_play(play, red_player)

        assert game_at_red_25.active_play is None
        assert game_at_red_25.phase == GamePhase.GAME_ACTIVE
        assert play.stage == PlayStage.CLEANED_UP

    def test_no_plays_after_game_end(self, game_at_red_25, red_player):
        game_at_red_25.end()
        with pytest.raises(PlayValidationError, match="The game is over"):
            game_at_red_25.start_play(RunPlay(), red_player)


class TestEndPlay:
    """Tests for ending plays and the snap cooldown."""

    def test_end_play_without_play_is_noop(self, game):
        assert game.end_play() is None
        assert not game.machine.cooldown.is_active

    def test_end_play_cleans_up(self, game_at_red_25, red_player):
        play = RunPlay()
        game_at_red_25.start_play(play, red_player)

        assert game_at_red_25.end_play() is play
        assert game_at_red_25.active_play is None
        assert play.stage == PlayStage.CLEANED_UP
        assert game_at_red_25.phase == GamePhase.GAME_ACTIVE

    def test_cleanup_failure_still_clears_slot(self, game_at_red_25, red_player):
        game_at_red_25.start_play(ExplodingPlay(fail_in="clean_up"), red_player)
        game_at_red_25.end_play()
        assert game_at_red_25.active_play is None

    def test_cooldown_blocks_next_play(self, game_at_red_25, red_player, clock):
        game_at_red_25.start_play(RunPlay(), red_player)
        game_at_red_25.end_play()

        assert not game_at_red_25.can_start_snap_play
        with pytest.raises(SnapCooldownError) as exc_info:
            game_at_red_25.start_play(RunPlay(), red_player)
        assert exc_info.value.remaining_seconds == pytest.approx(2.0)

        clock.advance(1.0)
        with pytest.raises(SnapCooldownError):
            game_at_red_25.start_play(RunPlay(), red_player)

        clock.advance(1.0)
        assert game_at_red_25.can_start_snap_play
        game_at_red_25.start_play(RunPlay(), red_player)

    def test_scheduler_clears_cooldown(self, game_at_red_25, red_player, clock, scheduler):
        game_at_red_25.start_play(RunPlay(), red_player)
        game_at_red_25.end_play()

        clock.advance(2.5)
        assert scheduler.run_pending() == 1
        assert not game_at_red_25.machine.cooldown.is_active

    def test_unstarted_snap_puts_ball_back(self, game_at_red_25, engine):
        play = RunPlay()
        play.clean_up(game_at_red_25)
        assert engine.ball_position == FieldPosition(25)

    def test_clean_up_is_idempotent(self, game_at_red_25):
        play: Play = RunPlay()
        play.clean_up(game_at_red_25)
        play.clean_up(game_at_red_25)
        assert play.stage == PlayStage.CLEANED_UP


class TestPossession:
    """Tests for offense/defense bookkeeping."""

    def test_defense_is_opposite_of_offense(self, game):
        assert game.offense_team_id == TeamId.RED
        assert game.defense_team_id == TeamId.BLUE

    def test_swap_offense(self, game, blue_player):
        assert game.swap_offense() == TeamId.BLUE
        assert game.defense_team_id == TeamId.RED
        assert game.players.is_on_offense(blue_player)

    def test_corrupted_offense_is_an_invariant_violation(self, game):
        game.machine.offense_team_id = TeamId.SPECTATORS
        with pytest.raises(InvariantViolation):
            game.defense_team_id

    def test_spectators_cannot_take_offense(self, game):
        with pytest.raises(InvariantViolation):
            game.machine.set_offense(TeamId.SPECTATORS)

    def test_hard_reset(self, game_at_red_25, red_player):
        game_at_red_25.machine.set_down(3)
        game_at_red_25.start_play(RunPlay(), red_player)

        game_at_red_25.hard_reset()

        assert game_at_red_25.active_play is None
        assert game_at_red_25.down.down == 1
        assert game_at_red_25.down.yards_to_get == 10
        assert game_at_red_25.down.line_of_scrimmage is None
