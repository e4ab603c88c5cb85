"""Tests for GameState scoring and play resolution."""

import pytest

from haxfootball.core.enums import DownOutcome, PlayType, TeamId
from haxfootball.core.errors import InvariantViolation
from haxfootball.core.models.field import DownState, FieldPosition
from haxfootball.core.models.play import PlayResult
from haxfootball.events import PlayEndedEvent, PossessionChangedEvent, ScoreChangedEvent
from haxfootball.game.state import to_clock
from haxfootball.plays import KickOff, PassPlay, Punt, RunPlay


def _capture(game, event_type):
    events = []
    game.bus.subscribe(event_type, events.append)
    return events


class TestClock:
    """Tests for the MM:SS helper."""

    def test_formats_minutes_and_seconds(self):
        assert to_clock(0) == "00:00"
        assert to_clock(75.9) == "01:15"
        assert to_clock(-3) == "00:00"

    def test_current_clock_reads_engine(self, game, engine):
        engine.time = 125
        assert game.current_clock() == "02:05"


class TestScore:
    """Tests for score mutations."""

    def test_set_score_reads_back(self, game):
        game.set_score(TeamId.RED, 10)
        assert game.score.red == 10
        assert game.score.blue == 0

    def test_set_score_emits_correction(self, game):
        events = _capture(game, ScoreChangedEvent)
        game.set_score(TeamId.BLUE, 3)

        assert len(events) == 1
        assert events[0].is_correction
        assert events[0].blue_score == 3
        assert events[0].game_id == game.id

    def test_add_score_order_independent(self, game):
        game.add_score(TeamId.RED, 7)
        game.add_score(TeamId.BLUE, 3)
        first = (game.score.red, game.score.blue)

        game.set_score(TeamId.RED, 0)
        game.set_score(TeamId.BLUE, 0)
        game.add_score(TeamId.BLUE, 3)
        game.add_score(TeamId.RED, 7)

        assert (game.score.red, game.score.blue) == first == (7, 3)

    def test_scoreboard_summary(self, game):
        game.set_score(TeamId.RED, 14)
        assert game.scoreboard_summary() == "RED 14 - 0 BLUE"


class TestResolveScrimmage:
    """Tests for resolving run and pass plays."""

    def test_requires_live_play(self, game_at_red_25):
        with pytest.raises(InvariantViolation):
            game_at_red_25.resolve_play(PlayResult(PlayType.RUN, yards_gained=3))

    def test_short_gain(self, game_at_red_25, red_player):
        game_at_red_25.start_play(RunPlay(), red_player)
        outcome = game_at_red_25.resolve_play(
            PlayResult(PlayType.RUN, yards_gained=4, ball_carrier_id=red_player.id)
        )

        assert outcome == DownOutcome.NEXT_DOWN
        assert game_at_red_25.active_play is None
        assert game_at_red_25.down_and_distance() == "2nd & 6 at RED 29"
        assert game_at_red_25.stats.get(red_player).rush_yards == 4

    def test_incomplete_pass_keeps_spot(self, game_at_red_25, red_player):
        game_at_red_25.start_play(PassPlay(), red_player)
        game_at_red_25.resolve_play(PlayResult(PlayType.PASS, yards_gained=20, is_incomplete=True))

        assert game_at_red_25.down.down == 2
        assert game_at_red_25.down.line_of_scrimmage == FieldPosition(25)

    def test_first_down(self, game_at_red_25, red_player):
        game_at_red_25.start_play(PassPlay(), red_player)
        outcome = game_at_red_25.resolve_play(PlayResult(PlayType.PASS, yards_gained=12))

        assert outcome == DownOutcome.FIRST_DOWN
        assert game_at_red_25.down_and_distance() == "1st & 10 at RED 37"

    def test_turnover_on_downs(self, game_at_red_25, red_player):
        events = _capture(game_at_red_25, PossessionChangedEvent)
        game_at_red_25.machine.set_down(4)
        game_at_red_25.start_play(RunPlay(), red_player)
        outcome = game_at_red_25.resolve_play(PlayResult(PlayType.RUN, yards_gained=2))

        assert outcome == DownOutcome.TURNOVER_ON_DOWNS
        assert game_at_red_25.offense_team_id == TeamId.BLUE
        assert game_at_red_25.down.down == 1
        assert game_at_red_25.down.line_of_scrimmage == FieldPosition(27)
        assert events[-1].reason == "downs"

    def test_touchdown(self, game, red_player):
        game.machine.replace_down(DownState(down=2, yards_to_get=5, line_of_scrimmage=FieldPosition(95)))
        game.start_play(RunPlay(), red_player)
        outcome = game.resolve_play(PlayResult(PlayType.RUN, yards_gained=5, is_touchdown=True))

        assert outcome == DownOutcome.TOUCHDOWN
        assert game.score.red == 7
        assert game.offense_team_id == TeamId.BLUE
        assert game.down_and_distance() == "1st & 10 at BLUE 25"

    def test_engine_touchdown_counts_short_of_goal(self, game_at_red_25, red_player):
        """The engine decides touchdowns; the spot it reports does not overrule it."""
        game_at_red_25.start_play(RunPlay(), red_player)
        outcome = game_at_red_25.resolve_play(
            PlayResult(PlayType.RUN, yards_gained=20, ball_carrier_id=red_player.id, is_touchdown=True)
        )

        assert outcome == DownOutcome.TOUCHDOWN
        assert game_at_red_25.score.red == 7
        assert game_at_red_25.offense_team_id == TeamId.BLUE
        assert game_at_red_25.down_and_distance() == "1st & 10 at BLUE 25"
        assert game_at_red_25.stats.get(red_player).rush_tds == 1

    def test_emits_play_ended_with_result(self, game_at_red_25, red_player):
        events = _capture(game_at_red_25, PlayEndedEvent)
        result = PlayResult(PlayType.RUN, yards_gained=1)
        game_at_red_25.start_play(RunPlay(), red_player)
        game_at_red_25.resolve_play(result)

        assert events[-1].result is result
        assert events[-1].outcome == DownOutcome.NEXT_DOWN
        assert events[-1].down_and_distance == "2nd & 9 at RED 26"


class TestResolveKicksAndTurnovers:
    """Tests for possession-changing plays."""

    def test_kickoff_touchback(self, game):
        game.start_play(KickOff(), None)
        outcome = game.resolve_play(PlayResult(PlayType.KICKOFF))

        assert outcome == DownOutcome.FIRST_DOWN
        assert game.offense_team_id == TeamId.BLUE
        assert game.down.line_of_scrimmage == FieldPosition(75)

    def test_kickoff_return_to_spot(self, game):
        game.start_play(KickOff(), None)
        game.resolve_play(PlayResult(PlayType.KICKOFF, yards_gained=20, end_yard_line=60))

        assert game.offense_team_id == TeamId.BLUE
        assert game.down_and_distance() == "1st & 10 at BLUE 40"

    def test_punt(self, game_at_red_25, red_player):
        game_at_red_25.start_play(Punt(), red_player)
        game_at_red_25.resolve_play(PlayResult(PlayType.PUNT, end_yard_line=70, kicker_id=red_player.id))

        assert game_at_red_25.offense_team_id == TeamId.BLUE
        assert game_at_red_25.down.line_of_scrimmage == FieldPosition(70)
        assert game_at_red_25.stats.get(red_player).kicks == 1

    def test_kick_return_touchdown(self, game):
        game.start_play(KickOff(), None)
        outcome = game.resolve_play(PlayResult(PlayType.KICKOFF, is_touchdown=True))

        assert outcome == DownOutcome.TOUCHDOWN
        assert game.score.blue == 7
        assert game.offense_team_id == TeamId.RED

    def test_interception_at_spot(self, game_at_red_25, red_player, blue_player):
        game_at_red_25.start_play(PassPlay(), red_player)
        game_at_red_25.resolve_play(
            PlayResult(
                PlayType.PASS,
                is_interception=True,
                interceptor_id=blue_player.id,
                end_yard_line=40,
            )
        )

        assert game_at_red_25.offense_team_id == TeamId.BLUE
        assert game_at_red_25.down.line_of_scrimmage == FieldPosition(40)
        assert game_at_red_25.down.down == 1

    def test_pick_six(self, game_at_red_25, red_player):
        game_at_red_25.start_play(PassPlay(), red_player)
        game_at_red_25.resolve_play(PlayResult(PlayType.PASS, is_interception=True, is_touchdown=True))

        assert game_at_red_25.score.blue == 7
        assert game_at_red_25.offense_team_id == TeamId.RED
        assert game_at_red_25.down.line_of_scrimmage == FieldPosition(25)

    def test_fumble_without_spot_uses_gain(self, game_at_red_25, red_player):
        game_at_red_25.start_play(RunPlay(), red_player)
        game_at_red_25.resolve_play(PlayResult(PlayType.RUN, yards_gained=5, is_fumble_lost=True))

        assert game_at_red_25.offense_team_id == TeamId.BLUE
        assert game_at_red_25.down.line_of_scrimmage == FieldPosition(30)


class TestEnd:
    """Tests for ending the game."""

    def test_end_during_play_emits_play_ended(self, game):
        events = _capture(game, PlayEndedEvent)
        game.start_play(KickOff(time=0), None)
        game.end()

        assert game.is_over
        assert game.active_play is None
        assert len(events) == 1
        assert events[0].play_type == PlayType.KICKOFF
        assert events[0].result is None

    def test_end_without_play_emits_nothing(self, game):
        events = _capture(game, PlayEndedEvent)
        game.end()

        assert game.is_over
        assert events == []
