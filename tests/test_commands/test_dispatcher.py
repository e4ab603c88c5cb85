"""Tests for the command dispatch pipeline."""

from haxfootball.commands.definitions import (
    CommandDefinition,
    CommandParams,
    CommandPermissions,
    ParamType,
)
from haxfootball.commands.dispatcher import GENERIC_FAILURE, CommandDispatcher
from haxfootball.commands.registry import CommandRegistry
from haxfootball.core.enums import TeamId
from haxfootball.core.errors import InvariantViolation
from haxfootball.core.models.player import Player
from haxfootball.events import CommandExecutedEvent, CommandRejectedEvent


def _say(session, player, text):
    return session.dispatcher.dispatch(player, text)


class TestScenarios:
    """End-to-end command scenarios against a live game."""

    def test_setscore_over_limit_rejected(self, live_session, admin, chat):
        _say(live_session, admin, "!setscore red 150")

        assert chat.replies_to(admin) == ["Score exceeds limit"]
        assert chat.announcements == []
        assert live_session.game.score.red == 0

    def test_setscore_sets_and_announces(self, live_session, admin, chat):
        _say(live_session, admin, "!setscore red 10")

        assert live_session.game.score.red == 10
        assert chat.announcements == ["Score updated by Coach", "RED 10 - 0 BLUE"]

    def test_setdown_out_of_range_rejected(self, live_session, admin, chat):
        _say(live_session, admin, "!setdown 5")

        assert chat.replies_to(admin) == ["Down must be a number between 1 and 4"]
        assert live_session.game.down.down == 1

    def test_player_cannot_run_admin_command(self, live_session, red_player, chat):
        _say(live_session, red_player, "!setscore red 10")

        assert chat.replies_to(red_player) == ["You do not have permission to use this command"]
        assert live_session.game.score.red == 0

    def test_alias_runs_same_command(self, live_session, admin):
        _say(live_session, admin, "!sscore b 21")
        assert live_session.game.score.blue == 21


class TestRejections:
    """Tests for each validation stage."""

    def test_plain_chat_ignored(self, live_session, admin, chat):
        assert _say(live_session, admin, "nice catch") is False
        assert chat.lines == []

    def test_unknown_command(self, live_session, admin, chat):
        assert _say(live_session, admin, "!fly") is True
        assert chat.replies_to(admin) == ["Command (fly) does not exist"]

    def test_muted_player(self, live_session, muted_player, chat):
        _say(live_session, muted_player, "!flip")
        assert chat.replies_to(muted_player) == ["You cannot use this command while muted"]

    def test_muted_player_may_use_allowed_commands(self, live_session, muted_player, chat):
        _say(live_session, muted_player, "!dd")
        assert chat.replies_to(muted_player) == ["1st & 10 at BLUE 25"]

    def test_requires_game(self, session, admin, chat):
        _say(session, admin, "!score")
        assert chat.replies_to(admin) == ["There is no game in progress"]

    def test_forbidden_during_play(self, live_session, admin, blue_player, chat):
        _say(live_session, blue_player, "!snap")
        chat.clear()

        _say(live_session, admin, "!setlos red 20")
        assert chat.replies_to(admin) == ["You cannot use this command during a play"]

    def test_too_few_params(self, live_session, admin, chat):
        _say(live_session, admin, "!setscore red")
        assert chat.replies_to(admin) == [
            "Not enough parameters. Usage: !setscore blue 7, !setscore r 10"
        ]

    def test_too_many_params(self, live_session, admin, chat):
        _say(live_session, admin, "!dd now please")
        assert chat.replies_to(admin)[0].startswith("Too many parameters")

    def test_enumerated_param(self, live_session, admin, chat):
        _say(live_session, admin, "!setscore green 7")
        assert chat.replies_to(admin) == ["Parameter 1 must be one of: blue, b, red, r"]

    def test_enumerated_param_case_insensitive(self, live_session, admin):
        _say(live_session, admin, "!setscore RED 7")
        assert live_session.game.score.red == 7

    def test_number_param(self, live_session, admin, chat):
        _say(live_session, admin, "!setscore red seven")
        assert chat.replies_to(admin) == ["Parameter 2 must be a Number"]

    def test_signed_number_reaches_handler(self, live_session, admin, chat):
        _say(live_session, admin, "!setscore red -3")
        assert chat.replies_to(admin) == ["Score must be a positive integer"]

    def test_rejections_are_never_broadcast(self, live_session, admin, red_player, chat):
        _say(live_session, red_player, "!reset")
        _say(live_session, admin, "!setlos red 90")
        assert chat.announcements == []


class TestFolding:
    """Tests for skip_max_check parameter folding."""

    def test_player_name_with_spaces(self, live_session, admin, chat):
        live_session.add_player(Player(id=20, name="Big Al Ray", auth="bar", team=TeamId.RED))
        _say(live_session, admin, "!stats Big Al Ray")
        assert chat.replies_to(admin) == ["Player Big Al Ray does not have any stats yet"]


class TestReporting:
    """Tests for events and error containment."""

    def test_success_emits_executed(self, live_session, admin):
        events = []
        live_session.bus.subscribe(CommandExecutedEvent, events.append)
        _say(live_session, admin, "!sd 2 7")

        assert events[-1].command == "setdown"
        assert events[-1].params == ("2", "7")
        assert events[-1].player_id == admin.id

    def test_rejection_emits_rejected(self, live_session, red_player):
        events = []
        live_session.bus.subscribe(CommandRejectedEvent, events.append)
        _say(live_session, red_player, "!setscore red 1")

        assert events[-1].error_type == "CommandPermissionError"
        assert live_session.log.rejected_count == 1

    def _crashing_session(self, session, error):
        def explode(ctx):
            raise error

        registry = CommandRegistry(
            [
                CommandDefinition(
                    name="boom",
                    handler=explode,
                    description="Always fails",
                    permissions=CommandPermissions(),
                    params=CommandParams(min=0, max=1, types=(ParamType.CUSTOM,)),
                )
            ]
        )
        session.dispatcher = CommandDispatcher(session, registry)
        return session

    def test_invariant_violation_contained(self, session, admin, chat):
        self._crashing_session(session, InvariantViolation("offense corrupted"))
        assert _say(session, admin, "!boom") is True
        assert chat.replies_to(admin) == [GENERIC_FAILURE]

    def test_unexpected_exception_contained(self, session, admin, chat):
        self._crashing_session(session, KeyError("x"))
        _say(session, admin, "!boom")
        _say(session, admin, "!boom")
        assert chat.replies_to(admin) == [GENERIC_FAILURE, GENERIC_FAILURE]

    def test_corrupted_offense_during_command(self, live_session, admin, chat):
        live_session.game.machine.offense_team_id = TeamId.SPECTATORS
        _say(live_session, admin, "!swapo")
        assert chat.replies_to(admin) == [GENERIC_FAILURE]
