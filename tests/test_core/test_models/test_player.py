"""Tests for the player model."""

from haxfootball.core.enums import TeamId
from haxfootball.core.models.player import Player


class TestPlayer:
    """Tests for Player."""

    def test_short_name_keeps_short_names(self):
        assert Player(id=1, name="Coach").short_name == "Coach"

    def test_short_name_truncates(self):
        player = Player(id=1, name="AVeryLongPlayerName")
        assert player.short_name == "AVeryLongPla..."

    def test_stats_key_prefers_auth(self):
        assert Player(id=9, name="A", auth="abc").stats_key == "abc"
        assert Player(id=9, name="A").stats_key == "#9"

    def test_admin_and_playing(self):
        player = Player(id=1, name="A", team=TeamId.BLUE, admin_level=1)
        assert player.is_admin
        assert player.is_playing
        assert not Player(id=2, name="B").is_playing
