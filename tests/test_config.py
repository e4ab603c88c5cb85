"""Tests for room configuration."""

from haxfootball.config import RoomConfig, get_config, set_config


class TestRoomConfig:
    """Tests for RoomConfig."""

    def test_defaults(self, monkeypatch):
        for name in ("HAXFOOTBALL_COMMAND_PREFIX", "HAXFOOTBALL_SNAP_COOLDOWN", "HAXFOOTBALL_MAX_PLAYERS"):
            monkeypatch.delenv(name, raising=False)
        config = RoomConfig()

        assert config.command_prefix == "!"
        assert config.max_score == 100
        assert config.snap_cooldown_seconds == 2.0
        assert config.validate() == []

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("HAXFOOTBALL_COMMAND_PREFIX", "/")
        monkeypatch.setenv("HAXFOOTBALL_SNAP_COOLDOWN", "0.5")
        monkeypatch.setenv("HAXFOOTBALL_DEBUG", "TRUE")
        config = RoomConfig.from_env()

        assert config.command_prefix == "/"
        assert config.snap_cooldown_seconds == 0.5
        assert config.debug_mode

    def test_game_rules_from_environment(self, monkeypatch):
        monkeypatch.setenv("HAXFOOTBALL_MAX_SCORE", "50")
        monkeypatch.setenv("HAXFOOTBALL_MAX_DOWN", "3")
        monkeypatch.setenv("HAXFOOTBALL_TOUCHDOWN_POINTS", "6")
        monkeypatch.setenv("HAXFOOTBALL_TOUCHBACK_YARD", "20")
        config = RoomConfig.from_env()

        assert config.max_score == 50
        assert config.max_down == 3
        assert config.touchdown_points == 6
        assert config.touchback_yard == 20

    def test_validate(self):
        config = RoomConfig(command_prefix="", max_players=1, snap_cooldown_seconds=-1, touchback_yard=60)
        errors = config.validate()
        assert len(errors) == 4

    def test_singleton(self):
        custom = RoomConfig(room_name="Custom")
        set_config(custom)
        try:
            assert get_config() is custom
        finally:
            set_config(None)
        assert get_config() is not custom
        set_config(None)
