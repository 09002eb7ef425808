"""Tests for configuration management."""

import json

import pytest
from pydantic import ValidationError

from pomodoro_cli.config import Config, ConfigManager, get_config_manager


def test_default_config():
    """Test default configuration."""
    config = Config()
    assert config.intervals.work == 25
    assert config.intervals.short_break == 5
    assert config.intervals.long_break == 20
    assert config.notifications.enabled is True
    assert config.ui.tick_interval == 0.05


def test_config_manager_uses_user_config_dir(isolated_config):
    """Config file lives in the platformdirs config directory."""
    manager = ConfigManager()
    assert manager.config_file == isolated_config / "config.json"
    assert isolated_config.is_dir()


def test_missing_file_gives_defaults():
    assert ConfigManager().config == Config()


def test_config_save_load():
    """Values written by one manager are read back by the next."""
    manager = ConfigManager()
    manager.set("intervals.work", 50)
    assert manager.get("intervals.work") == 50

    assert ConfigManager().get("intervals.work") == 50


def test_saved_file_is_json():
    manager = ConfigManager()
    manager.set("notifications.enabled", False)

    data = json.loads(manager.config_file.read_text())
    assert data["notifications"]["enabled"] is False
    assert data["intervals"]["short_break"] == 5


def test_corrupted_file_falls_back_to_defaults():
    manager = ConfigManager()
    manager.config_file.write_text("{not json")
    assert manager.load_config() == Config()


def test_invalid_values_in_file_fall_back_to_defaults():
    manager = ConfigManager()
    manager.config_file.write_text(json.dumps({"intervals": {"work": -1}}))
    assert manager.load_config() == Config()


def test_get_unknown_key_returns_none():
    manager = ConfigManager()
    assert manager.get("intervals.nope") is None
    assert manager.get("missing") is None


def test_set_unknown_key_raises():
    with pytest.raises(KeyError):
        ConfigManager().set("intervals.nope", 3)


def test_set_invalid_value_raises_and_keeps_old_value():
    manager = ConfigManager()
    with pytest.raises(ValidationError):
        manager.set("intervals.work", 0)
    assert manager.get("intervals.work") == 25


def test_reset_single_key():
    manager = ConfigManager()
    manager.set("intervals.long_break", 30)
    manager.reset("intervals.long_break")
    assert manager.get("intervals.long_break") == 20


def test_reset_everything():
    manager = ConfigManager()
    manager.set("intervals.work", 45)
    manager.set("ui.tick_interval", 0.1)
    manager.reset()
    assert manager.config == Config()
    assert ConfigManager().config == Config()


def test_reset_unknown_key_raises():
    with pytest.raises(KeyError):
        ConfigManager().reset("bogus.key")


def test_get_config_manager_is_singleton():
    assert get_config_manager() is get_config_manager()
