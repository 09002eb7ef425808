"""Tests for the config commands using CliRunner."""

from typer.testing import CliRunner

from pomodoro_cli.commands.config import app, parse_value
from pomodoro_cli.config import get_config_manager
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS

runner = CliRunner()


class TestParseValue:
    def test_bool(self):
        assert parse_value("True") is True
        assert parse_value("false") is False

    def test_int(self):
        assert parse_value("30") == 30

    def test_float(self):
        assert parse_value("0.5") == 0.5

    def test_str(self):
        assert parse_value("Tomato") == "Tomato"


class TestConfigCommands:
    def test_show(self):
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 0
        assert '"work": 25' in result.stdout

    def test_get(self):
        result = runner.invoke(app, ["get", "intervals.short_break"])
        assert result.exit_code == 0
        assert "5" in result.stdout

    def test_get_unknown(self):
        result = runner.invoke(app, ["get", "intervals.nope"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "not found" in result.stdout

    def test_set(self):
        result = runner.invoke(app, ["set", "intervals.work", "50"])
        assert result.exit_code == 0
        assert get_config_manager().get("intervals.work") == 50

    def test_set_invalid_value(self):
        result = runner.invoke(app, ["set", "intervals.work", "0"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Invalid value" in result.stdout
        assert get_config_manager().get("intervals.work") == 25

    def test_set_negative_value_after_separator(self):
        result = runner.invoke(app, ["set", "--", "intervals.work", "-5"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Invalid value" in result.stdout

    def test_set_numeric_string_on_text_field(self):
        result = runner.invoke(app, ["set", "notifications.app_name", "2024"])
        assert result.exit_code == 0
        assert get_config_manager().get("notifications.app_name") == "2024"

    def test_set_bool_word_on_text_field(self):
        result = runner.invoke(app, ["set", "notifications.app_name", "true"])
        assert result.exit_code == 0
        assert get_config_manager().get("notifications.app_name") == "true"

    def test_set_bool_field(self):
        result = runner.invoke(app, ["set", "notifications.enabled", "false"])
        assert result.exit_code == 0
        assert get_config_manager().get("notifications.enabled") is False

    def test_set_unknown_key(self):
        result = runner.invoke(app, ["set", "colour", "red"])
        assert result.exit_code == ERROR_INVALID_ARGS

    def test_reset_with_yes(self):
        get_config_manager().set("intervals.work", 40)
        result = runner.invoke(app, ["reset", "intervals.work", "--yes"])
        assert result.exit_code == 0
        assert get_config_manager().get("intervals.work") == 25

    def test_reset_cancelled(self):
        get_config_manager().set("intervals.work", 40)
        result = runner.invoke(app, ["reset"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.stdout
        assert get_config_manager().get("intervals.work") == 40
