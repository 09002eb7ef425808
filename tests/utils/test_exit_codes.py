"""Tests for exit code helpers."""

from pomodoro_cli.utils import exit_codes


def test_codes_are_distinct():
    codes = [
        exit_codes.SUCCESS,
        exit_codes.ERROR_GENERAL,
        exit_codes.ERROR_INVALID_ARGS,
        exit_codes.ERROR_TERMINAL,
    ]
    assert len(set(codes)) == len(codes)


def test_names():
    assert exit_codes.get_exit_code_name(exit_codes.ERROR_TERMINAL) == "ERROR_TERMINAL"
    assert exit_codes.get_exit_code_name(99) == "UNKNOWN(99)"


def test_descriptions():
    assert "terminal" in exit_codes.get_exit_code_description(exit_codes.ERROR_TERMINAL)
    assert exit_codes.get_exit_code_description(99) == "Unknown error"
