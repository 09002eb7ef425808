"""Shared test fixtures and configuration.

Keeps tests away from the real log and config directories and provides a
controllable clock.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> float:
        self.current += seconds
        return self.current


@pytest.fixture()
def clock():
    return FakeClock()


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send log output to a temporary directory."""
    import pomodoro_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("pomodoro_cli").handlers.clear()
    with patch(
        "pomodoro_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        yield
    logging.getLogger("pomodoro_cli").handlers.clear()
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point the config manager at a temporary directory."""
    import pomodoro_cli.config as config_mod

    config_mod._config_manager = None
    with patch(
        "pomodoro_cli.config.user_config_dir", return_value=str(tmp_path / "config")
    ):
        yield tmp_path / "config"
    config_mod._config_manager = None
