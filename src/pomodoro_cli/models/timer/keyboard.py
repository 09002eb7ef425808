"""POSIX keyboard input handler for timer controls."""

import os
import select
import sys
import termios
import tty
from typing import Optional

from pomodoro_cli.utils.logger import get_logger


class TerminalError(Exception):
    """The terminal could not be put into (or restored from) cbreak mode."""


class KeyboardHandler:
    """Non-blocking keyboard input handler.

    Use as a context manager so the saved terminal settings are restored on
    every way out of the ``with`` block.
    """

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Put a TTY stdin into cbreak mode; leave pipes alone."""
        if not sys.stdin.isatty():
            get_logger().debug("stdin is not a tty, keyboard left in cooked mode")
            return
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error as e:
            self.stop()
            raise TerminalError(f"Cannot configure terminal: {e}") from e

    def get_key(self) -> Optional[str]:
        """
        Get a single keypress without blocking.

        Returns the key character or None if no key pressed. Reads one byte
        straight from the descriptor so any further pending keys stay visible
        to the next select.
        """
        if select.select([self.fd], [], [], 0)[0]:
            key = os.read(self.fd, 1).decode(errors="ignore")
            return key.lower() or None
        return None

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error as e:
                get_logger().warning("failed to restore terminal settings: %s", e)
            self.old_settings = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

