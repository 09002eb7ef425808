"""Terminal pomodoro timer."""

__version__ = "0.1.0"
