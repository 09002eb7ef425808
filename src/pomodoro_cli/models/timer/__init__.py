"""Pomodoro timer core: cycle state machine, main loop and its adapters."""

from .clock import MonotonicClock
from .cycle import (
    LONG_BREAK_EVERY,
    CycleStateMachine,
    IntervalConfig,
    Menu,
    Mode,
    Running,
    Transition,
)
from .keyboard import KeyboardHandler, TerminalError
from .loop import KEY_COMMANDS, Command, TimerLoop, run_timer
from .notifier import Notifier
from .ui import TimerDisplay, TimerView, format_remaining, show_summary

__all__ = [
    "LONG_BREAK_EVERY",
    "Command",
    "CycleStateMachine",
    "IntervalConfig",
    "KEY_COMMANDS",
    "KeyboardHandler",
    "Menu",
    "Mode",
    "MonotonicClock",
    "Notifier",
    "Running",
    "TerminalError",
    "TimerDisplay",
    "TimerLoop",
    "TimerView",
    "Transition",
    "format_remaining",
    "run_timer",
    "show_summary",
]
