"""Pomodoro cycle state machine.

The machine owns a single phase (``Menu`` or ``Running``) and the cycle
position. Remaining time is never stored: it is always derived from the
phase start stamp and the time passed in by the caller, so the countdown
cannot drift from the clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from pomodoro_cli.utils.logger import get_logger

LONG_BREAK_EVERY = 4

# Longest accepted interval: one day.
MAX_MINUTES = 24 * 60


class Mode(str, Enum):
    """Kind of interval being counted down."""

    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


class IntervalConfig(BaseModel):
    """Interval durations in minutes, fixed for the lifetime of the process."""

    model_config = ConfigDict(frozen=True)

    work: float = Field(
        default=25,
        gt=0,
        le=MAX_MINUTES,
        allow_inf_nan=False,
        description="Work interval (minutes)",
    )
    short_break: float = Field(
        default=5,
        gt=0,
        le=MAX_MINUTES,
        allow_inf_nan=False,
        description="Short break (minutes)",
    )
    long_break: float = Field(
        default=20,
        gt=0,
        le=MAX_MINUTES,
        allow_inf_nan=False,
        description="Long break (minutes)",
    )

    def minutes(self, mode: Mode) -> float:
        if mode is Mode.WORK:
            return self.work
        elif mode is Mode.SHORT_BREAK:
            return self.short_break
        else:  # long break
            return self.long_break

    def seconds(self, mode: Mode) -> float:
        return self.minutes(mode) * 60


@dataclass(frozen=True)
class Menu:
    """Idle, waiting for the start command."""


@dataclass(frozen=True)
class Running:
    """Counting down ``mode`` since the monotonic timestamp ``started_at``."""

    mode: Mode
    started_at: float


Phase = Menu | Running


@dataclass(frozen=True)
class Transition:
    """A natural transition: ``completed`` ran out and ``next_mode`` began."""

    completed: Mode
    next_mode: Mode
    position: int

    @property
    def message(self) -> str:
        if self.completed is Mode.WORK:
            if self.next_mode is Mode.LONG_BREAK:
                return "Work session complete - time for a long break!"
            return "Work session complete - time for a break!"
        if self.completed is Mode.LONG_BREAK:
            return "Long break over - ready for a new cycle?"
        return "Break over - ready for another round?"


class CycleStateMachine:
    """Work / short break / long break cycle driven by time and commands.

    Invalid commands (``start`` while running) are ignored, never errors.
    """

    def __init__(
        self, intervals: IntervalConfig, long_break_every: int = LONG_BREAK_EVERY
    ):
        self.intervals = intervals
        self.long_break_every = long_break_every
        self.phase: Phase = Menu()
        self.position = 0
        self._logger = get_logger()

    @property
    def is_running(self) -> bool:
        return isinstance(self.phase, Running)

    def start(self, now: float) -> None:
        """Begin a work interval from the menu; ignored while running."""
        if self.is_running:
            return
        self.phase = Running(Mode.WORK, now)
        self._logger.info("started work interval (position %d)", self.position)

    def reset(self, now: float) -> None:
        """Abort whatever is happening and restart the head of the work cycle."""
        self.phase = Running(Mode.WORK, now)
        self.position = 0
        self._logger.info("cycle reset")

    def quit(self) -> bool:
        """Return to the menu; at the menu, return True to request exit."""
        if self.is_running:
            self._logger.info("abandoned %s interval", self.phase.mode.value)
            self.phase = Menu()
            return False
        return True

    def remaining(self, now: float) -> float:
        """Seconds left in the current interval, clamped at zero."""
        if not isinstance(self.phase, Running):
            return 0.0
        elapsed = now - self.phase.started_at
        return max(0.0, self.intervals.seconds(self.phase.mode) - elapsed)

    def tick(self, now: float) -> Transition | None:
        """Advance to the next interval if the current one has run out.

        At most one transition happens per call. A host that slept through
        several intervals sees a single completion and the next interval
        starts fresh at ``now``.
        """
        if not isinstance(self.phase, Running) or self.remaining(now) > 0:
            return None

        completed = self.phase.mode
        if completed is Mode.WORK:
            if (self.position + 1) % self.long_break_every == 0:
                next_mode = Mode.LONG_BREAK
                self.position = 0
            else:
                next_mode = Mode.SHORT_BREAK
                self.position += 1
        else:
            next_mode = Mode.WORK

        self.phase = Running(next_mode, now)
        self._logger.info(
            "%s complete, starting %s (position %d)",
            completed.value,
            next_mode.value,
            self.position,
        )
        return Transition(completed, next_mode, self.position)
