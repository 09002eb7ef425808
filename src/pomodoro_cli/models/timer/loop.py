"""Main timer loop: keyboard + clock in, notifications + frames out."""

import time
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

from rich.console import Console, RenderableType
from rich.live import Live

from pomodoro_cli.utils.logger import get_logger

from .clock import Clock, MonotonicClock
from .cycle import CycleStateMachine, IntervalConfig, Mode
from .keyboard import KeyboardHandler
from .notifier import Notifier
from .ui import TimerDisplay, TimerView

if TYPE_CHECKING:
    from pomodoro_cli.config import Config


class Command(str, Enum):
    """User commands understood by the loop."""

    START = "start"
    QUIT = "quit"
    RESET = "reset"


KEY_COMMANDS = {
    "s": Command.START,
    "q": Command.QUIT,
    "r": Command.RESET,
}


class TimerLoop:
    """Drives the cycle state machine at a fixed cadence.

    The cadence only decides how often the screen is refreshed and input is
    polled. Remaining time always comes from a fresh clock sample.
    """

    def __init__(
        self,
        machine: CycleStateMachine,
        keyboard,
        notifier: Notifier,
        draw: Callable[[RenderableType], None],
        clock: Clock | None = None,
        display: TimerDisplay | None = None,
        tick_interval: float = 0.05,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.machine = machine
        self.keyboard = keyboard
        self.notifier = notifier
        self.draw = draw
        self.clock = clock or MonotonicClock()
        self.display = display or TimerDisplay()
        self.tick_interval = tick_interval
        self.sleep = sleep
        self.first_run = True
        self.completed = 0
        self._logger = get_logger()

    def view(self, now: float) -> TimerView:
        return TimerView(
            phase=self.machine.phase,
            remaining=self.machine.remaining(now),
            position=self.machine.position,
            intervals=self.machine.intervals,
            long_break_every=self.machine.long_break_every,
            first_run=self.first_run,
        )

    def apply(self, command: Command, now: float) -> bool:
        """Apply a command. Returns False when the process should exit."""
        self._logger.debug("command: %s", command.value)
        if command is Command.START:
            self.machine.start(now)
        elif command is Command.RESET:
            self.machine.reset(now)
        elif command is Command.QUIT:
            if self.machine.quit():
                return False

        if self.machine.is_running:
            self.first_run = False
        return True

    def step(self) -> bool:
        """Run one iteration. Returns False once the user quit from the menu."""
        key = self.keyboard.get_key()
        now = self.clock.now()

        command = KEY_COMMANDS.get(key) if key else None
        if command is not None and not self.apply(command, now):
            return False

        transition = self.machine.tick(now)
        if transition is not None:
            if transition.completed is Mode.WORK:
                self.completed += 1
            self.notifier.notify(transition.message)

        self.draw(self.display.create_layout(self.view(now)))
        return True

    def run(self) -> int:
        """Loop until the user quits from the menu; returns completed pomodoros."""
        self._logger.info("timer loop started")
        while self.step():
            self.sleep(self.tick_interval)
        self._logger.info("timer loop stopped, %d pomodoros completed", self.completed)
        return self.completed


def run_timer(
    intervals: IntervalConfig, config: "Config", console: Console | None = None
) -> int:
    """Run the interactive timer until the user quits.

    The keyboard is put into cbreak mode and the alternate screen is used
    only inside the ``with`` block, so both are restored on any exit.
    """
    console = console or Console()
    notifier = Notifier(
        app_name=config.notifications.app_name,
        timeout=config.notifications.timeout,
        enabled=config.notifications.enabled,
    )
    machine = CycleStateMachine(intervals)
    display = TimerDisplay()
    loop = None

    try:
        with KeyboardHandler() as keyboard, Live(
            console=console,
            screen=True,
            auto_refresh=False,
        ) as live:
            loop = TimerLoop(
                machine,
                keyboard,
                notifier,
                draw=lambda renderable: live.update(renderable, refresh=True),
                display=display,
                tick_interval=config.ui.tick_interval,
            )
            loop.run()
    except KeyboardInterrupt:
        get_logger().info("timer interrupted")

    return loop.completed if loop else 0
