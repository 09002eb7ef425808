"""Full-screen timer UI.

Every frame is rebuilt from a ``TimerView`` snapshot; the display keeps no
state between frames.
"""

import math
from dataclasses import dataclass

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .cycle import LONG_BREAK_EVERY, IntervalConfig, Mode, Phase, Running

MENU_COMMANDS = (
    ("s", "start next"),
    ("q", "quit"),
    ("r", "reset"),
)


@dataclass(frozen=True)
class TimerView:
    """Everything needed to draw one frame."""

    phase: Phase
    remaining: float
    position: int
    intervals: IntervalConfig
    long_break_every: int = LONG_BREAK_EVERY
    first_run: bool = True


def format_remaining(seconds: float) -> str:
    """Format seconds as MM:SS, rounding partial seconds up."""
    total = max(0, math.ceil(seconds))
    mins, secs = divmod(total, 60)
    return f"{mins:02d}:{secs:02d}"


def cycle_label(mode: Mode, position: int, long_break_every: int) -> str:
    """Describe where in the cycle the current interval sits."""
    if mode is Mode.WORK:
        return f"Pomodoro {position + 1} of {long_break_every}"
    if mode is Mode.SHORT_BREAK:
        return f"Break after pomodoro {position} of {long_break_every}"
    return f"Long break - {long_break_every} of {long_break_every} done"


class TimerDisplay:
    """Builds the fullscreen timer layout."""

    def create_layout(self, view: TimerView) -> Layout:
        """Create the timer layout with all components."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        if isinstance(view.phase, Running):
            title, color = self._title(view.phase.mode)
            body = self._create_running_body(view, view.phase)
            footer = Text(
                "Press 'q' to end current  •  'r' to reset", style="dim", justify="center"
            )
        else:
            title, color = "Pomodoro", "cyan"
            body = self._create_menu_body(view.first_run)
            footer = Text(
                "Press 's' to start  •  'r' to reset  •  'q' to quit",
                style="dim",
                justify="center",
            )

        header_text = Text(f"🍅  {title}", style=f"bold {color}", justify="center")
        layout["header"].update(Align.center(header_text, vertical="middle"))
        layout["body"].update(Align.center(body, vertical="middle"))
        layout["footer"].update(Align.center(footer, vertical="middle"))
        return layout

    @staticmethod
    def _title(mode: Mode) -> tuple[str, str]:
        if mode is Mode.WORK:
            return "Time to Work!", "red"
        return "Time to Chill", "green"

    def _create_menu_body(self, first_run: bool) -> Panel:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold cyan", justify="right")
        table.add_column()
        for key, description in MENU_COMMANDS:
            table.add_row(key, description)

        title = "Start your first Pomodoro!" if first_run else "Pomodoro"
        return Panel(table, title=title, border_style="cyan", padding=(1, 2))

    def _create_running_body(self, view: TimerView, phase: Running) -> Group:
        components = []

        remaining = max(0.0, view.remaining)
        timer_color = "cyan"
        if phase.mode is Mode.WORK and remaining < 60:
            timer_color = "red"

        clock = Text(justify="center")
        clock.append(" " * 10)
        clock.append(format_remaining(remaining), style=f"bold {timer_color}")
        clock.append(" " * 10)
        components.append(clock)
        components.append(Text(""))  # Spacer

        total_seconds = view.intervals.seconds(phase.mode)
        elapsed = total_seconds - remaining
        progress_pct = min(100, int((elapsed / total_seconds) * 100))

        bar_width = 40
        filled = int(bar_width * progress_pct / 100)
        progress_bar = "▓" * filled + "░" * (bar_width - filled)
        components.append(
            Text(progress_bar + f"  {progress_pct}%", style="dim", justify="center")
        )
        components.append(Text(""))  # Spacer

        components.append(
            Text(
                cycle_label(phase.mode, view.position, view.long_break_every),
                style="bold",
                justify="center",
            )
        )
        return Group(*components)


def show_summary(completed: int, console: Console | None = None):
    """Show how many pomodoros were finished once the timer screen closes."""
    console = console or Console()

    noun = "pomodoro" if completed == 1 else "pomodoros"
    panel = Panel(
        f"""[bold green]🍅 Session finished[/bold green]

Completed: {completed} {noun}""",
        border_style="green",
        padding=(1, 2),
    )

    console.print(panel)
