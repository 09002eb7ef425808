"""Main entry point for the Pomodoro CLI."""

import signal
from typing import Optional

import typer
from pydantic import ValidationError

from pomodoro_cli import __version__
from pomodoro_cli.commands import config
from pomodoro_cli.commands.decorators import AppError, command_wrapper
from pomodoro_cli.config import get_config_manager
from pomodoro_cli.models.timer import IntervalConfig, run_timer, show_summary
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console

app = typer.Typer(
    name="pomodoro",
    help="A terminal pomodoro timer.\n\nKeys: s start next, q end current / quit, r reset.",
)

console = get_console()

app.add_typer(config.app, name="config", help="Configuration management")


def _handle_sigterm(signum, frame):
    raise SystemExit(128 + signum)


def build_intervals(
    work: Optional[float], short_break: Optional[float], long_break: Optional[float]
) -> IntervalConfig:
    """Merge command-line durations over the configured defaults."""
    defaults = get_config_manager().config.intervals
    try:
        return IntervalConfig(
            work=defaults.work if work is None else work,
            short_break=defaults.short_break if short_break is None else short_break,
            long_break=defaults.long_break if long_break is None else long_break,
        )
    except ValidationError as e:
        problems = ", ".join(
            f"{'.'.join(str(part) for part in err['loc'])} {err['msg'].lower()}"
            for err in e.errors()
        )
        raise AppError(f"Invalid durations: {problems}", ERROR_INVALID_ARGS) from e


@command_wrapper
def start_timer(
    work: Optional[float], short_break: Optional[float], long_break: Optional[float]
) -> None:
    """Validate the durations and hand the terminal over to the timer."""
    intervals = build_intervals(work, short_break, long_break)
    get_logger().info(
        "intervals: work=%sm short=%sm long=%sm",
        intervals.work,
        intervals.short_break,
        intervals.long_break,
    )

    signal.signal(signal.SIGTERM, _handle_sigterm)
    completed = run_timer(intervals, get_config_manager().config, console)
    show_summary(completed, console)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    work: Optional[float] = typer.Option(
        None, "--work", "-w", help="Length of the work period in minutes [default: 25]"
    ),
    short_break: Optional[float] = typer.Option(
        None,
        "--shortbreak",
        "-s",
        help="Length of the short break in minutes [default: 5]",
    ),
    long_break: Optional[float] = typer.Option(
        None,
        "--longbreak",
        "-l",
        help="Length of the long break in minutes [default: 20]",
    ),
) -> None:
    """Start the pomodoro timer."""
    if ctx.invoked_subcommand is not None:
        return
    start_timer(work, short_break, long_break)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Pomodoro CLI[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
