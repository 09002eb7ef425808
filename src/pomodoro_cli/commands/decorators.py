"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomodoro_cli.models.timer.keyboard import TerminalError
from pomodoro_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_TERMINAL,
    get_exit_code_description,
    get_exit_code_name,
)
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Log command timing and turn failures into exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s [exit %s]",
                cmd,
                elapsed,
                str(e),
                get_exit_code_name(e.exit_code),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except (TerminalError, OSError) as e:
            elapsed = time.monotonic() - start
            logger.error(
                "terminal failure: %s (%.3fs) - %s [exit %s: %s]\n%s",
                cmd,
                elapsed,
                str(e),
                get_exit_code_name(ERROR_TERMINAL),
                get_exit_code_description(ERROR_TERMINAL),
                traceback.format_exc(),
            )
            format_error(f"Terminal error: {str(e)}")
            raise typer.Exit(code=ERROR_TERMINAL) from e

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s [exit %s]\n%s",
                cmd,
                elapsed,
                str(e),
                get_exit_code_name(ERROR_GENERAL),
                traceback.format_exc(),
            )
            # Generic fallback for unexpected crashes
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
