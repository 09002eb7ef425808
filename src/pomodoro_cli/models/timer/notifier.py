"""Best-effort desktop notifications."""

import threading

from plyer import notification

from pomodoro_cli.utils.logger import get_logger


class Notifier:
    """Fire-and-forget desktop notifier.

    Dispatch happens on a daemon thread so a slow notification daemon never
    stalls the countdown. Failures are logged and dropped.
    """

    def __init__(self, app_name: str = "Pomodoro", timeout: int = 10, enabled: bool = True):
        self.app_name = app_name
        self.timeout = timeout
        self.enabled = enabled
        self._logger = get_logger()

    def notify(self, message: str) -> None:
        if not self.enabled:
            self._logger.debug("notifications disabled, dropping: %s", message)
            return
        try:
            threading.Thread(
                target=self._send, args=(message,), name="notifier", daemon=True
            ).start()
        except RuntimeError as e:
            self._logger.debug("could not start notifier thread: %s", e)

    def _send(self, message: str) -> None:
        try:
            notification.notify(
                title=self.app_name,
                message=message,
                app_name=self.app_name,
                timeout=self.timeout,
            )
        except Exception as e:  # any backend failure is non-fatal
            self._logger.debug("notification failed: %s", e)
        else:
            self._logger.debug("notification sent: %s", message)
