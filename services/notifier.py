from dataclasses import dataclass
from typing import Callable
from utils.logging_setup import get_logger

logger = get_logger("finance_tracker.notifier")

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


@dataclass(frozen=True)
class Notice:
    title: str
    message: str
    severity: str = "info"      # 'info' | 'warning' | 'error'


class Notifier:
    """Fan-out of user-facing notices.

    Services report here; the window subscribes and shows a banner. Every
    notice is also logged so headless runs keep a trace. Notices sent while
    nobody listens are held and handed to the next subscriber.
    """

    def __init__(self):
        self._listeners: list[Callable[[Notice], None]] = []
        self._pending: list[Notice] = []

    def subscribe(self, listener: Callable[[Notice], None]):
        self._listeners.append(listener)
        pending, self._pending = self._pending, []
        for notice in pending:
            listener(notice)

    def unsubscribe(self, listener: Callable[[Notice], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, title: str, message: str, severity: str = "info"):
        notice = Notice(title, message, severity)
        logger.info("Notice [%s] %s: %s", severity, title, message)
        if not self._listeners:
            self._pending.append(notice)
            return
        for listener in list(self._listeners):
            listener(notice)

    def warning(self, title: str, message: str):
        self.notify(title, message, "warning")

    def error(self, title: str = "Error", message: str = GENERIC_ERROR_MESSAGE):
        self.notify(title, message, "error")
