"""
Transient notifications.

Every user action ends with a short success or error message that
disappears on its own after a few seconds.
"""

import logging
import time
from typing import Callable, Optional

from .config import NOTIFICATION_TTL
from .models import Notification, NotificationKind

logger = logging.getLogger(__name__)


class Notifier:
    """
    Holds the single current notification.

    Expiry is lazy: nothing runs in the background, `current` just compares
    the clock with the notification's deadline. That is why an expiring
    message can never delay or interrupt a roster operation.

    A new notification replaces the previous one immediately.
    """

    def __init__(self, ttl: float = NOTIFICATION_TTL,
                 clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._current: Optional[Notification] = None

    @property
    def current(self) -> Optional[Notification]:
        if self._current is not None and self._clock() >= self._current.expires_at:
            self._current = None
        return self._current

    def success(self, text: str) -> Notification:
        logger.info(text)
        return self._show(text, NotificationKind.SUCCESS)

    def error(self, text: str) -> Notification:
        logger.warning(text)
        return self._show(text, NotificationKind.ERROR)

    def dismiss(self):
        self._current = None

    def _show(self, text: str, kind: NotificationKind) -> Notification:
        self._current = Notification(text=text, kind=kind, expires_at=self._clock() + self.ttl)
        return self._current
