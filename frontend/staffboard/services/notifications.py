from __future__ import annotations

import logging
import time
from collections.abc import Callable
from itertools import count

from staffboard.models.view import Notification, NotificationLevel

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5.0


class NotificationCenter:
    """Transient toasts that expire after a fixed interval or on dismissal."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._ids = count(1)
        self._items: list[Notification] = []

    def push(self, message: str, level: NotificationLevel = NotificationLevel.SUCCESS) -> Notification:
        notification = Notification(
            id=next(self._ids),
            message=message,
            level=level,
            expires_at=self._clock() + self.ttl_seconds,
        )
        self._items.append(notification)
        return notification

    def success(self, message: str) -> Notification:
        logger.info("Success: %s", message)
        return self.push(message, NotificationLevel.SUCCESS)

    def error(self, message: str) -> Notification:
        logger.error("Error: %s", message)
        return self.push(message, NotificationLevel.ERROR)

    def warning(self, message: str) -> Notification:
        logger.warning("Warning: %s", message)
        return self.push(message, NotificationLevel.WARNING)

    def dismiss(self, notification_id: int) -> bool:
        remaining = [n for n in self._items if n.id != notification_id]
        dismissed = len(remaining) != len(self._items)
        self._items = remaining
        return dismissed

    def active(self) -> list[Notification]:
        now = self._clock()
        self._items = [n for n in self._items if n.expires_at > now]
        return list(self._items)

    def clear(self) -> None:
        self._items = []
