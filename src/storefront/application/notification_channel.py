"""Single-slot channel for transient user feedback.

Only the newest notification is held; showing a new one replaces the
old. The channel owns no timers: the UI layer clears it after
``DISPLAY_SECONDS``, restarting its countdown on every new id.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from storefront.domain.model.identity import MonotonicIdGenerator, nanosecond_ids
from storefront.domain.model.notification import Notification, NotificationKind

logger = logging.getLogger(__name__)

DISPLAY_SECONDS = 3.0

Listener = Callable[[Notification | None], None]


class NotificationChannel:

    def __init__(self, ids: MonotonicIdGenerator | None = None) -> None:
        self._ids = ids or nanosecond_ids()
        self._current: Notification | None = None
        self._listeners: list[Listener] = []

    @property
    def current(self) -> Notification | None:
        return self._current

    def show(self, message: str, kind: NotificationKind = NotificationKind.SUCCESS) -> Notification:
        notification = Notification(message=message, kind=kind, id=self._ids.next_id())
        self._current = notification
        if kind is NotificationKind.ERROR:
            logger.warning("Notification: %s", message)
        self._emit()
        return notification

    def error(self, message: str) -> Notification:
        return self.show(message, NotificationKind.ERROR)

    def clear(self) -> None:
        self._current = None
        self._emit()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self._current)
