"""
Transient user notifications ("toasts") emitted by client actions.

Actions receive a Notifier callable; the default NotificationCenter keeps
the messages in order and logs each one.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List

from cpa_calculator.models.enums import NotificationVariant


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    title: str
    description: str = ""
    variant: NotificationVariant = NotificationVariant.DEFAULT


Notifier = Callable[[Notification], None]


class NotificationCenter:
    """Collects notifications for a UI to drain and display."""

    def __init__(self) -> None:
        self._pending: List[Notification] = []

    def __call__(self, notification: Notification) -> None:
        if notification.variant is NotificationVariant.DESTRUCTIVE:
            logger.warning(f"{notification.title}: {notification.description}")
        else:
            logger.info(f"{notification.title}: {notification.description}")
        self._pending.append(notification)

    @property
    def pending(self) -> List[Notification]:
        return list(self._pending)

    def drain(self) -> List[Notification]:
        """Return and clear every notification not yet shown."""
        drained, self._pending = self._pending, []
        return drained


def discard_notification(notification: Notification) -> None:
    """Notifier for headless use: log only."""
    logger.debug(f"Notification: {notification.title}")
