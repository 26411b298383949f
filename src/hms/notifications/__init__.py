"""Notification layer: publish/subscribe channel and console handler."""

from hms.notifications.channel import (
    NotificationChannel,
    NotificationHandler,
    NOTIFICATION_PREFIX,
    console_handler,
)

__all__ = [
    "NotificationChannel",
    "NotificationHandler",
    "NOTIFICATION_PREFIX",
    "console_handler",
]
