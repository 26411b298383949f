"""In-process publish/subscribe channel for desk notifications.

Handlers are plain callables taking the message string. They run
synchronously, on the publishing thread, in subscription order.

Example usage:
    from hms.notifications.channel import NotificationChannel, console_handler

    channel = NotificationChannel()
    channel.subscribe(console_handler)
    channel.publish("Patient John admitted successfully.")
    # [NOTIFICATION] Patient John admitted successfully.
"""

import logging
from typing import Callable, List, Optional

from hms.core.config import NotificationConfig
from hms.core.errors import NotificationError

logger = logging.getLogger(__name__)

NotificationHandler = Callable[[str], None]

NOTIFICATION_PREFIX = "[NOTIFICATION]"


def console_handler(message: str) -> None:
    """Print a notification to stdout."""
    print(f"{NOTIFICATION_PREFIX} {message}")


class NotificationChannel:
    """Carries text messages to registered handlers.

    With the default config a failing handler aborts the publish: later
    handlers are not called and the failure is raised as
    NotificationError. With fail_open=True each failure is logged and the
    remaining handlers still run.

    Attributes:
        config: NotificationConfig with failure settings
    """

    def __init__(self, config: Optional[NotificationConfig] = None):
        self.config = config or NotificationConfig()
        self._handlers: List[NotificationHandler] = []

    def subscribe(self, handler: NotificationHandler) -> None:
        """Register a handler to receive every published message.

        Args:
            handler: Callable that receives the message string
        """
        self._handlers.append(handler)
        logger.info(f"Subscribed notification handler: {_handler_name(handler)}")

    def unsubscribe(self, handler: NotificationHandler) -> None:
        """Remove a handler.

        Note:
            Silently succeeds if handler is not subscribed.
        """
        if handler in self._handlers:
            self._handlers.remove(handler)
            logger.info(f"Unsubscribed notification handler: {_handler_name(handler)}")

    @property
    def subscribers(self) -> List[NotificationHandler]:
        """Currently subscribed handlers, in call order."""
        return list(self._handlers)

    def publish(self, message: str) -> None:
        """Deliver a message to every subscribed handler.

        A publish with no subscribers does nothing.

        Raises:
            NotificationError: If a handler fails and fail_open is False.
        """
        if not self._handlers:
            logger.debug(f"No subscribers for notification: {message}")
            return

        for handler in list(self._handlers):
            try:
                handler(message)
            except Exception as e:
                name = _handler_name(handler)
                if not self.config.fail_open:
                    logger.error(f"Notification handler {name} failed: {e}")
                    raise NotificationError(
                        f"Notification handler {name} failed: {e}"
                    ) from e
                logger.warning(f"Notification handler {name} failed: {e}")


def _handler_name(handler: NotificationHandler) -> str:
    return getattr(handler, "__qualname__", repr(handler))
