"""Exception types raised by the admission desk."""


class HMSError(Exception):
    """Base class for admission desk errors."""


class InvalidSelectionError(HMSError, ValueError):
    """Raised when a menu selection does not name a patient type."""


class UnknownStrategyError(HMSError, KeyError):
    """Raised when a billing strategy name is not registered."""


class NotificationError(HMSError):
    """Raised when a notification handler fails and failures are not isolated."""
