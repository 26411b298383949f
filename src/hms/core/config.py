"""Desk configuration dataclasses."""

from dataclasses import dataclass, field


# Currency symbols for display
CURRENCY_SYMBOLS = {
    "INR": "₹",
    "GBP": "£",
    "USD": "$",
    "EUR": "€",
}


@dataclass
class NotificationConfig:
    """Configuration for the notification channel.

    Attributes:
        fail_open: Keep calling remaining handlers when one fails if True.
            Default False: the first failing handler aborts the publish.
    """

    fail_open: bool = False


@dataclass
class DeskConfig:
    """Admission desk configuration.

    Attributes:
        currency: Currency code used when displaying amounts.
        console_notifications: Subscribe the console printer at startup.
        notifications: Settings for the desk's notification channel.
    """

    currency: str = "INR"
    console_notifications: bool = True
    notifications: NotificationConfig = field(default_factory=NotificationConfig)

    def get_currency_symbol(self) -> str:
        """Get the currency symbol for display."""
        return CURRENCY_SYMBOLS.get(self.currency, self.currency)
