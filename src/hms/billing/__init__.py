"""Billing layer: fee-adjustment strategies."""

from hms.billing.strategies import (
    BillingStrategy,
    STRATEGIES,
    regular,
    insurance,
    emergency,
    get_strategy,
    strategy_name,
    apply_billing,
)

__all__ = [
    "BillingStrategy",
    "STRATEGIES",
    "regular",
    "insurance",
    "emergency",
    "get_strategy",
    "strategy_name",
    "apply_billing",
]
