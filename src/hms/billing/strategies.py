"""Billing strategies and their application to a base bill.

A billing strategy is a plain function from a base amount to the amount
actually charged. Strategies carry no state and have no side effects.

Example usage:
    from hms.billing.strategies import apply_billing, insurance

    final = apply_billing(6000.0, insurance)  # 4200.0
"""

import logging
from typing import Callable, Dict

from hms.core.errors import UnknownStrategyError

logger = logging.getLogger(__name__)

BillingStrategy = Callable[[float], float]

INSURANCE_FACTOR = 0.7   # Insurer covers 30%
EMERGENCY_FACTOR = 1.2   # 20% emergency surcharge


def regular(amount: float) -> float:
    """Charge the base amount as-is."""
    return amount


def insurance(amount: float) -> float:
    """Charge the patient's share after insurance cover."""
    return amount * INSURANCE_FACTOR


def emergency(amount: float) -> float:
    """Charge the base amount plus the emergency surcharge."""
    return amount * EMERGENCY_FACTOR


STRATEGIES: Dict[str, BillingStrategy] = {
    "regular": regular,
    "insurance": insurance,
    "emergency": emergency,
}


def get_strategy(name: str) -> BillingStrategy:
    """Look up a billing strategy by name (case-insensitive).

    Raises:
        UnknownStrategyError: If no strategy is registered under name.
    """
    try:
        return STRATEGIES[name.lower()]
    except KeyError:
        raise UnknownStrategyError(
            f"Unknown billing strategy '{name}'. "
            f"Available: {', '.join(STRATEGIES)}"
        ) from None


def strategy_name(strategy: BillingStrategy) -> str:
    """Display name for a strategy function."""
    return getattr(strategy, "__name__", repr(strategy))


def apply_billing(amount: float, strategy: BillingStrategy) -> float:
    """Apply a billing strategy to a base amount.

    The strategy's result is returned unchanged: no rounding or clamping.

    Args:
        amount: Non-negative base bill.
        strategy: Fee-adjustment function.

    Returns:
        Adjusted amount to charge.

    Raises:
        TypeError: If strategy is not callable.
    """
    if not callable(strategy):
        raise TypeError(f"Billing strategy must be callable, got {strategy!r}")
    adjusted = strategy(amount)
    logger.debug(f"Applied {strategy_name(strategy)} billing: {amount} -> {adjusted}")
    return adjusted
