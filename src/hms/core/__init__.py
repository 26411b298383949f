"""Core foundation layer: entities, errors, desk configuration."""

from hms.core.entities import PatientType, PATIENT_TYPE_LABELS
from hms.core.config import CURRENCY_SYMBOLS, DeskConfig, NotificationConfig
from hms.core.errors import (
    HMSError,
    InvalidSelectionError,
    UnknownStrategyError,
    NotificationError,
)

__all__ = [
    "PatientType",
    "PATIENT_TYPE_LABELS",
    "CURRENCY_SYMBOLS",
    "DeskConfig",
    "NotificationConfig",
    "HMSError",
    "InvalidSelectionError",
    "UnknownStrategyError",
    "NotificationError",
]
