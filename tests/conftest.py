"""Pytest fixtures for HMS tests."""

import pytest

from hms.admission.workflow import AdmissionDesk
from hms.core.config import DeskConfig
from hms.model.patient import EmergencyPatient, InPatient, OutPatient


@pytest.fixture
def desk() -> AdmissionDesk:
    """Desk with the console notification printer subscribed."""
    return AdmissionDesk()


@pytest.fixture
def quiet_desk() -> AdmissionDesk:
    """Desk with no notification handlers subscribed."""
    return AdmissionDesk(DeskConfig(console_notifications=False))


@pytest.fixture
def john() -> InPatient:
    return InPatient(id=1, name="John", days_admitted=3)


@pytest.fixture
def alice() -> OutPatient:
    return OutPatient(id=2, name="Alice")


@pytest.fixture
def mark() -> EmergencyPatient:
    return EmergencyPatient(id=3, name="Mark")
