"""Patient entity definitions.

Each patient category is a variant of the abstract ``Patient`` with its
own billing rule. The set of variants is closed: one per ``PatientType``.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from hms.core.entities import PatientType

logger = logging.getLogger(__name__)


# Fixed tariff
INPATIENT_RATE_PER_DAY = 2000.0
OUTPATIENT_FLAT_FEE = 500.0
EMERGENCY_FLAT_FEE = 5000.0


@dataclass
class Patient(ABC):
    """Patient being admitted at the desk.

    Attributes:
        id: Caller-assigned identifier (uniqueness not enforced).
        name: Patient name shown on the receipt.
        bill_amount: Base bill. None until calculate_bill() has run.
    """

    patient_type: ClassVar[PatientType]

    id: int
    name: str
    bill_amount: Optional[float] = field(default=None, init=False)

    @abstractmethod
    def bill_rule(self) -> float:
        """Base bill for this patient, computed from its own attributes."""

    def calculate_bill(self) -> float:
        """Calculate and store the base bill.

        Returns:
            The stored bill amount.
        """
        self.bill_amount = self.bill_rule()
        logger.debug(
            f"Calculated bill for {self.patient_type.label} {self.id} "
            f"({self.name}): {self.bill_amount}"
        )
        return self.bill_amount

    @property
    def is_billed(self) -> bool:
        """Whether calculate_bill() has run."""
        return self.bill_amount is not None


@dataclass
class InPatient(Patient):
    """Patient admitted to a ward, billed per day."""

    patient_type: ClassVar[PatientType] = PatientType.INPATIENT

    days_admitted: int = 0

    def bill_rule(self) -> float:
        return self.days_admitted * INPATIENT_RATE_PER_DAY


@dataclass
class OutPatient(Patient):
    """Patient seen in clinic, billed a flat fee."""

    patient_type: ClassVar[PatientType] = PatientType.OUTPATIENT

    def bill_rule(self) -> float:
        return OUTPATIENT_FLAT_FEE


@dataclass
class EmergencyPatient(Patient):
    """Emergency admission, billed a flat fee."""

    patient_type: ClassVar[PatientType] = PatientType.EMERGENCY

    def bill_rule(self) -> float:
        return EMERGENCY_FLAT_FEE


PATIENT_CLASSES = {
    PatientType.INPATIENT: InPatient,
    PatientType.OUTPATIENT: OutPatient,
    PatientType.EMERGENCY: EmergencyPatient,
}


def create_patient(
    patient_type: PatientType,
    id: int,
    name: str,
    days_admitted: int = 0,
) -> Patient:
    """Build the patient variant for a patient type.

    Args:
        patient_type: Category of patient to create.
        id: Patient identifier.
        name: Patient name.
        days_admitted: Length of stay. Only used for in-patients.

    Returns:
        A new, not yet billed, patient.
    """
    if patient_type == PatientType.INPATIENT:
        return InPatient(id=id, name=name, days_admitted=days_admitted)
    return PATIENT_CLASSES[patient_type](id=id, name=name)
