"""Admission workflow - bills a patient and announces the admission.

The desk runs one admission as a fixed sequence:
1. Calculate the patient's base bill
2. Apply the billing strategy
3. Print the receipt
4. Publish the admission notification

Example usage:
    from hms.admission.workflow import AdmissionDesk
    from hms.billing.strategies import insurance
    from hms.model.patient import InPatient

    desk = AdmissionDesk()
    receipt = desk.admit_patient(InPatient(1, "John", days_admitted=3), insurance)
    print(receipt.final_amount)  # 4200.0
"""

import logging
from typing import Dict, Optional, Tuple

from hms.admission.receipt import AdmissionReceipt, format_receipt
from hms.billing.strategies import (
    BillingStrategy,
    apply_billing,
    emergency,
    insurance,
    regular,
    strategy_name,
)
from hms.core.config import DeskConfig
from hms.core.entities import PatientType
from hms.model.patient import EmergencyPatient, InPatient, OutPatient, Patient
from hms.notifications.channel import NotificationChannel, console_handler

logger = logging.getLogger(__name__)


# Billing strategy paired with each patient type at the desk
DEFAULT_STRATEGIES: Dict[PatientType, BillingStrategy] = {
    PatientType.INPATIENT: insurance,
    PatientType.OUTPATIENT: regular,
    PatientType.EMERGENCY: emergency,
}


def admission_message(patient: Patient) -> str:
    """Notification text announcing a patient's admission."""
    return f"Patient {patient.name} admitted successfully."


def sample_admission(patient_type: PatientType) -> Tuple[Patient, BillingStrategy]:
    """Fixed sample patient and its paired strategy for a menu choice."""
    if patient_type == PatientType.INPATIENT:
        patient = InPatient(id=1, name="John", days_admitted=3)
    elif patient_type == PatientType.OUTPATIENT:
        patient = OutPatient(id=2, name="Alice")
    else:
        patient = EmergencyPatient(id=3, name="Mark")
    return patient, DEFAULT_STRATEGIES[patient_type]


class AdmissionDesk:
    """Runs patient admissions and notifies subscribers.

    Attributes:
        config: DeskConfig with display and notification settings
        notifications: Channel signalled after each admission
    """

    def __init__(
        self,
        config: Optional[DeskConfig] = None,
        notifications: Optional[NotificationChannel] = None,
    ):
        """Initialize the desk.

        Args:
            config: Desk settings. Uses defaults if None.
            notifications: Channel to publish on. A new channel built from
                config.notifications is used if None.
        """
        self.config = config or DeskConfig()
        self.notifications = notifications or NotificationChannel(
            self.config.notifications
        )
        if self.config.console_notifications:
            self.notifications.subscribe(console_handler)

    def admit_patient(
        self, patient: Patient, strategy: BillingStrategy
    ) -> AdmissionReceipt:
        """Bill a patient, print the receipt and publish the admission.

        Args:
            patient: Patient to admit.
            strategy: Billing strategy applied to the base bill.

        Returns:
            AdmissionReceipt describing the completed admission.
        """
        base_amount = patient.calculate_bill()
        final_amount = apply_billing(base_amount, strategy)

        receipt = AdmissionReceipt(
            patient_id=patient.id,
            patient_name=patient.name,
            patient_type=patient.patient_type,
            strategy_name=strategy_name(strategy),
            base_amount=base_amount,
            final_amount=final_amount,
            message=admission_message(patient),
        )
        print(format_receipt(receipt))
        logger.info(
            f"Admitted {patient.patient_type.label} {patient.id} ({patient.name}): "
            f"{base_amount} -> {final_amount} via {receipt.strategy_name}"
        )

        self.notifications.publish(receipt.message)
        return receipt
