"""Patient model layer."""

from hms.model.patient import (
    Patient,
    InPatient,
    OutPatient,
    EmergencyPatient,
    PATIENT_CLASSES,
    create_patient,
    INPATIENT_RATE_PER_DAY,
    OUTPATIENT_FLAT_FEE,
    EMERGENCY_FLAT_FEE,
)

__all__ = [
    "Patient",
    "InPatient",
    "OutPatient",
    "EmergencyPatient",
    "PATIENT_CLASSES",
    "create_patient",
    "INPATIENT_RATE_PER_DAY",
    "OUTPATIENT_FLAT_FEE",
    "EMERGENCY_FLAT_FEE",
]
