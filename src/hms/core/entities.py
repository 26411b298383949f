"""Core entity definitions for the admission desk.

This module contains enums that are used across the codebase,
placed here to avoid circular imports.
"""

from enum import IntEnum

from hms.core.errors import InvalidSelectionError


class PatientType(IntEnum):
    """Patient categories offered at the admission desk.

    Values double as the console menu numbers.
    """
    INPATIENT = 1     # Admitted for one or more days
    OUTPATIENT = 2    # Seen and released the same day
    EMERGENCY = 3     # Emergency department admission

    @property
    def label(self) -> str:
        """Menu label for this patient type."""
        return PATIENT_TYPE_LABELS[self]

    @classmethod
    def from_selection(cls, selection: int) -> "PatientType":
        """Resolve a menu selection to a patient type.

        Raises:
            InvalidSelectionError: If selection is not a known menu number.
        """
        try:
            return cls(selection)
        except ValueError:
            raise InvalidSelectionError(
                f"Unknown patient type selection: {selection!r}"
            ) from None


PATIENT_TYPE_LABELS = {
    PatientType.INPATIENT: "InPatient",
    PatientType.OUTPATIENT: "OutPatient",
    PatientType.EMERGENCY: "Emergency Patient",
}
