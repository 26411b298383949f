"""Admission receipt record and console rendering."""

from dataclasses import dataclass
from typing import Any, Dict

from hms.core.entities import PatientType

RECEIPT_HEADER = "--- BILL DETAILS ---"


@dataclass(frozen=True)
class AdmissionReceipt:
    """Outcome of a single admission.

    Attributes:
        patient_id: Identifier of the admitted patient.
        patient_name: Name printed on the receipt.
        patient_type: Category the patient was billed under.
        strategy_name: Billing strategy applied to the base bill.
        base_amount: Bill before the strategy was applied.
        final_amount: Amount charged.
        message: Notification published for this admission.
    """

    patient_id: int
    patient_name: str
    patient_type: PatientType
    strategy_name: str
    base_amount: float
    final_amount: float
    message: str

    @property
    def adjustment(self) -> float:
        """Difference between the charged and base amounts."""
        return self.final_amount - self.base_amount

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "patient_id": self.patient_id,
            "patient_name": self.patient_name,
            "patient_type": self.patient_type.label,
            "strategy_name": self.strategy_name,
            "base_amount": self.base_amount,
            "final_amount": self.final_amount,
            "adjustment": self.adjustment,
            "message": self.message,
        }


def format_amount(value: float, symbol: str = "", decimals: int = 2) -> str:
    """Format a monetary value, e.g. "4200.00", or "-₹1,800.00" with a symbol.

    The sign always leads, so negative deltas start with "-".
    """
    sign = "-" if value < 0 else ""
    if symbol:
        return f"{sign}{symbol}{abs(value):,.{decimals}f}"
    return f"{sign}{abs(value):.{decimals}f}"


def format_bill(value: float) -> str:
    """Shortest plain rendering of a bill: "4200", "4199.5", up to 15 digits."""
    return f"{value:.15g}"


def format_receipt(receipt: AdmissionReceipt) -> str:
    """Render the receipt block printed by the console desk."""
    return "\n".join([
        "",
        RECEIPT_HEADER,
        f"Patient Name : {receipt.patient_name}",
        f"Final Bill   : {format_bill(receipt.final_amount)}",
    ])
