"""Admission layer: the admission workflow and its receipts."""

from hms.admission.receipt import (
    AdmissionReceipt,
    RECEIPT_HEADER,
    format_amount,
    format_bill,
    format_receipt,
)
from hms.admission.workflow import (
    AdmissionDesk,
    DEFAULT_STRATEGIES,
    admission_message,
    sample_admission,
)

__all__ = [
    "AdmissionReceipt",
    "RECEIPT_HEADER",
    "format_amount",
    "format_bill",
    "format_receipt",
    "AdmissionDesk",
    "DEFAULT_STRATEGIES",
    "admission_message",
    "sample_admission",
]
