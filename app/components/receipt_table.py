"""Receipt and notification tables for the admission desk page.

Pure pandas transforms, kept free of Streamlit so they can be tested
without a running app.
"""

from typing import List

import pandas as pd

from hms.admission.receipt import AdmissionReceipt, format_amount


def receipt_to_frame(receipt: AdmissionReceipt, symbol: str = "") -> pd.DataFrame:
    """Two-column table (Item, Value) describing one admission."""
    return pd.DataFrame({
        "Item": [
            "Patient ID",
            "Patient Name",
            "Patient Type",
            "Billing Strategy",
            "Base Bill",
            "Adjustment",
            "Final Bill",
        ],
        "Value": [
            str(receipt.patient_id),
            receipt.patient_name,
            receipt.patient_type.label,
            receipt.strategy_name.title(),
            format_amount(receipt.base_amount, symbol),
            format_amount(receipt.adjustment, symbol),
            format_amount(receipt.final_amount, symbol),
        ],
    })


def notifications_to_frame(messages: List[str]) -> pd.DataFrame:
    """Notification log, oldest first, numbered from 1."""
    return pd.DataFrame({
        "#": list(range(1, len(messages) + 1)),
        "Notification": messages,
    })
