"""HMS - Hospital admission desk.

Bills a patient by category, applies a billing strategy and announces
the admission to subscribed notification handlers.
"""

__version__ = "0.1.0"

from hms.admission.workflow import AdmissionDesk
from hms.admission.receipt import AdmissionReceipt
from hms.billing.strategies import apply_billing, regular, insurance, emergency
from hms.notifications.channel import NotificationChannel
from hms.model.patient import Patient, InPatient, OutPatient, EmergencyPatient

__all__ = [
    "AdmissionDesk",
    "AdmissionReceipt",
    "apply_billing",
    "regular",
    "insurance",
    "emergency",
    "NotificationChannel",
    "Patient",
    "InPatient",
    "OutPatient",
    "EmergencyPatient",
    "__version__",
]
