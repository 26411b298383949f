"""HMS - Admission desk page."""

import streamlit as st

from components.receipt_table import notifications_to_frame, receipt_to_frame
from hms.admission.receipt import format_amount
from hms.admission.workflow import DEFAULT_STRATEGIES, AdmissionDesk
from hms.billing.strategies import STRATEGIES, strategy_name
from hms.core.config import DeskConfig
from hms.core.entities import PatientType
from hms.model.patient import create_patient

st.set_page_config(
    page_title="HMS Admission Desk",
    page_icon="🏥",
    layout="wide",
)

st.title("🏥 Patient Admission Desk")

if "notifications" not in st.session_state:
    st.session_state.notifications = []

config = DeskConfig(console_notifications=False)
desk = AdmissionDesk(config)
desk.notifications.subscribe(st.session_state.notifications.append)
symbol = config.get_currency_symbol()

# ============ ADMISSION FORM ============
col1, col2 = st.columns(2)

with col1:
    patient_type = st.selectbox(
        "Patient Type",
        options=list(PatientType),
        format_func=lambda t: t.label,
    )
    name = st.text_input("Patient Name", value="John")
    patient_id = st.number_input("Patient ID", min_value=1, value=1, step=1)

with col2:
    days = st.number_input(
        "Days Admitted",
        min_value=0,
        value=3,
        step=1,
        disabled=patient_type != PatientType.INPATIENT,
        help="Only in-patients are billed per day",
    )
    strategy_names = list(STRATEGIES)
    default_strategy = strategy_name(DEFAULT_STRATEGIES[patient_type])
    chosen = st.selectbox(
        "Billing Strategy",
        options=strategy_names,
        index=strategy_names.index(default_strategy),
        format_func=str.title,
    )

if st.button("Admit patient", type="primary"):
    if not name.strip():
        st.error("Enter a patient name.")
        st.stop()

    patient = create_patient(patient_type, int(patient_id), name.strip(), int(days))
    st.session_state.receipt = desk.admit_patient(patient, STRATEGIES[chosen])

# ============ RECEIPT ============
if "receipt" in st.session_state:
    receipt = st.session_state.receipt
    st.divider()
    st.header("Bill Details")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Base Bill", format_amount(receipt.base_amount, symbol))
    with col2:
        st.metric(
            "Final Bill",
            format_amount(receipt.final_amount, symbol),
            delta=format_amount(receipt.adjustment, symbol),
            delta_color="inverse",
        )
    with col3:
        st.metric("Strategy", receipt.strategy_name.title())

    st.dataframe(receipt_to_frame(receipt, symbol), hide_index=True, use_container_width=True)

if st.session_state.notifications:
    st.subheader("Notifications")
    st.dataframe(
        notifications_to_frame(st.session_state.notifications),
        hide_index=True,
        use_container_width=True,
    )
