"""Console admission desk.

Shows the patient type menu, reads one selection, admits the matching
sample patient and waits for a final line before exiting.
"""

import argparse
import logging
from contextlib import suppress
from typing import List, Optional

from hms.admission.workflow import AdmissionDesk, sample_admission
from hms.core.config import DeskConfig, NotificationConfig
from hms.core.entities import PatientType
from hms.core.errors import InvalidSelectionError

logger = logging.getLogger(__name__)

MENU_TITLE = "=== Patient Management System ==="
PROMPT = "Select Patient Type: "
INVALID_CHOICE = "Invalid choice"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Admit a sample patient at the console desk.")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr diagnostics (default: WARNING)",
    )
    ap.add_argument(
        "--isolate-handlers",
        action="store_true",
        help="Keep notifying remaining handlers when one fails",
    )
    return ap.parse_args(argv)


def print_menu() -> None:
    print(MENU_TITLE)
    for patient_type in PatientType:
        print(f"{patient_type.value}. {patient_type.label}")


def run_desk(desk: AdmissionDesk) -> None:
    """Read one selection and admit the matching sample patient.

    Raises:
        ValueError: If the entry is not an integer.
    """
    print_menu()
    choice = int(input(PROMPT))

    try:
        patient_type = PatientType.from_selection(choice)
    except InvalidSelectionError:
        logger.warning(f"Rejected patient type selection: {choice}")
        print(INVALID_CHOICE)
        return

    patient, strategy = sample_admission(patient_type)
    desk.admit_patient(patient, strategy)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = DeskConfig(notifications=NotificationConfig(fail_open=args.isolate_handlers))
    run_desk(AdmissionDesk(config))

    # Pause before exit
    with suppress(EOFError):
        input()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
