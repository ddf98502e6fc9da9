"""A small scripted scenario showing the hospital registry at work."""

from __future__ import annotations

import argparse
import sys

from spital.hospital import Hospital
from spital.models import Consultation, Doctor, Patient


def build_demo() -> tuple[Hospital, Doctor]:
    """Build the sample hospital and a second doctor who is not registered."""
    hospital = Hospital()
    cardiologist = Doctor("Dr. Popescu", 45, "1234567890123", "Cardiolog")
    dermatologist = Doctor("Dr. Ionescu", 30, "4567890234565", "Dermatolog")
    first_patient = Patient("Ion Popescu", 30, "1112233445566")
    Patient("Maria Ionescu", 25, "2233445566778")

    hospital.add_doctor(cardiologist)
    hospital.add_patient(first_patient)
    hospital.add_consultation(
        Consultation(first_patient, cardiologist, "2025-03-20", "Control cardiologic")
    )
    return hospital, dermatologist


def main(argv: list[str] | None = None) -> int:
    """Print the sample consultations and the unregistered doctor's details."""
    parser = argparse.ArgumentParser(
        prog="spital-demo", description="Show a sample hospital scenario."
    )
    parser.parse_args(argv)
    hospital, spare_doctor = build_demo()
    report = hospital.consultations_report()
    if report:
        print(report)
    print(spare_doctor.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())