"""The hospital registry of doctors, patients and consultations."""

from __future__ import annotations

from dataclasses import dataclass, field

from spital.models import Consultation, Doctor, Patient


@dataclass
class Hospital:
    """Keeps track of doctors, patients and consultations."""

    doctors: list[Doctor] = field(default_factory=list)
    patients: list[Patient] = field(default_factory=list)
    consultations: list[Consultation] = field(default_factory=list)

    def add_doctor(self, doctor: Doctor) -> None:
        self.doctors.append(doctor)

    def add_patient(self, patient: Patient) -> None:
        self.patients.append(patient)

    def add_consultation(self, consultation: Consultation) -> None:
        self.consultations.append(consultation)

    def consultations_report(self) -> str:
        """Describe every consultation, one per line."""
        return "\n".join(c.describe() for c in self.consultations)

    def find_patient(self, name: str) -> Patient | None:
        """Return the first patient with this name, or None."""
        return next((p for p in self.patients if p.name == name), None)

    def find_doctor(self, name: str) -> Doctor | None:
        """Return the first doctor with this name, or None."""
        return next((d for d in self.doctors if d.name == name), None)

    def patients_of(self, doctor_name: str) -> list[Patient]:
        """Return the patients seen by the named doctor, one per consultation.

        Raises LookupError if no such doctor is registered.
        """
        if self.find_doctor(doctor_name) is None:
            raise LookupError(f"Medicul {doctor_name} nu exista!")
        return [c.patient for c in self.consultations if c.doctor.name == doctor_name]