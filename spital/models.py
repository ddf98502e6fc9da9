"""People, consultations and prescriptions managed by the hospital."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Iterator


@dataclass(eq=False)
class Person(ABC):
    """Someone known to the hospital, identified by name and CNP."""

    name: str
    age: int
    cnp: str

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of this person."""

    @abstractmethod
    def consultations_report(self, consultations: Iterable[Consultation]) -> str:
        """Return the consultations relevant to this person as text."""


@dataclass(eq=False)
class Patient(Person):
    """A patient with a running medical history."""

    medical_history: list[str] = field(default_factory=list)

    def add_consultation(self, diagnosis: str) -> None:
        """Record the diagnosis of a consultation in the medical history."""
        self.medical_history.append(diagnosis)

    def add_medical_history(self, entry: str) -> None:
        """Append an entry to the medical history."""
        self.medical_history.append(entry)

    def describe(self) -> str:
        history = "".join(f"{entry}; " for entry in self.medical_history)
        return (
            f"Pacient: {self.name}, Varsta: {self.age}, CNP: {self.cnp}\n"
            f"Istoric medical: {history}"
        )

    def consultations_report(self, consultations: Iterable[Consultation]) -> str:
        own = [c.describe() for c in consultations if c.patient is self]
        if not own:
            return "Nu exista consultatii pentru acest pacient."
        return "\n".join(own)


@dataclass(eq=False)
class Doctor(Person):
    """A doctor with a specialization and the patients assigned to them."""

    specialization: str
    patients: list[Patient] = field(default_factory=list)

    def add_patient(self, patient: Patient) -> None:
        """Assign a patient to this doctor."""
        self.patients.append(patient)

    def describe(self) -> str:
        listing = "".join(
            f"{patient.name} -> " + "".join(f"{entry}, " for entry in patient.medical_history)
            for patient in self.patients
        )
        return (
            f"Medic: {self.name}, Specializare: {self.specialization}\n"
            f"Pacienti: {listing}"
        )

    def consultations_report(self, consultations: Iterable[Consultation]) -> str:
        consultations = list(consultations)
        if not consultations:
            return "Nu exista consultatii."
        return "\n".join(
            f"Pacient: {c.patient.name} in data de {c.date}"
            for c in consultations
            if c.doctor.name == self.name
        )


@dataclass(eq=False)
class Consultation:
    """An appointment between a patient and a doctor."""

    patient: Patient
    doctor: Doctor
    date: str
    diagnosis: str

    def describe(self) -> str:
        return (
            f"Consultatie: {self.date}, Diagnosticul: {self.diagnosis}, "
            f"Medic: {self.doctor.name}"
        )


@dataclass(eq=False)
class Prescription:
    """A numbered prescription issued by a doctor to a patient."""

    _ids: ClassVar[Iterator[int]] = itertools.count(1)

    patient: Patient
    doctor: Doctor
    medications: list[str] = field(default_factory=list)
    id: int = field(init=False)

    def __post_init__(self) -> None:
        self.medications = list(self.medications)
        self.id = next(Prescription._ids)

    def add_medication(self, medication: str) -> None:
        """Add a medication to the prescription."""
        self.medications.append(medication)

    def describe(self) -> str:
        meds = "".join(f"{med} " for med in self.medications)
        return (
            f"Reteta #{self.id} pentru pacientul cu CNP: {self.patient.cnp}\n"
            f"Medic: {self.doctor.cnp}\n"
            f"Medicamente: {meds}"
        )