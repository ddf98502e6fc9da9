"""Interactive console menus for doctors and patients."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Iterator, TextIO

from spital.hospital import Hospital
from spital.models import Consultation, Doctor, Patient, Prescription

CLEAR = "\033[2J\033[1;1H"
HEADER = "         ------SPITAL------"
GOODBYE = "Multumesc ca ai folosit aplicatia!<3"
INVALID_NUMBER = "Optiune invalida! Te rog sa introduci un numar valid."
INVALID_OPTION = "Optiune invalida! Te rog sa alegi o optiune valida."

DOCTOR_ACCOUNT = "medicului"
PATIENT_ACCOUNT = "pacientului"

DOCTOR_MENU = (
    "1. Inregistreaza medic",
    "2. Afiseaza consultatii",
    "3. Afiseaza pacientii",
    "4. Afiseaza detalii pacient",
    "5. Prescriere reteta",
    "6. Iesi din program",
    "7. Inapoi la meniul principal",
)

PATIENT_MENU = (
    "1. Inregistreaza-te",
    "2. Programeaza consultatie",
    "3. Afiseaza medicii",
    "4. Afiseaza detalii pacient",
    "5. Afiseaza detalii consultatie",
    "6. Iesi din program",
    "7. Inapoi la meniul principal",
)


class _EndOfInput(Exception):
    """Raised when the input runs out."""


class _ExitProgram(Exception):
    """Raised when the user chooses to leave the program."""


class _BackToLogin(Exception):
    """Raised when the user returns to the main menu."""


class _Input:
    """Reads whole lines or whitespace-separated tokens from a line source."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)

    def line(self) -> str:
        try:
            return next(self._lines).rstrip("\r\n")
        except StopIteration:
            raise _EndOfInput from None

    def token(self) -> str:
        while True:
            words = self.line().split()
            if words:
                return words[0]

    def integer(self) -> int | None:
        try:
            return int(self.token())
        except ValueError:
            return None


class _Session:
    def __init__(self, hospital: Hospital, lines: Iterable[str], out: TextIO) -> None:
        self.hospital = hospital
        self.input = _Input(lines)
        self.out = out
        self.doctor_actions: dict[int, Callable[[], None]] = {
            1: self.register_doctor,
            2: self.show_doctor_consultations,
            3: self.show_doctor_patients,
            4: lambda: None,
            5: self.prescribe,
            6: self.quit,
            7: self.back,
        }
        self.patient_actions: dict[int, Callable[[], None]] = {
            1: self.register_patient,
            2: self.schedule_consultation,
            3: self.show_doctors,
            4: self.show_patient,
            5: lambda: None,
            6: self.quit,
            7: self.back,
        }

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def prompt(self, text: str) -> None:
        self.out.write(text)

    def clear(self) -> None:
        self.out.write(CLEAR)

    def pause(self) -> None:
        self.input.line()

    def run(self) -> None:
        while True:
            account = self.login()
            menu, actions = (
                (DOCTOR_MENU, self.doctor_actions)
                if account == DOCTOR_ACCOUNT
                else (PATIENT_MENU, self.patient_actions)
            )
            try:
                while True:
                    self.menu(account, menu, actions)
            except _BackToLogin:
                continue

    def login(self) -> str:
        while True:
            self.say(HEADER)
            self.say("Ca ce vrei sa te loghezi?")
            self.say("1. Medic [M]")
            self.say("2. Pacient [P]")
            self.prompt("Alegerea ta: ")
            choice = self.input.token()[:1].upper()
            account = {"M": DOCTOR_ACCOUNT, "P": PATIENT_ACCOUNT}.get(choice)
            if account is None:
                self.say("Cont invalid! Te rog sa alegi M (medic) sau P (pacient).")
                self.prompt("Apasa Enter pentru a continua...")
                self.pause()
            self.clear()
            if account is not None:
                return account

    def menu(
        self,
        account: str,
        entries: tuple[str, ...],
        actions: dict[int, Callable[[], None]],
    ) -> None:
        self.say(HEADER)
        self.say(f"~~~~~~~~Bun venit in meniul {account}!~~~~~~~~")
        for entry in entries:
            self.say(entry)
        self.prompt("Introduceti optiunea: ")
        option = self.input.integer()
        if option is None:
            self.clear()
            self.say(INVALID_NUMBER)
            return
        action = actions.get(option)
        if action is None:
            self.clear()
            self.say(INVALID_OPTION)
            return
        action()

    def quit(self) -> None:
        self.clear()
        self.say(GOODBYE)
        raise _ExitProgram

    def back(self) -> None:
        self.clear()
        raise _BackToLogin

    def read_age(self, label: str) -> int | None:
        self.prompt(f"Introduceti varsta {label}: ")
        age = self.input.integer()
        if age is None:
            self.clear()
            self.say(INVALID_NUMBER)
        return age

    def register_doctor(self) -> None:
        self.prompt("Introduceti numele medicului: ")
        name = self.input.line()
        age = self.read_age("medicului")
        if age is None:
            return
        self.prompt("Introduceti CNP-ul medicului: ")
        cnp = self.input.token()
        self.prompt("Introduceti specializarea medicului: ")
        specialization = self.input.token()
        doctor = Doctor(name, age, cnp, specialization)
        self.hospital.add_doctor(doctor)
        self.clear()
        self.say(f"Medicul {doctor.name} a fost adaugat cu succes!")

    def show_doctor_consultations(self) -> None:
        self.prompt("Numele medicului pentru care doriti sa vedeti consultatiile: ")
        name = self.input.token()
        doctor = self.hospital.find_doctor(name)
        if doctor is None:
            self.say()
            self.say("Medic inexistent!")
            self.say()
        else:
            report = doctor.consultations_report(self.hospital.consultations)
            if report:
                self.say(report)
        self.pause()
        self.clear()

    def show_doctor_patients(self) -> None:
        self.say("Introduceti numele medicului: ")
        name = self.input.line()
        self.clear()
        try:
            patients = self.hospital.patients_of(name)
        except LookupError as error:
            self.clear()
            self.say(str(error.args[0]))
            return
        self.say(f"Pacientii medicului {name} sunt: ")
        for patient in patients:
            self.say(patient.describe())
            self.say()
            self.say()
        if not patients:
            self.say("Nu exista pacienti pentru acest medic.")

    def prescribe(self) -> None:
        self.prompt("Introduceti numele dvs(medic): ")
        doctor_name = self.input.line()
        self.prompt("Introduceti numele pacientului: ")
        patient_name = self.input.line()
        doctor = self.hospital.find_doctor(doctor_name)
        patient = self.hospital.find_patient(patient_name)
        if doctor is None:
            self.clear()
            self.say(f"Medicul {doctor_name} nu exista!")
            return
        if patient is None:
            self.clear()
            self.say(f"Pacientul {patient_name} nu exista!")
            return
        self.prompt("Introduceti medicamentele prescrise (separati prin spatiu): ")
        medications = self.input.line().split()
        Prescription(patient, doctor, medications)
        self.clear()
        self.say("Reteta a fost creata cu succes!")

    def register_patient(self) -> None:
        self.prompt("Introduceti numele pacientului: ")
        name = self.input.line()
        age = self.read_age("pacientului")
        if age is None:
            return
        self.prompt("Introduceti CNP-ul pacientului: ")
        cnp = self.input.token()
        patient = Patient(name, age, cnp)
        self.hospital.add_patient(patient)
        self.clear()
        self.say(f"Pacientul {patient.name} a fost adaugat cu succes!")

    def schedule_consultation(self) -> None:
        self.prompt("Introduceti numele pacientului: ")
        patient_name = self.input.line()
        self.prompt("Introduceti numele medicului: ")
        doctor_name = self.input.line()
        patient = self.hospital.find_patient(patient_name)
        doctor = self.hospital.find_doctor(doctor_name)
        if patient is None:
            self.clear()
            self.say(f"Pacientul {patient_name} nu exista!")
            return
        if doctor is None:
            self.clear()
            self.say(f"Medicul {doctor_name} nu exista!")
            return
        self.prompt("Introduceti data consultatiei(ZZ-LL-AAAA): ")
        date = self.input.token()
        self.prompt("Introduceti problema pe care o aveti: ")
        diagnosis = self.input.line()
        patient.add_medical_history(diagnosis)
        self.hospital.add_consultation(Consultation(patient, doctor, date, diagnosis))
        self.clear()
        self.say("Programarea a fost facuta cu succes!")

    def show_doctors(self) -> None:
        self.clear()
        self.say("Medicii disponibili sunt: ")
        for doctor in self.hospital.doctors:
            self.say(f"Medicul: {doctor.name} are specializarea: {doctor.specialization}")

    def show_patient(self) -> None:
        self.prompt("Introduceti numele pacientului: ")
        name = self.input.token()
        patient = self.hospital.find_patient(name)
        self.clear()
        if patient is None:
            self.say(f"Pacientul {name} nu exista!")
            return
        self.say(patient.describe())


def run(hospital: Hospital, lines: Iterable[str], out: TextIO) -> None:
    """Drive the menus from the given input lines until exit or end of input."""
    try:
        _Session(hospital, lines, out).run()
    except (_ExitProgram, _EndOfInput):
        return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive hospital console."""
    parser = argparse.ArgumentParser(
        prog="spital", description="Interactive hospital management console."
    )
    parser.parse_args(argv)
    run(Hospital(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())