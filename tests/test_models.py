import pytest

from spital.models import Consultation, Doctor, Patient, Person, Prescription


def make_patient():
    return Patient("Ion Popescu", 30, "1112233445566")


def make_doctor():
    return Doctor("Dr. Popescu", 45, "1234567890123", "Cardiolog")


def test_person_is_abstract():
    with pytest.raises(TypeError):
        Person("X", 1, "0")


def test_patient_history_records_both_kinds_of_entries():
    p = make_patient()
    p.add_consultation("Raceala")
    p.add_medical_history("Gripa")
    assert p.medical_history == ["Raceala", "Gripa"]


def test_patient_describe():
    p = make_patient()
    p.add_medical_history("Control cardiologic")
    assert p.describe() == (
        "Pacient: Ion Popescu, Varsta: 30, CNP: 1112233445566\n"
        "Istoric medical: Control cardiologic; "
    )


def test_patient_describe_empty_history():
    assert make_patient().describe().endswith("Istoric medical: ")


def test_doctor_describe_lists_patients_with_history():
    d = make_doctor()
    p = make_patient()
    p.add_medical_history("Control cardiologic")
    d.add_patient(p)
    assert d.patients == [p]
    assert d.describe() == (
        "Medic: Dr. Popescu, Specializare: Cardiolog\n"
        "Pacienti: Ion Popescu -> Control cardiologic, "
    )


def test_doctor_report_empty():
    assert make_doctor().consultations_report([]) == "Nu exista consultatii."


def test_doctor_report_filters_by_doctor_name():
    d = make_doctor()
    other = Doctor("Dr. Ionescu", 30, "4567890234565", "Dermatolog")
    p = make_patient()
    consultations = [
        Consultation(p, d, "2025-03-20", "Control cardiologic"),
        Consultation(p, other, "2025-03-21", "Eczema"),
    ]
    assert d.consultations_report(consultations) == "Pacient: Ion Popescu in data de 2025-03-20"


def test_patient_report_lists_own_consultations():
    d = make_doctor()
    p = make_patient()
    q = Patient("Maria Ionescu", 25, "2233445566778")
    c = Consultation(p, d, "2025-03-20", "Control cardiologic")
    others = [Consultation(q, d, "2025-03-22", "Aritmie")]
    assert p.consultations_report([c] + others) == c.describe()
    assert p.consultations_report(others) == "Nu exista consultatii pentru acest pacient."


def test_consultation_describe():
    c = Consultation(make_patient(), make_doctor(), "2025-03-20", "Control cardiologic")
    assert c.describe() == (
        "Consultatie: 2025-03-20, Diagnosticul: Control cardiologic, Medic: Dr. Popescu"
    )


def test_prescription_ids_are_sequential():
    first = Prescription(make_patient(), make_doctor(), ["a"])
    second = Prescription(make_patient(), make_doctor(), [])
    assert second.id == first.id + 1


def test_prescription_copies_and_extends_medications():
    meds = ["Aspirina"]
    r = Prescription(make_patient(), make_doctor(), meds)
    r.add_medication("Paracetamol")
    assert r.medications == ["Aspirina", "Paracetamol"]
    assert meds == ["Aspirina"]


def test_prescription_describe():
    r = Prescription(make_patient(), make_doctor(), ["Aspirina", "Paracetamol"])
    assert r.describe() == (
        f"Reteta #{r.id} pentru pacientul cu CNP: 1112233445566\n"
        "Medic: 1234567890123\n"
        "Medicamente: Aspirina Paracetamol "
    )