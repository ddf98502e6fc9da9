# spital

A small hospital register kept in memory. It keeps track of doctors,
patients and the consultations that link them, and lets a doctor write
prescriptions. It comes with an interactive console menu, whose prompts are
in Romanian.

## Installing

```
pip install .
```

## The console menu

```
spital
```

At the start you choose an account: `M` for the doctor's menu or `P` for the
patient's menu. Only the first letter of your answer counts, in either case.

The doctor's menu (`spital.cli`) offers:

1. register a doctor (name, age, CNP, specialization)
2. list a doctor's consultations: the patient and date of each one
3. list a doctor's patients: the details of the patient of each consultation
   with that doctor
4. show a patient's details (this option does nothing yet)
5. write a prescription for a registered patient, medications separated by
   spaces
6. leave the program
7. go back to the account choice

The patient's menu offers:

1. register yourself (name, age, CNP)
2. book a consultation with a registered doctor; the problem you describe is
   also added to your medical history
3. list the doctors and their specializations
4. show a patient's details and medical history
5. show consultation details (this option does nothing yet)
6. leave the program
7. go back to the account choice

Names are matched exactly. Where the menu reads a name as a single word
(listing a doctor's consultations, showing a patient's details), only names
without spaces can be found. An age or menu option that is not a whole number
is rejected with a message and the menu is shown again. The program also ends
when its input runs out.

## A short demonstration

```
spital-demo
```

This registers one doctor and one patient, books one consultation between
them, prints that consultation, and then prints the details of a second doctor
who was created but never registered.

## Using it from Python

```python
from spital.hospital import Hospital
from spital.models import Consultation, Doctor, Patient, Prescription

hospital = Hospital()
doctor = Doctor("Dr. Popescu", 45, "CNP-0001", "Cardiolog")
patient = Patient("Ion Popescu", 30, "CNP-0002")
hospital.add_doctor(doctor)
hospital.add_patient(patient)

patient.add_medical_history("Control cardiologic")
hospital.add_consultation(
    Consultation(patient, doctor, "20-03-2025", "Control cardiologic")
)

print(hospital.consultations_report())
print(doctor.consultations_report(hospital.consultations))
print([p.name for p in hospital.patients_of("Dr. Popescu")])

prescription = Prescription(patient, doctor, ["aspirina"])
prescription.add_medication("vitamina C")
print(prescription.describe())
```

`Hospital.find_doctor` and `Hospital.find_patient` return the first person
with exactly that name, or `None`. `Hospital.patients_of` raises
`LookupError` when no doctor of that name is registered. Every
`Prescription` gets the next number in a counter shared by all
prescriptions.

## What it does not do

- Nothing is saved: the register lives only as long as the program runs.
- Prescriptions written from the console menu are not kept anywhere; the menu
  only confirms that one was created.
- There is no way to change or remove a doctor, patient or consultation once
  added.

## Running the tests

```
pip install .[test]
pytest
```