from spital.demo import build_demo, main


def test_build_demo_registers_one_of_each():
    hospital, spare = build_demo()
    assert [d.name for d in hospital.doctors] == ["Dr. Popescu"]
    assert [p.name for p in hospital.patients] == ["Ion Popescu"]
    assert len(hospital.consultations) == 1
    assert spare.name == "Dr. Ionescu"
    assert spare not in hospital.doctors


def test_demo_consultation_links_registered_people():
    hospital, _ = build_demo()
    consultation = hospital.consultations[0]
    assert consultation.patient is hospital.patients[0]
    assert consultation.doctor is hospital.doctors[0]
    assert consultation.diagnosis == "Control cardiologic"


def test_main_prints_report(capsys):
    assert main([]) == 0
    text = capsys.readouterr().out
    assert (
        "Consultatie: 2025-03-20, Diagnosticul: Control cardiologic, Medic: Dr. Popescu"
        in text
    )
    assert "Medic: Dr. Ionescu, Specializare: Dermatolog" in text


def test_main_output_matches_models(capsys):
    main([])
    text = capsys.readouterr().out
    hospital, spare = build_demo()
    assert text == hospital.consultations_report() + "\n" + spare.describe() + "\n"