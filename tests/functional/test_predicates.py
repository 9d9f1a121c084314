from funcprimer.core.enums import Diagnosis
from funcprimer.functional.predicates import (
    age_above,
    compose_filter_and_map,
    diagnosis_filter,
    filter_patients,
    format_stay,
    format_stay_line,
    full_name,
    min_bed_days,
)


def test_filter_by_age_keeps_order(patients):
    older = filter_patients(patients, age_above(60))
    assert [p.full_name for p in older] == ["Петров Иван Иванович"]


def test_filter_by_age_is_strict(patients):
    # Васильев is exactly 60
    names = [p.full_name for p in filter_patients(patients, age_above(59))]
    assert names == ["Петров Иван Иванович", "Васильев Николай Иванович"]


def test_filter_above_maximum_age_is_empty(patients):
    assert filter_patients(patients, age_above(200)) == []


def test_filter_empty_input(empty_registry):
    assert filter_patients(empty_registry, age_above(0)) == []


def test_filter_does_not_modify_input(patients):
    before = list(patients)
    filter_patients(patients, age_above(0))
    assert list(patients) == before


def test_diagnosis_filter_is_case_insensitive(make_patient):
    predicate = diagnosis_filter("j15.9 bacterial")
    assert predicate(make_patient(diagnosis="J15.9 Bacterial"))
    assert not predicate(make_patient(diagnosis="J15.9 Viral"))


def test_diagnosis_filters_are_disjoint(patients):
    bacterial = filter_patients(patients, diagnosis_filter(Diagnosis.BACTERIAL_PNEUMONIA.value))
    influenza = filter_patients(
        patients, diagnosis_filter(Diagnosis.INFLUENZA_WITH_PNEUMONIA.value.upper())
    )
    assert [p.full_name for p in bacterial] == [
        "Смирнова Мария Петровна",
        "Иванов Алексей Андреевич",
    ]
    assert [p.full_name for p in influenza] == [
        "Петров Иван Иванович",
        "Васильев Николай Иванович",
    ]
    assert not {p.full_name for p in bacterial} & {p.full_name for p in influenza}


def test_diagnosis_filters_built_in_a_loop_stay_independent(patients):
    predicates = {d.code: diagnosis_filter(d.value) for d in Diagnosis}
    counts = {
        code: len(filter_patients(patients, predicate))
        for code, predicate in predicates.items()
    }
    assert counts == {"J11.0": 2, "J12.8": 1, "J15.9": 2}


def test_min_bed_days(patients):
    kept = filter_patients(patients, min_bed_days(5))
    assert [p.days for p in kept] == [5, 7, 5, 9]


def test_formatters(make_patient):
    patient = make_patient(full_name="Ann Lee", days=4)
    assert full_name(patient) == "Ann Lee"
    assert format_stay(patient) == "Ann Lee — 4 bed days"
    assert format_stay_line()(patient) == "Patient: Ann Lee, bed days: 4"


def test_compose_filter_and_map(patients):
    transform = compose_filter_and_map(
        diagnosis_filter(Diagnosis.INFLUENZA_WITH_PNEUMONIA.value), format_stay
    )
    assert transform(patients) == [
        "Петров Иван Иванович — 5 bed days",
        "Васильев Николай Иванович — 9 bed days",
    ]
    manual = [format_stay(p) for p in patients if p.diagnosis_code == "J11.0"]
    assert transform(patients) == manual


def test_compose_filter_and_map_empty(empty_registry):
    transform = compose_filter_and_map(age_above(0), full_name)
    assert transform(empty_registry) == []


def test_min_bed_days_is_curried(make_patient):
    from funcprimer.functional.predicates import has_min_bed_days

    at_least_five = min_bed_days(5)
    patient = make_patient(days=5)
    assert at_least_five(patient) == has_min_bed_days(5, patient) is True
    assert min_bed_days(6, patient) is False
    assert min_bed_days.__name__ == "has_min_bed_days"
