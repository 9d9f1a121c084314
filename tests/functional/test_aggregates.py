import pytest

from funcprimer.core.data_models import PatientRegistry
from funcprimer.functional.aggregates import (
    average_bed_days,
    bed_days_by_diagnosis,
    fold,
    order_by,
    total_bed_days,
)


def test_fold_runs_left_to_right():
    assert fold(["a", "b", "c"], "", lambda acc, x: acc + x) == "abc"
    assert fold([1, 2, 3], [], lambda acc, x: [x] + acc) == [3, 2, 1]


def test_fold_empty_returns_seed():
    seed = object()
    assert fold([], seed, lambda acc, x: x) is seed


def test_total_bed_days_matches_sum(patients):
    assert total_bed_days(patients) == sum(p.days for p in patients) == 30


def test_average_bed_days(patients):
    average = average_bed_days(patients)
    assert average == pytest.approx(6.0)
    assert isinstance(average, float)
    assert f"{average:.1f}" == "6.0"


def test_average_uses_float_division(make_patient):
    registry = PatientRegistry(patients=[make_patient(days=1), make_patient(days=2)])
    assert average_bed_days(registry) == 1.5


def test_empty_input_aggregates(empty_registry):
    assert total_bed_days(empty_registry) == 0
    assert average_bed_days(empty_registry) is None
    assert bed_days_by_diagnosis(empty_registry) == {}


def test_order_by_descending_integers():
    numbers = tuple(range(1, 11))
    result = order_by(numbers, key=lambda n: n, descending=True)
    assert len(result) == len(numbers)
    assert sorted(result) == list(numbers)
    assert all(a >= b for a, b in zip(result, result[1:]))
    assert numbers == tuple(range(1, 11))


def test_order_by_negated_key():
    assert order_by(range(1, 6), key=lambda n: -n) == [5, 4, 3, 2, 1]


def test_order_by_is_stable(patients):
    names = [p.full_name for p in order_by(patients, key=lambda p: p.days, descending=True)]
    # Петров and Иванов both have 5 bed days and keep their original order
    assert names == [
        "Васильев Николай Иванович",
        "Смирнова Мария Петровна",
        "Петров Иван Иванович",
        "Иванов Алексей Андреевич",
        "Павлова Анна Львовна",
    ]
    ascending = [p.days for p in order_by(patients, key=lambda p: p.days)]
    assert ascending == [4, 5, 5, 7, 9]


def test_order_by_returns_new_list():
    source = [3, 1, 2]
    result = order_by(source, key=lambda n: n)
    assert result == [1, 2, 3]
    assert source == [3, 1, 2]


def test_bed_days_by_diagnosis(patients):
    totals = bed_days_by_diagnosis(patients)
    assert totals == {"J11.0": 14, "J15.9": 12, "J12.8": 4}
    assert list(totals) == ["J11.0", "J15.9", "J12.8"]
    assert all(isinstance(v, int) for v in totals.values())
