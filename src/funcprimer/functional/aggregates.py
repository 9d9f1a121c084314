"""Folds, orderings and bed-day aggregates.

``fold`` is a left fold with an explicit seed: elements are consumed in their
original order, so ``fold([a, b], s, f) == f(f(s, a), b)``. ``order_by`` is a
stable sort that always returns a new list, leaving its input untouched.

Note:
    The bed-day average is undefined for an empty set of patients. Instead of
    dividing by zero, ``average_bed_days`` returns ``None`` in that case and
    callers render it as missing data.
"""

import functools
import typing as tp

from funcprimer.core.data_models import Patient, PatientRegistry

__all__ = [
    "fold",
    "order_by",
    "total_bed_days",
    "average_bed_days",
    "bed_days_by_diagnosis",
]

T = tp.TypeVar("T")
Acc = tp.TypeVar("Acc")


def fold(
    sequence: tp.Iterable[T], seed: Acc, reducer: tp.Callable[[Acc, T], Acc]
) -> Acc:
    """Accumulate ``sequence`` from left to right starting from ``seed``.

    Args:
        sequence: Elements to accumulate.
        seed: Initial accumulator, returned as is for an empty sequence.
        reducer: Function of ``(accumulator, element)`` returning the next
            accumulator.

    Returns:
        The final accumulator.
    """
    return functools.reduce(reducer, sequence, seed)


def order_by(
    sequence: tp.Iterable[T],
    key: tp.Callable[[T], tp.Any],
    descending: bool = False,
) -> tp.List[T]:
    """Stable sort of ``sequence`` by ``key``.

    Elements with equal keys keep their relative order in both directions.

    Args:
        sequence: Elements to order. Not modified.
        key: Function deriving the sort key of an element.
        descending: Sort from the largest key to the smallest.

    Returns:
        A new, ordered list.
    """
    return sorted(sequence, key=key, reverse=descending)


def total_bed_days(patients: tp.Iterable[Patient]) -> int:
    """Sum the bed days of all patients, folding from a seed of 0."""
    return fold(patients, 0, lambda acc, patient: acc + patient.days)


def average_bed_days(patients: tp.Iterable[Patient]) -> tp.Optional[float]:
    """Mean number of bed days per patient.

    Args:
        patients: Patients to average over.

    Returns:
        ``total / count`` as a float, or ``None`` when there are no patients.
    """
    patients = tuple(patients)
    if not patients:
        return None
    return total_bed_days(patients) / len(patients)


def bed_days_by_diagnosis(registry: PatientRegistry) -> tp.Dict[str, int]:
    """Total bed days per diagnosis code.

    Args:
        registry: Patients to aggregate.

    Returns:
        Mapping from ICD-10 code to the sum of bed days, ordered by the first
        appearance of each code in the registry. Empty for an empty registry.
    """
    df = registry.df
    if df.empty:
        return {}
    totals = df.groupby("diagnosis_code", sort=False)["days"].sum()
    return {code: int(total) for code, total in totals.items()}
