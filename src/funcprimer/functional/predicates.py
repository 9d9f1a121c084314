"""Predicate factories and filter/map helpers over patient records.

Every factory returns a plain closure that captures its configuration value at
creation time. The returned functions hold no mutable state, so predicates built
from different values never interfere with each other and stay usable after the
factory call has returned.
"""

import typing as tp

from funcprimer.core.data_models import Patient
from funcprimer.core.types import Mapper, Predicate
from funcprimer.functional.combinators import curry

__all__ = [
    "filter_patients",
    "age_above",
    "diagnosis_filter",
    "has_min_bed_days",
    "min_bed_days",
    "full_name",
    "format_stay",
    "format_stay_line",
    "compose_filter_and_map",
]

PatientPredicate = Predicate[Patient]
PatientMapper = Mapper[Patient, str]


def filter_patients(
    patients: tp.Iterable[Patient], predicate: PatientPredicate
) -> tp.List[Patient]:
    """Select the patients satisfying ``predicate``, keeping their order.

    Args:
        patients: Patients to filter. The input is never modified.
        predicate: Function deciding whether a patient is kept.

    Returns:
        A new list with the matching patients. May be empty.
    """
    return [patient for patient in patients if predicate(patient)]


def age_above(threshold: int) -> PatientPredicate:
    """Build a predicate matching patients strictly older than ``threshold``."""

    def predicate(patient: Patient) -> bool:
        return patient.age > threshold

    return predicate


def diagnosis_filter(diagnosis: str) -> PatientPredicate:
    """Build a predicate matching a diagnosis, ignoring case.

    Args:
        diagnosis: Full diagnosis text to match (code and description).

    Returns:
        Predicate that is True when ``patient.diagnosis`` equals ``diagnosis``
        under case folding.
    """
    target = diagnosis.casefold()

    def predicate(patient: Patient) -> bool:
        return patient.diagnosis.casefold() == target

    return predicate


def has_min_bed_days(threshold: int, patient: Patient) -> bool:
    """True when ``patient`` stayed at least ``threshold`` bed days."""
    return patient.days >= threshold


# min_bed_days(5) fixes the threshold and returns a one-argument predicate
min_bed_days = curry(has_min_bed_days)


def full_name(patient: Patient) -> str:
    return patient.full_name


def format_stay(patient: Patient) -> str:
    """Render ``"<full name> — <days> bed days"``."""
    return f"{patient.full_name} — {patient.days} bed days"


def format_stay_line() -> PatientMapper:
    """Build the mapper rendering ``"Patient: <full name>, bed days: <days>"``."""

    def mapper(patient: Patient) -> str:
        return f"Patient: {patient.full_name}, bed days: {patient.days}"

    return mapper


def compose_filter_and_map(
    predicate: PatientPredicate, mapper: PatientMapper
) -> tp.Callable[[tp.Iterable[Patient]], tp.List[str]]:
    """Combine a filter and a mapper into a single sequence transform.

    The returned function filters first, then maps every kept patient, and
    preserves the input order.
    """

    def transform(patients: tp.Iterable[Patient]) -> tp.List[str]:
        return [mapper(patient) for patient in filter_patients(patients, predicate)]

    return transform
