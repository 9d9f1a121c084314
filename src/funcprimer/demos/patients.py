"""The five functional-programming demos applied to patient records.

Each routine reads the patients it is given, never modifies them, and returns
its report as a list of lines, the first of which is a heading.
"""

import logging
import typing as tp

from funcprimer.core.config import settings
from funcprimer.core.data_models import Patient, PatientRegistry
from funcprimer.core.enums import Diagnosis
from funcprimer.functional.aggregates import (
    average_bed_days,
    bed_days_by_diagnosis,
    order_by,
)
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

__all__ = [
    "TITLE",
    "ROUTINES",
    "functions_as_arguments",
    "functions_as_return_values",
    "function_composition",
    "currying",
    "builtin_higher_order_functions",
]

logger = logging.getLogger(__name__)

TITLE = "Five principles of functional programming (patients)"
NO_MATCHES = "(no matches)"


def _or_no_matches(lines: tp.List[str]) -> tp.List[str]:
    return lines or [NO_MATCHES]


def functions_as_arguments(patients: PatientRegistry) -> tp.List[str]:
    """Filter by a predicate passed in as an argument."""
    older = filter_patients(patients, age_above(settings.AGE_THRESHOLD))
    logger.debug(f"{len(older)} patients older than {settings.AGE_THRESHOLD}")
    return [f"Patients older than {settings.AGE_THRESHOLD}:"] + _or_no_matches(
        list(map(full_name, older))
    )


def functions_as_return_values(patients: PatientRegistry) -> tp.List[str]:
    """Filter by a predicate produced by a factory."""
    diagnosis = settings.FACTORY_DIAGNOSIS
    matching = filter_patients(patients, diagnosis_filter(diagnosis))
    heading = f"Patients diagnosed with {Diagnosis(diagnosis).code}:"
    return [heading] + _or_no_matches([format_stay(patient) for patient in matching])


def function_composition(patients: PatientRegistry) -> tp.List[str]:
    """Combine a filter and a mapper into one function over the sequence."""
    diagnosis = settings.COMPOSITION_DIAGNOSIS
    describe = compose_filter_and_map(diagnosis_filter(diagnosis), format_stay)
    return [
        f"Composition: patients diagnosed with {Diagnosis(diagnosis).code}:"
    ] + _or_no_matches(describe(patients))


def currying(patients: PatientRegistry) -> tp.List[str]:
    """Filter and format through functions configured one argument at a time."""
    kept = filter_patients(patients, min_bed_days(settings.MIN_BED_DAYS))
    lines = list(map(format_stay_line(), kept))
    return [f"Currying result (bed days >= {settings.MIN_BED_DAYS}):"] + _or_no_matches(
        lines
    )


def builtin_higher_order_functions(patients: PatientRegistry) -> tp.List[str]:
    """Fold, order and aggregate the bed days."""
    average = average_bed_days(patients)
    if average is None:
        logger.warning("No patients to aggregate, skipping the average")
        return ["Average bed days: no data"]

    lines = [f"Average bed days: {average:.1f}", "Longest stays first:"]
    longest_first: tp.List[Patient] = order_by(
        patients, key=lambda patient: patient.days, descending=True
    )
    lines.extend(format_stay(patient) for patient in longest_first)

    lines.append("Bed days by diagnosis:")
    lines.extend(
        f"{code}: {total}" for code, total in bed_days_by_diagnosis(patients).items()
    )
    return lines


ROUTINES: tp.Tuple[tp.Callable[[PatientRegistry], tp.List[str]], ...] = (
    functions_as_arguments,
    functions_as_return_values,
    function_composition,
    currying,
    builtin_higher_order_functions,
)
