"""Core data structures for the demos."""

from funcprimer.core.data_models import Patient, PatientRegistry
from funcprimer.core.enums import Diagnosis

__all__ = [
    "Patient",
    "PatientRegistry",
    "Diagnosis",
]
