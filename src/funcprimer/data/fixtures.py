"""Fixed inputs shared by every demo routine.

Both constants are built once at import time and are immutable afterwards:
the registry is a frozen model holding frozen patients, and the numbers are a
tuple.
"""

from typing import Tuple

from funcprimer.core.config import settings
from funcprimer.core.data_models import Patient, PatientRegistry
from funcprimer.core.enums import Diagnosis

__all__ = ["PATIENTS", "NUMBERS"]

PATIENTS = PatientRegistry(
    patients=[
        Patient(
            full_name="Петров Иван Иванович",
            age=68,
            diagnosis=Diagnosis.INFLUENZA_WITH_PNEUMONIA.value,
            days=5,
        ),
        Patient(
            full_name="Смирнова Мария Петровна",
            age=45,
            diagnosis=Diagnosis.BACTERIAL_PNEUMONIA.value,
            days=7,
        ),
        Patient(
            full_name="Иванов Алексей Андреевич",
            age=34,
            diagnosis=Diagnosis.BACTERIAL_PNEUMONIA.value,
            days=5,
        ),
        Patient(
            full_name="Павлова Анна Львовна",
            age=52,
            diagnosis=Diagnosis.VIRAL_PNEUMONIA_OTHER.value,
            days=4,
        ),
        Patient(
            full_name="Васильев Николай Иванович",
            age=60,
            diagnosis=Diagnosis.INFLUENZA_WITH_PNEUMONIA.value,
            days=9,
        ),
    ]
)

NUMBERS: Tuple[int, ...] = tuple(range(1, settings.NUMBERS_UPPER_BOUND + 1))
