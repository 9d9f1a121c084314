"""Enumerations for the diagnoses present in the demo dataset."""

from enum import Enum


class Diagnosis(Enum):
    """ICD-10 diagnoses, valued by their code followed by the description."""

    INFLUENZA_WITH_PNEUMONIA = "J11.0 Грипп с пневмонией, вирус не идентифицирован"
    VIRAL_PNEUMONIA_OTHER = "J12.8 Другая вирусная пневмония"
    BACTERIAL_PNEUMONIA = "J15.9 Бактериальная пневмония неуточненная"

    @property
    def code(self) -> str:
        """ICD-10 code part of the diagnosis (e.g., 'J15.9')."""
        return self.value.split(" ", 1)[0]
