"""Data models for the patient records used by the demos.

The models enforce data validation and immutability through Pydantic v2, so a
record can't be changed once it has been built. This is what lets every demo
routine read the same shared dataset without defensive copies.

Key Features:
    - Frozen records with non-negative ages and bed-day counts
    - Ordered, read-only registry preserving insertion order
    - Pandas DataFrame view for tabular aggregation
"""

from typing import Annotated, Iterator, Tuple, overload

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, computed_field

from .types import FrozenSequence, NonEmptyStr, NonNegativeInt

__all__ = [
    "Patient",
    "PatientRegistry",
]


class Patient(BaseModel):
    """A single hospital stay.

    Attributes:
        full_name: Full name of the patient.
        age: Age in years.
        diagnosis: ICD-10 code followed by the diagnosis description.
        days: Number of bed days spent in hospital.
    """

    model_config = ConfigDict(frozen=True)

    full_name: NonEmptyStr = Field(..., description="Full name of the patient.")
    age: NonNegativeInt = Field(..., description="Age in years.")
    diagnosis: NonEmptyStr = Field(
        ..., description="ICD-10 code followed by the diagnosis description."
    )
    days: NonNegativeInt = Field(..., description="Number of bed days.")

    @computed_field
    @property
    def diagnosis_code(self) -> str:
        """ICD-10 code part of the diagnosis (text before the first space)."""
        return self.diagnosis.split(" ", 1)[0]


class PatientRegistry(BaseModel):
    """Read-only, ordered collection of patients.

    The registry keeps patients in insertion order and never reorders them.
    Any iterable of patients is accepted at construction and stored as a tuple.

    Iterating a registry yields its patients, not the usual pydantic
    (field, value) pairs, so ``dict(registry)`` is not supported. Use
    ``registry.model_dump()`` to get the fields as a mapping.
    """

    model_config = ConfigDict(frozen=True)

    patients: Annotated[Tuple[Patient, ...], FrozenSequence] = Field(
        default_factory=tuple, description="Patients in insertion order."
    )

    def __len__(self) -> int:
        return len(self.patients)

    def __iter__(self) -> Iterator[Patient]:  # type: ignore[override]
        return iter(self.patients)

    @overload
    def __getitem__(self, index: int) -> Patient: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Patient, ...]: ...

    def __getitem__(self, index):
        return self.patients[index]

    @property
    def df(self) -> pd.DataFrame:
        """Tabular view of the registry, one row per patient in insertion order.

        Returns:
            DataFrame with columns full_name, age, diagnosis, days and
            diagnosis_code. An empty registry yields an empty frame with the
            same columns.
        """
        columns = ["full_name", "age", "diagnosis", "days", "diagnosis_code"]
        return pd.DataFrame(
            [patient.model_dump() for patient in self.patients], columns=columns
        )
