"""Demo routines for the patient and number variants."""

from funcprimer.demos import patients, scalars

__all__ = ["patients", "scalars"]
