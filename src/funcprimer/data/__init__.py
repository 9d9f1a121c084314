"""Imports for the fixed demo data"""

from funcprimer.data.fixtures import PATIENTS, NUMBERS

__all__ = ["PATIENTS", "NUMBERS"]
