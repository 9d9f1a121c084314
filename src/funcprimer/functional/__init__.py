"""Functional primitives for funcprimer.

This module provides the functional programming utilities the demos are built
from: combinators for composing and currying functions, predicate factories
over patient records, folds and orderings over sequences, and small scalar
operations. Utilities are stateless and side-effect-free so they can be
composed freely.
"""

from funcprimer.functional.combinators import (
    identity,
    compose,
    compose_all,
    pipe,
    curry,
    partial_apply,
)
from funcprimer.functional.aggregates import (
    fold,
    order_by,
    total_bed_days,
    average_bed_days,
    bed_days_by_diagnosis,
)

__all__ = [
    "identity",
    "compose",
    "compose_all",
    "pipe",
    "curry",
    "partial_apply",
    "fold",
    "order_by",
    "total_bed_days",
    "average_bed_days",
    "bed_days_by_diagnosis",
]
