"""Scalar operations used by the integer demos."""

import typing as tp

from funcprimer.functional.combinators import curry

__all__ = [
    "add",
    "add3",
    "multiply",
    "square",
    "is_even",
    "apply_operation",
    "create_multiplier",
    "curried_add",
    "curried_add3",
]

BinaryOperation = tp.Callable[[int, int], int]


def add(x: int, y: int) -> int:
    return x + y


def add3(x: int, y: int, z: int) -> int:
    return x + y + z


def multiply(x: int, y: int) -> int:
    return x * y


def square(x: int) -> int:
    return x * x


def is_even(x: int) -> bool:
    return x % 2 == 0


def apply_operation(a: int, b: int, operation: BinaryOperation) -> int:
    """Apply a binary ``operation`` to ``a`` and ``b``."""
    return operation(a, b)


def create_multiplier(factor: int) -> tp.Callable[[int], int]:
    """Build a function multiplying its argument by ``factor``.

    Examples:
        >>> double = create_multiplier(2)
        >>> double(5)
        10
        >>> create_multiplier(100)(7)
        700
    """

    def multiplier(x: int) -> int:
        return x * factor

    return multiplier


# Curried forms: curried_add(5)(3) == add(5, 3)
curried_add = curry(add)
curried_add3 = curry(add3)
