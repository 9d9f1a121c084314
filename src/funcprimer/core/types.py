"""Reusable type definitions for the funcprimer data models.

Type Aliases:
    NonNegativeInt: An integer greater than or equal to zero.
    NonEmptyStr: A string with at least one non-whitespace character.
    Predicate: A one-argument function returning a boolean.
    Mapper: A one-argument function returning a transformed value.
"""

from typing import Annotated, Any, Callable, Iterable, Tuple, TypeVar
import annotated_types as at
from pydantic.functional_validators import AfterValidator, BeforeValidator

__all__ = [
    "NonNegativeInt",
    "NonEmptyStr",
    "Predicate",
    "Mapper",
    "freeze_sequence",
    "FrozenSequence",
]

T = TypeVar("T")
U = TypeVar("U")

Predicate = Callable[[T], bool]
Mapper = Callable[[T], U]


def _strip_and_check(value: str) -> str:
    """Validator rejecting blank strings.

    Args:
        value: The string to validate.
    Returns:
        The stripped string.
    Raises:
        ValueError: If the string is blank.
    """
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value must not be blank.")
    return stripped


def freeze_sequence(items: Any) -> Tuple[Any, ...]:
    """Validator turning any iterable (except strings) into a tuple.

    Args:
        items: Iterable of items to freeze.
    Returns:
        A tuple holding the items in their original order.
    """
    if isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
        return items  # Let pydantic report the type error
    return tuple(items)


# Counts and ages can never be negative
NonNegativeInt = Annotated[int, at.Ge(0)]

# Names and labels must carry some text
NonEmptyStr = Annotated[str, AfterValidator(_strip_and_check)]

# Ordered collections are stored as tuples so they can't be mutated in place
FrozenSequence = BeforeValidator(freeze_sequence)
