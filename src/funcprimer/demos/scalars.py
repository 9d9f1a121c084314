"""The five functional-programming demos applied to plain integers."""

import logging
import typing as tp

from funcprimer.functional.aggregates import fold, order_by
from funcprimer.functional.arithmetic import (
    add,
    apply_operation,
    create_multiplier,
    curried_add,
    curried_add3,
    is_even,
    multiply,
    square,
)
from funcprimer.functional.combinators import compose, partial_apply

__all__ = [
    "TITLE",
    "ROUTINES",
    "functions_as_arguments",
    "functions_as_return_values",
    "builtin_higher_order_functions",
    "function_composition",
    "currying",
    "stringify",
    "exclaim",
]

logger = logging.getLogger(__name__)

TITLE = "Five principles of functional programming (numbers)"


def stringify(x: int) -> str:
    return f"Result: {x}"


def exclaim(text: str) -> str:
    return text + "!"


def _join(values: tp.Iterable[int]) -> str:
    return ", ".join(str(value) for value in values)


def functions_as_arguments(numbers: tp.Sequence[int]) -> tp.List[str]:
    """Pass named functions and lambdas to ``apply_operation``."""
    results = [
        apply_operation(5, 3, add),
        apply_operation(5, 3, multiply),
        apply_operation(5, 3, lambda x, y: x - y),
        apply_operation(2, 10, lambda x, y: x**y),
    ]
    return ["Functions as arguments:"] + [f"Operation result: {r}" for r in results]


def functions_as_return_values(numbers: tp.Sequence[int]) -> tp.List[str]:
    """Build multipliers with a function factory."""
    double = create_multiplier(2)
    triple = create_multiplier(3)
    times_ten = create_multiplier(10)
    return [
        "Functions as return values:",
        f"Double 5: {double(5)}",
        f"Triple 5: {triple(5)}",
        f"5 * 10: {times_ten(5)}",
        f"7 * 100: {create_multiplier(100)(7)}",
    ]


def builtin_higher_order_functions(numbers: tp.Sequence[int]) -> tp.List[str]:
    """Filter, map, fold and order the integers."""
    evens = filter(is_even, numbers)
    squares = map(square, numbers)
    total = fold(numbers, 0, lambda acc, n: acc + n)
    descending = order_by(numbers, key=lambda n: -n)
    logger.debug(f"Folded {len(numbers)} numbers into {total}")
    return [
        "Built-in higher-order functions:",
        f"Even numbers: {_join(evens)}",
        f"Squares: {_join(squares)}",
        f"Sum: {total}",
        f"Descending: {_join(descending)}",
    ]


def function_composition(numbers: tp.Sequence[int]) -> tp.List[str]:
    """Chain square, stringify and exclaim."""
    square_and_stringify = compose(stringify, square)
    process_number = compose(exclaim, compose(stringify, square))

    def alternative(x: int) -> str:
        return exclaim(stringify(square(x)))

    return [
        "Function composition:",
        square_and_stringify(5),
        process_number(3),
        alternative(4),
    ]


def currying(numbers: tp.Sequence[int]) -> tp.List[str]:
    """Fix leading arguments of curried adders."""
    add5 = curried_add(5)
    add100 = partial_apply(add, 100)
    add10_and_20 = curried_add3(10)(20)
    return [
        "Currying:",
        str(add5(3)),
        str(add5(10)),
        str(curried_add(5)(3)),
        str(add100(50)),
        str(add10_and_20(30)),
    ]


# Built-in operations run third in the numbers demo
ROUTINES: tp.Tuple[tp.Callable[[tp.Sequence[int]], tp.List[str]], ...] = (
    functions_as_arguments,
    functions_as_return_values,
    builtin_higher_order_functions,
    function_composition,
    currying,
)
