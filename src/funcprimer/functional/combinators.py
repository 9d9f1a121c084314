"""Function combinators: composition, piping, currying and partial application.

Composition follows the mathematical convention, ``compose(f, g)(x) ==
f(g(x))``: the right-most function runs first. ``pipe`` reads the other way
round and threads a value left to right through a series of functions.

Examples:
    >>> from funcprimer.functional.combinators import compose, curry
    >>> square = lambda x: x * x
    >>> stringify = lambda x: f"Result: {x}"
    >>> compose(stringify, square)(5)
    'Result: 25'
    >>> add = curry(lambda x, y: x + y)
    >>> add5 = add(5)
    >>> add5(3), add5(10)
    (8, 15)
"""

import functools
import inspect
import typing as tp

__all__ = [
    "identity",
    "compose",
    "compose_all",
    "pipe",
    "curry",
    "partial_apply",
]

A = tp.TypeVar("A")
B = tp.TypeVar("B")
C = tp.TypeVar("C")


def identity(value: A) -> A:
    """Return the argument unchanged."""
    return value


def compose(
    outer: tp.Callable[[B], C], inner: tp.Callable[[A], B]
) -> tp.Callable[[A], C]:
    """Compose two one-argument functions.

    Args:
        outer: Function applied second.
        inner: Function applied first.

    Returns:
        A function computing ``outer(inner(x))``.
    """

    def composed(value: A) -> C:
        return outer(inner(value))

    return composed


def compose_all(
    *functions: tp.Callable[[tp.Any], tp.Any],
) -> tp.Callable[[tp.Any], tp.Any]:
    """Compose any number of one-argument functions, right-most first.

    ``compose_all(f, g, h)(x) == f(g(h(x)))``. With no functions the identity is
    returned.
    """
    return functools.reduce(compose, functions, identity)


def pipe(value: tp.Any, *functions: tp.Callable[[tp.Any], tp.Any]) -> tp.Any:
    """Thread ``value`` through ``functions`` from left to right."""
    return functools.reduce(lambda acc, fn: fn(acc), functions, value)


def _positional_arity(fn: tp.Callable[..., tp.Any]) -> int:
    """Count the required positional parameters of ``fn``.

    Raises:
        TypeError: If the signature can't be inspected or only takes
            ``*args``, in which case the arity has to be given explicitly.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise TypeError(
            f"Cannot infer the arity of {fn!r}; pass it explicitly"
        ) from e

    positional = (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )
    required = [
        p
        for p in signature.parameters.values()
        if p.kind in positional and p.default is inspect.Parameter.empty
    ]
    has_var_positional = any(
        p.kind is inspect.Parameter.VAR_POSITIONAL
        for p in signature.parameters.values()
    )
    if not required and has_var_positional:
        raise TypeError(
            f"Cannot infer the arity of variadic {fn!r}; pass it explicitly"
        )
    return len(required)


def curry(
    fn: tp.Callable[..., tp.Any], arity: tp.Optional[int] = None
) -> tp.Callable[..., tp.Any]:
    """Turn a function of ``arity`` positional arguments into a chain of calls.

    Every call binds one or more leading arguments. Once ``arity`` arguments
    have been collected the wrapped function runs and its result is returned;
    until then each call returns a new function expecting the rest. Supplying
    more than ``arity`` arguments in total raises ``TypeError``. Partially
    applied functions don't share state, so they can be stored and reused.

    Args:
        fn: The function to curry.
        arity: Number of positional arguments to collect. Inferred from the
            required positional parameters of ``fn`` when omitted.

    Returns:
        The curried function.

    Raises:
        TypeError: If ``fn`` is not callable or its arity can't be inferred,
            or (from the curried function) when too many arguments are given.
        ValueError: If ``arity`` is negative.

    Examples:
        >>> add3 = curry(lambda x, y, z: x + y + z)
        >>> add3(10)(20)(30)
        60
        >>> add3(10, 20)(30)
        60
    """
    if not callable(fn):
        raise TypeError(f"curry() expects a callable, got {type(fn).__name__}")
    if arity is None:
        arity = _positional_arity(fn)
    if arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")

    def bind(bound: tp.Tuple[tp.Any, ...]) -> tp.Callable[..., tp.Any]:
        @functools.wraps(fn)
        def step(*args: tp.Any) -> tp.Any:
            collected = bound + args
            if len(collected) > arity:
                name = getattr(fn, "__name__", repr(fn))
                raise TypeError(
                    f"{name}() takes {arity} curried arguments"
                    f" but {len(collected)} were given"
                )
            if len(collected) == arity:
                return fn(*collected)
            return bind(collected)

        return step

    return bind(())


def partial_apply(
    fn: tp.Callable[..., tp.Any], *args: tp.Any
) -> tp.Callable[..., tp.Any]:
    """Fix the leading positional arguments of ``fn``."""
    return functools.partial(fn, *args)
