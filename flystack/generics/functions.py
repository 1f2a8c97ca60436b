"""
Constrained generic functions.

Every function validates its whole input against the required constraint
before computing anything, so a rejected call produces no output and
never transforms part of a sequence. Inputs are never mutated.
"""

from typing import Iterable, Optional, Sequence, TypeVar

from .constraints import (
    AdditiveArithmetic,
    GenericConstraint,
    Numeric,
    SupportsAdd,
    SupportsMultiply,
    common_type,
    reject_element_type,
    require_constraint,
)

A = TypeVar("A", bound=SupportsAdd)
N = TypeVar("N", bound=SupportsMultiply)
K = TypeVar("K")
V = TypeVar("V")

DOUBLING_FACTOR = 2


def add_values(lhs: A, rhs: A) -> A:
    """
    Add two values of one type that supports addition.

    Raises:
        ElementTypeError: If ``lhs`` and ``rhs`` differ in type
        ConstraintViolationError: If the type is not ``AdditiveArithmetic``
    """
    if type(lhs) is not type(rhs):
        reject_element_type(
            f"add_values operands must share one type, got "
            f"'{type(lhs).__name__}' and '{type(rhs).__name__}'",
            operation="add_values",
            expected_type=type(lhs).__name__,
            actual_type=type(rhs).__name__,
        )
    require_constraint(type(lhs), AdditiveArithmetic, "add_values")
    return lhs + rhs  # type: ignore[no-any-return]


def make_pair(key: K, value: V) -> dict[K, V]:
    """Wrap ``key`` and ``value`` into a single-entry dictionary."""
    return {key: value}


def _validated(input: Iterable[N], constraint: type, operation: str,
               element_type: Optional[type]) -> Sequence[N]:
    items = list(input)
    found = common_type(items, declared=element_type, operation=operation)
    if found is not None:
        require_constraint(found, constraint, operation)
    return items


def multiply_all(input: Iterable[N], factor: int,
                 element_type: Optional[type] = None) -> list[N]:
    """
    Return a new list with every element multiplied by ``factor``.

    Args:
        input: Elements of one ``Numeric`` type
        factor: Integer scalar applied to each element
        element_type: Declared element type, checked even when ``input`` is empty

    Raises:
        ConstraintViolationError: If the element type is not ``Numeric``
        ElementTypeError: If elements do not share one type
    """
    items = _validated(input, Numeric, "multiply_all", element_type)
    return [item * factor for item in items]


def map_doubled(input: Iterable[N], element_type: Optional[type] = None) -> list[N]:
    """Return a copy of ``input`` with every ``Numeric`` element doubled."""
    items = _validated(input, Numeric, "map_doubled", element_type)
    return [item * DOUBLING_FACTOR for item in items]


def iterate_and_multiply(input: Iterable[N], element_type: Optional[type] = None) -> list[N]:
    """
    Return a copy of ``input`` with every element doubled.

    Only types that opted into ``GenericConstraint`` are accepted, so
    ``[IntWrapper(4)]`` is doubled while ``[4]`` is rejected.
    """
    items = _validated(input, GenericConstraint, "iterate_and_multiply", element_type)
    return [item * DOUBLING_FACTOR for item in items]
