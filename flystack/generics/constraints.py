"""
Capability constraints for generic element types.

Constraints are nominal: a type satisfies one only if it inherits from it
or is registered with it. The standard numeric tower is registered with
``Numeric`` (and so with ``AdditiveArithmetic``); ``GenericConstraint`` has
nothing registered, so plain ``int`` does not conform to it even though
it supports multiplication.

The ``Supports*`` protocols carry the same requirements for static type
checkers; the ABCs are what is enforced at call time.
"""

import numbers
from abc import ABC
from dataclasses import dataclass
from typing import Any, Iterable, NoReturn, Optional, Protocol, Union

from ..errors import ConstraintViolationError, ElementTypeError
from ..logging.config import (
    get_constraint_logger,
    log_constraint_rejection,
    log_element_type_rejection,
)

constraint_logger = get_constraint_logger(__name__)


class SupportsAdd(Protocol):
    def __add__(self, other: Any) -> Any: ...


class SupportsMultiply(Protocol):
    def __add__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...


class AdditiveArithmetic(ABC):
    """Types whose values can be added and subtracted."""


class Numeric(AdditiveArithmetic):
    """Additive types that also support multiplication by an integer."""


Numeric.register(numbers.Number)


class GenericConstraint(Numeric):
    """Restricts generic input to types that opted in explicitly."""


@dataclass(frozen=True)
class IntWrapper(GenericConstraint):
    """Wrapper over an integer that conforms to ``GenericConstraint``."""

    value: int

    def __int__(self) -> int:
        return self.value

    def _coerce(self, other: Any) -> Optional[int]:
        if isinstance(other, IntWrapper):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __add__(self, other: Any) -> Union["IntWrapper", Any]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return IntWrapper(self.value + rhs)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Union["IntWrapper", Any]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return IntWrapper(self.value - rhs)

    def __rsub__(self, other: Any) -> Union["IntWrapper", Any]:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return IntWrapper(lhs - self.value)

    def __mul__(self, other: Any) -> Union["IntWrapper", Any]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return IntWrapper(self.value * rhs)

    __rmul__ = __mul__


def satisfies(element_type: type, constraint: type) -> bool:
    """Returns True if ``element_type`` conforms to ``constraint``."""
    return isinstance(element_type, type) and issubclass(element_type, constraint)


def require_constraint(element_type: type, constraint: type, operation: str) -> None:
    """
    Reject ``element_type`` unless it satisfies ``constraint``.

    Args:
        element_type: Concrete type supplied to the generic operation
        constraint: Capability the operation requires
        operation: Name of the operation, for logging and the error

    Raises:
        ConstraintViolationError: If the constraint is not satisfied
    """
    if satisfies(element_type, constraint):
        return

    type_name = getattr(element_type, "__name__", repr(element_type))
    log_constraint_rejection(
        constraint_logger,
        operation=operation,
        constraint=constraint.__name__,
        element_type=type_name,
    )
    raise ConstraintViolationError(
        f"{operation} requires that '{type_name}' conform to '{constraint.__name__}'",
        constraint=constraint.__name__,
        element_type=type_name,
        operation=operation,
    )


def reject_element_type(message: str, operation: str, expected_type: Optional[str],
                        actual_type: str) -> NoReturn:
    """Log a mismatched element type and raise ``ElementTypeError``."""
    log_element_type_rejection(
        constraint_logger,
        operation=operation,
        expected_type=expected_type,
        actual_type=actual_type,
    )
    raise ElementTypeError(message, expected_type=expected_type, actual_type=actual_type)


def common_type(values: Iterable[Any], declared: Optional[type] = None,
                operation: str = "common_type") -> Optional[type]:
    """
    Return the single concrete type shared by ``values``.

    Args:
        values: Elements to inspect
        declared: Expected element type, returned for empty input
        operation: Name of the calling operation, for logging

    Returns:
        The shared type, or ``declared`` (possibly None) when ``values`` is empty

    Raises:
        ElementTypeError: If elements differ in type or differ from ``declared``
    """
    if declared is not None and not isinstance(declared, type):
        reject_element_type(
            f"Element type must be a type, got {declared!r}",
            operation=operation,
            expected_type=None,
            actual_type=type(declared).__name__,
        )

    found = declared
    for value in values:
        value_type = type(value)
        if found is None:
            found = value_type
        elif value_type is not found:
            reject_element_type(
                f"Expected elements of type '{found.__name__}', got '{value_type.__name__}'",
                operation=operation,
                expected_type=found.__name__,
                actual_type=value_type.__name__,
            )
    return found
