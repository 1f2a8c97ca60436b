"""
Generic last-in-first-out container.

A ``Stack`` holds elements of exactly one concrete type. The type is fixed
by ``element_type`` or by the first element pushed, and may additionally be
required to satisfy a capability constraint such as ``Numeric``.

Empty access is part of the normal contract: ``pop()`` and ``head`` return
None rather than raising, which is why None itself cannot be stored.

A stack is an exclusively-owned mutable handle. Assignment aliases it;
use ``copy()`` for an independent value.
"""

from typing import Any, Generic, Iterable, Optional, TypeVar

from .constraints import reject_element_type, require_constraint

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO container parameterized over its element type."""

    def __init__(
        self,
        elements: Optional[Iterable[T]] = None,
        *,
        element_type: Optional[type] = None,
        constraint: Optional[type] = None,
    ):
        """
        Args:
            elements: Initial elements, pushed in iteration order
            element_type: Concrete element type; inferred from the first push if omitted
            constraint: Capability the element type must satisfy

        Raises:
            ConstraintViolationError: If ``element_type`` violates ``constraint``
            ElementTypeError: If ``element_type`` is not a type or an initial
                element has the wrong type
        """
        if element_type is not None and not isinstance(element_type, type):
            reject_element_type(
                f"Stack element_type must be a type, got {element_type!r}",
                operation="Stack",
                expected_type=None,
                actual_type=type(element_type).__name__,
            )

        self._items: list[T] = []
        self._element_type = element_type
        self._constraint = constraint

        if element_type is not None and constraint is not None:
            require_constraint(element_type, constraint, "Stack")

        if elements is not None:
            self.extend(elements)

    @property
    def element_type(self) -> Optional[type]:
        return self._element_type

    @property
    def constraint(self) -> Optional[type]:
        return self._constraint

    def _check(self, values: tuple) -> Optional[type]:
        """Validate ``values`` against the element type without storing anything."""
        element_type = self._element_type
        for value in values:
            if value is None:
                reject_element_type(
                    "None cannot be stored in a Stack",
                    operation="Stack.push",
                    expected_type=getattr(element_type, "__name__", None),
                    actual_type="NoneType",
                )
            if element_type is None:
                element_type = type(value)
                if self._constraint is not None:
                    require_constraint(element_type, self._constraint, "Stack.push")
            elif type(value) is not element_type:
                reject_element_type(
                    f"Stack of '{element_type.__name__}' cannot hold '{type(value).__name__}'",
                    operation="Stack.push",
                    expected_type=element_type.__name__,
                    actual_type=type(value).__name__,
                )
        return element_type

    def push(self, *elements: T) -> None:
        """Push elements onto the top; the leftmost one ends up deepest."""
        self._element_type = self._check(elements)
        self._items.extend(elements)

    def extend(self, elements: Iterable[T]) -> None:
        """Push every element of ``elements`` in iteration order."""
        self.push(*elements)

    def pop(self) -> Optional[T]:
        """Remove and return the top element, or None if the stack is empty."""
        if not self._items:
            return None
        return self._items.pop()

    @property
    def head(self) -> Optional[T]:
        """Top element without removing it, or None if the stack is empty."""
        if self.is_empty:
            return None
        return self._items[-1]

    @property
    def is_empty(self) -> bool:
        return not self._items

    def copy(self) -> "Stack[T]":
        clone: Stack[T] = Stack(element_type=self._element_type, constraint=self._constraint)
        clone._items = list(self._items)
        return clone

    __copy__ = copy

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._element_type is other._element_type and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        type_name = self._element_type.__name__ if self._element_type else "?"
        return f"Stack[{type_name}]({self._items!r})"
