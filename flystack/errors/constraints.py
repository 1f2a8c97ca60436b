"""
Constraint error classifications for generic operations.

These exceptions are raised at the boundary of a generic operation, before
any element is processed, when the supplied element type is not acceptable.
"""

from typing import Any, Dict, Optional


class ConstraintViolationError(TypeError):
    """An element type does not satisfy a required capability constraint."""

    def __init__(self, message: str, constraint: Optional[str] = None,
                 element_type: Optional[str] = None, operation: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.constraint = constraint
        self.element_type = element_type
        self.operation = operation
        self.context = context or {}
        self.recoverable = False


class ElementTypeError(TypeError):
    """A value does not match the element type a container was fixed to."""

    def __init__(self, message: str, expected_type: Optional[str] = None,
                 actual_type: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.expected_type = expected_type
        self.actual_type = actual_type
        self.context = context or {}
        # Container is left untouched, caller may retry with a valid value
        self.recoverable = True
