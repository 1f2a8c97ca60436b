"""
Error classification for flystack.

Only two conditions are errors: a type that does not satisfy a required
capability constraint, and invalid configuration. Empty-container access
is part of the normal return contract and never raises.
"""

from .configuration import ConfigurationError
from .constraints import (
    ConstraintViolationError,
    ElementTypeError,
)

__all__ = [
    # Constraint errors
    "ConstraintViolationError",
    "ElementTypeError",
    # Configuration errors
    "ConfigurationError",
]
