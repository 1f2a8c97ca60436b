"""
Constrained generics module.

A LIFO container parameterized over one element type, nominal capability
constraints, and generic functions that reject non-conforming types
before processing any element.
"""

from .constraints import (
    AdditiveArithmetic,
    GenericConstraint,
    IntWrapper,
    Numeric,
    require_constraint,
    satisfies,
)
from .functions import (
    add_values,
    iterate_and_multiply,
    make_pair,
    map_doubled,
    multiply_all,
)
from .stack import Stack

__all__ = [
    "AdditiveArithmetic",
    "GenericConstraint",
    "IntWrapper",
    "Numeric",
    "Stack",
    "add_values",
    "iterate_and_multiply",
    "make_pair",
    "map_doubled",
    "multiply_all",
    "require_constraint",
    "satisfies",
]
