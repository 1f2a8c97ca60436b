"""
Flystack - capability contracts and constrained generics

A small library built around two independent pieces: the ``Flyable``
capability contract implemented by the units of a toy game, and a
constrained generic LIFO container with constrained generic functions.
"""

__version__ = "0.1.0"
__author__ = "Flystack Team"
