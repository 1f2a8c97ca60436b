"""
Capability contract module.

Defines the ``Flyable`` protocol, the flight status it reports, and the
game units that conform to it.
"""

from .flyable import Flyable
from .models import FlightPhase, FlightState, FlightStatus
from .units import Airplane, Bird

__all__ = [
    "Airplane",
    "Bird",
    "FlightPhase",
    "FlightState",
    "FlightStatus",
    "Flyable",
]
