"""Capability contract for objects that can fly."""

from typing import Protocol, runtime_checkable

from .models import FlightStatus


@runtime_checkable
class Flyable(Protocol):
    """Set of requirements for an object that can fly.

    Units opt in structurally by implementing all four methods; no base
    class is involved. Every method must be callable in any phase and
    return a sensible status when called out of order.
    """

    def take_off(self) -> bool:
        """Try to leave the ground.

        Returns:
            True if the unit is airborne after the call
        """
        ...

    def fly(self) -> FlightStatus:
        """Report the current flight state, advancing it one step while airborne."""
        ...

    def land(self) -> None:
        """Try to return to the ground. Observe the outcome via ``landed()``."""
        ...

    def landed(self) -> bool:
        """Returns True if the unit is currently on the ground."""
        ...
