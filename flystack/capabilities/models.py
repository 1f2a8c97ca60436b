"""
Flight data models for flying game units.

Immutable data structures for a unit's runtime flight state and the
snapshots handed back to callers by ``fly()``.
"""

from dataclasses import dataclass, replace
from enum import Enum


class FlightPhase(str, Enum):
    """Flight phases of a unit."""
    GROUNDED = "grounded"
    AIRBORNE = "airborne"


@dataclass(frozen=True)
class FlightStatus:
    """Snapshot of flight parameters returned by ``Flyable.fly()``."""

    phase: FlightPhase
    altitude: float = 0.0                            # metres
    velocity: float = 0.0                            # m/s
    step: int = 0                                    # fly() steps since take-off

    @property
    def airborne(self) -> bool:
        return self.phase == FlightPhase.AIRBORNE


@dataclass(frozen=True)
class FlightState:
    """Runtime flight state owned by a single unit."""

    phase: FlightPhase = FlightPhase.GROUNDED
    altitude: float = 0.0
    velocity: float = 0.0
    step: int = 0

    def with_phase(self, new_phase: FlightPhase) -> 'FlightState':
        """Create new state in ``new_phase``; landing resets all motion."""
        if new_phase == FlightPhase.GROUNDED:
            return FlightState(phase=FlightPhase.GROUNDED)
        if new_phase == self.phase:
            return self
        return FlightState(phase=new_phase, altitude=self.altitude, velocity=self.velocity)

    def with_step(self, altitude: float, velocity: float) -> 'FlightState':
        """Advance one simulated step with new altitude and velocity."""
        return replace(self, altitude=altitude, velocity=velocity, step=self.step + 1)

    def to_status(self) -> FlightStatus:
        return FlightStatus(
            phase=self.phase,
            altitude=self.altitude,
            velocity=self.velocity,
            step=self.step,
        )
