"""
Flying units of the toy game.

``Bird`` and ``Airplane`` share no base class; both conform to
``Flyable`` structurally. Each unit owns its ``FlightState`` and swaps it
for a new immutable instance on every phase change or flight step.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..config.defaults import FlightParams
from ..config.loader import ConfigLoader
from ..logging.config import get_state_logger, log_state_transition
from .models import FlightPhase, FlightState, FlightStatus

state_logger = get_state_logger(__name__)


def _log_phase_change(unit_id: str, old: FlightState, new: FlightState,
                      trigger: str, context: Optional[dict[str, Any]] = None) -> None:
    log_state_transition(
        state_logger,
        unit_id=unit_id,
        from_state=old.phase.value,
        to_state=new.phase.value,
        trigger=trigger,
        context={"altitude": old.altitude, "step": old.step, **(context or {})},
    )


def _climb(state: FlightState, params: FlightParams) -> FlightState:
    altitude = min(params.cruise_altitude, state.altitude + params.climb_rate)
    return state.with_step(altitude=altitude, velocity=params.cruise_speed)


@dataclass
class Bird:
    """A bird that can always take off and climbs to its cruise altitude."""

    name: str = "bird"
    params: FlightParams = field(default_factory=FlightParams)
    _state: FlightState = field(default_factory=FlightState, init=False, repr=False)

    @classmethod
    def from_config(cls, unit_id: str, overrides: Optional[dict[str, Any]] = None,
                    loader: Optional[ConfigLoader] = None) -> "Bird":
        """Create a bird with flight parameters merged for ``unit_id``."""
        loader = loader or ConfigLoader.create()
        return cls(name=unit_id, params=loader.load_flight_params(unit_id, overrides))

    @property
    def state(self) -> FlightState:
        return self._state

    def take_off(self) -> bool:
        if self._state.phase == FlightPhase.AIRBORNE:
            return True

        new_state = self._state.with_phase(FlightPhase.AIRBORNE)
        _log_phase_change(self.name, self._state, new_state, trigger="take_off")
        self._state = new_state
        return True

    def fly(self) -> FlightStatus:
        if self._state.phase == FlightPhase.AIRBORNE:
            self._state = _climb(self._state, self.params)
        return self._state.to_status()

    def land(self) -> None:
        if self._state.phase == FlightPhase.GROUNDED:
            return

        new_state = self._state.with_phase(FlightPhase.GROUNDED)
        _log_phase_change(self.name, self._state, new_state, trigger="land")
        self._state = new_state

    def landed(self) -> bool:
        return self._state.phase == FlightPhase.GROUNDED


class Airplane:
    """A fuelled airplane.

    Take-off is refused while the tank holds less than one step of fuel.
    Every airborne ``fly()`` step burns ``fuel_per_step``; a step that finds
    the tank short ends in a forced landing instead.
    """

    def __init__(self, name: str = "airplane", params: Optional[FlightParams] = None,
                 fuel: Optional[float] = None):
        self.name = name
        self.params = params or FlightParams()
        if fuel is None:
            fuel = self.params.fuel_capacity
        if fuel < 0:
            raise ValueError(f"fuel must be non-negative, got {fuel}")
        self._fuel = min(float(fuel), self.params.fuel_capacity)
        self._state = FlightState()

    @classmethod
    def from_config(cls, unit_id: str, overrides: Optional[dict[str, Any]] = None,
                    loader: Optional[ConfigLoader] = None,
                    fuel: Optional[float] = None) -> "Airplane":
        """Create an airplane with flight parameters merged for ``unit_id``."""
        loader = loader or ConfigLoader.create()
        return cls(name=unit_id, params=loader.load_flight_params(unit_id, overrides), fuel=fuel)

    def __repr__(self) -> str:
        return f"Airplane(name={self.name!r}, phase={self._state.phase.value}, fuel={self._fuel})"

    @property
    def state(self) -> FlightState:
        return self._state

    @property
    def fuel(self) -> float:
        return self._fuel

    def refuel(self, amount: float) -> float:
        """Add fuel up to tank capacity and return the new level."""
        if amount < 0:
            raise ValueError(f"refuel amount must be non-negative, got {amount}")
        self._fuel = min(self.params.fuel_capacity, self._fuel + amount)
        return self._fuel

    def take_off(self) -> bool:
        if self._state.phase == FlightPhase.AIRBORNE:
            return True

        if self._fuel < self.params.fuel_per_step:
            state_logger.bind(unit_id=self.name, fuel=self._fuel).info("Take-off refused")
            return False

        new_state = self._state.with_phase(FlightPhase.AIRBORNE)
        _log_phase_change(self.name, self._state, new_state, trigger="take_off",
                          context={"fuel": self._fuel})
        self._state = new_state
        return True

    def fly(self) -> FlightStatus:
        if self._state.phase == FlightPhase.GROUNDED:
            return self._state.to_status()

        if self._fuel < self.params.fuel_per_step:
            new_state = self._state.with_phase(FlightPhase.GROUNDED)
            _log_phase_change(self.name, self._state, new_state, trigger="fuel_exhausted",
                              context={"fuel": self._fuel})
            self._state = new_state
            return self._state.to_status()

        self._fuel -= self.params.fuel_per_step
        self._state = _climb(self._state, self.params)
        return self._state.to_status()

    def land(self) -> None:
        if self._state.phase == FlightPhase.GROUNDED:
            return

        new_state = self._state.with_phase(FlightPhase.GROUNDED)
        _log_phase_change(self.name, self._state, new_state, trigger="land",
                          context={"fuel": self._fuel})
        self._state = new_state

    def landed(self) -> bool:
        return self._state.phase == FlightPhase.GROUNDED
