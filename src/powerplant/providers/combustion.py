"""Internal combustion engine with decaying efficiency.

The engine burns Diesel only. Its efficiency drops by one percentage point
every ``DECAY`` calls to ``provide_energy``, never going below 1%:

    engine = InternalCombustion[3](120)   # initial efficiency clamps to 100
    engine.provide_energy(FuelContainer[Diesel](10))  # calls 1-3 at 100%
    ...                                               # call 4 at 99%

The engine is not thread-safe. Its counters are updated on every call
without locking; share an instance only within a single thread.
"""

from dataclasses import dataclass
from typing import ClassVar

from powerplant.container import FuelContainer
from powerplant.core.logging_system import get_logger
from powerplant.core.params import specialize
from powerplant.fuels.standard import Diesel
from powerplant.providers.base import ProvideEnergy, clamp_efficiency
from powerplant.units import Joule

logger = get_logger(__name__)

MIN_EFFICIENCY = 1


@dataclass
class DecayState:
    """Mutable counters of a decaying engine.

    Attributes:
        efficiency: Efficiency percent applied to the next call.
        call_count: Number of completed ``provide_energy`` calls.
    """

    efficiency: int
    call_count: int = 0


class InternalCombustion(ProvideEnergy[Diesel]):
    """A combustion engine that loses efficiency as it is used.

    ``InternalCombustion[DECAY]`` loses one point of efficiency per ``DECAY``
    calls. On each call, before any energy is produced, the engine checks
    whether it has already completed a positive multiple of ``DECAY`` calls
    and, if so and efficiency is above 1, decrements it. The call is then
    counted and the fuel is converted at the current efficiency.

    Args:
        efficiency: Initial efficiency percent, clamped to 100.

    Raises:
        TypeError: If the class is used without a decay interval.
    """

    decay: ClassVar[int | None] = None

    def __class_getitem__(cls, decay):
        if not isinstance(decay, int) or isinstance(decay, bool):
            raise TypeError(f"InternalCombustion decay must be an int, got {decay!r}")
        if decay <= 0:
            raise ValueError(f"InternalCombustion decay must be positive, got {decay}")
        return specialize(cls, (decay,), {"decay": decay})

    def __init__(self, efficiency: int) -> None:
        if self.decay is None:
            raise TypeError("InternalCombustion needs a decay interval: InternalCombustion[DECAY]")
        self._state = DecayState(efficiency=clamp_efficiency(efficiency))

    @property
    def efficiency(self) -> int:
        """Efficiency percent the next call will start from."""
        return self._state.efficiency

    @property
    def call_count(self) -> int:
        return self._state.call_count

    def provide_energy(self, container: FuelContainer) -> Joule:
        state = self._state

        if (
            state.call_count >= self.decay
            and state.call_count % self.decay == 0
            and state.efficiency > MIN_EFFICIENCY
        ):
            state.efficiency -= 1
            logger.debug(
                "%s efficiency decayed to %d%% after %d calls",
                type(self).__name__,
                state.efficiency,
                state.call_count,
            )
        state.call_count += 1

        return self.provide_energy_with_efficiency(container, state.efficiency)
