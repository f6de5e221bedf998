"""Nuclear reactor: Uranium only, fixed 99% efficiency."""

from powerplant.container import FuelContainer
from powerplant.fuels.standard import Uranium
from powerplant.providers.base import ProvideEnergy
from powerplant.units import Joule

REACTOR_EFFICIENCY = 99


class NuclearReactor(ProvideEnergy[Uranium]):
    """A reactor that consumes Uranium at a constant 99% efficiency.

    Stateless: the same container always yields the same energy.
    """

    def provide_energy(self, container: FuelContainer) -> Joule:
        return self.provide_energy_with_efficiency(container, REACTOR_EFFICIENCY)
