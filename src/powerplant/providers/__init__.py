"""Energy providers package.

Provides the ``ProvideEnergy`` base class and the concrete providers:
fixed-efficiency, decaying, fuel-agnostic and capability-gated.
"""

from powerplant.providers.base import MAX_EFFICIENCY, ProvideEnergy, clamp_efficiency
from powerplant.providers.combustion import DecayState, InternalCombustion
from powerplant.providers.gated import BritishEngine, GreenEngine
from powerplant.providers.omni import OmniGenerator, omni_80_energy
from powerplant.providers.reactor import NuclearReactor

__all__ = [
    "MAX_EFFICIENCY",
    "BritishEngine",
    "DecayState",
    "GreenEngine",
    "InternalCombustion",
    "NuclearReactor",
    "OmniGenerator",
    "ProvideEnergy",
    "clamp_efficiency",
    "omni_80_energy",
]
