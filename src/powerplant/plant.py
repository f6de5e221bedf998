"""Configured collections of energy providers.

A ``PowerPlant`` builds named providers from configuration and runs fuel
through them by name. Fuels are looked up in a registry; blends are written
inline or registered under their own name in the ``fuels`` section:

    logging:
      console:
        level: INFO
    fuels:
      hybrid: mixed:diesel+lithium_battery
    providers:
      backup:
        type: internal_combustion
        decay: 3
        efficiency: 120
      omni:
        type: omni_generator
        efficiency: 80
      green:
        type: green_engine
        fuel: lithium_battery

Typical usage example:
    plant = PowerPlant.from_config("plant.yaml")
    plant.run_btu("omni", "hybrid", 10)   # BTU(value=1200)
"""

from pathlib import Path
from typing import Any

from powerplant.container import FuelContainer
from powerplant.core.config import ConfigError, ConfigLoader
from powerplant.core.logging_system import get_logger, initialize_logging
from powerplant.core.registry import ComponentRegistry
from powerplant.fuels.base import Fuel
from powerplant.fuels.mixed import CustomMixed, Mixed
from powerplant.fuels.standard import Diesel, LithiumBattery, Uranium
from powerplant.providers.base import ProvideEnergy
from powerplant.providers.combustion import InternalCombustion
from powerplant.providers.gated import BritishEngine, GreenEngine
from powerplant.providers.omni import OmniGenerator
from powerplant.providers.reactor import NuclearReactor
from powerplant.units import BTU, EnergyValue

logger = get_logger(__name__)

MIXED_PREFIX = "mixed"
CUSTOM_MIXED_PREFIX = "custom_mixed"


def default_fuel_registry() -> ComponentRegistry:
    """Registry holding the natural fuels under their snake_case names."""
    fuels = ComponentRegistry("fuel")
    fuels.register("diesel", Diesel)
    fuels.register("lithium_battery", LithiumBattery)
    fuels.register("uranium", Uranium)
    return fuels


class PowerPlant:
    """A set of named providers fed by name-addressed fuels.

    Args:
        fuels: Fuel registry; defaults to the natural fuels.
    """

    def __init__(self, fuels: ComponentRegistry | None = None) -> None:
        self.fuels = fuels if fuels is not None else default_fuel_registry()
        self.providers = ComponentRegistry("provider")

        self.provider_types = ComponentRegistry("provider type")
        self.provider_types.register("nuclear_reactor", self._build_nuclear_reactor)
        self.provider_types.register("internal_combustion", self._build_internal_combustion)
        self.provider_types.register("omni_generator", self._build_omni_generator)
        self.provider_types.register("green_engine", self._build_green_engine)
        self.provider_types.register("british_engine", self._build_british_engine)

    @classmethod
    def from_config(cls, source: str | Path | dict[str, Any] | ConfigLoader) -> "PowerPlant":
        """Build a plant from a YAML file, a dictionary or a loaded config.

        Raises:
            ConfigError: If the configuration is malformed.
            RegistryError: If it names unknown fuels or provider types.
        """
        if isinstance(source, ConfigLoader):
            config = source
        elif isinstance(source, dict):
            config = ConfigLoader(source)
        else:
            config = ConfigLoader.load(source)

        if config.get("logging") is not None:
            initialize_logging(config=config.get_section("logging"))

        plant = cls()
        for name, spec in config.get_optional_section("fuels").items():
            if not isinstance(spec, str):
                raise ConfigError(f"Fuel {name} must be a fuel expression, got {spec!r}")
            plant.fuels.register(name, plant.resolve_fuel(spec))

        for name, settings in config.get_optional_section("providers").items():
            if not isinstance(settings, dict):
                raise ConfigError(f"Provider {name} must be a section")
            plant.add_provider(name, plant.build_provider(settings))

        logger.info(
            "Power plant ready: %d providers, %d fuels",
            len(plant.providers.list_components()),
            len(plant.fuels.list_components()),
        )
        return plant

    def resolve_fuel(self, expression: str) -> type[Fuel]:
        """Turn a fuel expression into a fuel type.

        Accepted forms: a registered name (``uranium``), an even blend
        (``mixed:diesel+uranium``) or a weighted blend
        (``custom_mixed:70:diesel+uranium``). Blend components are
        themselves expressions and may be blends on either side:
        ``mixed:mixed:diesel+uranium+lithium_battery`` blends
        ``Mixed[Diesel, Uranium]`` with ``LithiumBattery``.

        Raises:
            ConfigError: If a blend expression is malformed.
            RegistryError: If a fuel name is unknown.
        """
        fuel, rest = self._parse_fuel(expression, expression)
        if rest.strip():
            raise ConfigError(f"Unexpected text after fuel expression: {expression}")
        return fuel

    def _parse_fuel(self, expression: str, text: str) -> tuple[type[Fuel], str]:
        """Parse one fuel from the start of ``text``; return it and the rest."""
        text = text.lstrip()

        if text.startswith(f"{MIXED_PREFIX}:"):
            first, second, rest = self._parse_pair(expression, text[len(MIXED_PREFIX) + 1 :])
            return Mixed[first, second], rest

        if text.startswith(f"{CUSTOM_MIXED_PREFIX}:"):
            weight_text, sep, pair = text[len(CUSTOM_MIXED_PREFIX) + 1 :].partition(":")
            if not sep:
                raise ConfigError(f"Weighted blend needs a weight and two fuels: {expression}")
            try:
                weight = int(weight_text)
            except ValueError:
                raise ConfigError(f"Blend weight must be an integer: {expression}") from None
            if not 0 <= weight <= 100:
                raise ConfigError(f"Blend weight must be between 0 and 100: {expression}")
            first, second, rest = self._parse_pair(expression, pair)
            return CustomMixed[weight, first, second], rest

        name, sep, rest = text.partition("+")
        name = name.strip()
        if not name:
            raise ConfigError(f"Missing fuel name: {expression}")
        if ":" in name:
            raise ConfigError(f"Unknown fuel blend kind: {name.partition(':')[0]}")
        return self.fuels.get(name), sep + rest

    def _parse_pair(
        self, expression: str, text: str
    ) -> tuple[type[Fuel], type[Fuel], str]:
        first, rest = self._parse_fuel(expression, text)
        rest = rest.lstrip()
        if not rest.startswith("+"):
            raise ConfigError(f"Blend needs two fuels joined by '+': {expression}")
        second, rest = self._parse_fuel(expression, rest[1:])
        return first, second, rest

    def build_provider(self, settings: dict[str, Any]) -> ProvideEnergy:
        """Create a provider from its settings; ``type`` picks the factory.

        Raises:
            ConfigError: If ``type`` is missing.
            RegistryError: If the type is unknown or the settings are rejected.
        """
        provider_type = settings.get("type")
        if not provider_type:
            raise ConfigError(f"Provider settings need a type: {settings!r}")
        return self.provider_types.create(provider_type, settings)

    def add_provider(self, name: str, provider: ProvideEnergy) -> None:
        self.providers.register(name, provider)

    def get_provider(self, name: str) -> ProvideEnergy:
        return self.providers.get(name)

    def run(self, provider_name: str, fuel: str, amount: int) -> EnergyValue:
        """Feed ``amount`` units of ``fuel`` to a provider.

        Returns:
            Energy in the fuel's native unit.
        """
        provider = self.providers.get(provider_name)
        container = FuelContainer[self.resolve_fuel(fuel)](amount)
        energy = provider.provide_energy(container)
        logger.debug("%s produced %s from %d x %s", provider_name, energy, amount, fuel)
        return energy

    def run_btu(self, provider_name: str, fuel: str, amount: int) -> BTU:
        """Same as ``run``, with the result converted to BTU."""
        return self.run(provider_name, fuel, amount).to_btu()

    def _build_nuclear_reactor(self, settings: dict[str, Any]) -> ProvideEnergy:
        return NuclearReactor()

    def _build_internal_combustion(self, settings: dict[str, Any]) -> ProvideEnergy:
        return InternalCombustion[settings["decay"]](settings.get("efficiency", 100))

    def _build_omni_generator(self, settings: dict[str, Any]) -> ProvideEnergy:
        return OmniGenerator[settings["efficiency"]]()

    def _build_green_engine(self, settings: dict[str, Any]) -> ProvideEnergy:
        return GreenEngine[self.resolve_fuel(settings["fuel"])]()

    def _build_british_engine(self, settings: dict[str, Any]) -> ProvideEnergy:
        return BritishEngine[self.resolve_fuel(settings["fuel"])]()
