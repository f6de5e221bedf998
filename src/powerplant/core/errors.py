"""Exception types shared across the package."""


class PowerPlantError(Exception):
    """Base class for errors raised by powerplant."""


class FuelCompatibilityError(PowerPlantError, TypeError):
    """Raised when a provider is given a fuel it cannot consume.

    Covers both a provider class parameterized with a disallowed fuel
    (e.g. ``GreenEngine[Diesel]``) and a container of the wrong fuel passed
    to a single-fuel provider.
    """
