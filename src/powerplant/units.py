"""Energy units and conversions.

Three units are supported: ``Joule`` and ``Calorie`` as natural units, and
``BTU`` as the common unit every fuel can be compared in.

Conversions into BTU use integer division and therefore lose precision;
conversions out of BTU multiply exactly. A value converted to BTU and back
is not guaranteed to be the value you started with:

    >>> Joule.from_btu(Joule(2000).to_btu())
    Joule(value=1055)

Typical usage:
    from powerplant.units import BTU, Joule, to_btu

    heat = Joule(105500)
    assert heat.to_btu() == BTU(100)
    assert to_btu(heat) == 100
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class EnergyValue:
    """Integer amount of energy tagged with its unit.

    Attributes:
        value: Magnitude in this unit (non-negative integer).
    """

    value: int

    # How many of this unit make up one BTU.
    PER_BTU: ClassVar[int] = 1
    SYMBOL: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"{type(self).__name__} value must be an integer, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} value cannot be negative, got {self.value}")

    def to_btu(self) -> "BTU":
        """Convert to the common unit, truncating any remainder."""
        return BTU(self.value // self.PER_BTU)

    @classmethod
    def from_btu(cls, btu: "BTU | int") -> "EnergyValue":
        """Create a value of this unit from an amount of BTU.

        Args:
            btu: Amount in BTU, as a ``BTU`` or a plain integer.

        Returns:
            Exact equivalent in this unit.
        """
        return cls(int(btu) * cls.PER_BTU)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value} {self.SYMBOL}"


@dataclass(frozen=True, eq=False)
class BTU(EnergyValue):
    """British thermal unit, the common unit.

    Unlike the natural units, a BTU compares equal to a plain integer of the
    same magnitude, so ``BTU(150) == 150`` holds.
    """

    PER_BTU: ClassVar[int] = 1
    SYMBOL: ClassVar[str] = "BTU"

    def __eq__(self, other: object) -> bool:
        other_value = _btu_magnitude(other)
        if other_value is None:
            return NotImplemented
        return self.value == other_value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: "BTU | int") -> bool:
        other_value = _btu_magnitude(other)
        if other_value is None:
            return NotImplemented
        return self.value < other_value

    def __le__(self, other: "BTU | int") -> bool:
        other_value = _btu_magnitude(other)
        if other_value is None:
            return NotImplemented
        return self.value <= other_value

    def __gt__(self, other: "BTU | int") -> bool:
        other_value = _btu_magnitude(other)
        if other_value is None:
            return NotImplemented
        return self.value > other_value

    def __ge__(self, other: "BTU | int") -> bool:
        other_value = _btu_magnitude(other)
        if other_value is None:
            return NotImplemented
        return self.value >= other_value


def _btu_magnitude(other: object) -> int | None:
    """Magnitude of a BTU or plain integer; None for anything else."""
    if isinstance(other, BTU):
        return other.value
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None


@dataclass(frozen=True)
class Joule(EnergyValue):
    """Energy in joules (1 BTU = 1055 J)."""

    PER_BTU: ClassVar[int] = 1055
    SYMBOL: ClassVar[str] = "J"


@dataclass(frozen=True)
class Calorie(EnergyValue):
    """Energy in calories (1 BTU = 251 cal)."""

    PER_BTU: ClassVar[int] = 251
    SYMBOL: ClassVar[str] = "cal"


def to_btu(energy: EnergyValue | int) -> BTU:
    """Express any energy value in BTU.

    Plain integers are taken to already be BTU.

    Examples:
        >>> to_btu(Calorie(502))
        BTU(value=2)
        >>> to_btu(7)
        BTU(value=7)
    """
    if isinstance(energy, EnergyValue):
        return energy.to_btu()
    return BTU(int(energy))
