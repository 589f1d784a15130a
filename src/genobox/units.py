"""Physical and relative units for page placement.

A ``Unit`` pairs a numeric value with the name of its unit. Physical units
(inches, cm, mm, points, bigpts) convert freely between each other; ``npc``
(normalised parent coordinates) needs the length of the parent to resolve and
``native`` values are only meaningful inside a viewport's own scale.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Optional


# Inches per unit
PHYSICAL_UNITS = {
    "inches": 1.0,
    "cm": 1 / 2.54,
    "mm": 1 / 25.4,
    "points": 1 / 72.27,
    "bigpts": 1 / 72.0,
}
RELATIVE_UNITS = ("npc", "native")

UNIT_ALIASES = {
    "in": "inches",
    "inch": "inches",
    "inches": "inches",
    "cm": "cm",
    "centimetre": "cm",
    "centimetres": "cm",
    "centimeter": "cm",
    "centimeters": "cm",
    "mm": "mm",
    "millimetre": "mm",
    "millimetres": "mm",
    "millimeter": "mm",
    "millimeters": "mm",
    "pt": "points",
    "points": "points",
    "bigpts": "bigpts",
    "npc": "npc",
    "native": "native",
}


def normalize_units(units: str) -> str:
    """Return the canonical name for a unit string, raising ValueError if unknown."""
    try:
        return UNIT_ALIASES[str(units).lower()]
    except KeyError:
        raise ValueError(
            f"Invalid units: {units}. Supported units: {sorted(set(UNIT_ALIASES.values()))}"
        ) from None


def is_numeric(value) -> bool:
    """True for real scalars (bools excluded)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Unit:
    """A numeric value with a unit."""

    value: float
    units: str

    def __post_init__(self):
        if not is_numeric(self.value):
            raise TypeError(f"Unit value must be numeric, got {self.value!r}")
        object.__setattr__(self, "units", normalize_units(self.units))
        object.__setattr__(self, "value", float(self.value))

    @property
    def is_physical(self) -> bool:
        return self.units in PHYSICAL_UNITS

    def convert(self, units: str, reference: Optional[Unit] = None) -> Unit:
        """
        Convert to another unit.

        Args:
            units: Target unit name
            reference: Parent length, required when converting from ``npc``

        Returns:
            New Unit in the requested units

        Raises:
            ValueError: If either side is ``native`` or an ``npc`` value has no reference
        """
        units = normalize_units(units)
        if units == self.units:
            return self

        if self.units == "npc":
            if reference is None:
                raise ValueError("Converting npc units requires a reference length.")
            return Unit(self.value * reference.convert(units).value, units)

        if units == "npc":
            if reference is None:
                raise ValueError("Converting to npc units requires a reference length.")
            return Unit(self.inches() / reference.inches(), "npc")

        if not self.is_physical or units not in PHYSICAL_UNITS:
            raise ValueError(f"Cannot convert {self.units} units to {units}.")

        return Unit(self.value * PHYSICAL_UNITS[self.units] / PHYSICAL_UNITS[units], units)

    def inches(self) -> float:
        if not self.is_physical:
            raise ValueError(f"{self.units} units have no absolute length.")
        return self.value * PHYSICAL_UNITS[self.units]


    def __str__(self) -> str:
        return f"{self.value:g}{self.units}"


def unit(value, units: str) -> Unit:
    """Create a Unit, mirroring ``Unit(value, units)``."""
    return Unit(value, units)


def is_unit(value) -> bool:
    return isinstance(value, Unit)


def as_unit(value, default_units: Optional[str], label: str) -> Unit:
    """
    Normalise a placement argument to a Unit.

    Args:
        value: Unit or plain number
        default_units: Units applied to plain numbers
        label: Name of the argument, used in error messages

    Returns:
        Unit instance

    Raises:
        TypeError: If value is neither a Unit nor numeric
        ValueError: If value is numeric and no default units are given
    """
    if is_unit(value):
        return value

    if not is_numeric(value):
        raise TypeError(f"{label} is neither a unit object or a numeric value. Cannot place object.")

    if default_units is None:
        raise ValueError(f"{label} detected as numeric.'default_units' must be specified.")

    return Unit(value, default_units)
