"""Unit catalog.

Fixed registries of the units the converter knows about, one per category.
Length, mass and volume units carry a linear factor relative to the
category's reference unit (meter, kilogram, liter). Temperature units carry
a pair of functions to and from Celsius, because their scales are offset.

Everything here is built once at import time and exposed read-only.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Union

from xcvt.errors import UnknownUnit


class Category(Enum):
    """Physical quantity a unit measures."""

    LENGTH = "Length"
    MASS = "Mass"
    VOLUME = "Volume"
    TEMPERATURE = "Temperature"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class LinearUnit:
    """Unit that is a constant multiple of its category's reference unit."""

    factor: float


@dataclass(frozen=True)
class AffineUnit:
    """Unit related to the reference scale by an offset and a scale."""

    to_reference: Callable[[float], float]
    from_reference: Callable[[float], float]


Unit = Union[LinearUnit, AffineUnit]

# Factor = how many reference units one unit is worth.
_LENGTH_FACTORS: dict[str, float] = {
    "m": 1.0,
    "cm": 0.01,
    "mm": 0.001,
    "ft": 0.3048,
    "yd": 0.9144,
    "km": 1000.0,
    "mi": 1609.34,
}

_MASS_FACTORS: dict[str, float] = {
    "kg": 1.0,
    "g": 0.001,
    "lb": 0.453592,
    "oz": 0.0283495,
}

_VOLUME_FACTORS: dict[str, float] = {
    "L": 1.0,
    "l": 1.0,
    "mL": 0.001,
    "ml": 0.001,
    "uL": 0.000001,
    "ul": 0.000001,
    # US customary
    "gal": 3.78541,
    "qt": 0.946353,
    "pt": 0.473176,
    "cup": 0.24,  # metric cup
    "floz": 0.0295735,
    "tbsp": 0.0147868,
    "tsp": 0.00492892,
    # Cubic
    "m3": 1000.0,
    "cm3": 0.001,
    "cc": 0.001,
    "in3": 0.0163871,
    "ft3": 28.3168,
}


def _identity(value: float) -> float:
    return value


def _fahrenheit_to_celsius(value: float) -> float:
    return (value - 32.0) * 5.0 / 9.0


def _celsius_to_fahrenheit(value: float) -> float:
    return value * 9.0 / 5.0 + 32.0


def _kelvin_to_celsius(value: float) -> float:
    return value - 273.15


def _celsius_to_kelvin(value: float) -> float:
    return value + 273.15


_TEMPERATURE_UNITS: dict[str, AffineUnit] = {
    "C": AffineUnit(_identity, _identity),
    "F": AffineUnit(_fahrenheit_to_celsius, _celsius_to_fahrenheit),
    "K": AffineUnit(_kelvin_to_celsius, _celsius_to_kelvin),
}


def _linear(factors: dict[str, float]) -> Mapping[str, LinearUnit]:
    return MappingProxyType({key: LinearUnit(factor) for key, factor in factors.items()})


# Order matters: classification walks the registries in this order.
_REGISTRIES: Mapping[Category, Mapping[str, Unit]] = MappingProxyType({
    Category.LENGTH: _linear(_LENGTH_FACTORS),
    Category.MASS: _linear(_MASS_FACTORS),
    Category.VOLUME: _linear(_VOLUME_FACTORS),
    Category.TEMPERATURE: MappingProxyType(dict(_TEMPERATURE_UNITS)),
})

LINEAR_CATEGORIES: frozenset[Category] = frozenset(
    {Category.LENGTH, Category.MASS, Category.VOLUME}
)


def categories() -> tuple[Category, ...]:
    """Known categories, in classification priority order."""
    return tuple(_REGISTRIES)


def registry(category: Category) -> Mapping[str, Unit]:
    """Return the read-only registry for a category (empty for UNKNOWN)."""
    return _REGISTRIES.get(category, MappingProxyType({}))


def lookup_linear(category: Category, key: str) -> float:
    """Return the scale factor of ``key`` within a linear category.

    Raises:
        UnknownUnit: If the category is not linear or does not contain ``key``.
    """
    if category not in LINEAR_CATEGORIES:
        raise UnknownUnit(key, category.value.lower())
    unit = _REGISTRIES[category].get(key)
    if unit is None:
        raise UnknownUnit(key, category.value.lower())
    return unit.factor


def lookup_affine(key: str) -> tuple[Callable[[float], float], Callable[[float], float]]:
    """Return ``(to_celsius, from_celsius)`` for a temperature unit.

    Raises:
        UnknownUnit: If ``key`` is not a temperature unit.
    """
    unit = _REGISTRIES[Category.TEMPERATURE].get(key)
    if unit is None:
        raise UnknownUnit(key, "temperature")
    return unit.to_reference, unit.from_reference


def get_supported_units() -> dict[str, list[str]]:
    """Return a dict of category name -> unit keys in catalog order."""
    return {category.value: list(units) for category, units in _REGISTRIES.items()}
