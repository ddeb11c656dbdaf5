"""Alias normalization for user-supplied unit spellings."""

from types import MappingProxyType
from typing import Mapping

# Maps lowercase free-form spellings to canonical unit keys.
UNIT_ALIASES: Mapping[str, str] = MappingProxyType({
    # Length
    "meter": "m",
    "meters": "m",
    "metre": "m",
    "metres": "m",
    "kilometer": "km",
    "kilometers": "km",
    "kilometre": "km",
    "kilometres": "km",
    "foot": "ft",
    "feet": "ft",
    "yard": "yd",
    "yards": "yd",
    "mile": "mi",
    "miles": "mi",
    # Mass
    "kilogram": "kg",
    "kilograms": "kg",
    "gram": "g",
    "grams": "g",
    "pound": "lb",
    "pounds": "lb",
    "lbs": "lb",
    "ounce": "oz",
    "ounces": "oz",
    # Volume
    "liter": "L",
    "liters": "L",
    "litre": "L",
    "litres": "L",
    "milliliter": "mL",
    "milliliters": "mL",
    "millilitre": "mL",
    "millilitres": "mL",
    "cup": "cup",
    "cups": "cup",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    # Temperature
    "c": "C",
    "celsius": "C",
    "centigrade": "C",
    "f": "F",
    "fahrenheit": "F",
    "k": "K",
    "kelvin": "K",
})

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def normalize(raw: str) -> str:
    """Normalize a unit spelling to its canonical key.

    Only ASCII letters are lowercased for the alias lookup. When no alias
    matches, the input is returned exactly as given (case preserved), so
    canonical keys such as "mL" or "L" still resolve downstream.
    """
    return UNIT_ALIASES.get(raw.translate(_ASCII_LOWER), raw)
