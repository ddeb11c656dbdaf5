"""Unit conversion service.

Converts between units of the same category: length, mass, volume and
temperature. Linear categories convert through their reference unit with
scale factors; temperature goes through Celsius with explicit formulas.
"""

import logging

from xcvt.errors import IncompatibleCategories, UnknownCategory
from xcvt.services.catalog import (
    LINEAR_CATEGORIES,
    Category,
    categories,
    lookup_affine,
    lookup_linear,
    registry,
)

logger = logging.getLogger(__name__)


def classify(key: str) -> Category:
    """Return the category a canonical unit key belongs to.

    Registries are checked in priority order (length, mass, volume,
    temperature) and the first match wins.
    """
    for category in categories():
        if key in registry(category):
            return category
    return Category.UNKNOWN


def convert(from_key: str, to_key: str, value: float) -> float:
    """Convert a value between two canonical unit keys.

    Args:
        from_key: Source unit key (e.g., "km", "lb", "F").
        to_key: Target unit key (e.g., "mi", "kg", "C").
        value: Numeric value to convert.

    Returns:
        Converted value as float, unrounded.

    Raises:
        UnknownCategory: If either key is not in the catalog.
        IncompatibleCategories: If the keys measure different quantities.
    """
    from_category = classify(from_key)
    to_category = classify(to_key)

    if from_category is Category.UNKNOWN or to_category is Category.UNKNOWN:
        raise UnknownCategory()

    if from_category is not to_category:
        raise IncompatibleCategories()

    # Same unit: return as-is
    if from_key == to_key:
        return float(value)

    if from_category in LINEAR_CATEGORIES:
        result = _convert_via_factors(from_category, from_key, to_key, value)
    else:
        result = _convert_temperature(from_key, to_key, value)

    logger.debug(
        "Converted %s %s -> %s %s (%s)", value, from_key, result, to_key, from_category.value
    )
    return result


def _convert_via_factors(category: Category, from_key: str, to_key: str, value: float) -> float:
    """Convert through the category's reference unit."""
    base_value = value * lookup_linear(category, from_key)
    return base_value / lookup_linear(category, to_key)


def _convert_temperature(from_key: str, to_key: str, value: float) -> float:
    """Convert to Celsius first, then to the target scale."""
    to_celsius, _ = lookup_affine(from_key)
    _, from_celsius = lookup_affine(to_key)
    return from_celsius(to_celsius(value))
