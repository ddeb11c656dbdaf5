"""Services module for xcvt."""

from xcvt.services.aliases import UNIT_ALIASES, normalize
from xcvt.services.catalog import (
    AffineUnit,
    Category,
    LinearUnit,
    get_supported_units,
    lookup_affine,
    lookup_linear,
)
from xcvt.services.conversion_service import classify, convert

__all__ = [
    "UNIT_ALIASES",
    "normalize",
    "AffineUnit",
    "Category",
    "LinearUnit",
    "get_supported_units",
    "lookup_affine",
    "lookup_linear",
    "classify",
    "convert",
]
