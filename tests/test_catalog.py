"""Tests for the unit catalog."""

import math

import pytest

from xcvt.errors import UnknownUnit
from xcvt.services.aliases import UNIT_ALIASES
from xcvt.services.catalog import (
    AffineUnit,
    Category,
    LinearUnit,
    categories,
    get_supported_units,
    lookup_affine,
    lookup_linear,
    registry,
)


class TestRegistries:
    """Tests for the registry contents and invariants."""

    def test_priority_order(self):
        assert categories() == (
            Category.LENGTH,
            Category.MASS,
            Category.VOLUME,
            Category.TEMPERATURE,
        )

    def test_length_units(self):
        assert list(registry(Category.LENGTH)) == ["m", "cm", "mm", "ft", "yd", "km", "mi"]

    def test_mass_units(self):
        assert list(registry(Category.MASS)) == ["kg", "g", "lb", "oz"]

    def test_volume_units(self):
        assert set(registry(Category.VOLUME)) == {
            "L", "l", "mL", "ml", "uL", "ul", "gal", "qt", "pt", "cup",
            "floz", "tbsp", "tsp", "m3", "cm3", "cc", "in3", "ft3",
        }

    def test_temperature_units(self):
        assert list(registry(Category.TEMPERATURE)) == ["C", "F", "K"]

    def test_unknown_registry_is_empty(self):
        assert len(registry(Category.UNKNOWN)) == 0

    def test_keys_unique_across_categories(self):
        seen: set[str] = set()
        for category in categories():
            keys = set(registry(category))
            assert not keys & seen
            seen |= keys

    def test_factors_positive_and_finite(self):
        for category in (Category.LENGTH, Category.MASS, Category.VOLUME):
            for unit in registry(category).values():
                assert isinstance(unit, LinearUnit)
                assert unit.factor > 0
                assert math.isfinite(unit.factor)

    def test_temperature_units_are_affine(self):
        for unit in registry(Category.TEMPERATURE).values():
            assert isinstance(unit, AffineUnit)

    def test_reference_units(self):
        assert lookup_linear(Category.LENGTH, "m") == 1.0
        assert lookup_linear(Category.MASS, "kg") == 1.0
        assert lookup_linear(Category.VOLUME, "L") == 1.0

    def test_every_alias_target_is_registered(self):
        for alias, key in UNIT_ALIASES.items():
            owners = [c for c in categories() if key in registry(c)]
            assert len(owners) == 1, f"alias {alias!r} -> {key!r}"


class TestImmutability:
    """Registries cannot be changed after import."""

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            registry(Category.LENGTH)["nmi"] = LinearUnit(1852.0)

    def test_alias_table_is_read_only(self):
        with pytest.raises(TypeError):
            UNIT_ALIASES["inch"] = "in"

    def test_units_are_frozen(self):
        unit = registry(Category.MASS)["kg"]
        with pytest.raises(AttributeError):
            unit.factor = 2.0


class TestLookupLinear:
    """Tests for lookup_linear."""

    def test_known_factor(self):
        assert lookup_linear(Category.LENGTH, "mi") == 1609.34

    def test_key_from_other_category(self):
        with pytest.raises(UnknownUnit):
            lookup_linear(Category.LENGTH, "kg")

    def test_missing_key(self):
        with pytest.raises(UnknownUnit, match="xyz"):
            lookup_linear(Category.VOLUME, "xyz")

    def test_temperature_is_not_linear(self):
        with pytest.raises(UnknownUnit):
            lookup_linear(Category.TEMPERATURE, "C")


class TestLookupAffine:
    """Tests for lookup_affine."""

    def test_celsius_identity(self):
        to_c, from_c = lookup_affine("C")
        assert to_c(21.5) == 21.5
        assert from_c(21.5) == 21.5

    def test_fahrenheit(self):
        to_c, from_c = lookup_affine("F")
        assert to_c(212.0) == 100.0
        assert from_c(0.0) == 32.0

    def test_kelvin(self):
        to_c, from_c = lookup_affine("K")
        assert to_c(273.15) == 0.0
        assert from_c(-273.15) == 0.0

    @pytest.mark.parametrize("key", ["C", "F", "K"])
    @pytest.mark.parametrize("value", [-273.15, -40.0, 0.0, 25.0, 5000.0])
    def test_functions_are_inverses(self, key, value):
        to_c, from_c = lookup_affine(key)
        assert from_c(to_c(value)) == pytest.approx(value, abs=1e-9)
        assert to_c(from_c(value)) == pytest.approx(value, abs=1e-9)

    def test_linear_key_rejected(self):
        with pytest.raises(UnknownUnit):
            lookup_affine("m")

    def test_lowercase_key_rejected(self):
        with pytest.raises(UnknownUnit):
            lookup_affine("c")


class TestSupportedUnits:
    """Tests for the supported units listing."""

    def test_returns_categories(self):
        units = get_supported_units()
        assert list(units) == ["Length", "Mass", "Volume", "Temperature"]

    def test_categories_have_units(self):
        units = get_supported_units()
        for category, unit_list in units.items():
            assert len(unit_list) > 0, f"Category {category} has no units"

    def test_listing_is_a_copy(self):
        get_supported_units()["Length"].append("nmi")
        assert "nmi" not in get_supported_units()["Length"]
