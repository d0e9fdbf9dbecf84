"""Tests for unit conversion."""

import pytest

from modeltree.core.units import UnitType, conversion_scale, parse_units


class TestConversionScale:
    """Test conversion ratios between unit systems."""

    def test_mm_to_cm(self):
        """Test millimeters to centimeters."""
        assert conversion_scale(UnitType.MILLIMETER, UnitType.CENTIMETER) == pytest.approx(0.1)

    def test_cm_to_mm(self):
        """Test centimeters to millimeters."""
        assert conversion_scale(UnitType.CENTIMETER, UnitType.MILLIMETER) == pytest.approx(10.0)

    def test_inch_to_mm(self):
        """Test inches to millimeters."""
        assert conversion_scale(UnitType.INCH, UnitType.MILLIMETER) == pytest.approx(25.4)

    def test_foot_to_inch(self):
        """Test feet to inches."""
        assert conversion_scale(UnitType.FOOT, UnitType.INCH) == pytest.approx(12.0)

    def test_same_units_is_exactly_one(self):
        """Test identical units give a ratio of exactly 1."""
        for units in UnitType:
            assert conversion_scale(units, units) == 1

    def test_string_identifiers(self):
        """Test that plain strings are accepted."""
        assert conversion_scale("m", "cm") == pytest.approx(100.0)

    def test_unknown_units_raise(self):
        """Test that unknown identifiers raise ValueError."""
        with pytest.raises(ValueError, match="Unknown units"):
            conversion_scale("furlong", UnitType.MILLIMETER)

    def test_parse_units(self):
        """Test resolving identifiers."""
        assert parse_units("inch") is UnitType.INCH
        assert parse_units(UnitType.METER) is UnitType.METER
