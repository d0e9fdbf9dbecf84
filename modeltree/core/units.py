"""Unit systems and conversion ratios between them."""

from __future__ import annotations

from enum import Enum


class UnitType(str, Enum):
    """Unit systems a drawing can be expressed in."""

    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"
    INCH = "inch"
    FOOT = "foot"


# Size of one unit, in millimeters
MM_PER_UNIT: dict[UnitType, float] = {
    UnitType.MILLIMETER: 1.0,
    UnitType.CENTIMETER: 10.0,
    UnitType.METER: 1000.0,
    UnitType.INCH: 25.4,
    UnitType.FOOT: 25.4 * 12,
}


def parse_units(units: UnitType | str) -> UnitType:
    """Resolve a unit identifier to a UnitType.

    Raises:
        ValueError: If the identifier is not a known unit system
    """
    try:
        return UnitType(units)
    except ValueError:
        known = [u.value for u in UnitType]
        raise ValueError(f"Unknown units: {units}. Known: {known}") from None


def conversion_scale(from_units: UnitType | str, to_units: UnitType | str) -> float:
    """Ratio that converts a length in ``from_units`` into ``to_units``.

    Args:
        from_units: Source unit system
        to_units: Destination unit system

    Returns:
        Multiplier, e.g. 0.1 for millimeters to centimeters

    Raises:
        ValueError: If either identifier is not a known unit system
    """
    source = parse_units(from_units)
    destination = parse_units(to_units)
    if source == destination:
        return 1.0
    return MM_PER_UNIT[source] / MM_PER_UNIT[destination]
