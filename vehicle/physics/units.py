"""
Unit registry and fixed unit conversions.

The four scalar conversions (in/cm, mph/kph) use fixed constants and plain
float arithmetic so results are reproducible to the last bit. The pint
registry is available for callers who want unit-aware values for display.

NOTE: MPH_TO_KPH and KPH_TO_MPH are not exact inverses of each other
(1 / 1.609344 ≈ 0.621371). Both are kept as-is.
"""

import pint

# Create a shared unit registry for the entire package
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# Conversion constants
INCHES_TO_CM = 2.54
MPH_TO_KPH = 1.609344
KPH_TO_MPH = 0.6214


def to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * INCHES_TO_CM


def to_in(centimeters: float) -> float:
    """Convert centimeters to inches."""
    return centimeters / INCHES_TO_CM


def to_kph(mph: float) -> float:
    """Convert miles per hour to kilometers per hour."""
    return mph * MPH_TO_KPH


def to_mph(kph: float) -> float:
    """Convert kilometers per hour to miles per hour."""
    return kph * KPH_TO_MPH


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude
