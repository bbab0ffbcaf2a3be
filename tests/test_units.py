"""
Tests for fixed unit conversions and the unit registry.
"""

import pytest

from vehicle.physics.units import (
    to_cm,
    to_in,
    to_kph,
    to_mph,
    magnitude_in,
    Q_,
    MPH_TO_KPH,
    KPH_TO_MPH,
)


class TestLengthConversions:
    """Test inch/centimeter conversions."""

    def test_to_cm(self):
        """One inch is exactly 2.54 cm."""
        assert to_cm(1.0) == 2.54

    def test_to_in(self):
        """25.4 cm is exactly 10 inches."""
        assert to_in(25.4) == 10.0

    def test_length_round_trip(self):
        for inches in (0.5, 12.0, 31.909448818897637, 1000.0):
            assert to_in(to_cm(inches)) == pytest.approx(inches)

    def test_zero_and_negative(self):
        """Conversions are linear and accept any finite value."""
        assert to_cm(0.0) == 0.0
        assert to_cm(-1.0) == -2.54
        assert to_in(-25.4) == -10.0


class TestSpeedConversions:
    """Test mph/kph conversions."""

    def test_to_kph(self):
        assert to_kph(100.0) == 160.9344

    def test_to_mph(self):
        assert to_mph(100.0) == 100.0 * KPH_TO_MPH
        assert to_mph(100.0) == pytest.approx(62.14)

    def test_speed_constants_are_not_inverse(self):
        """The two speed constants are kept as published, not reconciled."""
        assert MPH_TO_KPH * KPH_TO_MPH != 1.0
        # 100 mph -> kph -> mph drifts by about 0.005%
        assert to_mph(to_kph(100.0)) == pytest.approx(100.0, rel=1e-4)
        assert to_mph(to_kph(100.0)) != 100.0


class TestUnitRegistry:
    """Test pint helpers."""

    def test_magnitude_in(self):
        assert magnitude_in(Q_(1.0, "inch"), "cm") == pytest.approx(2.54)

    def test_registry_mph_matches_fixed_constant(self):
        """pint's mile is the international mile, same as MPH_TO_KPH."""
        assert magnitude_in(Q_(100.0, "mile / hour"), "km / hour") == pytest.approx(to_kph(100.0))
