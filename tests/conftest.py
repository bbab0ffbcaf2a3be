"""
Pytest configuration and shared fixtures.
"""

import pytest
from vehicle.tire.models import TireGeometry
from vehicle.physics.trig import Function, FunctionType


@pytest.fixture
def truck_tire() -> TireGeometry:
    """Provide a common light truck tire (275/55R20)."""
    return TireGeometry.from_code("275/55R20")


@pytest.fixture
def compact_tire() -> TireGeometry:
    """Provide a small passenger car tire."""
    return TireGeometry.from_code("205/55R16")


@pytest.fixture
def shifted_sine() -> Function:
    """Provide a sine with every transformation applied."""
    return (
        Function(FunctionType.SINE)
        .amplify(2.0)
        .period(3.0)
        .phase_shift(1.2)
        .vertical_shift(0.5)
    )
