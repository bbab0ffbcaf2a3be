"""
Formulas for vehicle drivetrains and small geometry helpers.

This module provides:
- Fixed length and speed conversions (in/cm, mph/kph) and a pint registry
- Output shaft speed, road speed and engine rpm conversions
- Horsepower and torque conversions
- Line slope sampling
- Transformed trigonometric functions

Drivetrain formulas do not validate ratios: a zero divisor yields inf or
nan unless called with strict=True.
"""

from vehicle.physics.units import (
    ureg,
    Q_,
    to_cm,
    to_in,
    to_kph,
    to_mph,
    magnitude_in,
)
from vehicle.physics.formulas import (
    mph_from_oss,
    oss_from_mph,
    engine_rpm_from_oss,
    oss_from_engine_rpm,
    hp_to_torque,
    torque_to_hp,
    is_domain_valid,
    DivisionByZeroError,
)
from vehicle.physics.slope import Point, SlopePoints, Slope, slope_from_points
from vehicle.physics.trig import Function, FunctionType, Transformation, TransformationKind

__all__ = [
    # Units
    "ureg",
    "Q_",
    "to_cm",
    "to_in",
    "to_kph",
    "to_mph",
    "magnitude_in",
    # Drivetrain
    "mph_from_oss",
    "oss_from_mph",
    "engine_rpm_from_oss",
    "oss_from_engine_rpm",
    "hp_to_torque",
    "torque_to_hp",
    "is_domain_valid",
    "DivisionByZeroError",
    # Slope
    "Point",
    "SlopePoints",
    "Slope",
    "slope_from_points",
    # Trigonometry
    "Function",
    "FunctionType",
    "Transformation",
    "TransformationKind",
]
