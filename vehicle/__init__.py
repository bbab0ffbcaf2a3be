"""
Vehicle formulas (vehicle)

Kinematic and geometric formulas for vehicle drivetrains: unit conversions,
output shaft speed / road speed / engine rpm relationships, horsepower and
torque, and tire size decoding with rolling measurements.

Usage:
    from vehicle import TireGeometry, mph_from_oss

    tire = TireGeometry.from_code("275/55R20")
    mph = mph_from_oss(1850.0, tire.revs_per_mile(), axle_ratio=3.21)
"""

__version__ = "0.1.0"
__author__ = "Vehicle Formulas Project"

from vehicle.physics.units import ureg, Q_, to_cm, to_in, to_kph, to_mph
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
from vehicle.tire import ParseError, TireSize, TireGeometry, parse_tire_code

__all__ = [
    "ureg",
    "Q_",
    "to_cm",
    "to_in",
    "to_kph",
    "to_mph",
    "mph_from_oss",
    "oss_from_mph",
    "engine_rpm_from_oss",
    "oss_from_engine_rpm",
    "hp_to_torque",
    "torque_to_hp",
    "is_domain_valid",
    "DivisionByZeroError",
    "ParseError",
    "TireSize",
    "TireGeometry",
    "parse_tire_code",
]
