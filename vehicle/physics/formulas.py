"""
Drivetrain speed and power formulas.

Converts between the rotational and linear speed domains of a vehicle:
- Output shaft speed (OSS, rpm behind the transmission)
- Road speed (mph)
- Engine speed (rpm)

and between horsepower and torque at a given engine speed.

Divisors (axle ratio, tire revs per mile, gear ratio, rpm) are expected to
come from known, non-zero drivetrain specifications and are not validated.
A zero divisor produces inf or nan following IEEE-754, the same as any
other float result; use is_domain_valid() to check. Pass strict=True to get
a DivisionByZeroError instead.
"""

import math

# hp = torque (ft-lbs) * rpm / 5252
HP_TORQUE_CONSTANT = 5252

MINUTES_PER_HOUR = 60.0


class DivisionByZeroError(ArithmeticError, ValueError):
    """A formula was asked to divide by a zero ratio or speed."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} must be non-zero")


def _divide(numerator: float, denominator: float, argument: str, strict: bool) -> float:
    """
    Divide with IEEE-754 semantics for a zero denominator.

    x / 0 is +/-inf with the sign of x times the sign of the zero,
    0 / 0 and nan / 0 are nan.
    """
    if denominator == 0:
        if strict:
            raise DivisionByZeroError(argument)
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def is_domain_valid(value: float) -> bool:
    """Return True if a formula result is a usable (finite) number."""
    return math.isfinite(value)


def mph_from_oss(
    oss: float,
    tire_revs_per_mile: float,
    axle_ratio: float,
    *,
    strict: bool = False,
) -> float:
    """
    Calculate road speed from output shaft speed.

    oss = tire_rpm * axle_ratio, so tire_rpm = oss / axle_ratio.
    tire_rpm / revs_per_mile is miles per minute; * 60 gives mph.

    Args:
        oss: Output shaft speed in rpm
        tire_revs_per_mile: Tire revolutions per mile
        axle_ratio: Final drive ratio
        strict: Raise DivisionByZeroError instead of returning inf/nan

    Returns:
        Road speed in mph
    """
    tire_rpm = _divide(oss, axle_ratio, "axle_ratio", strict)
    return _divide(tire_rpm, tire_revs_per_mile, "tire_revs_per_mile", strict) * MINUTES_PER_HOUR


def oss_from_mph(mph: float, tire_revs_per_mile: float, axle_ratio: float) -> float:
    """
    Calculate output shaft speed from road speed.

    revs_per_mile * mph is tire revs per hour; / 60 is tire rpm;
    * axle_ratio is the shaft rpm.

    Example: 632.3636 revs/mile at 3 mph is 31.618 tire rpm,
    which is 101.494 rpm at the shaft with a 3.21 axle.
    """
    return ((tire_revs_per_mile * mph) / MINUTES_PER_HOUR) * axle_ratio


def engine_rpm_from_oss(oss: float, trans_gear_ratio: float) -> float:
    """Calculate engine rpm from output shaft speed in the current gear."""
    return oss * trans_gear_ratio


def oss_from_engine_rpm(rpm: float, trans_gear_ratio: float, *, strict: bool = False) -> float:
    """Calculate output shaft speed from engine rpm in the current gear."""
    return _divide(rpm, trans_gear_ratio, "trans_gear_ratio", strict)


def hp_to_torque(hp: float, rpm: float, *, strict: bool = False) -> float:
    """
    Convert horsepower to torque at a given engine speed.

    Returns:
        Torque in ft-lbs
    """
    return _divide(hp * HP_TORQUE_CONSTANT, rpm, "rpm", strict)


def torque_to_hp(torque_ft_lbs: float, rpm: float) -> float:
    """Convert torque (ft-lbs) to horsepower at a given engine speed."""
    return torque_ft_lbs * rpm / HP_TORQUE_CONSTANT
