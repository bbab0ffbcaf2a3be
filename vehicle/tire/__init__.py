"""
Tire size decoding and rolling geometry.

Decodes metric size codes such as "275/55R20" into an outside diameter and
derives circumference, miles per revolution and revolutions per mile for
use with the drivetrain formulas.
"""

from vehicle.tire.parser import ParseError, scan_digit_runs, split_tire_code
from vehicle.tire.models import TireSize, TireGeometry, parse_tire_code

__all__ = [
    "ParseError",
    "scan_digit_runs",
    "split_tire_code",
    "TireSize",
    "TireGeometry",
    "parse_tire_code",
]
