"""
Pydantic models for tire sizes and rolling geometry.

TireSize holds the decoded groups of a size code; TireGeometry holds the
resulting outside diameter and derives the rolling measurements from it.
"""

import pint
from pydantic import BaseModel, Field, ValidationError

from vehicle.physics.units import Q_, to_cm, to_in
from vehicle.tire.parser import ParseError, split_tire_code

# Truncated π, kept for compatibility with published revs-per-mile values
PI_APPROX = 3.14

INCHES_PER_MILE = 5280.0 * 12.0


class TireSize(BaseModel):
    """
    Metric tire size, e.g. 275/55R20.

    The aspect ratio is the sidewall height as a percentage of the width.
    """
    width_mm: int = Field(..., ge=0, description="Section width in mm")
    aspect_ratio: int = Field(..., ge=0, description="Sidewall height as percent of width")
    wheel_diameter_in: int = Field(..., ge=0, description="Wheel (rim) diameter in inches")

    model_config = {"frozen": True}

    @classmethod
    def from_code(cls, code: str) -> "TireSize":
        """Decode a tire size code. Raises ParseError."""
        width, aspect_ratio, wheel_diameter = split_tire_code(code)
        return cls(width_mm=width, aspect_ratio=aspect_ratio, wheel_diameter_in=wheel_diameter)

    @property
    def sidewall_height_mm(self) -> float:
        """Combined height of both sidewalls (above and below the wheel) in mm."""
        return (self.width_mm * (self.aspect_ratio / 100)) * 2

    def diameter_in(self) -> float:
        """Outside diameter of the tire in inches."""
        return to_in(self.sidewall_height_mm / 10) + self.wheel_diameter_in


def parse_tire_code(code: str) -> TireSize:
    """Decode a tire size code such as "275/55R20" into a TireSize."""
    return TireSize.from_code(code)


class TireGeometry(BaseModel):
    """
    Rolling geometry of a tire.

    Circumference and revolutions per mile are always derived from the
    diameter on request.
    """
    diameter: float = Field(..., gt=0, description="Outside diameter in inches")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {"diameter": 31.909448818897637},
        },
    }

    @classmethod
    def from_size(cls, size: TireSize) -> "TireGeometry":
        return cls(diameter=size.diameter_in())

    @classmethod
    def from_code(cls, code: str) -> "TireGeometry":
        """
        Create a TireGeometry from a tire size code.

        Args:
            code: Tire size code, e.g. "275/55R20"

        Raises:
            ParseError: If the code does not hold three numeric groups,
                decodes to a tire with no diameter (e.g. "00/00R00"), or
                holds a group too large to convert
        """
        size = TireSize.from_code(code)
        try:
            return cls.from_size(size)
        except OverflowError as e:
            raise ParseError(code, "numeric group is too large") from e
        except ValidationError as e:
            raise ParseError(code, "decodes to a zero diameter") from e

    def circumference(self) -> float:
        """Circumference in inches."""
        return self.diameter * PI_APPROX

    def circumference_cm(self) -> float:
        """Circumference in centimeters."""
        return to_cm(self.circumference())

    def miles_per_rev(self) -> float:
        """Distance in miles covered by one revolution."""
        return self.circumference() / INCHES_PER_MILE

    def revs_per_mile(self) -> float:
        """Revolutions needed to cover one mile."""
        return 1.0 / self.miles_per_rev()

    def diameter_quantity(self) -> pint.Quantity:
        """Diameter as a pint Quantity in inches."""
        return Q_(self.diameter, "inch")
