"""
Slope of a line segment and sampling points along it.

Slope formula: m = (y2 - y1) / (x2 - x1) = Δy / Δx
"""

import math
from dataclasses import dataclass

from vehicle.physics.formulas import DivisionByZeroError


@dataclass(frozen=True)
class Point:
    """A point (or a Δx/Δy pair) in the plane."""
    x: float
    y: float


@dataclass(frozen=True)
class SlopePoints:
    """Start and end points of a line segment."""
    start: Point
    end: Point


def slope_from_points(points: SlopePoints) -> Point:
    """
    Return the rise and run between two points as Point(Δx, Δy).

    The slope itself is Δy / Δx; keeping both deltas lets callers
    handle vertical lines themselves.
    """
    return Point(
        x=points.end.x - points.start.x,
        y=points.end.y - points.start.y,
    )


@dataclass(frozen=True)
class Slope:
    """A line segment that can be sampled at a fixed x interval."""
    slope: SlopePoints

    def gradient(self) -> float:
        """Return m = Δy / Δx. Raises DivisionByZeroError for a vertical line."""
        delta = slope_from_points(self.slope)
        if delta.x == 0:
            raise DivisionByZeroError("Δx")
        return delta.y / delta.x

    def y_at(self, x: float) -> float:
        """Return y on the line through the segment at the given x."""
        return self.slope.start.y + self.gradient() * (x - self.slope.start.x)

    def range_from_interval(self, interval: float) -> list[Point]:
        """
        Sample points along the segment every `interval` along x.

        Starts at the start point and steps towards the end point; the end
        point is always the last entry. Works for segments running in
        either x direction.

        Args:
            interval: Step size along x (must be positive and finite)

        Returns:
            List of points from start to end
        """
        if not math.isfinite(interval) or interval <= 0:
            raise ValueError("Interval must be a positive finite number")

        start, end = self.slope.start, self.slope.end
        delta = slope_from_points(self.slope)
        if delta.x == 0:
            return [start, end]

        direction = 1.0 if delta.x > 0 else -1.0
        m = delta.y / delta.x
        span = abs(delta.x)

        points = []
        i = 0
        while i * interval < span:
            x = start.x + direction * i * interval
            points.append(Point(x=x, y=start.y + m * (x - start.x)))
            i += 1
        points.append(end)
        return points
