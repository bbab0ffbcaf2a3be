"""
Trigonometric functions with transformations.

A Function evaluates y = A * f(B * (x - C)) + D where:
- A: amplitude (Amplify). Stretches the graph vertically; negative flips it
  across the x-axis. Only sine and cosine have a true amplitude, for the
  other functions A changes the steepness.
- B: horizontal scale derived from the period (Period). sin, cos, sec and
  csc have a natural period of 2π; tan and cot have a natural period of π.
- C: phase shift (PhaseShift). Positive shifts the graph right.
- D: vertical shift (VerticalShift). Positive shifts the graph up.

See https://www.integral-domain.org/lwilliams/Applets/precalculus/Transformation.php
"""

import math
from dataclasses import dataclass
from enum import Enum

from vehicle.physics.formulas import DivisionByZeroError


class FunctionType(str, Enum):
    """Trigonometric function types."""
    SINE = "sin"
    COSINE = "cos"
    TANGENT = "tan"
    COTANGENT = "cot"
    SECANT = "sec"
    COSECANT = "csc"

    @property
    def natural_period(self) -> float:
        if self in (FunctionType.TANGENT, FunctionType.COTANGENT):
            return math.pi
        return 2 * math.pi


class TransformationKind(str, Enum):
    AMPLIFY = "amplify"
    PERIOD = "period"
    PHASE_SHIFT = "phase_shift"
    VERTICAL_SHIFT = "vertical_shift"


@dataclass(frozen=True)
class Transformation:
    """A single transformation applied to a trig function."""
    kind: TransformationKind
    value: float

    @classmethod
    def amplify(cls, a: float) -> "Transformation":
        return cls(TransformationKind.AMPLIFY, a)

    @classmethod
    def period(cls, p: float) -> "Transformation":
        return cls(TransformationKind.PERIOD, p)

    @classmethod
    def phase_shift(cls, c: float) -> "Transformation":
        return cls(TransformationKind.PHASE_SHIFT, c)

    @classmethod
    def vertical_shift(cls, d: float) -> "Transformation":
        return cls(TransformationKind.VERTICAL_SHIFT, d)


def _reciprocal(value: float) -> float:
    # Poles evaluate to a signed infinity
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def _evaluate(func_type: FunctionType, u: float) -> float:
    if func_type is FunctionType.SINE:
        return math.sin(u)
    if func_type is FunctionType.COSINE:
        return math.cos(u)
    if func_type is FunctionType.TANGENT:
        return math.tan(u)
    if func_type is FunctionType.COTANGENT:
        return _reciprocal(math.tan(u))
    if func_type is FunctionType.SECANT:
        return _reciprocal(math.cos(u))
    return _reciprocal(math.sin(u))


def _inverse(func_type: FunctionType, v: float) -> float:
    """Principal-branch inverse. Raises ValueError outside the domain."""
    if func_type is FunctionType.TANGENT:
        return math.atan(v)
    if func_type is FunctionType.COTANGENT:
        # Principal range (0, π)
        return math.atan2(1.0, v)
    if func_type in (FunctionType.SECANT, FunctionType.COSECANT):
        if abs(v) < 1:
            raise ValueError(f"{func_type.value}⁻¹ is undefined for |{v}| < 1")
        v = 1.0 / v
    elif abs(v) > 1:
        raise ValueError(f"{func_type.value}⁻¹ is undefined for |{v}| > 1")
    if func_type in (FunctionType.SINE, FunctionType.COSECANT):
        return math.asin(v)
    return math.acos(v)


class Function:
    """
    A trig function with chainable transformations.

    Example:
        sin = Function(FunctionType.SINE)
        sin.amplify(2.0).period(3.0).phase_shift(1.2)
        sin.calc_y(0.0)
    """

    def __init__(self, func_type: FunctionType):
        self.func_type = func_type
        self.mods: list[Transformation] = []

    def add(self, transformation: Transformation) -> "Function":
        """Add a transformation to the function."""
        if transformation.kind is TransformationKind.PERIOD and transformation.value == 0:
            raise ValueError("Period must be non-zero")
        self.mods.append(transformation)
        return self

    def amplify(self, a: float) -> "Function":
        return self.add(Transformation.amplify(a))

    def period(self, p: float) -> "Function":
        return self.add(Transformation.period(p))

    def phase_shift(self, c: float) -> "Function":
        return self.add(Transformation.phase_shift(c))

    def vertical_shift(self, d: float) -> "Function":
        return self.add(Transformation.vertical_shift(d))

    def coefficients(self) -> tuple[float, float, float, float]:
        """
        Collapse the transformations into (A, B, C, D).

        Repeated amplitudes and period scale factors multiply,
        repeated shifts add.
        """
        a, b, c, d = 1.0, 1.0, 0.0, 0.0
        for mod in self.mods:
            if mod.kind is TransformationKind.AMPLIFY:
                a *= mod.value
            elif mod.kind is TransformationKind.PERIOD:
                b *= self.func_type.natural_period / mod.value
            elif mod.kind is TransformationKind.PHASE_SHIFT:
                c += mod.value
            else:
                d += mod.value
        return a, b, c, d

    def calc_y(self, x: float) -> float:
        """Evaluate y = A * f(B * (x - C)) + D."""
        a, b, c, d = self.coefficients()
        return a * _evaluate(self.func_type, b * (x - c)) + d

    def calc_x(self, y: float) -> float:
        """
        Return the principal x for which calc_y(x) == y.

        Raises:
            DivisionByZeroError: If the amplitude is zero
            ValueError: If y is outside the range of the function
        """
        a, b, c, d = self.coefficients()
        if a == 0:
            raise DivisionByZeroError("amplitude")
        return _inverse(self.func_type, (y - d) / a) / b + c

    def __repr__(self) -> str:
        return f"Function(func_type={self.func_type!r}, mods={self.mods!r})"
