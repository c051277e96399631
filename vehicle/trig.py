"""Trigonometric functions with transformations.

A :class:`Function` folds its transformations into the general form::

    y = A * f(B * (x - C)) + D

where A is the amplitude, B = natural period / period, C the phase shift and
D the vertical shift.  A negative amplitude flips the graph across the x-axis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum

import numpy as np

from vehicle.errors import InvalidArgumentError, require_finite, require_nonzero

ArrayLike = float | np.ndarray


class FunctionType(StrEnum):
    SINE = "sine"
    COSINE = "cosine"
    TANGENT = "tangent"
    COTANGENT = "cotangent"
    SECANT = "secant"
    COSECANT = "cosecant"


class TransformationKind(StrEnum):
    AMPLIFY = "amplify"
    PERIOD = "period"
    PHASE_SHIFT = "phase_shift"
    VERTICAL_SHIFT = "vertical_shift"


@dataclass(frozen=True)
class Transformation:
    """A single transformation of a trig function.

    * amplify -- multiplies the height (or steepness for tan/cot/sec/csc)
    * period -- length of one cycle
    * phase_shift -- horizontal shift, positive moves the graph right
    * vertical_shift -- positive moves the graph up
    """

    kind: TransformationKind
    value: float


# Tangent and cotangent repeat every pi, the rest every 2*pi
NATURAL_PERIODS: dict[FunctionType, float] = {
    FunctionType.SINE: 2 * math.pi,
    FunctionType.COSINE: 2 * math.pi,
    FunctionType.TANGENT: math.pi,
    FunctionType.COTANGENT: math.pi,
    FunctionType.SECANT: 2 * math.pi,
    FunctionType.COSECANT: 2 * math.pi,
}


@dataclass
class _Coefficients:
    amplitude: float = 1.0
    frequency: float = 1.0
    phase: float = 0.0
    vertical: float = 0.0


@dataclass
class Function:
    """A trigonometric function with an ordered list of transformations.

    Example::

        sin = Function(FunctionType.SINE)
        sin.amplify(2.0).period(3.0).phase_shift(1.2)
        sin.calc_y(0.0)
    """

    func_type: FunctionType
    mods: list[Transformation] = field(default_factory=list)

    def add(self, transformation: Transformation) -> Function:
        """Append *transformation* and return ``self`` for chaining."""
        if transformation.kind is TransformationKind.PERIOD:
            require_nonzero("period", transformation.value)
        self.mods.append(transformation)
        return self

    def amplify(self, a: float) -> Function:
        return self.add(Transformation(TransformationKind.AMPLIFY, a))

    def period(self, p: float) -> Function:
        return self.add(Transformation(TransformationKind.PERIOD, p))

    def phase_shift(self, ps: float) -> Function:
        return self.add(Transformation(TransformationKind.PHASE_SHIFT, ps))

    def vertical_shift(self, vs: float) -> Function:
        return self.add(Transformation(TransformationKind.VERTICAL_SHIFT, vs))

    def _coefficients(self) -> _Coefficients:
        coeffs = _Coefficients()
        for mod in self.mods:
            if mod.kind is TransformationKind.AMPLIFY:
                coeffs.amplitude *= mod.value
            elif mod.kind is TransformationKind.PERIOD:
                coeffs.frequency = NATURAL_PERIODS[self.func_type] / mod.value
            elif mod.kind is TransformationKind.PHASE_SHIFT:
                coeffs.phase += mod.value
            else:
                coeffs.vertical += mod.value
        return coeffs

    def calc_y(self, x: ArrayLike) -> ArrayLike:
        """Evaluate the transformed function at *x* (scalar or array).

        Poles evaluate to ``inf`` (or a very large value, depending on
        floating-point rounding) rather than raising.
        """
        c = self._coefficients()
        u = c.frequency * (np.asarray(x, dtype=float) - c.phase)
        with np.errstate(divide="ignore"):
            if self.func_type is FunctionType.SINE:
                base = np.sin(u)
            elif self.func_type is FunctionType.COSINE:
                base = np.cos(u)
            elif self.func_type is FunctionType.TANGENT:
                base = np.tan(u)
            elif self.func_type is FunctionType.COTANGENT:
                base = 1.0 / np.tan(u)
            elif self.func_type is FunctionType.SECANT:
                base = 1.0 / np.cos(u)
            else:
                base = 1.0 / np.sin(u)
        y = c.amplitude * base + c.vertical
        if np.ndim(y) == 0:
            return float(y)
        return y

    def calc_x(self, y: float) -> float:
        """Principal x for which :meth:`calc_y` returns *y*.

        Uses the principal branch of each inverse (e.g. arcsin in
        [-pi/2, pi/2], arccot in (0, pi)) before undoing the period and phase
        shift.

        Raises:
            InvalidArgumentError: If *y* is outside the function's range or
                the amplitude is zero.
        """
        require_finite(y=y)
        c = self._coefficients()
        if c.amplitude == 0:
            msg = "Cannot invert a function with zero amplitude"
            raise InvalidArgumentError(msg)

        v = (y - c.vertical) / c.amplitude
        kind = self.func_type
        if kind in (FunctionType.SINE, FunctionType.COSINE) and abs(v) > 1:
            msg = f"{y} is outside the range of this {kind} function"
            raise InvalidArgumentError(msg)
        if kind in (FunctionType.SECANT, FunctionType.COSECANT) and abs(v) < 1:
            msg = f"{y} is outside the range of this {kind} function"
            raise InvalidArgumentError(msg)

        if kind is FunctionType.SINE:
            u = math.asin(v)
        elif kind is FunctionType.COSINE:
            u = math.acos(v)
        elif kind is FunctionType.TANGENT:
            u = math.atan(v)
        elif kind is FunctionType.COTANGENT:
            u = math.atan2(1.0, v)
        elif kind is FunctionType.SECANT:
            u = math.acos(1.0 / v)
        else:
            u = math.asin(1.0 / v)

        return u / c.frequency + c.phase
