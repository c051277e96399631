"""Transmission shift-curve slopes and their adjustments.

A shift curve is modelled as a line segment between two points, e.g. throttle
position on x and shift speed on y.  The adjustments tune that line:

* offset  -- bow the middle of a multi-point curve while its ends stay put
* factor  -- scale the slope, holding the upper end fixed
* slip    -- raise engine RPM for torque-converter slip past stall
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from vehicle.errors import InvalidArgumentError, require_finite, require_nonzero

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class SlopePoints:
    """Line segment between a start and an end point."""

    start: Point
    end: Point

    @property
    def slope(self) -> float:
        """Slope m of the segment, see :func:`slope`."""
        return slope(self.start.x, self.start.y, self.end.x, self.end.y)

    def y_at(self, x: float) -> float:
        """Value of the line through the segment at *x*."""
        return self.start.y + self.slope * (x - self.start.x)

    def get_range_from_interval(self, interval: float) -> list[Point]:
        """Points on the segment every *interval* along x.

        Both endpoints are always included; the last gap may be shorter than
        *interval*.  Works for segments running in either x direction.

        Raises:
            InvalidArgumentError: If *interval* is not positive.
            DivisionByZeroError: If the segment is vertical.
        """
        require_finite(interval=interval)
        if interval <= 0:
            msg = f"interval must be positive, got {interval}"
            raise InvalidArgumentError(msg)

        dx = self.end.x - self.start.x
        require_nonzero("x2 - x1", dx)
        m = self.slope

        n_steps = math.floor(abs(dx) / interval)
        xs = self.start.x + math.copysign(interval, dx) * np.arange(n_steps + 1)
        if not math.isclose(xs[-1], self.end.x):
            xs = np.append(xs, self.end.x)

        points = [Point(float(x), self.start.y + m * (float(x) - self.start.x)) for x in xs]
        points[-1] = self.end
        logger.debug("Generated %d points at interval %s", len(points), interval)
        return points

    def with_factor(self, factor_percentage: float) -> SlopePoints:
        """Return the segment with its slope scaled by *factor_percentage*.

        The end point stays fixed and the start keeps its x.  A start y that would go negative is clamped to 0, which
        makes the resulting slope differ from :func:`apply_factor`.
        """
        new_m = apply_factor(self.slope, factor_percentage)
        start_y = self.end.y - new_m * (self.end.x - self.start.x)
        if start_y < 0:
            logger.warning(
                "Factor %.1f%% would drive start y to %.3f; clamping to 0",
                factor_percentage,
                start_y,
            )
            start_y = 0.0
        return SlopePoints(start=Point(self.start.x, start_y), end=self.end)


def slope(x1: float, y1: float, x2: float, y2: float) -> float:
    """Slope formula m = (y2 - y1) / (x2 - x1).

    Raises:
        DivisionByZeroError: If ``x1 == x2``.
    """
    require_finite(x1=x1, y1=y1, x2=x2, y2=y2)
    require_nonzero("x2 - x1", x2 - x1)
    return (y2 - y1) / (x2 - x1)


def slope_from_points(points: SlopePoints) -> Point:
    """Rise and run of *points* as a ``Point(dx, dy)``."""
    return Point(
        x=points.end.x - points.start.x,
        y=points.end.y - points.start.y,
    )


def apply_offset(points: Sequence[Point], offset_percentage: float) -> list[Point]:
    """Bow the interior of a curve by *offset_percentage* of its rise.

    The first and last points keep their values.  Each interior point moves by
    ``offset_percentage / 100 * |y2 - y1| * 4t(1 - t)`` where ``t`` is its
    normalised x position, so the shift peaks at the middle of the curve and
    fades to zero at both ends.  Positive offsets raise the curve.

    Raises:
        InvalidArgumentError: If fewer than two points are given.
        DivisionByZeroError: If the first and last x coincide.
    """
    require_finite(offset_percentage=offset_percentage)
    if len(points) < 2:
        msg = f"apply_offset needs at least two points, got {len(points)}"
        raise InvalidArgumentError(msg)

    first, last = points[0], points[-1]
    span_x = last.x - first.x
    require_nonzero("x2 - x1", span_x)
    shift = offset_percentage / 100.0 * abs(last.y - first.y)

    adjusted = [first]
    for p in points[1:-1]:
        t = (p.x - first.x) / span_x
        adjusted.append(Point(p.x, p.y + shift * 4.0 * t * (1.0 - t)))
    adjusted.append(last)
    return adjusted


def apply_factor(slope_m: float, factor_percentage: float) -> float:
    """Scale a slope by *factor_percentage* (``10`` makes it 10% steeper)."""
    require_finite(slope_m=slope_m, factor_percentage=factor_percentage)
    return slope_m * (1.0 + factor_percentage / 100.0)


def apply_slip_factor(rpm: float, slip_percentage: float, stall_rpm: float = 0.0) -> float:
    """Engine RPM after torque-converter slip.

    Slip is the share of engine speed lost across the converter, so an engine
    turning the converter at *rpm* turbine speed runs at
    ``rpm / (1 - slip_percentage / 100)``.  At or below *stall_rpm* the
    converter is not yet coupled and *rpm* is returned unchanged.

    The full slip applies as soon as *rpm* passes *stall_rpm*, so the result
    steps at stall: with 10% slip and a 2200 rpm stall, 2200 maps to 2200 but
    2201 maps to about 2445.6.  Callers wanting a smooth transition should
    ramp *slip_percentage* themselves.

    Raises:
        InvalidArgumentError: If *slip_percentage* is outside [0, 100).
    """
    require_finite(rpm=rpm, slip_percentage=slip_percentage, stall_rpm=stall_rpm)
    if not 0 <= slip_percentage < 100:
        msg = f"slip_percentage must be in [0, 100), got {slip_percentage}"
        raise InvalidArgumentError(msg)
    if rpm <= stall_rpm:
        return rpm
    return rpm / (1.0 - slip_percentage / 100.0)
