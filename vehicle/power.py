"""Engine power conversions: torque, horsepower and kilowatts.

Scalar conversions follow the usual shop formulas::

    hp = torque_ft_lbs * rpm / 5250
    kw = hp * 0.746 / efficiency

The curve helpers apply the same formulas to a whole dyno sweep held in a
DataFrame with ``rpm``, ``torque_ft_lbs``, ``horsepower`` and ``kilowatts``
columns.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd
from scipy.interpolate import interp1d

from vehicle.config import get_settings
from vehicle.constants import HP_TORQUE_CONSTANT, KW_PER_HP_ROUNDED, KW_TO_HP
from vehicle.errors import InvalidArgumentError, require_finite, require_nonzero

logger = logging.getLogger(__name__)

CURVE_COLUMNS = ["rpm", "torque_ft_lbs", "horsepower", "kilowatts"]


@dataclass
class PowerPeaks:
    """Peak output of a power curve."""

    peak_horsepower: float
    peak_horsepower_rpm: float
    peak_torque_ft_lbs: float
    peak_torque_rpm: float


# ---------------------------------------------------------------------------
# Scalar conversions
# ---------------------------------------------------------------------------


def horsepower_from_torque(torque_ft_lbs: float, rpm: float) -> float:
    """Horsepower produced by *torque_ft_lbs* at *rpm*.

    An RPM of zero is well-defined and returns ``0.0``.

    Raises:
        InvalidArgumentError: If either input is NaN or infinite.
    """
    require_finite(torque_ft_lbs=torque_ft_lbs, rpm=rpm)
    return (torque_ft_lbs * rpm) / HP_TORQUE_CONSTANT


def torque_from_horsepower(horsepower: float, rpm: float) -> float:
    """Torque in ft-lbs needed to make *horsepower* at *rpm*.

    Raises:
        InvalidArgumentError: If either input is NaN or infinite.
        DivisionByZeroError: If *rpm* is zero.
    """
    require_finite(horsepower=horsepower, rpm=rpm)
    require_nonzero("rpm", rpm)
    return (horsepower * HP_TORQUE_CONSTANT) / rpm


def horsepower_from_kilowatts(kilowatts: float) -> float:
    """Mechanical horsepower equivalent of *kilowatts*.

    Uses 1 hp = 0.7457 kW (about 1.34102 hp per kW) rather than the rounded
    1.333 found in older notes, see ``constants.KW_TO_HP_APPROX``.
    """
    require_finite(kilowatts=kilowatts)
    return kilowatts * KW_TO_HP


def _check_efficiency(efficiency: float) -> None:
    require_finite(efficiency=efficiency)
    if efficiency <= 0 or efficiency > 1:
        msg = f"efficiency must be in (0, 1], got {efficiency}"
        raise InvalidArgumentError(msg)


def kilowatts_from_horsepower(horsepower: float, efficiency: float = 1.0) -> float:
    """Kilowatts that must be supplied to deliver *horsepower*.

    Args:
        horsepower: Delivered horsepower.
        efficiency: Drivetrain efficiency in (0, 1].  Lower efficiency means
            more input power for the same output.

    The older shop-note form ``horsepower / (0.746 * efficiency)`` gives 134 kW
    for 100 hp and is not the inverse of :func:`horsepower_from_kilowatts`;
    this uses ``horsepower * 0.746 / efficiency`` (74.6 kW for 100 hp).

    Raises:
        InvalidArgumentError: If *efficiency* is outside (0, 1] or an input is
            NaN or infinite.
    """
    require_finite(horsepower=horsepower)
    _check_efficiency(efficiency)
    return horsepower * KW_PER_HP_ROUNDED / efficiency


# ---------------------------------------------------------------------------
# Power curves
# ---------------------------------------------------------------------------


def power_curve(
    rpm: Sequence[float] | np.ndarray,
    torque_ft_lbs: Sequence[float] | np.ndarray,
    efficiency: float | None = None,
) -> pd.DataFrame:
    """Build a power curve from a torque sweep.

    Parameters
    ----------
    rpm:
        Strictly increasing engine speeds.
    torque_ft_lbs:
        Torque measured at each RPM.
    efficiency:
        Drivetrain efficiency for the kilowatt column; defaults to
        ``Settings.default_efficiency``.

    Returns
    -------
    DataFrame with ``rpm``, ``torque_ft_lbs``, ``horsepower`` and ``kilowatts``
    columns.  The efficiency used is stored in ``attrs["efficiency"]``.
    """
    if efficiency is None:
        efficiency = get_settings().default_efficiency
    _check_efficiency(efficiency)

    rpm_arr = np.asarray(rpm, dtype=float)
    torque_arr = np.asarray(torque_ft_lbs, dtype=float)

    if rpm_arr.ndim != 1 or torque_arr.ndim != 1:
        msg = "rpm and torque_ft_lbs must be one-dimensional"
        raise InvalidArgumentError(msg)
    if len(rpm_arr) == 0:
        msg = "Power curve needs at least one sample"
        raise InvalidArgumentError(msg)
    if len(rpm_arr) != len(torque_arr):
        msg = (
            f"rpm and torque_ft_lbs differ in length ({len(rpm_arr)} vs {len(torque_arr)})"
        )
        raise InvalidArgumentError(msg)
    if not (np.isfinite(rpm_arr).all() and np.isfinite(torque_arr).all()):
        msg = "Power curve samples must be finite"
        raise InvalidArgumentError(msg)
    if np.any(np.diff(rpm_arr) <= 0):
        msg = "rpm must be strictly increasing"
        raise InvalidArgumentError(msg)

    horsepower = torque_arr * rpm_arr / HP_TORQUE_CONSTANT
    kilowatts = horsepower * KW_PER_HP_ROUNDED / efficiency

    curve = pd.DataFrame(
        {
            "rpm": rpm_arr,
            "torque_ft_lbs": torque_arr,
            "horsepower": horsepower,
            "kilowatts": kilowatts,
        },
        columns=CURVE_COLUMNS,
    )
    curve.attrs["efficiency"] = efficiency
    logger.debug(
        "Built power curve with %d samples from %.0f to %.0f rpm",
        len(curve),
        rpm_arr[0],
        rpm_arr[-1],
    )
    return curve


def resample_power_curve(curve: pd.DataFrame, step_rpm: float | None = None) -> pd.DataFrame:
    """Resample a power curve at uniform RPM intervals.

    Torque is interpolated linearly onto a grid of *step_rpm* spacing starting
    at the first RPM and always ending at the last RPM, so the final gap may be
    shorter than *step_rpm*.  Horsepower and kilowatts are recomputed from it
    so the power columns stay consistent with torque.  A curve spanning less
    than one step is returned as a copy.
    """
    settings = get_settings()
    if step_rpm is None:
        step_rpm = settings.resample_step_rpm
    require_finite(step_rpm=step_rpm)
    if step_rpm <= 0:
        msg = f"step_rpm must be positive, got {step_rpm}"
        raise InvalidArgumentError(msg)

    rpm = curve["rpm"].to_numpy(dtype=float)
    if len(rpm) < 2 or rpm[-1] - rpm[0] < step_rpm:
        return curve.copy()

    new_rpm = np.arange(rpm[0], rpm[-1], step_rpm)
    # Keep the top of the sweep, peak power often sits at redline
    if math.isclose(new_rpm[-1], rpm[-1]):
        new_rpm[-1] = rpm[-1]
    else:
        new_rpm = np.append(new_rpm, rpm[-1])
    f = interp1d(
        rpm,
        curve["torque_ft_lbs"].to_numpy(dtype=float),
        kind="linear",
        bounds_error=False,
        fill_value="extrapolate",
    )
    efficiency = curve.attrs.get("efficiency", settings.default_efficiency)
    return power_curve(new_rpm, f(new_rpm), efficiency=efficiency)


def find_power_peaks(curve: pd.DataFrame) -> PowerPeaks:
    """Locate peak horsepower and peak torque in *curve*."""
    if curve.empty:
        msg = "Cannot find peaks of an empty power curve"
        raise InvalidArgumentError(msg)

    hp_idx = curve["horsepower"].idxmax()
    tq_idx = curve["torque_ft_lbs"].idxmax()
    return PowerPeaks(
        peak_horsepower=float(curve.at[hp_idx, "horsepower"]),
        peak_horsepower_rpm=float(curve.at[hp_idx, "rpm"]),
        peak_torque_ft_lbs=float(curve.at[tq_idx, "torque_ft_lbs"]),
        peak_torque_rpm=float(curve.at[tq_idx, "rpm"]),
    )
