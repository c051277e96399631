"""Unit conversions and drivetrain speed formulas.

OSS is the transmission output shaft speed in RPM.  The drivetrain relations
used here are::

    oss       = tire_rpm * axle_ratio
    mph       = tire_rpm / tire_revs_per_mile * 60
    engine    = oss * trans_gear_ratio
"""

from __future__ import annotations

from vehicle.constants import IN_TO_CM, MINUTES_PER_HOUR, MPH_TO_KPH
from vehicle.errors import require_finite, require_nonzero


def to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * IN_TO_CM


def to_in(centimeters: float) -> float:
    """Convert centimeters to inches."""
    return centimeters / IN_TO_CM


def to_kph(mph: float) -> float:
    """Convert miles per hour to kilometers per hour."""
    return mph * MPH_TO_KPH


def to_mph(kph: float) -> float:
    """Convert kilometers per hour to miles per hour."""
    return kph / MPH_TO_KPH


def mph_from_oss(oss: float, tire_revs_per_mile: float, axle_ratio: float) -> float:
    """Road speed in mph from output shaft speed.

    Args:
        oss: Output shaft speed in RPM.
        tire_revs_per_mile: Tire revolutions per mile, see
            :meth:`vehicle.tire.Tire.revs_per_mile`.
        axle_ratio: Final drive ratio (e.g. 3.21).

    Raises:
        DivisionByZeroError: If *tire_revs_per_mile* or *axle_ratio* is zero.
    """
    require_finite(oss=oss, tire_revs_per_mile=tire_revs_per_mile, axle_ratio=axle_ratio)
    require_nonzero("axle_ratio", axle_ratio)
    require_nonzero("tire_revs_per_mile", tire_revs_per_mile)
    return oss / axle_ratio / tire_revs_per_mile * MINUTES_PER_HOUR


def oss_from_mph(mph: float, tire_revs_per_mile: float, axle_ratio: float) -> float:
    """Output shaft speed in RPM needed for *mph*."""
    require_finite(mph=mph, tire_revs_per_mile=tire_revs_per_mile, axle_ratio=axle_ratio)
    # revs per hour -> revs per minute at the tire -> shaft RPM through the axle
    return ((tire_revs_per_mile * mph) / MINUTES_PER_HOUR) * axle_ratio


def engine_rpm_from_oss(oss: float, trans_gear_ratio: float) -> float:
    """Engine RPM from output shaft speed in a given transmission gear."""
    require_finite(oss=oss, trans_gear_ratio=trans_gear_ratio)
    return oss * trans_gear_ratio


def oss_from_engine_rpm(rpm: float, trans_gear_ratio: float) -> float:
    """Output shaft speed from engine RPM in a given transmission gear."""
    require_finite(rpm=rpm, trans_gear_ratio=trans_gear_ratio)
    require_nonzero("trans_gear_ratio", trans_gear_ratio)
    return rpm / trans_gear_ratio
