"""Shared constants for the vehicle formulas.

Centralises conversion factors and magic numbers used across multiple modules.
"""

from __future__ import annotations

# Horsepower from torque (ft-lbs) and RPM: hp = torque * rpm / 5250
HP_TORQUE_CONSTANT: float = 5250.0

# Power conversion: kilowatts per mechanical horsepower
KW_PER_HP: float = 0.7457
KW_TO_HP: float = 1.0 / KW_PER_HP

# Rounded factors kept from the shop notes the formulas came from.
# kilowatts_from_horsepower multiplies by KW_PER_HP_ROUNDED; KW_TO_HP_APPROX is
# documentation only and under-reports by roughly 0.6%.
KW_PER_HP_ROUNDED: float = 0.746
KW_TO_HP_APPROX: float = 1.333

# Length conversion: inches -> centimeters
IN_TO_CM: float = 2.54

# Speed conversion: miles per hour -> kilometers per hour
MPH_TO_KPH: float = 1.609344
KPH_TO_MPH: float = 1.0 / MPH_TO_KPH

INCHES_PER_MILE: float = 5280.0 * 12.0
MINUTES_PER_HOUR: float = 60.0
