"""Tire geometry from metric size strings such as ``275/55R20``."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from vehicle.constants import INCHES_PER_MILE
from vehicle.errors import InvalidArgumentError, require_finite
from vehicle.formulas import to_in

logger = logging.getLogger(__name__)

_SIZE_NUMBERS = re.compile(r"\d{2,}")


@dataclass(frozen=True)
class Tire:
    """A tire described by its overall diameter in inches."""

    diameter: float

    def __post_init__(self) -> None:
        require_finite(diameter=self.diameter)
        if self.diameter <= 0:
            msg = f"Tire diameter must be positive, got {self.diameter}"
            raise InvalidArgumentError(msg)

    @classmethod
    def from_size(cls, size: str) -> Tire:
        """Create a tire from its metric size string.

        The first three numbers of at least two digits are read as section
        width (mm), aspect ratio (%) and wheel diameter (in), so ``275/55R20``,
        ``P275/55ZR20`` and ``275/55 R20 111V`` all parse the same way.

        Raises:
            InvalidArgumentError: If fewer than three numbers are found or
                they describe a tire with no diameter (e.g. ``00/00R00``).
        """
        numbers = [float(m) for m in _SIZE_NUMBERS.findall(size)]
        if len(numbers) < 3:
            msg = f"Could not parse tire size {size!r}; expected e.g. '275/55R20'"
            raise InvalidArgumentError(msg)

        width_mm, aspect_ratio, wheel_diameter = numbers[:3]
        sidewall_mm = width_mm * (aspect_ratio / 100.0)
        diameter = to_in(sidewall_mm * 2.0 / 10.0) + wheel_diameter

        logger.debug("Parsed tire %s -> %.3f in diameter", size, diameter)
        return cls(diameter=diameter)

    @property
    def circumference(self) -> float:
        """Rolling circumference in inches."""
        return self.diameter * math.pi

    @property
    def miles_per_rev(self) -> float:
        """Distance covered in one revolution, in miles."""
        return self.circumference / INCHES_PER_MILE

    @property
    def revs_per_mile(self) -> float:
        """Revolutions needed to cover one mile."""
        return 1.0 / self.miles_per_rev
