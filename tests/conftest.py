"""Shared test fixtures for vehicle tests."""

from __future__ import annotations

from collections.abc import Iterator

import pandas as pd
import pytest

from vehicle.config import get_settings
from vehicle.power import power_curve
from vehicle.slope import Point, SlopePoints


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def dyno_curve() -> pd.DataFrame:
    """A small naturally-aspirated torque sweep: torque peaks at 3000, power at 6000."""
    return power_curve(
        rpm=[1000.0, 2000.0, 3000.0, 4000.0, 5000.0, 6000.0],
        torque_ft_lbs=[200.0, 250.0, 300.0, 290.0, 260.0, 220.0],
        efficiency=1.0,
    )


@pytest.fixture()
def shift_segment() -> SlopePoints:
    """Shift speed rising from 1000 rpm at 0% throttle to 3000 rpm at 100%."""
    return SlopePoints(start=Point(0.0, 1000.0), end=Point(100.0, 3000.0))
