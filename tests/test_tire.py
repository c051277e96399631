"""Tests for vehicle.tire."""

from __future__ import annotations

import math

import pytest

from vehicle.errors import InvalidArgumentError
from vehicle.formulas import mph_from_oss
from vehicle.tire import Tire


@pytest.fixture()
def truck_tire() -> Tire:
    return Tire.from_size("275/55R20")


class TestFromSize:
    def test_diameter(self, truck_tire: Tire) -> None:
        # 2 * 275 * 0.55 mm of sidewall on a 20" wheel
        assert truck_tire.diameter == pytest.approx(31.909448818897637)

    @pytest.mark.parametrize("size", ["P275/55ZR20", "275/55 R20 111V", "LT275/55R20"])
    def test_size_variants(self, size: str) -> None:
        assert Tire.from_size(size).diameter == pytest.approx(31.909448818897637)

    @pytest.mark.parametrize("size", ["", "275/55", "RADIAL"])
    def test_unparseable(self, size: str) -> None:
        with pytest.raises(InvalidArgumentError, match="tire size"):
            Tire.from_size(size)

    def test_zero_size_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="diameter must be positive"):
            Tire.from_size("00/00R00")

    @pytest.mark.parametrize("diameter", [0.0, -25.0, math.inf])
    def test_invalid_diameter(self, diameter: float) -> None:
        with pytest.raises(InvalidArgumentError, match="diameter"):
            Tire(diameter=diameter)


class TestGeometry:
    def test_circumference(self, truck_tire: Tire) -> None:
        assert truck_tire.circumference == pytest.approx(31.909448818897637 * math.pi)

    def test_miles_per_rev(self, truck_tire: Tire) -> None:
        assert truck_tire.miles_per_rev == pytest.approx(truck_tire.circumference / 63360.0)

    def test_revs_per_mile(self, truck_tire: Tire) -> None:
        assert truck_tire.revs_per_mile == pytest.approx(632.04, abs=0.05)
        assert truck_tire.revs_per_mile * truck_tire.miles_per_rev == pytest.approx(1.0)

    def test_road_speed_from_output_shaft(self, truck_tire: Tire) -> None:
        mph = mph_from_oss(2000.0, truck_tire.revs_per_mile, 3.73)
        assert mph == pytest.approx(2000.0 / 3.73 / truck_tire.revs_per_mile * 60.0)
        assert 50.0 < mph < 52.0
