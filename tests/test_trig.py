"""Tests for vehicle.trig."""

from __future__ import annotations

import math

import numpy as np
import pytest

from vehicle.errors import DivisionByZeroError, InvalidArgumentError
from vehicle.trig import Function, FunctionType, Transformation, TransformationKind


class TestCalcY:
    def test_plain_sine(self) -> None:
        assert Function(FunctionType.SINE).calc_y(math.pi / 2) == pytest.approx(1.0)

    def test_all_transformations(self) -> None:
        sin = Function(FunctionType.SINE)
        sin.amplify(2.0).period(math.pi).phase_shift(0.0).vertical_shift(1.0)
        # B = 2*pi / pi = 2, so x = pi/4 lands on the peak
        assert sin.calc_y(math.pi / 4) == pytest.approx(3.0)

    def test_phase_shift_moves_right(self) -> None:
        cos = Function(FunctionType.COSINE).phase_shift(1.5)
        assert cos.calc_y(1.5) == pytest.approx(1.0)

    def test_negative_amplitude_flips(self) -> None:
        sin = Function(FunctionType.SINE).amplify(-1.0)
        assert sin.calc_y(math.pi / 2) == pytest.approx(-1.0)

    def test_tangent_period(self) -> None:
        tan = Function(FunctionType.TANGENT).period(2.0)
        assert tan.calc_y(0.5) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        ("func_type", "expected"),
        [
            (FunctionType.COTANGENT, 1.0 / math.tan(0.7)),
            (FunctionType.SECANT, 1.0 / math.cos(0.7)),
            (FunctionType.COSECANT, 1.0 / math.sin(0.7)),
        ],
    )
    def test_reciprocal_functions(self, func_type: FunctionType, expected: float) -> None:
        assert Function(func_type).calc_y(0.7) == pytest.approx(expected)

    def test_array_input(self) -> None:
        cos = Function(FunctionType.COSINE)
        result = cos.calc_y(np.array([0.0, math.pi / 2, math.pi]))
        np.testing.assert_allclose(result, [1.0, 0.0, -1.0], atol=1e-12)

    def test_scalar_returns_float(self) -> None:
        assert isinstance(Function(FunctionType.SINE).calc_y(0.3), float)


class TestChaining:
    def test_methods_return_self(self) -> None:
        f = Function(FunctionType.SINE)
        assert f.amplify(2.0) is f
        assert f.add(Transformation(TransformationKind.VERTICAL_SHIFT, 1.0)) is f
        assert len(f.mods) == 2

    def test_amplify_compounds(self) -> None:
        f = Function(FunctionType.SINE).amplify(2.0).amplify(3.0)
        assert f.calc_y(math.pi / 2) == pytest.approx(6.0)

    def test_zero_period_rejected(self) -> None:
        with pytest.raises(DivisionByZeroError, match="period"):
            Function(FunctionType.SINE).period(0.0)


class TestCalcX:
    def test_round_trip_sine(self) -> None:
        sin = Function(FunctionType.SINE).amplify(2.0).period(4.0).phase_shift(0.5)
        sin.vertical_shift(1.0)
        assert sin.calc_x(sin.calc_y(0.9)) == pytest.approx(0.9)

    @pytest.mark.parametrize(
        ("func_type", "x"),
        [
            (FunctionType.COSINE, 2.0),
            (FunctionType.TANGENT, -1.2),
            (FunctionType.COTANGENT, 2.5),
            (FunctionType.SECANT, 0.4),
            (FunctionType.COSECANT, 1.1),
        ],
    )
    def test_round_trip_principal_branch(self, func_type: FunctionType, x: float) -> None:
        f = Function(func_type)
        assert f.calc_x(f.calc_y(x)) == pytest.approx(x)

    def test_cotangent_zero(self) -> None:
        assert Function(FunctionType.COTANGENT).calc_x(0.0) == pytest.approx(math.pi / 2)

    def test_sine_out_of_range(self) -> None:
        with pytest.raises(InvalidArgumentError, match="outside the range"):
            Function(FunctionType.SINE).calc_x(2.0)

    def test_secant_out_of_range(self) -> None:
        with pytest.raises(InvalidArgumentError, match="outside the range"):
            Function(FunctionType.SECANT).calc_x(0.5)

    def test_zero_amplitude(self) -> None:
        with pytest.raises(InvalidArgumentError, match="zero amplitude"):
            Function(FunctionType.SINE).amplify(0.0).calc_x(0.0)
