#!/usr/bin/env python3

from typing import Any

import numpy as np
import pytest

from linquad import AffineExpr, QuadraticExpr, Variable, evaluate
from linquad.testing import assert_linequal, assert_quadequal


class SomeOtherDatatype:
    """
    A class that wraps a number and delegates its arithmetic to it.
    """

    def __init__(self, value: float) -> None:
        self.value = value

    def __add__(self, other: Any) -> Any:
        return self.value + other

    def __radd__(self, other: Any) -> Any:
        return other + self.value

    def __mul__(self, other: Any) -> Any:
        return self.value * other

    def __rmul__(self, other: Any) -> Any:
        return other * self.value


@pytest.fixture
def data() -> SomeOtherDatatype:
    return SomeOtherDatatype(2.0)


def test_arithmetic_with_foreign_datatype(x: Variable, data: SomeOtherDatatype) -> None:
    assert_linequal(data * x, 2.0 * x)
    assert_linequal(x * data, 2.0 * x)
    assert_linequal(data + x, 2.0 + x)
    assert_linequal(x + data, x + 2.0)
    assert_linequal(data * (x + 1), 2.0 * (x + 1))


@pytest.mark.parametrize(
    "scalar", [2, 2.0, np.int32(2), np.int64(2), np.float32(2), np.float64(2)]
)
def test_arithmetic_with_numeric_types(x: Variable, y: Variable, scalar: Any) -> None:
    assert isinstance(scalar * x, AffineExpr)
    assert isinstance(x * scalar, AffineExpr)
    assert isinstance(x + scalar, AffineExpr)
    assert isinstance(scalar - x, AffineExpr)
    assert isinstance((x + y) / scalar, AffineExpr)
    assert isinstance(scalar * (x * y), QuadraticExpr)
    assert evaluate(scalar * x + scalar, {x: 3}) == 8


def test_variable_combinations(x: Variable, y: Variable, z: Variable) -> None:
    lhs = (x + y) * (2 * z + 1)
    assert_quadequal(lhs, (x + y) * (2 * z + 1))
    assert lhs.evaluate({x: 1, y: 2, z: 3}) == 3 * 7

    expr = 3 * x - (y - 2 * z) + x * y - y * z / 2
    assert expr.evaluate({x: 1, y: 2, z: 3}) == 3 - (2 - 6) + 2 - 3
