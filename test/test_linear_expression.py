#!/usr/bin/env python3
"""
This module aims at testing the AffineExpr and its arithmetic.
"""

from decimal import Decimal

import numpy as np
import pandas as pd
import pytest

from linquad import (
    AffineExpr,
    Model,
    QuadraticExpr,
    Variable,
    as_expression,
    evaluate,
    is_structurally_equal,
    quicksum,
)
from linquad.common import UnsupportedOperation
from linquad.testing import assert_linequal


def test_affine_expression_construction(x: Variable, y: Variable) -> None:
    expr = AffineExpr([x, y], [1, 2], 3)
    assert expr.vars == [x, y]
    assert expr.coeffs == [1, 2]
    assert expr.constant == 3
    assert expr.nterm == 2
    assert list(expr.iter_terms()) == [(x, 1), (y, 2)]

    with pytest.raises(ValueError, match="differ"):
        AffineExpr([x, y], [1])


def test_empty_affine_expression() -> None:
    expr = AffineExpr()
    assert expr.nterm == 0
    assert expr.constant == 0
    assert expr.evaluate({}) == 0


def test_affine_expression_converts_numeric_coefficients(x: Variable) -> None:
    expr = AffineExpr([x], [np.int32(4)], np.int64(1))
    assert type(expr.coeffs[0]) is float
    assert type(expr.constant) is float
    assert (expr * 2).coeffs == [8]

    big = np.int64(2**40)
    res = (big * x) * big
    assert type(res.coeffs[0]) is float
    assert res.coeffs == [2.0**80]

    expr = AffineExpr()
    expr.append_term(np.int64(3), x)
    expr.append_expression(x, np.int16(2))
    expr.append_expression(np.int64(5), np.int64(2))
    assert [type(c) for c in expr.coeffs] == [float, float]
    assert expr.constant == 10


def test_affine_expression_with_generic_coefficients(x: Variable) -> None:
    expr = AffineExpr([x], [Decimal("1.5")], Decimal("1"))
    assert isinstance(expr.coeffs[0], Decimal)

    res = expr * Decimal("2")
    assert res.coeffs == [Decimal("3.0")]
    assert isinstance(res.coeffs[0], Decimal)
    assert res.constant == Decimal("2")


def test_affine_expression_addition(x: Variable, y: Variable, z: Variable) -> None:
    a = 2 * x + 1
    b = 3 * y + 2

    res = a + b
    assert res.vars == [x, y]
    assert res.coeffs == [2, 3]
    assert res.constant == 3
    # operands are not modified
    assert a.nterm == 1
    assert b.nterm == 1

    res = a + z
    assert res.vars == [x, z]

    # the terms of the expression come first in either order
    res = z + a
    assert res.vars == [x, z]
    assert res.constant == 1

    res = 5 + a
    assert res.constant == 6
    res = a + 5
    assert res.constant == 6


def test_affine_expression_subtraction(x: Variable, y: Variable) -> None:
    a = 2 * x + 1
    b = 3 * y + 2

    res = a - b
    assert res.vars == [x, y]
    assert res.coeffs == [2, -3]
    assert res.constant == -1

    res = y - a
    assert res.vars == [x, y]
    assert res.coeffs == [-2, 1]
    assert res.constant == -1

    res = 5 - a
    assert res.coeffs == [-2]
    assert res.constant == 4

    res = a - y
    assert res.coeffs == [2, -1]


def test_affine_expression_scaling(x: Variable, y: Variable) -> None:
    a = 2 * x + 4 * y + 1

    res = 3 * a
    assert res.coeffs == [6, 12]
    assert res.constant == 3

    res = a * 3
    assert res.coeffs == [6, 12]

    res = a / 2
    assert res.coeffs == [1, 2]
    assert res.constant == 0.5

    res = -a
    assert res.coeffs == [-2, -4]
    assert res.constant == -1
    assert +a is a


def test_affine_expression_division_by_symbolic(x: Variable, y: Variable) -> None:
    with pytest.raises(UnsupportedOperation) as excinfo:
        (x + 1) / y
    assert excinfo.value.op == "/"
    assert excinfo.value.lhs_kind == "affine"
    assert excinfo.value.rhs_kind == "variable"

    with pytest.raises(UnsupportedOperation):
        (x + 1) / (y + 1)


def test_duplicates_are_kept(x: Variable) -> None:
    expr = x + x
    assert expr.vars == [x, x]
    assert expr.coeffs == [1, 1]
    assert expr.evaluate({x: 2}) == 4


def test_append_term(x: Variable, y: Variable) -> None:
    expr = AffineExpr()
    expr.append_term(2, x)
    expr.append_term(3, y)
    assert expr.vars == [x, y]
    assert expr.coeffs == [2, 3]


def test_append_expression(x: Variable, y: Variable) -> None:
    expr = AffineExpr([x], [1])
    other = 2 * y + 3

    expr.append_expression(other)
    assert expr.vars == [x, y]
    assert expr.coeffs == [1, 2]
    assert expr.constant == 3

    expr.append_expression(other, -2)
    assert expr.vars == [x, y, y]
    assert expr.coeffs == [1, 2, -4]
    assert expr.constant == -3

    expr.append_expression(4)
    assert expr.constant == 1

    expr.append_expression(x, 5)
    assert expr.coeffs[-1] == 5

    # the appended expression is not modified
    assert other.vars == [y]
    assert other.constant == 3


def test_append_expression_to_itself(x: Variable) -> None:
    expr = 2 * x + 1
    expr.append_expression(expr)
    assert expr.vars == [x, x]
    assert expr.coeffs == [2, 2]
    assert expr.constant == 2


def test_append_quadratic_expression_fails(x: Variable) -> None:
    expr = AffineExpr()
    with pytest.raises(UnsupportedOperation):
        expr.append_expression(x * x)

    with pytest.raises(TypeError):
        expr.append_expression("x")


def test_inplace_operators(x: Variable, y: Variable) -> None:
    expr = AffineExpr()
    ref = expr
    expr += x
    expr += 2 * y
    expr -= 3
    assert expr is ref
    assert expr.vars == [x, y]
    assert expr.coeffs == [1, 2]
    assert expr.constant == -3

    expr -= y
    assert expr.coeffs == [1, 2, -1]

    # promotion creates a new object
    expr += x * y
    assert isinstance(expr, QuadraticExpr)
    assert ref.nterm == 3


def test_copy_is_independent(x: Variable) -> None:
    expr = x + 1
    copy = expr.copy()
    copy.append_term(2, x)
    copy.constant = 5
    assert expr.nterm == 1
    assert expr.constant == 1


def test_reset_const(x: Variable) -> None:
    expr = 2 * x + 3
    assert expr.reset_const().constant == 0
    assert expr.constant == 3


def test_as_expression(x: Variable) -> None:
    assert_linequal(as_expression(x), AffineExpr([x], [1]))
    assert_linequal(as_expression(3), AffineExpr(constant=3))
    expr = x + 1
    assert as_expression(expr) is expr

    with pytest.raises(ValueError):
        as_expression("x")


def test_quicksum(x: Variable, y: Variable) -> None:
    res = quicksum([x, 2 * y, 3, x + 1])
    assert isinstance(res, AffineExpr)
    assert res.vars == [x, y, x]
    assert res.coeffs == [1, 2, 1]
    assert res.constant == 4

    assert quicksum([]).nterm == 0

    res = quicksum(np.array([x, y], dtype=object))
    assert res.vars == [x, y]


def test_quicksum_promotes_to_quadratic(x: Variable, y: Variable) -> None:
    res = quicksum([x, x * y, y])
    assert isinstance(res, QuadraticExpr)
    assert res.qvars1 == [x]
    assert res.aff.vars == [x, y]


def test_quicksum_is_linear(m: Model, monkeypatch: pytest.MonkeyPatch) -> None:
    n = 2000
    xs = m.add_variables(shape=n, name="x")
    exprs = [2 * v for v in xs]

    calls = 0
    original = AffineExpr.append_expression

    def counting(self, other, coeff=1.0):  # type: ignore
        nonlocal calls
        calls += 1
        return original(self, other, coeff)

    monkeypatch.setattr(AffineExpr, "append_expression", counting)
    res = quicksum(exprs)
    monkeypatch.undo()

    assert calls == n
    assert res.nterm == n


def test_evaluate(x: Variable, y: Variable) -> None:
    expr = 2 * x + 3 * y + 1
    assert expr.evaluate({x: 1, y: 2}) == 9
    assert evaluate(expr, {x: 1, y: 2}) == 9

    # solution vectors are indexed by the column index
    assert expr.evaluate([1, 2]) == 9
    assert expr.evaluate(np.array([1.0, 2.0])) == 9
    assert expr.evaluate(pd.Series([1.0, 2.0])) == 9

    assert evaluate(3, {}) == 3
    assert evaluate(x, {x: 4}) == 4

    with pytest.raises(TypeError):
        evaluate("x", {})


def test_evaluate_array(x: Variable, y: Variable) -> None:
    arr = np.array([x + 1, 2 * y], dtype=object)
    res = evaluate(arr, {x: 1, y: 2})
    np.testing.assert_array_equal(res, [2, 4])


def test_structural_equality(x: Variable, y: Variable) -> None:
    assert is_structurally_equal(x + y, x + y)
    assert not is_structurally_equal(x + y, y + x)
    assert not is_structurally_equal(x + y, x + y + 1)
    assert not is_structurally_equal(x + y, (x + y).to_quadexpr())
    assert is_structurally_equal(x, x)
    assert not is_structurally_equal(x, y)
    assert is_structurally_equal(1, 1.0)
    assert (x + y).equals(x + y)
    assert not (x + y).equals(x)


def test_expression_is_not_hashable(x: Variable) -> None:
    with pytest.raises(TypeError):
        hash(x + 1)


def test_flat(x: Variable, y: Variable) -> None:
    expr = 2 * x + 3 * y - 2 * x + 4 * y + x
    df = expr.flat
    assert list(df.vars) == [x.index, y.index]
    assert list(df.coeffs) == [1, 7]

    expr = x - x
    assert expr.flat.empty
