from __future__ import annotations

from typing import Any

import numpy as np

from linquad.constraints import LinearConstraint, QuadraticConstraint
from linquad.expressions import AffineExpr, QuadraticExpr, is_structurally_equal
from linquad.variables import Variable


def assert_varequal(a: Variable, b: Variable) -> None:
    """Assert that two variables are equal."""
    assert isinstance(a, Variable), f"{a!r} is not a Variable"
    assert isinstance(b, Variable), f"{b!r} is not a Variable"
    assert a == b, f"{a!r} != {b!r}"


def assert_linequal(a: AffineExpr, b: AffineExpr) -> None:
    """Assert that two affine expressions are structurally equal."""
    assert isinstance(a, AffineExpr)
    assert isinstance(b, AffineExpr)
    assert a.equals(b), f"{a!r} != {b!r}"


def assert_quadequal(a: QuadraticExpr, b: QuadraticExpr) -> None:
    """Assert that two quadratic expressions are structurally equal."""
    assert isinstance(a, QuadraticExpr)
    assert isinstance(b, QuadraticExpr)
    assert a.equals(b), f"{a!r} != {b!r}"


def assert_conequal(
    a: LinearConstraint | QuadraticConstraint,
    b: LinearConstraint | QuadraticConstraint,
) -> None:
    """
    Assert that two constraints are equal.

    Parameters
    ----------
        a: LinearConstraint or QuadraticConstraint
            The first constraint.
        b: LinearConstraint or QuadraticConstraint
            The second constraint.
    """
    assert type(a) is type(b), f"{type(a)} != {type(b)}"
    assert a.equals(b), f"{a!r} != {b!r}"


def assert_arrayequal(a: Any, b: Any) -> None:
    """Assert that two arrays of variables or expressions are equal."""
    a, b = np.asarray(a, dtype=object), np.asarray(b, dtype=object)
    assert a.shape == b.shape, f"{a.shape} != {b.shape}"
    for x, y in zip(a.flat, b.flat):
        assert is_structurally_equal(x, y), f"{x!r} != {y!r}"
