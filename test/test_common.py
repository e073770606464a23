#!/usr/bin/env python3

import pytest

from linquad import DimensionMismatch, UnsupportedOperation
from linquad.common import (
    flip_sign,
    format_number,
    maybe_replace_sign,
    print_coord,
    print_single_expression,
)
from linquad.constants import EQUAL, GREATER_EQUAL, LESS_EQUAL


def test_maybe_replace_sign() -> None:
    assert maybe_replace_sign("==") == EQUAL
    assert maybe_replace_sign("<") == LESS_EQUAL
    assert maybe_replace_sign(">") == GREATER_EQUAL
    assert maybe_replace_sign("<=") == LESS_EQUAL

    with pytest.raises(ValueError):
        maybe_replace_sign("!=")


def test_flip_sign() -> None:
    assert flip_sign("<=") == GREATER_EQUAL
    assert flip_sign(">") == LESS_EQUAL
    assert flip_sign("=") == EQUAL


def test_print_coord() -> None:
    assert print_coord([1, 2, 3]) == "[1, 2, 3]"
    assert print_coord([(1, 2), (3, 4)]) == "[(1, 2), (3, 4)]"
    assert print_coord([]) == ""


def test_format_number() -> None:
    assert format_number(1) == "+1"
    assert format_number(-2.5) == "-2.5"
    assert format_number(1 / 3) == "+0.3333"


def test_print_single_expression() -> None:
    assert print_single_expression([1, -2], ["x", "y"], 0) == "+1 x - 2 y"
    assert print_single_expression([1], ["x"], 3) == "+1 x + 3"
    assert print_single_expression([], [], 0) == "+0"
    assert print_single_expression([], [], -1) == "-1"


def test_unsupported_operation() -> None:
    err = UnsupportedOperation("*", "quadratic", "variable")
    assert isinstance(err, TypeError)
    assert err.op == "*"
    assert err.lhs_kind == "quadratic"
    assert err.rhs_kind == "variable"
    assert "quadratic and variable" in str(err)
    assert "nonlinear" in str(err)

    err = UnsupportedOperation("**", "quadratic")
    assert err.rhs_kind is None
    assert "a quadratic" in str(err)


def test_dimension_mismatch() -> None:
    err = DimensionMismatch("@", (2, 3), (2,))
    assert isinstance(err, ValueError)
    assert err.lhs_shape == (2, 3)
    assert err.rhs_shape == (2,)
    assert "(2, 3) @ (2,)" in str(err)
