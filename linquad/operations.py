#!/usr/bin/env python3
"""
Linquad operations module.

This module contains the dispatch table of the arithmetic between
constants, variables, affine and quadratic expressions, and the mixin which
maps python's operators onto it. The implementations of the single
operations are registered by :mod:`linquad.expressions`.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from numbers import Integral, Number
from types import NotImplementedType
from typing import Any

import numpy as np
from scipy import sparse

from linquad.common import UnsupportedOperation, warn_deprecated_comparison
from linquad.constants import (
    AFFINE,
    ARRAY,
    CONSTANT,
    EQUAL,
    EXPONENT_HINT,
    GREATER_EQUAL,
    LESS_EQUAL,
    QUADRATIC,
    VARIABLE,
)

BinaryOperation = Callable[[Any, Any], Any]
UnaryOperation = Callable[[Any], Any]

_binary_operations: dict[tuple[str, str, str], BinaryOperation] = {}
_unary_operations: dict[tuple[str, str], UnaryOperation] = {}


def kind_of(obj: Any) -> str | None:
    """
    Get the operand kind of an object, None if it does not take part in the
    arithmetic.
    """
    kind = getattr(type(obj), "_kind", None)
    if kind is not None:
        return kind
    if isinstance(obj, Number):
        return CONSTANT
    if isinstance(obj, np.ndarray) or sparse.issparse(obj):
        return ARRAY
    return None


def register(
    op: str, lhs_kind: str, rhs_kind: str
) -> Callable[[BinaryOperation], BinaryOperation]:
    """
    Register the implementation of a binary operation for a pair of kinds.
    """

    def deco(func: BinaryOperation) -> BinaryOperation:
        _binary_operations[(op, lhs_kind, rhs_kind)] = func
        return func

    return deco


def register_unary(op: str, kind: str) -> Callable[[UnaryOperation], UnaryOperation]:
    def deco(func: UnaryOperation) -> UnaryOperation:
        _unary_operations[(op, kind)] = func
        return func

    return deco


def apply(op: str, lhs: Any, rhs: Any) -> Any:
    """
    Apply a binary operation to two scalar operands.

    Raises
    ------
    UnsupportedOperation
        If the result is not representable, e.g. the degree would exceed 2.
    """
    lhs_kind, rhs_kind = kind_of(lhs), kind_of(rhs)
    func = _binary_operations.get((op, lhs_kind, rhs_kind))
    if func is None:
        if op == "/" and rhs_kind not in (CONSTANT, None):
            raise UnsupportedOperation(
                op, lhs_kind, rhs_kind, f"Cannot divide by a {rhs_kind}."
            )
        raise UnsupportedOperation(op, lhs_kind, rhs_kind)
    return func(lhs, rhs)


def apply_unary(op: str, operand: Any) -> Any:
    kind = kind_of(operand)
    func = _unary_operations.get((op, kind))
    if func is None:
        raise UnsupportedOperation(op, kind)
    return func(operand)


# native arithmetic between two constants
for _op, _func in {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}.items():
    register(_op, CONSTANT, CONSTANT)(_func)


class ArithmeticMixin:
    """
    Operator overloads shared by variables and expressions.

    Foreign operands make the operators return NotImplemented, arrays are
    broadcast elementwise and all other combinations are looked up in the
    dispatch table.
    """

    __slots__ = ()
    __array_ufunc__ = None
    __array_priority__ = 10000

    _kind: str

    def _binary(self, op: str, other: Any, reflected: bool = False) -> Any:
        kind = kind_of(other)
        if kind is None:
            return NotImplemented
        lhs, rhs = (other, self) if reflected else (self, other)
        if kind == ARRAY:
            from linquad import matrices

            return matrices.elementwise(op, lhs, rhs)
        return apply(op, lhs, rhs)

    def __add__(self, other: Any) -> Any:
        return self._binary("+", other)

    def __radd__(self, other: Any) -> Any:
        return self._binary("+", other, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary("-", other)

    def __rsub__(self, other: Any) -> Any:
        return self._binary("-", other, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary("*", other)

    def __rmul__(self, other: Any) -> Any:
        return self._binary("*", other, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary("/", other)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary("/", other, reflected=True)

    def __neg__(self) -> Any:
        return apply_unary("-", self)

    def __pos__(self) -> Any:
        return apply_unary("+", self)

    def __pow__(self, other: Any) -> Any:
        if self._kind in (VARIABLE, AFFINE):
            if isinstance(other, Integral) and other == 2:
                return apply("*", self, self)
            raise UnsupportedOperation("**", self._kind, kind_of(other), EXPONENT_HINT)
        raise UnsupportedOperation("**", self._kind, kind_of(other))

    def __rpow__(self, other: Any) -> Any:
        raise UnsupportedOperation("**", kind_of(other), self._kind)

    def pow(self, other: int) -> Any:
        """
        Power of the expression with an exponent, only 2 is supported.
        """
        return self.__pow__(other)

    def __abs__(self) -> Any:
        raise UnsupportedOperation("abs", self._kind)

    # math.exp, math.sqrt etc. convert their argument with float()
    def __float__(self) -> float:
        raise UnsupportedOperation("float", self._kind)

    def __int__(self) -> int:
        raise UnsupportedOperation("int", self._kind)

    def _compare(self, sign: str, other: Any) -> Any:
        kind = kind_of(other)
        if kind is None:
            return NotImplemented
        warn_deprecated_comparison(sign)
        if kind == ARRAY:
            from linquad import matrices

            return matrices.compare_elementwise(self, sign, other)
        from linquad import constraints

        return constraints.compare(self, sign, other)

    def __le__(self, other: Any) -> Any:
        return self._compare(LESS_EQUAL, other)

    def __ge__(self, other: Any) -> Any:
        return self._compare(GREATER_EQUAL, other)

    def __eq__(self, other: Any) -> Any:  # type: ignore
        return self._compare(EQUAL, other)

    def __ne__(self, other: Any) -> NotImplementedType:  # type: ignore
        if kind_of(other) is None:
            return NotImplemented
        raise NotImplementedError("Constraints with != are not supported.")

    def __gt__(self, other: Any) -> NotImplementedType:
        raise NotImplementedError(
            "Inequalities only ever defined for >= rather than >."
        )

    def __lt__(self, other: Any) -> NotImplementedType:
        raise NotImplementedError(
            "Inequalities only ever defined for >= rather than >."
        )

    __hash__ = None  # type: ignore
