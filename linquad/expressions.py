#!/usr/bin/env python3
"""
Linquad expressions module.

This module contains definition related to affine and quadratic expressions
and registers the arithmetic between constants, variables and expressions.

Expressions are not canonicalized: adding two expressions concatenates their
terms, so a variable may occur in several terms. Evaluating or exporting an
expression sums up such duplicates, nothing else may assume unique
variables.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Generic, TypeVar

import numpy as np
import pandas as pd

from linquad.common import UnsupportedOperation, print_single_expression
from linquad.constants import (
    AFFINE,
    ARRAY,
    CONSTANT,
    NO_VARIABLE,
    QUADRATIC,
    VARIABLE,
)
from linquad.operations import (
    ArithmeticMixin,
    apply,
    kind_of,
    register,
    register_unary,
)
from linquad.terms import QuadTermList, TermList, as_coefficient
from linquad.types import SolutionLike

CoeffT = TypeVar("CoeffT")
VarT = TypeVar("VarT")


def _var_name(var: Any) -> str:
    return getattr(var, "name", None) or str(var)


def solution_values(solution: SolutionLike, vars: Sequence[Any]) -> np.ndarray:
    """
    Look up the solution values of a sequence of variables.

    Parameters
    ----------
    solution : Mapping, pandas.Series or array_like
        Either a mapping from variables to values, a series indexed by the
        column index of the variables or a vector which is indexed by the
        column index.
    vars : Sequence
        Variables to look up.

    Returns
    -------
    numpy.ndarray
    """
    if not len(vars):
        return np.zeros(0)
    if isinstance(solution, Mapping):
        return np.fromiter((solution[v] for v in vars), dtype=float, count=len(vars))
    indices = [v.index for v in vars]
    if isinstance(solution, pd.Series):
        return solution.loc[indices].to_numpy(dtype=float)
    return np.asarray(solution, dtype=float)[indices]


class AffineExpr(ArithmeticMixin, Generic[CoeffT, VarT]):
    """
    An affine expression, i.e. a linear combination of variables plus a
    constant.

    The terms are stored in parallel lists of variables and coefficients.
    Coefficients default to floats and variables to
    :class:`linquad.variables.Variable`, other types may be used as long as
    they support the arithmetic applied to them.

    Use `append_term` and `append_expression` (or `+=`) to grow an
    expression in place, this is amortized O(1) per term whereas `+` always
    copies both operands.

    Parameters
    ----------
    vars : Iterable
        Variables of the terms.
    coeffs : Iterable
        Coefficients of the terms, must have the same length as `vars`.
    constant : float
        Constant of the expression.
    """

    __slots__ = ("_terms", "_constant")

    _kind = AFFINE

    def __init__(
        self,
        vars: Iterable[VarT] = (),
        coeffs: Iterable[CoeffT] = (),
        constant: Any = 0.0,
    ) -> None:
        self._terms = TermList(vars, coeffs)
        self._constant = as_coefficient(constant)

    @classmethod
    def _from_terms(cls, terms: TermList, constant: Any) -> AffineExpr:
        # takes ownership of `terms`
        expr = cls.__new__(cls)
        expr._terms = terms
        expr._constant = as_coefficient(constant)
        return expr

    def __repr__(self) -> str:
        return f"AffineExpr: {self._print()}"

    def _print(self) -> str:
        names = [_var_name(v) for v in self.vars]
        return print_single_expression(self.coeffs, names, self.constant)

    @property
    def terms(self) -> TermList:
        return self._terms

    @property
    def vars(self) -> list[VarT]:
        return self._terms.vars

    @property
    def coeffs(self) -> list[CoeffT]:
        return self._terms.coeffs

    @property
    def constant(self) -> Any:
        return self._constant

    @constant.setter
    def constant(self, value: Any) -> None:
        self._constant = as_coefficient(value)

    @property
    def nterm(self) -> int:
        """
        Get the number of terms, duplicates included.
        """
        return len(self._terms)

    def iter_terms(self) -> Iterator[tuple[VarT, CoeffT]]:
        return iter(self._terms)

    def copy(self) -> AffineExpr:
        return self._from_terms(self._terms.copy(), self._constant)

    def reset_const(self) -> AffineExpr:
        """
        Get a copy of the expression without the constant.
        """
        return self._from_terms(self._terms.copy(), 0.0)

    def to_quadexpr(self) -> QuadraticExpr:
        """Convert AffineExpr to QuadraticExpr."""
        return QuadraticExpr._from_parts(QuadTermList(), self.copy())

    def append_term(self, coeff: CoeffT, var: VarT) -> None:
        """
        Append a single term `coeff * var` in place.
        """
        self._terms.append(var, coeff)

    def append_expression(self, other: Any, coeff: Any = 1.0) -> None:
        """
        Append `coeff * other` in place.

        Parameters
        ----------
        other : constant, Variable or AffineExpr
            Object to append. Quadratic expressions have to be appended to
            a QuadraticExpr.
        coeff : float, optional
            Factor applied to `other`. The default is 1.
        """
        coeff = as_coefficient(coeff)
        kind = kind_of(other)
        if kind == CONSTANT:
            self._constant += other if coeff == 1 else coeff * other
        elif kind == VARIABLE:
            self._terms.append(other, coeff)
        elif kind == AFFINE:
            constant = other._constant
            self._terms.extend(other._terms, coeff)
            self._constant += constant if coeff == 1 else coeff * constant
        elif kind == QUADRATIC:
            raise UnsupportedOperation(
                "+=", AFFINE, QUADRATIC, "Convert to a QuadraticExpr first."
            )
        else:
            raise TypeError(f"Cannot append object of type {type(other)}.")

    def __iadd__(self, other: Any) -> Any:
        if kind_of(other) in (CONSTANT, VARIABLE, AFFINE):
            self.append_expression(other)
            return self
        return self.__add__(other)

    def __isub__(self, other: Any) -> Any:
        if kind_of(other) in (CONSTANT, VARIABLE, AFFINE):
            self.append_expression(other, -1.0)
            return self
        return self.__sub__(other)

    def equals(self, other: Any) -> bool:
        """
        Check whether two expressions are structurally equal.

        Constants and terms are compared position by position, therefore
        expressions which only differ in the order of their terms are not
        equal.
        """
        if not isinstance(other, AffineExpr):
            return False
        return self._constant == other._constant and self._terms.equals(
            other._terms
        )

    def evaluate(self, solution: SolutionLike) -> float:
        """
        Evaluate the expression for given solution values.

        See :func:`solution_values` for the supported solution types.
        """
        values = solution_values(solution, self.vars)
        return float(self._terms.coeff_array() @ values) + self._constant

    @property
    def flat(self) -> pd.DataFrame:
        """
        Convert the expression to a pandas DataFrame.

        The resulting DataFrame contains the columns `vars` (column index of
        the variables) and `coeffs`. Repeated variables are summed up and
        terms with zero coefficients are dropped.

        Returns
        -------
        df : pandas.DataFrame
        """
        df = pd.DataFrame(
            {
                "coeffs": self._terms.coeff_array(),
                "vars": np.array([v.index for v in self.vars], dtype=int),
            }
        )
        df = df.groupby("vars", as_index=False).sum()
        return df[df.coeffs != 0].reset_index(drop=True)


class QuadraticExpr(ArithmeticMixin, Generic[CoeffT, VarT]):
    """
    A quadratic expression, i.e. a sum of products of two variables plus an
    affine expression.

    The affine part is owned by the quadratic expression and copied on
    construction.

    Parameters
    ----------
    qvars1, qvars2 : Iterable
        First and second variables of the quadratic terms.
    qcoeffs : Iterable
        Coefficients of the quadratic terms.
    aff : AffineExpr, optional
        Affine part of the expression.
    """

    __slots__ = ("_qterms", "_aff")

    _kind = QUADRATIC

    def __init__(
        self,
        qvars1: Iterable[VarT] = (),
        qvars2: Iterable[VarT] = (),
        qcoeffs: Iterable[CoeffT] = (),
        aff: AffineExpr | Any = None,
    ) -> None:
        self._qterms = QuadTermList(qvars1, qvars2, qcoeffs)
        self._aff = AffineExpr() if aff is None else as_expression(aff).copy()
        if not isinstance(self._aff, AffineExpr):
            raise TypeError("The affine part must not be quadratic.")

    @classmethod
    def _from_parts(cls, qterms: QuadTermList, aff: AffineExpr) -> QuadraticExpr:
        # takes ownership of `qterms` and `aff`
        expr = cls.__new__(cls)
        expr._qterms = qterms
        expr._aff = aff
        return expr

    def __repr__(self) -> str:
        return f"QuadraticExpr: {self._print()}"

    def _print(self) -> str:
        names = [f"{_var_name(v1)} {_var_name(v2)}" for v1, v2, _ in self._qterms]
        names += [_var_name(v) for v in self._aff.vars]
        coeffs = self.qcoeffs + self._aff.coeffs
        return print_single_expression(coeffs, names, self.constant)

    @property
    def qterms(self) -> QuadTermList:
        return self._qterms

    @property
    def qvars1(self) -> list[VarT]:
        return self._qterms.vars1

    @property
    def qvars2(self) -> list[VarT]:
        return self._qterms.vars2

    @property
    def qcoeffs(self) -> list[CoeffT]:
        return self._qterms.coeffs

    @property
    def aff(self) -> AffineExpr:
        return self._aff

    @property
    def constant(self) -> Any:
        return self._aff.constant

    @constant.setter
    def constant(self, value: Any) -> None:
        self._aff.constant = value

    @property
    def nterm(self) -> int:
        """
        Get the number of quadratic terms, duplicates included.
        """
        return len(self._qterms)

    def iter_terms(self) -> Iterator[tuple[VarT, VarT, CoeffT]]:
        return iter(self._qterms)

    def copy(self) -> QuadraticExpr:
        return self._from_parts(self._qterms.copy(), self._aff.copy())

    def reset_const(self) -> QuadraticExpr:
        return self._from_parts(self._qterms.copy(), self._aff.reset_const())

    def append_term(self, coeff: CoeffT, var1: VarT, var2: VarT) -> None:
        """
        Append a single quadratic term `coeff * var1 * var2` in place.
        """
        self._qterms.append(var1, var2, coeff)

    def append_expression(self, other: Any, coeff: Any = 1.0) -> None:
        """
        Append `coeff * other` in place.

        Constants, variables and affine expressions go to the affine part,
        the terms of a quadratic expression are appended to both parts.
        """
        kind = kind_of(other)
        if kind == QUADRATIC:
            aff = other._aff
            self._qterms.extend(other._qterms, coeff)
            self._aff.append_expression(aff, coeff)
        elif kind in (CONSTANT, VARIABLE, AFFINE):
            self._aff.append_expression(other, coeff)
        else:
            raise TypeError(f"Cannot append object of type {type(other)}.")

    def __iadd__(self, other: Any) -> Any:
        if kind_of(other) in (CONSTANT, VARIABLE, AFFINE, QUADRATIC):
            self.append_expression(other)
            return self
        return self.__add__(other)

    def __isub__(self, other: Any) -> Any:
        if kind_of(other) in (CONSTANT, VARIABLE, AFFINE, QUADRATIC):
            self.append_expression(other, -1.0)
            return self
        return self.__sub__(other)

    def equals(self, other: Any) -> bool:
        """
        Check whether two expressions are structurally equal, see
        :meth:`AffineExpr.equals`.
        """
        if not isinstance(other, QuadraticExpr):
            return False
        return self._aff.equals(other._aff) and self._qterms.equals(other._qterms)

    def evaluate(self, solution: SolutionLike) -> float:
        values1 = solution_values(solution, self.qvars1)
        values2 = solution_values(solution, self.qvars2)
        quadratic = float(np.sum(self._qterms.coeff_array() * values1 * values2))
        return quadratic + self._aff.evaluate(solution)

    @property
    def flat(self) -> pd.DataFrame:
        """
        Return a flattened expression.

        The DataFrame contains the columns `vars1`, `vars2` and `coeffs`,
        linear terms are marked with `vars2 == -1`.
        """
        quadratic = pd.DataFrame(
            {
                "coeffs": self._qterms.coeff_array(),
                "vars1": np.array([v.index for v in self.qvars1], dtype=int),
                "vars2": np.array([v.index for v in self.qvars2], dtype=int),
            }
        )
        linear = self._aff.flat.rename(columns={"vars": "vars1"})
        linear["vars2"] = NO_VARIABLE
        df = pd.concat([quadratic, linear], ignore_index=True)
        # Group repeated variables in the same expression
        df = df.groupby(["vars1", "vars2"], as_index=False).sum()
        return df[df.coeffs != 0].reset_index(drop=True)


def as_expression(obj: Any) -> AffineExpr | QuadraticExpr:
    """
    Convert an object to an AffineExpr or QuadraticExpr.

    Expressions are returned as they are, variables and constants are
    converted to a new AffineExpr.

    Raises
    ------
    ValueError
        If object cannot be converted to an expression.
    """
    kind = kind_of(obj)
    if kind in (AFFINE, QUADRATIC):
        return obj
    elif kind == VARIABLE:
        return AffineExpr([obj], [1.0])
    elif kind == CONSTANT:
        return AffineExpr(constant=obj)
    raise ValueError(f"Cannot convert object of type {type(obj)} to an expression.")


def quicksum(
    exprs: Iterable[Any] | np.ndarray,
) -> AffineExpr | QuadraticExpr:
    """
    Sum up constants, variables and expressions.

    In contrast to python's builtin `sum`, all terms are appended to one
    accumulating expression which keeps the runtime linear in the total
    number of terms. The result is promoted to a QuadraticExpr as soon as a
    quadratic expression is encountered.

    Parameters
    ----------
    exprs : Iterable or numpy.ndarray
        Objects to sum up.

    Returns
    -------
    AffineExpr or QuadraticExpr
    """
    if isinstance(exprs, np.ndarray):
        exprs = exprs.flat
    res: AffineExpr | QuadraticExpr = AffineExpr()
    for expr in exprs:
        kind = kind_of(expr)
        if kind == QUADRATIC and isinstance(res, AffineExpr):
            res = QuadraticExpr._from_parts(QuadTermList(), res)
        res.append_expression(expr)
    return res


def evaluate(obj: Any, solution: SolutionLike) -> Any:
    """
    Evaluate a constant, variable, expression, constraint or an array of
    those for given solution values.

    Parameters
    ----------
    obj : Any
        Object to evaluate.
    solution : Mapping, pandas.Series or array_like
        Solution values, see :func:`solution_values`.

    Returns
    -------
    float or numpy.ndarray
    """
    kind = kind_of(obj)
    if kind == CONSTANT:
        return obj
    elif kind == VARIABLE:
        return float(solution_values(solution, [obj])[0])
    elif kind in (AFFINE, QUADRATIC):
        return obj.evaluate(solution)
    elif isinstance(obj, np.ndarray):
        values = [evaluate(e, solution) for e in obj.flat]
        return np.array(values, dtype=float).reshape(obj.shape)
    elif callable(getattr(obj, "evaluate", None)):
        return obj.evaluate(solution)
    raise TypeError(f"Cannot evaluate object of type {type(obj)}.")


def is_structurally_equal(a: Any, b: Any) -> bool:
    """
    Check whether two objects are structurally equal.

    Expressions are equal if their constants and term lists match position
    by position. This is no check of mathematical equivalence, `x + y` and
    `y + x` are not structurally equal.
    """
    kind = kind_of(a)
    if kind is None or kind != kind_of(b):
        return False
    if kind == CONSTANT:
        return bool(a == b)
    elif kind == VARIABLE:
        return a == b
    elif kind == ARRAY:
        if not isinstance(a, np.ndarray) or not isinstance(b, np.ndarray):
            return False
        if a.shape != b.shape:
            return False
        return all(is_structurally_equal(x, y) for x, y in zip(a.flat, b.flat))
    return a.equals(b)


# Arithmetic between constants, variables and expressions.
#
# Sums concatenate the terms of their operands. When a variable is added to an
# affine expression, the terms of the expression come first in either order.
# Products of a variable and an affine expression keep the variable as the
# first factor.


def _mul_variable_affine(var: Any, aff: AffineExpr) -> QuadraticExpr:
    n = aff.nterm
    qterms = QuadTermList([var] * n, aff.vars, aff.coeffs)
    res = QuadraticExpr._from_parts(qterms, AffineExpr())
    if aff.constant != 0:
        res.aff.append_term(aff.constant, var)
    return res


@register("+", CONSTANT, VARIABLE)
def _add_constant_variable(lhs: Any, rhs: Any) -> AffineExpr:
    return AffineExpr([rhs], [1.0], lhs)


@register("+", VARIABLE, CONSTANT)
def _add_variable_constant(lhs: Any, rhs: Any) -> AffineExpr:
    return AffineExpr([lhs], [1.0], rhs)


@register("+", VARIABLE, VARIABLE)
def _add_variable_variable(lhs: Any, rhs: Any) -> AffineExpr:
    return AffineExpr([lhs, rhs], [1.0, 1.0])


@register("+", CONSTANT, AFFINE)
def _add_constant_affine(lhs: Any, rhs: AffineExpr) -> AffineExpr:
    return AffineExpr._from_terms(rhs.terms.copy(), lhs + rhs.constant)


@register("+", AFFINE, CONSTANT)
@register("+", AFFINE, AFFINE)
def _add_affine(lhs: AffineExpr, rhs: Any) -> AffineExpr:
    res = lhs.copy()
    res.append_expression(rhs)
    return res


@register("+", VARIABLE, AFFINE)
def _add_variable_affine(lhs: Any, rhs: AffineExpr) -> AffineExpr:
    res = rhs.copy()
    res.append_term(1.0, lhs)
    return res


@register("+", AFFINE, VARIABLE)
def _add_affine_variable(lhs: AffineExpr, rhs: Any) -> AffineExpr:
    res = lhs.copy()
    res.append_term(1.0, rhs)
    return res


@register("+", CONSTANT, QUADRATIC)
@register("+", VARIABLE, QUADRATIC)
@register("+", AFFINE, QUADRATIC)
def _add_to_quadratic(lhs: Any, rhs: QuadraticExpr) -> QuadraticExpr:
    return QuadraticExpr._from_parts(rhs.qterms.copy(), apply("+", lhs, rhs.aff))


@register("+", QUADRATIC, CONSTANT)
@register("+", QUADRATIC, VARIABLE)
@register("+", QUADRATIC, AFFINE)
def _add_quadratic(lhs: QuadraticExpr, rhs: Any) -> QuadraticExpr:
    return QuadraticExpr._from_parts(lhs.qterms.copy(), apply("+", lhs.aff, rhs))


@register("+", QUADRATIC, QUADRATIC)
def _add_quadratic_quadratic(lhs: QuadraticExpr, rhs: QuadraticExpr) -> QuadraticExpr:
    res = lhs.copy()
    res.append_expression(rhs)
    return res


@register("-", CONSTANT, VARIABLE)
def _sub_constant_variable(lhs: Any, rhs: Any) -> AffineExpr:
    return AffineExpr([rhs], [-1.0], lhs)


@register("-", VARIABLE, CONSTANT)
def _sub_variable_constant(lhs: Any, rhs: Any) -> AffineExpr:
    return AffineExpr([lhs], [1.0], -rhs)


@register("-", VARIABLE, VARIABLE)
def _sub_variable_variable(lhs: Any, rhs: Any) -> AffineExpr:
    return AffineExpr([lhs, rhs], [1.0, -1.0])


@register("-", CONSTANT, AFFINE)
def _sub_constant_affine(lhs: Any, rhs: AffineExpr) -> AffineExpr:
    return AffineExpr._from_terms(rhs.terms.scaled(-1), lhs - rhs.constant)


@register("-", AFFINE, CONSTANT)
@register("-", AFFINE, AFFINE)
def _sub_affine(lhs: AffineExpr, rhs: Any) -> AffineExpr:
    res = lhs.copy()
    res.append_expression(rhs, -1.0)
    return res


@register("-", VARIABLE, AFFINE)
def _sub_variable_affine(lhs: Any, rhs: AffineExpr) -> AffineExpr:
    res = AffineExpr._from_terms(rhs.terms.scaled(-1), -rhs.constant)
    res.append_term(1.0, lhs)
    return res


@register("-", AFFINE, VARIABLE)
def _sub_affine_variable(lhs: AffineExpr, rhs: Any) -> AffineExpr:
    res = lhs.copy()
    res.append_term(-1.0, rhs)
    return res


@register("-", CONSTANT, QUADRATIC)
@register("-", VARIABLE, QUADRATIC)
@register("-", AFFINE, QUADRATIC)
def _sub_from_quadratic(lhs: Any, rhs: QuadraticExpr) -> QuadraticExpr:
    return QuadraticExpr._from_parts(rhs.qterms.scaled(-1), apply("-", lhs, rhs.aff))


@register("-", QUADRATIC, CONSTANT)
@register("-", QUADRATIC, VARIABLE)
@register("-", QUADRATIC, AFFINE)
def _sub_quadratic(lhs: QuadraticExpr, rhs: Any) -> QuadraticExpr:
    return QuadraticExpr._from_parts(lhs.qterms.copy(), apply("-", lhs.aff, rhs))


@register("-", QUADRATIC, QUADRATIC)
def _sub_quadratic_quadratic(lhs: QuadraticExpr, rhs: QuadraticExpr) -> QuadraticExpr:
    res = lhs.copy()
    res.append_expression(rhs, -1.0)
    return res


@register("*", CONSTANT, VARIABLE)
def _mul_constant_variable(lhs: Any, rhs: Any) -> AffineExpr:
    return AffineExpr([rhs], [lhs])


@register("*", VARIABLE, CONSTANT)
def _mul_variable_constant(lhs: Any, rhs: Any) -> AffineExpr:
    return AffineExpr([lhs], [rhs])


@register("*", CONSTANT, AFFINE)
def _mul_constant_affine(lhs: Any, rhs: AffineExpr) -> AffineExpr:
    return AffineExpr._from_terms(rhs.terms.scaled(lhs), lhs * rhs.constant)


@register("*", AFFINE, CONSTANT)
def _mul_affine_constant(lhs: AffineExpr, rhs: Any) -> AffineExpr:
    return AffineExpr._from_terms(lhs.terms.scaled(rhs), lhs.constant * rhs)


@register("*", CONSTANT, QUADRATIC)
def _mul_constant_quadratic(lhs: Any, rhs: QuadraticExpr) -> QuadraticExpr:
    return QuadraticExpr._from_parts(
        rhs.qterms.scaled(lhs), _mul_constant_affine(lhs, rhs.aff)
    )


@register("*", QUADRATIC, CONSTANT)
def _mul_quadratic_constant(lhs: QuadraticExpr, rhs: Any) -> QuadraticExpr:
    return QuadraticExpr._from_parts(
        lhs.qterms.scaled(rhs), _mul_affine_constant(lhs.aff, rhs)
    )


@register("*", VARIABLE, VARIABLE)
def _mul_variable_variable(lhs: Any, rhs: Any) -> QuadraticExpr:
    return QuadraticExpr([lhs], [rhs], [1.0])


@register("*", VARIABLE, AFFINE)
def _mul_variable_affine_operands(lhs: Any, rhs: AffineExpr) -> QuadraticExpr:
    return _mul_variable_affine(lhs, rhs)


@register("*", AFFINE, VARIABLE)
def _mul_affine_variable(lhs: AffineExpr, rhs: Any) -> QuadraticExpr:
    return _mul_variable_affine(rhs, lhs)


@register("*", AFFINE, AFFINE)
def _mul_affine_affine(lhs: AffineExpr, rhs: AffineExpr) -> QuadraticExpr:
    qterms = QuadTermList()
    for v1, c1 in lhs.iter_terms():
        for v2, c2 in rhs.iter_terms():
            qterms.append(v1, v2, c1 * c2)

    aff = AffineExpr()
    if lhs.constant != 0:
        aff.terms.extend(rhs.terms, lhs.constant)
        aff.constant = lhs.constant * rhs.constant
    if rhs.constant != 0:
        # the product of both constants is already set above
        aff.terms.extend(lhs.terms, rhs.constant)
    return QuadraticExpr._from_parts(qterms, aff)


@register("/", VARIABLE, CONSTANT)
@register("/", AFFINE, CONSTANT)
@register("/", QUADRATIC, CONSTANT)
def _div_constant(lhs: Any, rhs: Any) -> AffineExpr | QuadraticExpr:
    return apply("*", 1 / rhs, lhs)


@register_unary("+", VARIABLE)
@register_unary("+", AFFINE)
@register_unary("+", QUADRATIC)
def _pos(operand: Any) -> Any:
    # identity, the result aliases the operand
    return operand


@register_unary("-", VARIABLE)
def _neg_variable(operand: Any) -> AffineExpr:
    return AffineExpr([operand], [-1.0])


@register_unary("-", AFFINE)
def _neg_affine(operand: AffineExpr) -> AffineExpr:
    return AffineExpr._from_terms(operand.terms.scaled(-1), -operand.constant)


@register_unary("-", QUADRATIC)
def _neg_quadratic(operand: QuadraticExpr) -> QuadraticExpr:
    return QuadraticExpr._from_parts(
        operand.qterms.scaled(-1), _neg_affine(operand.aff)
    )
