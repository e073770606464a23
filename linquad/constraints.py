"""
Linquad constraints module.

This module contains the linear and quadratic constraint containers and the
conversion of comparisons into constraints.
"""

from __future__ import annotations

from typing import Any

from numpy import inf

from linquad.common import (
    flip_sign,
    format_number,
    maybe_replace_sign,
)
from linquad.constants import (
    ARRAY,
    CONSTANT,
    EQUAL,
    GREATER_EQUAL,
    LESS_EQUAL,
    QUADRATIC,
    SIGNS_pretty,
    SYMBOLIC_KINDS,
)
from linquad.expressions import AffineExpr, QuadraticExpr, as_expression
from linquad.operations import apply, kind_of
from linquad.types import SolutionLike


class LinearConstraint:
    """
    A linear constraint `lower <= expr <= upper`.

    Either bound may be infinite. Bounds with `lower > upper` are accepted,
    detecting infeasibility is left to the solver.
    """

    __slots__ = ("_expr", "_lower", "_upper")

    def __init__(self, expr: Any, lower: Any = -inf, upper: Any = inf) -> None:
        converted = as_expression(expr)
        if not isinstance(converted, AffineExpr):
            raise TypeError(
                "A linear constraint requires an affine expression, use a "
                "QuadraticConstraint for quadratic expressions."
            )
        # the constraint owns its expression
        self._expr = converted.copy() if converted is expr else converted
        self._lower = lower
        self._upper = upper

    def __repr__(self) -> str:
        """
        Get the representation of the LinearConstraint.
        """
        expr_string = self.expr._print()
        sign = self.sign
        if sign is None:
            lower = format_number(self.lower).lstrip("+")
            upper = format_number(self.upper).lstrip("+")
            return f"LinearConstraint: {lower} ≤ {expr_string} ≤ {upper}"
        rhs = format_number(self.rhs).lstrip("+")
        return f"LinearConstraint: {expr_string} {SIGNS_pretty[sign]} {rhs}"

    def __bool__(self) -> bool:
        raise TypeError(
            "The truth value of a constraint is ambiguous, chained comparisons "
            "like `0 <= x <= 1` are not supported."
        )

    @property
    def expr(self) -> AffineExpr:
        """
        Get the expression of the constraint.
        """
        return self._expr

    @property
    def lower(self) -> Any:
        """
        Get the lower bound of the constraint.
        """
        return self._lower

    @property
    def upper(self) -> Any:
        """
        Get the upper bound of the constraint.
        """
        return self._upper

    @property
    def sign(self) -> str | None:
        """
        Get the sign of the constraint, None for a ranged or free constraint.
        """
        if self.lower == self.upper:
            return EQUAL
        elif self.lower == -inf and self.upper != inf:
            return LESS_EQUAL
        elif self.upper == inf and self.lower != -inf:
            return GREATER_EQUAL
        return None

    @property
    def rhs(self) -> Any:
        """
        Get the right hand side of a one sided constraint.
        """
        sign = self.sign
        if sign is None:
            return None
        return self.lower if sign == GREATER_EQUAL else self.upper

    def evaluate(self, solution: SolutionLike) -> float:
        return self.expr.evaluate(solution)

    def equals(self, other: Any) -> bool:
        if not isinstance(other, LinearConstraint):
            return False
        return (
            self.expr.equals(other.expr)
            and self.lower == other.lower
            and self.upper == other.upper
        )


class QuadraticConstraint:
    """
    A quadratic constraint `expr sign 0`.
    """

    __slots__ = ("_expr", "_sign")

    def __init__(self, expr: Any, sign: str) -> None:
        converted = as_expression(expr)
        if isinstance(converted, AffineExpr):
            converted = converted.to_quadexpr()
        elif converted is expr:
            converted = converted.copy()
        self._expr = converted
        self._sign = maybe_replace_sign(sign)

    def __repr__(self) -> str:
        expr_string = self.expr._print()
        return f"QuadraticConstraint: {expr_string} {SIGNS_pretty[self.sign]} 0"

    def __bool__(self) -> bool:
        raise TypeError("The truth value of a constraint is ambiguous.")

    @property
    def expr(self) -> QuadraticExpr:
        """
        Get the expression of the constraint.
        """
        return self._expr

    @property
    def sign(self) -> str:
        """
        Get the sign of the constraint.
        """
        return self._sign

    @property
    def rhs(self) -> float:
        return 0.0

    def evaluate(self, solution: SolutionLike) -> float:
        return self.expr.evaluate(solution)

    def equals(self, other: Any) -> bool:
        if not isinstance(other, QuadraticConstraint):
            return False
        return self.sign == other.sign and self.expr.equals(other.expr)


def compare(
    lhs: Any, sign: str, rhs: Any
) -> LinearConstraint | QuadraticConstraint | Any:
    """
    Convert the comparison `lhs sign rhs` into a constraint.

    The comparison is normalized such that the expression is on the left
    and a constant on the right hand side. For affine expressions the
    constant of the expression is moved into the bounds of the resulting
    LinearConstraint, quadratic expressions keep the whole normalized
    expression and result in a QuadraticConstraint `expr sign 0`.

    The constraint is not added to any model.

    Parameters
    ----------
    lhs : constant, Variable, AffineExpr or QuadraticExpr
        Left hand side of the comparison.
    sign : str
        One of `<=`, `>=` and `=`.
    rhs : constant, Variable, AffineExpr or QuadraticExpr
        Right hand side of the comparison.

    Returns
    -------
    LinearConstraint or QuadraticConstraint
        An array of constraints if one side is an array.

    Examples
    --------
    >>> from linquad import Model, compare
    >>> m = Model()
    >>> x = m.add_variables(name="x")
    >>> compare(3 * x + 2, "<=", 10)
    LinearConstraint: +3 x ≤ 8
    """
    sign = maybe_replace_sign(sign)
    lhs_kind, rhs_kind = kind_of(lhs), kind_of(rhs)

    if ARRAY in (lhs_kind, rhs_kind):
        from linquad import matrices

        return matrices.compare_elementwise(lhs, sign, rhs)

    if lhs_kind not in SYMBOLIC_KINDS:
        if lhs_kind == CONSTANT and rhs_kind in SYMBOLIC_KINDS:
            return compare(rhs, flip_sign(sign), lhs)
        raise TypeError(
            f"Cannot compare {type(lhs)} and {type(rhs)}, one side must be a "
            "variable or an expression."
        )

    if rhs_kind in SYMBOLIC_KINDS:
        return compare(apply("-", lhs, rhs), sign, 0.0)
    elif rhs_kind != CONSTANT:
        raise TypeError(f"Assigned rhs must be a constant, got {type(rhs)}).")

    if lhs_kind == QUADRATIC:
        expr = QuadraticExpr._from_parts(lhs.qterms.copy(), lhs.aff - rhs)
        return QuadraticConstraint(expr, sign)

    expr = as_expression(lhs)
    bound = rhs - expr.constant
    expr = expr.reset_const()
    if sign == LESS_EQUAL:
        return LinearConstraint(expr, -inf, bound)
    elif sign == GREATER_EQUAL:
        return LinearConstraint(expr, bound, inf)
    return LinearConstraint(expr, bound, bound)
