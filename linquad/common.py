#!/usr/bin/env python3
"""
Linquad common module.

This module contains commonly used functions and the error types of the
package.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any
from warnings import warn

from deprecation import DeprecatedWarning

from linquad.config import options
from linquad.constants import (
    NONLINEAR_HINT,
    SIGNS,
    SIGNS_alternative,
    SIGNS_flipped,
    sign_replace_dict,
)


class UnsupportedOperation(TypeError):
    """
    Raised for arithmetic which cannot be represented by an affine or
    quadratic expression, e.g. dividing by a variable or multiplying two
    quadratic expressions.
    """

    def __init__(
        self,
        op: str,
        lhs_kind: str | None,
        rhs_kind: str | None = None,
        hint: str = NONLINEAR_HINT,
    ) -> None:
        self.op = op
        self.lhs_kind = lhs_kind
        self.rhs_kind = rhs_kind
        if rhs_kind is None:
            operands = f"a {lhs_kind}"
        else:
            operands = f"{lhs_kind} and {rhs_kind}"
        super().__init__(f"Unsupported operation '{op}' for {operands}. {hint}")


class DimensionMismatch(ValueError):
    """
    Raised when the shapes of two array operands are incompatible.
    """

    def __init__(
        self, op: str, lhs_shape: tuple[int, ...], rhs_shape: tuple[int, ...]
    ) -> None:
        self.op = op
        self.lhs_shape = tuple(lhs_shape)
        self.rhs_shape = tuple(rhs_shape)
        super().__init__(
            f"Incompatible shapes for {op}: {self.lhs_shape} {op} {self.rhs_shape}"
        )


def maybe_replace_sign(sign: str) -> str:
    """
    Replace the sign with an alternative sign if available.

    Parameters
    ----------
        sign (str): The sign to be replaced.

    Returns
    -------
        str: The replaced sign.

    Raises
    ------
        ValueError: If the sign is not in the available signs.
    """
    if sign in SIGNS_alternative:
        return sign_replace_dict[sign]
    elif sign in SIGNS:
        return sign
    else:
        raise ValueError(f"Sign {sign} not in {SIGNS} or {SIGNS_alternative}")


def flip_sign(sign: str) -> str:
    """
    Return the sign which holds when both sides of a relation are swapped.
    """
    return SIGNS_flipped[maybe_replace_sign(sign)]


def print_coord(coord: Iterable[Any]) -> str:
    """
    Format coordinates into a string representation.

    Examples:
        >>> print_coord([1, 2, 3])
        '[1, 2, 3]'
        >>> print_coord([(1, 2), (3, 4)])
        '[(1, 2), (3, 4)]'
    """
    coord = list(coord)
    if not coord:
        return ""

    formatted = []
    for value in coord:
        if isinstance(value, list | tuple):
            formatted.append(f"({', '.join(str(x) for x in value)})")
        else:
            formatted.append(str(value))

    return f"[{', '.join(formatted)}]"


def format_number(value: Any) -> str:
    precision = options.get_value("display_precision")
    return f"{value:+.{precision}g}"


def print_single_expression(
    coeffs: Sequence[Any], names: Sequence[str], const: Any
) -> str:
    """
    Print a single expression based on the coefficients and variable names.

    Quadratic terms are passed with names that already join both factors.
    """

    def print_terms(terms: list[tuple[Any, str]], leading: bool) -> list[str]:
        res = []
        for i, (coeff, name) in enumerate(terms):
            coeff_string = format_number(coeff)
            if i or not leading:
                # split sign and coefficient
                coeff_string = f"{coeff_string[0]} {coeff_string[1:]}"
            res.append(f"{coeff_string} {name}")
        return res

    terms = list(zip(coeffs, names))

    # catch case that too many terms would be printed
    max_terms = options.get_value("display_max_terms")
    if len(terms) > max_terms:
        truncate = max(max_terms // 2, 1)
        res = print_terms(terms[:truncate], leading=True)
        res.append("...")
        res += print_terms(terms[-truncate:], leading=False)
    else:
        res = print_terms(terms, leading=True)

    if const != 0 or not res:
        const_string = format_number(const)
        if res:
            res.append(f"{const_string[0]} {const_string[1:]}")
        else:
            res.append(const_string)
    return " ".join(res)


_comparison_notice_emitted = False


def warn_deprecated_comparison(sign: str) -> None:
    """
    Emit the deprecation notice for operator based constraint construction.

    The notice is only emitted on the first use within the process.
    """
    global _comparison_notice_emitted
    if _comparison_notice_emitted:
        return
    _comparison_notice_emitted = True
    warn(
        DeprecatedWarning(
            f"The comparison operator {sign}",
            deprecated_in="0.2.0",
            removed_in="1.0.0",
            details="Use `linquad.compare` or `Model.add_constraints` with an "
            "explicit sign instead.",
        ),
        stacklevel=4,
    )


def reset_deprecation_notice() -> None:
    """
    Re-arm the one-shot deprecation notice of the comparison operators.
    """
    global _comparison_notice_emitted
    _comparison_notice_emitted = False
