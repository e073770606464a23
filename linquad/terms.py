#!/usr/bin/env python3
"""
Linquad terms module.

This module contains the growable term storage of affine and quadratic
expressions. Terms are kept in parallel lists, appending is amortized O(1)
and terms are never merged, i.e. a variable may appear several times.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Real
from typing import Any

import numpy as np


def as_coefficient(value: Any) -> Any:
    """
    Convert real numbers, numpy scalars included, to python floats. Other
    coefficient types are returned unchanged.
    """
    if isinstance(value, Real):
        return float(value)
    return value


class TermList:
    """
    Parallel lists of variables and coefficients.
    """

    __slots__ = ("vars", "coeffs")

    def __init__(self, vars: Iterable[Any] = (), coeffs: Iterable[Any] = ()) -> None:
        self.vars = list(vars)
        self.coeffs = [as_coefficient(c) for c in coeffs]
        if len(self.vars) != len(self.coeffs):
            raise ValueError(
                f"Number of variables ({len(self.vars)}) and coefficients "
                f"({len(self.coeffs)}) differ."
            )

    def __repr__(self) -> str:
        return f"TermList(vars={self.vars!r}, coeffs={self.coeffs!r})"

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return zip(self.vars, self.coeffs)

    def append(self, var: Any, coeff: Any) -> None:
        self.vars.append(var)
        self.coeffs.append(as_coefficient(coeff))

    def extend(self, other: TermList, scale: Any = 1) -> None:
        """
        Append all terms of `other`, multiplying its coefficients by `scale`.
        """
        scale = as_coefficient(scale)
        if scale == 1:
            coeffs = list(other.coeffs)
        else:
            coeffs = [scale * c for c in other.coeffs]
        self.vars.extend(list(other.vars))
        self.coeffs.extend(coeffs)

    def copy(self) -> TermList:
        return self.scaled(1)

    def scaled(self, factor: Any) -> TermList:
        factor = as_coefficient(factor)
        new = TermList.__new__(TermList)
        new.vars = list(self.vars)
        if factor == 1:
            new.coeffs = list(self.coeffs)
        else:
            new.coeffs = [factor * c for c in self.coeffs]
        return new

    def coeff_array(self) -> np.ndarray:
        return np.asarray(self.coeffs, dtype=float)

    def equals(self, other: TermList) -> bool:
        if len(self) != len(other):
            return False
        return all(
            _same_variable(v1, v2) and c1 == c2
            for (v1, c1), (v2, c2) in zip(self, other)
        )


class QuadTermList:
    """
    Parallel lists of variable pairs and coefficients.
    """

    __slots__ = ("vars1", "vars2", "coeffs")

    def __init__(
        self,
        vars1: Iterable[Any] = (),
        vars2: Iterable[Any] = (),
        coeffs: Iterable[Any] = (),
    ) -> None:
        self.vars1 = list(vars1)
        self.vars2 = list(vars2)
        self.coeffs = [as_coefficient(c) for c in coeffs]
        if not len(self.vars1) == len(self.vars2) == len(self.coeffs):
            raise ValueError(
                "Quadratic terms require the same number of first variables "
                f"({len(self.vars1)}), second variables ({len(self.vars2)}) "
                f"and coefficients ({len(self.coeffs)})."
            )

    def __repr__(self) -> str:
        return (
            f"QuadTermList(vars1={self.vars1!r}, vars2={self.vars2!r}, "
            f"coeffs={self.coeffs!r})"
        )

    def __len__(self) -> int:
        return len(self.coeffs)

    def __iter__(self) -> Iterator[tuple[Any, Any, Any]]:
        return zip(self.vars1, self.vars2, self.coeffs)

    def append(self, var1: Any, var2: Any, coeff: Any) -> None:
        self.vars1.append(var1)
        self.vars2.append(var2)
        self.coeffs.append(as_coefficient(coeff))

    def extend(self, other: QuadTermList, scale: Any = 1) -> None:
        scale = as_coefficient(scale)
        if scale == 1:
            coeffs = list(other.coeffs)
        else:
            coeffs = [scale * c for c in other.coeffs]
        self.vars1.extend(list(other.vars1))
        self.vars2.extend(list(other.vars2))
        self.coeffs.extend(coeffs)

    def copy(self) -> QuadTermList:
        return self.scaled(1)

    def scaled(self, factor: Any) -> QuadTermList:
        factor = as_coefficient(factor)
        new = QuadTermList.__new__(QuadTermList)
        new.vars1 = list(self.vars1)
        new.vars2 = list(self.vars2)
        if factor == 1:
            new.coeffs = list(self.coeffs)
        else:
            new.coeffs = [factor * c for c in self.coeffs]
        return new

    def coeff_array(self) -> np.ndarray:
        return np.asarray(self.coeffs, dtype=float)

    def equals(self, other: QuadTermList) -> bool:
        if len(self) != len(other):
            return False
        return all(
            _same_variable(a1, a2) and _same_variable(b1, b2) and c1 == c2
            for (a1, b1, c1), (a2, b2, c2) in zip(self, other)
        )


def _same_variable(v1: Any, v2: Any) -> bool:
    if v1 is v2:
        return True
    if type(v1) is not type(v2):
        return False
    return bool(v1 == v2)
