"""
Linquad model module.

This module contains the model which allocates variables and keeps track of
constraints.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np
import pandas as pd
from numpy import inf, ndarray

from linquad.common import print_coord
from linquad.constraints import LinearConstraint, QuadraticConstraint, compare
from linquad.matrices import compare_elementwise, constraint_array_type
from linquad.types import ConstantLike, ConstraintLike, ScalarLike, SignLike
from linquad.variables import Variable

logger = logging.getLogger(__name__)


class Model:
    """
    Container of variables and constraints.

    The Model allocates variables, each variable is identified by the model
    and its column index. Constraints are stored under a reference name,
    either as single constraint or as array of constraints.
    """

    __slots__ = (
        "_names",
        "_lower",
        "_upper",
        "_constraints",
        "_varnameCounter",
        "_connameCounter",
    )

    def __init__(self) -> None:
        self._names: list[str] = []
        self._lower: list[float] = []
        self._upper: list[float] = []
        self._constraints: dict[str, Any] = {}
        self._varnameCounter = 0
        self._connameCounter = 0

    def __repr__(self) -> str:
        return (
            f"Model\n=====\n\nVariables: {self.nvars}\n"
            f"Constraints: {len(self._constraints)}"
        )

    @property
    def nvars(self) -> int:
        """
        Get the number of variables in the model.
        """
        return len(self._names)

    @property
    def variables(self) -> list[Variable]:
        """
        Get all variables of the model ordered by their column index.
        """
        return [Variable(self, i) for i in range(self.nvars)]

    @property
    def lower(self) -> pd.Series:
        """
        Get the lower bounds of all variables indexed by column index.
        """
        return pd.Series(self._lower, dtype=float, name="lower")

    @property
    def upper(self) -> pd.Series:
        """
        Get the upper bounds of all variables indexed by column index.
        """
        return pd.Series(self._upper, dtype=float, name="upper")

    @property
    def constraints(self) -> dict[str, Any]:
        """
        Get the constraints of the model by reference name.
        """
        return self._constraints

    def variable_name(self, index: int) -> str:
        """
        Get the name of the variable with column index `index`.
        """
        return self._names[index]

    def add_variables(
        self,
        lower: ConstantLike | ndarray = -inf,
        upper: ConstantLike | ndarray = inf,
        shape: int | Sequence[int] | None = None,
        name: str | None = None,
    ) -> Variable | ndarray:
        """
        Assign a new variable or an array of variables to the model.

        Parameters
        ----------
        lower : float/array_like, optional
            Lower bound of the variable(s). The default is -inf.
        upper : float/array_like, optional
            Upper bound of the variable(s). The default is inf.
        shape : int or tuple of int, optional
            Shape of the variable array. If None, the shape is derived from
            the bounds, scalar bounds result in a single variable.
        name : str, optional
            Reference name of the added variables. The default None results
            in a name like "var1", "var2" etc. Elements of arrays are named
            by their position, e.g. "x[0, 1]".

        Returns
        -------
        linquad.Variable or numpy.ndarray
            Single variable or object array of variables.

        Examples
        --------
        >>> from linquad import Model
        >>> m = Model()
        >>> m.add_variables(0, 10, name="x")
        Variable: x
        """
        if name is None:
            while f"var{self._varnameCounter}" in self._names:
                self._varnameCounter += 1
            name = f"var{self._varnameCounter}"
            self._varnameCounter += 1

        if shape is None:
            shape = np.broadcast_shapes(np.shape(lower), np.shape(upper))
        elif isinstance(shape, int):
            shape = (shape,)
        shape = tuple(shape)
        lower = np.broadcast_to(np.asarray(lower, dtype=float), shape)
        upper = np.broadcast_to(np.asarray(upper, dtype=float), shape)

        if not len(shape):
            var = self._add_variable(name, float(lower), float(upper))
            logger.debug(f"Added variable: {name}")
            return var

        ret = np.empty(shape, dtype=object)
        for idx in np.ndindex(*shape):
            label = f"{name}{print_coord(idx)}"
            ret[idx] = self._add_variable(label, float(lower[idx]), float(upper[idx]))
        logger.debug(f"Added {ret.size} variables: {name}")
        return ret

    def _add_variable(self, name: str, lower: float, upper: float) -> Variable:
        self._names.append(name)
        self._lower.append(lower)
        self._upper.append(upper)
        return Variable(self, len(self._names) - 1)

    def add_constraints(
        self,
        lhs: ScalarLike | ConstraintLike | ndarray,
        sign: SignLike | None = None,
        rhs: ScalarLike | ndarray | None = None,
        name: str | None = None,
    ) -> ConstraintLike | ndarray:
        """
        Assign a new constraint or an array of constraints to the model.

        Parameters
        ----------
        lhs : constraint, array of constraints, Variable or expression
            Left hand side of the constraint(s) or the finished constraint(s).
            In case a variable or an expression is passed, `sign` and `rhs`
            must not be None.
        sign : str, optional
            Relation between lhs and rhs, valid values are {'=', '>=', '<='}.
        rhs : constant, Variable or expression, optional
            Right hand side of the constraint(s).
        name : str, optional
            Reference name of the added constraints. The default None results
            in a name like "con1", "con2" etc.

        Returns
        -------
        LinearConstraint, QuadraticConstraint or numpy.ndarray
        """
        if name is None:
            while f"con{self._connameCounter}" in self._constraints:
                self._connameCounter += 1
            name = f"con{self._connameCounter}"
            self._connameCounter += 1
        elif name in self._constraints:
            raise ValueError(f"Constraint '{name}' already assigned to model")

        if isinstance(lhs, LinearConstraint | QuadraticConstraint):
            if sign is not None or rhs is not None:
                raise ValueError(
                    "Passing arguments `sign` and `rhs` together with a "
                    "constraint is ambiguous."
                )
            con = lhs
        elif isinstance(lhs, ndarray) and lhs.size and sign is None:
            if rhs is not None:
                raise ValueError(
                    "Passing argument `rhs` without `sign` is ambiguous."
                )
            constraint_array_type(lhs)
            con = lhs
        elif sign is None or rhs is None:
            raise ValueError(
                "Arguments `sign` and `rhs` cannot be None when passing a "
                "variable or an expression."
            )
        elif isinstance(lhs, ndarray) or isinstance(rhs, ndarray):
            con = compare_elementwise(lhs, sign, rhs)
        else:
            con = compare(lhs, sign, rhs)

        self._constraints[name] = con
        logger.debug(f"Added constraint: {name}")
        return con

    def remove_constraints(self, name: str | list[str]) -> None:
        """
        Remove all constraints stored under reference name 'name' from the
        model.

        Parameters
        ----------
        name : str or list of str
            Reference name(s) of the constraints to remove.

        Raises
        ------
        KeyError
            If no constraint is stored under the name.
        """
        names = name if isinstance(name, list) else [name]
        for n in names:
            if n not in self._constraints:
                raise KeyError(f"Constraint '{n}' not found in model.")
            logger.debug(f"Removed constraint: {n}")
            del self._constraints[n]
