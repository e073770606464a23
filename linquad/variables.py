#!/usr/bin/env python3
"""
Linquad variables module.

This module contains the variable handle used within expressions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from linquad.constants import VARIABLE
from linquad.operations import ArithmeticMixin

if TYPE_CHECKING:
    from linquad.expressions import AffineExpr
    from linquad.model import Model


class Variable(ArithmeticMixin):
    """
    A variable handle.

    A Variable only consists of a reference to the model it belongs to and
    its column index in that model. Two variables are the same if both
    refer to the same model and the same index. Use arithmetic operations
    to create expressions and constraints from variables.
    """

    __slots__ = ("_model", "_index")

    _kind = VARIABLE

    def __init__(self, model: Model | Any, index: int) -> None:
        self._model = model
        self._index = int(index)

    def __repr__(self) -> str:
        return f"Variable: {self.name}"

    @property
    def model(self) -> Model | Any:
        """
        Get the model to which the variable belongs.
        """
        return self._model

    @property
    def index(self) -> int:
        """
        Get the column index of the variable.
        """
        return self._index

    @property
    def name(self) -> str:
        """
        Get the name of the variable as given by its model.
        """
        namer = getattr(self._model, "variable_name", None)
        if callable(namer):
            return namer(self._index)
        return f"x{self._index}"

    def to_linexpr(self, coeff: Any = 1.0) -> AffineExpr:
        from linquad.expressions import AffineExpr

        return AffineExpr([self], [coeff])

    def __hash__(self) -> int:
        return hash((id(self._model), self._index))

    def __eq__(self, other: Any) -> Any:  # type: ignore
        if isinstance(other, Variable):
            return self._model is other._model and self._index == other._index
        return super().__eq__(other)

    def __ne__(self, other: Any) -> Any:  # type: ignore
        if isinstance(other, Variable):
            return not self.__eq__(other)
        return super().__ne__(other)
