from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Union

import numpy
from pandas import Series
from scipy.sparse import sparray, spmatrix

if TYPE_CHECKING:
    from linquad.constraints import LinearConstraint, QuadraticConstraint
    from linquad.expressions import AffineExpr, QuadraticExpr
    from linquad.variables import Variable

ConstantLike = Union[  # noqa: UP007
    int,
    float,
    numpy.floating,
    numpy.integer,
]
SignLike = str
VariableLike = Union["Variable"]
ExpressionLike = Union["AffineExpr", "QuadraticExpr"]
ScalarLike = Union[ConstantLike, VariableLike, ExpressionLike]  # noqa: UP007
ConstraintLike = Union["LinearConstraint", "QuadraticConstraint"]
MatrixLike = Union[numpy.ndarray, sparray, spmatrix, Sequence]  # noqa: UP007
SolutionLike = Union[Mapping, Series, Sequence, numpy.ndarray]  # noqa: UP007
