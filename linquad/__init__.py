#!/usr/bin/env python3
"""
Linquad, symbolic affine and quadratic expressions for optimization models.
"""

from importlib.metadata import version

__version__ = version("linquad")

from linquad.common import DimensionMismatch, UnsupportedOperation
from linquad.config import options
from linquad.constants import EQUAL, GREATER_EQUAL, LESS_EQUAL
from linquad.constraints import LinearConstraint, QuadraticConstraint, compare
from linquad.expressions import (
    AffineExpr,
    QuadraticExpr,
    as_expression,
    evaluate,
    is_structurally_equal,
    quicksum,
)
from linquad.matrices import (
    compare_elementwise,
    diag,
    dot_product,
    elementwise,
    is_symmetric,
    matrix_multiply,
)
from linquad.model import Model
from linquad.variables import Variable

__all__ = (
    "AffineExpr",
    "DimensionMismatch",
    "EQUAL",
    "GREATER_EQUAL",
    "LESS_EQUAL",
    "LinearConstraint",
    "Model",
    "QuadraticConstraint",
    "QuadraticExpr",
    "UnsupportedOperation",
    "Variable",
    "as_expression",
    "compare",
    "compare_elementwise",
    "diag",
    "dot_product",
    "elementwise",
    "evaluate",
    "is_structurally_equal",
    "is_symmetric",
    "matrix_multiply",
    "options",
    "quicksum",
)
