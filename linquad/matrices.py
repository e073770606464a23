#!/usr/bin/env python3
"""
Linquad matrices module.

This module contains the array operations between numeric matrices (dense
or sparse) and arrays of variables and expressions.

Symbolic arrays are numpy arrays of dtype object. Accumulating the products
of a matrix multiplication appends to one expression per output entry, so
the runtime is linear in the number of produced terms. Numeric zeros never
produce terms.
"""

from __future__ import annotations

import logging
from itertools import product
from typing import Any

import numpy as np
from numpy import ndarray
from scipy import sparse

from linquad.common import DimensionMismatch, UnsupportedOperation
from linquad.constants import (
    ARRAY,
    CONSTANT,
    KIND_RANK,
    QUADRATIC,
)
from linquad.constraints import LinearConstraint, QuadraticConstraint, compare
from linquad.expressions import (
    AffineExpr,
    QuadraticExpr,
    as_expression,
    is_structurally_equal,
)
from linquad.operations import apply, kind_of
from linquad.types import MatrixLike

logger = logging.getLogger(__name__)


def as_operand(obj: Any) -> ndarray | sparse.sparray | sparse.spmatrix:
    """
    Convert an array like object to a numpy array, sparse matrices are kept.
    """
    if sparse.issparse(obj):
        return obj
    return np.asarray(obj)


def element_kind(arr: ndarray | sparse.sparray | sparse.spmatrix) -> str:
    """
    Get the highest operand kind of the elements of an array.

    Raises
    ------
    TypeError
        If an element does not take part in the arithmetic.
    """
    if sparse.issparse(arr) or arr.dtype != object:
        return CONSTANT
    kind = CONSTANT
    for elem in arr.flat:
        elem_kind = kind_of(elem)
        if elem_kind not in KIND_RANK:
            raise TypeError(f"Unsupported array element of type {type(elem)}.")
        if KIND_RANK[elem_kind] > KIND_RANK[kind]:
            kind = elem_kind
    return kind


def _densify(arr: Any) -> ndarray:
    if sparse.issparse(arr):
        return arr.toarray()
    return np.asarray(arr)


def _empty_expressions(shape: tuple[int, ...], cls: type) -> ndarray:
    ret = np.empty(shape, dtype=object)
    for idx in np.ndindex(shape):
        ret[idx] = cls()
    return ret


def _accumulate(target: AffineExpr | QuadraticExpr, a: Any, b: Any) -> None:
    """
    Add the product `a * b` to `target` in place.
    """
    if kind_of(a) == CONSTANT:
        if a != 0:
            target.append_expression(b, a)
    elif kind_of(b) == CONSTANT:
        if b != 0:
            target.append_expression(a, b)
    else:
        target.append_expression(apply("*", a, b))


def _result_class(lhs_kind: str, rhs_kind: str, op: str) -> type:
    if lhs_kind != CONSTANT and rhs_kind != CONSTANT:
        if QUADRATIC in (lhs_kind, rhs_kind):
            raise UnsupportedOperation(
                op,
                f"array of {lhs_kind}",
                f"array of {rhs_kind}",
                "Cannot multiply two arrays if one contains quadratic expressions.",
            )
        return QuadraticExpr
    return QuadraticExpr if QUADRATIC in (lhs_kind, rhs_kind) else AffineExpr


def matrix_multiply(lhs: MatrixLike, rhs: MatrixLike) -> Any:
    """
    Multiply two matrices of which at least one contains variables or
    expressions.

    The entries of the result are `ret[i, j] = sum_k lhs[i, k] * rhs[k, j]`.
    One dimensional operands are promoted like in numpy's matmul. Sparse
    numeric operands are iterated over their non-zero entries only.

    Parameters
    ----------
    lhs, rhs : array_like or scipy.sparse matrix
        Operands of dimension one or two.

    Returns
    -------
    numpy.ndarray or expression
        Array of AffineExpr, or of QuadraticExpr if both operands are
        symbolic or one contains quadratic expressions. An expression if
        both operands are vectors.

    Raises
    ------
    DimensionMismatch
        If the inner dimensions differ.
    UnsupportedOperation
        If both operands are symbolic and one contains quadratic expressions.
    """
    lhs, rhs = as_operand(lhs), as_operand(rhs)
    lhs_kind, rhs_kind = element_kind(lhs), element_kind(rhs)

    if lhs_kind == CONSTANT and rhs_kind == CONSTANT:
        return lhs @ rhs

    if lhs.ndim not in (1, 2) or rhs.ndim not in (1, 2):
        raise DimensionMismatch("@", lhs.shape, rhs.shape)

    lhs_vector, rhs_vector = lhs.ndim == 1, rhs.ndim == 1
    left = lhs.reshape(1, -1) if lhs_vector else lhs
    right = rhs.reshape(-1, 1) if rhs_vector else rhs
    if left.shape[1] != right.shape[0]:
        raise DimensionMismatch("@", lhs.shape, rhs.shape)

    cls = _result_class(lhs_kind, rhs_kind, "@")
    ret = _empty_expressions((left.shape[0], right.shape[1]), cls)

    if sparse.issparse(left):
        logger.debug(f"Multiplying sparse {left.shape} matrix from the left.")
        _multiply_sparse_lhs(ret, left, right)
    elif sparse.issparse(right):
        logger.debug(f"Multiplying sparse {right.shape} matrix from the right.")
        _multiply_sparse_rhs(ret, left, right)
    else:
        _multiply_dense(ret, left, right)

    if lhs_vector and rhs_vector:
        return ret[0, 0]
    elif lhs_vector:
        return ret[0]
    elif rhs_vector:
        return ret[:, 0]
    return ret


def _multiply_dense(ret: ndarray, lhs: ndarray, rhs: ndarray) -> ndarray:
    m, n = lhs.shape
    s = rhs.shape[1]
    for i, j in product(range(m), range(s)):
        target = ret[i, j]
        for k in range(n):
            _accumulate(target, lhs[i, k], rhs[k, j])
    return ret


def _multiply_sparse_lhs(ret: ndarray, lhs: Any, rhs: ndarray) -> ndarray:
    csr = sparse.csr_matrix(lhs, copy=True)
    csr.eliminate_zeros()
    indptr, indices, data = csr.indptr, csr.indices, csr.data
    for i in range(csr.shape[0]):
        for pos in range(indptr[i], indptr[i + 1]):
            k, value = indices[pos], data[pos]
            for j in range(rhs.shape[1]):
                _accumulate(ret[i, j], value, rhs[k, j])
    return ret


def _multiply_sparse_rhs(ret: ndarray, lhs: ndarray, rhs: Any) -> ndarray:
    csc = sparse.csc_matrix(rhs, copy=True)
    csc.eliminate_zeros()
    indptr, indices, data = csc.indptr, csc.indices, csc.data
    for j in range(csc.shape[1]):
        for pos in range(indptr[j], indptr[j + 1]):
            k, value = indices[pos], data[pos]
            for i in range(lhs.shape[0]):
                _accumulate(ret[i, j], lhs[i, k], value)
    return ret


def dot_product(lhs: MatrixLike, rhs: MatrixLike) -> Any:
    """
    Sum up the elementwise products of two arrays of the same shape.

    Parameters
    ----------
    lhs, rhs : array_like or scipy.sparse matrix
        Operands, at least one of them containing variables or expressions.

    Returns
    -------
    AffineExpr or QuadraticExpr
    """
    lhs, rhs = as_operand(lhs), as_operand(rhs)
    if lhs.shape != rhs.shape:
        raise DimensionMismatch("dot", lhs.shape, rhs.shape)

    lhs_kind, rhs_kind = element_kind(lhs), element_kind(rhs)
    if lhs_kind == CONSTANT and rhs_kind == CONSTANT:
        return _densify(lhs.multiply(rhs) if sparse.issparse(lhs) else lhs * rhs).sum()

    ret = _result_class(lhs_kind, rhs_kind, "dot")()
    if sparse.issparse(lhs) or sparse.issparse(rhs):
        numeric, other = (lhs, rhs) if sparse.issparse(lhs) else (rhs, lhs)
        coo = numeric.tocoo()
        # row-major order, stored zeros are skipped by _accumulate
        order = np.lexsort(coo.coords[::-1])
        for pos in order:
            idx = tuple(int(c[pos]) for c in coo.coords)
            _accumulate(ret, coo.data[pos], other[idx])
        return ret

    for a, b in zip(lhs.flat, rhs.flat):
        _accumulate(ret, a, b)
    return ret


def _check_shapes(op: str, lhs: Any, rhs: Any) -> tuple[int, ...]:
    lhs_array, rhs_array = kind_of(lhs) == ARRAY, kind_of(rhs) == ARRAY
    if lhs_array and rhs_array:
        if lhs.shape != rhs.shape:
            raise DimensionMismatch(op, lhs.shape, rhs.shape)
        return lhs.shape
    elif lhs_array:
        return lhs.shape
    elif rhs_array:
        return rhs.shape
    return ()


def _as_element_operand(obj: Any) -> Any:
    if isinstance(obj, list | tuple):
        obj = np.asarray(obj)
    # zero dimensional arrays act as scalars
    if isinstance(obj, ndarray) and obj.ndim == 0:
        return obj.item()
    return obj


def _broadcast(func: Any, op: str, lhs: Any, rhs: Any) -> ndarray:
    lhs, rhs = _as_element_operand(lhs), _as_element_operand(rhs)
    shape = _check_shapes(op, lhs, rhs)
    lhs_array, rhs_array = kind_of(lhs) == ARRAY, kind_of(rhs) == ARRAY
    if lhs_array:
        lhs = _densify(lhs)
    if rhs_array:
        rhs = _densify(rhs)
    ret = np.empty(shape, dtype=object)
    for idx in np.ndindex(shape):
        a = lhs[idx] if lhs_array else lhs
        b = rhs[idx] if rhs_array else rhs
        ret[idx] = func(a, b)
    return ret


def elementwise(op: str, lhs: Any, rhs: Any) -> ndarray:
    """
    Apply an arithmetic operation elementwise.

    A scalar operand is broadcast to the shape of the array operand, two
    arrays must have the same shape. Sparse operands are densified.

    Parameters
    ----------
    op : str
        One of `+`, `-`, `*` and `/`.
    lhs, rhs : Any
        Operands of which at least one is an array.

    Returns
    -------
    numpy.ndarray
        Array of dtype object.
    """
    return _broadcast(lambda a, b: apply(op, a, b), op, lhs, rhs)


def compare_elementwise(lhs: Any, sign: str, rhs: Any) -> ndarray:
    """
    Create an array of constraints by comparing two operands elementwise.

    The same shape rules as in :func:`elementwise` apply.

    Returns
    -------
    numpy.ndarray
        Array of LinearConstraint and QuadraticConstraint objects.
    """
    return _broadcast(lambda a, b: compare(a, sign, b), sign, lhs, rhs)


def is_symmetric(matrix: Any) -> bool:
    """
    Check whether a square matrix of variables or expressions is symmetric.

    Entries are compared structurally, see
    :func:`linquad.expressions.is_structurally_equal`. Mathematically equal
    entries with differently ordered terms are not considered equal.
    """
    matrix = _densify(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        return False
    n = matrix.shape[0]
    for i in range(n):
        for j in range(i + 1, n):
            if not is_structurally_equal(matrix[i, j], matrix[j, i]):
                return False
    return True


def diag(vector: Any) -> ndarray:
    """
    Create a square matrix of affine expressions with `vector` on the
    diagonal and empty expressions elsewhere.
    """
    vector = np.asarray(vector)
    if vector.ndim != 1:
        raise ValueError("diag requires a one dimensional array.")
    n = len(vector)
    ret = _empty_expressions((n, n), AffineExpr)
    for i, elem in enumerate(vector):
        expr = as_expression(elem)
        if expr is elem:
            expr = expr.copy()
        ret[i, i] = expr
    return ret


def constraint_array_type(constraints: ndarray) -> type:
    """
    Get the common constraint type of an array of constraints.
    """
    types = {type(c) for c in constraints.flat}
    if types <= {LinearConstraint}:
        return LinearConstraint
    elif types <= {QuadraticConstraint}:
        return QuadraticConstraint
    raise TypeError(f"Array contains mixed or unsupported types: {types}.")
