"""Dimension rules for the expression algebra.

Each ``check_dimensions_in_*`` function raises :class:`DimensionError` naming
the operation and both operand dims when the operands cannot be combined.
Scalar operands broadcast in addition and multiplication; comparisons and
stacking have no broadcasting relaxation between non-scalars.
"""

from typing import Sequence

from symbolicmath.errors import DimensionError, IndexOutOfRangeError

from .expr.expr import Expr, Shape


def is_scalar(expr: Expr) -> bool:
    return expr.shape_class == Shape.SCALAR


def check_dimensions_in_addition(left: Expr, right: Expr, operation: str = "Plus"):
    """Addition requires identical dims unless one side is a scalar."""
    if is_scalar(left) or is_scalar(right):
        return
    if left.dims() != right.dims():
        raise DimensionError(operation, left.dims(), right.dims())


def check_dimensions_in_multiplication(left: Expr, right: Expr):
    """Multiplication requires left columns == right rows unless one side is a scalar."""
    if is_scalar(left) or is_scalar(right):
        return
    if left.dims()[1] != right.dims()[0]:
        raise DimensionError("Multiply", left.dims(), right.dims())


def check_dimensions_in_comparison(left: Expr, right: Expr):
    """Comparisons between non-scalars compare entrywise, so dims must match exactly."""
    if is_scalar(left) or is_scalar(right):
        return
    if left.dims() != right.dims():
        raise DimensionError("Comparison", left.dims(), right.dims())


def check_dimensions_in_hstack(exprs: Sequence[Expr]):
    """Horizontal stacking requires every expression to have the same number of rows."""
    for prev, curr in zip(exprs, exprs[1:]):
        if prev.dims()[0] != curr.dims()[0]:
            raise DimensionError("HStack", prev.dims(), curr.dims())


def check_dimensions_in_vstack(exprs: Sequence[Expr]):
    """Vertical stacking requires every expression to have the same number of columns."""
    for prev, curr in zip(exprs, exprs[1:]):
        if prev.dims()[1] != curr.dims()[1]:
            raise DimensionError("VStack", prev.dims(), curr.dims())


def check_index(expr: Expr, ii: int, jj: int):
    """Raise IndexOutOfRangeError unless ``(ii, jj)`` lies inside ``expr.dims()``."""
    n_rows, n_cols = expr.dims()
    if not (0 <= ii < n_rows and 0 <= jj < n_cols):
        raise IndexOutOfRangeError((ii, jj), [n_rows, n_cols])
