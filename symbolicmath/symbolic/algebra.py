"""Dispatch core of the expression algebra.

Every binary operation follows the same steps:

1. Convert a foreign right operand with :func:`to_expr`
2. Validate both operands (an invalid operand raises its own validation error)
3. Check dimensions (see :mod:`symbolicmath.symbolic.dims`)
4. Promote every scalar entry to its term list, operate on the terms and merge
   like terms
5. Rebuild the result at the lowest sufficient degree with :func:`from_terms`
   and :func:`concretize`

A term is a ``(footprint, coefficient)`` pair. The footprint is the canonical
tuple of ``(variable, exponent)`` pairs sorted by variable id; two terms are
like terms exactly when their footprints are equal.
"""

import itertools
from typing import Iterable, List, Tuple

import numpy as np

from symbolicmath.errors import DimensionError

from .dims import (
    check_dimensions_in_addition,
    check_dimensions_in_comparison,
    check_dimensions_in_multiplication,
    is_scalar,
)
from .expr.constant import Constant, ConstantMatrix
from .expr.constraint import ConstrSense, constraint_class
from .expr.expr import Expr, to_expr
from .expr.linalg import broadcast, concretize, grid
from .expr.monomial import Monomial, canonical_footprint
from .expr.polynomial import Polynomial

Term = Tuple[tuple, float]


# =============================================================================
# Term arithmetic
# =============================================================================


def merge_terms(terms: Iterable[Term]) -> List[Term]:
    """Combine like terms, keeping first-appearance order and dropping zero coefficients."""
    merged = {}
    for footprint, coefficient in terms:
        merged[footprint] = merged.get(footprint, 0.0) + coefficient
    return [(fp, c) for fp, c in merged.items() if c != 0.0]


def multiply_footprints(left: tuple, right: tuple) -> tuple:
    """Multiply two footprints: exponents of shared variables add."""
    return canonical_footprint(itertools.chain(left, right))


def add_terms(left: Iterable[Term], right: Iterable[Term]) -> List[Term]:
    return merge_terms(itertools.chain(left, right))


def multiply_terms(left: List[Term], right: List[Term]) -> List[Term]:
    return merge_terms(
        (multiply_footprints(fl, fr), cl * cr) for fl, cl in left for fr, cr in right
    )


def from_terms(terms: List[Term]):
    """Build the lowest-degree scalar expression for a merged term list.

    - no terms: ``Constant(0.0)``
    - one factor-free term: ``Constant``
    - one term: ``Monomial``
    - otherwise: ``Polynomial``
    """
    if not terms:
        return Constant(0.0)
    if len(terms) == 1:
        footprint, coefficient = terms[0]
        if not footprint:
            return Constant(coefficient)
        return _monomial(footprint, coefficient)
    return Polynomial([_monomial(fp, c) for fp, c in terms])


def _monomial(footprint: tuple, coefficient: float) -> Monomial:
    return Monomial(coefficient, [v for v, _ in footprint], [e for _, e in footprint])


def _add_scalars(left, right):
    return from_terms(add_terms(left.terms(), right.terms()))


def _multiply_scalars(left, right):
    return from_terms(multiply_terms(left.terms(), right.terms()))


# =============================================================================
# Operations
# =============================================================================


def _validate_operands(left: Expr, right: Expr):
    left.validate()
    right.validate()


def _broadcast_grid(expr: Expr, n_rows: int, n_cols: int):
    if is_scalar(expr):
        return [[expr] * n_cols for _ in range(n_rows)]
    return grid(expr)


def _elementwise(left: Expr, right: Expr, op) -> Expr:
    # The non-scalar operand(s) fix the dims and the shape class of the result
    shaped = right if is_scalar(left) else left
    n_rows, n_cols = shaped.dims()
    shape = max(left.shape_class, right.shape_class)
    rows = [
        [op(le, re) for le, re in zip(lrow, rrow)]
        for lrow, rrow in zip(
            _broadcast_grid(left, n_rows, n_cols), _broadcast_grid(right, n_rows, n_cols)
        )
    ]
    return concretize(rows, shape)


def plus(left: Expr, right) -> Expr:
    """Add two expressions.

    Scalars broadcast over vectors and matrices; otherwise dims must match.

    Raises:
        UnsupportedOperandError: If ``right`` is not an expression, number or numpy array
        DimensionError: If two non-scalar operands have different dims
    """
    right = to_expr(right, "Plus")
    _validate_operands(left, right)
    check_dimensions_in_addition(left, right)

    if is_scalar(left) and is_scalar(right):
        return _add_scalars(left, right)
    return _elementwise(left, right, _add_scalars)


def minus(left: Expr, right) -> Expr:
    """Subtract ``right`` from ``left`` (``left + (-1) * right``)."""
    right = to_expr(right, "Minus")
    _validate_operands(left, right)
    check_dimensions_in_addition(left, right, "Minus")
    return plus(left, multiply(right, -1.0))


def multiply(left: Expr, right) -> Expr:
    """Multiply two expressions.

    A scalar operand scales every entry of the other. Two non-scalar operands
    form the matrix product, whose result is concretized by its dims.

    Raises:
        UnsupportedOperandError: If ``right`` is not an expression, number or numpy array
        DimensionError: If left columns != right rows for two non-scalar operands
    """
    right = to_expr(right, "Multiply")
    _validate_operands(left, right)
    check_dimensions_in_multiplication(left, right)

    if is_scalar(left) and is_scalar(right):
        return _multiply_scalars(left, right)
    if is_scalar(left) or is_scalar(right):
        return _elementwise(left, right, _multiply_scalars)

    lgrid, rgrid = grid(left), grid(right)
    inner = len(rgrid)
    rows = [
        [
            from_terms(
                merge_terms(
                    term
                    for kk in range(inner)
                    for term in multiply_terms(lgrid[ii][kk].terms(), rgrid[kk][jj].terms())
                )
            )
            for jj in range(len(rgrid[0]))
        ]
        for ii in range(len(lgrid))
    ]
    return concretize(rows)


def power(expr: Expr, exponent: int) -> Expr:
    """Raise a scalar or square matrix expression to a non-negative integer power.

    Raises:
        ValueError: If the exponent is not a non-negative integer
        DimensionError: If a non-scalar expression is not square
    """
    if isinstance(exponent, bool) or not isinstance(exponent, (int, np.integer)) or exponent < 0:
        raise ValueError(f"Power requires a non-negative integer exponent; received {exponent!r}")
    expr.validate()

    if is_scalar(expr):
        result = Constant(1.0)
    else:
        n_rows, n_cols = expr.dims()
        if n_rows != n_cols:
            raise DimensionError("Power", expr.dims(), expr.dims())
        result = ConstantMatrix(np.eye(n_rows))
    for _ in range(int(exponent)):
        result = multiply(result, expr)
    return result


def comparison(left: Expr, right, sense):
    """Build a constraint comparing ``left`` with ``right``.

    A scalar side is broadcast to the dims of a non-scalar side. Two
    non-scalar sides must have identical dims.

    Returns:
        ScalarConstraint, VectorConstraint or MatrixConstraint, following the
        larger shape class of the two sides

    Raises:
        DimensionError: If two non-scalar sides have different dims
    """
    sense = ConstrSense(sense)
    right = to_expr(right, "Comparison")
    _validate_operands(left, right)
    check_dimensions_in_comparison(left, right)

    if is_scalar(right) and not is_scalar(left):
        right = broadcast(right, left.dims(), left.shape_class)
    elif is_scalar(left) and not is_scalar(right):
        left = broadcast(left, right.dims(), right.shape_class)

    shape = max(left.shape_class, right.shape_class)
    return constraint_class(shape)(left, right, sense)


# =============================================================================
# Predicates
# =============================================================================


def is_linear(expr) -> bool:
    """True when ``expr`` has degree at most 1."""
    return to_expr(expr, "IsLinear").degree() <= 1


def is_quadratic(expr) -> bool:
    """True when ``expr`` has degree at most 2."""
    return to_expr(expr, "IsQuadratic").degree() <= 2


def simplify(expr):
    """Merge like terms in every entry and return the lowest-degree equivalent."""
    expr = to_expr(expr, "Simplify").validate()
    if is_scalar(expr):
        return expr.simplify()
    return concretize([[e.simplify() for e in row] for row in grid(expr)], expr.shape_class)
