"""Linear algebra helpers for symbolic expressions.

Key Operations:

- **Matrix Operations:**
    - `transpose` - Swap rows and columns (scalars are unchanged)
- **Stacking:**
    - `hstack` - Horizontally stack expressions with equal row counts
    - `vstack` - Vertically stack expressions with equal column counts
- **Construction:**
    - `concretize` - Build the smallest expression class holding a grid of scalars
    - `broadcast` - Repeat a scalar into a vector or matrix

Example:
    Building a block matrix::

        x = new_variable_vector(2)
        A = vstack(x.T, np.ones((1, 2)))  # 2x2, first row x.T, second row ones
"""

from typing import List, Optional, Sequence

from .expr import Degree, Expr, ScalarExpression, Shape, lookup_class, promote, to_expr


def grid(expr: Expr) -> List[List[ScalarExpression]]:
    """Return the entries of an expression as a list of rows."""
    if expr.shape_class == Shape.SCALAR:
        return [[expr]]
    if expr.shape_class == Shape.VECTOR:
        return [[element] for element in expr.elements]
    return [list(row) for row in expr.elements]


def _container_degree(entries) -> Degree:
    degree = max(e.degree_class for e in entries)
    # A container of variables cannot hold constants
    if degree == Degree.VARIABLE and any(e.degree_class != Degree.VARIABLE for e in entries):
        return Degree.MONOMIAL
    return degree


def concretize(rows: Sequence[Sequence[ScalarExpression]], shape: Optional[Shape] = None) -> Expr:
    """Build the expression for a rectangular grid of scalar expressions.

    The element class of the result is the highest degree class among the
    entries; lower entries are promoted to it.

    Args:
        rows: Rectangular nested sequence of scalar expressions
        shape: Shape class of the result. If omitted it follows the dims:
            ``1x1`` is a scalar, a single column is a vector, anything else a matrix.

    Returns:
        Expr: A scalar, vector or matrix expression
    """
    rows = [list(row) for row in rows]
    if shape is None:
        if len(rows) == 1 and len(rows[0]) == 1:
            shape = Shape.SCALAR
        elif len(rows[0]) == 1:
            shape = Shape.VECTOR
        else:
            shape = Shape.MATRIX

    if shape == Shape.SCALAR:
        return rows[0][0]

    entries = [e for row in rows for e in row]
    degree = _container_degree(entries)
    if shape == Shape.VECTOR:
        return lookup_class(Shape.VECTOR, degree)(promote(row[0], degree) for row in rows)
    return lookup_class(Shape.MATRIX, degree)([promote(e, degree) for e in row] for row in rows)


def broadcast(scalar: ScalarExpression, dims: Sequence[int], shape: Shape) -> Expr:
    """Repeat a scalar into a vector or matrix of the given dims."""
    n_rows, n_cols = dims
    return concretize([[scalar] * n_cols for _ in range(n_rows)], shape)


def transpose(expr) -> Expr:
    """Return the transpose of an expression (or numpy array)."""
    return to_expr(expr, "Transpose").transpose()


def hstack(*exprs) -> Expr:
    """Stack expressions side by side.

    Raises:
        ValueError: If no expressions are given
        DimensionError: If the row counts differ
    """
    from symbolicmath.symbolic.dims import check_dimensions_in_hstack

    if len(exprs) == 0:
        raise ValueError("HStack: There must be at least one expression in the input; received 0")
    exprs = [to_expr(e, "HStack").validate() for e in exprs]
    check_dimensions_in_hstack(exprs)

    blocks = [grid(e) for e in exprs]
    rows = [[entry for block in blocks for entry in block[ii]] for ii in range(len(blocks[0]))]
    return concretize(rows)


def vstack(*exprs) -> Expr:
    """Stack expressions on top of each other.

    Raises:
        ValueError: If no expressions are given
        DimensionError: If the column counts differ
    """
    from symbolicmath.symbolic.dims import check_dimensions_in_vstack

    if len(exprs) == 0:
        raise ValueError("VStack: There must be at least one expression in the input; received 0")
    exprs = [to_expr(e, "VStack").validate() for e in exprs]
    check_dimensions_in_vstack(exprs)

    rows = [row for e in exprs for row in grid(e)]
    return concretize(rows)
