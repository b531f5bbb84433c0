"""Constraints between symbolic expressions.

Constraints are produced by :meth:`Expr.comparison` and its sugar
(``less_eq``, ``greater_eq``, ``eq``, ``<=``, ``>=``). They record the two
sides and the sense; collecting and solving them is left to the caller.

Example:
    >>> x = new_variable_vector(3)
    >>> c = x <= 1.0  # VectorConstraint, right side broadcast to length 3
    >>> A, b = c.linear_inequality_representation()
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from symbolicmath.errors import DimensionError

from .expr import Expr, Shape


class ConstrSense(str, Enum):
    """String enum for constraint senses.

    This allows users to pass plain strings while we maintain type safety internally.
    """

    LESS_EQ = "<="
    GREATER_EQ = ">="
    EQUAL = "=="


class Constraint:
    """Abstract base class for constraints.

    Attributes:
        left (Expr): Left-hand side expression (read-only)
        right (Expr): Right-hand side expression (read-only)
        sense (ConstrSense): Comparison sense (read-only)
    """

    def __init__(self, left: Expr, right: Expr, sense):
        self._left = left
        self._right = right
        self._sense = ConstrSense(sense)

    @property
    def left(self) -> Expr:
        return self._left

    @property
    def right(self) -> Expr:
        return self._right

    @property
    def sense(self) -> ConstrSense:
        return self._sense

    def check(self):
        """Return the first validation error of either side, or a DimensionError."""
        for side in (self.left, self.right):
            err = side.check()
            if err is not None:
                return err
        if self.left.dims() != self.right.dims():
            return DimensionError("Comparison", self.left.dims(), self.right.dims())
        return None

    def validate(self) -> "Constraint":
        err = self.check()
        if err is not None:
            raise err
        return self

    def dims(self) -> List[int]:
        return self.left.dims()

    def variables(self) -> list:
        return list(dict.fromkeys(self.left.variables() + self.right.variables()))

    def is_linear(self) -> bool:
        """True when both sides have degree at most 1."""
        from symbolicmath.symbolic.algebra import is_linear

        return is_linear(self.left) and is_linear(self.right)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.left, self.right, self.sense) == (other.left, other.right, other.sense)

    def __hash__(self):
        return hash((type(self).__name__, self.left, self.right, self.sense))

    def __repr__(self):
        return f"{self.left!r} {self.sense.value} {self.right!r}"


class _LinearlyRepresentable(Constraint):
    def _difference(self, wrt: Optional[Sequence]) -> Tuple[np.ndarray, np.ndarray]:
        if not self.is_linear():
            raise ValueError(f"Constraint is not linear: {self!r}")
        wrt = self.variables() if wrt is None else list(wrt)
        diff = self.left.minus(self.right)
        A = np.atleast_2d(diff.linear_coeff(wrt))
        b = -np.atleast_1d(diff.constant())
        return A, b

    def linear_inequality_representation(self, wrt: Optional[Sequence] = None):
        """Return ``(A, b)`` such that the constraint reads ``A @ wrt <= b``.

        Args:
            wrt: Ordered variables for the columns of ``A``. Defaults to the
                variables of both sides in order of appearance.

        Raises:
            ValueError: If the constraint is nonlinear or is an equality
        """
        if self.sense == ConstrSense.EQUAL:
            raise ValueError("linear_inequality_representation requires an inequality constraint")
        A, b = self._difference(wrt)
        if self.sense == ConstrSense.GREATER_EQ:
            return -A, -b
        return A, b

    def linear_equality_representation(self, wrt: Optional[Sequence] = None):
        """Return ``(C, d)`` such that the constraint reads ``C @ wrt == d``.

        Raises:
            ValueError: If the constraint is nonlinear or is an inequality
        """
        if self.sense != ConstrSense.EQUAL:
            raise ValueError("linear_equality_representation requires an equality constraint")
        return self._difference(wrt)


class ScalarConstraint(_LinearlyRepresentable):
    """Constraint between two scalar expressions."""


class VectorConstraint(_LinearlyRepresentable):
    """Entrywise constraint between two vector expressions of equal length."""


class MatrixConstraint(Constraint):
    """Entrywise constraint between two matrix expressions of equal dims."""


def constraint_class(shape: Shape):
    return {
        Shape.SCALAR: ScalarConstraint,
        Shape.VECTOR: VectorConstraint,
        Shape.MATRIX: MatrixConstraint,
    }[Shape(shape)]
