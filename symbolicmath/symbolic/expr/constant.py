"""Constant expressions.

:class:`Constant` wraps a single real number. :class:`ConstantVector` and
:class:`ConstantMatrix` hold constants in the vector and matrix shapes; they
accept plain numbers or numpy arrays and convert back with :meth:`to_numpy`.

Example:
    >>> k = Constant(3.0)
    >>> kv = ConstantVector(np.array([1.0, 2.0, 3.0]))
    >>> km = ConstantMatrix(np.eye(2))
"""

from numbers import Real

import numpy as np

from .expr import (
    Degree,
    MatrixExpression,
    ScalarExpression,
    Shape,
    VectorExpression,
    expression_class,
)


@expression_class(Shape.SCALAR, Degree.CONSTANT)
class Constant(ScalarExpression):
    """Constant scalar expression.

    Constants are always valid, have no variables and degree 0.

    Attributes:
        value (float): The wrapped number (read-only)
    """

    def __init__(self, value: float):
        self._value = float(value)

    @property
    def value(self) -> float:
        return self._value

    def check(self):
        return None

    def variables(self) -> list:
        return []

    def terms(self) -> list:
        return [((), self.value)]

    def constant(self) -> float:
        return self.value

    def degree(self) -> int:
        return 0

    def to_monomial(self):
        """Return the zero-factor monomial with this value as its coefficient."""
        from .monomial import Monomial

        return Monomial(self.value)

    def to_polynomial(self):
        return self.to_monomial().to_polynomial()

    def __float__(self):
        return self.value

    def _key(self) -> tuple:
        return (self.value,)

    def __repr__(self):
        return f"Const({self.value!r})"


def _as_constant(value):
    # Anything non-numeric is left for check() to report
    if isinstance(value, (Real, np.integer, np.floating)) and not isinstance(value, bool):
        return Constant(value)
    return value


@expression_class(Shape.VECTOR, Degree.CONSTANT)
class ConstantVector(VectorExpression):
    """Vector of constants.

    Args:
        elements: Numbers, :class:`Constant` objects or a 1-D numpy array
    """

    element_type = Constant
    name = "constant vector"

    def __init__(self, elements):
        super().__init__(_as_constant(v) for v in elements)

    def variables(self) -> list:
        self.validate()
        return []

    def to_numpy(self) -> np.ndarray:
        return self.constant()


@expression_class(Shape.MATRIX, Degree.CONSTANT)
class ConstantMatrix(MatrixExpression):
    """Matrix of constants.

    Args:
        rows: Nested sequences of numbers or :class:`Constant` objects, or a 2-D numpy array
    """

    element_type = Constant
    name = "constant matrix"

    def __init__(self, rows):
        super().__init__([_as_constant(v) for v in row] for row in rows)

    def variables(self) -> list:
        self.validate()
        return []

    def to_numpy(self) -> np.ndarray:
        return self.constant()
