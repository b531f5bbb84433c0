"""Decision variables.

A :class:`Variable` carries nothing but a unique integer id. Ids come from a
:class:`VariableCounter`; the process-wide default counter is created once,
is never reset, and is safe to use from several threads.

Example:
    >>> x = new_variable()
    >>> v = new_variable_vector(3)
    >>> counter = VariableCounter()  # deterministic ids for a single test
    >>> new_variable(counter).id
    0
"""

import itertools
import threading
from typing import Optional

from .expr import (
    Degree,
    MatrixExpression,
    ScalarExpression,
    Shape,
    VectorExpression,
    expression_class,
)


class VariableCounter:
    """Thread-safe, monotonically increasing source of variable ids."""

    def __init__(self, start: int = 0):
        self._ids = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)


_DEFAULT_COUNTER = VariableCounter()


@expression_class(Shape.SCALAR, Degree.VARIABLE)
class Variable(ScalarExpression):
    """A scalar decision variable.

    Equality and hashing are by id. Create variables with :func:`new_variable`
    rather than by choosing ids by hand.

    Attributes:
        id (int): Unique identifier (read-only)
    """

    def __init__(self, id: int):
        self._id = int(id)

    @property
    def id(self) -> int:
        return self._id

    def check(self):
        return None

    def variables(self) -> list:
        return [self]

    def terms(self) -> list:
        return [(((self, 1),), 1.0)]

    def constant(self) -> float:
        return 0.0

    def degree(self) -> int:
        return 1

    def to_monomial(self):
        from .monomial import Monomial

        return Monomial(1.0, (self,), (1,))

    def to_polynomial(self):
        return self.to_monomial().to_polynomial()

    def _key(self) -> tuple:
        return (self.id,)

    def __repr__(self):
        return f"Var({self.id})"


def new_variable(counter: Optional[VariableCounter] = None) -> Variable:
    """Create a variable with a fresh id from ``counter`` (default: the global counter)."""
    counter = counter if counter is not None else _DEFAULT_COUNTER
    return Variable(counter.next_id())


@expression_class(Shape.VECTOR, Degree.VARIABLE)
class VariableVector(VectorExpression):
    """Vector of variables.

    The linear coefficients of a variable vector with respect to its own
    variables form the identity matrix.
    """

    element_type = Variable
    name = "variable vector"


@expression_class(Shape.MATRIX, Degree.VARIABLE)
class VariableMatrix(MatrixExpression):
    """Matrix of variables."""

    element_type = Variable
    name = "variable matrix"


def new_variable_vector(n: int, counter: Optional[VariableCounter] = None) -> VariableVector:
    """Create a vector of ``n`` fresh variables."""
    if n < 1:
        raise ValueError(f"new_variable_vector requires a positive length; received {n}")
    return VariableVector(new_variable(counter) for _ in range(n))


def new_variable_matrix(
    rows: int, cols: int, counter: Optional[VariableCounter] = None
) -> VariableMatrix:
    """Create a ``rows x cols`` matrix of fresh variables, filled row by row."""
    if rows < 1 or cols < 1:
        raise ValueError(
            f"new_variable_matrix requires positive dimensions; received ({rows}, {cols})"
        )
    return VariableMatrix([new_variable(counter) for _ in range(cols)] for _ in range(rows))
