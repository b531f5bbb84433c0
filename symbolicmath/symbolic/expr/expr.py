"""Base classes for symbolic expressions.

Every expression in symbolicmath occupies one cell of two orthogonal lattices:

- the degree lattice ``Constant < Variable < Monomial < Polynomial``
- the shape lattice ``Scalar < Vector < Matrix``

Concrete classes register themselves for their cell with
:func:`expression_class`, which lets the algebra look up, for example, "the
vector class whose elements are monomials" without importing it directly.

All expressions are immutable values. Operators build new expressions:

- ``+``, ``-``, ``*``, ``@``, ``**`` and unary ``-`` map to :meth:`Expr.plus`,
  :meth:`Expr.minus`, :meth:`Expr.multiply` and :meth:`Expr.power`
- ``<=`` and ``>=`` build constraints (see :mod:`.constraint`)
- ``==`` is value equality, so variables can be used as dictionary keys;
  use :meth:`Expr.eq` to build an equality constraint
"""

from enum import IntEnum
from numbers import Real
from typing import Dict, List, Optional, Sequence, Tuple, Type

import numpy as np

from symbolicmath.errors import (
    ColumnMismatchError,
    ConstantCoefficientError,
    EmptyContainerError,
    InvalidElementError,
    MissingCoefficientTargetError,
    SymbolicError,
    UnsupportedOperandError,
)


class Degree(IntEnum):
    """Position of an expression class in the degree lattice."""

    CONSTANT = 0
    VARIABLE = 1
    MONOMIAL = 2
    POLYNOMIAL = 3


class Shape(IntEnum):
    """Position of an expression class in the shape lattice."""

    SCALAR = 0
    VECTOR = 1
    MATRIX = 2


_EXPRESSION_CLASSES: Dict[Tuple[Shape, Degree], Type["Expr"]] = {}


def expression_class(shape: Shape, degree: Degree):
    """Decorator to register an expression class for a (shape, degree) cell."""

    def register(cls):
        cls.shape_class = shape
        cls.degree_class = degree
        _EXPRESSION_CLASSES[(shape, degree)] = cls
        return cls

    return register


def lookup_class(shape: Shape, degree: Degree) -> Type["Expr"]:
    """Return the expression class registered for a (shape, degree) cell."""
    cls = _EXPRESSION_CLASSES.get((Shape(shape), Degree(degree)))
    if cls is None:
        raise NotImplementedError(f"No expression class for {Shape(shape).name} {Degree(degree).name}")
    return cls


def promote(scalar: "ScalarExpression", degree: Degree) -> "ScalarExpression":
    """Promote a scalar expression up the degree lattice without changing its value.

    Args:
        scalar: Expression to promote
        degree: Target degree; must not be lower than the expression's own

    Returns:
        The expression itself, or its monomial/polynomial representation

    Raises:
        ValueError: If the target degree cannot represent the expression
    """
    if degree == scalar.degree_class:
        return scalar
    if degree == Degree.MONOMIAL and scalar.degree_class < Degree.MONOMIAL:
        return scalar.to_monomial()
    if degree == Degree.POLYNOMIAL:
        return scalar.to_polynomial()
    raise ValueError(f"Cannot promote {scalar!r} to {Degree(degree).name.lower()}")


def to_expr(value, operation: str = "to_expr") -> "Expr":
    """Convert a value to an Expr if it is not already one.

    Real numbers become :class:`Constant`; one and two dimensional numpy arrays
    become :class:`ConstantVector` and :class:`ConstantMatrix`. This is the only
    place foreign values enter the algebra.

    Args:
        value: An Expr, a real number or a numpy array
        operation: Name of the operation requesting the conversion, used in errors

    Returns:
        The input if it's already an Expr, otherwise its constant equivalent

    Raises:
        UnsupportedOperandError: If the value has no symbolic equivalent

    Example:
        >>> to_expr(5.0)  # Returns Const(5.0)
        >>> to_expr(np.eye(2))  # Returns a 2x2 ConstantMatrix
    """
    if isinstance(value, Expr):
        return value
    if isinstance(value, (Real, np.integer, np.floating)) and not isinstance(value, bool):
        return lookup_class(Shape.SCALAR, Degree.CONSTANT)(value)
    if isinstance(value, np.ndarray) and value.dtype.kind in "iuf":
        if value.ndim == 0:
            return lookup_class(Shape.SCALAR, Degree.CONSTANT)(value.item())
        if value.ndim == 1:
            return lookup_class(Shape.VECTOR, Degree.CONSTANT)(value)
        if value.ndim == 2:
            return lookup_class(Shape.MATRIX, Degree.CONSTANT)(value)
    raise UnsupportedOperandError(operation, value)


def unique_variables(variables) -> list:
    """Deduplicate variables by identity, keeping first-appearance order."""
    return list(dict.fromkeys(variables))


def coefficient_targets(expr: "Expr", wrt=None) -> list:
    """Resolve the ordered list of variables linear coefficients are taken against."""
    if wrt is None:
        targets = expr.variables()
        if not targets:
            raise ConstantCoefficientError(expr)
        return targets
    targets = list(wrt)
    if not targets:
        raise MissingCoefficientTargetError(expr)
    return targets


class Expr:
    """Base class for symbolic expressions in optimization models.

    Expr defines the uniform interface shared by every scalar, vector and
    matrix expression:

    - Validation: :meth:`check`, :meth:`validate`
    - Queries: :meth:`variables`, :meth:`dims`, :meth:`degree`, :meth:`constant`, :meth:`at`
    - Algebra: :meth:`plus`, :meth:`minus`, :meth:`multiply`, :meth:`power`, :meth:`transpose`
    - Constraints: :meth:`comparison`, :meth:`less_eq`, :meth:`greater_eq`, :meth:`eq`

    Attributes:
        shape_class (Shape): Cell of the shape lattice, set by :func:`expression_class`
        degree_class (Degree): Cell of the degree lattice, set by :func:`expression_class`
        __array_priority__: Priority for operations with numpy arrays (set to 1000)

    Note:
        When used in operations with numpy arrays, Expr objects take precedence,
        so ``np.array([1.0, 2.0]) + v`` calls ``v.__radd__``.
    """

    # Give Expr objects higher priority than numpy arrays in operations
    __array_priority__ = 1000

    shape_class: Shape
    degree_class: Degree

    # Validation

    def check(self) -> Optional[SymbolicError]:
        """Return the validation error for this expression, or None if it is well formed."""
        raise NotImplementedError(f"check() not implemented for {self.__class__.__name__}")

    def validate(self) -> "Expr":
        """Raise this expression's validation error, if any.

        Returns:
            Expr: self, so calls can be chained
        """
        err = self.check()
        if err is not None:
            raise err
        return self

    # Queries

    def variables(self) -> list:
        raise NotImplementedError(f"variables() not implemented for {self.__class__.__name__}")

    def dims(self) -> List[int]:
        raise NotImplementedError(f"dims() not implemented for {self.__class__.__name__}")

    def degree(self) -> int:
        raise NotImplementedError(f"degree() not implemented for {self.__class__.__name__}")

    def constant(self):
        raise NotImplementedError(f"constant() not implemented for {self.__class__.__name__}")

    def at(self, ii: int, jj: int) -> "ScalarExpression":
        raise NotImplementedError(f"at() not implemented for {self.__class__.__name__}")

    def transpose(self) -> "Expr":
        raise NotImplementedError(f"transpose() not implemented for {self.__class__.__name__}")

    @property
    def T(self) -> "Expr":
        """Transpose property, equivalent to :meth:`transpose`.

        Example:
            >>> v = new_variable_vector(3)
            >>> v.T.dims()  # [1, 3]
        """
        return self.transpose()

    # Algebra

    def plus(self, other) -> "Expr":
        """Add another expression (or number, or numpy array) to this one."""
        from symbolicmath.symbolic.algebra import plus

        return plus(self, other)

    def minus(self, other) -> "Expr":
        """Subtract another expression from this one."""
        from symbolicmath.symbolic.algebra import minus

        return minus(self, other)

    def multiply(self, other) -> "Expr":
        """Multiply this expression by another (matrix product or scalar scaling)."""
        from symbolicmath.symbolic.algebra import multiply

        return multiply(self, other)

    def power(self, exponent: int) -> "Expr":
        """Raise this expression to a non-negative integer power."""
        from symbolicmath.symbolic.algebra import power

        return power(self, exponent)

    # Constraints

    def comparison(self, other, sense):
        """Build a constraint between this expression and another.

        Args:
            other: Right-hand side expression, number or numpy array
            sense: A :class:`ConstrSense` or one of ``"<="``, ``">="``, ``"=="``

        Returns:
            ScalarConstraint, VectorConstraint or MatrixConstraint
        """
        from symbolicmath.symbolic.algebra import comparison

        return comparison(self, other, sense)

    def less_eq(self, other):
        return self.comparison(other, "<=")

    def greater_eq(self, other):
        return self.comparison(other, ">=")

    def eq(self, other):
        return self.comparison(other, "==")

    # Operators

    def __add__(self, other):
        return self.plus(other)

    def __radd__(self, other):
        return to_expr(other, "Plus").plus(self)

    def __sub__(self, other):
        return self.minus(other)

    def __rsub__(self, other):
        # e.g. 5 - x  =>  Const(5).minus(x)
        return to_expr(other, "Minus").minus(self)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return to_expr(other, "Multiply").multiply(self)

    def __matmul__(self, other):
        return self.multiply(other)

    def __rmatmul__(self, other):
        return to_expr(other, "Multiply").multiply(self)

    def __neg__(self):
        return self.multiply(-1.0)

    def __pow__(self, exponent):
        return self.power(exponent)

    def __le__(self, other):
        return self.less_eq(other)

    def __ge__(self, other):
        return self.greater_eq(other)

    # Value semantics

    def _key(self) -> tuple:
        raise NotImplementedError(f"_key() not implemented for {self.__class__.__name__}")

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))


class ScalarExpression(Expr):
    """Base class for scalar expressions (dims ``[1, 1]``).

    Scalar expressions describe themselves as a list of terms, each a
    ``(footprint, coefficient)`` pair where the footprint is the canonical
    tuple of ``(variable, exponent)`` pairs sorted by variable id. The generic
    queries below are all computed from :meth:`terms`.
    """

    def terms(self) -> list:
        raise NotImplementedError(f"terms() not implemented for {self.__class__.__name__}")

    def to_monomial(self):
        raise NotImplementedError(f"to_monomial() not implemented for {self.__class__.__name__}")

    def to_polynomial(self):
        raise NotImplementedError(f"to_polynomial() not implemented for {self.__class__.__name__}")

    def dims(self) -> List[int]:
        return [1, 1]

    def at(self, ii: int, jj: int) -> "ScalarExpression":
        from symbolicmath.symbolic.dims import check_index

        check_index(self, ii, jj)
        return self

    def transpose(self) -> "ScalarExpression":
        """The transpose of a scalar is the scalar itself."""
        return self.validate()

    def constant(self) -> float:
        """Return the coefficient of the factor-free term, or 0.0 if there is none."""
        self.validate()
        return float(sum(c for fp, c in self.terms() if not fp))

    def degree(self) -> int:
        """Return the highest total exponent across the terms with a nonzero coefficient."""
        self.validate()
        return max(
            (sum(exp for _, exp in fp) for fp, c in self.terms() if c != 0.0), default=0
        )

    def linear_coeff(self, wrt: Optional[Sequence] = None) -> np.ndarray:
        """Return the first-degree coefficients with respect to ``wrt``.

        Args:
            wrt: Ordered variables to extract coefficients for. Defaults to
                :meth:`variables`.

        Returns:
            np.ndarray: Array of shape ``(len(wrt),)``

        Raises:
            MissingCoefficientTargetError: If ``wrt`` is empty
            ConstantCoefficientError: If ``wrt`` is omitted and the expression has no variables
        """
        self.validate()
        targets = coefficient_targets(self, wrt)
        positions = {v: ii for ii, v in enumerate(targets)}
        coeffs = np.zeros(len(targets))
        for fp, c in self.terms():
            if len(fp) == 1 and fp[0][1] == 1 and fp[0][0] in positions:
                coeffs[positions[fp[0][0]]] += c
        return coeffs

    def simplify(self) -> "ScalarExpression":
        """Merge like terms and return the lowest-degree equivalent expression."""
        from symbolicmath.symbolic.algebra import from_terms, merge_terms

        self.validate()
        return from_terms(merge_terms(self.terms()))


def _check_element(container: str, index, element, element_type) -> Optional[SymbolicError]:
    if not isinstance(element, element_type):
        return InvalidElementError(
            container, index, UnsupportedOperandError(f"{container} element", element)
        )
    err = element.check()
    if err is not None:
        return InvalidElementError(container, index, err)
    return None


class VectorExpression(Expr):
    """Base class for column vectors of scalar expressions (dims ``[n, 1]``).

    Subclasses set ``element_type`` to the scalar class they hold and ``name``
    to the phrase used in error messages.

    Attributes:
        elements (tuple): The scalar entries of the vector
    """

    element_type: Type[ScalarExpression] = ScalarExpression
    name = "vector"

    def __init__(self, elements):
        self.elements = tuple(elements)

    def check(self) -> Optional[SymbolicError]:
        """Verify the vector is non-empty and every element is well formed."""
        if len(self.elements) == 0:
            return EmptyContainerError(self.name)
        for ii, element in enumerate(self.elements):
            err = _check_element(self.name, ii, element, self.element_type)
            if err is not None:
                return err
        return None

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __getitem__(self, ii: int) -> ScalarExpression:
        return self.at_vec(ii)

    def dims(self) -> List[int]:
        return [len(self.elements), 1]

    def at(self, ii: int, jj: int) -> ScalarExpression:
        from symbolicmath.symbolic.dims import check_index

        self.validate()
        check_index(self, ii, jj)
        return self.elements[ii]

    def at_vec(self, ii: int) -> ScalarExpression:
        return self.at(ii, 0)

    def variables(self) -> list:
        self.validate()
        return unique_variables(v for element in self.elements for v in element.variables())

    def constant(self) -> np.ndarray:
        """Return the constant term of every element as an array of shape ``(n,)``."""
        self.validate()
        return np.array([element.constant() for element in self.elements], dtype=float)

    def degree(self) -> int:
        self.validate()
        return max(element.degree() for element in self.elements)

    def linear_coeff(self, wrt: Optional[Sequence] = None) -> np.ndarray:
        """Return the matrix ``A`` of first-degree coefficients, shape ``(n, len(wrt))``.

        Raises:
            MissingCoefficientTargetError: If ``wrt`` is empty
            ConstantCoefficientError: If ``wrt`` is omitted and the vector has no variables
        """
        self.validate()
        targets = coefficient_targets(self, wrt)
        return np.vstack([element.linear_coeff(targets) for element in self.elements])

    def transpose(self) -> "MatrixExpression":
        """Return the ``1 x n`` matrix with the same element class."""
        self.validate()
        return lookup_class(Shape.MATRIX, self.degree_class)([list(self.elements)])

    def _promote_elements(self, degree: Degree) -> "VectorExpression":
        self.validate()
        return lookup_class(Shape.VECTOR, degree)(promote(e, degree) for e in self.elements)

    def to_monomial_vector(self) -> "VectorExpression":
        return self._promote_elements(Degree.MONOMIAL)

    def to_polynomial_vector(self) -> "VectorExpression":
        return self._promote_elements(Degree.POLYNOMIAL)

    def _key(self) -> tuple:
        return self.elements

    def __repr__(self):
        inner = ", ".join(repr(e) for e in self.elements)
        return f"{self.__class__.__name__}([{inner}])"


class MatrixExpression(Expr):
    """Base class for rectangular matrices of scalar expressions.

    Attributes:
        elements (tuple): Tuple of row tuples
    """

    element_type: Type[ScalarExpression] = ScalarExpression
    name = "matrix"

    def __init__(self, rows):
        self.elements = tuple(tuple(row) for row in rows)

    def check(self) -> Optional[SymbolicError]:
        """Verify the matrix is non-empty, rectangular and every element is well formed."""
        if len(self.elements) == 0 or len(self.elements[0]) == 0:
            return EmptyContainerError(self.name)
        n_cols = len(self.elements[0])
        for ii, row in enumerate(self.elements):
            if len(row) != n_cols:
                return ColumnMismatchError(n_cols, len(row), ii)
        for ii, row in enumerate(self.elements):
            for jj, element in enumerate(row):
                err = _check_element(self.name, (ii, jj), element, self.element_type)
                if err is not None:
                    return err
        return None

    def __getitem__(self, index: Tuple[int, int]) -> ScalarExpression:
        ii, jj = index
        return self.at(ii, jj)

    def dims(self) -> List[int]:
        if len(self.elements) == 0:
            return [0, 0]
        return [len(self.elements), len(self.elements[0])]

    def at(self, ii: int, jj: int) -> ScalarExpression:
        from symbolicmath.symbolic.dims import check_index

        self.validate()
        check_index(self, ii, jj)
        return self.elements[ii][jj]

    def variables(self) -> list:
        self.validate()
        return unique_variables(
            v for row in self.elements for element in row for v in element.variables()
        )

    def constant(self) -> np.ndarray:
        """Return the constant term of every element as an array of shape ``(rows, cols)``."""
        self.validate()
        return np.array([[e.constant() for e in row] for row in self.elements], dtype=float)

    def degree(self) -> int:
        self.validate()
        return max(e.degree() for row in self.elements for e in row)

    def transpose(self) -> "MatrixExpression":
        """Swap rows and columns, keeping the element class."""
        self.validate()
        return type(self)(list(col) for col in zip(*self.elements))

    def _promote_elements(self, degree: Degree) -> "MatrixExpression":
        self.validate()
        return lookup_class(Shape.MATRIX, degree)(
            [promote(e, degree) for e in row] for row in self.elements
        )

    def to_monomial_matrix(self) -> "MatrixExpression":
        return self._promote_elements(Degree.MONOMIAL)

    def to_polynomial_matrix(self) -> "MatrixExpression":
        return self._promote_elements(Degree.POLYNOMIAL)

    def _key(self) -> tuple:
        return self.elements

    def __repr__(self):
        rows = ", ".join("[" + ", ".join(repr(e) for e in row) + "]" for row in self.elements)
        return f"{self.__class__.__name__}([{rows}])"
