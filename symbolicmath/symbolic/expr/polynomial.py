"""Polynomials: ordered sums of monomials.

A polynomial must hold at least one monomial. Construction does not merge
like terms; every algebra operation returns a merged result (see
:mod:`symbolicmath.symbolic.algebra`).
"""

from typing import Optional, Sequence

from symbolicmath.errors import EmptyContainerError, InvalidElementError, UnsupportedOperandError

from .expr import (
    Degree,
    MatrixExpression,
    ScalarExpression,
    Shape,
    VectorExpression,
    expression_class,
    unique_variables,
)
from .monomial import Monomial


@expression_class(Shape.SCALAR, Degree.POLYNOMIAL)
class Polynomial(ScalarExpression):
    """Sum of monomial terms.

    Attributes:
        monomials (tuple): The terms, in order

    Example:
        >>> x = new_variable()
        >>> p = Polynomial([Monomial(2.0, [x]), Monomial(1.0)])  # 2x + 1
        >>> p.constant()
        1.0
    """

    def __init__(self, monomials: Sequence[Monomial]):
        self.monomials = tuple(monomials)

    def check(self):
        if len(self.monomials) == 0:
            return EmptyContainerError("polynomial")
        for ii, monomial in enumerate(self.monomials):
            if not isinstance(monomial, Monomial):
                return InvalidElementError(
                    "polynomial", ii, UnsupportedOperandError("polynomial term", monomial)
                )
            err = monomial.check()
            if err is not None:
                return InvalidElementError("polynomial", ii, err)
        return None

    def variables(self) -> list:
        self.validate()
        return unique_variables(v for m in self.monomials for v in m.variable_factors)

    def terms(self) -> list:
        return [(m.footprint(), m.coefficient) for m in self.monomials]

    def constant_monomial_index(self) -> Optional[int]:
        """Return the index of the first factor-free monomial, or None."""
        self.validate()
        for ii, monomial in enumerate(self.monomials):
            if monomial.is_constant():
                return ii
        return None

    def to_polynomial(self) -> "Polynomial":
        return self

    def _key(self) -> tuple:
        return self.monomials

    def __repr__(self):
        return "(" + " + ".join(repr(m) for m in self.monomials) + ")"


@expression_class(Shape.VECTOR, Degree.POLYNOMIAL)
class PolynomialVector(VectorExpression):
    element_type = Polynomial
    name = "polynomial vector"


@expression_class(Shape.MATRIX, Degree.POLYNOMIAL)
class PolynomialMatrix(MatrixExpression):
    element_type = Polynomial
    name = "polynomial matrix"
