"""Monomials: a coefficient times a product of variable powers.

A monomial with no variable factors is a constant. The pair of tuples
``variable_factors`` and ``exponents`` must have equal length; :meth:`check`
reports an :class:`ArityMismatchError` otherwise. Every exponent must be a
positive integer.

Like terms are detected through :meth:`Monomial.footprint`, which merges
repeated variables and sorts factors by variable id so that ``x*y`` and
``y*x`` are like terms. Value equality of well-formed monomials uses the
footprint as well, so factor order does not affect ``==`` or hashing.
"""

from typing import Optional, Sequence, Tuple

from symbolicmath.errors import (
    ArityMismatchError,
    InvalidElementError,
    NonPositiveExponentError,
    UnsupportedOperandError,
)

from .expr import (
    Degree,
    MatrixExpression,
    ScalarExpression,
    Shape,
    VectorExpression,
    expression_class,
    unique_variables,
)
from .variable import Variable


def canonical_footprint(pairs) -> Tuple[Tuple[Variable, int], ...]:
    """Merge repeated variables and sort ``(variable, exponent)`` pairs by variable id.

    Variables whose exponents sum to zero are dropped.
    """
    exponents = {}
    for variable, exponent in pairs:
        exponents[variable] = exponents.get(variable, 0) + exponent
    return tuple(
        sorted(((v, e) for v, e in exponents.items() if e != 0), key=lambda item: item[0].id)
    )


@expression_class(Shape.SCALAR, Degree.MONOMIAL)
class Monomial(ScalarExpression):
    """A single polynomial term ``coefficient * x1**e1 * x2**e2 * ...``.

    Args:
        coefficient: Real coefficient (default 1.0)
        variable_factors: Variables in the product
        exponents: Positive integer exponent for each variable. Defaults to 1 for each.

    Example:
        >>> x, y = new_variable(), new_variable()
        >>> m = Monomial(3.0, [x, y], [2, 1])  # 3 x^2 y
        >>> m.degree()
        3
    """

    def __init__(
        self,
        coefficient: float = 1.0,
        variable_factors: Sequence[Variable] = (),
        exponents: Optional[Sequence[int]] = None,
    ):
        self.coefficient = float(coefficient)
        self.variable_factors = tuple(variable_factors)
        if exponents is None:
            exponents = (1,) * len(self.variable_factors)
        self.exponents = tuple(int(e) for e in exponents)

    def check(self):
        if len(self.variable_factors) != len(self.exponents):
            return ArityMismatchError(len(self.variable_factors), len(self.exponents))
        for ii, factor in enumerate(self.variable_factors):
            if not isinstance(factor, Variable):
                return InvalidElementError(
                    "monomial", ii, UnsupportedOperandError("monomial factor", factor)
                )
        for ii, (factor, exponent) in enumerate(zip(self.variable_factors, self.exponents)):
            if exponent < 1:
                return InvalidElementError(
                    "monomial", ii, NonPositiveExponentError(factor, exponent)
                )
        return None

    def is_constant(self) -> bool:
        return len(self.variable_factors) == 0

    def footprint(self) -> Tuple[Tuple[Variable, int], ...]:
        return canonical_footprint(zip(self.variable_factors, self.exponents))

    def variables(self) -> list:
        self.validate()
        return unique_variables(self.variable_factors)

    def terms(self) -> list:
        return [(self.footprint(), self.coefficient)]

    def to_monomial(self) -> "Monomial":
        return self

    def to_polynomial(self):
        from .polynomial import Polynomial

        return Polynomial([self])

    def _key(self) -> tuple:
        # Factor order is not significant once the monomial is well formed
        if self.check() is not None:
            return (self.coefficient, self.variable_factors, self.exponents)
        return (self.coefficient, self.footprint())

    def __repr__(self):
        factors = "".join(
            f"*{v!r}**{e}" if e != 1 else f"*{v!r}"
            for v, e in zip(self.variable_factors, self.exponents)
        )
        return f"Monomial({self.coefficient!r}{factors})"


@expression_class(Shape.VECTOR, Degree.MONOMIAL)
class MonomialVector(VectorExpression):
    element_type = Monomial
    name = "monomial vector"


@expression_class(Shape.MATRIX, Degree.MONOMIAL)
class MonomialMatrix(MatrixExpression):
    element_type = Monomial
    name = "monomial matrix"
