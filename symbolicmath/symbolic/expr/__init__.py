# Core base classes and lattice registry
from .expr import (
    Degree,
    Expr,
    MatrixExpression,
    ScalarExpression,
    Shape,
    VectorExpression,
    expression_class,
    lookup_class,
    promote,
    to_expr,
    unique_variables,
)

# Atoms
from .constant import Constant, ConstantMatrix, ConstantVector
from .variable import (
    Variable,
    VariableCounter,
    VariableMatrix,
    VariableVector,
    new_variable,
    new_variable_matrix,
    new_variable_vector,
)

# Terms
from .monomial import Monomial, MonomialMatrix, MonomialVector
from .polynomial import Polynomial, PolynomialMatrix, PolynomialVector

# Constraints
from .constraint import (
    ConstrSense,
    Constraint,
    MatrixConstraint,
    ScalarConstraint,
    VectorConstraint,
)

# Linear algebra operations
from .linalg import broadcast, concretize, hstack, transpose, vstack

__all__ = [
    # Core base classes and lattice registry
    "Degree",
    "Shape",
    "Expr",
    "ScalarExpression",
    "VectorExpression",
    "MatrixExpression",
    "expression_class",
    "lookup_class",
    "promote",
    "to_expr",
    "unique_variables",
    # Atoms
    "Constant",
    "ConstantVector",
    "ConstantMatrix",
    "Variable",
    "VariableCounter",
    "VariableVector",
    "VariableMatrix",
    "new_variable",
    "new_variable_vector",
    "new_variable_matrix",
    # Terms
    "Monomial",
    "MonomialVector",
    "MonomialMatrix",
    "Polynomial",
    "PolynomialVector",
    "PolynomialMatrix",
    # Constraints
    "ConstrSense",
    "Constraint",
    "ScalarConstraint",
    "VectorConstraint",
    "MatrixConstraint",
    # Linear algebra operations
    "transpose",
    "hstack",
    "vstack",
    "concretize",
    "broadcast",
]
