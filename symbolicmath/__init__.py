# Core symbolic expressions - flat namespace for most common functions
import symbolicmath.symbolic.expr.linalg as linalg
from symbolicmath.config import ReportConfig
from symbolicmath.errors import (
    ArityMismatchError,
    ColumnMismatchError,
    ConstantCoefficientError,
    DimensionError,
    EmptyContainerError,
    IndexOutOfRangeError,
    InvalidElementError,
    MissingCoefficientTargetError,
    NonPositiveExponentError,
    SymbolicError,
    UnsupportedOperandError,
)
from symbolicmath.symbolic.algebra import (
    comparison,
    from_terms,
    is_linear,
    is_quadratic,
    merge_terms,
    minus,
    multiply,
    plus,
    power,
    simplify,
)
from symbolicmath.symbolic.expr import (
    Constant,
    ConstantMatrix,
    ConstantVector,
    ConstrSense,
    Constraint,
    Degree,
    Expr,
    MatrixConstraint,
    MatrixExpression,
    Monomial,
    MonomialMatrix,
    MonomialVector,
    Polynomial,
    PolynomialMatrix,
    PolynomialVector,
    ScalarConstraint,
    ScalarExpression,
    Shape,
    Variable,
    VariableCounter,
    VariableMatrix,
    VariableVector,
    VectorConstraint,
    VectorExpression,
    hstack,
    new_variable,
    new_variable_matrix,
    new_variable_vector,
    to_expr,
    transpose,
    vstack,
)

__all__ = [
    # Core base classes
    "Expr",
    "ScalarExpression",
    "VectorExpression",
    "MatrixExpression",
    "Degree",
    "Shape",
    "to_expr",
    # Atoms
    "Constant",
    "ConstantVector",
    "ConstantMatrix",
    "Variable",
    "VariableVector",
    "VariableMatrix",
    "VariableCounter",
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
    # Algebra
    "plus",
    "minus",
    "multiply",
    "power",
    "simplify",
    "merge_terms",
    "from_terms",
    "is_linear",
    "is_quadratic",
    # Array operations
    "transpose",
    "hstack",
    "vstack",
    # Constraints
    "comparison",
    "ConstrSense",
    "Constraint",
    "ScalarConstraint",
    "VectorConstraint",
    "MatrixConstraint",
    # Errors
    "SymbolicError",
    "EmptyContainerError",
    "ColumnMismatchError",
    "ArityMismatchError",
    "NonPositiveExponentError",
    "InvalidElementError",
    "DimensionError",
    "IndexOutOfRangeError",
    "UnsupportedOperandError",
    "MissingCoefficientTargetError",
    "ConstantCoefficientError",
    # Reporting
    "ReportConfig",
    # Submodules
    "linalg",
]
