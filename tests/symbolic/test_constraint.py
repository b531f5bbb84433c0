"""Tests for constraints.

This module tests constraint types:
- ScalarConstraint, VectorConstraint, MatrixConstraint
- ConstrSense (<=, >=, ==)

Tests cover:
- Constraint creation through comparison, less_eq, greater_eq, eq and operators
- Broadcasting of a scalar side
- Dimension enforcement
- Linear (A, b) and (C, d) representations
"""

import numpy as np
import pytest

from symbolicmath.errors import DimensionError
from symbolicmath.symbolic.expr import (
    Constant,
    ConstantMatrix,
    ConstantVector,
    ConstrSense,
    MatrixConstraint,
    ScalarConstraint,
    VariableCounter,
    VectorConstraint,
    new_variable,
    new_variable_matrix,
    new_variable_vector,
)

# =============================================================================
# Basic Constraint Creation
# =============================================================================


def test_scalar_less_eq():
    v = new_variable()
    c = v.less_eq(5.0)
    assert isinstance(c, ScalarConstraint)
    assert c.left is v
    assert c.right == Constant(5.0)
    assert c.right.constant() == 5.0
    assert c.sense == ConstrSense.LESS_EQ
    assert c.sense == "<="


def test_operators_build_constraints():
    x = new_variable()
    assert (x <= 1.0).sense == ConstrSense.LESS_EQ
    assert (x >= 1.0).sense == ConstrSense.GREATER_EQ
    assert x.eq(1.0).sense == ConstrSense.EQUAL
    assert x.greater_eq(2).right == Constant(2.0)


def test_reflected_comparison_with_number_on_the_left():
    x = new_variable()
    c = 5.0 >= x
    # Python reflects to x <= 5.0
    assert isinstance(c, ScalarConstraint)
    assert c.left is x
    assert c.sense == ConstrSense.LESS_EQ


def test_comparison_accepts_string_sense():
    x = new_variable()
    c = x.comparison(0.0, ">=")
    assert c.sense is ConstrSense.GREATER_EQ
    with pytest.raises(ValueError):
        x.comparison(0.0, "<")


def test_constraint_repr():
    counter = VariableCounter()
    x = new_variable(counter)
    assert repr(x <= 5.0) == "Var(0) <= Const(5.0)"
    assert repr(x.eq(1)) == "Var(0) == Const(1.0)"


def test_constraints_compare_by_value():
    x = new_variable()
    assert (x <= 1.0) == (x <= 1.0)
    assert (x <= 1.0) != (x >= 1.0)
    assert len({x <= 1.0, x <= 1.0}) == 1


def test_constraint_sides_are_read_only():
    x = new_variable()
    c = x <= 1.0
    with pytest.raises(AttributeError):
        c.left = Constant(0.0)
    with pytest.raises(AttributeError):
        c.sense = ConstrSense.GREATER_EQ
    assert c == (x <= 1.0)


# =============================================================================
# Broadcasting and Dimensions
# =============================================================================


def test_vector_against_scalar_broadcasts():
    x = new_variable_vector(20)
    c = x.comparison(1.0, "<=")
    assert isinstance(c, VectorConstraint)
    assert c.right.dims() == [20, 1]
    assert len(c.right) == 20
    assert isinstance(c.right, ConstantVector)
    assert np.array_equal(c.right.constant(), np.ones(20))
    assert c.dims() == [20, 1]


def test_scalar_left_side_broadcasts():
    x = new_variable_vector(3)
    c = Constant(0.0).less_eq(x)
    assert isinstance(c, VectorConstraint)
    assert c.left.dims() == [3, 1]


def test_broadcast_keeps_scalar_element_class():
    y = new_variable()
    x = new_variable_vector(3)
    c = x.comparison(y, "==")
    assert c.right.dims() == [3, 1]
    assert all(e is y for e in c.right)


def test_vector_against_mismatched_vector():
    x = new_variable_vector(20)
    with pytest.raises(DimensionError) as exc_info:
        x.comparison(new_variable_vector(19), "<=")
    assert exc_info.value.operation == "Comparison"
    assert exc_info.value.left_dims == [20, 1]
    assert exc_info.value.right_dims == [19, 1]


def test_vector_against_numpy_array():
    x = new_variable_vector(3)
    c = x <= np.array([1.0, 2.0, 3.0])
    assert isinstance(c, VectorConstraint)
    assert isinstance(c.right, ConstantVector)


def test_matrix_constraint():
    M = new_variable_matrix(2, 2)
    c = M >= np.zeros((2, 2))
    assert isinstance(c, MatrixConstraint)
    assert c.dims() == [2, 2]
    assert isinstance(M.comparison(3.0, "<=").right, ConstantMatrix)


def test_matrix_against_vector_is_rejected():
    with pytest.raises(DimensionError, match="Comparison"):
        new_variable_matrix(2, 2) <= new_variable_vector(2)


def test_check_reports_mismatched_sides():
    c = VectorConstraint(new_variable_vector(2), ConstantVector([1.0, 2.0, 3.0]), "<=")
    err = c.check()
    assert isinstance(err, DimensionError)
    with pytest.raises(DimensionError):
        c.validate()


def test_variables_of_both_sides():
    x, y = new_variable(), new_variable()
    c = (x + 1.0) <= (y + x)
    assert c.variables() == [x, y]


# =============================================================================
# Linear Representations
# =============================================================================


def test_linear_inequality_representation():
    A = np.array([[1.0, 2.0], [3.0, 4.0]])
    x = new_variable_vector(2)
    c = ConstantMatrix(A) @ x <= np.array([5.0, 6.0])
    A_out, b_out = c.linear_inequality_representation(x.variables())
    assert np.array_equal(A_out, A)
    assert np.array_equal(b_out, [5.0, 6.0])


def test_greater_eq_representation_is_flipped():
    x = new_variable()
    c = x >= 1.0
    A, b = c.linear_inequality_representation()
    assert np.array_equal(A, [[-1.0]])
    assert np.array_equal(b, [-1.0])


def test_variables_on_both_sides_are_moved_left():
    x, y = new_variable(), new_variable()
    c = 2.0 * x + 1.0 <= y
    A, b = c.linear_inequality_representation([x, y])
    assert np.array_equal(A, [[2.0, -1.0]])
    assert np.array_equal(b, [-1.0])


def test_linear_equality_representation():
    x = new_variable_vector(2)
    c = x.eq(np.array([1.0, 2.0]))
    C, d = c.linear_equality_representation()
    assert np.array_equal(C, np.eye(2))
    assert np.array_equal(d, [1.0, 2.0])


def test_representation_rejects_wrong_sense():
    x = new_variable()
    with pytest.raises(ValueError, match="inequality"):
        x.eq(1.0).linear_inequality_representation()
    with pytest.raises(ValueError, match="equality"):
        (x <= 1.0).linear_equality_representation()


def test_representation_rejects_nonlinear_constraint():
    x = new_variable()
    c = x * x <= 1.0
    assert not c.is_linear()
    with pytest.raises(ValueError, match="not linear"):
        c.linear_inequality_representation()


def test_is_linear():
    x = new_variable_vector(2)
    assert (x <= 1.0).is_linear()
    assert not (x.T @ x <= 1.0).is_linear()
