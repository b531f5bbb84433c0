"""Tests for the atomic expressions: constants and variables.

Tests cover:
- VariableCounter id allocation, including concurrent use
- Variable builders for scalars, vectors and matrices
- Value equality, hashing and read-only identity fields
- Boundary conversion of numbers and numpy arrays (to_expr)
- Scalar queries on atoms
"""

import threading

import numpy as np
import pytest

from symbolicmath.errors import (
    ConstantCoefficientError,
    IndexOutOfRangeError,
    MissingCoefficientTargetError,
    UnsupportedOperandError,
)
from symbolicmath.symbolic.expr import (
    Constant,
    ConstantMatrix,
    ConstantVector,
    Monomial,
    Polynomial,
    Variable,
    VariableCounter,
    VariableMatrix,
    VariableVector,
    new_variable,
    new_variable_matrix,
    new_variable_vector,
    to_expr,
)

# =============================================================================
# Variable Ids
# =============================================================================


def test_counter_starts_at_given_value():
    counter = VariableCounter(start=5)
    assert counter.next_id() == 5
    assert counter.next_id() == 6


def test_new_variable_uses_injected_counter():
    counter = VariableCounter()
    x = new_variable(counter)
    y = new_variable(counter)
    assert (x.id, y.id) == (0, 1)


def test_default_counter_gives_distinct_ids():
    ids = {new_variable().id for _ in range(50)}
    assert len(ids) == 50


def test_counter_is_thread_safe():
    counter = VariableCounter()
    results = []
    lock = threading.Lock()

    def draw():
        drawn = [counter.next_id() for _ in range(200)]
        with lock:
            results.extend(drawn)

    threads = [threading.Thread(target=draw) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == list(range(1600))


# =============================================================================
# Builders
# =============================================================================


def test_new_variable_vector():
    counter = VariableCounter()
    v = new_variable_vector(3, counter)
    assert isinstance(v, VariableVector)
    assert v.dims() == [3, 1]
    assert len(v) == 3
    assert [x.id for x in v] == [0, 1, 2]


def test_new_variable_matrix_fills_row_by_row():
    counter = VariableCounter()
    m = new_variable_matrix(2, 3, counter)
    assert isinstance(m, VariableMatrix)
    assert m.dims() == [2, 3]
    assert m.at(0, 2).id == 2
    assert m.at(1, 0).id == 3
    assert m[1, 2].id == 5


@pytest.mark.parametrize("n", [0, -1])
def test_new_variable_vector_rejects_non_positive_length(n):
    with pytest.raises(ValueError, match="positive length"):
        new_variable_vector(n)


def test_new_variable_matrix_rejects_non_positive_dims():
    with pytest.raises(ValueError, match="positive dimensions"):
        new_variable_matrix(2, 0)


# =============================================================================
# Equality and Hashing
# =============================================================================


def test_variables_compare_by_id():
    assert Variable(3) == Variable(3)
    assert Variable(3) != Variable(4)
    assert hash(Variable(3)) == hash(Variable(3))


def test_variables_as_dict_keys():
    x, y = new_variable(), new_variable()
    weights = {x: 1.0, y: 2.0}
    assert weights[Variable(x.id)] == 1.0


def test_equality_is_value_based_not_a_constraint():
    x = new_variable()
    assert (x == x) is True
    assert (Constant(2.0) == Constant(2.0)) is True
    assert Constant(2.0) != x


def test_hashed_atom_fields_are_read_only():
    x = new_variable()
    weights = {x: 1.0}
    with pytest.raises(AttributeError):
        x.id = x.id + 1000
    assert weights[x] == 1.0
    c = Constant(2.0)
    with pytest.raises(AttributeError):
        c.value = 3.0
    assert c == Constant(2.0)


# =============================================================================
# Boundary Conversion
# =============================================================================


@pytest.mark.parametrize("value", [2, 2.5, np.float64(1.5), np.int32(7)])
def test_to_expr_numbers(value):
    expr = to_expr(value)
    assert isinstance(expr, Constant)
    assert expr.value == float(value)


def test_to_expr_arrays():
    assert isinstance(to_expr(np.array(4.0)), Constant)

    vec = to_expr(np.array([1.0, 2.0, 3.0]))
    assert isinstance(vec, ConstantVector)
    assert np.array_equal(vec.to_numpy(), [1.0, 2.0, 3.0])

    mat = to_expr(np.eye(2))
    assert isinstance(mat, ConstantMatrix)
    assert np.array_equal(mat.to_numpy(), np.eye(2))


def test_to_expr_returns_expressions_unchanged():
    x = new_variable()
    assert to_expr(x) is x


@pytest.mark.parametrize("value", ["abc", True, [1.0, 2.0], np.zeros((2, 2, 2)), None])
def test_to_expr_rejects_foreign_values(value):
    with pytest.raises(UnsupportedOperandError) as exc_info:
        to_expr(value, "Plus")
    assert exc_info.value.operation == "Plus"
    assert isinstance(exc_info.value, TypeError)


# =============================================================================
# Scalar Queries
# =============================================================================


def test_constant_queries():
    k = Constant(3)
    assert k.value == 3.0
    assert k.variables() == []
    assert k.degree() == 0
    assert k.constant() == 3.0
    assert k.dims() == [1, 1]
    assert repr(k) == "Const(3.0)"


def test_variable_queries():
    counter = VariableCounter()
    x = new_variable(counter)
    assert x.variables() == [x]
    assert x.degree() == 1
    assert x.constant() == 0.0
    assert repr(x) == "Var(0)"


def test_scalar_at():
    x = new_variable()
    assert x.at(0, 0) is x
    with pytest.raises(IndexOutOfRangeError):
        x.at(1, 0)
    with pytest.raises(IndexError):
        Constant(1.0).at(0, 1)


def test_variable_linear_coeff():
    x, y = new_variable(), new_variable()
    assert np.array_equal(x.linear_coeff([y, x]), [0.0, 1.0])
    assert np.array_equal(x.linear_coeff(), [1.0])


def test_linear_coeff_target_errors():
    x = new_variable()
    with pytest.raises(MissingCoefficientTargetError):
        x.linear_coeff([])
    with pytest.raises(ConstantCoefficientError):
        Constant(2.0).linear_coeff()
    # ConstantCoefficientError is a MissingCoefficientTargetError
    with pytest.raises(MissingCoefficientTargetError):
        Constant(2.0).linear_coeff()


def test_constant_linear_coeff_with_targets_is_zero():
    x = new_variable()
    assert np.array_equal(Constant(2.0).linear_coeff([x]), [0.0])


def test_atom_promotion():
    x = new_variable()
    assert x.to_monomial() == Monomial(1.0, [x], [1])
    assert x.to_polynomial() == Polynomial([Monomial(1.0, [x], [1])])
    assert Constant(2.0).to_monomial() == Monomial(2.0)
    assert Constant(2.0).to_polynomial() == Polynomial([Monomial(2.0)])
