"""Tests for the flat top-level namespace."""

import numpy as np

import symbolicmath as sm


def test_all_names_resolve():
    for name in sm.__all__:
        assert hasattr(sm, name), name


def test_flat_namespace_end_to_end():
    x = sm.new_variable_vector(2)
    A = np.array([[1.0, 1.0], [0.0, 1.0]])
    c = A @ x <= 1.0
    assert isinstance(c, sm.VectorConstraint)
    A_out, b_out = c.linear_inequality_representation(x.variables())
    assert np.array_equal(A_out, A)
    assert np.array_equal(b_out, [1.0, 1.0])


def test_errors_share_a_base():
    for name in [
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
    ]:
        assert issubclass(getattr(sm, name), sm.SymbolicError)


def test_linalg_submodule():
    v = sm.linalg.vstack(1.0, 2.0)
    assert isinstance(v, sm.ConstantVector)
