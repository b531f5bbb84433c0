"""Error types raised by the symbolic expression algebra.

Every error derives from :class:`SymbolicError` and from the builtin exception
that matches its meaning, so callers can catch either ``SymbolicError`` or, for
example, ``ValueError``.

Validation errors are produced by ``check()`` and raised by ``validate()`` and
by every operation that receives an ill-formed operand. Nothing in the algebra
returns a partially built value.
"""

from typing import Any, Sequence, Tuple, Union


def format_dims(dims: Sequence[int]) -> str:
    """Format a dims list as ``(rows,cols)``."""
    return "(" + ",".join(str(d) for d in dims) + ")"


class SymbolicError(Exception):
    """Base class for all errors raised by symbolicmath."""


class EmptyContainerError(SymbolicError, ValueError):
    """A polynomial, vector or matrix was created without any elements.

    Attributes:
        container (str): Human readable name of the empty container
    """

    def __init__(self, container: str):
        self.container = container
        super().__init__(f"{container} is empty")


class ColumnMismatchError(SymbolicError, ValueError):
    """A matrix row has a different number of columns than row 0."""

    def __init__(self, expected: int, actual: int, row: int):
        self.expected = expected
        self.actual = actual
        self.row = row
        super().__init__(
            f"row {row} has {actual} columns, expected {expected} (the length of row 0)"
        )


class ArityMismatchError(SymbolicError, ValueError):
    """A monomial's exponent list does not pair 1:1 with its variables."""

    def __init__(self, n_variables: int, n_exponents: int):
        self.n_variables = n_variables
        self.n_exponents = n_exponents
        super().__init__(
            f"monomial has {n_variables} variables but {n_exponents} exponents"
        )


class NonPositiveExponentError(SymbolicError, ValueError):
    """A monomial factor has an exponent below 1."""

    def __init__(self, variable: Any, exponent: int):
        self.variable = variable
        self.exponent = exponent
        super().__init__(
            f"monomial factor {variable!r} has exponent {exponent}; exponents must be positive"
        )


class InvalidElementError(SymbolicError, ValueError):
    """An element of a container failed its own validation.

    Attributes:
        container (str): Name of the container holding the element
        index: Position of the element; ``(row, col)`` for matrices, an int otherwise
        error (SymbolicError): The element's own validation error
    """

    def __init__(self, container: str, index: Union[int, Tuple[int, int]], error: SymbolicError):
        self.container = container
        self.index = index
        self.error = error
        super().__init__(f"error in {container} element {index}: {error}")

    @property
    def root(self) -> SymbolicError:
        """The innermost error, unwrapping nested element errors."""
        err = self.error
        while isinstance(err, InvalidElementError):
            err = err.error
        return err


class DimensionError(SymbolicError, ValueError):
    """Two operands have incompatible shapes for an operation."""

    def __init__(self, operation: str, left_dims: Sequence[int], right_dims: Sequence[int]):
        self.operation = operation
        self.left_dims = list(left_dims)
        self.right_dims = list(right_dims)
        super().__init__(
            f"dimension error: Cannot perform {operation} between expression of dimension "
            f"{format_dims(self.left_dims)} and expression of dimension "
            f"{format_dims(self.right_dims)}"
        )


class IndexOutOfRangeError(SymbolicError, IndexError):
    """Element access beyond the bounds of an expression."""

    def __init__(self, index: Tuple[int, int], dims: Sequence[int]):
        self.index = index
        self.dims = list(dims)
        super().__init__(
            f"index {index} is out of range for expression of dimension {format_dims(self.dims)}"
        )


class UnsupportedOperandError(SymbolicError, TypeError):
    """An operand's type is not part of the expression algebra."""

    def __init__(self, operation: str, operand: Any):
        self.operation = operation
        self.operand = operand
        super().__init__(
            f"{operation} does not support operands of type {type(operand).__name__} ({operand!r})"
        )


class MissingCoefficientTargetError(SymbolicError, ValueError):
    """Linear coefficients were requested without any target variables."""

    def __init__(self, expression: Any, message: str = None):
        self.expression = expression
        super().__init__(
            message
            or "linear coefficients require at least one target variable; received none"
        )


class ConstantCoefficientError(MissingCoefficientTargetError):
    """Linear coefficients were requested from an expression with no variables."""

    def __init__(self, expression: Any):
        super().__init__(
            expression,
            f"cannot get linear coefficients of a constant expression ({expression!r})",
        )
