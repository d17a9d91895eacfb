"""
Profit matrix handling shared by the decision criteria.
"""
import logging

import numpy as np

logger = logging.getLogger(__name__)


class InvalidMatrixError(ValueError):
    """Raised when a profit matrix cannot be evaluated."""


class InvalidMatrixShapeError(InvalidMatrixError):
    """Raised for empty, ragged or non two-dimensional matrices."""

    def __init__(self, detail):
        super().__init__(f"invalid matrix shape: {detail}")


class InvalidCoefficientError(ValueError):
    """Raised when a Hurwicz coefficient is rejected."""


def as_profit_matrix(matrix):
    """Convert a nested sequence of profits into a 2-D numpy array.

    Args:
        matrix (array-like): Profits with strategies as rows and states of
            nature as columns

    Returns:
        np.array: Matrix of shape (strategies, states). The caller's object
        is never modified by the criteria.

    Raises:
        InvalidMatrixShapeError: If the matrix is ragged, empty or not 2-D
        InvalidMatrixError: If the elements are not numeric
    """
    try:
        profits = np.asarray(matrix)
    except ValueError as exc:
        # numpy refuses inhomogeneous nested lists
        raise InvalidMatrixShapeError("rows must all have the same length") from exc

    if profits.dtype == object and profits.ndim == 1:
        raise InvalidMatrixShapeError("rows must all have the same length")
    if profits.ndim != 2:
        raise InvalidMatrixShapeError(f"expected 2 dimensions, got {profits.ndim}")
    if profits.shape[0] == 0:
        raise InvalidMatrixShapeError("matrix has no rows")
    if profits.shape[1] == 0:
        raise InvalidMatrixShapeError("matrix has empty rows")
    if not np.issubdtype(profits.dtype, np.number) or np.issubdtype(profits.dtype, np.complexfloating):
        raise InvalidMatrixError(f"profits must be real numbers, got dtype {profits.dtype}")

    logger.debug("Profit matrix with %d strategies and %d states", *profits.shape)
    return profits


def row_minima(profits):
    """Worst outcome of every strategy."""
    return np.min(profits, axis=1)


def row_maxima(profits):
    """Best outcome of every strategy."""
    return np.max(profits, axis=1)


def column_maxima(profits):
    """Best achievable outcome in every state of nature."""
    return np.max(profits, axis=0)
