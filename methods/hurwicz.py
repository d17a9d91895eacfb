"""
Hurwicz criterion: weighted blend of the worst and the best outcome.
"""
import logging
import math

import numpy as np

from .matrix import InvalidCoefficientError, as_profit_matrix, row_maxima, row_minima

logger = logging.getLogger(__name__)


def calculate_scores(matrix, coefficient):
    """Calculate the Hurwicz value of each strategy.

    The coefficient weights the row minimum (pessimism) and its complement
    weights the row maximum. It is not range checked: values outside [0, 1]
    give a well-defined, if unusual, result.

    Args:
        matrix (array-like): Profit matrix with strategies as rows
        coefficient (float): Pessimism weight

    Returns:
        np.array: coefficient * row min + (1 - coefficient) * row max, as floats
    """
    profits = as_profit_matrix(matrix)
    coefficient = float(coefficient)
    worst = row_minima(profits).astype(float)
    best = row_maxima(profits).astype(float)

    blend = coefficient * worst + (1 - coefficient) * best
    # Rows with a single outcome value score exactly that value
    return np.where(best == worst, best, blend)


def hurwicz(matrix, coefficient):
    """Calculate the Hurwicz criterion value.

    Args:
        matrix (array-like): Profit matrix with strategies as rows
        coefficient (float): Pessimism weight, intended in [0, 1]

    Returns:
        float: The maximum of the per-strategy blends
    """
    scores = calculate_scores(matrix, coefficient)
    value = np.max(scores)
    logger.debug("Hurwicz(%s) blends %s -> %s", coefficient, scores, value)
    return value


def validate_coefficient(coefficient):
    """Reject coefficients outside the closed interval [0, 1].

    Raises:
        InvalidCoefficientError: If the coefficient is not a finite number in [0, 1]
    """
    try:
        value = float(coefficient)
    except (TypeError, ValueError) as exc:
        raise InvalidCoefficientError(f"coefficient must be a number, got {coefficient!r}") from exc

    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise InvalidCoefficientError(f"coefficient must lie in [0, 1], got {value}")
    return value


def hurwicz_strict(matrix, coefficient):
    """Hurwicz criterion that validates the coefficient first."""
    return hurwicz(matrix, validate_coefficient(coefficient))


def select_strategy(matrix, coefficient):
    """Index of the first strategy attaining the Hurwicz value."""
    return int(np.argmax(calculate_scores(matrix, coefficient)))
