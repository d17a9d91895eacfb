"""
Savage (minimax regret) criterion implementation.
"""
import logging

import numpy as np

from .matrix import as_profit_matrix, column_maxima, row_maxima

logger = logging.getLogger(__name__)


def calculate_regret_matrix(matrix):
    """Build the regret matrix of a profit matrix.

    Each entry becomes the gap between the best profit of its column and the
    entry itself. The column maxima are taken from the untouched profits and
    every column is transformed independently of the others.

    Args:
        matrix (array-like): Profit matrix with strategies as rows

    Returns:
        np.array: Regret matrix with the same shape and element type
    """
    profits = as_profit_matrix(matrix)
    best_per_state = column_maxima(profits)

    # Private working copy; the caller's matrix stays read-only
    regrets = np.array(profits, copy=True)
    for col in range(regrets.shape[1]):
        regrets[:, col] = best_per_state[col] - profits[:, col]

    return regrets


def calculate_scores(matrix):
    """Calculate the worst regret of each strategy.

    Args:
        matrix (array-like): Profit matrix with strategies as rows

    Returns:
        np.array: Maximum regret of each row
    """
    return row_maxima(calculate_regret_matrix(matrix))


def savage(matrix):
    """Calculate the Savage criterion value.

    Args:
        matrix (array-like): Profit matrix with strategies as rows

    Returns:
        Scalar of the matrix element type: the minimum of the row maxima of
        the regret matrix
    """
    scores = calculate_scores(matrix)
    value = np.min(scores)
    logger.debug("Savage worst regrets %s -> %s", scores, value)
    return value


def select_strategy(matrix):
    """Index of the first strategy attaining the Savage value."""
    return int(np.argmin(calculate_scores(matrix)))
