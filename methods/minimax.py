"""
Minimax (Wald) criterion: pick the strategy with the best worst case.
"""
import logging

import numpy as np

from .matrix import as_profit_matrix, row_minima

logger = logging.getLogger(__name__)


def calculate_scores(matrix):
    """Calculate the worst-case profit of each strategy.

    Args:
        matrix (array-like): Profit matrix with strategies as rows

    Returns:
        np.array: Minimum profit of each row
    """
    return row_minima(as_profit_matrix(matrix))


def minimax(matrix):
    """Calculate the Minimax criterion value.

    Args:
        matrix (array-like): Profit matrix with strategies as rows

    Returns:
        Scalar of the matrix element type: the maximum of the row minima
    """
    scores = calculate_scores(matrix)
    value = np.max(scores)
    logger.debug("Minimax row minima %s -> %s", scores, value)
    return value


def select_strategy(matrix):
    """Index of the first strategy attaining the Minimax value."""
    return int(np.argmax(calculate_scores(matrix)))
