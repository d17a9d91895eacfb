"""
Decision criteria under uncertainty: Minimax, Savage and Hurwicz.
"""
from . import hurwicz, minimax, savage
from .matrix import (
    InvalidCoefficientError,
    InvalidMatrixError,
    InvalidMatrixShapeError,
    as_profit_matrix,
)

# Display labels, in reporting order
CRITERIA = ('Minimax', 'Savage', 'Hurwicz')

# Criteria whose per-strategy score is a loss rather than a gain
LOWER_IS_BETTER = {'savage'}


def calculate_value(method, **kwargs):
    """Calculate the criterion value using the specified method.

    Args:
        method (str): Name of the criterion ('minimax', 'savage' or 'hurwicz')
        **kwargs: Criterion-specific arguments

    Returns:
        Scalar value of the optimal strategy under that criterion
    """
    method_map = {
        'minimax': minimax.minimax,
        'savage': savage.savage,
        'hurwicz': hurwicz.hurwicz
    }

    if method not in method_map:
        raise ValueError(f"Unknown method: {method}")

    return method_map[method](**kwargs)


def calculate_scores(method, **kwargs):
    """Calculate the per-strategy scores behind a criterion.

    Args:
        method (str): Name of the criterion ('minimax', 'savage' or 'hurwicz')
        **kwargs: Criterion-specific arguments

    Returns:
        np.array: One score per strategy (row)
    """
    method_map = {
        'minimax': minimax.calculate_scores,
        'savage': savage.calculate_scores,
        'hurwicz': hurwicz.calculate_scores
    }

    if method not in method_map:
        raise ValueError(f"Unknown method: {method}")

    return method_map[method](**kwargs)


def evaluate_all(matrix, coefficient):
    """Evaluate the three criteria on the same profit matrix.

    Returns:
        dict: Criterion label -> value, ordered Minimax, Savage, Hurwicz
    """
    return {
        'Minimax': minimax.minimax(matrix),
        'Savage': savage.savage(matrix),
        'Hurwicz': hurwicz.hurwicz(matrix, coefficient)
    }


def rank_strategies(scores, lower_is_better=False):
    """Rank strategies by their criterion scores.

    Args:
        scores (array-like): One score per strategy
        lower_is_better (bool): True for loss-like scores such as regrets

    Returns:
        list: Dicts with 'strategy', 'score' and 'rank' (1 = best), best first.
        Ties keep row order.
    """
    results = [
        {'strategy': i, 'score': score.item() if hasattr(score, 'item') else score}
        for i, score in enumerate(scores)
    ]

    results.sort(key=lambda x: x['score'], reverse=not lower_is_better)
    for i, result in enumerate(results, 1):
        result['rank'] = i

    return results
