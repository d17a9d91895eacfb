"""
Routes evaluating the Minimax, Savage and Hurwicz criteria.
"""
from flask import current_app, jsonify, request
from . import criteria_bp
import methods
from methods import hurwicz, minimax, savage
from methods.matrix import InvalidCoefficientError

STRATEGY_SELECTORS = {
    'minimax': minimax.select_strategy,
    'savage': savage.select_strategy,
    'hurwicz': hurwicz.select_strategy
}


def get_payload():
    """JSON body of the request, or an empty dict."""
    return request.get_json(silent=True) or {}


def get_coefficient(payload):
    """Read the Hurwicz coefficient from a payload, falling back to the config."""
    coefficient = payload.get('coefficient')
    if coefficient is None:
        coefficient = current_app.config['HURWICZ_COEFFICIENT']

    if current_app.config['STRICT_COEFFICIENT']:
        return hurwicz.validate_coefficient(coefficient)

    try:
        return float(coefficient)
    except (TypeError, ValueError) as exc:
        raise InvalidCoefficientError(f"coefficient must be a number, got {coefficient!r}") from exc


def build_result(method, matrix, **kwargs):
    """Evaluate one criterion and describe the outcome.

    Args:
        method (str): Name of the criterion
        matrix (array-like): Profit matrix with strategies as rows
        **kwargs: Criterion-specific arguments (the Hurwicz coefficient)

    Returns:
        dict: criterion, value, chosen strategy, per-strategy scores and ranking
    """
    value = methods.calculate_value(method, matrix=matrix, **kwargs)
    scores = methods.calculate_scores(method, matrix=matrix, **kwargs)
    ranking = methods.rank_strategies(scores, lower_is_better=method in methods.LOWER_IS_BETTER)

    return {
        'criterion': method,
        'value': value.item(),
        'strategy': STRATEGY_SELECTORS[method](matrix=matrix, **kwargs),
        'scores': scores.tolist(),
        'ranking': ranking
    }


def build_all_results(matrix, coefficient):
    """Results of the three criteria, in reporting order."""
    return [
        build_result('minimax', matrix),
        build_result('savage', matrix),
        build_result('hurwicz', matrix, coefficient=coefficient)
    ]


@criteria_bp.route('/minimax', methods=['POST'])
def evaluate_minimax():
    """Evaluate the Minimax criterion."""
    payload = get_payload()
    return jsonify(build_result('minimax', payload.get('matrix')))


@criteria_bp.route('/savage', methods=['POST'])
def evaluate_savage():
    """Evaluate the Savage criterion."""
    payload = get_payload()
    return jsonify(build_result('savage', payload.get('matrix')))


@criteria_bp.route('/hurwicz', methods=['POST'])
def evaluate_hurwicz():
    """Evaluate the Hurwicz criterion."""
    payload = get_payload()
    coefficient = get_coefficient(payload)
    result = build_result('hurwicz', payload.get('matrix'), coefficient=coefficient)
    result['coefficient'] = coefficient
    return jsonify(result)


@criteria_bp.route('/evaluate', methods=['POST'])
def evaluate_all():
    """Evaluate all three criteria on one matrix."""
    payload = get_payload()
    coefficient = get_coefficient(payload)
    current_app.logger.info('Evaluating all criteria with coefficient %s', coefficient)
    return jsonify({
        'coefficient': coefficient,
        'results': build_all_results(payload.get('matrix'), coefficient)
    })
