"""Tests for the Savage (minimax regret) criterion."""

import itertools
import random

import numpy as np
import pytest

from methods.matrix import InvalidMatrixShapeError
from methods.savage import calculate_regret_matrix, calculate_scores, savage, select_strategy
from oracles import oracle_regret, oracle_savage


class TestRegretMatrix:
    def test_reference_regrets(self, reference_matrix):
        assert calculate_regret_matrix(reference_matrix).tolist() == [
            [0, 9, 14, 26, 0],
            [12, 5, 6, 11, 15],
            [14, 14, 0, 0, 20],
            [8, 0, 4, 18, 17],
        ]

    def test_matches_oracle(self, reference_matrix):
        assert calculate_regret_matrix(reference_matrix).tolist() == oracle_regret(reference_matrix)

    def test_every_column_has_a_zero_regret(self, reference_matrix):
        regrets = calculate_regret_matrix(reference_matrix)
        assert (regrets.min(axis=0) == 0).all()
        assert (regrets >= 0).all()

    def test_regret_of_regret_is_not_the_original(self, reference_matrix):
        twice = calculate_regret_matrix(calculate_regret_matrix(reference_matrix))
        assert twice.tolist() != reference_matrix

    def test_caller_list_not_mutated(self, reference_matrix):
        original = [list(row) for row in reference_matrix]
        calculate_regret_matrix(reference_matrix)
        savage(reference_matrix)
        assert reference_matrix == original

    def test_caller_array_not_mutated(self, reference_matrix):
        profits = np.array(reference_matrix)
        snapshot = profits.copy()
        savage(profits)
        np.testing.assert_array_equal(profits, snapshot)

    def test_columns_are_transformed_independently(self):
        # Column 0 is constant; its regret must not depend on column 1
        regrets = calculate_regret_matrix([[5, 1], [5, 100]])
        assert regrets.tolist() == [[0, 99], [0, 0]]


class TestSavage:
    def test_reference_matrix(self, reference_matrix):
        assert savage(reference_matrix) == 15

    def test_worst_regrets(self, reference_matrix):
        assert calculate_scores(reference_matrix).tolist() == [26, 15, 20, 18]

    def test_selected_strategy(self, reference_matrix):
        assert select_strategy(reference_matrix) == 1

    def test_integer_matrix_keeps_integer_result(self, reference_matrix):
        assert np.issubdtype(type(savage(reference_matrix)), np.integer)

    def test_single_element(self):
        # A lone strategy never has regret
        assert savage([[7]]) == 0

    def test_single_row_has_zero_regret(self):
        assert savage([[4, -2, 9]]) == 0

    @pytest.mark.parametrize("matrix", [[], [[]], [[1, 2], [3]]])
    def test_invalid_shape(self, matrix):
        with pytest.raises(InvalidMatrixShapeError):
            savage(matrix)


class TestSavageProperties:
    @pytest.mark.parametrize("seed", range(10))
    def test_matches_oracle(self, seed):
        rng = random.Random(seed)
        rows, cols = rng.randint(1, 6), rng.randint(1, 6)
        matrix = [[rng.randint(-50, 50) for _ in range(cols)] for _ in range(rows)]
        assert savage(matrix) == oracle_savage(matrix)

    def test_row_permutations(self, reference_matrix):
        expected = savage(reference_matrix)
        for perm in itertools.permutations(reference_matrix):
            assert savage(list(perm)) == expected

    def test_column_permutations(self, reference_matrix):
        expected = savage(reference_matrix)
        for perm in itertools.permutations(range(5)):
            permuted = [[row[c] for c in perm] for row in reference_matrix]
            assert savage(permuted) == expected
