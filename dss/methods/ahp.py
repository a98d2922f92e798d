from __future__ import annotations

from typing import List

import numpy as np

from models import MethodResult

from dss.core import MethodId, ScoringMethod
from dss.matrix import DecisionMatrix


class AHPMethod(ScoringMethod):
    """Simplified AHP without pairwise comparisons.

    Criterion weights are normalised to sum to 1 and each column is turned
    into priorities: cost columns use reciprocals of positive values, every
    other cell is divided by its column sum. A cost cell that is not positive
    takes the column-sum branch.
    """

    id = MethodId.AHP
    name = "Analytic Hierarchy Process (AHP)"
    description = "Structures complex decisions into a hierarchy for analysis."

    def compute_scores(self, matrix: DecisionMatrix) -> List[MethodResult]:
        priorities = self._normalize(matrix.values, matrix.benefit)
        scores = priorities.dot(matrix.normalized_weights())
        return [
            MethodResult(
                alternative_id=alternative.id,
                score=float(scores[idx]),
                normalized_values=matrix.row_mapping(priorities[idx]),
            )
            for idx, alternative in enumerate(matrix.alternatives)
        ]

    @staticmethod
    def _normalize(values: np.ndarray, benefit: np.ndarray) -> np.ndarray:
        normalized = np.zeros_like(values, dtype=float)
        for idx in range(values.shape[1]):
            column = values[:, idx]
            column_sum = column.sum()
            positive = column > 0
            reciprocal_sum = (1.0 / column[positive]).sum()

            for row, value in enumerate(column):
                if not benefit[idx] and value > 0:
                    if reciprocal_sum != 0:
                        normalized[row, idx] = (1.0 / value) / reciprocal_sum
                elif column_sum != 0:
                    normalized[row, idx] = value / column_sum
        return normalized
