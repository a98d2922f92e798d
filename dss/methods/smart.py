from __future__ import annotations

from typing import List

import numpy as np

from models import MethodResult

from dss.core import MethodId, ScoringMethod
from dss.matrix import DecisionMatrix


class SMARTMethod(ScoringMethod):
    id = MethodId.SMART
    name = "SMART"
    description = "Simple Multi-Attribute Rating Technique for ranking alternatives."

    def compute_scores(self, matrix: DecisionMatrix) -> List[MethodResult]:
        utilities = self._utilities(matrix.values, matrix.benefit)
        scores = utilities.dot(matrix.normalized_weights())
        return [
            MethodResult(
                alternative_id=alternative.id,
                score=float(scores[idx]),
                normalized_values=matrix.row_mapping(utilities[idx]),
            )
            for idx, alternative in enumerate(matrix.alternatives)
        ]

    @staticmethod
    def _utilities(values: np.ndarray, benefit: np.ndarray) -> np.ndarray:
        utilities = np.zeros_like(values, dtype=float)
        for idx in range(values.shape[1]):
            column = values[:, idx]
            # Range bounds come from strictly positive values only.
            positives = column[column > 0]
            if positives.size == 0:
                continue
            low, high = positives.min(), positives.max()
            if low == high:
                continue
            span = high - low
            if benefit[idx]:
                utilities[:, idx] = (column - low) / span
            else:
                utilities[:, idx] = (high - column) / span
        return utilities
