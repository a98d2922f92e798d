from __future__ import annotations

from typing import List

import numpy as np

from models import MethodResult

from dss.core import MethodId, ScoringMethod
from dss.matrix import DecisionMatrix


class SAWMethod(ScoringMethod):
    id = MethodId.SAW
    name = "Simple Additive Weighting (SAW)"
    description = "A simple and widely used method that calculates weighted sum of performance ratings."

    def compute_scores(self, matrix: DecisionMatrix) -> List[MethodResult]:
        normalized = self._normalize(matrix.values, matrix.benefit)
        scores = normalized.dot(matrix.weights)
        return [
            MethodResult(
                alternative_id=alternative.id,
                score=float(scores[idx]),
                normalized_values=matrix.row_mapping(normalized[idx]),
            )
            for idx, alternative in enumerate(matrix.alternatives)
        ]

    @staticmethod
    def _normalize(values: np.ndarray, benefit: np.ndarray) -> np.ndarray:
        normalized = np.zeros_like(values, dtype=float)
        for idx in range(values.shape[1]):
            column = values[:, idx]
            if benefit[idx]:
                max_value = column.max()
                if max_value != 0:
                    normalized[:, idx] = column / max_value
                continue

            # No positive value means no reference point: the column scores 0.
            positives = column[column > 0]
            if positives.size == 0:
                continue
            nonzero = column != 0
            normalized[nonzero, idx] = positives.min() / column[nonzero]
        return normalized
