from __future__ import annotations

from typing import List, Tuple

import numpy as np

from models import MethodResult

from dss.core import MethodId, ScoringMethod
from dss.matrix import DecisionMatrix


class TOPSISMethod(ScoringMethod):
    """Closeness of each alternative to the ideal solution.

    The weighted vector-normalised matrix gives a per-criterion ideal (best
    column value) and negative-ideal (worst column value). The score is
    ``d- / (d+ + d-)``, defined as 0 when both distances vanish.
    """

    id = MethodId.TOPSIS
    name = "TOPSIS"
    description = "Technique for Order of Preference by Similarity to Ideal Solution."

    def compute_scores(self, matrix: DecisionMatrix) -> List[MethodResult]:
        weighted = matrix.weighted_vector_normalized()
        ideal, negative_ideal = self._ideal_solutions(weighted, matrix.benefit)

        positive_distance = np.sqrt(((weighted - ideal) ** 2).sum(axis=1))
        negative_distance = np.sqrt(((weighted - negative_ideal) ** 2).sum(axis=1))

        with np.errstate(divide="ignore", invalid="ignore"):
            scores = negative_distance / (positive_distance + negative_distance)
        scores = np.where(np.isnan(scores), 0.0, scores)

        return [
            MethodResult(
                alternative_id=alternative.id,
                score=float(scores[idx]),
                details={
                    "positiveDistance": float(positive_distance[idx]),
                    "negativeDistance": float(negative_distance[idx]),
                },
            )
            for idx, alternative in enumerate(matrix.alternatives)
        ]

    @staticmethod
    def _ideal_solutions(weighted: np.ndarray, benefit: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        column_max = weighted.max(axis=0)
        column_min = weighted.min(axis=0)
        ideal = np.where(benefit, column_max, column_min)
        negative_ideal = np.where(benefit, column_min, column_max)
        return ideal, negative_ideal
