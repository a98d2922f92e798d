from __future__ import annotations

from typing import List

import numpy as np

from models import MethodResult

from dss.core import MethodId, ScoringMethod
from dss.matrix import DecisionMatrix


class WPMethod(ScoringMethod):
    """Weighted Product.

    ``S_i`` multiplies every value raised to its weight, negated for cost
    criteria. Scores are ``S_i / sum(S)``. Zero values under a cost weight
    give an infinite ``S``; the resulting ``inf / inf`` scores stay NaN and
    are ranked by the configured NaN policy.
    """

    id = MethodId.WP
    name = "Weighted Product (WP)"
    description = (
        "Uses multiplication to connect attribute ratings, where each attribute "
        "rating must be raised first by the weight of the attribute."
    )

    def compute_scores(self, matrix: DecisionMatrix) -> List[MethodResult]:
        exponents = np.where(matrix.benefit, matrix.weights, -matrix.weights)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            vector_s = np.prod(np.power(matrix.values, exponents), axis=1)
            total = vector_s.sum()
            if total != 0:
                scores = vector_s / total
            else:
                scores = np.zeros_like(vector_s)

        return [
            MethodResult(
                alternative_id=alternative.id,
                score=float(scores[idx]),
                details={"vectorS": float(vector_s[idx])},
            )
            for idx, alternative in enumerate(matrix.alternatives)
        ]
