from __future__ import annotations

from typing import List

from models import MethodResult

from dss.core import MethodId, ScoringMethod
from dss.matrix import DecisionMatrix


class MOORAMethod(ScoringMethod):
    id = MethodId.MOORA
    name = "MOORA"
    description = "Multi-Objective Optimization on the basis of Ratio Analysis."

    def compute_scores(self, matrix: DecisionMatrix) -> List[MethodResult]:
        weighted = matrix.weighted_vector_normalized()
        benefit_sums = weighted[:, matrix.benefit].sum(axis=1)
        cost_sums = weighted[:, ~matrix.benefit].sum(axis=1)

        results: List[MethodResult] = []
        for idx, alternative in enumerate(matrix.alternatives):
            benefit_sum = float(benefit_sums[idx])
            cost_sum = float(cost_sums[idx])
            results.append(
                MethodResult(
                    alternative_id=alternative.id,
                    score=benefit_sum - cost_sum,
                    details={"benefitSum": benefit_sum, "costSum": cost_sum},
                )
            )
        return results
