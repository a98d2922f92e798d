from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import numpy as np

from models import Alternative, Criterion, to_float


@dataclass(frozen=True)
class DecisionMatrix:
    """Alternatives x criteria view of a dataset.

    ``values`` holds the raw scores with missing or non-numeric entries read
    as 0. ``weights`` holds the criterion weights clamped at 0, and
    ``benefit`` flags the columns where larger values are preferred.
    """

    criteria: List[Criterion]
    alternatives: List[Alternative]
    values: np.ndarray
    weights: np.ndarray
    benefit: np.ndarray

    @classmethod
    def build(
        cls,
        criteria: Sequence[Criterion],
        alternatives: Sequence[Alternative],
    ) -> "DecisionMatrix":
        """Raises ``ValueError`` if a criterion type is neither benefit nor cost."""
        criteria = list(criteria)
        alternatives = list(alternatives)
        values = np.array(
            [
                [coerce_value(alternative.values.get(criterion.id)) for criterion in criteria]
                for alternative in alternatives
            ],
            dtype=float,
        ).reshape(len(alternatives), len(criteria))
        weights = np.array([effective_weight(criterion.weight) for criterion in criteria], dtype=float)
        benefit = np.array([criterion.is_benefit for criterion in criteria], dtype=bool)
        return cls(
            criteria=criteria,
            alternatives=alternatives,
            values=values,
            weights=weights,
            benefit=benefit,
        )

    @property
    def n_alternatives(self) -> int:
        return self.values.shape[0]

    @property
    def n_criteria(self) -> int:
        return self.values.shape[1]

    def normalized_weights(self) -> np.ndarray:
        total = self.weights.sum()
        if total == 0:
            return np.zeros_like(self.weights)
        return self.weights / total

    def vector_normalized(self) -> np.ndarray:
        norms = np.sqrt((self.values ** 2).sum(axis=0))
        normalized = np.zeros_like(self.values)
        np.divide(self.values, norms, out=normalized, where=norms != 0)
        return normalized

    def weighted_vector_normalized(self) -> np.ndarray:
        return self.vector_normalized() * self.weights

    def row_mapping(self, row: np.ndarray) -> Dict[str, float]:
        return {criterion.id: float(value) for criterion, value in zip(self.criteria, row)}


def coerce_value(raw: Any) -> float:
    return to_float(raw, 0.0)


def effective_weight(raw: Any) -> float:
    return max(0.0, coerce_value(raw))
