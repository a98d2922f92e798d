from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Sequence

from models import Alternative, Criterion, MethodResult

from dss.matrix import DecisionMatrix
from dss.ranking import NanPolicy, rank_results

logger = logging.getLogger(__name__)


class MethodId(str, Enum):
    SAW = "saw"
    TOPSIS = "topsis"
    AHP = "ahp"
    MOORA = "moora"
    SMART = "smart"
    WP = "wp"


class ScoringMethod(ABC):
    id: MethodId
    name: str
    description: str = ""

    def calculate(
        self,
        criteria: Sequence[Criterion],
        alternatives: Sequence[Alternative],
        nan_policy: NanPolicy = NanPolicy.LAST,
    ) -> List[MethodResult]:
        if not criteria or not alternatives:
            logger.debug("%s: insufficient data, no results", self.id.value)
            return []

        matrix = DecisionMatrix.build(criteria, alternatives)
        logger.debug(
            "%s: scoring %d alternatives against %d criteria",
            self.id.value,
            matrix.n_alternatives,
            matrix.n_criteria,
        )
        return rank_results(self.compute_scores(matrix), nan_policy=nan_policy)

    @abstractmethod
    def compute_scores(self, matrix: DecisionMatrix) -> List[MethodResult]:
        """Return unranked results, one per alternative, in matrix row order."""
        raise NotImplementedError
