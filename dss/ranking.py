from __future__ import annotations

import math
from dataclasses import replace
from enum import Enum
from typing import Iterable, List, Mapping, Tuple, Union

from models import MethodResult


class NanPolicy(str, Enum):
    """Where results with a NaN score land in a ranking."""

    LAST = "last"
    FIRST = "first"


def rank_results(
    partial: Iterable[Union[MethodResult, Mapping]],
    nan_policy: NanPolicy = NanPolicy.LAST,
) -> List[MethodResult]:
    """Sort results by score, best first, and assign ranks 1..N.

    Equal scores keep their input order and still get distinct ranks.
    The input objects are left untouched; fresh results are returned.
    """
    results = [_copy_result(item) for item in partial]
    policy = NanPolicy(nan_policy)

    def sort_key(result: MethodResult) -> Tuple[int, float]:
        if math.isnan(result.score):
            return (1 if policy is NanPolicy.LAST else -1, 0.0)
        return (0, -result.score)

    ordered = sorted(results, key=sort_key)
    return [replace(result, rank=index + 1) for index, result in enumerate(ordered)]


def _copy_result(item: Union[MethodResult, Mapping]) -> MethodResult:
    if isinstance(item, MethodResult):
        return replace(
            item,
            score=float(item.score),
            normalized_values=dict(item.normalized_values) if item.normalized_values is not None else None,
            details=dict(item.details) if item.details is not None else None,
        )
    return MethodResult.from_dict(dict(item))
