from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class CriterionType(str, Enum):
    BENEFIT = "benefit"
    COST = "cost"

    @classmethod
    def parse(cls, value: Any) -> "CriterionType":
        if isinstance(value, cls):
            return value
        if not value:
            return cls.BENEFIT
        return cls(str(value).strip().lower())


@dataclass
class Criterion:
    id: str
    name: str
    weight: float = 1.0
    type: CriterionType = CriterionType.BENEFIT
    percentage: Optional[float] = None

    @property
    def is_benefit(self) -> bool:
        """Raises ``ValueError`` for a type other than benefit or cost."""
        return CriterionType.parse(self.type) is CriterionType.BENEFIT

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "weight": self.weight,
            "type": CriterionType.parse(self.type).value,
        }
        if self.percentage is not None:
            data["percentage"] = self.percentage
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Criterion":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            weight=to_float(data.get("weight"), 1.0),
            type=CriterionType.parse(data.get("type")),
            percentage=data.get("percentage"),
        )


@dataclass
class Alternative:
    id: str
    name: str
    values: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "values": dict(self.values)}

    @classmethod
    def from_dict(cls, data: dict) -> "Alternative":
        values = data.get("values") or {}
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            values={str(key): to_float(value, 0.0) for key, value in values.items()},
        )


@dataclass
class MethodResult:
    alternative_id: str
    score: float
    rank: int = 0
    normalized_values: Optional[Dict[str, float]] = None
    details: Optional[Dict[str, float]] = None

    def to_dict(self) -> dict:
        data: Dict[str, Any] = {
            "alternativeId": self.alternative_id,
            "score": self.score,
            "rank": self.rank,
        }
        if self.normalized_values is not None:
            data["normalizedValues"] = dict(self.normalized_values)
        if self.details is not None:
            data["details"] = dict(self.details)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "MethodResult":
        alternative_id = data.get("alternativeId", data.get("alternative_id"))
        if alternative_id is None:
            raise KeyError("alternativeId")
        normalized = data.get("normalizedValues", data.get("normalized_values"))
        details = data.get("details")
        return cls(
            alternative_id=str(alternative_id),
            score=float(data.get("score", 0.0)),
            rank=int(data.get("rank", 0)),
            normalized_values=dict(normalized) if normalized is not None else None,
            details=dict(details) if details is not None else None,
        )


@dataclass
class CalculationResult:
    method_id: str
    results: List[MethodResult] = field(default_factory=list)
    timestamp: int = 0

    def to_dict(self) -> dict:
        return {
            "methodName": self.method_id,
            "results": [result.to_dict() for result in self.results],
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CalculationResult":
        return cls(
            method_id=data.get("methodName", data.get("method_id", "")),
            results=[MethodResult.from_dict(item) for item in data.get("results", [])],
            timestamp=int(data.get("timestamp", 0)),
        )


@dataclass
class Dataset:
    criteria: List[Criterion] = field(default_factory=list)
    alternatives: List[Alternative] = field(default_factory=list)

    @property
    def is_sufficient(self) -> bool:
        return bool(self.criteria) and bool(self.alternatives)

    def remove_criterion(self, criterion_id: str) -> "Dataset":
        """Drop a criterion and the values every alternative holds for it."""
        criteria = [criterion for criterion in self.criteria if criterion.id != criterion_id]
        alternatives = [
            replace(
                alternative,
                values={
                    key: value
                    for key, value in alternative.values.items()
                    if key != criterion_id
                },
            )
            for alternative in self.alternatives
        ]
        return Dataset(criteria=criteria, alternatives=alternatives)

    def with_value(self, alternative_id: str, criterion_id: str, value: float) -> "Dataset":
        alternatives = []
        for alternative in self.alternatives:
            if alternative.id == alternative_id:
                values = dict(alternative.values)
                values[criterion_id] = value
                alternative = replace(alternative, values=values)
            alternatives.append(alternative)
        return Dataset(criteria=list(self.criteria), alternatives=alternatives)

    def weight_percentages(self) -> Dict[str, float]:
        weights = {criterion.id: max(0.0, to_float(criterion.weight, 0.0)) for criterion in self.criteria}
        total = sum(weights.values())
        if total <= 0:
            return {criterion_id: 0.0 for criterion_id in weights}
        return {criterion_id: weight / total * 100.0 for criterion_id, weight in weights.items()}

    def to_dict(self) -> dict:
        return {
            "criteria": [criterion.to_dict() for criterion in self.criteria],
            "alternatives": [alternative.to_dict() for alternative in self.alternatives],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Dataset":
        return cls(
            criteria=[Criterion.from_dict(item) for item in data.get("criteria", [])],
            alternatives=[Alternative.from_dict(item) for item in data.get("alternatives", [])],
        )

    @classmethod
    def default(cls) -> "Dataset":
        return cls(
            criteria=[
                Criterion(id="c1", name="Cost", weight=0.4, type=CriterionType.COST, percentage=40),
                Criterion(id="c2", name="Quality", weight=0.3, type=CriterionType.BENEFIT, percentage=30),
                Criterion(id="c3", name="Delivery Time", weight=0.3, type=CriterionType.COST, percentage=30),
            ],
            alternatives=[
                Alternative(id="a1", name="Option A", values={"c1": 1000, "c2": 8, "c3": 5}),
                Alternative(id="a2", name="Option B", values={"c1": 1500, "c2": 9, "c3": 3}),
                Alternative(id="a3", name="Option C", values={"c1": 800, "c2": 7, "c3": 7}),
            ],
        )


def to_float(value: Any, default: float = 0.0) -> float:
    """Read ``value`` as a float; missing, NaN or non-numeric input gives ``default``."""
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number):
        return default
    return number
