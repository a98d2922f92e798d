import logging
import time
from typing import Callable, Dict, List, Optional, Sequence, Union

from models import Alternative, CalculationResult, Criterion, MethodResult

from dss.config import EngineConfig, get_default_config
from dss.core import MethodId, ScoringMethod
from dss.methods.ahp import AHPMethod
from dss.methods.moora import MOORAMethod
from dss.methods.saw import SAWMethod
from dss.methods.smart import SMARTMethod
from dss.methods.topsis import TOPSISMethod
from dss.methods.wp import WPMethod
from dss.ranking import NanPolicy, rank_results

logging.getLogger(__name__).addHandler(logging.NullHandler())
logger = logging.getLogger(__name__)

METHODS: Dict[MethodId, ScoringMethod] = {
    MethodId.SAW: SAWMethod(),
    MethodId.TOPSIS: TOPSISMethod(),
    MethodId.AHP: AHPMethod(),
    MethodId.MOORA: MOORAMethod(),
    MethodId.SMART: SMARTMethod(),
    MethodId.WP: WPMethod(),
}

_unregistered = [method_id.value for method_id in MethodId if method_id not in METHODS]
if _unregistered:
    raise RuntimeError(f"no calculator registered for: {', '.join(_unregistered)}")


def resolve_method_id(method_id: Union[str, MethodId]) -> Optional[MethodId]:
    try:
        return MethodId(method_id)
    except ValueError:
        return None


def get_method(method_id: Union[str, MethodId]) -> Optional[ScoringMethod]:
    resolved = resolve_method_id(method_id)
    if resolved is None:
        return None
    return METHODS[resolved]


def list_methods() -> dict:
    return {method_id.value: method.name for method_id, method in METHODS.items()}


def describe_methods() -> List[dict]:
    return [
        {"id": method_id.value, "name": method.name, "description": method.description}
        for method_id, method in METHODS.items()
    ]


def compute_results(
    method_id: Union[str, MethodId],
    criteria: Sequence[Criterion],
    alternatives: Sequence[Alternative],
    config: Optional[EngineConfig] = None,
) -> List[MethodResult]:
    """Score and rank ``alternatives`` with one method.

    Returns an empty list for an unknown method or when either input is empty.
    """
    method = get_method(method_id)
    if method is None:
        logger.warning("Unknown scoring method %r", method_id)
        return []
    config = config or get_default_config()
    return method.calculate(criteria, alternatives, nan_policy=config.nan_policy)


def compute_all_results(
    criteria: Sequence[Criterion],
    alternatives: Sequence[Alternative],
    config: Optional[EngineConfig] = None,
) -> Dict[str, List[MethodResult]]:
    config = config or get_default_config()
    return {
        method_id.value: compute_results(method_id, criteria, alternatives, config)
        for method_id in config.methods
    }


def record_calculation(
    method_id: Union[str, MethodId],
    criteria: Sequence[Criterion],
    alternatives: Sequence[Alternative],
    config: Optional[EngineConfig] = None,
    clock: Callable[[], float] = time.time,
) -> Optional[CalculationResult]:
    """Run one method and stamp the outcome for a calculation history."""
    results = compute_results(method_id, criteria, alternatives, config)
    if not results:
        return None
    resolved = resolve_method_id(method_id)
    return CalculationResult(
        method_id=resolved.value,
        results=results,
        timestamp=int(clock() * 1000),
    )


__all__ = [
    "METHODS",
    "EngineConfig",
    "MethodId",
    "NanPolicy",
    "ScoringMethod",
    "compute_all_results",
    "compute_results",
    "describe_methods",
    "get_default_config",
    "get_method",
    "list_methods",
    "rank_results",
    "record_calculation",
    "resolve_method_id",
]
