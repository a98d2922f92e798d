from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Tuple

from dss.core import MethodId
from dss.ranking import NanPolicy

logger = logging.getLogger(__name__)


def _env_nan_policy() -> NanPolicy:
    raw = os.environ.get("DSS_NAN_POLICY")
    if raw is None:
        return NanPolicy.LAST
    try:
        return NanPolicy(raw.strip().lower())
    except ValueError:
        logger.warning("Ignoring DSS_NAN_POLICY=%r, using %r", raw, NanPolicy.LAST.value)
        return NanPolicy.LAST


@dataclass(frozen=True)
class EngineConfig:
    """Engine settings.

    ``methods`` lists what ``compute_all_results`` runs, in order.
    ``nan_policy`` places NaN scores when ranking.
    """

    methods: Tuple[MethodId, ...] = tuple(MethodId)
    nan_policy: NanPolicy = field(default_factory=_env_nan_policy)


def get_default_config() -> EngineConfig:
    return EngineConfig()
