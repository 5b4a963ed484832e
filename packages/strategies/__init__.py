from __future__ import annotations
from typing import List
from .base import BaseStrategy, FunctionStrategy, REGISTRY, register, create_strategy, as_strategy

from . import random_consistent  # noqa: F401
from . import first_candidate  # noqa: F401
from . import expected_left  # noqa: F401
from . import max_patterns  # noqa: F401


def get_strategy_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseStrategy", "FunctionStrategy", "REGISTRY", "register", "create_strategy",
           "as_strategy", "get_strategy_ids"]
