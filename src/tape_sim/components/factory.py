"""Index strategy factory."""

from __future__ import annotations

from ..core.config import (
    DEFAULT_FIXED_INTERVAL,
    DEFAULT_LEVEL1_INTERVAL,
    DEFAULT_LEVEL2_INTERVAL,
)
from ..core.errors import UnknownStrategyError
from ..interfaces.strategy import IndexStrategy
from .fixed_interval import FixedIntervalIndexStrategy
from .hierarchical import HierarchicalIndexStrategy
from .no_index import NoIndexStrategy

STRATEGY_NAMES = ("none", "fixed", "hierarchical")


def create_strategy(name: str, param1: int = 0, param2: int = 0) -> IndexStrategy:
    """Construct a strategy by name.

    Non-positive parameters fall back to the defaults: interval 10 for
    ``fixed``, intervals 100/10 for ``hierarchical``. ``none`` ignores
    both.
    """
    if name == "none":
        return NoIndexStrategy()
    if name == "fixed":
        return FixedIntervalIndexStrategy(param1 if param1 > 0 else DEFAULT_FIXED_INTERVAL)
    if name == "hierarchical":
        return HierarchicalIndexStrategy(
            param1 if param1 > 0 else DEFAULT_LEVEL1_INTERVAL,
            param2 if param2 > 0 else DEFAULT_LEVEL2_INTERVAL,
        )
    raise UnknownStrategyError(f"Unknown index strategy: {name}")
