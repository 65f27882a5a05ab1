"""Tape Sim - index strategy cost simulation for sequential-access storage."""

from .core.config import TapeConfig
from .core.errors import (
    TapeSimError,
    BlockOutOfRangeError,
    UnknownStrategyError,
    NoStrategyError,
)
from .core.device import TapeDevice
from .core.simulator import SimulationResult, TapeSimulator
from .core.types import Block, BlockId, Position, Cost, Lookup
from .components.factory import STRATEGY_NAMES, create_strategy
from .components.fixed_interval import FixedIntervalIndexStrategy
from .components.hierarchical import HierarchicalIndexStrategy
from .components.no_index import NoIndexStrategy

__all__ = [
    "TapeConfig",
    "TapeSimError",
    "BlockOutOfRangeError",
    "UnknownStrategyError",
    "NoStrategyError",
    "TapeDevice",
    "TapeSimulator",
    "SimulationResult",
    "Block",
    "BlockId",
    "Position",
    "Cost",
    "Lookup",
    "STRATEGY_NAMES",
    "create_strategy",
    "NoIndexStrategy",
    "FixedIntervalIndexStrategy",
    "HierarchicalIndexStrategy",
]
