"""Simulation harness - main public API.

Generates workloads on a tape device, drives the active index strategy
through its build and query phases, and records the outcome.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Sequence
from dataclasses import dataclass

from .config import DEFAULT_SIZE_RATIO, MAX_DATA_ID, MIN_DATA_ID, TapeConfig
from .device import TapeDevice
from .errors import NoStrategyError
from .types import Block, BlockId
from ..components.factory import create_strategy
from ..interfaces.strategy import IndexStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one build + query pass.

    Attributes:
        strategy_name: Name reported by the strategy
        index_build_time: Simulated seconds spent in build_index
        total_access_time: Simulated seconds summed over all queries
        average_access_time: total_access_time / total_queries
        total_seeks: Queries that incurred a nonzero cost
        total_queries: Queries issued
        hits: Queries resolved to a position
    """

    strategy_name: str
    index_build_time: float
    total_access_time: float
    average_access_time: float
    total_seeks: int
    total_queries: int
    hits: int


class TapeSimulator:
    """Benchmark harness for index strategies on a simulated tape.

    Args:
        config: Device timing parameters
        rng: Random source for workloads and queries
        seed: Seed for a fresh random.Random when rng is not given

    Public API:
        - set_strategy(strategy): Select the active strategy
        - generate_workload(block_count, size_ratio): Refill the tape
        - generate_queries(count): Draw query ids from the id range
        - run_simulation(block_count, query_ids, generate_new_data)
        - run_comparison(block_count, query_ids, strategy_names)
        - benchmark_index_build(block_count) / benchmark_queries(query_ids)

    Invariants:
        - Results are appended in run order and never modified
        - A comparison runs every strategy against one shared workload
    """

    def __init__(
        self,
        config: TapeConfig | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        self.device = TapeDevice(config)
        self.rng = rng if rng is not None else random.Random(seed)
        self._strategy: IndexStrategy | None = None
        self._results: list[SimulationResult] = []

    @property
    def strategy(self) -> IndexStrategy | None:
        return self._strategy

    @property
    def results(self) -> tuple[SimulationResult, ...]:
        """All results recorded so far, oldest first."""
        return tuple(self._results)

    def set_strategy(self, strategy: IndexStrategy) -> None:
        self._strategy = strategy

    def _require_strategy(self) -> IndexStrategy:
        if self._strategy is None:
            raise NoStrategyError("No index strategy set")
        return self._strategy

    def generate_workload(self, block_count: int, size_ratio: float = DEFAULT_SIZE_RATIO) -> float:
        """Reset the tape and write block_count random data blocks.

        Ids are drawn uniformly from the id range (duplicates possible),
        payload sizes uniformly from 1 to block_size * size_ratio.
        Returns the total simulated write cost.
        """
        if block_count < 0:
            raise ValueError(f"block_count must be non-negative, got {block_count}")
        max_size = int(self.device.block_size * size_ratio)
        if max_size < 1:
            raise ValueError(
                f"size_ratio {size_ratio} leaves no room for a payload in "
                f"{self.device.block_size}-byte blocks"
            )

        self.device.reset()
        cost = 0.0
        for _ in range(block_count):
            block_id = self.rng.randint(MIN_DATA_ID, MAX_DATA_ID)
            size = self.rng.randint(1, max_size)
            cost += self.device.write(Block(block_id, size))

        logger.info(f"Generated workload of {block_count} blocks (max payload {max_size} bytes)")
        return cost

    def generate_queries(self, count: int) -> list[BlockId]:
        """Draw count query ids from the same range as the workload ids."""
        return [self.rng.randint(MIN_DATA_ID, MAX_DATA_ID) for _ in range(count)]

    def run_simulation(
        self,
        block_count: int,
        query_ids: Sequence[BlockId],
        generate_new_data: bool = True,
    ) -> SimulationResult:
        """Build the active strategy's index and issue every query."""
        strategy = self._require_strategy()

        if generate_new_data:
            self.generate_workload(block_count)

        build_time = strategy.build_index(self.device)

        total_time = 0.0
        seeks = 0
        hits = 0
        for data_id in query_ids:
            position, cost = strategy.find_block(self.device, data_id)
            total_time += cost
            if cost > 0:
                seeks += 1
            if position is not None:
                hits += 1

        queries = len(query_ids)
        result = SimulationResult(
            strategy_name=strategy.name,
            index_build_time=build_time,
            total_access_time=total_time,
            average_access_time=total_time / queries if queries else 0.0,
            total_seeks=seeks,
            total_queries=queries,
            hits=hits,
        )
        self._results.append(result)

        logger.info(
            f"{strategy.name}: build {build_time:.6f}s, {queries} queries, "
            f"{hits} hits, total access {total_time:.6f}s"
        )
        logger.debug(f"{strategy.name} stats: {strategy.stats()}")
        return result

    def run_comparison(
        self,
        block_count: int,
        query_ids: Sequence[BlockId],
        strategy_names: Sequence[str],
    ) -> list[SimulationResult]:
        """Run each named strategy against one shared workload.

        Strategies run in the given order on the same tape, so index
        blocks appended by earlier strategies remain for later ones.
        """
        self.generate_workload(block_count)

        comparison = []
        for name in strategy_names:
            self.set_strategy(create_strategy(name))
            comparison.append(self.run_simulation(block_count, query_ids, generate_new_data=False))
        return comparison

    def benchmark_index_build(self, block_count: int) -> float:
        """Regenerate the workload and time build_index in wall-clock ms."""
        strategy = self._require_strategy()
        self.generate_workload(block_count)

        start = time.perf_counter()
        strategy.build_index(self.device)
        return (time.perf_counter() - start) * 1000.0

    def benchmark_queries(self, query_ids: Sequence[BlockId]) -> float:
        """Time every find_block call in wall-clock ms."""
        strategy = self._require_strategy()

        start = time.perf_counter()
        for data_id in query_ids:
            strategy.find_block(self.device, data_id)
        return (time.perf_counter() - start) * 1000.0
