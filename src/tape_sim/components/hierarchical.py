"""Two-level hierarchical index strategy.

Data blocks are grouped by their ordinal in the build walk into level-2
buckets of ``level2_interval`` blocks, and level-2 buckets into level-1
buckets of ``level1_interval``. Two summary blocks are appended to the
tape and re-read on every indexed lookup.

The candidate position computed from the buckets is an approximation:
it only lands on the right block for some ordinals, and positions at or
past the summary region are clamped to the block just before it.
"""

from __future__ import annotations

import logging

from ..core.config import (
    DEFAULT_LEVEL1_INTERVAL,
    DEFAULT_LEVEL2_INTERVAL,
    LEVEL1_SUMMARY_ID,
    LEVEL2_SUMMARY_ID,
)
from ..core.types import Block, BlockId, Cost, Lookup, Position
from ..interfaces.device import TapeMedium

logger = logging.getLogger(__name__)


class HierarchicalIndexStrategy:
    """Bucketed two-level index with on-tape summary blocks.

    Args:
        level1_interval: Level-2 buckets per level-1 bucket
        level2_interval: Data blocks per level-2 bucket

    Invariants:
        - build_index appends exactly two index blocks: the level-2
          summary followed by the level-1 summary
        - A returned position always holds a block with the requested id
    """

    def __init__(
        self,
        level1_interval: int = DEFAULT_LEVEL1_INTERVAL,
        level2_interval: int = DEFAULT_LEVEL2_INTERVAL,
    ):
        if level1_interval <= 0 or level2_interval <= 0:
            raise ValueError(
                f"intervals must be positive, got {level1_interval}/{level2_interval}"
            )
        self.level1_interval = level1_interval
        self.level2_interval = level2_interval
        self._index: dict[BlockId, tuple[int, int]] = {}

    @property
    def name(self) -> str:
        return "Hierarchical Index"

    def __len__(self) -> int:
        return len(self._index)

    def buckets_for(self, data_id: BlockId) -> tuple[int, int] | None:
        """Return (level1_bucket, level2_bucket) for data_id if indexed."""
        return self._index.get(data_id)

    def candidate_position(self, level1_bucket: int, level2_bucket: int, block_count: int) -> Position:
        """Map buckets back to a tape position, clamped below the summaries."""
        target = (level1_bucket * self.level1_interval + level2_bucket) * self.level2_interval
        if target >= block_count - 2:
            target = block_count - 3
        return target

    def build_index(self, device: TapeMedium) -> Cost:
        """Collect data blocks in tape order, then append both summaries."""
        self._index.clear()
        cost = 0.0
        origin = device.position
        count = device.block_count

        data_blocks: list[tuple[BlockId, Position]] = []
        if count > 0:
            cost += device.seek(0)
            for pos in range(count):
                block, read_cost = device.read_current()
                cost += read_cost
                if not block.is_index:
                    data_blocks.append((block.block_id, pos))
                if pos < count - 1:
                    cost += device.move_forward(1)

        cost += device.write(Block(LEVEL2_SUMMARY_ID, 0, is_index=True))
        cost += device.write(Block(LEVEL1_SUMMARY_ID, 0, is_index=True))

        for ordinal, (block_id, _) in enumerate(data_blocks):
            level2_bucket = ordinal // self.level2_interval
            level1_bucket = level2_bucket // self.level1_interval
            self._index[block_id] = (level1_bucket, level2_bucket)

        cost += device.seek(origin)
        logger.info(
            f"Built hierarchical index: {len(self._index)} entries over "
            f"{len(data_blocks)} data blocks"
        )
        return cost

    def find_block(self, device: TapeMedium, data_id: BlockId) -> Lookup:
        """Read both summaries, then probe the candidate position.

        Ids missing from the index return immediately at zero cost.
        """
        buckets = self._index.get(data_id)
        if buckets is None:
            return None, 0.0

        count = device.block_count
        cost = device.seek(count - 2)
        cost += device.read_current()[1]
        cost += device.seek(count - 1)
        cost += device.read_current()[1]

        target = self.candidate_position(*buckets, count)
        cost += device.seek(target)
        block, read_cost = device.read_current()
        cost += read_cost

        if block.block_id != data_id:
            logger.debug(f"Candidate {target} holds {block.block_id}, wanted {data_id}")
            return None, cost

        return target, cost

    def stats(self) -> str:
        return (
            f"Level1 interval: {self.level1_interval}, "
            f"Level2 interval: {self.level2_interval}, "
            f"Index entries: {len(self._index)}"
        )
