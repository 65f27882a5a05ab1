"""Fixed-interval index strategy.

Keeps an exact id -> position map in memory and drops an index marker
block onto the tape every ``interval`` data blocks.
"""

from __future__ import annotations

import logging

from ..core.config import DEFAULT_FIXED_INTERVAL, FIXED_INDEX_ID_OFFSET
from ..core.types import UINT64_MAX, Block, BlockId, Cost, Lookup, Position
from ..interfaces.device import TapeMedium

logger = logging.getLogger(__name__)


class FixedIntervalIndexStrategy:
    """Exact lookup map plus periodic on-tape index markers.

    Args:
        interval: Number of data blocks between appended index blocks

    Invariants:
        - After build_index over M data blocks the tape holds
          M // interval more index blocks than before
        - Every indexed position holds a data block with the indexed id
    """

    def __init__(self, interval: int = DEFAULT_FIXED_INTERVAL):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self._index: dict[BlockId, Position] = {}

    @property
    def name(self) -> str:
        return "Fixed Interval Index"

    def __len__(self) -> int:
        return len(self._index)

    def build_index(self, device: TapeMedium) -> Cost:
        """Walk the tape once, recording every data block.

        Markers are appended at the end of the tape, so the walk reaches
        them last and steps over them as index blocks.
        """
        self._index.clear()
        if device.block_count == 0:
            return 0.0

        origin = device.position
        cost = device.seek(0)
        data_blocks = 0
        markers = 0
        pos = 0

        while pos < device.block_count:
            if pos > 0:
                cost += device.move_forward(1)
            block, read_cost = device.read_current()
            cost += read_cost

            if not block.is_index:
                self._index[block.block_id] = pos
                data_blocks += 1
                if data_blocks % self.interval == 0:
                    marker_id = (block.block_id + FIXED_INDEX_ID_OFFSET) & UINT64_MAX
                    cost += device.write(Block(marker_id, 0, is_index=True))
                    markers += 1
            pos += 1

        cost += device.seek(origin)
        logger.info(
            f"Built fixed-interval index: {len(self._index)} entries, "
            f"{markers} index blocks appended"
        )
        return cost

    def find_block(self, device: TapeMedium, data_id: BlockId) -> Lookup:
        """Direct lookup; misses never touch the tape."""
        target = self._index.get(data_id)
        if target is None:
            return None, 0.0

        cost = device.seek(target)
        block, read_cost = device.read_current()
        cost += read_cost

        if block.block_id != data_id:
            logger.warning(f"Index entry for {data_id} points at block {block.block_id}")
            return None, cost

        return target, cost

    def stats(self) -> str:
        return f"Interval: {self.interval}, Index entries: {len(self._index)}"
