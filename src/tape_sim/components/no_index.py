"""Baseline strategy with no auxiliary index.

Every lookup is a linear scan of the tape.
"""

from __future__ import annotations

from ..core.types import BlockId, Cost, Lookup
from ..interfaces.device import TapeMedium


class NoIndexStrategy:
    """Circular full-tape scan starting at the current head position."""

    @property
    def name(self) -> str:
        return "No Index"

    def build_index(self, device: TapeMedium) -> Cost:
        """Nothing to build."""
        return 0.0

    def find_block(self, device: TapeMedium, data_id: BlockId) -> Lookup:
        """Scan forward from the head, wrapping around once.

        Returns the first data block matching data_id, or None together
        with the cost of the full pass.
        """
        cost = 0.0
        start = device.position
        count = device.block_count

        for i in range(count):
            pos = (start + i) % count
            cost += device.seek(pos)
            block, read_cost = device.read_current()
            cost += read_cost

            if not block.is_index and block.block_id == data_id:
                return pos, cost

        return None, cost

    def stats(self) -> str:
        return "No index used"
