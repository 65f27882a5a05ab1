"""Tape device timing model.

Holds an append-only sequence of blocks and a single head position.
Every operation returns its simulated cost in seconds.
"""

from __future__ import annotations

import logging

from .config import TapeConfig
from .errors import BlockOutOfRangeError
from .types import Block, Cost, Position

logger = logging.getLogger(__name__)


class TapeDevice:
    """Sequential-access device with linear seek and transfer costs.

    Args:
        config: Timing parameters (defaults to TapeConfig())

    Invariants:
        - Blocks are only ever appended, never removed or rewritten
        - Once a block exists the head is a valid index into the sequence
        - Seek cost is |target - head| * seek_time_per_block
        - Transfer cost is payload size / throughput
    """

    def __init__(self, config: TapeConfig | None = None):
        self.config = config if config is not None else TapeConfig()
        self._blocks: list[Block] = []
        self._position: Position = 0

    @property
    def block_size(self) -> int:
        return self.config.block_size

    @property
    def position(self) -> Position:
        """Current head position."""
        return self._position

    @property
    def block_count(self) -> int:
        return len(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def write(self, block: Block) -> Cost:
        """Append block to the end of the tape. The head does not move."""
        self._blocks.append(block)
        return block.size / self.config.write_speed

    def read_current(self) -> tuple[Block, Cost]:
        """Return the block under the head and its transfer cost."""
        if self._position >= len(self._blocks):
            raise BlockOutOfRangeError(
                f"Read at position {self._position} out of range ({len(self._blocks)} blocks)"
            )
        block = self._blocks[self._position]
        return block, block.size / self.config.read_speed

    def seek(self, position: Position) -> Cost:
        """Move the head to position and return the travel cost."""
        if not 0 <= position < len(self._blocks):
            raise BlockOutOfRangeError(
                f"Seek to position {position} out of range ({len(self._blocks)} blocks)"
            )
        distance = abs(position - self._position)
        self._position = position
        return distance * self.config.seek_time_per_block

    def move_forward(self, n: int = 1) -> Cost:
        """Advance the head n blocks, stopping at the last block."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return self.seek(min(self._position + n, len(self._blocks) - 1))

    def move_backward(self, n: int = 1) -> Cost:
        """Rewind the head n blocks, stopping at position 0."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return self.seek(max(self._position - n, 0))

    def block_at(self, index: Position) -> Block:
        """Inspect a block without moving the head or charging any cost."""
        if not 0 <= index < len(self._blocks):
            raise BlockOutOfRangeError(
                f"Block index {index} out of range ({len(self._blocks)} blocks)"
            )
        return self._blocks[index]

    def reset(self) -> None:
        """Erase the tape and rewind the head."""
        logger.debug(f"Resetting tape ({len(self._blocks)} blocks)")
        self._blocks.clear()
        self._position = 0
