"""Common type definitions for the tape simulator.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from dataclasses import dataclass

# Core primitive types
BlockId = int
Position = int
Cost = float  # simulated seconds
Lookup = tuple[Position | None, Cost]

UINT64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class Block:
    """A block written to tape.

    Only the payload size matters to the timing model, so the payload
    itself is never stored.
    """
    block_id: BlockId
    size: int
    is_index: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.block_id <= UINT64_MAX:
            raise ValueError(f"block_id must fit in 64 unsigned bits, got {self.block_id}")
        if self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}")
