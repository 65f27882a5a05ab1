"""Protocol definition for the tape medium."""

from __future__ import annotations
from typing import Protocol
from ..core.types import Block, Cost, Position


class TapeMedium(Protocol):
    """Sequential-access device the index strategies operate on."""

    @property
    def position(self) -> Position:
        """Current head position."""
        ...

    @property
    def block_count(self) -> int:
        """Number of blocks written so far."""
        ...

    def write(self, block: Block) -> Cost:
        """Append block to the end of the tape."""
        ...

    def read_current(self) -> tuple[Block, Cost]:
        """Read the block under the head.

        Raises BlockOutOfRangeError if the head is past the last block.
        """
        ...

    def seek(self, position: Position) -> Cost:
        """Move the head to position.

        Raises BlockOutOfRangeError if position is not a written block.
        """
        ...

    def move_forward(self, n: int = 1) -> Cost:
        """Advance the head, clamped to the last block."""
        ...
