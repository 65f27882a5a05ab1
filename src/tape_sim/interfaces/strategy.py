"""Protocol definition for index strategies."""

from __future__ import annotations
from typing import Protocol
from ..core.types import BlockId, Cost, Lookup
from .device import TapeMedium


class IndexStrategy(Protocol):
    """Builds an auxiliary index over a tape and resolves ids to positions."""

    @property
    def name(self) -> str:
        """Human-readable strategy name used in reports."""
        ...

    def build_index(self, device: TapeMedium) -> Cost:
        """Rebuild the index from scratch and return the simulated cost.

        May append index blocks to the device. The head is returned to
        where it was before the call.
        """
        ...

    def find_block(self, device: TapeMedium, data_id: BlockId) -> Lookup:
        """Return (position or None, simulated cost) for data_id."""
        ...

    def stats(self) -> str:
        """Short description of the index contents."""
        ...
