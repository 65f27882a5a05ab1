"""Exception hierarchy for the tape simulator."""

from __future__ import annotations


class TapeSimError(Exception):
    """Base exception for all tape simulator errors."""
    pass


class BlockOutOfRangeError(TapeSimError, IndexError):
    """Raised when a seek or read targets a position past the last block."""
    pass


class UnknownStrategyError(TapeSimError, ValueError):
    """Raised when the factory is asked for an unrecognized strategy name."""
    pass


class NoStrategyError(TapeSimError, RuntimeError):
    """Raised when a simulation runs before a strategy has been selected."""
    pass
