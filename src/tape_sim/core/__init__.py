"""Tape simulator core."""

from .device import TapeDevice
from .simulator import SimulationResult, TapeSimulator

__all__ = ["TapeDevice", "TapeSimulator", "SimulationResult"]
