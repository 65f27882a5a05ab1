"""Configuration for the tape simulator.

Defines the device timing parameters and the workload defaults.
"""

from __future__ import annotations

from dataclasses import dataclass

# Workload generation
MIN_DATA_ID = 1
MAX_DATA_ID = 1_000_000
DEFAULT_SIZE_RATIO = 0.5

# Strategy defaults
DEFAULT_FIXED_INTERVAL = 10
DEFAULT_LEVEL1_INTERVAL = 100
DEFAULT_LEVEL2_INTERVAL = 10

# Identifiers given to index blocks appended during build_index
FIXED_INDEX_ID_OFFSET = 1_000_000
LEVEL2_SUMMARY_ID = 1_000_000
LEVEL1_SUMMARY_ID = 2_000_000

# Command line defaults
DEFAULT_BLOCK_COUNT = 10_000
DEFAULT_QUERY_COUNT = 1_000


@dataclass
class TapeConfig:
    """Timing parameters of the simulated tape device.

    Attributes:
        block_size: Nominal block size in bytes, bounds generated payloads
        read_speed: Read throughput in bytes/second
        write_speed: Write throughput in bytes/second
        seek_time_per_block: Head travel time per block in seconds
    """

    block_size: int = 4096
    read_speed: float = 1024 * 1024  # 1 MB/s
    write_speed: float = 512 * 1024  # 512 KB/s
    seek_time_per_block: float = 0.01  # 10 ms

    def __post_init__(self) -> None:
        if self.block_size <= 0:
            raise ValueError(f"block_size must be positive, got {self.block_size}")
        if self.read_speed <= 0 or self.write_speed <= 0:
            raise ValueError("read_speed and write_speed must be positive")
        if self.seek_time_per_block < 0:
            raise ValueError(
                f"seek_time_per_block must be non-negative, got {self.seek_time_per_block}"
            )
