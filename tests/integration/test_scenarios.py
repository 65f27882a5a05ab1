"""End-to-end scenarios for the tape simulator.

Covers:
1. Fixed-interval indexing over a known workload
2. Empty tape behaviour across every strategy
3. Head-to-head comparison on a shared workload
4. Known inaccuracy of hierarchical position recovery
"""

import pytest

from tape_sim import (
    STRATEGY_NAMES,
    Block,
    BlockOutOfRangeError,
    FixedIntervalIndexStrategy,
    HierarchicalIndexStrategy,
    TapeDevice,
    TapeSimulator,
    create_strategy,
)
from tape_sim.core.config import MAX_DATA_ID


@pytest.fixture
def sequential_tape():
    """Tape holding data blocks with ids 1..100 in order."""
    tape = TapeDevice()
    for block_id in range(1, 101):
        tape.write(Block(block_id, 512))
    return tape


def test_fixed_interval_scenario(sequential_tape):
    """Test 100 blocks with interval 10: 100 entries, 10 markers, id 57 found."""
    strategy = FixedIntervalIndexStrategy(interval=10)
    strategy.build_index(sequential_tape)

    assert len(strategy) == 100
    index_blocks = [
        i for i in range(sequential_tape.block_count) if sequential_tape.block_at(i).is_index
    ]
    assert len(index_blocks) == 10

    pos, cost = strategy.find_block(sequential_tape, 57)
    assert pos is not None
    assert sequential_tape.block_at(pos).block_id == 57
    assert cost > 0


def test_empty_tape_scenario():
    """Test reads and seeks fail and no strategy crashes on an empty tape."""
    tape = TapeDevice()

    with pytest.raises(BlockOutOfRangeError):
        tape.read_current()
    with pytest.raises(BlockOutOfRangeError):
        tape.seek(0)

    for name in STRATEGY_NAMES:
        tape.reset()
        strategy = create_strategy(name)
        strategy.build_index(tape)
        assert strategy.find_block(tape, 42) == (None, 0.0)


def test_comparison_shares_workload():
    """Test every strategy sees the same data in a comparison."""
    reference = TapeSimulator(seed=2024)
    reference.generate_workload(400)
    tape = reference.device
    present = sorted({tape.block_at(i).block_id for i in range(0, 400, 7)})
    absent = [MAX_DATA_ID + 1 + i for i in range(10)]
    queries = present + absent

    simulator = TapeSimulator(seed=2024)
    none, fixed, hierarchical = simulator.run_comparison(400, queries, ["none", "fixed", "hierarchical"])

    # Same seed, so the comparison regenerated the reference workload
    data = [
        simulator.device.block_at(i).block_id
        for i in range(simulator.device.block_count)
        if not simulator.device.block_at(i).is_index
    ]
    assert data == [tape.block_at(i).block_id for i in range(400)]

    assert none.hits == len(present)
    assert fixed.hits == len(present)
    assert hierarchical.hits <= fixed.hits
    assert none.total_queries == fixed.total_queries == hierarchical.total_queries == len(queries)

    # Scans pay for every miss, index lookups do not
    assert none.total_seeks == len(queries)
    assert fixed.total_seeks == len(present)
    assert hierarchical.total_seeks == len(present)
    assert fixed.average_access_time < none.average_access_time


def test_fixed_index_survives_later_strategies():
    """Test fixed-interval positions stay valid after more blocks are appended."""
    simulator = TapeSimulator(seed=8)
    simulator.generate_workload(120)
    fixed = FixedIntervalIndexStrategy(10)
    fixed.build_index(simulator.device)
    HierarchicalIndexStrategy().build_index(simulator.device)

    for i in range(120):
        block_id = simulator.device.block_at(i).block_id
        pos, _ = fixed.find_block(simulator.device, block_id)
        assert simulator.device.block_at(pos).block_id == block_id


def test_hierarchical_recovery_is_approximate(sequential_tape):
    """Document which ids the bucket arithmetic recovers on a clean tape.

    With level-2 buckets of 10, only the first block of each bucket is
    probed, so for 100 sequential ids exactly the ten bucket leaders are
    found. Everything else is reported missing despite being indexed.
    """
    strategy = HierarchicalIndexStrategy(level1_interval=100, level2_interval=10)
    strategy.build_index(sequential_tape)

    found = [
        block_id for block_id in range(1, 101)
        if strategy.find_block(sequential_tape, block_id)[0] is not None
    ]
    assert found == [1, 11, 21, 31, 41, 51, 61, 71, 81, 91]
    assert strategy.find_block(sequential_tape, 57)[0] is None


def test_hierarchical_past_first_level1_bucket_misses():
    """Document that candidates drift once a level-1 bucket is full.

    Ordinal 1000 maps to buckets (1, 100) and the candidate position
    (1 * 100 + 100) * 10 = 2000, not 1000.
    """
    tape = TapeDevice()
    for block_id in range(1, 2501):
        tape.write(Block(block_id, 64))
    strategy = HierarchicalIndexStrategy()
    strategy.build_index(tape)

    assert strategy.candidate_position(*strategy.buckets_for(1001), tape.block_count) == 2000
    pos, _ = strategy.find_block(tape, 1001)
    assert pos is None
    # ordinal 2499 clamps to the last data block, which happens to be right
    assert strategy.find_block(tape, 2500)[0] == 2499
