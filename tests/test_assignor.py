import pytest

from samsa.assignor import (
    RANGE_PROTOCOL,
    ROUND_ROBIN_PROTOCOL,
    MemberAssignment,
    PartitionAssignment,
    assign,
)
from samsa.errors import ArgError, AssignmentStrategyNotSupported


def test_roundrobin_assignor():
    topics = {"t0": [0, 1, 2], "t1": [0, 1, 2]}
    assignments = assign(ROUND_ROBIN_PROTOCOL, list(topics.items()), 2)

    # C0: [t0p0, t0p2, t1p1]
    assert assignments[0].partition_assignments[0].topic_name == "t0"
    assert assignments[0].partition_assignments[0].partitions == [0, 2]
    assert assignments[0].partition_assignments[1].topic_name == "t1"
    assert assignments[0].partition_assignments[1].partitions == [1]
    # C1: [t0p1, t1p0, t1p2]
    assert assignments[1].partition_assignments[0].topic_name == "t0"
    assert assignments[1].partition_assignments[0].partitions == [1]
    assert assignments[1].partition_assignments[1].topic_name == "t1"
    assert assignments[1].partition_assignments[1].partitions == [0, 2]


def test_roundrobin_accepts_mapping_in_any_order():
    from_mapping = assign(ROUND_ROBIN_PROTOCOL, {"t1": [0, 1, 2], "t0": [0, 1, 2]}, 2)
    from_pairs = assign(ROUND_ROBIN_PROTOCOL, [("t0", [0, 1, 2]), ("t1", [0, 1, 2])], 2)
    assert from_mapping == from_pairs


def test_every_partition_assigned_exactly_once():
    topics = {"a": list(range(7)), "b": list(range(4)), "c": [5, 9]}
    assignments = assign(ROUND_ROBIN_PROTOCOL, topics, 3)
    assert len(assignments) == 3
    for topic_index, name in enumerate(sorted(topics)):
        collected = sorted(
            p
            for member in assignments
            for p in member.partition_assignments[topic_index].partitions
        )
        assert collected == sorted(topics[name])


def test_counts_within_one_for_single_topic():
    assignments = assign(ROUND_ROBIN_PROTOCOL, {"t": list(range(10))}, 3)
    counts = [len(m.partition_assignments[0].partitions) for m in assignments]
    assert max(counts) - min(counts) <= 1
    assert sum(counts) == 10


def test_default_member_fields():
    assignments = assign(ROUND_ROBIN_PROTOCOL, {"t": [0]}, 1)
    assert assignments == [
        MemberAssignment(
            version=3,
            partition_assignments=[PartitionAssignment("t", [0])],
            user_data=None,
        )
    ]


def test_unsupported_strategy():
    with pytest.raises(AssignmentStrategyNotSupported) as info:
        assign(RANGE_PROTOCOL, {"t": [0]}, 1)
    assert info.value.strategy == RANGE_PROTOCOL


def test_zero_consumers_with_partitions_rejected():
    with pytest.raises(ArgError):
        assign(ROUND_ROBIN_PROTOCOL, {"t": [0]}, 0)


def test_zero_consumers_without_partitions_gives_nothing():
    assert assign(ROUND_ROBIN_PROTOCOL, {}, 0) == []