"""Partition assignment strategies for consumer groups."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from samsa.errors import ArgError, AssignmentStrategyNotSupported

logger = logging.getLogger(__name__)

ROUND_ROBIN_PROTOCOL = "roundrobin"
RANGE_PROTOCOL = "range"
DEFAULT_VERSION = 3


@dataclass
class PartitionAssignment:
    """Partitions of one topic given to a group member."""

    topic_name: str
    partitions: list[int] = field(default_factory=list)


@dataclass
class MemberAssignment:
    """Everything assigned to one group member."""

    version: int = DEFAULT_VERSION
    partition_assignments: list[PartitionAssignment] = field(default_factory=list)
    user_data: bytes | None = None


TopicPartitionsInput = (
    Mapping[str, Sequence[int]] | Iterable[tuple[str, Sequence[int]]]
)


def assign(
    strategy: str,
    assigned_topic_partitions: TopicPartitionsInput,
    number_of_consumers: int,
) -> list[MemberAssignment]:
    """Split topic partitions between ``number_of_consumers`` members.

    ``assigned_topic_partitions`` is a mapping of topic name to partitions
    or an iterable of ``(topic, partitions)`` pairs.
    """
    if strategy == ROUND_ROBIN_PROTOCOL:
        if isinstance(assigned_topic_partitions, Mapping):
            pairs = list(assigned_topic_partitions.items())
        else:
            pairs = list(assigned_topic_partitions)
        return _round_robin(pairs, number_of_consumers)
    raise AssignmentStrategyNotSupported(strategy)


def _round_robin(
    topic_partitions: list[tuple[str, Sequence[int]]],
    number_of_consumers: int,
) -> list[MemberAssignment]:
    """Deal partitions out to consumers in turn, topics in name order."""
    if number_of_consumers < 0:
        raise ArgError("number of consumers must not be negative")
    if number_of_consumers == 0 and any(parts for _, parts in topic_partitions):
        raise ArgError("cannot assign partitions to zero consumers")

    ordered = sorted(topic_partitions, key=lambda pair: pair[0])
    for topic_name, _ in ordered:
        logger.info("%s", topic_name)

    members = [
        MemberAssignment(
            partition_assignments=[
                PartitionAssignment(topic_name=name) for name, _ in ordered
            ]
        )
        for _ in range(number_of_consumers)
    ]

    for topic_count, (_, partitions) in enumerate(ordered):
        for partition_count, partition in enumerate(partitions):
            member_index = ((topic_count + 1) + (partition_count + 1)) % number_of_consumers
            members[member_index].partition_assignments[topic_count].partitions.append(
                partition
            )

    return members