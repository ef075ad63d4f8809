"""Consumed message format, fetch parameters and topic-partition assignments."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_CORRELATION_ID = 1
DEFAULT_CLIENT_ID = "samsa"

DEFAULT_MAX_WAIT_MS = 200
DEFAULT_MIN_BYTES = 100
DEFAULT_MAX_BYTES = 30000
DEFAULT_MAX_PARTITION_BYTES = 20000
DEFAULT_ISOLATION_LEVEL = 0

TopicPartitions = dict[str, list[int]]
"""Assignment of topic names to the partitions to read from."""

PartitionOffsets = dict[tuple[str, int], int]
"""Offsets keyed by ``(topic, partition)``."""


@dataclass
class ConsumeMessage:
    """A record read from a topic partition."""

    key: bytes
    value: bytes
    offset: int
    timestamp: int
    topic_name: str
    partition_index: int


@dataclass
class FetchParams:
    """Parameters sent with every fetch request."""

    correlation_id: int = DEFAULT_CORRELATION_ID
    client_id: str = DEFAULT_CLIENT_ID
    max_wait_ms: int = DEFAULT_MAX_WAIT_MS
    min_bytes: int = DEFAULT_MIN_BYTES
    max_bytes: int = DEFAULT_MAX_BYTES
    max_partition_bytes: int = DEFAULT_MAX_PARTITION_BYTES
    isolation_level: int = DEFAULT_ISOLATION_LEVEL


class TopicPartitionsBuilder:
    """Build a topic-partition assignment for consumers.

    Assigning the same topic twice replaces its earlier partitions.
    """

    def __init__(self) -> None:
        self._data: TopicPartitions = {}

    def assign(self, topic: str, partitions: Iterable[int]) -> TopicPartitionsBuilder:
        """Assign ``partitions`` of ``topic``; returns the builder for chaining."""
        self._data[topic] = list(partitions)
        return self

    def build(self) -> TopicPartitions:
        """The assignment built so far, as a new mapping."""
        return {topic: list(parts) for topic, parts in self._data.items()}