"""Cluster metadata and the lookups built on it."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from samsa.errors import DecodingUtf8Error, KafkaCode, MetadataNeedsSync

logger = logging.getLogger(__name__)

C = TypeVar("C")

TopicPartitions = dict[str, list[int]]

_U16_MAX = 2**16 - 1


def _to_bytes(value: bytes | str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


@dataclass(frozen=True)
class BrokerAddress:
    """Host and port of a broker."""

    host: str
    port: int


@dataclass
class Broker:
    """A broker as described by a metadata response."""

    node_id: int
    host: bytes
    port: int
    rack: bytes | None = None

    def __post_init__(self) -> None:
        self.host = _to_bytes(self.host)
        if self.rack is not None:
            self.rack = _to_bytes(self.rack)

    def addr(self) -> BrokerAddress:
        """The address to connect to this broker on."""
        try:
            host = self.host.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.error("Error converting from UTF8 %r", exc)
            raise DecodingUtf8Error() from exc
        if not 0 <= self.port <= _U16_MAX:
            logger.error(
                "Error decoding Broker connection port from metadata %r", self.port
            )
            raise MetadataNeedsSync()
        return BrokerAddress(host=host, port=self.port)


@dataclass
class Partition:
    """A topic partition as described by a metadata response."""

    error_code: KafkaCode
    partition_index: int
    leader_id: int
    replica_nodes: list[int] = field(default_factory=list)
    isr_nodes: list[int] = field(default_factory=list)


@dataclass
class Topic:
    """A topic as described by a metadata response."""

    error_code: KafkaCode
    name: bytes
    is_internal: bool = False
    partitions: list[Partition] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _to_bytes(self.name)


@dataclass
class ClusterMetadata(Generic[C]):
    """Brokers, topics and open broker connections of a cluster."""

    connection_params: Any = None
    broker_connections: dict[int, C] = field(default_factory=dict)
    brokers: list[Broker] = field(default_factory=list)
    topics: list[Topic] = field(default_factory=list)
    correlation_id: int = 1
    client_id: str = "samsa"
    topic_names: list[str] = field(default_factory=list)
    controller_id: int = -1

    def get_broker_by_id(self, node_id: int) -> Broker | None:
        return next((b for b in self.brokers if b.node_id == node_id), None)

    def get_topic_partition_by_id(
        self, topic_name: str, partition_id: int
    ) -> Partition | None:
        wanted = _to_bytes(topic_name)
        topic = next((t for t in self.topics if t.name == wanted), None)
        if topic is None:
            return None
        return next(
            (p for p in topic.partitions if p.partition_index == partition_id), None
        )

    def get_leader_id_for_cluster(self) -> int:
        return self.controller_id

    def get_leader_id_for_topic_partition(
        self, topic_name: str, partition_id: int
    ) -> int | None:
        partition = self.get_topic_partition_by_id(topic_name, partition_id)
        if partition is None:
            return None
        leader = self.get_broker_by_id(partition.leader_id)
        if leader is None:
            return None
        logger.debug(
            "Leader is %r for topic %s and partition %s",
            leader,
            topic_name,
            partition_id,
        )
        return leader.node_id

    def get_leaders_for_topic_partitions(
        self, topic_partitions: Mapping[str, Sequence[int]]
    ) -> dict[int, TopicPartitions]:
        """Group the given topic partitions by the broker that leads them.

        Raises ``MetadataNeedsSync`` if any partition has no known leader.
        """
        located: list[tuple[str, int, int]] = []
        for topic_name, partitions in topic_partitions.items():
            for partition in partitions:
                broker_id = self.get_leader_id_for_topic_partition(topic_name, partition)
                if broker_id is None:
                    raise MetadataNeedsSync()
                located.append((topic_name, partition, broker_id))

        leaders: dict[int, TopicPartitions] = {}
        for topic_name, partition, broker_id in located:
            owned = leaders.setdefault(broker_id, {}).setdefault(topic_name, [])
            if partition not in owned:
                owned.append(partition)
        return leaders

    def get_connections_for_topic_partitions(
        self, topic_partitions: Mapping[str, Sequence[int]]
    ) -> list[tuple[C, TopicPartitions]]:
        """Pair each leading broker's connection with the partitions it leads."""
        connections: list[tuple[C, TopicPartitions]] = []
        for broker_id, assignments in self.get_leaders_for_topic_partitions(
            topic_partitions
        ).items():
            conn = self.broker_connections.get(broker_id)
            if conn is None:
                logger.error("No broker connection for assignment %r", assignments)
                raise MetadataNeedsSync()
            logger.debug("Broker %s is in charge of %r", broker_id, assignments)
            connections.append((conn, assignments))
        return connections