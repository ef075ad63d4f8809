"""Library and protocol level errors."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class KafkaCode(IntEnum):
    """Error codes reported by a remote Kafka broker."""

    UNKNOWN = -1
    NONE = 0
    OFFSET_OUT_OF_RANGE = 1
    CORRUPT_MESSAGE = 2
    UNKNOWN_TOPIC_OR_PARTITION = 3
    INVALID_MESSAGE_SIZE = 4
    LEADER_NOT_AVAILABLE = 5
    NOT_LEADER_FOR_PARTITION = 6
    REQUEST_TIMED_OUT = 7
    BROKER_NOT_AVAILABLE = 8
    REPLICA_NOT_AVAILABLE = 9
    MESSAGE_SIZE_TOO_LARGE = 10
    STALE_CONTROLLER_EPOCH = 11
    OFFSET_METADATA_TOO_LARGE = 12
    NETWORK_EXCEPTION = 13
    GROUP_LOAD_IN_PROGRESS = 14
    GROUP_COORDINATOR_NOT_AVAILABLE = 15
    NOT_COORDINATOR_FOR_GROUP = 16
    INVALID_TOPIC = 17
    RECORD_LIST_TOO_LARGE = 18
    NOT_ENOUGH_REPLICAS = 19
    NOT_ENOUGH_REPLICAS_AFTER_APPEND = 20
    INVALID_REQUIRED_ACKS = 21
    ILLEGAL_GENERATION = 22
    INCONSISTENT_GROUP_PROTOCOL = 23
    INVALID_GROUP_ID = 24
    UNKNOWN_MEMBER_ID = 25
    INVALID_SESSION_TIMEOUT = 26
    REBALANCE_IN_PROGRESS = 27
    INVALID_COMMIT_OFFSET_SIZE = 28
    TOPIC_AUTHORIZATION_FAILED = 29
    GROUP_AUTHORIZATION_FAILED = 30
    CLUSTER_AUTHORIZATION_FAILED = 31
    INVALID_TIMESTAMP = 32
    UNSUPPORTED_SASL_MECHANISM = 33
    ILLEGAL_SASL_STATE = 34
    UNSUPPORTED_VERSION = 35
    TOPIC_ALREADY_EXISTS = 36
    NOT_CONTROLLER = 41
    SASL_AUTHENTICATION_FAILED = 58


def _describe(value: Any) -> str:
    if isinstance(value, KafkaCode):
        return value.name
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return repr(value)


class SamsaError(Exception):
    """Base class of every error raised by this package.

    Two errors are equal when they are of the same kind and carry the same data.
    """

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __str__(self) -> str:
        name = type(self).__name__
        if not self.args:
            return name
        return f"{name}({', '.join(_describe(arg) for arg in self.args)})"


class NoConnectionForBroker(SamsaError):
    """The broker exists in the metadata, but there is no open connection to it."""

    def __init__(self, broker_id: int) -> None:
        super().__init__(broker_id)
        self.broker_id = broker_id


class NoLeaderForTopicPartition(SamsaError):
    """The topic partition has no leader represented in the metadata."""

    def __init__(self, topic: str, partition: int) -> None:
        super().__init__(topic, partition)
        self.topic = topic
        self.partition = partition


class EncodingError(SamsaError):
    """Data could not be encoded into the wire format."""


class ArgError(SamsaError):
    """An argument failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IoError(SamsaError):
    """An error in the network."""

    def __init__(self, kind: Any) -> None:
        super().__init__(kind)
        self.kind = kind


class KafkaError(SamsaError):
    """An error code returned by the broker."""

    def __init__(self, code: KafkaCode) -> None:
        code = KafkaCode(code)
        super().__init__(code)
        self.code = code


class DecodingUtf8Error(SamsaError):
    """Bytes could not be decoded as UTF-8."""


class ParsingError(SamsaError):
    """Received data could not be parsed."""

    def __init__(self, data: bytes) -> None:
        super().__init__(bytes(data))
        self.data = bytes(data)


class MissingData(SamsaError):
    """Expected data was absent."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MetadataNeedsSync(SamsaError):
    """The cluster metadata is out of date."""


class AssignmentStrategyNotSupported(SamsaError):
    """The requested partition assignment strategy is unknown."""

    def __init__(self, strategy: str) -> None:
        super().__init__(strategy)
        self.strategy = strategy


class LockError(SamsaError):
    """A lock could not be acquired."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(SamsaError):
    """The requested resource does not exist."""


class MissingBrokerConfigOptions(SamsaError):
    """No broker addresses were configured."""


class IncorrectConnectionUsage(SamsaError):
    """A connection was used in a way it does not support."""


class InvalidSaslMechanism(SamsaError):
    """The SASL mechanism is not valid."""