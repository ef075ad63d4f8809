# samsa

Pure-Python building blocks for clients of Kafka and Redpanda clusters.
The package has no third-party dependencies.

## Modules

- `samsa.errors` holds `KafkaCode`, an `IntEnum` of the broker error codes
  such as `KafkaCode.NONE` and `KafkaCode.REBALANCE_IN_PROGRESS`. It also
  holds the exceptions, which all derive from `SamsaError`. Among them are
  `KafkaError` (carrying a `code`), `EncodingError`, `MetadataNeedsSync`,
  `AssignmentStrategyNotSupported` (carrying a `strategy`), `NotFound` and
  `ParsingError` (carrying `data`). Two errors compare equal when they are
  of the same class and carry the same values.
- `samsa.encode` has big-endian encoders that each return `bytes`:
  `encode_bool`, `encode_i8`, `encode_i16`, `encode_i32`, `encode_u32`,
  `encode_i64` and `encode_varint` (zig-zag, using `zigzag_encode`).
  `encode_string` and `encode_nullable_string` use a 16-bit length prefix.
  `encode_bytes` and `encode_nullable_bytes` use a 32-bit length prefix.
  `encode_array` and `encode_strings` write a 32-bit count followed by the
  elements. A value that does not fit its wire type raises `EncodingError`.
- `samsa.assignor` has `assign()` together with the `PartitionAssignment`
  and `MemberAssignment` dataclasses. The only strategy it supports is
  round-robin (`ROUND_ROBIN_PROTOCOL = "roundrobin"`).
- `samsa.metadata` has the dataclasses `BrokerAddress`, `Broker`,
  `Partition`, `Topic` and `ClusterMetadata`. `ClusterMetadata` offers
  lookups by broker id and topic partition, and groups topic partitions by
  the broker that leads them.
- `samsa.consumer` has the `ConsumeMessage` record, `FetchParams` with its
  defaults and `TopicPartitionsBuilder`.

## Installation

From a checkout of the project:

```
pip install .
```

## Examples

Encoding primitives:

```python
from samsa.encode import encode_i16, encode_string, encode_varint, encode_strings

encode_i16(5)                    # b"\x00\x05"
encode_string("test")            # b"\x00\x04test"
encode_varint(260)               # bytes([136, 4])
encode_strings(["abc", "defg"])  # b"\x00\x00\x00\x02\x00\x03abc\x00\x04defg"
```

A string whose UTF-8 form is longer than 32767 bytes raises
`samsa.errors.EncodingError`.

Round-robin assignment:

```python
from samsa.assignor import assign

assignments = assign("roundrobin", {"t0": [0, 1, 2], "t1": [0, 1, 2]}, 2)
assignments[0].partition_assignments[0].partitions  # [0, 2]  (t0)
assignments[0].partition_assignments[1].partitions  # [1]     (t1)
assignments[1].partition_assignments[0].partitions  # [1]     (t0)
assignments[1].partition_assignments[1].partitions  # [0, 2]  (t1)
```

Topics are ordered by name, and every member gets one entry per topic. An
unknown strategy raises `samsa.errors.AssignmentStrategyNotSupported`.

Building consumer assignments and fetch parameters:

```python
from samsa.consumer import FetchParams, TopicPartitionsBuilder

topic_partitions = TopicPartitionsBuilder().assign("my-topic", [0, 1, 2]).build()
# {"my-topic": [0, 1, 2]}; assigning a topic again replaces its partitions

params = FetchParams()
# correlation_id=1, client_id="samsa", max_wait_ms=200, min_bytes=100,
# max_bytes=30000, max_partition_bytes=20000, isolation_level=0
```

Finding partition leaders from cluster metadata:

```python
from samsa.errors import KafkaCode
from samsa.metadata import Broker, ClusterMetadata, Partition, Topic

cluster = ClusterMetadata(
    brokers=[Broker(1, b"localhost", 9092), Broker(2, b"localhost", 9093)],
    topics=[
        Topic(
            KafkaCode.NONE,
            b"purchases",
            partitions=[
                Partition(KafkaCode.NONE, 0, leader_id=2),
                Partition(KafkaCode.NONE, 1, leader_id=1),
                Partition(KafkaCode.NONE, 2, leader_id=2),
                Partition(KafkaCode.NONE, 3, leader_id=1),
            ],
        )
    ],
)

cluster.get_leader_id_for_topic_partition("purchases", 1)  # 1
cluster.get_leaders_for_topic_partitions({"purchases": [0, 1, 2, 3]})
# {2: {"purchases": [0, 2]}, 1: {"purchases": [1, 3]}}
cluster.get_broker_by_id(2).addr()  # BrokerAddress(host="localhost", port=9093)
```

If a partition has no known leader, `samsa.errors.MetadataNeedsSync` is
raised. `get_connections_for_topic_partitions` pairs each leader's entry
in `broker_connections` with the partitions that broker leads. It raises
`MetadataNeedsSync` when a leader has no entry there.

## What this package does not do

The package does not open network connections and does not speak to a
broker. It has no request or response messages and no decoder for broker
replies. It also has no producer, no consumer stream, no consumer-group
coordination, no TLS or SASL support and no command-line tool. The
`broker_connections` in `ClusterMetadata` are whatever objects the caller
stores there.

## Running the tests

```
pip install -e ".[test]"
pytest
```