import pytest

from samsa.errors import DecodingUtf8Error, KafkaCode, MetadataNeedsSync
from samsa.metadata import Broker, BrokerAddress, ClusterMetadata, Partition, Topic


def make_cluster(connections=None):
    return ClusterMetadata(
        connection_params=[BrokerAddress(host="localhost", port=9092)],
        broker_connections=connections or {},
        topic_names=["purchases"],
        correlation_id=1,
        client_id="client_id",
        controller_id=1,
        brokers=[
            Broker(node_id=1, host=b"localhost", port=9092),
            Broker(node_id=2, host=b"localhost", port=9093),
        ],
        topics=[
            Topic(
                error_code=KafkaCode.NONE,
                name=b"purchases",
                is_internal=False,
                partitions=[
                    Partition(KafkaCode.NONE, 0, 2, [2], [2]),
                    Partition(KafkaCode.NONE, 1, 1, [1], [1]),
                    Partition(KafkaCode.NONE, 2, 2, [2], [2]),
                    Partition(KafkaCode.NONE, 3, 1, [1], [1]),
                ],
            )
        ],
    )


def test_broker_by_id():
    broker = make_cluster().get_broker_by_id(1)
    assert broker is not None
    assert broker.port == 9092


def test_broker_by_id_missing():
    assert make_cluster().get_broker_by_id(7) is None


def test_partition_by_id():
    partition = make_cluster().get_topic_partition_by_id("purchases", 1)
    assert partition is not None
    assert partition.partition_index == 1


def test_partition_by_id_unknown_topic():
    assert make_cluster().get_topic_partition_by_id("other", 1) is None


def test_broker_url():
    broker = Broker(node_id=2, host=b"localhost", port=9093)
    assert broker.addr() == BrokerAddress(host="localhost", port=9093)


def test_broker_addr_invalid_utf8():
    with pytest.raises(DecodingUtf8Error):
        Broker(node_id=1, host=b"\xff\xfe", port=9092).addr()


@pytest.mark.parametrize("port", [-1, 70000])
def test_broker_addr_port_out_of_range(port):
    with pytest.raises(MetadataNeedsSync):
        Broker(node_id=1, host=b"localhost", port=port).addr()


def test_partition_leader():
    cluster = make_cluster()
    assert cluster.get_leader_id_for_topic_partition("purchases", 1) == 1
    assert cluster.get_leader_id_for_topic_partition("purchases", 0) == 2


def test_partition_leader_missing_partition():
    assert make_cluster().get_leader_id_for_topic_partition("purchases", 9) is None


def test_leader_for_cluster():
    assert make_cluster().get_leader_id_for_cluster() == 1


def test_get_leaders_for_topic_partitions():
    leaders = make_cluster().get_leaders_for_topic_partitions(
        {"purchases": [0, 1, 2, 3]}
    )
    assert len(leaders) == 2
    assert leaders[1] == {"purchases": [1, 3]}
    assert leaders[2] == {"purchases": [0, 2]}


def test_get_leaders_deduplicates_partitions():
    leaders = make_cluster().get_leaders_for_topic_partitions({"purchases": [1, 1, 3]})
    assert leaders == {1: {"purchases": [1, 3]}}


def test_get_leaders_unknown_partition_raises():
    with pytest.raises(MetadataNeedsSync):
        make_cluster().get_leaders_for_topic_partitions({"purchases": [0, 42]})


def test_get_connections_for_topic_partitions():
    cluster = make_cluster({1: "conn-1", 2: "conn-2"})
    result = dict(
        cluster.get_connections_for_topic_partitions({"purchases": [0, 1, 2, 3]})
    )
    assert result == {
        "conn-1": {"purchases": [1, 3]},
        "conn-2": {"purchases": [0, 2]},
    }


def test_get_connections_missing_connection_raises():
    cluster = make_cluster({1: "conn-1"})
    with pytest.raises(MetadataNeedsSync):
        cluster.get_connections_for_topic_partitions({"purchases": [0]})


def test_topic_name_from_str_is_stored_as_bytes():
    topic = Topic(error_code=KafkaCode.NONE, name="orders")
    assert topic.name == b"orders"