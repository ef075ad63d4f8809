"""Kafka/Redpanda protocol building blocks: errors, wire encoding, partition assignment, cluster metadata and consumer types."""

__version__ = "0.1.8"
__all__ = ["errors", "encode", "assignor", "metadata", "consumer"]