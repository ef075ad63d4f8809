[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samsa"
version = "0.1.8"
description = "Kafka/Redpanda protocol building blocks: error codes, wire encoding, partition assignment, cluster metadata and consumer types."
requires-python = ">=3.10"
dependencies = []
keywords = ["kafka", "redpanda", "protocol", "encoding", "consumer-group", "metadata"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["samsa"]

[tool.pytest.ini_options]
addopts = "-ra"
