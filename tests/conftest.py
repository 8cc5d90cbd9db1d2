"""Shared test fixtures for all test modules."""

import socket
from collections.abc import Callable, Generator

import pytest

from stormstatsd.adapters.in_memory import InMemoryCounterClient
from stormstatsd.consumer import StatsdMetricConsumer
from stormstatsd.core.models import TaskInfo


class RecordingErrorReporter:
    """ErrorReporterPort that keeps every reported error."""

    def __init__(self) -> None:
        self.errors: list[BaseException] = []

    def report_error(self, error: BaseException) -> None:
        self.errors.append(error)


@pytest.fixture
def task_info() -> TaskInfo:
    """Origin used by the end-to-end naming examples."""
    return TaskInfo(
        src_worker_host="node1.local",
        src_worker_port=6700,
        src_component_id="bolt:1",
    )


@pytest.fixture
def base_config() -> dict[str, object]:
    """Minimal topology configuration with a collector host."""
    return {
        "topology.name": "word.count",
        "metrics.statsd.host": "localhost",
    }


@pytest.fixture
def error_reporter() -> RecordingErrorReporter:
    """Fresh error reporter for each test."""
    return RecordingErrorReporter()


@pytest.fixture
def in_memory_consumer(
    base_config: dict[str, object],
) -> tuple[StatsdMetricConsumer, InMemoryCounterClient]:
    """Configured consumer wired to an in-memory counter client.

    Returns a tuple of (consumer, client).
    """
    consumer = StatsdMetricConsumer(client_factory=InMemoryCounterClient)
    consumer.configure(base_config)
    assert isinstance(consumer.client, InMemoryCounterClient)
    return consumer, consumer.client


# === UDP Fixtures ===


@pytest.fixture
def udp_listener() -> Generator[socket.socket]:
    """UDP socket bound to an ephemeral loopback port, acting as collector."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()


@pytest.fixture
def receive_datagrams(
    udp_listener: socket.socket,
) -> Callable[[int], list[str]]:
    """Factory fixture that reads n datagrams from the listener."""

    def _receive(n: int) -> list[str]:
        return [udp_listener.recv(4096).decode() for _ in range(n)]

    return _receive
