"""Counter client adapters implementing CounterClientPort."""

from stormstatsd.adapters.in_memory import InMemoryCounterClient
from stormstatsd.adapters.statsd_client import StatsdCounterClient

__all__ = [
    "InMemoryCounterClient",
    "StatsdCounterClient",
]
