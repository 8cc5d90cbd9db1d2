"""Forward stream-processing task metrics to a StatsD daemon."""

from stormstatsd.adapters.in_memory import InMemoryCounterClient
from stormstatsd.adapters.statsd_client import StatsdCounterClient
from stormstatsd.consumer import StatsdMetricConsumer
from stormstatsd.core.config import (
    STATSD_HOST,
    STATSD_PORT,
    STATSD_PREFIX,
    TOPOLOGY_NAME,
    ConfigurationError,
    StatsdConfig,
)
from stormstatsd.core.logs import get_logger
from stormstatsd.core.models import DataPoint, Metric, TaskInfo
from stormstatsd.core.naming import clean
from stormstatsd.core.ports import (
    CounterClientPort,
    ErrorReporterPort,
    MetricsConsumerPort,
)

__all__ = [
    "STATSD_HOST",
    "STATSD_PORT",
    "STATSD_PREFIX",
    "TOPOLOGY_NAME",
    "ConfigurationError",
    "CounterClientPort",
    "DataPoint",
    "ErrorReporterPort",
    "InMemoryCounterClient",
    "Metric",
    "MetricsConsumerPort",
    "StatsdConfig",
    "StatsdCounterClient",
    "StatsdMetricConsumer",
    "TaskInfo",
    "clean",
    "get_logger",
]
