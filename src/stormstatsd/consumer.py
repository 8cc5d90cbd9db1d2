"""Metrics consumer that reports task data points to a StatsD daemon.

Every data point is turned into one or more counter increments named
"<host>.<port>.<component>.<data point>[.<sub name>]" under the namespace
"<prefix><topology>", with reserved StatsD characters replaced by "_".

Example:
    ```python
    consumer = StatsdMetricConsumer()
    consumer.configure(
        {"topology.name": "wordcount", "metrics.statsd.host": "localhost"}
    )
    consumer.deliver(
        TaskInfo("node1", 6700, "split"),
        [DataPoint("__emit-count", 12)],
    )
    consumer.shutdown()
    ```
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from stormstatsd.adapters.statsd_client import StatsdCounterClient
from stormstatsd.core.config import StatsdConfig, resolve_config
from stormstatsd.core.logs import get_logger
from stormstatsd.core.models import DataPoint, Metric, TaskInfo
from stormstatsd.core.naming import data_points_to_metrics
from stormstatsd.core.ports import CounterClientPort, ErrorReporterPort

logger = get_logger(__name__)

ClientFactory = Callable[
    [str | None, str | None, int, ErrorReporterPort | None], CounterClientPort
]


def _warn_not_configured(what: str) -> None:
    logger.warning("dropping %s: consumer is not configured", what)


class StatsdMetricConsumer:
    """MetricsConsumerPort implementation forwarding counters to StatsD.

    Args:
        client_factory: Builds the counter client from
            (namespace, host, port, error_reporter). Defaults to
            StatsdCounterClient.
    """

    def __init__(self, client_factory: ClientFactory | None = None) -> None:
        self._client_factory = client_factory or StatsdCounterClient
        self.config: StatsdConfig | None = None
        self.context: Any = None
        self.client: CounterClientPort | None = None

    def configure(
        self,
        base_config: Mapping[Any, Any],
        registration_argument: Any = None,
        context: Any = None,
        error_reporter: ErrorReporterPort | None = None,
    ) -> None:
        """Resolve configuration and create the counter client.

        Keys in registration_argument override base_config when the
        registration argument is a mapping; otherwise it is ignored. Host
        and topology presence are not checked here, the client reports
        them when it first sends.

        Args:
            base_config: Topology configuration from the host runtime.
            registration_argument: Optional per-registration overrides.
            context: Host task context, kept for diagnostics.
            error_reporter: Host error channel handed to the client.

        Raises:
            ConfigurationError: A configuration value has the wrong type.
        """
        self.config = resolve_config(base_config, registration_argument)
        self.context = context
        self.client = self._client_factory(
            self.config.namespace,
            self.config.host,
            self.config.port,
            error_reporter,
        )
        logger.info(
            "reporting metrics for namespace %s to statsd at %s:%s",
            self.config.namespace,
            self.config.host,
            self.config.port,
        )

    def data_points_to_metrics(
        self, task_info: TaskInfo, data_points: Iterable[DataPoint]
    ) -> list[Metric]:
        """Flatten a batch of data points into counter metrics."""
        return data_points_to_metrics(task_info, data_points)

    def deliver(self, task_info: TaskInfo, data_points: Iterable[DataPoint]) -> None:
        """Send every metric derived from the data points, in order."""
        if self.client is None:
            _warn_not_configured(f"data points from {task_info.src_component_id}")
            return

        for metric in self.data_points_to_metrics(task_info, data_points):
            self.report(metric.name, metric.value)

    def report(self, name: str, value: int) -> None:
        """Send a single counter increment."""
        if self.client is None:
            _warn_not_configured(f"counter {name}")
            return
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("reporting: %s=%s", name, value)
        self.client.count(name, value)

    def shutdown(self) -> None:
        """Stop the counter client."""
        if self.client is not None:
            self.client.stop()
            logger.info("statsd metrics consumer stopped")
