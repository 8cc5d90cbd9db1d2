"""Port interfaces between the consumer, the host runtime and the network.

The consumer depends only on these protocols, not on the statsd library
or on a particular host runtime.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from stormstatsd.core.models import DataPoint, TaskInfo


@runtime_checkable
class CounterClientPort(Protocol):
    """Port for sending counter increments to a collector.

    Examples: StatsdCounterClient, InMemoryCounterClient.
    """

    def count(self, name: str, delta: int) -> None:
        """Increment the named counter by delta, without waiting for delivery."""
        ...

    def stop(self) -> None:
        """Release sockets or buffers held by the client."""
        ...


@runtime_checkable
class ErrorReporterPort(Protocol):
    """Error channel offered by the host runtime."""

    def report_error(self, error: BaseException) -> None:
        """Report an error to the host runtime."""
        ...


@runtime_checkable
class MetricsConsumerPort(Protocol):
    """Lifecycle the host runtime drives on a metrics consumer.

    The host calls configure once, deliver any number of times and
    shutdown once, all from a single thread per instance.
    """

    def configure(
        self,
        base_config: Mapping[Any, Any],
        registration_argument: Any = None,
        context: Any = None,
        error_reporter: ErrorReporterPort | None = None,
    ) -> None:
        """Resolve configuration and create the counter client."""
        ...

    def deliver(self, task_info: TaskInfo, data_points: Iterable[DataPoint]) -> None:
        """Forward one batch of data points from a task."""
        ...

    def shutdown(self) -> None:
        """Release the counter client."""
        ...
