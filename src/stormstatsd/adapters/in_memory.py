"""In-memory counter client."""

from stormstatsd.core.models import Metric
from stormstatsd.core.ports import ErrorReporterPort


class InMemoryCounterClient:
    """In-memory implementation of CounterClientPort.

    Records counter updates in a list instead of sending them. Suitable
    for testing and for embedding the consumer without a collector.

    Accepts the same arguments as StatsdCounterClient so the class itself
    can be passed as a consumer's client_factory.
    """

    def __init__(
        self,
        namespace: str | None = None,
        host: str | None = None,
        port: int | None = None,
        error_reporter: ErrorReporterPort | None = None,
    ) -> None:
        self.namespace = namespace
        self.host = host
        self.port = port
        self.error_reporter = error_reporter
        self.stopped = False
        self._metrics: list[Metric] = []

    @property
    def metrics(self) -> list[Metric]:
        """Recorded updates in the order they were counted."""
        return list(self._metrics)

    def count(self, name: str, delta: int) -> None:
        """Record a counter update."""
        self._metrics.append(Metric(name=name, value=delta))

    def stop(self) -> None:
        """Mark the client as stopped."""
        self.stopped = True
