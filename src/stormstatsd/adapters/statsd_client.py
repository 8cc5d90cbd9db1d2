"""StatsD counter client backed by the statsd package.

The underlying statsd.StatsClient sends one UDP datagram per update
("<namespace>.<name>:<delta>|c") and drops it silently if the send fails,
so count() never waits on the collector.
"""

from statsd import StatsClient

from stormstatsd.core.config import ConfigurationError
from stormstatsd.core.logs import get_logger, log_exception
from stormstatsd.core.ports import ErrorReporterPort

logger = get_logger(__name__)


class StatsdCounterClient:
    """CounterClientPort implementation sending to a StatsD daemon over UDP.

    The statsd.StatsClient is created on the first update, so an unusable
    endpoint (no host, no topology namespace, unresolvable hostname) is
    discovered when sending. It is then logged and reported once, and every
    update from that client is dropped.

    Args:
        namespace: Root namespace prepended to every counter name.
        host: Collector hostname or address.
        port: Collector UDP port.
        error_reporter: Optional host error channel for configuration errors.
    """

    def __init__(
        self,
        namespace: str | None,
        host: str | None,
        port: int,
        error_reporter: ErrorReporterPort | None = None,
    ) -> None:
        self.namespace = namespace
        self.host = host
        self.port = port
        self._error_reporter = error_reporter
        self._client: StatsClient | None = None
        self._disabled = False

    @property
    def disabled(self) -> bool:
        """True once the client gave up on an unusable endpoint."""
        return self._disabled

    # @tra: Adapter.Statsd.Client.LazyConnect
    def _connect(self) -> StatsClient | None:
        if self._client is not None or self._disabled:
            return self._client

        try:
            if self.namespace is None:
                raise ConfigurationError(
                    "topology name is not set, cannot build the counter namespace"
                )
            if not self.namespace.isascii():
                raise ConfigurationError(
                    f"counter namespace {self.namespace!r} is not ASCII"
                )
            if self.host is None:
                raise ConfigurationError("statsd host is not set")
            self._client = StatsClient(self.host, self.port, prefix=self.namespace)
        except (ConfigurationError, OSError, UnicodeError) as exc:
            self._disable(exc)
        return self._client

    def _disable(self, error: BaseException) -> None:
        self._disabled = True
        log_exception(
            "statsd client for %s:%s disabled, dropping updates",
            self.host,
            self.port,
            logger=logger,
            exc_info=error,
        )
        if self._error_reporter is not None:
            self._error_reporter.report_error(error)

    def count(self, name: str, delta: int) -> None:
        """Send a counter increment, fire-and-forget.

        Names the StatsD line protocol cannot carry (non-ASCII) are dropped
        with a warning.
        """
        client = self._connect()
        if client is None:
            return
        if not name.isascii():
            logger.warning("dropping counter %r: name is not ASCII", name)
            return
        client.incr(name, delta)

    def stop(self) -> None:
        """Close the UDP socket if one was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None
