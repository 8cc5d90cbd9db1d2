"""Step definitions for forwarding.feature."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from stormstatsd.adapters.in_memory import InMemoryCounterClient
from stormstatsd.consumer import StatsdMetricConsumer
from stormstatsd.core.models import DataPoint, TaskInfo


@dataclass
class ForwardingScenarioContext:
    """Shared state between steps in a forwarding scenario."""

    base_config: dict[str, object] = field(default_factory=dict)
    consumer: StatsdMetricConsumer = field(
        default_factory=lambda: StatsdMetricConsumer(
            client_factory=InMemoryCounterClient
        )
    )
    task_info: TaskInfo | None = None

    @property
    def client(self) -> InMemoryCounterClient:
        assert isinstance(self.consumer.client, InMemoryCounterClient)
        return self.consumer.client

    def deliver(self, data_point: DataPoint) -> None:
        assert self.task_info is not None
        self.consumer.deliver(self.task_info, [data_point])


@pytest.fixture
def ctx() -> ForwardingScenarioContext:
    """Fresh scenario context for each test."""
    return ForwardingScenarioContext()


def _parse_number(text: str) -> object:
    try:
        return float(text)
    except ValueError:
        return text


# === Given ===


@given(parsers.parse('a consumer configured for topology "{topology}"'))
def given_configured_consumer(ctx: ForwardingScenarioContext, topology: str) -> None:
    """Configure the consumer with a topology name and a collector host."""
    ctx.base_config = {"topology.name": topology, "metrics.statsd.host": "localhost"}
    ctx.consumer.configure(ctx.base_config)


@given(
    parsers.parse('a task on host "{host}" port {port:d} component "{component}"')
)
def given_task(
    ctx: ForwardingScenarioContext, host: str, port: int, component: str
) -> None:
    """Set the origin of delivered data points."""
    ctx.task_info = TaskInfo(host, port, component)


@given(
    parsers.parse(
        'the consumer is reconfigured with registration prefix "{prefix}" '
        'and host "{host}"'
    )
)
def given_reconfigured(ctx: ForwardingScenarioContext, prefix: str, host: str) -> None:
    """Configure a fresh consumer with a registration argument."""
    ctx.consumer = StatsdMetricConsumer(client_factory=InMemoryCounterClient)
    ctx.consumer.configure(
        ctx.base_config,
        {"metrics.statsd.prefix": prefix, "metrics.statsd.host": host},
    )


# === When ===


@when(parsers.parse('the task delivers data point "{name}" with value {value:g}'))
def when_deliver_number(ctx: ForwardingScenarioContext, name: str, value: float) -> None:
    """Deliver a numeric data point."""
    ctx.deliver(DataPoint(name, value))


@when(parsers.parse('the task delivers data point "{name}" with text "{text}"'))
def when_deliver_text(ctx: ForwardingScenarioContext, name: str, text: str) -> None:
    """Deliver a data point with a string value."""
    ctx.deliver(DataPoint(name, text))


@when(parsers.parse('the task delivers data point "{name}" with entries:'))
def when_deliver_mapping(
    ctx: ForwardingScenarioContext, name: str, datatable: list[list[str]]
) -> None:
    """Deliver a data point whose value maps keys to values."""
    _header, *rows = datatable
    entries = {key: _parse_number(value) for key, value in rows}
    ctx.deliver(DataPoint(name, entries))


# === Then ===


@then(parsers.parse('the counter "{name}" is incremented by {delta:d}'))
def then_counter_incremented(
    ctx: ForwardingScenarioContext, name: str, delta: int
) -> None:
    """Assert a counter update with the given name and delta was sent."""
    updates = [(m.name, m.value) for m in ctx.client.metrics]
    assert (name, delta) in updates, f"{name}={delta} not in {updates}"


@then(parsers.parse("{n:d} counter update is sent"))
def then_n_updates(ctx: ForwardingScenarioContext, n: int) -> None:
    """Assert the number of counter updates sent."""
    assert len(ctx.client.metrics) == n


@then("no counter update is sent")
def then_no_updates(ctx: ForwardingScenarioContext) -> None:
    """Assert nothing was sent."""
    assert ctx.client.metrics == []


@then(parsers.parse('the client namespace is "{namespace}"'))
def then_namespace(ctx: ForwardingScenarioContext, namespace: str) -> None:
    """Assert the namespace the client was built with."""
    assert ctx.client.namespace == namespace


@then(parsers.parse('the client host is "{host}"'))
def then_host(ctx: ForwardingScenarioContext, host: str) -> None:
    """Assert the host the client was built with."""
    assert ctx.client.host == host
