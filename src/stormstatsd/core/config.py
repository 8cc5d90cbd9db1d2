"""Configuration keys, defaults and resolution for the StatsD consumer.

Configuration comes from two mappings: the topology configuration supplied
by the host runtime, and an optional registration argument given when the
consumer is registered. Keys found in the registration argument override
the topology configuration.
"""

import numbers
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from stormstatsd.core.naming import SEPARATOR, clean

TOPOLOGY_NAME = "topology.name"
STATSD_HOST = "metrics.statsd.host"
STATSD_PORT = "metrics.statsd.port"
STATSD_PREFIX = "metrics.statsd.prefix"

DEFAULT_PORT = 8125
DEFAULT_PREFIX = "storm.metrics."


class ConfigurationError(ValueError):
    """A configuration value has an unusable type or form."""


@dataclass(frozen=True)
class StatsdConfig:
    """Resolved consumer configuration.

    Attributes:
        topology_name: Topology the consumer reports for, None if unset.
        host: Collector host, None if unset.
        port: Collector UDP port.
        prefix: Name prefix, always ending with the separator.
    """

    topology_name: str | None = None
    host: str | None = None
    port: int = DEFAULT_PORT
    prefix: str = DEFAULT_PREFIX

    @property
    def namespace(self) -> str | None:
        """Root namespace for every counter, or None without a topology."""
        if self.topology_name is None:
            return None
        return self.prefix + clean(self.topology_name)


def normalize_prefix(prefix: str) -> str:
    """Ensure the prefix ends with the separator."""
    if not prefix.endswith(SEPARATOR):
        return prefix + SEPARATOR
    return prefix


def _string_value(conf: Mapping[Any, Any], key: str) -> str | None:
    value = conf[key]
    if value is None or isinstance(value, str):
        return value
    raise ConfigurationError(f"{key} must be a string, got {type(value).__name__}")


def _port_value(conf: Mapping[Any, Any], key: str) -> int:
    value = conf[key]
    if isinstance(value, bool):
        raise ConfigurationError(f"{key} must be a number, got bool")
    if isinstance(value, numbers.Real):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ConfigurationError(f"{key} is not an integer: {value!r}") from exc
    raise ConfigurationError(f"{key} must be a number, got {type(value).__name__}")


def parse_config(
    conf: Mapping[Any, Any], base: StatsdConfig | None = None
) -> StatsdConfig:
    """Read recognized keys from a mapping on top of an existing config.

    Keys absent from the mapping keep the value from base.

    Args:
        conf: Configuration mapping.
        base: Configuration to start from (default: all defaults).

    Returns:
        New StatsdConfig.

    Raises:
        ConfigurationError: A present key has a value of the wrong type.
    """
    config = base or StatsdConfig()
    changes: dict[str, Any] = {}

    if TOPOLOGY_NAME in conf:
        changes["topology_name"] = _string_value(conf, TOPOLOGY_NAME)

    if STATSD_HOST in conf:
        changes["host"] = _string_value(conf, STATSD_HOST)

    if STATSD_PORT in conf:
        changes["port"] = _port_value(conf, STATSD_PORT)

    if STATSD_PREFIX in conf:
        prefix = _string_value(conf, STATSD_PREFIX)
        if prefix is None:
            raise ConfigurationError(f"{STATSD_PREFIX} must be a string, got None")
        changes["prefix"] = normalize_prefix(prefix)

    return replace(config, **changes)


def resolve_config(
    base_config: Mapping[Any, Any], registration_argument: Any = None
) -> StatsdConfig:
    """Resolve configuration from the topology config and registration argument.

    The registration argument is only consulted when it is a mapping.

    Raises:
        ConfigurationError: A present key has a value of the wrong type.
    """
    config = parse_config(base_config)
    if isinstance(registration_argument, Mapping):
        config = parse_config(registration_argument, base=config)
    return config
