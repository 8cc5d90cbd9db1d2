"""Core domain models for task samples and flattened counter metrics."""

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TaskInfo:
    """Origin of a batch of data points.

    Attributes:
        src_worker_host: Host of the worker running the task.
        src_worker_port: Port of the worker running the task.
        src_component_id: Logical component (spout or bolt) identifier.
        src_task_id: Task index within the topology, informational only.
        timestamp: Unix timestamp of the sampling interval, informational only.
    """

    src_worker_host: str
    src_worker_port: int
    src_component_id: str
    src_task_id: int | None = None
    timestamp: float | None = None


@dataclass(frozen=True)
class DataPoint:
    """A single named sample delivered by a task.

    Attributes:
        name: Sample name (e.g., __execute-count).
        value: A number, a mapping of sub-name to number, or anything else.
    """

    name: str
    value: Any


@dataclass(frozen=True)
class Metric:
    """A counter update ready to be sent to the collector.

    Attributes:
        name: Fully assembled metric name, relative to the client namespace.
        value: Integer delta to add to the counter.
    """

    name: str
    value: int


@dataclass(frozen=True)
class NumericValue:
    """Sample value that is a single real number, already truncated."""

    delta: int


@dataclass(frozen=True)
class MappingValue:
    """Sample value that maps sub-names to values."""

    entries: Mapping[Any, Any]


@dataclass(frozen=True)
class OtherValue:
    """Sample value of an unsupported type."""

    raw: Any


SampleValue = NumericValue | MappingValue | OtherValue


def is_numeric(value: Any) -> bool:
    """Return True for finite real numbers, excluding bool and complex."""
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        return False
    if isinstance(value, complex):
        return False
    if isinstance(value, numbers.Integral):
        return True
    try:
        return math.isfinite(value)
    except (TypeError, ValueError, OverflowError):
        return False


def classify_value(value: Any) -> SampleValue:
    """Classify a raw sample value into its variant.

    Numbers are truncated toward zero, matching integer-only counters.
    NaN and infinities cannot be expressed as a counter delta and are
    classified as OtherValue. Deltas are Python ints and are not wrapped
    to 32 bits, so values beyond the signed 32-bit range are sent as-is.

    Args:
        value: Raw value from a DataPoint or a mapping entry.

    Returns:
        NumericValue, MappingValue or OtherValue.
    """
    if is_numeric(value):
        return NumericValue(delta=int(value))
    if isinstance(value, Mapping):
        return MappingValue(entries=value)
    return OtherValue(raw=value)
