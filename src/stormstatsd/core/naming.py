"""Metric naming: sanitizing field values and flattening data points."""

from collections.abc import Iterable

from stormstatsd.core.logs import get_logger
from stormstatsd.core.models import (
    DataPoint,
    MappingValue,
    Metric,
    NumericValue,
    TaskInfo,
    classify_value,
)

logger = get_logger(__name__)

SEPARATOR = "."
PLACEHOLDER = "_"

# Characters the StatsD line protocol treats as structure
RESERVED_CHARACTERS = frozenset(".:/|@")

_CLEAN_TABLE = str.maketrans({char: PLACEHOLDER for char in RESERVED_CHARACTERS})


def clean(value: str) -> str:
    """Replace every reserved character in a field value with an underscore.

    Args:
        value: Raw field value (host, component id, sample name, ...).

    Returns:
        The value with ".", "/", ":", "|" and "@" replaced by "_".
    """
    return str(value).translate(_CLEAN_TABLE)


def task_prefix(task_info: TaskInfo) -> str:
    """Build the name prefix shared by every metric of a task.

    Returns:
        "<host>.<port>.<component>." with each field cleaned.
    """
    fields = (
        task_info.src_worker_host,
        str(task_info.src_worker_port),
        task_info.src_component_id,
    )
    return SEPARATOR.join(clean(field) for field in fields) + SEPARATOR


def data_points_to_metrics(
    task_info: TaskInfo, data_points: Iterable[DataPoint]
) -> list[Metric]:
    """Flatten data points from one task into counter metrics.

    Numeric values produce one metric named after the data point. Mapping
    values produce one metric per numeric entry, with the entry key appended
    as a further name component. Everything else is skipped.

    Args:
        task_info: Origin of the data points.
        data_points: Data points in delivery order.

    Returns:
        Metrics in emission order.
    """
    prefix = task_prefix(task_info)
    metrics: list[Metric] = []

    for data_point in data_points:
        # @tra: Core.Naming.DataPoint
        base_name = prefix + clean(data_point.name)
        value = classify_value(data_point.value)

        if isinstance(value, NumericValue):
            metrics.append(Metric(name=base_name, value=value.delta))
        elif isinstance(value, MappingValue):
            for sub_name, sub_value in value.entries.items():
                entry = classify_value(sub_value)
                if isinstance(entry, NumericValue):
                    metrics.append(
                        Metric(
                            name=f"{base_name}{SEPARATOR}{clean(str(sub_name))}",
                            value=entry.delta,
                        )
                    )
        else:
            logger.debug(
                "skipping data point %s with unsupported value type %s",
                data_point.name,
                type(data_point.value).__name__,
            )

    return metrics
