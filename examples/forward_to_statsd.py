"""Example driving the consumer the way a host runtime would.

Run a StatsD daemon (or `nc -ul 8125`) locally, then:
    python examples/forward_to_statsd.py

Each delivery produces counters such as:
    storm.metrics.wordcount.worker1.6700.split.__emit-count.default:12|c
"""

import logging
import random
import time

from stormstatsd import DataPoint, StatsdMetricConsumer, TaskInfo


class PrintingErrorReporter:
    """Error reporter that prints what the consumer reports."""

    def report_error(self, error: BaseException) -> None:
        print(f"reported: {error!r}")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    consumer = StatsdMetricConsumer()
    consumer.configure(
        {"topology.name": "wordcount", "metrics.statsd.host": "localhost"},
        registration_argument={"metrics.statsd.port": 8125},
        error_reporter=PrintingErrorReporter(),
    )

    task = TaskInfo("worker1", 6700, "split", src_task_id=3)
    try:
        for _ in range(5):
            consumer.deliver(
                task,
                [
                    DataPoint("__emit-count", {"default": random.randint(0, 20)}),
                    DataPoint("__execute-latency", {"default": random.random() * 5}),
                    DataPoint("__receive", {"population": 4, "capacity": 1024}),
                    DataPoint("__status", "ACTIVE"),
                ],
            )
            time.sleep(1)
    finally:
        consumer.shutdown()


if __name__ == "__main__":
    main()
