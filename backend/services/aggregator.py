"""
Aggregator Classes - Accumulate traffic statistics

This module folds parsed log lines into time, status and endpoint statistics
in a single pass.
"""

import copy
from typing import Dict, Iterable, List

from models.data_models import STATUS_BUCKET_KEYS, EndpointStats, ParsedLine, TimeStats
from services.parser import LogParser


class TimeStatsAggregator:
    """Earliest/latest parseable timestamp plus a count of every non-blank line"""

    def __init__(self) -> None:
        self._stats = TimeStats()

    def consume(self, parsed: ParsedLine) -> None:
        self._stats.total_requests += 1

        ts = parsed.timestamp
        if ts is None:
            return
        if self._stats.start_time is None or ts < self._stats.start_time:
            self._stats.start_time = ts
        if self._stats.end_time is None or ts > self._stats.end_time:
            self._stats.end_time = ts

    def snapshot(self) -> TimeStats:
        return copy.copy(self._stats)


class StatusBucketAggregator:
    """Counts lines with a parseable status by status class"""

    def __init__(self) -> None:
        self._buckets: Dict[str, int] = {key: 0 for key in STATUS_BUCKET_KEYS}

    @staticmethod
    def bucket_for(status: int) -> str:
        if 200 <= status < 300:
            return "2xx"
        if 400 <= status < 500:
            return "4xx"
        if 500 <= status < 600:
            return "5xx"
        return "other"

    def consume(self, parsed: ParsedLine) -> None:
        if parsed.status is None:
            return
        self._buckets[self.bucket_for(parsed.status)] += 1

    def snapshot(self) -> Dict[str, int]:
        return dict(self._buckets)


class EndpointLatencyAggregator:
    """
    Per-endpoint latency statistics.
    Entries keep first-observed order so rankings can break ties on it.
    """

    def __init__(self) -> None:
        self._endpoints: Dict[str, EndpointStats] = {}

    def consume(self, parsed: ParsedLine) -> None:
        record = parsed.record
        if record is None:
            return

        key = record.endpoint
        stats = self._endpoints.get(key)
        if stats is None:
            stats = self._endpoints[key] = EndpointStats(endpoint=key)
        stats.observe(record.response_time_ms)

    def snapshot(self) -> List[EndpointStats]:
        return [copy.copy(s) for s in self._endpoints.values()]


class Aggregator:
    """
    Fans each parsed line out to every accumulator.
    Responsibilities:
    - Track the time range and total line count
    - Bucket status codes
    - Collect per-endpoint latency and request counts
    """

    def __init__(self) -> None:
        self.time_stats = TimeStatsAggregator()
        self.status_buckets = StatusBucketAggregator()
        self.endpoints = EndpointLatencyAggregator()
        self.skipped_lines = 0

    def consume(self, parsed: ParsedLine) -> None:
        self.time_stats.consume(parsed)
        self.status_buckets.consume(parsed)
        self.endpoints.consume(parsed)
        if not LogParser.is_valid(parsed):
            self.skipped_lines += 1

    def consume_all(self, lines: Iterable[ParsedLine]) -> "Aggregator":
        for parsed in lines:
            self.consume(parsed)
        return self
