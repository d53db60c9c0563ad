"""
Data Models (DTOs - Data Transfer Objects)

This module contains all dataclass definitions used throughout the application.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

STATUS_BUCKET_KEYS = ("2xx", "4xx", "5xx", "other")


@dataclass
class LogRecord:
    """A single well-formed access log line"""
    timestamp: str
    method: str
    path: str
    status: int
    response_time_ms: int

    @property
    def endpoint(self) -> str:
        return f"{self.method} {self.path}"


@dataclass
class ParsedLine:
    """
    Tokenizer output for one non-blank line.
    Numeric fields are None when missing or unparseable.
    """
    fields: List[str]
    timestamp: Optional[datetime]
    status: Optional[int]
    response_time_ms: Optional[int]
    record: Optional[LogRecord] = field(init=False, default=None)

    def __post_init__(self) -> None:
        if len(self.fields) < 5 or self.status is None or self.response_time_ms is None:
            return
        self.record = LogRecord(
            timestamp=self.fields[0],
            method=self.fields[1],
            path=self.fields[2],
            status=self.status,
            response_time_ms=self.response_time_ms,
        )


@dataclass
class EndpointStats:
    """Latency and request count for one "<METHOD> <PATH>" endpoint"""
    endpoint: str
    count: int = 0
    total_ms: int = 0
    min_ms: int = 0
    max_ms: int = 0
    average_ms: float = 0.0

    def observe(self, response_time_ms: int) -> None:
        if self.count == 0:
            self.min_ms = response_time_ms
            self.max_ms = response_time_ms
        else:
            self.min_ms = min(self.min_ms, response_time_ms)
            self.max_ms = max(self.max_ms, response_time_ms)
        self.count += 1
        self.total_ms += response_time_ms
        self.average_ms = self.total_ms / self.count


@dataclass
class TimeStats:
    """Observed time range and rough traffic volume"""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    total_requests: int = 0


@dataclass
class SummaryReport:
    """Everything the report formatter needs, already ranked and derived"""
    time_stats: TimeStats
    status_buckets: Dict[str, int]
    duration_seconds: float
    requests_per_second: float
    slowest_endpoints: List[EndpointStats] = field(default_factory=list)
    most_active_endpoints: List[EndpointStats] = field(default_factory=list)
    total_requests: int = 0

    def share_of_total(self, count: int) -> float:
        """Percentage of total_requests; 0.0 for an empty log"""
        if not self.total_requests:
            return 0.0
        return count / self.total_requests * 100.0

    @property
    def status_percentages(self) -> Dict[str, float]:
        return {
            key: round(self.share_of_total(self.status_buckets.get(key, 0)), 1)
            for key in STATUS_BUCKET_KEYS
        }

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe view (non-finite rates become the string "Infinity")"""
        rps: Any = self.requests_per_second
        if not math.isfinite(rps):
            rps = "Infinity"

        def endpoint_dict(e: EndpointStats) -> Dict[str, Any]:
            return {
                "endpoint": e.endpoint,
                "count": e.count,
                "total_ms": e.total_ms,
                "min_ms": e.min_ms,
                "max_ms": e.max_ms,
                "average_ms": e.average_ms,
                "traffic_share": round(self.share_of_total(e.count), 1),
            }

        start = self.time_stats.start_time
        end = self.time_stats.end_time
        return {
            "time_range": {
                "start_time": start.isoformat() if start else None,
                "end_time": end.isoformat() if end else None,
                "duration_seconds": self.duration_seconds,
            },
            "total_requests": self.total_requests,
            "requests_per_second": rps,
            "status_buckets": dict(self.status_buckets),
            "status_percentages": self.status_percentages,
            "slowest_endpoints": [endpoint_dict(e) for e in self.slowest_endpoints],
            "most_active_endpoints": [endpoint_dict(e) for e in self.most_active_endpoints],
        }


@dataclass
class HealthStatus:
    """Health check response"""
    status: str
    log_file_exists: bool
    path: str
    size_bytes: int
    total_lines: int
