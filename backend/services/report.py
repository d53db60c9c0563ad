"""
Report Builder and Formatter

This module turns aggregator snapshots into a SummaryReport and renders it
as the plain-text traffic report.
"""

import math
from typing import List, TextIO

from models.data_models import STATUS_BUCKET_KEYS, EndpointStats, SummaryReport
from services.aggregator import Aggregator
from utils.helpers import format_utc

TOP_N = 3


class ReportBuilder:
    """
    Builds a SummaryReport from a finished Aggregator.
    Responsibilities:
    - Derive duration and requests per second
    - Rank endpoints by average latency and by request count
    """

    def __init__(self, top_n: int = TOP_N):
        self.top_n = top_n

    def rank(self, endpoints: List[EndpointStats], sort_by: str) -> List[EndpointStats]:
        """Descending by average_ms ("average") or count ("count"); ties keep input order"""
        key_fn = (
            (lambda e: e.average_ms)
            if sort_by == "average"
            else (lambda e: e.count)
        )
        # sorted() is stable with reverse=True too
        return sorted(endpoints, key=key_fn, reverse=True)[: self.top_n]

    def build(self, aggregator: Aggregator) -> SummaryReport:
        time_stats = aggregator.time_stats.snapshot()
        endpoints = aggregator.endpoints.snapshot()
        total = time_stats.total_requests

        duration = 0.0
        if time_stats.start_time is not None and time_stats.end_time is not None:
            duration = (time_stats.end_time - time_stats.start_time).total_seconds()

        if total == 0:
            rps = 0.0
        elif duration == 0:
            rps = math.inf
        else:
            rps = total / duration

        return SummaryReport(
            time_stats=time_stats,
            status_buckets=aggregator.status_buckets.snapshot(),
            duration_seconds=duration,
            requests_per_second=rps,
            slowest_endpoints=self.rank(endpoints, "average"),
            most_active_endpoints=self.rank(endpoints, "count"),
            total_requests=total,
        )


class ReportFormatter:
    """Renders a SummaryReport line by line to any writable text sink"""

    def lines(self, report: SummaryReport) -> List[str]:
        out: List[str] = []

        ts = report.time_stats
        if ts.start_time is not None and ts.end_time is not None:
            out.append("")
            out.append(" Time Range")
            out.append(f"Start Time: {format_utc(ts.start_time)}")
            out.append(f"End Time:   {format_utc(ts.end_time)}")
            out.append(f"Duration:   {report.duration_seconds:.2f} seconds")

        out.append("")
        out.append(" Q1")
        out.append(f"Total Requests:{report.total_requests}")

        out.append("")
        out.append(" Q2")
        for key in STATUS_BUCKET_KEYS:
            count = report.status_buckets.get(key, 0)
            pct = report.share_of_total(count)
            out.append(f"{key}: {count} requests ({pct:.1f}%)")

        out.append("")
        out.append(" Q3")
        for i, e in enumerate(report.slowest_endpoints):
            if i:
                out.append("")
            out.append(f"{i + 1}. {e.endpoint}")
            out.append(f"   Average: {e.average_ms:.2f}ms")
            out.append(f"   Min: {e.min_ms}ms")
            out.append(f"   Max: {e.max_ms}ms")
            out.append(f"   Requests: {e.count}")

        out.append("")
        out.append(" Q4")
        for i, e in enumerate(report.most_active_endpoints):
            if i:
                out.append("")
            pct = report.share_of_total(e.count)
            out.append(f"{i + 1}. {e.endpoint}")
            out.append(f"   Requests: {e.count} ({pct:.1f}% of total traffic)")
            out.append(f"   Average Response Time: {e.average_ms:.2f}ms")

        return out

    def render(self, report: SummaryReport) -> str:
        return "".join(line + "\n" for line in self.lines(report))

    def write(self, report: SummaryReport, sink: TextIO) -> None:
        for line in self.lines(report):
            sink.write(line + "\n")
