import io
import math

from models.data_models import EndpointStats
from services.aggregator import Aggregator
from services.parser import LogParser
from services.report import ReportBuilder, ReportFormatter

S1_LOG = "2024-01-01T00:00:00Z GET /a 200 10\n2024-01-01T00:00:01Z GET /a 500 30\n"

S1_REPORT = """
 Time Range
Start Time: 2024-01-01T00:00:00.000Z
End Time:   2024-01-01T00:00:01.000Z
Duration:   1.00 seconds

 Q1
Total Requests:2

 Q2
2xx: 1 requests (50.0%)
4xx: 0 requests (0.0%)
5xx: 1 requests (50.0%)
other: 0 requests (0.0%)

 Q3
1. GET /a
   Average: 20.00ms
   Min: 10ms
   Max: 30ms
   Requests: 2

 Q4
1. GET /a
   Requests: 2 (100.0% of total traffic)
   Average Response Time: 20.00ms
"""


def _build(text):
    return ReportBuilder().build(Aggregator().consume_all(LogParser().parse(text)))


def _stats(endpoint, count, average):
    return EndpointStats(
        endpoint=endpoint,
        count=count,
        total_ms=int(count * average),
        min_ms=int(average),
        max_ms=int(average),
        average_ms=average,
    )


def test_rank_by_average_is_descending_and_truncated():
    endpoints = [_stats(f"GET /{i}", 1, float(i)) for i in range(5)]
    ranked = ReportBuilder().rank(endpoints, "average")
    assert [e.endpoint for e in ranked] == ["GET /4", "GET /3", "GET /2"]


def test_rank_keeps_first_observed_order_on_ties():
    endpoints = [_stats("GET /a", 2, 5.0), _stats("GET /b", 3, 1.0), _stats("GET /c", 2, 5.0)]
    builder = ReportBuilder()
    assert [e.endpoint for e in builder.rank(endpoints, "average")] == ["GET /a", "GET /c", "GET /b"]
    assert [e.endpoint for e in builder.rank(endpoints, "count")] == ["GET /b", "GET /a", "GET /c"]


def test_build_derives_duration_and_rate():
    report = _build(S1_LOG)
    assert report.total_requests == 2
    assert report.duration_seconds == 1.0
    assert report.requests_per_second == 2.0
    assert report.status_buckets == {"2xx": 1, "4xx": 0, "5xx": 1, "other": 0}
    assert report.status_percentages == {"2xx": 50.0, "4xx": 0.0, "5xx": 50.0, "other": 0.0}


def test_build_single_instant_rate_is_infinite():
    report = _build("2024-01-01T00:00:00Z GET /a 200 10\n2024-01-01T00:00:00Z GET /b 200 10\n")
    assert report.duration_seconds == 0.0
    assert math.isinf(report.requests_per_second)
    assert not math.isnan(report.requests_per_second)


def test_build_empty_log():
    report = _build("")
    assert report.total_requests == 0
    assert report.duration_seconds == 0.0
    assert report.requests_per_second == 0.0
    assert report.status_buckets == {"2xx": 0, "4xx": 0, "5xx": 0, "other": 0}
    assert report.slowest_endpoints == []
    assert report.most_active_endpoints == []


def test_format_minimal_log():
    assert ReportFormatter().render(_build(S1_LOG)) == S1_REPORT


def test_write_matches_render():
    report = _build(S1_LOG)
    sink = io.StringIO()
    ReportFormatter().write(report, sink)
    assert sink.getvalue() == ReportFormatter().render(report)


def test_format_separates_ranked_items_with_one_blank_line():
    text = ReportFormatter().render(
        _build("2024-01-01T00:00:00Z GET /a 200 10\n2024-01-01T00:00:04Z GET /b 200 30\n")
    )
    q3 = text.split(" Q3\n")[1].split("\n Q4\n")[0]
    assert q3 == (
        "1. GET /b\n"
        "   Average: 30.00ms\n"
        "   Min: 30ms\n"
        "   Max: 30ms\n"
        "   Requests: 1\n"
        "\n"
        "2. GET /a\n"
        "   Average: 10.00ms\n"
        "   Min: 10ms\n"
        "   Max: 10ms\n"
        "   Requests: 1\n"
    )
    q4 = text.split(" Q4\n")[1]
    assert q4 == (
        "1. GET /a\n"
        "   Requests: 1 (50.0% of total traffic)\n"
        "   Average Response Time: 10.00ms\n"
        "\n"
        "2. GET /b\n"
        "   Requests: 1 (50.0% of total traffic)\n"
        "   Average Response Time: 30.00ms\n"
    )


def test_format_empty_log_skips_time_range():
    text = ReportFormatter().render(_build("\n  \n"))
    assert "Time Range" not in text
    assert text == (
        "\n"
        " Q1\n"
        "Total Requests:0\n"
        "\n"
        " Q2\n"
        "2xx: 0 requests (0.0%)\n"
        "4xx: 0 requests (0.0%)\n"
        "5xx: 0 requests (0.0%)\n"
        "other: 0 requests (0.0%)\n"
        "\n"
        " Q3\n"
        "\n"
        " Q4\n"
    )
