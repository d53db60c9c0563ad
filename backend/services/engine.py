"""
Engine entry points: analyze a log buffer, format a report, or both.
"""

import logging
from typing import TextIO, Union

from models.data_models import SummaryReport
from services.aggregator import Aggregator
from services.parser import LogParser
from services.report import ReportBuilder, ReportFormatter

logger = logging.getLogger(__name__)


def analyze(log_data: Union[bytes, str]) -> SummaryReport:
    """Single pass over the log; malformed lines are skipped, never raised"""
    aggregator = Aggregator().consume_all(LogParser().parse(log_data))
    logger.debug(
        "analyzed %d lines (%d not usable as endpoint records)",
        aggregator.time_stats.snapshot().total_requests,
        aggregator.skipped_lines,
    )
    return ReportBuilder().build(aggregator)


def format_report(report: SummaryReport, sink: TextIO) -> None:
    ReportFormatter().write(report, sink)


def run(log_data: Union[bytes, str], sink: TextIO) -> SummaryReport:
    report = analyze(log_data)
    format_report(report, sink)
    return report
