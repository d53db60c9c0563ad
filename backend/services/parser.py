"""
LogParser Class - Handles tokenizing and classification

This module splits a raw access log into lines and lines into ParsedLine objects.
"""

from typing import Iterator, Union

from models.data_models import ParsedLine
from utils.helpers import parse_int, parse_ts


class LogParser:
    """
    Tokenizes raw access log text.
    Responsibilities:
    - Decode raw bytes
    - Split into non-blank lines
    - Split lines into fields and coerce numeric/time fields
    - Classify lines (valid record or not)
    """

    @staticmethod
    def decode(data: Union[bytes, str]) -> str:
        """Bytes are decoded as UTF-8; undecodable bytes become U+FFFD"""
        if isinstance(data, bytes):
            return data.decode("utf-8", errors="replace")
        return data

    @staticmethod
    def split_lines(text: str) -> Iterator[str]:
        """Yield non-blank lines with any CR from CRLF endings removed"""
        for line in text.split("\n"):
            if line.endswith("\r"):
                line = line[:-1]
            if line.strip():
                yield line

    @staticmethod
    def tokenize(line: str) -> ParsedLine:
        """
        Split on single spaces.
        Fields: [0]=timestamp [1]=method [2]=path [3]=status [4]=response_time_ms
        """
        fields = line.split(" ")
        return ParsedLine(
            fields=fields,
            timestamp=parse_ts(fields[0]),
            status=parse_int(fields[3]) if len(fields) >= 4 else None,
            response_time_ms=parse_int(fields[4]) if len(fields) >= 5 else None,
        )

    def parse(self, data: Union[bytes, str]) -> Iterator[ParsedLine]:
        for line in self.split_lines(self.decode(data)):
            yield self.tokenize(line)

    @staticmethod
    def is_valid(parsed: ParsedLine) -> bool:
        """Check if line is a complete record (5+ fields, numeric status and time)"""
        return parsed.record is not None
