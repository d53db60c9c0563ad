"""
LogLoader Class - Acquires raw log data

This module reads an access log from a URL, a local file or standard input.
"""

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional

import requests

from config import FETCH_TIMEOUT

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"


class LogSourceError(Exception):
    """The log could not be acquired from its source"""


class LogLoader:
    """
    Loads raw log bytes.
    Responsibilities:
    - Fetch http(s) URLs
    - Read local files
    - Read standard input
    """

    def __init__(self, timeout: float = FETCH_TIMEOUT, stdin: Optional[BinaryIO] = None):
        self.timeout = timeout
        self.stdin = stdin

    @staticmethod
    def is_url(source: str) -> bool:
        return source.lower().startswith(("http://", "https://"))

    def load(self, source: Optional[str] = None) -> bytes:
        if source is None or source == STDIN_SOURCE:
            return self.read_stdin()
        if self.is_url(source):
            return self.fetch(source)
        return self.read_file(source)

    def fetch(self, url: str) -> bytes:
        logger.info("fetching log from %s", url)
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise LogSourceError(f"could not fetch {url}: {e}") from e
        return response.content

    def read_file(self, path: str) -> bytes:
        p = Path(path)
        if not p.exists():
            raise LogSourceError(f"no such file: {path}")
        if not p.is_file():
            raise LogSourceError(f"not a file: {path}")

        logger.info("reading log from %s", p)
        try:
            return p.read_bytes()
        except OSError as e:
            raise LogSourceError(f"could not read {path}: {e}") from e

    def read_stdin(self) -> bytes:
        stream = self.stdin if self.stdin is not None else sys.stdin.buffer
        logger.debug("reading log from standard input")
        try:
            return stream.read()
        except OSError as e:
            raise LogSourceError(f"could not read standard input: {e}") from e
