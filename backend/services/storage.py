"""
LogStore Class - Handles file I/O operations

This module manages the stored (last uploaded) access log.
"""

import logging
import os

from models.data_models import HealthStatus
from services.parser import LogParser

logger = logging.getLogger(__name__)


class LogStore:
    """
    Manages log file storage and retrieval.
    Responsibilities:
    - Save uploaded log files
    - Read the stored log back
    - Provide file statistics
    """

    def __init__(self, file_path: str):
        self.file_path = file_path

    def save_upload(self, content: bytes) -> int:
        """
        Save uploaded log content as-is (overwrite).
        Returns the number of non-blank lines written.
        """
        if not content:
            raise ValueError("Empty file content")

        text = LogParser.decode(content)
        if not text.strip():
            raise ValueError("Empty file after decoding")

        self._ensure_parent_dir()
        with open(self.file_path, "w", encoding="utf-8", newline="") as f:
            f.write(text)

        written = sum(1 for _ in LogParser.split_lines(text))
        logger.info("stored %d log lines at %s", written, self.file_path)
        return written

    def read_text(self) -> str:
        """Stored log text; a missing file reads as an empty log"""
        try:
            with open(self.file_path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            return ""

    def stat(self) -> HealthStatus:
        """Get file statistics"""
        exists = os.path.exists(self.file_path)
        size_bytes = os.path.getsize(self.file_path) if exists else 0
        total_lines = sum(1 for _ in LogParser.split_lines(self.read_text())) if exists else 0

        return HealthStatus(
            status="ok",
            log_file_exists=exists,
            path=os.path.abspath(self.file_path),
            size_bytes=size_bytes,
            total_lines=total_lines,
        )

    def _ensure_parent_dir(self) -> None:
        """Create parent directories if needed"""
        os.makedirs(os.path.dirname(os.path.abspath(self.file_path)), exist_ok=True)
