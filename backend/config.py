import logging
import os

API_PREFIX = os.getenv("API_PREFIX", "/api")
LOG_FILE_PATH = os.getenv("LOG_FILE", "./data/access.log")  # last uploaded log, raw text
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Application logs go to stderr; stdout is reserved for the report"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
