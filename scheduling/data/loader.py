"""
Course record loading.

This module reads catalog record sources, either a local text file or a
URL, and turns them into a deduplicated list of Course objects.
"""

import logging
from pathlib import Path
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    REQUEST_TIMEOUT,
    RETRY_BACKOFF_FACTOR,
    RETRY_STATUS_FORCELIST,
    RETRY_TOTAL,
    USER_AGENT,
)
from ..errors import RecordFileError, ValidationError
from .parser import parse_course_line

logger = logging.getLogger(__name__)

URL_PREFIXES = ("http://", "https://")


def create_retry_session() -> requests.Session:
    """
    Build a requests Session that retries GETs with exponential backoff.

    429 and 5xx responses are retried RETRY_TOTAL times, waiting 2s, 4s,
    8s...
    """
    session = requests.Session()
    retries = Retry(
        total=RETRY_TOTAL,
        backoff_factor=RETRY_BACKOFF_FACTOR,
        status_forcelist=RETRY_STATUS_FORCELIST,
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def is_url(source) -> bool:
    return isinstance(source, str) and source.lower().startswith(URL_PREFIXES)


class RecordLoader:
    """
    Reads course records from a file or URL.

    BAD LINES ARE NOT FATAL:
    A catalog file is produced by hand or by another system and will contain
    the odd malformed line. Any line that fails parsing or validation is
    skipped (and logged at DEBUG) while the rest of the catalog still loads.

    DUPLICATE HANDLING:
    If two lines describe the same (name, section), the FIRST one in file
    order wins and later ones are dropped.

    Usage:
        loader = RecordLoader()
        courses = loader.read_course_records("course_records.txt")
        courses = loader.read_course_records("https://example.edu/catalog.txt")
    """

    def __init__(self, session: Optional[requests.Session] = None):
        # None means "create a session per fetch and close it afterwards"
        self._session = session

    def read_course_records(self, source) -> list:
        """
        Read every valid, non-duplicate course from `source`.

        Args:
            source: Path (str or Path) to a record file, or an http(s) URL

        Returns:
            List of Course objects in record order

        Raises:
            RecordFileError: the source cannot be opened or fetched
        """
        courses = []
        seen_keys = set()

        for line_number, raw_line in enumerate(self._read_lines(source), 1):
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError as e:
                logger.debug(f"Skipping line {line_number} of {source}: {e}")
                continue

            if not line.strip():
                continue

            try:
                course = parse_course_line(line)
            except ValidationError as e:
                logger.debug(f"Skipping line {line_number} of {source}: {e}")
                continue

            if course.key in seen_keys:
                logger.debug(f"Skipping duplicate {course.name}-{course.section} on line {line_number}")
                continue

            seen_keys.add(course.key)
            courses.append(course)

        logger.info(f"Loaded {len(courses)} courses from {source}")
        return courses

    def _read_lines(self, source) -> list:
        """Raw record lines as bytes; each line is decoded on its own."""
        if is_url(source):
            return self._fetch_lines(source)

        try:
            with open(Path(source), "rb") as f:
                return f.read().splitlines()
        except OSError as e:
            raise RecordFileError("Cannot find file") from e

    def _fetch_lines(self, url: str) -> list:
        session = self._session or create_retry_session()
        try:
            resp = session.get(url, timeout=REQUEST_TIMEOUT)
            resp.raise_for_status()
            return resp.content.splitlines()
        except requests.RequestException as e:
            logger.warning(f"Failed to fetch course records from {url}: {e}")
            raise RecordFileError("Cannot find file") from e
        finally:
            if self._session is None:
                session.close()
