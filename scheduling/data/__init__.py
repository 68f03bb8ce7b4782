"""
Record I/O module.

This package handles all file and network I/O for catalog and schedule
records.
"""

from .loader import RecordLoader, create_retry_session
from .parser import parse_course_line
from .writer import write_activity_records

__all__ = ["RecordLoader", "create_retry_session", "parse_course_line", "write_activity_records"]
