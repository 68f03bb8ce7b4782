"""
Data models for the scheduling system.

This package contains the Activity abstraction and its two variants.
These serve as "contracts" between the record I/O, the catalog/schedule
engines and the display layer.
"""

from .activity import Activity, format_time
from .course import Course
from .event import Event

__all__ = [
    "Activity",
    "Course",
    "Event",
    "format_time",
]
