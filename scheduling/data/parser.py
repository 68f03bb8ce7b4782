"""
Course record parsing.

This module turns one comma-separated catalog line into a Course. It knows
the record grammar; it does not know where lines come from.
"""

import re

from ..config import ARRANGED
from ..errors import ValidationError
from ..models import Course

# Field counts for the two course record shapes
ARRANGED_FIELD_COUNT = 6
TIMED_FIELD_COUNT = 8

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_course_line(line: str) -> Course:
    """
    Parse a single course record.

    GRAMMAR:
    --------
        name,title,section,credits,instructorId,meetingDays,startTime,endTime
        name,title,section,credits,instructorId,A

    Fields are split on every comma; there is no quoting, so titles cannot
    contain commas. An arranged record ("A") must stop after the meeting
    days; a timed record must have exactly eight fields.

    Raises:
        ValidationError: wrong field count, a non-integer where an integer
            is required, or any Course field validation failure.
    """
    fields = line.rstrip("\r\n").split(",")
    if len(fields) < ARRANGED_FIELD_COUNT:
        raise ValidationError("Invalid course record.")

    name, title, section, credits, instructor_id, meeting_days = fields[:ARRANGED_FIELD_COUNT]
    credits = parse_int(credits)

    if meeting_days == ARRANGED:
        if len(fields) != ARRANGED_FIELD_COUNT:
            raise ValidationError("Invalid course record.")
        return Course.arranged(name, title, section, credits, instructor_id)

    if len(fields) != TIMED_FIELD_COUNT:
        raise ValidationError("Invalid course record.")

    start_time = parse_int(fields[6])
    end_time = parse_int(fields[7])
    return Course(name, title, section, credits, instructor_id, meeting_days, start_time, end_time)


def parse_int(text: str) -> int:
    """Strict integer parse: optional sign and digits only, no whitespace."""
    if not _INTEGER.fullmatch(text):
        raise ValidationError(f"Invalid number: {text!r}")
    return int(text)
