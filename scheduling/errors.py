"""
Scheduler error hierarchy.

Two families of failure exist and callers must treat them differently:

- ValidationError: a malformed field (bad section, bad time, ...). Raised
  from constructors before any schedule is touched.
- ConflictError / DuplicateEnrollmentError / DuplicateEventError: a
  well-formed activity that cannot join the schedule.

A course missing from the catalog or an out-of-range remove index is NOT an
error; those operations return None/False.
"""


class SchedulerError(Exception):
    """Base class for every error raised by the scheduling package."""


class ValidationError(SchedulerError, ValueError):
    """A field value is malformed. The object was not created or changed."""


class ConflictError(SchedulerError):
    """Two activities share a meeting day and their times overlap."""


class DuplicateEnrollmentError(SchedulerError):
    """The schedule already holds a section of this course."""


class DuplicateEventError(SchedulerError):
    """The schedule already holds an event with this title."""


class RecordFileError(SchedulerError):
    """A record source could not be read or a record sink could not be written."""
