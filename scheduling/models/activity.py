"""
Activity base model.

An Activity is anything that occupies time on a student's week: a course
section from the catalog or a personal recurring event. Both variants share
a title, a set of meeting days and a start/end time, and both go through the
same conflict check before they may join a schedule.
"""

from abc import ABC, abstractmethod

from ..config import (
    ARRANGED,
    HOURS_PER_HALF_DAY,
    MAX_TIME,
    MINUTES_PER_HOUR,
)
from ..errors import ConflictError, ValidationError


class Activity(ABC):
    """
    Shared behavior for everything that can sit on a schedule.

    Subclasses are frozen dataclasses that declare the four common fields
    below plus their own, and call `_validate_activity()` from
    `__post_init__`. Because validation runs on construction and the
    dataclasses are frozen, an Activity can never exist in an invalid state.

    MEETING DAYS:
    -------------
    Meeting days are a string of day symbols, e.g. "MWF" or "TH". Which
    symbols are allowed depends on the variant (ALLOWED_DAYS), and only
    variants with ALLOWS_ARRANGED may use the "A" sentinel.

    MEETING TIMES:
    --------------
    Times are 24-hour HHMM integers (1330 = 1:30 PM). An arranged activity
    has both times set to 0.

    CONFLICTS:
    ----------
    Two activities conflict when they share at least one day AND their
    closed time intervals overlap:

        max(start_a, start_b) <= min(end_a, end_b)

    So a class ending at 1445 conflicts with one starting at 1445.
    Arranged activities never conflict with anything.
    """

    title: str
    meeting_days: str
    start_time: int
    end_time: int

    ALLOWED_DAYS = frozenset()
    ALLOWS_ARRANGED = False

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _validate_activity(self):
        """Validate the fields every activity has. Raises ValidationError."""
        if not isinstance(self.title, str) or not self.title:
            raise ValidationError("Invalid title.")
        self._validate_meeting_days()
        self._validate_meeting_times()

    def _validate_meeting_days(self):
        days = self.meeting_days
        if not isinstance(days, str) or not days:
            raise ValidationError("Invalid meeting days and times.")

        if days == ARRANGED and self.ALLOWS_ARRANGED:
            return

        # "A" mixed with real days falls through here and is rejected,
        # since it is never part of ALLOWED_DAYS.
        if any(day not in self.ALLOWED_DAYS for day in days):
            raise ValidationError("Invalid meeting days and times.")

    def _validate_meeting_times(self):
        if self.is_arranged:
            if self.start_time != 0 or self.end_time != 0:
                raise ValidationError("Invalid meeting days and times.")
            return

        for value in (self.start_time, self.end_time):
            if not _is_valid_time(value):
                raise ValidationError("Invalid meeting days and times.")

        if self.end_time < self.start_time:
            raise ValidationError("Invalid meeting days and times.")

    # -------------------------------------------------------------------------
    # Meeting information
    # -------------------------------------------------------------------------

    @property
    def is_arranged(self) -> bool:
        """True if the activity has no fixed meeting time."""
        return self.meeting_days == ARRANGED

    def meeting_string(self) -> str:
        """
        Human-readable meeting summary.

        Examples:
            "MW 1:30PM-2:45PM"
            "Arranged"
        """
        if self.is_arranged:
            return "Arranged"
        start = format_time(self.start_time)
        end = format_time(self.end_time)
        return f"{self.meeting_days} {start}-{end}"

    # -------------------------------------------------------------------------
    # Conflict detection
    # -------------------------------------------------------------------------

    def check_conflict(self, other: "Activity"):
        """
        Raise ConflictError if this activity overlaps `other`.

        The check is symmetric: a.check_conflict(b) raises exactly when
        b.check_conflict(a) does. It returns None when there is no overlap.
        """
        if self.is_arranged or other.is_arranged:
            return

        shared_days = set(self.meeting_days) & set(other.meeting_days)
        if not shared_days:
            return

        latest_start = max(self.start_time, other.start_time)
        earliest_end = min(self.end_time, other.end_time)
        if latest_start <= earliest_end:
            raise ConflictError("Schedule conflict.")

    def conflicts_with(self, other: "Activity") -> bool:
        """Boolean form of check_conflict()."""
        try:
            self.check_conflict(other)
        except ConflictError:
            return True
        return False

    # -------------------------------------------------------------------------
    # Variant capabilities
    # -------------------------------------------------------------------------

    @abstractmethod
    def is_duplicate(self, other: "Activity") -> bool:
        """True if `other` is the same activity by this variant's identity rule."""

    @abstractmethod
    def short_display(self) -> list:
        """Four display slots: name, section, title, meeting string."""

    @abstractmethod
    def long_display(self) -> list:
        """Seven display slots: name, section, title, credits, instructor, meeting string, details."""

    @abstractmethod
    def to_record(self) -> str:
        """Canonical comma-separated record line for this activity."""

    def __str__(self) -> str:
        return self.to_record()


def _is_valid_time(value) -> bool:
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    if value < 0 or value > MAX_TIME:
        return False
    return value % 100 < MINUTES_PER_HOUR


def format_time(hhmm: int) -> str:
    """Convert an HHMM time to 12-hour form, e.g. 1330 -> "1:30PM", 0 -> "12:00AM"."""
    hour, minute = divmod(hhmm, 100)
    suffix = "PM" if hour >= HOURS_PER_HALF_DAY else "AM"
    hour = hour % HOURS_PER_HALF_DAY or HOURS_PER_HALF_DAY
    return f"{hour}:{minute:02d}{suffix}"
