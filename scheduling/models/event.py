"""
Event data model.

Contains the Event dataclass for personal, recurring activities that a
student adds to their own schedule (study groups, work shifts, gym).
"""

from dataclasses import dataclass

from ..config import EVENT_MEETING_DAYS, MAX_WEEKLY_REPEAT, MIN_WEEKLY_REPEAT
from ..errors import ValidationError
from .activity import Activity


@dataclass(frozen=True)
class Event(Activity):
    """
    A personal recurring event on the student's schedule.

    Events may meet on any day of the week including weekends (S, U) but
    can never be "arranged": they always have a concrete time.

    `weekly_repeat` is metadata only: 2 means "every 2 weeks". The
    scheduler does not expand events into calendar dates, so a biweekly
    event still blocks its slot every week for conflict purposes.

    Display rows leave the course-only slots (section, credits, instructor)
    empty so that courses and events line up in the same table:

        short: ["", "", title, meeting string]
        long:  ["", "", title, "", "", meeting string, event details]
    """
    title: str
    meeting_days: str
    start_time: int
    end_time: int
    weekly_repeat: int
    event_details: str

    ALLOWED_DAYS = EVENT_MEETING_DAYS

    def __post_init__(self):
        self._validate_activity()

        repeat = self.weekly_repeat
        if (not isinstance(repeat, int) or isinstance(repeat, bool)
                or not MIN_WEEKLY_REPEAT <= repeat <= MAX_WEEKLY_REPEAT):
            raise ValidationError("Invalid weekly repeat.")

        if not isinstance(self.event_details, str):
            raise ValidationError("Invalid event details.")

    def meeting_string(self) -> str:
        """Base meeting string plus the repeat interval, e.g. "MWF 9:00AM-10:00AM (every 2 weeks)"."""
        return f"{super().meeting_string()} (every {self.weekly_repeat} weeks)"

    def is_duplicate(self, other: Activity) -> bool:
        """An Event duplicates any other Event with the same title."""
        return isinstance(other, Event) and self.title == other.title

    def short_display(self) -> list:
        return ["", "", self.title, self.meeting_string()]

    def long_display(self) -> list:
        return ["", "", self.title, "", "", self.meeting_string(), self.event_details]

    def to_record(self) -> str:
        fields = [
            self.title,
            self.meeting_days,
            str(self.start_time),
            str(self.end_time),
            str(self.weekly_repeat),
            self.event_details,
        ]
        return ",".join(fields)
