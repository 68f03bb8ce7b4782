"""
Course data model.

Contains the Course dataclass that represents one offered section in the
course catalog, and therefore one possible enrollment on a schedule.
"""

from dataclasses import dataclass

from ..config import (
    ARRANGED,
    COURSE_MEETING_DAYS,
    MAX_CREDITS,
    MAX_NAME_LENGTH,
    MIN_CREDITS,
    MIN_NAME_LENGTH,
    SECTION_LENGTH,
)
from ..errors import ValidationError
from .activity import Activity


@dataclass(frozen=True)
class Course(Activity):
    """
    Represents a single course section from the catalog.

    Equality and hashing are structural over every field, so two Course
    objects are equal only if name, title, section, credits, instructor,
    meeting days and times all match. To "change" a field use
    dataclasses.replace(), which validates the new value and leaves the
    original untouched if it is rejected.

    IDENTITY:
    ---------
    - (name, section) is the catalog lookup key.
    - name alone is the duplicate-enrollment key: a student may not enroll
      in two sections of CSC216.

    Attributes:
        name: Course name, 4-6 characters (e.g., "CSC216")
        title: Human-readable course title
        section: Exactly three digits (e.g., "001")
        credits: Credit hours, 1-5
        instructor_id: Instructor's unity id (e.g., "sesmith5")
        meeting_days: Weekday symbols from "MTWHF", or "A" for arranged
        start_time: HHMM start time, 0 when arranged
        end_time: HHMM end time, 0 when arranged
    """
    name: str
    title: str
    section: str
    credits: int
    instructor_id: str
    meeting_days: str
    start_time: int = 0
    end_time: int = 0

    ALLOWED_DAYS = COURSE_MEETING_DAYS
    ALLOWS_ARRANGED = True

    def __post_init__(self):
        self._validate_activity()

        if not isinstance(self.name, str) or not MIN_NAME_LENGTH <= len(self.name) <= MAX_NAME_LENGTH:
            raise ValidationError("Invalid course name.")

        section = self.section
        if (not isinstance(section, str) or len(section) != SECTION_LENGTH
                or not (section.isascii() and section.isdigit())):
            raise ValidationError("Invalid section.")

        credits = self.credits
        if not isinstance(credits, int) or isinstance(credits, bool) or not MIN_CREDITS <= credits <= MAX_CREDITS:
            raise ValidationError("Invalid credits.")

        if not isinstance(self.instructor_id, str) or not self.instructor_id:
            raise ValidationError("Invalid instructor id.")

    @classmethod
    def arranged(cls, name: str, title: str, section: str, credits: int, instructor_id: str) -> "Course":
        """Create a section with no fixed meeting time."""
        return cls(name, title, section, credits, instructor_id, ARRANGED)

    @property
    def key(self) -> tuple:
        """Catalog lookup key."""
        return (self.name, self.section)

    def is_duplicate(self, other: Activity) -> bool:
        """A Course duplicates any other Course with the same name, regardless of section."""
        return isinstance(other, Course) and self.name == other.name

    def short_display(self) -> list:
        return [self.name, self.section, self.title, self.meeting_string()]

    def long_display(self) -> list:
        return [
            self.name,
            self.section,
            self.title,
            str(self.credits),
            self.instructor_id,
            self.meeting_string(),
            "",
        ]

    def to_record(self) -> str:
        """
        Serialize to a catalog record line.

        Arranged sections omit the time fields:
            CSC216,Software Development Fundamentals,001,3,sesmith5,MW,1330,1445
            CSC217,Software Development Fundamentals Lab,211,1,sesmith5,A
        """
        fields = [self.name, self.title, self.section, str(self.credits), self.instructor_id, self.meeting_days]
        if not self.is_arranged:
            fields += [str(self.start_time), str(self.end_time)]
        return ",".join(fields)
