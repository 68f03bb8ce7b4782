"""
Student schedule engine.

This module handles building a student's weekly schedule out of catalog
sections and personal events, refusing anything that duplicates or
overlaps what is already there.
"""

import logging

from ..config import DEFAULT_SCHEDULE_TITLE
from ..errors import (
    ConflictError,
    DuplicateEnrollmentError,
    DuplicateEventError,
    ValidationError,
)
from ..models import Event
from .catalog import Catalog

logger = logging.getLogger(__name__)


class Schedule:
    """
    A student's current plan: an ordered list of courses and events.

    ═══════════════════════════════════════════════════════════════════════════
    INSERTION RULES
    ═══════════════════════════════════════════════════════════════════════════

    Every new activity is compared against EVERY entry already scheduled,
    in schedule order. For each existing entry:

        1. duplicate check  (Course by name, Event by title)
        2. conflict check   (shared day AND overlapping time)

    The first failure of either kind aborts the whole insertion, so the
    schedule is never left half-updated. Only an activity that passes both
    checks against the entire schedule is appended.

    NOT-FOUND IS NOT AN ERROR:
    --------------------------
    Adding a course that is not in the catalog, or removing an index that
    does not exist, returns False. Exceptions are reserved for malformed
    input (ValidationError) and rejected insertions (duplicate/conflict).

    ═══════════════════════════════════════════════════════════════════════════
    """

    def __init__(self, catalog: Catalog, title: str = DEFAULT_SCHEDULE_TITLE):
        self.catalog = catalog
        self._activities = []
        self._title = None
        self.rename(title)

    # -------------------------------------------------------------------------
    # Title
    # -------------------------------------------------------------------------

    @property
    def title(self) -> str:
        return self._title

    def rename(self, title: str):
        """Replace the schedule title. Only None is rejected; "" is a valid title."""
        if title is None:
            raise ValidationError("Title cannot be null")
        self._title = title

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_course(self, name: str, section: str) -> bool:
        """
        Enroll in the catalog section (name, section).

        Returns:
            True if the course was added, False if no such section exists

        Raises:
            DuplicateEnrollmentError: a section of this course is already scheduled
            ConflictError: the section overlaps a scheduled activity
        """
        course = self.catalog.find(name, section)
        if course is None:
            logger.info(f"{name}-{section} is not in the catalog")
            return False

        for existing in self._activities:
            if course.is_duplicate(existing):
                logger.warning(f"Rejected {name}-{section}: already enrolled")
                raise DuplicateEnrollmentError(f"You are already enrolled in {name}")
            try:
                existing.check_conflict(course)
            except ConflictError as e:
                logger.warning(f"Rejected {name}-{section}: conflicts with {existing.title}")
                raise ConflictError("The course cannot be added due to a conflict.") from e

        self._activities.append(course)
        logger.info(f"Added {name}-{section} to {self._title!r}")
        return True

    def add_event(self, title: str, meeting_days: str, start_time: int, end_time: int,
                  weekly_repeat: int, event_details: str) -> Event:
        """
        Create an event and add it to the schedule.

        The Event is constructed (and therefore validated) before the
        schedule is looked at, so a ValidationError never depends on what is
        already scheduled.

        Returns:
            The Event that was added

        Raises:
            ValidationError: any event field is malformed
            DuplicateEventError: an event with this title is already scheduled
            ConflictError: the event overlaps a scheduled activity
        """
        event = Event(title, meeting_days, start_time, end_time, weekly_repeat, event_details)

        for existing in self._activities:
            if event.is_duplicate(existing):
                logger.warning(f"Rejected event {title!r}: duplicate title")
                raise DuplicateEventError(f"You have already created an event called {title}")
            try:
                existing.check_conflict(event)
            except ConflictError as e:
                logger.warning(f"Rejected event {title!r}: conflicts with {existing.title}")
                raise ConflictError("The event cannot be added due to a conflict.") from e

        self._activities.append(event)
        logger.info(f"Added event {title!r} to {self._title!r}")
        return event

    def remove(self, index: int) -> bool:
        """Remove the activity at `index`. Returns False if there is no such index."""
        if not self._activities or index < 0 or index >= len(self._activities):
            return False

        removed = self._activities.pop(index)
        logger.info(f"Removed {removed.title!r} from {self._title!r}")
        return True

    def reset(self):
        """Drop every activity and restore the default title."""
        self._activities.clear()
        self._title = DEFAULT_SCHEDULE_TITLE

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def activities(self) -> tuple:
        """Snapshot of the scheduled activities, in schedule order."""
        return tuple(self._activities)

    def rows(self) -> list:
        """Short display rows, one per activity."""
        return [activity.short_display() for activity in self._activities]

    def full_rows(self) -> list:
        """Long display rows, one per activity."""
        return [activity.long_display() for activity in self._activities]

    def __len__(self) -> int:
        return len(self._activities)

    def __iter__(self):
        return iter(self._activities)
