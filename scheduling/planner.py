"""
Schedule Planner - Main Orchestrator.

This module contains the SchedulePlanner class that ties the catalog, the
student's schedule and the record I/O together behind one query surface.

NOTE: Don't run this file directly. Run from parent directory:
    python3 -m scheduling
"""

from typing import Optional

from .config import DEFAULT_CATALOG_FILE
from .data import RecordLoader, write_activity_records
from .engines import Catalog, Schedule
from .models import Course, Event


class SchedulePlanner:
    """
    Main interface for the scheduling system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Loads the catalog once from a record source (file path or URL)
    2. Starts an empty schedule bound to that catalog
    3. Exposes catalog/schedule operations as plain data (rows of strings)
       so any presentation layer can render them

    This class never prints. The CLI passes the rows it returns to
    TerminalDisplay.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        planner = SchedulePlanner("course_records.txt")

        planner.add_course_to_schedule("CSC216", "001")
        planner.add_event_to_schedule("Gym", "MWF", 700, 800, 1, "Carmichael")

        for row in planner.get_full_scheduled_activities():
            print(row)

        planner.export_schedule("my_schedule.txt")
    """

    def __init__(self, catalog_source=DEFAULT_CATALOG_FILE, loader: Optional[RecordLoader] = None):
        """
        Args:
            catalog_source: Path or http(s) URL of the course records
            loader: RecordLoader to use (e.g. one with a custom session)

        Raises:
            RecordFileError: the catalog source cannot be read
        """
        self.loader = loader or RecordLoader()
        self.catalog = Catalog(self.loader.read_course_records(catalog_source))
        self.schedule = Schedule(self.catalog)

    # -------------------------------------------------------------------------
    # Catalog queries
    # -------------------------------------------------------------------------

    def get_course_from_catalog(self, name: str, section: str) -> Optional[Course]:
        """Look up a section by name and section, None if it is not offered."""
        return self.catalog.find(name, section)

    def get_course_catalog(self) -> list:
        """Catalog as rows of [name, section, title, meeting string]."""
        return self.catalog.rows()

    # -------------------------------------------------------------------------
    # Schedule queries
    # -------------------------------------------------------------------------

    @property
    def title(self) -> str:
        return self.schedule.title

    def set_schedule_title(self, title: str):
        self.schedule.rename(title)

    def get_scheduled_activities(self) -> list:
        """Schedule as short rows; events leave name and section blank."""
        return self.schedule.rows()

    def get_full_scheduled_activities(self) -> list:
        """Schedule as long rows with credits, instructor and event details."""
        return self.schedule.full_rows()

    # -------------------------------------------------------------------------
    # Schedule mutation
    # -------------------------------------------------------------------------

    def add_course_to_schedule(self, name: str, section: str) -> bool:
        return self.schedule.add_course(name, section)

    def add_event_to_schedule(self, title: str, meeting_days: str, start_time: int, end_time: int,
                              weekly_repeat: int, event_details: str) -> Event:
        return self.schedule.add_event(title, meeting_days, start_time, end_time, weekly_repeat, event_details)

    def remove_activity_from_schedule(self, index: int) -> bool:
        return self.schedule.remove(index)

    def reset_schedule(self):
        self.schedule.reset()

    def export_schedule(self, path):
        """
        Write the schedule to `path` in record format.

        Raises:
            RecordFileError: the file cannot be saved
        """
        write_activity_records(path, self.schedule.activities)
