"""
Course catalog.

This module holds the Catalog: the read-only (per session) list of course
sections a student may enroll in.
"""

from typing import Optional

from ..models import Course


class Catalog:
    """
    Ordered collection of Course sections, unique by (name, section).

    Order is insertion order, which for a loaded catalog is file order.
    Adding a second section with an existing (name, section) key is refused
    and the first one is kept.
    """

    def __init__(self, courses=()):
        self._courses = []
        for course in courses:
            self.add(course)

    def add(self, course: Course) -> bool:
        """Append `course` unless its (name, section) is already present."""
        if self.find(course.name, course.section) is not None:
            return False
        self._courses.append(course)
        return True

    def find(self, name: str, section: str) -> Optional[Course]:
        """Return the section matching name and section, or None."""
        for course in self._courses:
            if course.name == name and course.section == section:
                return course
        return None

    def rows(self) -> list:
        """Short display rows (name, section, title, meeting string) for every section."""
        return [course.short_display() for course in self._courses]

    def __len__(self) -> int:
        return len(self._courses)

    def __iter__(self):
        return iter(self._courses)
