"""
Configuration constants for the scheduling system.

This module contains all configuration values and constants used throughout
the scheduler. Centralizing these makes it easy to adjust behavior as
registration policies change.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Sample catalog ships inside the package; exports land in the working directory
RESOURCES_DIR = Path(__file__).parent / "resources"
DEFAULT_CATALOG_FILE = RESOURCES_DIR / "course_records.txt"
DEFAULT_EXPORT_FILE = Path("my_schedule.txt")


# =============================================================================
# SCHEDULE DEFAULTS
# =============================================================================

DEFAULT_SCHEDULE_TITLE = "My Schedule"


# =============================================================================
# MEETING DAYS
# =============================================================================
# M = Monday, T = Tuesday, W = Wednesday, H = Thursday, F = Friday,
# S = Saturday, U = Sunday. Courses only meet on weekdays; personal events
# may fall on any day. "A" (arranged) is a course-only sentinel meaning the
# section has no fixed meeting time and must stand alone.

ARRANGED = "A"
COURSE_MEETING_DAYS = frozenset("MTWHF")
EVENT_MEETING_DAYS = frozenset("MTWHFSU")


# =============================================================================
# MEETING TIMES
# =============================================================================
# Times are stored in 24-hour HHMM form: 1330 is 1:30 PM, 0 is midnight.

MAX_TIME = 2359
MINUTES_PER_HOUR = 60
HOURS_PER_HALF_DAY = 12


# =============================================================================
# COURSE LIMITS
# =============================================================================

MIN_NAME_LENGTH = 4
MAX_NAME_LENGTH = 6
SECTION_LENGTH = 3
MIN_CREDITS = 1
MAX_CREDITS = 5


# =============================================================================
# EVENT LIMITS
# =============================================================================

MIN_WEEKLY_REPEAT = 1
MAX_WEEKLY_REPEAT = 4


# =============================================================================
# REMOTE RECORD SOURCES
# =============================================================================
# Catalogs can be read straight from a URL (e.g. a registrar export).
# The session retries GETs with exponential backoff on throttling/5xx.

REQUEST_TIMEOUT = 15
RETRY_TOTAL = 5
RETRY_BACKOFF_FACTOR = 2
RETRY_STATUS_FORCELIST = [429, 500, 502, 503, 504]
USER_AGENT = "scheduling/1.0 (+course catalog reader)"
