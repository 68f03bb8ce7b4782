"""
Student Schedule Planning Package
=================================

Build a conflict-free weekly schedule from a course catalog and personal
recurring events.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────┐  ┌──────────────────┐  ┌───────────────────────────┐  │
│  │ RecordLoader │  │ parse_course_line│  │ write_activity_records    │  │
│  │ (file / URL) │  │ (record grammar) │  │ (schedule export)         │  │
│  └──────────────┘  └──────────────────┘  └───────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │ Activity: Course, Event │  │  Catalog, Schedule                  │  │
│  │ (validation, conflicts) │  │  (lookup, duplicate/conflict scan)  │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns rows of strings
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     SchedulePlanner                                      │
│          (Orchestrator - owns one catalog and one schedule)             │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

scheduling/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── errors.py            # ValidationError, ConflictError, ...
├── planner.py           # SchedulePlanner orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Activity and its variants
│   ├── activity.py      # Activity (conflict check, meeting string)
│   ├── course.py        # Course
│   └── event.py         # Event
│
├── data/                # Record I/O
│   ├── loader.py        # RecordLoader (file or URL)
│   ├── parser.py        # parse_course_line
│   └── writer.py        # write_activity_records
│
├── engines/             # Collections with business rules
│   ├── catalog.py       # Catalog
│   └── schedule.py      # Schedule
│
├── ui/                  # User interface implementations
│   └── terminal.py      # TerminalDisplay
│
└── resources/
    └── course_records.txt  # Sample catalog (default CLI source)

USAGE
-----

    from scheduling import SchedulePlanner, ConflictError

    planner = SchedulePlanner("course_records.txt")
    planner.add_course_to_schedule("CSC216", "001")
    try:
        planner.add_event_to_schedule("Lunch", "MW", 1400, 1430, 1, "")
    except ConflictError as e:
        print(e)
    planner.export_schedule("my_schedule.txt")

Running from command line:

    python -m scheduling

"""

# Version
__version__ = "1.0.0"

# Main exports
from .planner import SchedulePlanner
from .cli import main

# Model exports
from .models import Activity, Course, Event

# Engine exports
from .engines import Catalog, Schedule

# Data exports
from .data import RecordLoader, parse_course_line, write_activity_records

# UI exports
from .ui import TerminalDisplay

# Error exports
from .errors import (
    SchedulerError,
    ValidationError,
    ConflictError,
    DuplicateEnrollmentError,
    DuplicateEventError,
    RecordFileError,
)

# Configuration exports
from .config import (
    RESOURCES_DIR,
    DEFAULT_CATALOG_FILE,
    DEFAULT_SCHEDULE_TITLE,
    ARRANGED,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "SchedulePlanner",
    "main",
    # Models
    "Activity",
    "Course",
    "Event",
    # Engines
    "Catalog",
    "Schedule",
    # Data
    "RecordLoader",
    "parse_course_line",
    "write_activity_records",
    # UI
    "TerminalDisplay",
    # Errors
    "SchedulerError",
    "ValidationError",
    "ConflictError",
    "DuplicateEnrollmentError",
    "DuplicateEventError",
    "RecordFileError",
    # Config
    "RESOURCES_DIR",
    "DEFAULT_CATALOG_FILE",
    "DEFAULT_SCHEDULE_TITLE",
    "ARRANGED",
]
