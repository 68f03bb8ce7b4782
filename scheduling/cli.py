"""
Command-Line Interface for the Scheduling System.

This module provides the interactive CLI for building a schedule.
It handles user input and orchestrates the display of results.

MENU:
-----
1. Show course catalog         6. Remove activity
2. Show schedule               7. Rename schedule
3. Show full schedule          8. Reset schedule
4. Add course                  9. Export schedule
5. Add event                   0. Quit

NOTE: Don't run this file directly. Run from parent directory:
    python3 -m scheduling [catalog file or URL]
"""

import argparse
import logging
import sys

from .config import DEFAULT_CATALOG_FILE, DEFAULT_EXPORT_FILE
from .data.parser import parse_int
from .errors import SchedulerError, ValidationError
from .planner import SchedulePlanner
from .ui import TerminalDisplay

MENU = [
    ("1", "Show course catalog"),
    ("2", "Show schedule"),
    ("3", "Show full schedule"),
    ("4", "Add course"),
    ("5", "Add event"),
    ("6", "Remove activity"),
    ("7", "Rename schedule"),
    ("8", "Reset schedule"),
    ("9", "Export schedule"),
    ("0", "Quit"),
]


def _prompt(label: str) -> str:
    return input(f"  {label}: ").strip()


def _prompt_int(label: str) -> int:
    return parse_int(_prompt(label))


def _add_course(planner: SchedulePlanner):
    name = _prompt("Course name (e.g., CSC216)")
    section = _prompt("Section (e.g., 001)")

    if planner.add_course_to_schedule(name, section):
        TerminalDisplay.print_success(f"Added {name}-{section}")
    else:
        TerminalDisplay.print_notice(f"{name}-{section} is not in the catalog")


def _add_event(planner: SchedulePlanner):
    title = _prompt("Event title")
    meeting_days = _prompt("Meeting days (any of MTWHFSU)")
    start_time = _prompt_int("Start time (HHMM, e.g., 1330)")
    end_time = _prompt_int("End time (HHMM)")
    weekly_repeat = _prompt_int("Repeat every N weeks (1-4)")
    details = _prompt("Details")

    event = planner.add_event_to_schedule(title, meeting_days, start_time, end_time, weekly_repeat, details)
    TerminalDisplay.print_success(f"Added {event.title}: {event.meeting_string()}")


def _remove_activity(planner: SchedulePlanner):
    TerminalDisplay.print_schedule(planner.title, planner.get_scheduled_activities())
    index = _prompt_int("Number to remove")

    if planner.remove_activity_from_schedule(index):
        TerminalDisplay.print_success(f"Removed activity {index}")
    else:
        TerminalDisplay.print_notice(f"There is no activity {index} to remove")


def _rename_schedule(planner: SchedulePlanner):
    planner.set_schedule_title(_prompt("New title"))
    TerminalDisplay.print_success(f"Schedule renamed to {planner.title!r}")


def _export_schedule(planner: SchedulePlanner):
    path = _prompt(f"File name (Enter for {DEFAULT_EXPORT_FILE})") or DEFAULT_EXPORT_FILE
    planner.export_schedule(path)
    TerminalDisplay.print_success(f"Schedule saved to {path}")


def _handle_choice(planner: SchedulePlanner, choice: str):
    """Run one menu action. Scheduler errors propagate to the caller."""
    if choice == "1":
        TerminalDisplay.print_catalog(planner.get_course_catalog())
    elif choice == "2":
        TerminalDisplay.print_schedule(planner.title, planner.get_scheduled_activities())
    elif choice == "3":
        TerminalDisplay.print_schedule(planner.title, planner.get_full_scheduled_activities(), full=True)
    elif choice == "4":
        _add_course(planner)
    elif choice == "5":
        _add_event(planner)
    elif choice == "6":
        _remove_activity(planner)
    elif choice == "7":
        _rename_schedule(planner)
    elif choice == "8":
        planner.reset_schedule()
        TerminalDisplay.print_success("Schedule reset")
    elif choice == "9":
        _export_schedule(planner)
    else:
        TerminalDisplay.print_notice(f"Unknown option {choice!r}")


def _print_menu():
    print(f"\n{TerminalDisplay.BOLD}What would you like to do?{TerminalDisplay.RESET}")
    for key, label in MENU:
        print(f"  {TerminalDisplay.CYAN}{key}{TerminalDisplay.RESET}. {label}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scheduling",
        description="Build a weekly schedule from a course catalog.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 -m scheduling
  python3 -m scheduling course_records.txt
  python3 -m scheduling https://example.edu/registrar/course_records.txt -v
        """
    )
    parser.add_argument(
        "catalog",
        nargs="?",
        default=str(DEFAULT_CATALOG_FILE),
        help=f"Course records file or URL (default: {DEFAULT_CATALOG_FILE})"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log skipped catalog lines and schedule changes"
    )
    return parser


def main(argv=None):
    """
    Command-line interface for the scheduler.

    Loads the catalog, then loops over the menu until the user quits.
    A rejected operation (bad field, duplicate, conflict) is reported and
    the loop continues; nothing is left half-applied.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        planner = SchedulePlanner(args.catalog)
    except SchedulerError as e:
        print(f"Error: {e} ({args.catalog})", file=sys.stderr)
        sys.exit(1)

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         STUDENT SCHEDULE PLANNER                                 ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")
    print(f"  Loaded {len(planner.catalog)} course sections from {args.catalog}")

    while True:
        _print_menu()
        try:
            choice = input(f"{TerminalDisplay.BOLD}Select option: {TerminalDisplay.RESET}").strip()
            if choice == "0":
                break
            _handle_choice(planner, choice)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        except ValidationError as e:
            TerminalDisplay.print_error(f"Invalid input: {e}")
        except SchedulerError as e:
            TerminalDisplay.print_error(str(e))


if __name__ == "__main__":
    main()
