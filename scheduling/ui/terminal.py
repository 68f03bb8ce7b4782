"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where results are printed in the scheduling package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""


class TerminalDisplay:
    """
    Pretty terminal output for catalog and schedule tables.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    Every method takes plain rows (lists of strings) produced by
    SchedulePlanner, never model objects. A WebDisplay or a JSON formatter
    only needs the same method names.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    WIDTH = 78

    # Column headings and widths for the two row shapes
    SHORT_COLUMNS = [("NAME", 8), ("SEC", 5), ("TITLE", 34), ("MEETING", 0)]
    LONG_COLUMNS = [
        ("NAME", 8), ("SEC", 5), ("TITLE", 30), ("CR", 4),
        ("INSTRUCTOR", 11), ("MEETING", 36), ("DETAILS", 0),
    ]

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * cls.WIDTH}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * cls.WIDTH}{cls.RESET}")

    @classmethod
    def print_catalog(cls, rows: list):
        """Print the course catalog (short rows)."""
        cls.print_header("COURSE CATALOG")
        cls._print_table(rows, cls.SHORT_COLUMNS)

    @classmethod
    def print_schedule(cls, title: str, rows: list, full: bool = False):
        """Print the student's schedule, short or full rows."""
        cls.print_header(f"SCHEDULE: {title.upper()}" if title else "SCHEDULE")
        columns = cls.LONG_COLUMNS if full else cls.SHORT_COLUMNS
        cls._print_table(rows, columns, numbered=True)

    @classmethod
    def _print_table(cls, rows: list, columns: list, numbered: bool = False):
        if not rows:
            print(f"\n  {cls.DIM}(nothing to show){cls.RESET}")
            return

        prefix = "  #   " if numbered else "  "
        heading = "".join(cls._cell(name, width) for name, width in columns)
        print(f"\n{cls.BOLD}{prefix}{heading}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * (cls.WIDTH - 2)}{cls.RESET}")

        for i, row in enumerate(rows):
            line = "".join(cls._cell(value, width) for value, (_, width) in zip(row, columns))
            # Events leave the name slot blank
            color = cls.MAGENTA if not row[0] else ""
            number = f"{i:<4}" if numbered else ""
            print(f"  {number}{color}{line.rstrip()}{cls.RESET}")

    @staticmethod
    def _cell(value: str, width: int) -> str:
        if not width:
            return value
        if len(value) >= width:
            value = value[:width - 4] + "..."
        return f"{value:<{width}}"

    @classmethod
    def print_success(cls, message: str):
        print(f"\n  {cls.GREEN}✓ {message}{cls.RESET}")

    @classmethod
    def print_notice(cls, message: str):
        print(f"\n  {cls.YELLOW}⚠ {message}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        """Print a rejected operation with its reason."""
        print(f"\n  {cls.RED}✗ {message}{cls.RESET}")
