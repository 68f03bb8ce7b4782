"""Shared fixtures for the scheduling test suite."""
import pytest

from scheduling.engines import Catalog, Schedule
from scheduling.models import Course, Event


@pytest.fixture
def csc216_001() -> Course:
    return Course("CSC216", "Software Development Fundamentals", "001", 3, "sesmith5", "MW", 1330, 1445)


@pytest.fixture
def csc216_002() -> Course:
    return Course("CSC216", "Software Development Fundamentals", "002", 3, "sesmith5", "TH", 1330, 1445)


@pytest.fixture
def catalog_courses(csc216_001, csc216_002) -> list:
    return [
        Course("CSC116", "Intro to Programming - Java", "001", 3, "jdyoung2", "MW", 910, 1100),
        Course("CSC116", "Intro to Programming - Java", "003", 3, "tbdimitr", "TH", 1120, 1310),
        csc216_001,
        csc216_002,
        Course.arranged("CSC216", "Software Development Fundamentals", "601", 3, "jctetter"),
        Course.arranged("CSC217", "Software Development Fundamentals Lab", "601", 1, "jctetter"),
        Course("CSC226", "Discrete Mathematics for Computer Scientists", "001", 3, "tmbarnes", "MWF", 935, 1025),
        Course("CSC230", "C and Software Tools", "001", 3, "dbsturgi", "MW", 1445, 1600),
    ]


@pytest.fixture
def catalog(catalog_courses) -> Catalog:
    return Catalog(catalog_courses)


@pytest.fixture
def schedule(catalog) -> Schedule:
    return Schedule(catalog)


@pytest.fixture
def gym() -> Event:
    return Event("Gym", "MWF", 700, 800, 1, "Carmichael")


RECORD_LINES = [
    "CSC116,Intro to Programming - Java,001,3,jdyoung2,MW,910,1100",
    "CSC216,Software Development Fundamentals,001,3,sesmith5,MW,1330,1445",
    "",
    "CSC216,Software Development Fundamentals,601,3,jctetter,A",
    # invalid: extra fields after arranged
    "CSC217,Software Development Fundamentals Lab,601,1,jctetter,A,0,0",
    # invalid: credits not a number
    "CSC226,Discrete Mathematics,001,three,tmbarnes,MWF,935,1025",
    # invalid: section has letters
    "CSC230,C and Software Tools,0a1,3,dbsturgi,MW,1145,1300",
    # duplicate (name, section): dropped, the first one wins
    "CSC216,A Later Title,001,4,someone,TH,800,915",
    "CSC316,Data Structures and Algorithms,001,3,jtking,MW,830,945",
]


@pytest.fixture
def records_file(tmp_path):
    """A course records file mixing valid, invalid and duplicate lines."""
    path = tmp_path / "course_records.txt"
    path.write_text("\n".join(RECORD_LINES) + "\n", encoding="utf-8")
    return path
