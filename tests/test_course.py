"""Tests for the Course model."""
import dataclasses

import pytest

from scheduling.errors import ValidationError
from scheduling.models import Course, Event

NAME = "CSC216"
TITLE = "Software Development Fundamentals"
SECTION = "001"
CREDITS = 3
INSTRUCTOR = "sesmith5"


def make_course(**overrides) -> Course:
    fields = dict(
        name=NAME, title=TITLE, section=SECTION, credits=CREDITS,
        instructor_id=INSTRUCTOR, meeting_days="MW", start_time=1330, end_time=1445,
    )
    fields.update(overrides)
    return Course(**fields)


def test_fields_read_back_unchanged() -> None:
    course = Course(NAME, TITLE, SECTION, CREDITS, INSTRUCTOR, "MW", 1330, 1445)

    assert course.name == NAME
    assert course.title == TITLE
    assert course.section == SECTION
    assert course.credits == CREDITS
    assert course.instructor_id == INSTRUCTOR
    assert course.meeting_days == "MW"
    assert course.start_time == 1330
    assert course.end_time == 1445
    assert course.key == (NAME, SECTION)


def test_arranged_constructor() -> None:
    course = Course.arranged(NAME, TITLE, "601", CREDITS, "jctetter")

    assert course.meeting_days == "A"
    assert course.start_time == 0
    assert course.end_time == 0
    assert course.is_arranged


@pytest.mark.parametrize("name", [None, "", "CSC", "CSC2166", 216])
def test_invalid_name(name) -> None:
    with pytest.raises(ValidationError, match="Invalid course name."):
        make_course(name=name)


@pytest.mark.parametrize("name", ["E115", "CSC216", "MA141"])
def test_name_length_bounds(name) -> None:
    assert make_course(name=name).name == name


@pytest.mark.parametrize("section", [None, "", "01", "0011", "0a1", "ABC", 1, "٠٠١"])
def test_invalid_section(section) -> None:
    with pytest.raises(ValidationError, match="Invalid section."):
        make_course(section=section)


@pytest.mark.parametrize("credits", [0, 6, -1, "3", 3.0, True])
def test_invalid_credits(credits) -> None:
    with pytest.raises(ValidationError, match="Invalid credits."):
        make_course(credits=credits)


@pytest.mark.parametrize("credits", [1, 5])
def test_credit_bounds(credits) -> None:
    assert make_course(credits=credits).credits == credits


@pytest.mark.parametrize("instructor_id", [None, ""])
def test_invalid_instructor(instructor_id) -> None:
    with pytest.raises(ValidationError, match="Invalid instructor id."):
        make_course(instructor_id=instructor_id)


def test_courses_are_immutable() -> None:
    course = make_course()
    with pytest.raises(dataclasses.FrozenInstanceError):
        course.section = "002"


def test_replace_validates_and_leaves_original_unchanged() -> None:
    course = make_course()

    with pytest.raises(ValidationError):
        dataclasses.replace(course, section="2")
    assert course.section == SECTION

    moved = dataclasses.replace(course, section="002", meeting_days="TH")
    assert moved.section == "002"
    assert moved.meeting_days == "TH"
    assert course == make_course()


def test_equality_and_hash_are_structural() -> None:
    a = make_course()
    b = make_course()

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


@pytest.mark.parametrize("field,value", [
    ("name", "CSC217"),
    ("title", "Other"),
    ("section", "002"),
    ("credits", 4),
    ("instructor_id", "jdyoung2"),
    ("meeting_days", "MWF"),
    ("start_time", 1300),
    ("end_time", 1500),
])
def test_any_field_difference_breaks_equality(field, value) -> None:
    assert make_course() != make_course(**{field: value})


def test_is_duplicate_uses_name_only() -> None:
    course = make_course()

    assert course.is_duplicate(make_course(section="002", meeting_days="TH"))
    assert not course.is_duplicate(make_course(name="CSC217"))


def test_course_is_never_a_duplicate_of_an_event() -> None:
    course = make_course()
    event = Event(TITLE, "MW", 1330, 1445, 1, "")

    assert not course.is_duplicate(event)
    assert not event.is_duplicate(course)


def test_short_display() -> None:
    assert make_course().short_display() == [NAME, SECTION, TITLE, "MW 1:30PM-2:45PM"]


def test_long_display() -> None:
    assert make_course().long_display() == [
        NAME, SECTION, TITLE, "3", INSTRUCTOR, "MW 1:30PM-2:45PM", "",
    ]


def test_to_record_timed() -> None:
    assert make_course().to_record() == "CSC216,Software Development Fundamentals,001,3,sesmith5,MW,1330,1445"


def test_to_record_arranged_omits_times() -> None:
    course = Course.arranged(NAME, TITLE, "601", CREDITS, "jctetter")
    assert course.to_record() == "CSC216,Software Development Fundamentals,601,3,jctetter,A"
