"""Tests for the interactive command-line interface."""
import pytest

from scheduling import cli


def scripted_input(answers: list):
    """Replace input() with a script; EOF once the script runs out."""
    remaining = iter(answers)

    def _input(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return _input


def run_cli(monkeypatch, records_file, answers: list) -> None:
    monkeypatch.setattr("builtins.input", scripted_input(answers))
    cli.main([str(records_file)])


def test_parser_defaults() -> None:
    args = cli.build_parser().parse_args([])
    assert args.catalog.endswith("course_records.txt")
    assert args.verbose is False


def test_missing_catalog_exits(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([str(tmp_path / "missing.txt")])

    assert exc.value.code == 1
    assert "Cannot find file" in capsys.readouterr().err


def test_add_course_and_show_schedule(monkeypatch, records_file, capsys) -> None:
    run_cli(monkeypatch, records_file, ["4", "CSC216", "001", "2", "0"])

    out = capsys.readouterr().out
    assert "Loaded 4 course sections" in out
    assert "Added CSC216-001" in out
    assert "MW 1:30PM-2:45PM" in out


def test_unknown_course_is_a_notice(monkeypatch, records_file, capsys) -> None:
    run_cli(monkeypatch, records_file, ["4", "CSC999", "001"])
    assert "CSC999-001 is not in the catalog" in capsys.readouterr().out


def test_rejected_operations_are_reported_and_the_loop_continues(monkeypatch, records_file, capsys) -> None:
    run_cli(monkeypatch, records_file, [
        "4", "CSC116", "001",
        "4", "CSC316", "001",                              # conflicts with CSC116
        "5", "Gym", "MWX", "700", "800", "1", "",         # bad meeting days
        "5", "Gym", "SU", "noon",                         # bad number, prompt aborts
        "5", "Gym", "SU", "1200", "1300", "1", "Rec",
        "5", "Gym", "F", "1200", "1300", "1", "",         # duplicate title
        "6", "5",
        "3",
    ])

    out = capsys.readouterr().out
    assert "The course cannot be added due to a conflict." in out
    assert "Invalid input: Invalid meeting days and times." in out
    assert "Invalid input: Invalid number: 'noon'" in out
    assert "Added Gym: SU 12:00PM-1:00PM (every 1 weeks)" in out
    assert "You have already created an event called Gym" in out
    assert "There is no activity 5 to remove" in out


def test_rename_reset_and_export(monkeypatch, records_file, tmp_path, capsys) -> None:
    export_path = tmp_path / "out.txt"
    run_cli(monkeypatch, records_file, [
        "4", "CSC216", "001",
        "7", "Fall Plan",
        "9", str(export_path),
        "8",
        "2",
        "0",
    ])

    out = capsys.readouterr().out
    assert "Schedule renamed to 'Fall Plan'" in out
    assert f"Schedule saved to {export_path}" in out
    assert "Schedule reset" in out
    assert "SCHEDULE: MY SCHEDULE" in out
    assert export_path.read_text(encoding="utf-8").startswith("CSC216,")


def test_export_defaults_to_working_directory(monkeypatch, records_file, tmp_path, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    run_cli(monkeypatch, records_file, [
        "4", "CSC216", "001",
        "9", "",
        "0",
    ])

    out = capsys.readouterr().out
    assert "Schedule saved to my_schedule.txt" in out
    assert (tmp_path / "my_schedule.txt").read_text(encoding="utf-8").startswith("CSC216,")
