# tests/test_cli.py

import os

import pytest

import cli.menu_helpers as helpers
from cli import model_formatters
from cli.main import prompt_user_name
from cli.menu_helpers import MenuSignal
from cli.menus import file_view_menu, roster_menu
from cli.path_utils import ensure_parent_dir, resolve_data_path
from cli.session import Session
from models.roster_statistics import compute_statistics
from models.student import Student


def feed_input(monkeypatch, *responses):
    answers = iter(responses)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))


@pytest.fixture
def sample_session(sample_roster):
    return Session(sample_roster, user_name="Sean")


# === path utils ===


def test_resolve_data_path_defaults():
    assert resolve_data_path(None) == "students.txt"
    assert resolve_data_path("   ") == "students.txt"
    assert resolve_data_path("", "last.txt") == "last.txt"


def test_resolve_data_path_expands_home():
    assert resolve_data_path("~/roster.txt") == os.path.expanduser("~/roster.txt")


def test_ensure_parent_dir(tmp_path):
    target = tmp_path / "nested" / "dir" / "students.txt"

    ensure_parent_dir(str(target))

    assert target.parent.is_dir()


# === model formatters ===


def test_format_student_oneline():
    line = model_formatters.format_student_oneline(Student(1, "Alice", 90))

    assert line.startswith("Roll: 1")
    assert "Name: Alice" in line
    assert line.endswith("Marks:  90 [PASS]")


def test_format_roster_status(sample_roster):
    assert model_formatters.format_roster_status(sample_roster) == "Unsaved changes"

    sample_roster.mark_synced("students.txt")
    assert model_formatters.format_roster_status(sample_roster) == ""

    sample_roster.add(Student(4, "D", 10))
    assert (
        model_formatters.format_roster_status(sample_roster)
        == "Unsaved changes (last file: students.txt)"
    )


def test_format_statistics(sample_roster):
    stats = compute_statistics(sample_roster).data["statistics"]

    text = model_formatters.format_statistics(stats)

    assert "Average Marks:     53.33" in text
    assert "Pass Count:        2 (66.7%)" in text
    assert "Fail Count:        1" in text


# === menu helpers ===


def test_prompt_int_or_cancel_reasks_until_valid(monkeypatch, capsys):
    feed_input(monkeypatch, "abc", "12abc", "0", "42")
    assert helpers.prompt_int_or_cancel("Roll:", 1, 99999) == 42

    feed_input(monkeypatch, "abc", "101", "55")
    assert helpers.prompt_int_or_cancel("Marks:", 0, 100) == 55

    out = capsys.readouterr().out
    assert "Invalid number. Try again." in out
    assert "Number must be between 0 and 100. Try again." in out


def test_prompt_int_or_cancel_blank_cancels(monkeypatch):
    feed_input(monkeypatch, "")

    assert helpers.prompt_int_or_cancel("Roll:", 1, 99999) is MenuSignal.CANCEL


def test_confirm_action(monkeypatch):
    feed_input(monkeypatch, "maybe", "Y")
    assert helpers.confirm_action("Continue?")

    feed_input(monkeypatch, "no")
    assert not helpers.confirm_action("Continue?")


def test_display_menu_returns_action(monkeypatch):
    def action():
        return None

    feed_input(monkeypatch, "-1", "7", "1")
    assert helpers.display_menu("Menu", [("Do it", action)]) is action

    feed_input(monkeypatch, "0")
    assert helpers.display_menu("Menu", [("Do it", action)]) is MenuSignal.EXIT


def test_prompt_user_name_defaults(monkeypatch):
    feed_input(monkeypatch, "   ")
    assert prompt_user_name() == "User"

    feed_input(monkeypatch, "Sean")
    assert prompt_user_name() == "Sean"


# === roster menu ===


def test_add_student_flow(monkeypatch, sample_session, capsys):
    # roll 1 is taken, so the prompt asks again
    feed_input(monkeypatch, "1", "4", "  Dana  ", "75")

    roster_menu.add_student(sample_session)

    out = capsys.readouterr().out
    assert "Student with roll 1 already exists." in out
    assert sample_session.roster.find_by_roll(4).data["record"] == Student(4, "Dana", 75)


def test_add_student_truncates_long_name(monkeypatch, sample_session, capsys):
    feed_input(monkeypatch, "5", "n" * 120, "60")

    roster_menu.add_student(sample_session)

    assert "Name truncated to 100 characters." in capsys.readouterr().out
    assert sample_session.roster.find_by_roll(5).data["record"].name == "n" * 100


def test_add_student_cancel(monkeypatch, sample_session):
    feed_input(monkeypatch, "")

    roster_menu.add_student(sample_session)

    assert sample_session.roster.size == 3


def test_modify_student_flow(monkeypatch, sample_session):
    # find roll 2, keep roll 2, rename, new marks, confirm
    feed_input(monkeypatch, "2", "2", "Bea", "65", "y")

    roster_menu.find_and_modify_student(sample_session)

    assert sample_session.roster.records[1] == Student(2, "Bea", 65)


def test_remove_student_declined(monkeypatch, sample_session):
    feed_input(monkeypatch, "3", "n")

    roster_menu.find_and_remove_student(sample_session)

    assert sample_session.roster.size == 3


def test_remove_student_confirmed(monkeypatch, sample_session):
    feed_input(monkeypatch, "1", "y")

    roster_menu.find_and_remove_student(sample_session)

    assert [s.roll for s in sample_session.roster] == [2, 3]


def test_save_and_quick_save(monkeypatch, sample_session, tmp_path, capsys):
    path = str(tmp_path / "out" / "class.txt")
    feed_input(monkeypatch, path)

    roster_menu.save_roster(sample_session)

    assert os.path.isfile(path)
    assert sample_session.roster.last_path == path

    sample_session.roster.add(Student(9, "Z", 10))
    roster_menu.quick_save(sample_session)

    assert not sample_session.roster.modified
    assert "Quick saved 4 records" in capsys.readouterr().out


def test_quick_save_without_file(sample_session, capsys):
    roster_menu.quick_save(sample_session)

    assert "No file loaded yet." in capsys.readouterr().out
    assert sample_session.roster.modified


def test_load_with_unsaved_changes_can_be_declined(
    monkeypatch, sample_session, sample_file
):
    feed_input(monkeypatch, "n")

    roster_menu.load_roster(sample_session)

    assert [s.name for s in sample_session.roster] == ["A", "B", "C"]


def test_load_reports_warnings(monkeypatch, empty_roster, write_roster_file, capsys):
    path = write_roster_file("1|90|A\nbad line\n")
    feed_input(monkeypatch, path)

    roster_menu.load_roster(Session(empty_roster))

    out = capsys.readouterr().out
    assert "Loaded 1 records" in out
    assert "Invalid format at line 2 (skipped)" in out


def test_auto_save_after_mutation(monkeypatch, sample_session, roster_path):
    sample_session.roster.save(roster_path)
    sample_session.toggle_auto_save()
    feed_input(monkeypatch, "8", "Eve", "88")

    roster_menu.add_student(sample_session)

    assert not sample_session.roster.modified

    with open(roster_path, encoding="utf-8") as f:
        assert "8|88|Eve" in f.read().splitlines()


def test_run_exit_prompts_to_save(monkeypatch, sample_session, tmp_path):
    monkeypatch.chdir(tmp_path)
    feed_input(monkeypatch, "0", "y")

    roster_menu.run(sample_session)

    assert (tmp_path / "students.txt").is_file()
    assert not sample_session.roster.modified


# === file view menu ===


def test_view_file_statistics(monkeypatch, sample_session, sample_file, capsys):
    feed_input(monkeypatch, sample_file)

    file_view_menu.view_file_statistics(sample_session)

    out = capsys.readouterr().out
    assert "Total Students:    3" in out
    assert "Highest Marks:     90" in out


def test_search_file(monkeypatch, sample_session, sample_file, capsys):
    feed_input(monkeypatch, sample_file, "2")

    file_view_menu.search_file(sample_session)

    assert "Name: Bob" in capsys.readouterr().out


def test_view_missing_file(monkeypatch, sample_session, tmp_path, capsys):
    feed_input(monkeypatch, str(tmp_path / "nope.txt"))

    file_view_menu.view_file_records(sample_session)

    assert "File not found" in capsys.readouterr().out
    assert [s.name for s in sample_session.roster] == ["A", "B", "C"]
