# cli/menus/roster_menu.py

"""
Student Records menu for the Student Roster CLI.

This module defines the full interface for managing `Student` records, including:
- Adding, modifying, and removing students
- Displaying all students and searching by roll number
- Showing statistics and sorting the roster
- Saving to and loading from roster files, including quick save and auto-save

All operations are routed through the `Roster` API for consistency, validation, and state tracking.
Control flow adheres to structured CLI menu patterns with clear terminal-level feedback.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import file_view_menu
from cli.path_utils import ensure_parent_dir, resolve_data_path
from cli.session import Session
from core.config import (
    DEFAULT_FILENAME,
    MAX_MARKS,
    MAX_NAME_LENGTH,
    MAX_ROLL_INPUT,
    MIN_MARKS,
    MIN_ROLL,
)
from core.response import ErrorCode
from core.text_utils import normalize_name
from models.roster_statistics import compute_statistics
from models.sort_order import SortOrder
from models.student import Student


def run(session: Session) -> None:
    """
    Top-level loop with dispatch for the Student Records menu.

    Args:
        session (Session): The active shell session.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - The menu title is rebuilt on every pass so the unsaved changes line stays current.
        - The finally block guarantees a check for unsaved changes before returning.
    """
    options = [
        ("Add a student", add_student),
        ("Modify a student", find_and_modify_student),
        ("Remove a student", find_and_remove_student),
        ("Display all students", view_all_students),
        ("Search by roll number", search_student),
        ("Show statistics", view_statistics),
        ("Sort by marks (ascending)", lambda s: sort_roster(s, SortOrder.MARKS_ASCENDING)),
        ("Sort by marks (descending)", lambda s: sort_roster(s, SortOrder.MARKS_DESCENDING)),
        ("Sort by name", lambda s: sort_roster(s, SortOrder.NAME_ASCENDING)),
        ("Save to file", save_roster),
        ("Load from file", load_roster),
        ("Quick save", quick_save),
        ("View a file without loading it", file_view_menu.run),
        ("Toggle auto-save", toggle_auto_save),
    ]
    zero_option = "Exit"

    try:
        while True:
            menu_response = helpers.display_menu(
                menu_title(session), options, zero_option
            )

            if menu_response is MenuSignal.EXIT:
                break

            elif callable(menu_response):
                menu_response(session)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    finally:
        helpers.prompt_if_dirty(session)


def menu_title(session: Session) -> str:
    title = formatters.format_banner_text("Student Record System Menu")
    status = model_formatters.format_roster_status(session.roster)
    auto_save = f"Auto-save: {session.auto_save_status}"

    return f"{title}\n{status}\n{auto_save}" if status else f"{title}\n{auto_save}"


# === add student ===


def add_student(session: Session) -> None:
    """
    Prompts for a new `Student` and adds it to the roster.

    Args:
        session (Session): The active shell session.

    Notes:
        - The roll number is checked for uniqueness at the prompt and again by `Roster.add()`.
        - Additions are not saved unless auto-save is on.
    """
    new_student = prompt_new_student(session)

    if new_student is None:
        helpers.returning_without_changes()
        return

    roster_response = session.roster.add(new_student)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(f"\nStudent with roll {new_student.roll} was not added.")
        return

    print(f"\n{roster_response.detail} [{new_student.status}]")

    helpers.autosave_if_enabled(session)


def prompt_new_student(session: Session) -> Student | None:
    """
    Creates a new `Student` object from user input.

    Args:
        session (Session): The active shell session.

    Returns:
        A new `Student` object, or None if the user cancels.
    """
    roll = prompt_roll_input_or_cancel(session)

    if roll is MenuSignal.CANCEL:
        return None
    roll = cast(int, roll)

    name = prompt_name_input()

    marks = prompt_marks_input_or_cancel()

    if marks is MenuSignal.CANCEL:
        return None
    marks = cast(int, marks)

    try:
        return Student(roll=roll, name=name, marks=marks)

    except (TypeError, ValueError) as e:
        print(f"\n[ERROR] Could not create student: {e}")
        return None


# === data input helpers ===


def prompt_roll_input_or_cancel(
    session: Session, current_index: int | None = None
) -> int | MenuSignal:
    """
    Solicits a roll number, validates range and uniqueness, and treats blank input as 'cancel'.

    Args:
        session (Session): The active shell session.
        current_index (int | None): The position of a record being modified, whose own roll may be kept.

    Returns:
        The validated roll number, or `MenuSignal.CANCEL` if the user cancels input.
    """
    while True:
        roll = helpers.prompt_int_or_cancel(
            f"Enter roll number ({MIN_ROLL}-{MAX_ROLL_INPUT}, leave blank to cancel):",
            MIN_ROLL,
            MAX_ROLL_INPUT,
        )

        if roll is MenuSignal.CANCEL:
            return roll
        roll = cast(int, roll)

        try:
            session.roster.require_unique_roll(roll, ignore_index=current_index)
            return roll

        except ValueError as e:
            print(f"\n[ERROR] {e}")
            print("Please try again.")


def prompt_name_input() -> str:
    """
    Solicits a student name and normalizes it.

    Returns:
        The trimmed name, `DEFAULT_NAME` if left blank, or the name cut to `MAX_NAME_LENGTH` characters.
    """
    name, truncated = normalize_name(helpers.prompt_user_input("Enter student name:"))

    if truncated:
        print(f"Name truncated to {MAX_NAME_LENGTH} characters.")

    return name


def prompt_marks_input_or_cancel() -> int | MenuSignal:
    return helpers.prompt_int_or_cancel(
        f"Enter marks ({MIN_MARKS}-{MAX_MARKS}, leave blank to cancel):",
        MIN_MARKS,
        MAX_MARKS,
    )


# === modify student ===


def find_and_modify_student(session: Session) -> None:
    """
    Prompts user for a roll number and then passes the matching record's position to `modify_student()`.

    Args:
        session (Session): The active shell session.
    """
    index = prompt_find_student(session, "modify")

    if index is MenuSignal.CANCEL:
        return
    index = cast(int, index)

    modify_student(index, session)


def modify_student(index: int, session: Session) -> None:
    """
    Replaces the roll number, name, and marks of the record at `index` after preview and confirmation.

    Args:
        index (int): The record's position in the roster.
        session (Session): The active shell session.

    Notes:
        - All three fields are collected before the roster is touched; `Roster.modify_at()` applies them together.
        - The record is looked up again after prompting rather than held across the prompts.
    """
    current = session.roster.records[index]
    before = (current.roll, current.name, current.marks)

    print("\nCurrent details:")
    print(model_formatters.format_student_oneline(current))

    print("\nEnter new details:")

    new_roll = prompt_roll_input_or_cancel(session, current_index=index)

    if new_roll is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    new_roll = cast(int, new_roll)

    new_name = prompt_name_input()

    new_marks = prompt_marks_input_or_cancel()

    if new_marks is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    new_marks = cast(int, new_marks)

    print(
        f"\nCurrent: {before[0]} | {before[1]} | {before[2]}"
        f" -> New: {new_roll} | {new_name} | {new_marks}"
    )

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    roster_response = session.roster.modify_at(index, new_roll, new_name, new_marks)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print("\nStudent was not modified.")
        helpers.returning_without_changes()
        return

    print(f"\n{roster_response.detail}")
    print(
        model_formatters.format_student_change(before, roster_response.data["record"])
    )

    helpers.autosave_if_enabled(session)


# === remove student ===


def find_and_remove_student(session: Session) -> None:
    """
    Prompts user for a roll number and then passes the matching record's position to `confirm_and_remove()`.

    Args:
        session (Session): The active shell session.
    """
    index = prompt_find_student(session, "remove")

    if index is MenuSignal.CANCEL:
        return
    index = cast(int, index)

    confirm_and_remove(index, session)


def confirm_and_remove(index: int, session: Session) -> None:
    """
    Deletes the record at `index` from the roster after preview and user confirmation.

    Args:
        index (int): The record's position in the roster.
        session (Session): The active shell session.
    """
    student = session.roster.records[index]

    helpers.caution_banner()
    print("You are about to remove the following student record:")
    print(model_formatters.format_student_multiline(student))

    if not helpers.confirm_action("Are you sure you want to remove this student?"):
        helpers.returning_without_changes()
        return

    roster_response = session.roster.remove_at(index)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print("\nStudent was not removed.")
        helpers.returning_without_changes()
        return

    print(f"\n{roster_response.detail}")

    helpers.autosave_if_enabled(session)


# === view students ===


def view_all_students(session: Session) -> None:
    """
    Displays every record in roster order.

    Args:
        session (Session): The active shell session.

    Notes:
        - Order is the roster's current order (insertion or last sort), not re-sorted for display.
    """
    roster_response = session.roster.get_records()

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    all_students = roster_response.data["records"]

    if not all_students:
        print("\nNo students in the system.")
        return

    rule = formatters.format_rule()

    print(f"\n{model_formatters.format_roster_heading(session.roster)}")
    print(rule)
    helpers.display_results(
        all_students,
        show_index=True,
        formatter=model_formatters.format_student_oneline,
    )
    print(rule)


def search_student(session: Session) -> None:
    """
    Looks up and displays a single record by roll number.

    Args:
        session (Session): The active shell session.
    """
    roll = helpers.prompt_int_or_cancel(
        "Enter roll number to search (leave blank to cancel):", MIN_ROLL, MAX_ROLL_INPUT
    )

    if roll is MenuSignal.CANCEL:
        return
    roll = cast(int, roll)

    roster_response = session.roster.find_by_roll(roll)

    if not roster_response.success:
        print(f"\n{roster_response.detail}")
        return

    print("\nFound:")
    print(model_formatters.format_student_oneline(roster_response.data["record"]))


def view_statistics(session: Session) -> None:
    """
    Displays summary statistics for the roster.

    Args:
        session (Session): The active shell session.
    """
    statistics_response = compute_statistics(session.roster)

    if not statistics_response.success:
        print(f"\n{statistics_response.detail}")
        return

    print(f"\n{model_formatters.format_statistics(statistics_response.data['statistics'])}")


# === sort students ===


def sort_roster(session: Session, order: SortOrder) -> None:
    """
    Reorders the roster and reports the order applied.

    Args:
        session (Session): The active shell session.
        order (SortOrder): The order to apply.
    """
    roster_response = session.roster.sort(order)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print(f"\n{roster_response.detail}")

    helpers.autosave_if_enabled(session)


# === save and load ===


def save_roster(session: Session) -> None:
    """
    Prompts for a file path and saves the roster to it.

    Args:
        session (Session): The active shell session.

    Notes:
        - A blank path saves to `DEFAULT_FILENAME`.
        - Missing parent directories are created before writing.
    """
    path_input = helpers.prompt_user_input_or_none(
        f"Enter file path to save to (leave blank for '{DEFAULT_FILENAME}'):"
    )
    path = resolve_data_path(path_input)

    try:
        ensure_parent_dir(path)

    except OSError as e:
        print(f"\n[ERROR] Could not create the directory for '{path}': {e}")
        return

    roster_response = session.roster.save(path)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(f"\nFailed to save to '{path}'.")
        return

    print(f"\n{roster_response.detail}")


def quick_save(session: Session) -> None:
    """
    Saves the roster to the last used file without prompting for a path.

    Args:
        session (Session): The active shell session.
    """
    roster = session.roster

    if not roster.last_path:
        print("\nNo file loaded yet. Use 'Save to file' to save to a new file.")
        return

    roster_response = roster.save(roster.last_path)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print(f"\nQuick {roster_response.detail[0].lower()}{roster_response.detail[1:]}")


def load_roster(session: Session) -> None:
    """
    Prompts for a file path and replaces the roster's contents with the records read from it.

    Args:
        session (Session): The active shell session.

    Notes:
        - Loading discards the current records; the user must confirm first when there are unsaved changes.
        - Skipped lines are listed after a successful load.
    """
    roster = session.roster

    if roster.modified:
        helpers.caution_banner()
        print("Loading a file replaces every record currently in memory.")

        if not helpers.confirm_action("Discard your unsaved changes and continue?"):
            helpers.returning_without_changes()
            return

    path_input = helpers.prompt_user_input_or_none(
        f"Enter file path to load from (leave blank for '{DEFAULT_FILENAME}'):"
    )
    path = resolve_data_path(path_input)

    roster_response = roster.load(path)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(f"\nFailed to load from '{path}'.")
        return

    print(f"\n{roster_response.detail}")
    helpers.display_warnings(roster_response)


# === settings ===


def toggle_auto_save(session: Session) -> None:
    session.toggle_auto_save()

    print(f"\nAuto-save is now {session.auto_save_status}.")

    if session.auto_save:
        target = session.roster.last_path or DEFAULT_FILENAME
        print(f"Changes will be saved to '{target}' after every edit.")


# === finder methods ===


def prompt_find_student(session: Session, action: str) -> int | MenuSignal:
    """
    Prompts the user for a roll number and resolves it to a position in the roster.

    Args:
        session (Session): The active shell session.
        action (str): A verb used in the prompt (e.g. "modify", "remove").

    Returns:
        int | MenuSignal: The record's position, or `MenuSignal.CANCEL` if canceled or not found.
    """
    if session.roster.is_empty:
        print("\nNo students in the system.")
        return MenuSignal.CANCEL

    roll = helpers.prompt_int_or_cancel(
        f"Enter roll number to {action} (leave blank to cancel):",
        MIN_ROLL,
        MAX_ROLL_INPUT,
    )

    if roll is MenuSignal.CANCEL:
        return MenuSignal.CANCEL
    roll = cast(int, roll)

    roster_response = session.roster.find_by_roll(roll)

    if not roster_response.success:
        if roster_response.error is ErrorCode.NOT_FOUND:
            print(f"\n{roster_response.detail}")
        else:
            helpers.display_response_failure(roster_response)
        return MenuSignal.CANCEL

    return roster_response.data["index"]
