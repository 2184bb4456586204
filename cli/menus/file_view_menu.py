# cli/menus/file_view_menu.py

"""
File View menu for the Student Roster CLI.

Lets the user inspect a roster file on disk without loading it:
- Display every record the file holds
- Search the file for a roll number
- Show statistics for the file's records

The in-memory roster is never touched here, so nothing in this menu can create unsaved changes.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.path_utils import file_is_present, resolve_data_path
from cli.session import Session
from core.config import MAX_ROLL_INPUT, MIN_ROLL
from models.roster_file import read_records
from models.roster_statistics import compute_statistics
from models.student import Student


def run(session: Session) -> None:
    """
    Top-level loop with dispatch for the File View menu.

    Args:
        session (Session): The active shell session.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("View File Directly")
    options = [
        ("Display all records in a file", view_file_records),
        ("Search a file by roll number", search_file),
        ("Show statistics for a file", view_file_statistics),
    ]
    zero_option = "Return to Student Record System menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(session)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Student Record System menu")


def prompt_file_records(session: Session) -> tuple[str, list[Student]] | None:
    """
    Prompts for a file path and reads the records it holds.

    Args:
        session (Session): The active shell session.

    Returns:
        The resolved path and its valid records, or None if the file is missing or unreadable.

    Notes:
        - A blank path falls back to the roster's last used file, then to `DEFAULT_FILENAME`.
        - Skipped lines are reported before returning.
    """
    path_input = helpers.prompt_user_input_or_none(
        "Enter file path to view (leave blank for the current file):"
    )
    path = resolve_data_path(path_input, session.roster.last_path)

    if not file_is_present(path):
        print(f"\nFile not found: '{path}'.")
        return None

    file_response = read_records(path)

    if not file_response.success:
        helpers.display_response_failure(file_response)
        return None

    helpers.display_warnings(file_response)

    return path, file_response.data["records"]


def view_file_records(session: Session) -> None:
    file_records = prompt_file_records(session)

    if file_records is None:
        return

    path, records = file_records

    if not records:
        print(f"\nNo student records found in '{path}'.")
        return

    rule = formatters.format_rule()

    print(f"\nStudent Records in '{path}' (Total: {len(records)})")
    print(rule)
    helpers.display_results(
        records, show_index=True, formatter=model_formatters.format_student_oneline
    )
    print(rule)


def search_file(session: Session) -> None:
    """
    Searches a file for the first record with a given roll number.

    Args:
        session (Session): The active shell session.
    """
    file_records = prompt_file_records(session)

    if file_records is None:
        return

    path, records = file_records

    roll = helpers.prompt_int_or_cancel(
        "Enter roll number to search (leave blank to cancel):", MIN_ROLL, MAX_ROLL_INPUT
    )

    if roll is MenuSignal.CANCEL:
        return
    roll = cast(int, roll)

    match = next((student for student in records if student.roll == roll), None)

    if match is None:
        print(f"\nStudent with roll {roll} not found in '{path}'.")
        return

    print("\nFound:")
    print(model_formatters.format_student_oneline(match))


def view_file_statistics(session: Session) -> None:
    file_records = prompt_file_records(session)

    if file_records is None:
        return

    path, records = file_records

    statistics_response = compute_statistics(records)

    if not statistics_response.success:
        print(f"\n{statistics_response.detail}")
        return

    print(f"\nFile: '{path}'")
    print(model_formatters.format_statistics(statistics_response.data["statistics"]))
