# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Student Roster application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling confirmation flows, including the unsaved changes prompt
- Displaying standard system messages, load warnings, and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from cli.session import Session
from core.config import DEFAULT_FILENAME
from core.response import Response


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i:>2}. {label}")

        print(f"{0:>2}. {zero_option}")

        choice = prompt_user_input("Select an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError(index)

            # adjusts for zero-index, retrieves action from tuple
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a bracketed index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"[{i}] " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_warnings(response: Response, limit: int = 10) -> None:
    """
    Prints the per-line warnings carried by a load or file-read `Response`.

    Args:
        response (Response): A response whose data may contain a "warnings" list.
        limit (int, optional): The maximum number of warnings printed before summarizing the rest. Defaults to 10.
    """
    warnings = response.data.get("warnings", [])

    if not warnings:
        return

    print(f"\n{formatters.format_count(len(warnings), 'line')} skipped:")

    for warning in warnings[:limit]:
        print(f"... {warning}")

    if len(warnings) > limit:
        print(f"... and {len(warnings) - limit} more.")


# === prompt user input methods ===


# Prompt Helpers
#
# These functions provide a consistent way to handle user input and confirmation prompts.
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` and its variants loop until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Please enter 'y' or 'n'.")


def confirm_make_change() -> bool:
    return confirm_action("Do you want to make this change?")


def confirm_unsaved_changes(target: str) -> bool:
    return confirm_action(f"You have unsaved changes! Save to '{target}' now?")


def prompt_if_dirty(session: Session) -> None:
    """
    Offers to save the roster when it has unsaved changes.

    Args:
        session (Session): The active shell session.

    Notes:
        - Saves to the last used file if there is one, otherwise to `DEFAULT_FILENAME`.
    """
    roster = session.roster

    if not roster.modified:
        return

    target = roster.last_path or DEFAULT_FILENAME

    if confirm_unsaved_changes(target):
        save_response = roster.save(target)

        if not save_response.success:
            display_response_failure(save_response)
        else:
            print(f"\n{save_response.detail}")


def autosave_if_enabled(session: Session) -> None:
    if not session.auto_save or not session.roster.modified:
        return

    save_response = session.roster.save()

    if not save_response.success:
        display_response_failure(save_response)
        print("Auto-save failed. Your changes are still in memory.")
    else:
        print(f"Auto-saved to '{save_response.data['path']}'.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_int_or_cancel(prompt: str, minimum: int, maximum: int) -> int | MenuSignal:
    """
    Solicits a whole number within a range, treating blank input as 'cancel'.

    Args:
        prompt (str): The prompt text shown to the user.
        minimum (int): The smallest accepted value.
        maximum (int): The largest accepted value.

    Returns:
        The entered integer, or `MenuSignal.CANCEL` if the input is blank.

    Notes:
        - Unlike the roster file reader, trailing characters are rejected ("12abc" is not a number here).
        - The user is prompted again until the input is valid or blank.
    """
    while True:
        response = prompt_user_input_or_cancel(prompt)

        if response is MenuSignal.CANCEL:
            return response

        try:
            value = int(str(response))

        except ValueError:
            print("Invalid number. Try again.")
            continue

        if not minimum <= value <= maximum:
            print(f"Number must be between {minimum} and {maximum}. Try again.")
            continue

        return value


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def caution_banner() -> None:
    caution_banner = formatters.format_banner_text("CAUTION!")
    print(f"\n{caution_banner}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
