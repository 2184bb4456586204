# cli/main.py

"""
Entry point for the Student Roster CLI.

Greets the user, creates an empty roster, and hands control to the Student Record System menu.
"""

import logging

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menus import roster_menu
from cli.session import Session
from core.logging_config import setup_logging
from models.roster import Roster

logger = logging.getLogger(__name__)


def run_cli() -> None:
    """
    Starts an interactive session and runs it until the user exits.

    Notes:
        - Console logging is limited to errors; skipped lines from a load are reported by the menus.
        - `roster_menu.run()` offers to save unsaved changes before it returns.
    """
    setup_logging(logging.ERROR)

    welcome_banner = formatters.format_banner_text("STUDENT RECORD SYSTEM")
    print(f"\n{welcome_banner}")

    user_name = prompt_user_name()
    print(f"\nHello, {user_name}! Welcome to the Student Record System.")

    session = Session(Roster.create(), user_name=user_name)
    logger.info(f"Session started for {user_name}.")

    roster_menu.run(session)

    exit_program(session)


def prompt_user_name() -> str:
    name = helpers.prompt_user_input("Enter your name:")

    return name if name else "User"


def exit_program(session: Session | None = None):
    """
    Displays an exit banner and terminates the CLI program.

    Args:
        session (Session | None): The finished session, used to say goodbye by name.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - Should only be called after any necessary cleanup or save operations have been handled.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}")

    if session is not None:
        print(f"Goodbye, {session.user_name}!\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
