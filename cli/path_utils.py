# cli/path_utils.py

import os

from core.config import DEFAULT_FILENAME


def resolve_data_path(user_input: str | None, fallback: str | None = None) -> str:
    """
    Resolves the roster file path to use for a load, save, or file view.

    Args:
        user_input (str | None): An optional user-specified file path. If None or blank, the fallback is used.
        fallback (str | None): The path to use when no input is given. Defaults to `DEFAULT_FILENAME`.

    Returns:
        The user's path with `~` expanded, or the fallback path unchanged.
    """
    if user_input is not None and user_input.strip():
        return os.path.expanduser(user_input.strip())

    return fallback or DEFAULT_FILENAME


def ensure_parent_dir(file_path: str) -> None:
    """
    Creates the directory that will hold `file_path` if it does not exist yet.

    Args:
        file_path (str): The target file path.

    Notes:
        - A bare file name (no directory component) needs no directory and is left alone.
    """
    parent = os.path.dirname(file_path)

    if parent:
        os.makedirs(parent, exist_ok=True)


def file_is_present(file_path: str) -> bool:
    """
    Checks whether a path exists and is a regular file.

    Args:
        file_path (str): A string path to the target file.

    Returns:
        True if the path exists and is a file. False otherwise.
    """
    return os.path.isfile(file_path)
