# core/text_utils.py

"""
Repository for program-wide text utilities.

Covers trimming, normalizing student names entered at the prompt, and the permissive
integer scan used when reading roster files.
"""

import re

from core.config import DEFAULT_NAME, MAX_NAME_LENGTH

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def trim(text: str | None) -> str:
    return text.strip() if text else ""


def strip_line_ending(line: str) -> str:
    return line.rstrip("\r\n")


def normalize_name(raw_name: str | None) -> tuple[str, bool]:
    """
    Normalizes a student name as entered by the user.

    Args:
        raw_name (str | None): The unprocessed name input.

    Returns:
        A `(name, truncated)` tuple where:
            - name is trimmed, replaced with `DEFAULT_NAME` when blank, and cut to `MAX_NAME_LENGTH` characters.
            - truncated is True if characters were dropped, so the caller can notify the user.
    """
    name = trim(raw_name)

    if not name:
        return DEFAULT_NAME, False

    if len(name) > MAX_NAME_LENGTH:
        return name[:MAX_NAME_LENGTH], True

    return name, False


def parse_leading_int(text: str) -> int | None:
    """
    Parses the integer prefix of a string, ignoring anything that follows it.

    Args:
        text (str): The raw field text, e.g. "12", " 42abc", or "-3".

    Returns:
        The parsed integer, or None if the text does not start with an optional sign and at least one digit.

    Notes:
        - Leading whitespace is skipped; trailing characters after the digits are ignored ("12abc" -> 12).
        - Roster files written by older versions of the program rely on this tolerance.
    """
    match = _LEADING_INT.match(text)

    if match is None:
        return None

    return int(match.group(1))
