# models/roster_file.py

"""
Reads and writes Roster data in the pipe-delimited roster file format.

File layout (UTF-8, one record per line):

    # Student Record System Data File
    # Format: roll|marks|name
    # Total records: <n>
    <roll>|<marks>|<name>
    ...

Lines starting with the comment marker and blank lines are ignored on read. A data line is split on the first
two delimiters, so everything after the second one is the name. There is no escaping: a name containing the
delimiter or a newline will not survive a save and reload.

Reading is tolerant. A malformed line, a line failing validation, or a line repeating a roll number already
read is skipped with a warning instead of aborting the whole load. Writing is not atomic: the target is
truncated and rewritten in place.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, TextIO

from core.config import (
    COMMENT_MARKER,
    FIELD_DELIMITER,
    FILE_HEADER_FORMAT,
    FILE_HEADER_TITLE,
    MAX_MARKS,
    MIN_MARKS,
    MIN_ROLL,
)
from core.response import ErrorCode, Response
from core.text_utils import parse_leading_int, strip_line_ending, trim
from models.student import Student

if TYPE_CHECKING:
    from models.roster import Roster

logger = logging.getLogger(__name__)


class RosterLineError(ValueError):
    """
    Raised when a single data line cannot be turned into a `Student`.

    The load keeps going after this error; the message becomes a warning.
    """


# === line codec ===


def format_header(count: int) -> list[str]:
    return [
        f"{COMMENT_MARKER} {FILE_HEADER_TITLE}",
        f"{COMMENT_MARKER} {FILE_HEADER_FORMAT}",
        f"{COMMENT_MARKER} Total records: {count}",
    ]


def format_record_line(student: Student) -> str:
    name = student.name if student.name is not None else ""

    return FIELD_DELIMITER.join([str(student.roll), str(student.marks), name])


def is_skippable_line(line: str) -> bool:
    return not line.strip() or line.startswith(COMMENT_MARKER)


def parse_record_line(line: str) -> Student:
    """
    Parses one data line of a roster file.

    Args:
        line (str): A single line with its line ending already removed.

    Returns:
        A new `Student` built from the line's roll, marks, and trimmed name fields.

    Raises:
        RosterLineError:
            - If the line has fewer than two delimiters.
            - If the roll or marks field does not start with an integer.
            - If the roll is not positive or the marks fall outside 0 to 100.

    Notes:
        - Trailing characters after a field's leading integer are ignored ("12abc" reads as 12).
        - Callers are expected to filter out comment and blank lines with `is_skippable_line()` first.
    """
    fields = line.split(FIELD_DELIMITER, 2)

    if len(fields) < 3:
        raise RosterLineError("Invalid format")

    roll_field, marks_field, name_field = fields

    roll = parse_leading_int(roll_field)
    marks = parse_leading_int(marks_field)

    if roll is None or marks is None:
        raise RosterLineError("Invalid format")

    if roll < MIN_ROLL or not MIN_MARKS <= marks <= MAX_MARKS:
        raise RosterLineError("Invalid data")

    return Student(roll, trim(name_field), marks)


def _iter_data_lines(stream: Iterable[str]) -> Iterator[tuple[int, str]]:
    for line_num, raw_line in enumerate(stream, 1):
        line = strip_line_ending(raw_line)

        if is_skippable_line(line):
            continue

        yield line_num, line


def _open_for_reading(path: str) -> TextIO:
    return open(path, "r", encoding="utf-8", errors="replace")


def _open_failure(path: str, mode: str, error: OSError) -> Response:
    reason = error.strerror or str(error)
    logger.error(f"Cannot open '{path}' for {mode}: {reason}")

    return Response.fail(
        detail=f"Cannot open '{path}' for {mode}: {reason}",
        error=ErrorCode.IO_ERROR,
        status_code=500,
    )


def _warn(warnings: list[str], message: str) -> None:
    logger.warning(message)
    warnings.append(message)


# === roster persistence ===


def save_roster(roster: Roster, path: str | os.PathLike) -> Response:
    """
    Writes every record in the roster to a roster file, in roster order.

    Args:
        roster (Roster): The roster being saved.
        path (str | os.PathLike): The destination file, created or truncated.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the file was written.
                - False if the file could not be opened or written.
            - detail (str | None):
                - On success, a confirmation naming the record count and path.
                - On failure, the path and the underlying OS reason.
            - error (ErrorCode | str | None):
                - `ErrorCode.IO_ERROR` if the file could not be opened or written.
            - status_code (int | None):
                - 200 on success
                - 500 on failure
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "count" (int): The number of records written.
                    - "path" (str): The path written to.
                - On failure:
                    - None

    Notes:
        - On success `roster.last_path` is set to `path` and unsaved changes are cleared.
        - On failure the roster state is untouched; a partially written file may remain on disk.
    """
    path = os.fspath(path)
    records = roster.records

    try:
        f = open(path, "w", encoding="utf-8", newline="\n")

    except OSError as e:
        return _open_failure(path, "writing", e)

    try:
        with f:
            for header_line in format_header(len(records)):
                f.write(f"{header_line}\n")

            for student in records:
                f.write(f"{format_record_line(student)}\n")

    except OSError as e:
        logger.error(f"Failed while writing '{path}': {e}")

        return Response.fail(
            detail=f"Failed to write data to '{path}': {e}",
            error=ErrorCode.IO_ERROR,
            status_code=500,
        )

    roster.mark_synced(path)
    logger.info(f"Saved {len(records)} records to '{path}'.")

    return Response.succeed(
        detail=f"Saved {len(records)} records to '{path}'.",
        data={
            "count": len(records),
            "path": path,
        },
    )


def load_roster(roster: Roster, path: str | os.PathLike) -> Response:
    """
    Replaces the roster's contents with the valid records of a roster file.

    Args:
        roster (Roster): The roster being repopulated.
        path (str | os.PathLike): The file to read.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True once every line has been read, even if no records were loaded.
                - False if the file could not be opened or memory ran out mid-read.
            - detail (str | None):
                - On success, a confirmation naming the number of records loaded.
                - On failure, a human-readable description of the error.
            - error (ErrorCode | str | None):
                - `ErrorCode.IO_ERROR` if the file could not be opened or read.
                - `ErrorCode.OUT_OF_MEMORY` if a record could not be stored.
            - status_code (int | None):
                - 200 on success
                - 500 on I/O failure
                - 507 on memory failure
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "count" (int): The number of records loaded.
                    - "warnings" (list[str]): One message per skipped line, naming its line number.
                    - "path" (str): The path read from.
                - On failure:
                    - None

    Notes:
        - If the file cannot be opened, the roster keeps its current contents.
        - Once the file is open, the roster's contents are discarded before any line is read.
        - If the load aborts after that, the partial roster stays marked modified and `last_path` is unchanged.
        - The first occurrence of a roll number wins; later duplicates are skipped with a warning.
        - On success `roster.last_path` is set to `path` and unsaved changes are cleared.
    """
    path = os.fspath(path)

    try:
        f = _open_for_reading(path)

    except OSError as e:
        return _open_failure(path, "reading", e)

    warnings: list[str] = []
    loaded = 0

    with f:
        roster.discard_records()

        try:
            for line_num, line in _iter_data_lines(f):
                try:
                    student = parse_record_line(line)

                except RosterLineError as e:
                    _warn(warnings, f"{e} at line {line_num} (skipped)")
                    continue

                add_response = roster.add(student)

                if add_response.success:
                    loaded += 1

                elif add_response.error is ErrorCode.DUPLICATE_KEY:
                    _warn(
                        warnings,
                        f"Duplicate roll {student.roll} at line {line_num} (skipped)",
                    )

                else:
                    return Response.fail(
                        detail=f"Load aborted at line {line_num}: {add_response.detail}",
                        error=add_response.error,
                        status_code=add_response.status_code,
                    )

        except MemoryError:
            return Response.fail(
                detail=f"Out of memory while reading '{path}'.",
                error=ErrorCode.OUT_OF_MEMORY,
                status_code=507,
            )

        except OSError as e:
            logger.error(f"Failed while reading '{path}': {e}")

            return Response.fail(
                detail=f"Failed to read data from '{path}': {e}",
                error=ErrorCode.IO_ERROR,
                status_code=500,
            )

    roster.mark_synced(path)
    logger.info(f"Loaded {loaded} records from '{path}'.")

    return Response.succeed(
        detail=f"Loaded {loaded} records from '{path}'.",
        data={
            "count": loaded,
            "warnings": warnings,
            "path": path,
        },
    )


# === direct file views ===


def read_records(path: str | os.PathLike) -> Response:
    """
    Parses a roster file without loading it into a roster.

    Args:
        path (str | os.PathLike): The file to read.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True once every line has been read.
                - False if the file could not be opened or read.
            - detail (str | None):
                - On failure, a human-readable description of the error.
                - On success, None.
            - error (ErrorCode | str | None):
                - `ErrorCode.IO_ERROR` if the file could not be opened or read.
            - status_code (int | None):
                - 200 on success
                - 500 on failure
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "records" (list[Student]): The valid records, in file order.
                    - "warnings" (list[str]): One message per skipped line.
                - On failure:
                    - None

    Notes:
        - This method is read-only; it applies the same line rules as `load_roster()`, including first-wins duplicates.
        - Backs the views that display, search, or summarize a file directly.
    """
    path = os.fspath(path)

    try:
        f = _open_for_reading(path)

    except OSError as e:
        return _open_failure(path, "reading", e)

    records: list[Student] = []
    seen_rolls: set[int] = set()
    warnings: list[str] = []

    try:
        with f:
            for line_num, line in _iter_data_lines(f):
                try:
                    student = parse_record_line(line)

                except RosterLineError as e:
                    _warn(warnings, f"{e} at line {line_num} (skipped)")
                    continue

                if student.roll in seen_rolls:
                    _warn(
                        warnings,
                        f"Duplicate roll {student.roll} at line {line_num} (skipped)",
                    )
                    continue

                seen_rolls.add(student.roll)
                records.append(student)

    except OSError as e:
        logger.error(f"Failed while reading '{path}': {e}")

        return Response.fail(
            detail=f"Failed to read data from '{path}': {e}",
            error=ErrorCode.IO_ERROR,
            status_code=500,
        )

    return Response.succeed(
        data={
            "records": records,
            "warnings": warnings,
        },
    )
