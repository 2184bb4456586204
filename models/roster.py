# models/roster.py

"""
The Roster model is the central data object of the program and represents the "source of truth" for all student records.

Records are stored in an ordered list. Order is meaningful: it reflects insertion order or the most recent sort,
and it is the order written to disk upon saving.

Provides functions for adding, finding, modifying, removing, and sorting records, and for saving and loading the
Roster through the roster file codec. Includes session-scoped attributes like last_path (the file last used for a
load or save) and modified (unsaved mutations since the last load or save).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Callable

from core.config import DEFAULT_FILENAME
from core.response import ErrorCode, Response
from models import roster_file
from models.sort_order import SortOrder
from models.student import Student

logger = logging.getLogger(__name__)


class Roster:
    _sort_keys: dict[SortOrder, tuple[Callable[[Student], Any], bool]] = {
        SortOrder.MARKS_ASCENDING: (lambda s: s.marks, False),
        SortOrder.MARKS_DESCENDING: (lambda s: s.marks, True),
        SortOrder.NAME_ASCENDING: (lambda s: s.name, False),
    }

    def __init__(self):
        self._records: list[Student] = []
        self._modified: bool = False
        self._last_path: str | None = None

    # === properties ===

    @property
    def records(self) -> list[Student]:
        return list(self._records)

    @property
    def size(self) -> int:
        return len(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    @property
    def last_path(self) -> str | None:
        return self._last_path

    # --- status markers ---

    @property
    def modified(self) -> bool:
        return self._modified

    # === public classmethods ===

    @classmethod
    def create(cls) -> Roster:
        """
        Returns a new, empty `Roster` with no unsaved changes and no remembered file path.
        """
        return cls()

    # === persistence and import ===

    def save(self, path: str | None = None) -> Response:
        """
        Serializes the roster and writes it to a roster file.

        Args:
            path (str | None):
                - The file path to write to.
                - If omitted, `self.last_path` is used, falling back to `DEFAULT_FILENAME`.

        Returns:
            Response: The `Response` produced by `roster_file.save_roster()`.

        Notes:
            - On success the path is remembered as `last_path` and unsaved changes are cleared.
        """
        target = path or self._last_path or DEFAULT_FILENAME

        return roster_file.save_roster(self, target)

    def load(self, path: str | None = None) -> Response:
        """
        Replaces the roster's contents with the records read from a roster file.

        Args:
            path (str | None):
                - The file path to read from.
                - If omitted, `self.last_path` is used, falling back to `DEFAULT_FILENAME`.

        Returns:
            Response: The `Response` produced by `roster_file.load_roster()`.

        Notes:
            - Current contents are discarded once the file is opened, even if no valid records follow.
            - If the load aborts after that point, the roster keeps whatever was read and stays marked modified.
            - Callers wanting to keep unsaved work must check `modified` first.
        """
        target = path or self._last_path or DEFAULT_FILENAME

        return roster_file.load_roster(self, target)

    # --- persistence hooks ---

    def discard_records(self) -> None:
        """
        Drops every record and marks the roster dirty.

        Notes:
            - For use by the roster file codec immediately before repopulating the roster.
            - The roster stays dirty until `mark_synced()` runs; a load that aborts partway leaves it dirty.
        """
        self._records.clear()
        self._mark_dirty()

    def mark_synced(self, path: str) -> None:
        """
        Records `path` as the last used file and clears the unsaved changes marker.

        Notes:
            - For use by the roster file codec after a completed load or save.
        """
        self._last_path = path
        self._modified = False

    # === data accessors ===

    def get_records(
        self,
        predicate: Callable[[Student], bool] | None = None,
    ) -> Response:
        """
        Fetches records in roster order, optionally filtered by a predicate.

        Args:
            predicate (Callable[[Student], bool]): Optional filter function. If omitted, all records are returned.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the operation succeeded, even if no records were found.
                    - False for unexpected errors.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[Student]): A new list of matching records (may be empty).
                    - On failure:
                        - None

        Notes:
            - This method is read-only and never raises exceptions.
            - The returned list is a copy; the records inside it are the live objects owned by the roster.
        """
        try:
            if predicate:
                records = list(filter(predicate, self._records))
            else:
                records = list(self._records)

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                data={
                    "records": records,
                }
            )

    def find_index_by_roll(self, roll: int) -> int | None:
        for index, student in enumerate(self._records):
            if student.roll == roll:
                return index

        return None

    def find_by_roll(self, roll: int) -> Response:
        """
        Finds a `Student` by roll number with a linear scan.

        Args:
            roll (int): The roll number to look up.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched `Student` object.
                        - "index" (int): The record's position in the roster.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
            - The returned record must not be retained across a subsequent mutating call.
        """
        index = self.find_index_by_roll(roll)

        if index is None:
            return Response.fail(
                detail=f"Student with roll {roll} not found.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": self._records[index],
                "index": index,
            },
        )

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        """
        Marks the roster as having unsaved changes.
        """
        self._modified = True

    def add(self, student: Student) -> Response:
        """
        Appends a `Student` to the end of the roster.

        Args:
            student (Student): The `Student` object to be added to the roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` object was successfully added.
                    - False if another student with the same roll already exists or if storage cannot grow.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the argument is not a `Student`.
                    - `ErrorCode.DUPLICATE_KEY` if the roll number is not unique.
                    - `ErrorCode.OUT_OF_MEMORY` if the backing list cannot grow.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 409 if the roll number is taken
                    - 507 if storage cannot grow
                    - 400 on other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student` object.
                    - On failure:
                        - None

        Notes:
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
            - On failure the roster is left exactly as it was.
        """
        if not isinstance(student, Student):
            return Response.fail(
                detail=f"Expected a Student record, got {type(student).__name__}.",
                error=ErrorCode.INVALID_INPUT,
            )

        try:
            self.require_unique_roll(student.roll)

            self._records.append(student)

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.DUPLICATE_KEY,
                status_code=409,
            )

        except MemoryError:
            return Response.fail(
                detail="Out of memory: could not grow the roster.",
                error=ErrorCode.OUT_OF_MEMORY,
                status_code=507,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._mark_dirty()
            logger.debug(f"Added {student!r} at position {len(self._records) - 1}.")

            return Response.succeed(
                detail="Student added successfully.",
                data={
                    "record": student,
                },
            )

    def remove_at(self, index: int) -> Response:
        """
        Removes the `Student` at the given position, shifting later records left by one.

        Args:
            index (int): The zero-based position of the record to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was removed.
                    - False if the index is out of bounds.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the index is out of bounds.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The removed `Student` object.
                    - On failure:
                        - None

        Notes:
            - This method mutates `Roster` state and calls `_mark_dirty()` if successful.
            - Surviving records keep their relative order.
            - Negative indices are treated as out of bounds.
        """
        if not self._index_in_bounds(index):
            return Response.fail(
                detail=f"Invalid position {index} for a roster of {len(self._records)} records.",
                error=ErrorCode.INVALID_INPUT,
            )

        removed = self._records.pop(index)
        self._mark_dirty()
        logger.debug(f"Removed {removed!r} from position {index}.")

        return Response.succeed(
            detail="Student removed successfully.",
            data={
                "record": removed,
            },
        )

    def modify_at(
        self,
        index: int,
        new_roll: int,
        new_name: str | None,
        new_marks: int,
    ) -> Response:
        """
        Replaces the roll number, name, and marks of the `Student` at the given position.

        Args:
            index (int): The zero-based position of the record to modify.
            new_roll (int): The replacement roll number.
            new_name (str | None): The replacement name, already normalized by the caller.
            new_marks (int): The replacement marks.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if all three fields were replaced.
                    - False if the index is out of bounds, a value is invalid, or the roll collides.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the index is out of bounds or a new value fails validation.
                    - `ErrorCode.DUPLICATE_KEY` if `new_roll` belongs to a different record.
                - status_code (int | None):
                    - 200 on success
                    - 409 if the roll number is taken
                    - 400 on other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The modified `Student` object.
                    - On failure:
                        - None

        Notes:
            - All fields are validated before any are written; on failure the record is unchanged.
            - Keeping the same roll number is never a collision.
            - Name trimming, defaulting, and truncation are the caller's responsibility.
        """
        if not self._index_in_bounds(index):
            return Response.fail(
                detail=f"Invalid position {index} for a roster of {len(self._records)} records.",
                error=ErrorCode.INVALID_INPUT,
            )

        try:
            Student.validate_roll(new_roll)
            Student.validate_marks(new_marks)

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        student = self._records[index]

        if new_roll != student.roll:
            try:
                self.require_unique_roll(new_roll, ignore_index=index)

            except ValueError as e:
                return Response.fail(
                    detail=f"Unique record validation failed: {e}",
                    error=ErrorCode.DUPLICATE_KEY,
                    status_code=409,
                )

        student.roll = new_roll
        student.name = new_name
        student.marks = new_marks

        self._mark_dirty()
        logger.debug(f"Modified position {index}: {student!r}.")

        return Response.succeed(
            detail="Student modified successfully.",
            data={
                "record": student,
            },
        )

    def sort(self, order: SortOrder) -> Response:
        """
        Reorders the roster in place.

        Args:
            order (SortOrder): One of `MARKS_ASCENDING`, `MARKS_DESCENDING`, or `NAME_ASCENDING`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the roster was sorted (or had fewer than two records).
                    - False if the order is not a `SortOrder`.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a confirmation naming the order used.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the order is unrecognized.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - A roster of zero or one records is left untouched and not marked dirty.
            - Otherwise the roster is marked dirty even if the order did not change, since the file order may differ.
            - Names compare by code point, which matches byte-wise comparison of their UTF-8 encoding.
        """
        if not isinstance(order, SortOrder):
            return Response.fail(
                detail=f"Unrecognized sort order: {order!r}.",
                error=ErrorCode.INVALID_INPUT,
            )

        if len(self._records) < 2:
            return Response.succeed(detail="Nothing to sort.")

        key, reverse = self._sort_keys[order]
        self._records.sort(key=key, reverse=reverse)

        self._mark_dirty()

        return Response.succeed(detail=f"Sorted by {order.value.lower()}.")

    def reset(self) -> None:
        """
        Empties the roster and forgets the last used file path.

        Notes:
            - Unsaved changes are discarded without warning.
        """
        self._records.clear()
        self._modified = False
        self._last_path = None

    # === data validators ===

    def require_unique_roll(self, roll: int, ignore_index: int | None = None) -> None:
        """
        Validates that no record already uses the given roll number.

        Args:
            roll (int): The roll number to validate for uniqueness.
            ignore_index (int | None): A position to exclude from the check, e.g. the record being modified.

        Raises:
            ValueError: If a different record already uses the roll number.
        """
        existing = self.find_index_by_roll(roll)

        if existing is not None and existing != ignore_index:
            raise ValueError(f"Student with roll {roll} already exists.")

    # === helper methods ===

    def _index_in_bounds(self, index: int) -> bool:
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._records)
        )

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._records))

    def __repr__(self) -> str:
        return f"Roster(size={len(self._records)}, modified={self._modified}, last_path={self._last_path!r})"
