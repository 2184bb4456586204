# models/student.py

"""
Represents a single student record in the roster.

Stores the roll number (the unique key within a Roster), the student's name, and their marks.

Includes functionality for:
- Validating roll numbers and marks on construction and on assignment
- Reporting pass/fail status against the pass threshold
- Mutating individual fields via property access

Uniqueness of the roll number is not a property of the record itself; it is enforced by the
Roster that owns the record.
"""

from __future__ import annotations

from core.config import (
    DEFAULT_NAME,
    MAX_MARKS,
    MIN_MARKS,
    MIN_ROLL,
    PASS_THRESHOLD,
)


class Student:

    def __init__(
        self,
        roll: int,
        name: str | None,
        marks: int,
    ):
        self._roll: int = Student.validate_roll(roll)
        self._name: str = DEFAULT_NAME if name is None else name
        self._marks: int = Student.validate_marks(marks)

    # === properties ===

    @property
    def roll(self) -> int:
        return self._roll

    @roll.setter
    def roll(self, roll: int) -> None:
        self._roll = Student.validate_roll(roll)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str | None) -> None:
        self._name = DEFAULT_NAME if name is None else name

    @property
    def marks(self) -> int:
        return self._marks

    @marks.setter
    def marks(self, marks: int) -> None:
        self._marks = Student.validate_marks(marks)

    @property
    def is_passing(self) -> bool:
        return self._marks >= PASS_THRESHOLD

    @property
    def status(self) -> str:
        return "PASS" if self.is_passing else "FAIL"

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented

        return (self._roll, self._name, self._marks) == (
            other._roll,
            other._name,
            other._marks,
        )

    __hash__ = None  # records are mutable

    def __repr__(self) -> str:
        return f"Student({self._roll}, {self._name!r}, {self._marks})"

    def __str__(self) -> str:
        return f"STUDENT: roll: {self._roll}, name: {self._name}, marks: {self._marks}"

    # === data validators ===

    @staticmethod
    def validate_roll(roll: int) -> int:
        """
        Validates a roll number.

        Args:
            roll: The roll number to validate.

        Returns:
            The roll number unchanged if valid.

        Raises:
            TypeError: If the roll number is not an integer.
            ValueError: If the roll number is not positive.
        """
        if isinstance(roll, bool) or not isinstance(roll, int):
            raise TypeError(f"Roll number must be an integer, got {roll!r}.")

        if roll < MIN_ROLL:
            raise ValueError(f"Invalid roll number {roll}. Roll number must be positive.")

        return roll

    @staticmethod
    def validate_marks(marks: int) -> int:
        """
        Validates a marks value.

        Args:
            marks: The marks value to validate.

        Returns:
            The marks value unchanged if valid.

        Raises:
            TypeError: If marks is not an integer.
            ValueError: If marks falls outside 0 to 100 inclusive.
        """
        if isinstance(marks, bool) or not isinstance(marks, int):
            raise TypeError(f"Marks must be an integer, got {marks!r}.")

        if not MIN_MARKS <= marks <= MAX_MARKS:
            raise ValueError(
                f"Invalid marks {marks}. Marks must be between {MIN_MARKS} and {MAX_MARKS}."
            )

        return marks
