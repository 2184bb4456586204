# models/roster_statistics.py

"""
Summary statistics over a snapshot of student records.

`compute_statistics()` accepts a Roster or any iterable of `Student` objects (for example the records read
directly from a file) and derives every metric in a single pass. Nothing is cached or persisted.
"""

from __future__ import annotations

from collections.abc import Iterable

from core.config import PASS_THRESHOLD
from core.response import ErrorCode, Response
from models.student import Student


class RosterStatistics:
    """
    Read-only summary of a set of marks.

    Attributes:
        count (int): Number of records summarized.
        total (int): Sum of all marks.
        highest (int): Highest marks.
        lowest (int): Lowest marks.
        pass_count (int): Records with marks at or above the pass threshold.
    """

    def __init__(
        self,
        count: int,
        total: int,
        highest: int,
        lowest: int,
        pass_count: int,
    ):
        self._count = count
        self._total = total
        self._highest = highest
        self._lowest = lowest
        self._pass_count = pass_count

    # === properties ===

    @property
    def count(self) -> int:
        return self._count

    @property
    def total(self) -> int:
        return self._total

    @property
    def average(self) -> float:
        return self._total / self._count

    @property
    def highest(self) -> int:
        return self._highest

    @property
    def lowest(self) -> int:
        return self._lowest

    @property
    def pass_count(self) -> int:
        return self._pass_count

    @property
    def fail_count(self) -> int:
        return self._count - self._pass_count

    @property
    def pass_rate(self) -> float:
        return self._pass_count / self._count * 100

    # === dunder methods ===

    def __repr__(self) -> str:
        return (
            f"RosterStatistics(count={self._count}, average={self.average:.2f}, "
            f"highest={self._highest}, lowest={self._lowest}, pass_count={self._pass_count})"
        )


def compute_statistics(records: Iterable[Student]) -> Response:
    """
    Computes count, average, highest, lowest, and pass/fail figures for a set of records.

    Args:
        records (Iterable[Student]): A Roster or any iterable of `Student` objects.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if at least one record was summarized.
                - False if there are no records.
            - detail (str | None):
                - On failure, "No data available for statistics."
                - On success, None.
            - error (ErrorCode | str | None):
                - `ErrorCode.NOT_FOUND` if there are no records.
            - status_code (int | None):
                - 200 on success
                - 404 if there are no records
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "statistics" (RosterStatistics): The computed summary.
                - On failure:
                    - None

    Notes:
        - This function is read-only and does not raise.
        - A record passes when its marks are at or above `PASS_THRESHOLD`.
    """
    count = 0
    total = 0
    pass_count = 0
    highest: int | None = None
    lowest: int | None = None

    for student in records:
        marks = student.marks

        count += 1
        total += marks

        if marks >= PASS_THRESHOLD:
            pass_count += 1

        if highest is None or marks > highest:
            highest = marks

        if lowest is None or marks < lowest:
            lowest = marks

    if count == 0 or highest is None or lowest is None:
        return Response.fail(
            detail="No data available for statistics.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    return Response.succeed(
        data={
            "statistics": RosterStatistics(
                count=count,
                total=total,
                highest=highest,
                lowest=lowest,
                pass_count=pass_count,
            ),
        },
    )
