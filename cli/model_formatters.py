# cli/model_formatters.py

# anything that renders domain objects or Roster read-only state
from textwrap import dedent

import core.formatters as formatters
from models.roster import Roster
from models.roster_statistics import RosterStatistics
from models.student import Student

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    name = student.name if student.name else "(no name)"

    return f"Roll: {student.roll:<5} Name: {name:<30} Marks: {student.marks:>3} [{student.status}]"


def format_student_multiline(student: Student) -> str:
    return dedent(
        f"""\
        Student record:
        ... Roll: {student.roll}
        ... Name: {student.name if student.name else '(no name)'}
        ... Marks: {student.marks}
        ... Result: {student.status}"""
    )


def format_student_change(before: tuple[int, str, int], student: Student) -> str:
    roll, name, marks = before

    return dedent(
        f"""\
        ... Roll: {roll} -> {student.roll}
        ... Name: {name} -> {student.name}
        ... Marks: {marks} -> {student.marks}"""
    )


# === roster formatters ===


def format_roster_heading(roster: Roster) -> str:
    return f"Student Records (Total: {len(roster)})"


def format_roster_status(roster: Roster) -> str:
    if not roster.modified:
        return ""

    if roster.last_path:
        return f"Unsaved changes (last file: {roster.last_path})"

    return "Unsaved changes"


# === statistics formatters ===


def format_statistics(statistics: RosterStatistics) -> str:
    rule = formatters.format_rule(70)
    pass_rate = formatters.format_percentage(statistics.pass_rate)

    return dedent(
        f"""\
        Statistics Summary
        {rule}
        Total Students:    {statistics.count}
        Average Marks:     {statistics.average:.2f}
        Highest Marks:     {statistics.highest}
        Lowest Marks:      {statistics.lowest}
        Pass Count:        {statistics.pass_count} ({pass_rate})
        Fail Count:        {statistics.fail_count}
        {rule}"""
    )
