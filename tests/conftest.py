# tests/conftest.py

import pytest

from models.roster import Roster
from models.student import Student

SAMPLE_FILE_CONTENTS = (
    "# Student Record System Data File\n"
    "# Format: roll|marks|name\n"
    "# Total records: 3\n"
    "1|90|Alice\n"
    "2|30|Bob\n"
    "3|40|Carol\n"
)


@pytest.fixture
def sample_student():
    return Student(7, "Sean Cameron", 85)


@pytest.fixture
def empty_roster():
    return Roster.create()


@pytest.fixture
def sample_roster():
    roster = Roster.create()

    for student in (Student(1, "A", 90), Student(2, "B", 30), Student(3, "C", 40)):
        roster.add(student)

    return roster


@pytest.fixture
def roster_path(tmp_path):
    return str(tmp_path / "students.txt")


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE_FILE_CONTENTS, encoding="utf-8")

    return str(path)


@pytest.fixture
def write_roster_file(tmp_path):
    def _write(contents: str, name: str = "roster.txt") -> str:
        path = tmp_path / name
        path.write_text(contents, encoding="utf-8")
        return str(path)

    return _write
