# tests/test_roster.py

import pytest

from core.response import ErrorCode
from models.sort_order import SortOrder
from models.student import Student


def rolls(roster):
    return [student.roll for student in roster]


def test_create_new_roster(empty_roster):
    assert empty_roster.size == 0
    assert empty_roster.is_empty
    assert not empty_roster.modified
    assert empty_roster.last_path is None


# === data manipulators ===


def test_mark_dirty(empty_roster):
    assert not empty_roster.modified

    empty_roster._mark_dirty()
    assert empty_roster.modified


# --- add ---


def test_add_student(empty_roster, sample_student):
    response = empty_roster.add(sample_student)

    assert response.success
    assert response.data["record"] is sample_student
    assert sample_student in empty_roster.records
    assert empty_roster.modified


def test_add_appends_in_insertion_order(sample_roster):
    assert rolls(sample_roster) == [1, 2, 3]


def test_add_duplicate_roll_is_rejected(sample_roster):
    response = sample_roster.add(Student(2, "Other", 99))

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_KEY
    assert response.status_code == 409
    assert sample_roster.size == 3
    assert sample_roster.find_by_roll(2).data["record"].name == "B"


def test_add_rejects_non_student(empty_roster):
    response = empty_roster.add("1|90|A")

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT
    assert empty_roster.is_empty
    assert not empty_roster.modified


def test_add_out_of_memory_leaves_roster_unchanged(sample_roster, monkeypatch):
    def raise_memory_error(roll, ignore_index=None):
        raise MemoryError

    monkeypatch.setattr(sample_roster, "require_unique_roll", raise_memory_error)
    sample_roster.mark_synced("students.txt")

    response = sample_roster.add(Student(9, "Z", 10))

    assert response.error is ErrorCode.OUT_OF_MEMORY
    assert response.status_code == 507
    assert sample_roster.size == 3
    assert not sample_roster.modified


# --- find ---


def test_find_by_roll(sample_roster):
    response = sample_roster.find_by_roll(3)

    assert response.success
    assert response.data["record"] == Student(3, "C", 40)
    assert response.data["index"] == 2


def test_find_by_roll_missing(sample_roster):
    response = sample_roster.find_by_roll(42)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404


def test_get_records_with_predicate(sample_roster):
    response = sample_roster.get_records(lambda s: s.is_passing)

    assert response.success
    assert [s.roll for s in response.data["records"]] == [1, 3]


# --- remove ---


def test_remove_preserves_order_of_survivors(sample_roster):
    response = sample_roster.remove_at(1)

    assert response.success
    assert response.data["record"].roll == 2
    assert rolls(sample_roster) == [1, 3]
    assert sample_roster.modified


@pytest.mark.parametrize("index", [-1, 3, 99])
def test_remove_out_of_bounds(sample_roster, index):
    sample_roster.mark_synced("students.txt")

    response = sample_roster.remove_at(index)

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT
    assert sample_roster.size == 3
    assert not sample_roster.modified


# --- modify ---


def test_modify_replaces_all_fields(sample_roster):
    response = sample_roster.modify_at(0, 10, "Z", 55)

    assert response.success
    assert sample_roster.records[0] == Student(10, "Z", 55)
    assert sample_roster.modified


def test_modify_keeping_same_roll(sample_roster):
    response = sample_roster.modify_at(1, 2, "Bea", 45)

    assert response.success
    assert sample_roster.records[1] == Student(2, "Bea", 45)


def test_modify_collision_leaves_record_unchanged(sample_roster):
    sample_roster.mark_synced("students.txt")

    response = sample_roster.modify_at(0, 2, "Z", 10)

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_KEY
    assert sample_roster.records[0] == Student(1, "A", 90)
    assert not sample_roster.modified


def test_modify_out_of_range_index(sample_roster):
    response = sample_roster.modify_at(5, 10, "Z", 10)

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT


def test_modify_invalid_marks_leaves_record_unchanged(sample_roster):
    response = sample_roster.modify_at(0, 11, "Z", 101)

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT
    assert sample_roster.records[0] == Student(1, "A", 90)


# --- sort ---


def test_sort_marks_ascending(sample_roster):
    response = sample_roster.sort(SortOrder.MARKS_ASCENDING)

    assert response.success
    assert rolls(sample_roster) == [2, 3, 1]
    assert sample_roster.modified


def test_sort_marks_descending(sample_roster):
    sample_roster.sort(SortOrder.MARKS_DESCENDING)

    assert rolls(sample_roster) == [1, 3, 2]


def test_sort_by_name(empty_roster):
    for student in (Student(1, "Carol", 50), Student(2, "alice", 50), Student(3, "Bob", 50)):
        empty_roster.add(student)

    empty_roster.sort(SortOrder.NAME_ASCENDING)

    # byte order puts upper case before lower case
    assert [s.name for s in empty_roster] == ["Bob", "Carol", "alice"]


def test_sort_is_idempotent(sample_roster):
    for order in SortOrder:
        sample_roster.sort(order)
        once = rolls(sample_roster)

        sample_roster.sort(order)
        assert rolls(sample_roster) == once


def test_sort_descending_reverses_ascending_for_distinct_marks(sample_roster):
    sample_roster.sort(SortOrder.MARKS_ASCENDING)
    ascending = rolls(sample_roster)

    sample_roster.sort(SortOrder.MARKS_DESCENDING)
    assert rolls(sample_roster) == list(reversed(ascending))


def test_sort_small_roster_is_not_marked_dirty(empty_roster):
    response = empty_roster.sort(SortOrder.MARKS_ASCENDING)
    assert response.success
    assert not empty_roster.modified

    empty_roster.add(Student(1, "A", 50))
    empty_roster.mark_synced("students.txt")

    empty_roster.sort(SortOrder.NAME_ASCENDING)
    assert not empty_roster.modified


def test_sort_rejects_unknown_order(sample_roster):
    response = sample_roster.sort("by_roll")

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT
    assert rolls(sample_roster) == [1, 2, 3]


# --- reset ---


def test_reset(sample_roster):
    sample_roster.mark_synced("students.txt")
    sample_roster.reset()

    assert sample_roster.is_empty
    assert sample_roster.last_path is None
    assert not sample_roster.modified


# === data validators ===


def test_require_unique_roll(sample_roster):
    with pytest.raises(ValueError):
        sample_roster.require_unique_roll(1)

    sample_roster.require_unique_roll(1, ignore_index=0)
    sample_roster.require_unique_roll(4)


def test_rolls_stay_unique_after_mixed_operations(sample_roster):
    sample_roster.add(Student(1, "Dup", 10))
    sample_roster.modify_at(2, 1, "Dup", 10)
    sample_roster.add(Student(4, "D", 70))
    sample_roster.remove_at(0)
    sample_roster.modify_at(0, 1, "B", 30)

    assert len(set(rolls(sample_roster))) == sample_roster.size


# === persistence ===


def test_save_defaults_to_last_path(sample_roster, roster_path):
    sample_roster.save(roster_path)
    sample_roster.add(Student(4, "D", 70))

    response = sample_roster.save()

    assert response.success
    assert response.data["path"] == roster_path
    assert not sample_roster.modified
